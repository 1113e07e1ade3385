"""Bundled data files for dirls."""

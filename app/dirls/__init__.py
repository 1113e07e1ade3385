"""dirls - a minimal reimplementation of the POSIX ls command."""

__version__ = "0.1.0"

"""CLI package for dirls.

This package contains the Typer application.
"""

from dirls.cli.main import app

__all__ = ["app"]

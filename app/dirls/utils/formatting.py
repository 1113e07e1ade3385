"""Rich console formatting utilities.

Provides the shared console used for diagnostics and log output.
Listing text itself is written verbatim and does not go through Rich.
"""

import sys

from rich.console import Console
from rich.markup import escape
from rich.theme import Theme

from dirls.core.theme import get_theme


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stderr.isatty():
        return "truecolor"
    return None


# Shared diagnostics console (bundled theme until user colors are applied)
err_console = Console(theme=get_theme(), stderr=True, color_system=_detect_color_system())


def use_theme(theme: Theme) -> None:
    """Apply a theme to the diagnostics console."""
    err_console.push_theme(theme)


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(
        f"[warning]Warning:[/] {escape(message)}",
        highlight=False,
        soft_wrap=True,
    )


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(
        f"[error]Error:[/] {escape(message)}",
        highlight=False,
        soft_wrap=True,
    )

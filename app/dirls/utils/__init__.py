"""Utility modules for dirls.

This module exports commonly used utility functions.
"""

from dirls.utils.formatting import err_console, print_error, print_warning, use_theme

__all__ = [
    "err_console",
    "print_error",
    "print_warning",
    "use_theme",
]

"""Utility modules for tabls.

This module exports commonly used utility functions.
"""

from tabls.utils.formatting import (
    console,
    err_console,
    print_error,
    print_warning,
    setup_logging,
)

__all__ = [
    "console",
    "err_console",
    "print_error",
    "print_warning",
    "setup_logging",
]

"""Utility modules for logsweep.

This module exports the shared console helpers.
"""

from logsweep.utils.formatting import (
    console,
    err_console,
    print_error,
    print_info,
    print_warning,
)

__all__ = [
    "console",
    "err_console",
    "print_error",
    "print_info",
    "print_warning",
]

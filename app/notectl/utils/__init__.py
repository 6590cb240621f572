"""Utility modules for notectl.

This module exports commonly used utility functions.
"""

from notectl.utils.formatting import (
    configure_logging,
    console,
    create_file_table,
    err_console,
    format_file_row,
    print_error,
    print_info,
    print_success,
    print_warning,
)
from notectl.utils.shell import (
    CommandResult,
    output_lines,
    resolve_executable,
    run_command,
    strip_ansi,
)

__all__ = [
    "CommandResult",
    "configure_logging",
    "console",
    "create_file_table",
    "err_console",
    "format_file_row",
    "output_lines",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
    "resolve_executable",
    "run_command",
    "strip_ansi",
]

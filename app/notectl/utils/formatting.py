"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

import logging
import sys

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from notectl.core.theme import load_theme
from notectl.corpus.extensions import is_encrypted_name


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances (theme loaded once at import)
_theme = load_theme()
console = Console(theme=_theme, color_system=_detect_color_system())
err_console = Console(theme=_theme, stderr=True, color_system=_detect_color_system())


def configure_logging(verbose: bool = False) -> None:
    """Route log records to stderr through Rich.

    Args:
        verbose: Log at DEBUG level instead of WARNING.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def create_file_table(title: str = "Managed Files") -> Table:
    """Create a pre-configured table for displaying corpus files.

    Args:
        title: Table title.

    Returns:
        Rich Table configured for file display.
    """
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
        row_styles=["", "on grey7"],  # Zebra striping for readability
    )
    # Status column: minimal width, icon only, no header text
    table.add_column("", width=2, justify="center")
    table.add_column("File", overflow="fold")
    return table


def format_file_row(path: str, root: str) -> tuple[str, str]:
    """Format a managed file as a table row.

    Encrypted files get a lock-style icon and their own color. Paths under
    the root are shown relative to it.

    Args:
        path: Absolute file path.
        root: Corpus root, shown as the common prefix.

    Returns:
        Tuple of (icon, path) with Rich markup.
    """
    prefix = root.rstrip("/") + "/"
    display = escape(path[len(prefix) :] if path.startswith(prefix) else path)

    if is_encrypted_name(path):
        return ("[file_encrypted]◆[/]", f"[file_encrypted]{display}[/]")
    return ("[file_plain]●[/]", f"[file_plain]{display}[/]")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{message}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {escape(message)}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {escape(message)}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{message}[/]")

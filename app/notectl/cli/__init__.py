"""CLI package for notectl.

This package contains the Typer application and all subcommands.
"""

from notectl.cli.main import app

__all__ = ["app"]

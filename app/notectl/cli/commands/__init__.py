"""CLI commands for notectl.

This package contains all subcommand implementations.
"""

from notectl.cli.commands import backends, check, config, files

__all__ = ["backends", "check", "config", "files"]

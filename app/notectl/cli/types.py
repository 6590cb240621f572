"""Shared types and utilities for CLI commands.

This module provides the corpus options common to several commands and
the helper that turns them into a CorpusConfig.
"""

from enum import Enum
from pathlib import Path
from typing import Annotated

import typer

from notectl.core.config import (
    CorpusConfigError,
    CorpusConfigNotFoundError,
    load_corpus_config,
    parse_corpus_config,
)
from notectl.core.paths import get_config_path
from notectl.models.config import CorpusConfig


class OutputFormat(str, Enum):
    """Output format options."""

    TABLE = "table"
    JSON = "json"
    PLAIN = "plain"


ConfigOption = Annotated[
    Path | None,
    typer.Option(
        "--config",
        "-C",
        help="Config file (default: ~/.config/notectl/config.toml).",
    ),
]
RootOption = Annotated[
    Path | None,
    typer.Option("--root", "-r", help="Corpus root directory."),
]
ExtensionOption = Annotated[
    list[str] | None,
    typer.Option("--ext", "-e", help="Accepted extension (repeatable)."),
]
ExcludeOption = Annotated[
    list[str] | None,
    typer.Option("--exclude", "-x", help="Exclusion regex (repeatable)."),
]
BackendOption = Annotated[
    list[str] | None,
    typer.Option(
        "--backend",
        "-b",
        help="Backend preference, TOOL or TOOL=EXECUTABLE (repeatable).",
    ),
]


def parse_backend_option(value: str) -> str | list[str]:
    """Parse a ``--backend`` value into a preference entry.

    Args:
        value: ``tool`` or ``tool=/path/to/executable``.

    Returns:
        Bare tool name, or a ``[tool, executable]`` pair.
    """
    tool, sep, executable = value.partition("=")
    if sep and executable:
        return [tool, executable]
    return tool


def resolve_config(
    config_path: Path | None = None,
    root: Path | None = None,
    extensions: list[str] | None = None,
    exclude: list[str] | None = None,
    backends: list[str] | None = None,
) -> CorpusConfig:
    """Build the corpus configuration for one command invocation.

    Values from the config file are overridden by command-line options.
    Without a config file, ``--root`` is required.

    Args:
        config_path: Explicit config file path.
        root: Corpus root override.
        extensions: Extensions override.
        exclude: Exclusion patterns override.
        backends: Backend preferences override.

    Returns:
        Validated CorpusConfig.

    Raises:
        CorpusConfigError: If the configuration is missing or invalid.
    """
    data: dict[str, object] = {}

    path = config_path or get_config_path()
    if config_path is not None or path.exists():
        data = load_corpus_config(path).model_dump()
    elif root is None:
        msg = f"Config not found: {path} (pass --root or run 'notectl config init')"
        raise CorpusConfigNotFoundError(msg)

    if root is not None:
        data["root"] = root
    if extensions:
        data["extensions"] = extensions
    if exclude:
        data["exclude"] = exclude
    if backends:
        data["backends"] = [parse_backend_option(value) for value in backends]

    return parse_corpus_config(data)


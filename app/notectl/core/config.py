"""Corpus configuration I/O.

Loads and saves the corpus configuration stored in
``~/.config/notectl/config.toml``.

Example file::

    root = "~/notes"
    extensions = ["org", "md"]
    exclude = ["\\\\.attach/", "^archive/"]
    backends = ["rg", ["fd", "/opt/fd/bin/fd"], "find"]
"""

import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile

import tomli_w
from pydantic import ValidationError

from notectl.core.paths import get_config_path
from notectl.models.config import CorpusConfig, default_backends

logger = logging.getLogger(__name__)


class CorpusConfigError(Exception):
    """Base exception for corpus configuration errors."""


class CorpusConfigNotFoundError(CorpusConfigError):
    """Raised when the corpus config file is not found."""


class CorpusConfigParseError(CorpusConfigError):
    """Raised when the corpus config file cannot be parsed."""


def load_corpus_config(path: Path | None = None) -> CorpusConfig:
    """Load the corpus configuration from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated CorpusConfig object.

    Raises:
        CorpusConfigNotFoundError: If the config file doesn't exist.
        CorpusConfigParseError: If the TOML syntax is invalid.
        CorpusConfigError: If the content doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        raise CorpusConfigNotFoundError(f"Config not found: {config_path}")

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise CorpusConfigParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise CorpusConfigError(f"Failed to read config: {e}") from e

    logger.debug("Loaded corpus config from %s", config_path)
    return parse_corpus_config(data)


def parse_corpus_config(data: dict[str, object]) -> CorpusConfig:
    """Validate a configuration mapping.

    Args:
        data: Raw configuration values, e.g. from TOML or CLI options.

    Returns:
        Validated CorpusConfig object.

    Raises:
        CorpusConfigError: If the content doesn't match the schema.
    """
    try:
        return CorpusConfig.model_validate(data)
    except (ValueError, ValidationError) as e:
        raise CorpusConfigError(f"Invalid config content: {e}") from e


def save_corpus_config(config: CorpusConfig, path: Path | None = None) -> Path:
    """Save the corpus configuration to a TOML file.

    The file is written atomically by first writing to a temporary file
    and then using os.replace() for atomic rename.

    Args:
        config: The CorpusConfig object to save.
        path: Path to save the config. If None, uses the default config path.

    Returns:
        Path where the config was saved.

    Raises:
        CorpusConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()

    # Convert config to dictionary for TOML serialization
    data = _config_to_dict(config)

    tmp_path: Path | None = None
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise CorpusConfigError(f"Failed to write config: {e}") from e

    return config_path


def _config_to_dict(config: CorpusConfig) -> dict[str, object]:
    """Convert CorpusConfig to a dictionary for TOML serialization.

    Only includes non-default values to keep the file clean. Backend
    preferences without an override are written as bare tool names.

    Args:
        config: The CorpusConfig to convert.

    Returns:
        Dictionary ready for TOML serialization.
    """
    result: dict[str, object] = {"root": str(config.root)}

    if config.extensions != ("org",):
        result["extensions"] = list(config.extensions)

    if config.exclude:
        result["exclude"] = list(config.exclude)

    if config.backends != default_backends():
        result["backends"] = [
            [pref.tool, pref.executable] if pref.executable else pref.tool
            for pref in config.backends
        ]

    if config.command_timeout is not None:
        result["command_timeout"] = config.command_timeout

    return result

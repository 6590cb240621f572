"""Console styles for notectl.

Styles are Rich style definitions (``"bold #03b971"``) read from the
``[styles]`` table of the bundled ``data/theme.toml``. A ``[styles]``
table in ``~/.config/notectl/theme.toml`` replaces individual entries.

Example user file::

    [styles]
    managed = "bold green"
    file_encrypted = "italic magenta"
"""

import logging
import tomllib
from importlib import resources
from pathlib import Path

from rich.errors import StyleSyntaxError
from rich.style import Style
from rich.theme import Theme

from notectl.core.paths import get_user_theme_path

logger = logging.getLogger(__name__)


def parse_styles(data: dict[str, object], origin: str) -> dict[str, str]:
    """Extract the valid style definitions from a parsed theme file.

    Entries that are not strings or that Rich cannot parse are logged and
    skipped; the remaining entries are still used.

    Args:
        data: Parsed TOML document.
        origin: Where the document came from, for log messages.

    Returns:
        Mapping of style name to style definition.
    """
    table = data.get("styles", {})
    if not isinstance(table, dict):
        logger.warning("Ignoring %s: 'styles' must be a table", origin)
        return {}

    styles: dict[str, str] = {}
    for name, definition in table.items():
        if not isinstance(definition, str):
            logger.warning("Ignoring style %r in %s: not a string", name, origin)
            continue
        try:
            Style.parse(definition)
        except StyleSyntaxError as e:
            logger.warning("Ignoring style %r in %s: %s", name, origin, e)
            continue
        styles[name] = definition
    return styles


def _bundled_styles() -> dict[str, str]:
    source = resources.files("notectl.data").joinpath("theme.toml")
    with source.open("rb") as f:
        return parse_styles(tomllib.load(f), "bundled theme")


def _user_styles(path: Path) -> dict[str, str]:
    if not path.exists():
        return {}
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except (tomllib.TOMLDecodeError, OSError) as e:
        logger.warning("Ignoring theme file %s: %s", path, e)
        return {}
    logger.debug("Loaded style overrides from %s", path)
    return parse_styles(data, str(path))


def load_theme(user_path: Path | None = None) -> Theme:
    """Build the Rich theme used by the notectl consoles.

    Args:
        user_path: Theme override file. If None, uses the default
            ``theme.toml`` in the config directory.

    Returns:
        Rich Theme with the bundled styles and any user overrides.
    """
    styles = _bundled_styles()
    styles.update(_user_styles(user_path or get_user_theme_path()))
    return Theme(styles)

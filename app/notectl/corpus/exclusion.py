"""Exclusion rules for corpus paths.

Exclusion patterns are regular expressions searched anywhere in a path
relative to the corpus root. A path is excluded if any pattern matches.
"""

import re
from collections.abc import Iterable
from functools import lru_cache
from pathlib import PurePath


@lru_cache(maxsize=256)
def _compile(pattern: str) -> re.Pattern[str]:
    return re.compile(pattern)


def normalize_patterns(patterns: str | Iterable[str] | None) -> tuple[str, ...]:
    """Collapse the accepted pattern shapes into one tuple.

    Args:
        patterns: None, a single regex, or an iterable of regexes.

    Returns:
        Tuple of regex strings (empty if nothing is excluded).
    """
    if patterns is None:
        return ()
    if isinstance(patterns, str):
        return (patterns,)
    return tuple(patterns)


def is_excluded(
    relative_path: str | PurePath,
    patterns: str | Iterable[str] | None,
) -> bool:
    """Check whether a root-relative path matches any exclusion pattern.

    Paths are matched in POSIX form so that patterns such as ``\\.attach/``
    behave the same on every platform.

    Args:
        relative_path: Path relative to the corpus root.
        patterns: None, a single regex, or an iterable of regexes.

    Returns:
        True if at least one pattern is found in the path.
    """
    if not isinstance(relative_path, PurePath):
        relative_path = PurePath(relative_path)
    text = relative_path.as_posix()
    return any(_compile(pattern).search(text) for pattern in normalize_patterns(patterns))

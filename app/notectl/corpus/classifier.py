"""Corpus membership classification.

Decides whether a path belongs to the managed corpus by combining three
rules: the path lies under the root, its extension is accepted, and it is
not excluded. The checks manipulate path strings only (plus symlink
resolution); existence and readability are the caller's concern.
"""

from enum import Enum
from pathlib import Path

from notectl.corpus.exclusion import is_excluded
from notectl.corpus.extensions import extension_of
from notectl.models.config import CorpusConfig


class Membership(str, Enum):
    """Result of classifying a path against a corpus.

    Attributes:
        MANAGED: Path belongs to the corpus.
        OUTSIDE_ROOT: Path is not a descendant of the corpus root.
        EXTENSION: Path's extension is not an accepted extension.
        EXCLUDED: Path matches an exclusion pattern.
    """

    MANAGED = "managed"
    OUTSIDE_ROOT = "outside-root"
    EXTENSION = "extension"
    EXCLUDED = "excluded"


def canonical_path(path: str | Path) -> Path:
    """Return the absolute path with symlinks and ``..`` components resolved."""
    return Path(path).expanduser().resolve()


def relative_to_root(path: str | Path, root: str | Path) -> Path | None:
    """Return ``path`` relative to ``root``, or None if it is not a descendant.

    Both sides are canonicalized first. The root itself is not its own
    descendant.
    """
    resolved = canonical_path(path)
    resolved_root = canonical_path(root)
    if resolved == resolved_root or not resolved.is_relative_to(resolved_root):
        return None
    return resolved.relative_to(resolved_root)


def explain(path: str | Path, config: CorpusConfig) -> Membership:
    """Classify a path and report the first rule it fails.

    Rules are checked in order: location, extension, exclusion. All three
    look at the symlink-resolved path, so a link is judged by its target.

    Args:
        path: Candidate path (absolute, or relative to the working directory).
        config: Corpus configuration.

    Returns:
        Membership.MANAGED, or the reason the path is rejected.
    """
    resolved = canonical_path(path)
    relative = relative_to_root(resolved, config.root)
    if relative is None:
        return Membership.OUTSIDE_ROOT

    if extension_of(resolved) not in config.extensions:
        return Membership.EXTENSION

    if is_excluded(relative, config.exclude):
        return Membership.EXCLUDED

    return Membership.MANAGED


def is_managed(path: str | Path, config: CorpusConfig) -> bool:
    """Check whether a path belongs to the managed corpus.

    Args:
        path: Candidate path.
        config: Corpus configuration.

    Returns:
        True if the path is under the root, has an accepted extension,
        and matches no exclusion pattern.
    """
    return explain(path, config) is Membership.MANAGED

"""File extension matching for note files.

Note files may be encrypted, in which case their real extension is
hidden behind an encryption suffix (``notes.org.gpg``). Extension
extraction peels one such suffix before returning the content extension.
"""

from pathlib import PurePath

# Suffixes marking an encrypted note file, in glob expansion order
ENCRYPTION_SUFFIXES: tuple[str, ...] = ("gpg", "age")


def _last_suffix(name: str) -> str | None:
    """Return the text after the last dot of a base name.

    A name whose only dot is its first character (``.org``) has no
    extension. Numeric tails are kept as-is, so ``notes.org.1`` yields
    ``"1"``.
    """
    index = name.rfind(".")
    if index <= 0:
        return None
    return name[index + 1 :]


def extension_of(path: str | PurePath) -> str | None:
    """Return the content extension of a path.

    If the final suffix is an encryption marker (``gpg`` or ``age``), the
    marker is stripped and the extension is taken from the remaining name.
    Only one marker is peeled.

    Args:
        path: File path; only its base name is inspected.

    Returns:
        The extension without a leading dot, ``""`` for a name ending in a
        dot, or None if the name has no extension.

    Example:
        >>> extension_of("notes.org.gpg")
        'org'
        >>> extension_of("notes") is None
        True
    """
    name = PurePath(path).name
    ext = _last_suffix(name)
    if ext in ENCRYPTION_SUFFIXES:
        return _last_suffix(name[: -(len(ext) + 1)])
    return ext


def expand_extensions(extensions: tuple[str, ...] | list[str]) -> list[str]:
    """Expand base extensions with their encrypted variants.

    ``("org",)`` becomes ``["org", "org.gpg", "org.age"]``.
    """
    expanded: list[str] = []
    for ext in extensions:
        expanded.append(ext)
        expanded.extend(f"{ext}.{suffix}" for suffix in ENCRYPTION_SUFFIXES)
    return expanded


def glob_patterns(extensions: tuple[str, ...] | list[str]) -> list[str]:
    """Return ``*.<ext>`` globs for every expanded extension."""
    return [f"*.{ext}" for ext in expand_extensions(extensions)]


def is_encrypted_name(path: str | PurePath) -> bool:
    """Check whether a path's name ends with an encryption suffix."""
    return _last_suffix(PurePath(path).name) in ENCRYPTION_SUFFIXES

"""Corpus membership rules.

This module exports the extension matcher, the exclusion filter, and the
classifier that combines them. The enumerator lives in
``notectl.corpus.enumerator``.
"""

from notectl.corpus.classifier import Membership, canonical_path, explain, is_managed
from notectl.corpus.exclusion import is_excluded, normalize_patterns
from notectl.corpus.extensions import (
    ENCRYPTION_SUFFIXES,
    expand_extensions,
    extension_of,
    glob_patterns,
    is_encrypted_name,
)

__all__ = [
    "ENCRYPTION_SUFFIXES",
    "Membership",
    "canonical_path",
    "expand_extensions",
    "explain",
    "extension_of",
    "glob_patterns",
    "is_encrypted_name",
    "is_excluded",
    "is_managed",
    "normalize_patterns",
]

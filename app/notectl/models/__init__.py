"""Data models for notectl.

This module exports the core data structures used throughout the application.
"""

from notectl.models.backend import BackendId, BackendProbe
from notectl.models.config import BackendPreference, CorpusConfig, default_backends
from notectl.models.file_list import FileListing, ListingMetadata

__all__ = [
    "BackendId",
    "BackendPreference",
    "BackendProbe",
    "CorpusConfig",
    "FileListing",
    "ListingMetadata",
    "default_backends",
]

"""File listing result model for JSON export.

This module defines the data structure for exporting a corpus listing
to JSON with proper metadata.
"""

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any


@dataclass(frozen=True, slots=True)
class ListingMetadata:
    """Metadata for a file listing.

    Attributes:
        timestamp: ISO format timestamp when the listing was produced.
        hostname: Name of the machine that was listed.
        notectl_version: Version of notectl that produced the listing.
        root: Corpus root directory.
        backend: Identifier of the backend that enumerated the files.
        extensions: Accepted extensions at listing time (immutable).
    """

    timestamp: str
    hostname: str
    notectl_version: str
    root: str
    backend: str
    extensions: tuple[str, ...]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "timestamp": self.timestamp,
            "hostname": self.hostname,
            "notectl_version": self.notectl_version,
            "root": self.root,
            "backend": self.backend,
            "extensions": list(self.extensions),
        }


@dataclass(frozen=True, slots=True)
class FileListing:
    """Complete file listing for export.

    Attributes:
        metadata: Listing metadata including timestamp and backend.
        files: Absolute canonical paths of the managed files.
    """

    metadata: ListingMetadata
    files: list[str]

    @property
    def encrypted_count(self) -> int:
        """Number of files carrying an encryption suffix."""
        from notectl.corpus.extensions import is_encrypted_name

        return sum(1 for path in self.files if is_encrypted_name(path))

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "metadata": self.metadata.to_dict(),
            "files": list(self.files),
            "summary": {
                "total": len(self.files),
                "encrypted": self.encrypted_count,
            },
        }

    @classmethod
    def create(
        cls,
        files: list[str],
        root: str,
        backend: str,
        extensions: tuple[str, ...],
    ) -> "FileListing":
        """Create a FileListing with auto-generated metadata.

        Args:
            files: Managed file paths.
            root: Corpus root directory.
            backend: Identifier of the backend used.
            extensions: Accepted extensions.

        Returns:
            FileListing with populated metadata.
        """
        import socket

        from notectl import __version__

        metadata = ListingMetadata(
            timestamp=datetime.now(UTC).isoformat(),
            hostname=socket.gethostname(),
            notectl_version=__version__,
            root=root,
            backend=backend,
            extensions=extensions,
        )
        return cls(metadata=metadata, files=files)


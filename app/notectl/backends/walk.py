"""In-process directory walk backend.

Lists note files without any external process. This backend is always
available and is the baseline the external tool backends must agree with.
"""

import logging
import os
import re
from collections.abc import Iterator
from pathlib import Path

from notectl.backends.base import Backend
from notectl.corpus.extensions import ENCRYPTION_SUFFIXES
from notectl.models.backend import BackendId

logger = logging.getLogger(__name__)


def name_pattern(extensions: tuple[str, ...]) -> re.Pattern[str]:
    """Compile a regex matching names ending in an accepted extension.

    The extension may be followed by one encryption suffix, e.g.
    ``\\.(?:org)(?:\\.(?:gpg|age))?\\Z`` for ``("org",)``.
    """
    exts = "|".join(re.escape(ext) for ext in extensions)
    suffixes = "|".join(re.escape(suffix) for suffix in ENCRYPTION_SUFFIXES)
    return re.compile(rf"\.(?:{exts})(?:\.(?:{suffixes}))?\Z")


class WalkBackend(Backend):
    """Fallback backend walking the directory tree with ``os.walk``.

    Symbolic links to directories are followed; each real directory is
    entered at most once, so link cycles terminate.
    """

    @property
    def identifier(self) -> BackendId:
        """Return FALLBACK as the backend identifier."""
        return BackendId.FALLBACK

    @property
    def is_fallback(self) -> bool:
        """The walk is the fallback backend."""
        return True

    def is_available(self) -> bool:
        """Check if the walk backend is available.

        Always returns True because it needs nothing but the filesystem.
        """
        return True

    def list_candidates(
        self,
        root: Path,
        extensions: tuple[str, ...],
        *,
        timeout: float | None = None,
    ) -> list[str]:
        """List readable regular files whose names match an extension.

        Unreadable files are skipped silently. The timeout is ignored.
        """
        _ = timeout  # No external process to bound
        pattern = name_pattern(extensions)
        return [path for path in self._walk(root) if self._accepts(path, pattern)]

    def _walk(self, root: Path) -> Iterator[str]:
        """Yield file paths under root, following directory symlinks once."""
        seen: set[tuple[int, int]] = set()

        def on_error(error: OSError) -> None:
            logger.warning("Cannot read directory %s: %s", error.filename, error.strerror)

        for dirpath, dirnames, filenames in os.walk(root, onerror=on_error, followlinks=True):
            try:
                stat = os.stat(dirpath)
            except OSError:
                dirnames.clear()
                continue

            key = (stat.st_dev, stat.st_ino)
            if key in seen:
                logger.debug("Skipping already visited directory: %s", dirpath)
                dirnames.clear()
                continue
            seen.add(key)

            dirnames.sort()
            for name in sorted(filenames):
                yield os.path.join(dirpath, name)

    @staticmethod
    def _accepts(path: str, pattern: re.Pattern[str]) -> bool:
        """Check name match, regular file type, and readability."""
        if not pattern.search(os.path.basename(path)):
            return False
        return os.path.isfile(path) and os.access(path, os.R_OK)

"""POSIX find backend implementation.

Lists note files with ``find -L``, which follows symbolic links while
descending the tree.
"""

from pathlib import Path

from notectl.backends.base import CommandBackend
from notectl.corpus.extensions import glob_patterns
from notectl.models.backend import BackendId


class FindBackend(CommandBackend):
    """Backend for POSIX ``find``.

    Builds ``find -L ROOT -type f ( -name GLOB -o -name GLOB ... )``.
    """

    default_executable = "find"

    @property
    def identifier(self) -> BackendId:
        """Return FIND as the backend identifier."""
        return BackendId.FIND

    def build_command(
        self,
        executable: str,
        root: Path,
        extensions: tuple[str, ...],
    ) -> list[str]:
        """Build the find command for the given root and extensions."""
        name_tests: list[str] = []
        for pattern in glob_patterns(extensions):
            if name_tests:
                name_tests.append("-o")
            name_tests.extend(["-name", pattern])

        return [executable, "-L", str(root), "-type", "f", "(", *name_tests, ")"]

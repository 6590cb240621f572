"""fd backend implementation.

Lists note files with ``fd``. Debian and Ubuntu ship the same tool as
``fdfind``; both names share one command syntax.
"""

from pathlib import Path

from notectl.backends.base import CommandBackend
from notectl.corpus.extensions import expand_extensions
from notectl.models.backend import BackendId


class FdBackend(CommandBackend):
    """Backend for ``fd``.

    Hidden files and ignore files are not honoured (``--hidden
    --no-ignore``) so that fd reports the same tree as the other backends.
    """

    default_executable = "fd"

    @property
    def identifier(self) -> BackendId:
        """Return FD as the backend identifier."""
        return BackendId.FD

    def build_command(
        self,
        executable: str,
        root: Path,
        extensions: tuple[str, ...],
    ) -> list[str]:
        """Build the fd command for the given root and extensions."""
        ext_args: list[str] = []
        for ext in expand_extensions(extensions):
            ext_args.extend(["--extension", ext])

        return [
            executable,
            "--follow",
            "--type",
            "file",
            "--hidden",
            "--no-ignore",
            "--absolute-path",
            "--color",
            "never",
            *ext_args,
            ".",
            str(root),
        ]


class FdfindBackend(FdBackend):
    """Backend for ``fd`` installed under the name ``fdfind``."""

    default_executable = "fdfind"

    @property
    def identifier(self) -> BackendId:
        """Return FDFIND as the backend identifier."""
        return BackendId.FDFIND

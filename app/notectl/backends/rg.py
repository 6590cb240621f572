"""ripgrep backend implementation.

Lists note files with ``rg --files``, filtering file names with globs.
"""

from pathlib import Path

from notectl.backends.base import CommandBackend
from notectl.corpus.extensions import glob_patterns
from notectl.models.backend import BackendId
from notectl.utils.shell import CommandResult


class RgBackend(CommandBackend):
    """Backend for ripgrep.

    ``--no-config`` keeps a user's RIPGREP_CONFIG_PATH from changing what
    gets listed; ``--hidden --no-ignore`` matches the other backends.
    """

    default_executable = "rg"

    @property
    def identifier(self) -> BackendId:
        """Return RG as the backend identifier."""
        return BackendId.RG

    def build_command(
        self,
        executable: str,
        root: Path,
        extensions: tuple[str, ...],
    ) -> list[str]:
        """Build the ripgrep command for the given root and extensions."""
        glob_args: list[str] = []
        for pattern in glob_patterns(extensions):
            glob_args.extend(["--glob", pattern])

        return [
            executable,
            "--no-config",
            "--files",
            "--follow",
            "--hidden",
            "--no-ignore",
            "--color",
            "never",
            *glob_args,
            str(root),
        ]

    def _accepts(self, result: CommandResult) -> bool:
        """Accept exit status 1 without output, which rg uses for "no files"."""
        if result.success:
            return True
        return result.returncode == 1 and not result.stdout.strip() and not result.stderr.strip()

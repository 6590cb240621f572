"""Abstract base classes for file listing backends.

A backend produces the raw candidate paths for a corpus root. External
tool backends build an argument list for their tool and parse its output;
the walk backend lists files in-process and is always available.
"""

import logging
import subprocess
from abc import ABC, abstractmethod
from pathlib import Path

from notectl.models.backend import BackendId
from notectl.utils.shell import CommandResult, output_lines, resolve_executable, run_command

logger = logging.getLogger(__name__)


class BackendError(Exception):
    """Base exception for backend errors."""


class BackendConfigError(BackendError):
    """Raised when the backend preference list names an unknown backend."""


class BackendExecutionError(BackendError):
    """Raised when a selected external tool fails or its output is unusable."""


class Backend(ABC):
    """Abstract base class for all file listing backends.

    Example:
        >>> backend = select_backend(config.backends)
        >>> for path in backend.list_candidates(config.root, config.extensions):
        ...     print(path)
    """

    @property
    @abstractmethod
    def identifier(self) -> BackendId:
        """Return the identifier of this backend."""

    @property
    def is_fallback(self) -> bool:
        """Check if this is the in-process fallback backend."""
        return False

    @abstractmethod
    def is_available(self) -> bool:
        """Check if this backend can be used on the system.

        Returns:
            True if the backend can run, False otherwise.
        """

    @abstractmethod
    def list_candidates(
        self,
        root: Path,
        extensions: tuple[str, ...],
        *,
        timeout: float | None = None,
    ) -> list[str]:
        """List candidate file paths under a root directory.

        Args:
            root: Directory to search.
            extensions: Accepted base extensions.
            timeout: Maximum seconds to wait for an external tool.

        Returns:
            Candidate paths in discovery order.

        Raises:
            BackendExecutionError: If the listing cannot be produced.
        """


class CommandBackend(Backend):
    """Backend delegating the listing to an external search tool.

    Subclasses provide the tool's default executable name and translate
    the root and extensions into the tool's command-line syntax.

    Args:
        executable: Explicit executable path. If None, the tool is looked
            up in PATH by its default name.
    """

    #: Executable name looked up in PATH
    default_executable: str = ""

    def __init__(self, executable: str | None = None) -> None:
        self._override = executable
        self._resolved: str | None = None

    @property
    def override(self) -> str | None:
        """Return the configured executable override, if any."""
        return self._override

    @property
    def executable(self) -> str | None:
        """Return the resolved executable path, resolving it on first use."""
        if self._resolved is None:
            self._resolved = resolve_executable(self.default_executable, self._override)
        return self._resolved

    def is_available(self) -> bool:
        """Check if the tool's executable can be found."""
        return self.executable is not None

    @abstractmethod
    def build_command(
        self,
        executable: str,
        root: Path,
        extensions: tuple[str, ...],
    ) -> list[str]:
        """Build the argument list that lists matching files under root.

        The command must follow symbolic links, list regular files only,
        and match every extension in its plain and encrypted variants.

        Args:
            executable: Resolved executable path.
            root: Directory to search.
            extensions: Accepted base extensions.

        Returns:
            Command and arguments, suitable for run_command().
        """

    def list_candidates(
        self,
        root: Path,
        extensions: tuple[str, ...],
        *,
        timeout: float | None = None,
    ) -> list[str]:
        """Run the tool and return the paths it prints, one per line.

        Raises:
            BackendExecutionError: If the executable is missing, the tool
                times out or exits with an error, or its output cannot be
                decoded.
        """
        executable = self.executable
        if executable is None:
            msg = f"{self.identifier.value}: executable not found"
            raise BackendExecutionError(msg)

        args = self.build_command(executable, root, extensions)
        logger.debug("Running %s backend: %s", self.identifier.value, args)

        try:
            result = run_command(args, timeout=timeout)
        except subprocess.TimeoutExpired as e:
            msg = f"{self.identifier.value}: command timed out after {e.timeout}s: {args}"
            raise BackendExecutionError(msg) from e
        except UnicodeDecodeError as e:
            msg = f"{self.identifier.value}: output is not valid UTF-8: {args}"
            raise BackendExecutionError(msg) from e
        except OSError as e:
            msg = f"{self.identifier.value}: cannot execute {executable}: {e}"
            raise BackendExecutionError(msg) from e

        if not self._accepts(result):
            stderr = result.stderr.strip() or "unknown error"
            msg = (
                f"{self.identifier.value}: command exited with status "
                f"{result.returncode}: {args}: {stderr}"
            )
            raise BackendExecutionError(msg)

        if "\x00" in result.stdout:
            msg = f"{self.identifier.value}: unexpected NUL byte in output: {args}"
            raise BackendExecutionError(msg)

        lines = output_lines(result.stdout)
        logger.debug("%s backend listed %d candidates", self.identifier.value, len(lines))
        return lines

    def _accepts(self, result: CommandResult) -> bool:
        """Decide whether the tool's exit status denotes a usable listing."""
        return result.success

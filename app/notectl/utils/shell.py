"""Shell execution utilities.

Provides safe subprocess execution with proper error handling, executable
resolution, and helpers for parsing line-oriented tool output.
"""

import re
import shutil
import subprocess
from dataclasses import dataclass

# CSI and OSC escape sequences emitted by tools that colorize their output
_ANSI_ESCAPE = re.compile(r"\x1b(?:\[[0-?]*[ -/]*[@-~]|\][^\x07\x1b]*(?:\x07|\x1b\\))")


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Result of a shell command execution.

    Attributes:
        stdout: Standard output from the command.
        stderr: Standard error from the command.
        returncode: Exit code of the command.
    """

    stdout: str
    stderr: str
    returncode: int

    @property
    def success(self) -> bool:
        """Check if command executed successfully."""
        return self.returncode == 0


def run_command(
    args: list[str],
    *,
    check: bool = False,
    timeout: float | None = 60.0,
    cwd: str | None = None,
) -> CommandResult:
    """Execute a command and return the result.

    The command is passed as an argument list and never through a shell
    interpreter, so paths and patterns need no quoting.

    Args:
        args: Command and arguments to execute.
        check: If True, raise CalledProcessError on non-zero exit.
        timeout: Maximum time in seconds to wait for command. None waits forever.
        cwd: Working directory for the command. If None, uses current directory.

    Returns:
        CommandResult with stdout, stderr, and returncode.

    Raises:
        subprocess.CalledProcessError: If check=True and command fails.
        subprocess.TimeoutExpired: If command exceeds timeout.
        FileNotFoundError: If command executable is not found.
        UnicodeDecodeError: If the output is not valid UTF-8.
    """
    result = subprocess.run(
        args,
        capture_output=True,
        text=True,
        encoding="utf-8",
        check=check,
        timeout=timeout,
        cwd=cwd,
    )
    return CommandResult(
        stdout=result.stdout,
        stderr=result.stderr,
        returncode=result.returncode,
    )


def resolve_executable(name: str, override: str | None = None) -> str | None:
    """Resolve the executable to run for a tool.

    An explicit override path wins over the PATH lookup. An override that
    does not point to an executable file resolves to None, the same as a
    tool missing from PATH.

    Args:
        name: Command name looked up in PATH when no override is given.
        override: Explicit executable path.

    Returns:
        Absolute or override path to the executable, or None if not found.
    """
    if override:
        return shutil.which(override)
    return shutil.which(name)


def strip_ansi(text: str) -> str:
    """Remove ANSI color and control escape sequences from text."""
    return _ANSI_ESCAPE.sub("", text)


def output_lines(text: str) -> list[str]:
    """Split command output into non-empty lines with escapes removed.

    Args:
        text: Raw standard output of a command.

    Returns:
        List of lines, without line terminators and without empty lines.
    """
    return [line for line in strip_ansi(text).split("\n") if line]

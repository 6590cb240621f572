"""Backend identifiers and probe results.

This module defines the identifiers of the supported file listing
backends and the record produced when a configured backend is probed.
"""

from dataclasses import dataclass
from enum import Enum


class BackendId(str, Enum):
    """Identifier of a file listing backend.

    Attributes:
        FIND: POSIX ``find``.
        FD: ``fd``.
        FDFIND: ``fd`` installed under its Debian/Ubuntu name ``fdfind``.
        RG: ripgrep (``rg --files``).
        FALLBACK: In-process directory walk. In a preference list it means
            "use no external tool".
    """

    FIND = "find"
    FD = "fd"
    FDFIND = "fdfind"
    RG = "rg"
    FALLBACK = "fallback"

    @classmethod
    def parse(cls, value: str) -> "BackendId | None":
        """Look up an identifier by name, returning None if unknown."""
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


@dataclass(frozen=True, slots=True)
class BackendProbe:
    """Outcome of resolving one entry of the backend preference list.

    Attributes:
        tool: Tool identifier as written in the configuration.
        override: Explicit executable path from the configuration, if any.
        executable: Resolved executable path (None if not found).
        known: Whether the tool identifier names a supported backend.
    """

    tool: str
    override: str | None
    executable: str | None
    known: bool = True

    @property
    def found(self) -> bool:
        """Check if the executable was resolved."""
        return self.executable is not None

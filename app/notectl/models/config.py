"""Corpus configuration model.

Defines the immutable settings that describe a managed note corpus: where
it lives, which file extensions belong to it, which paths are excluded,
and which external tools may be used to list it.

The configuration is passed explicitly into every operation; nothing in
notectl reads it from global state.
"""

import re
import sys
from pathlib import Path
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# Preference order used when the configuration names no backends
DEFAULT_POSIX_BACKENDS: tuple[str, ...] = ("find", "fd", "fdfind", "rg")


class BackendPreference(BaseModel):
    """One entry of the ordered backend preference list.

    Accepts a bare tool name (``"rg"``), a ``[tool, executable]`` pair, or
    a ``{tool = ..., executable = ...}`` table.

    Attributes:
        tool: Backend identifier. Kept as a string so that unknown names
            are reported when a backend is selected.
        executable: Explicit executable path overriding the PATH lookup.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    tool: Annotated[str, Field(min_length=1, description="Backend identifier")]
    executable: Annotated[
        str | None,
        Field(description="Executable path override (None = look up in PATH)"),
    ] = None

    @model_validator(mode="before")
    @classmethod
    def coerce_shorthand(cls, data: Any) -> Any:
        """Expand the string and pair shorthands into a mapping."""
        if isinstance(data, str):
            return {"tool": data}
        if isinstance(data, list | tuple):
            if len(data) not in (1, 2):
                msg = f"backend entry must be [tool] or [tool, executable], got {data!r}"
                raise ValueError(msg)
            return {"tool": data[0], "executable": data[1] if len(data) == 2 else None}
        return data


def default_backends() -> tuple[BackendPreference, ...]:
    """Return the default backend preferences for this platform.

    Windows rarely ships these tools, so the default there is an empty
    list, which always selects the directory walk.
    """
    if sys.platform == "win32":
        return ()
    return tuple(BackendPreference(tool=tool) for tool in DEFAULT_POSIX_BACKENDS)


class CorpusConfig(BaseModel):
    """Settings describing a managed note corpus.

    Attributes:
        root: Absolute path of the corpus root directory.
        extensions: Accepted base extensions, without leading dots.
        exclude: Regular expressions searched in each root-relative path;
            a path matching any of them is excluded.
        backends: Ordered backend preferences.
        command_timeout: Seconds to wait for an external tool (None = no limit).
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    root: Annotated[Path, Field(description="Corpus root directory")]
    extensions: Annotated[
        tuple[str, ...],
        Field(min_length=1, description="Accepted base extensions"),
    ] = ("org",)
    exclude: Annotated[
        tuple[str, ...],
        Field(description="Exclusion regexes, OR'd together"),
    ] = ()
    backends: Annotated[
        tuple[BackendPreference, ...],
        Field(default_factory=default_backends, description="Backend preference order"),
    ]
    command_timeout: Annotated[
        float | None,
        Field(gt=0, description="External tool timeout in seconds"),
    ] = None

    @field_validator("root", mode="before")
    @classmethod
    def validate_root(cls, v: object) -> Path:
        """Expand and absolutize the root, which must be an existing directory."""
        if not isinstance(v, str | Path) or not str(v):
            msg = "root must be a non-empty path"
            raise ValueError(msg)
        root = Path(v).expanduser().absolute()
        if not root.is_dir():
            msg = f"root is not an existing directory: {root}"
            raise ValueError(msg)
        return root

    @field_validator("extensions", mode="before")
    @classmethod
    def validate_extensions(cls, v: object) -> tuple[str, ...]:
        """Reject empty or dotted extensions and drop duplicates."""
        if isinstance(v, str):
            v = (v,)
        if not isinstance(v, list | tuple):
            msg = "extensions must be a list of strings"
            raise ValueError(msg)

        result: list[str] = []
        for ext in v:
            if not isinstance(ext, str) or not ext:
                msg = f"extension must be a non-empty string, got {ext!r}"
                raise ValueError(msg)
            if ext.startswith("."):
                msg = f"extension must not start with a dot: {ext!r}"
                raise ValueError(msg)
            if ext not in result:
                result.append(ext)
        return tuple(result)

    @field_validator("exclude", mode="before")
    @classmethod
    def validate_exclude(cls, v: object) -> tuple[str, ...]:
        """Normalize a single pattern or a list of patterns into one tuple."""
        if v is None:
            return ()
        if isinstance(v, str):
            v = (v,)
        if not isinstance(v, list | tuple):
            msg = "exclude must be a regex string or a list of regex strings"
            raise ValueError(msg)

        for pattern in v:
            if not isinstance(pattern, str):
                msg = f"exclude pattern must be a string, got {pattern!r}"
                raise ValueError(msg)
            try:
                re.compile(pattern)
            except re.error as e:
                msg = f"invalid exclude pattern {pattern!r}: {e}"
                raise ValueError(msg) from None
        return tuple(v)

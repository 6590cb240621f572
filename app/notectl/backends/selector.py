"""Backend selection.

Probes the configured backend preferences in order and picks the first
whose executable can be found, falling back to the directory walk.
"""

import logging
from collections.abc import Iterable

from notectl.backends.base import Backend, BackendConfigError, CommandBackend
from notectl.backends.fd import FdBackend, FdfindBackend
from notectl.backends.find import FindBackend
from notectl.backends.rg import RgBackend
from notectl.backends.walk import WalkBackend
from notectl.models.backend import BackendId, BackendProbe
from notectl.models.config import BackendPreference

logger = logging.getLogger(__name__)

# Mapping from identifiers to external tool backend classes.
COMMAND_BACKENDS: dict[BackendId, type[CommandBackend]] = {
    BackendId.FIND: FindBackend,
    BackendId.FD: FdBackend,
    BackendId.FDFIND: FdfindBackend,
    BackendId.RG: RgBackend,
}


def _parse_tool(tool: str) -> BackendId:
    """Map a configured tool name to its identifier.

    Raises:
        BackendConfigError: If the tool names no supported backend.
    """
    backend_id = BackendId.parse(tool)
    if backend_id is None:
        supported = ", ".join(b.value for b in BackendId)
        msg = f"Unknown backend {tool!r} in preference list (supported: {supported})"
        raise BackendConfigError(msg)
    return backend_id


def create_backend(preference: BackendPreference) -> Backend:
    """Instantiate the backend named by a preference entry.

    Args:
        preference: Backend preference with optional executable override.

    Returns:
        Backend instance (not yet probed).

    Raises:
        BackendConfigError: If the tool names no supported backend.
    """
    backend_id = _parse_tool(preference.tool)
    if backend_id is BackendId.FALLBACK:
        return WalkBackend()
    return COMMAND_BACKENDS[backend_id](preference.executable)


def select_backend(preferences: Iterable[BackendPreference]) -> Backend:
    """Select the backend used to list a corpus.

    Preferences are tried in order; the first available one wins and the
    rest are not examined. A ``fallback`` entry selects the walk at once.
    An empty list, or a list where no executable resolves, selects the
    walk.

    Args:
        preferences: Ordered backend preferences.

    Returns:
        An available CommandBackend, or the WalkBackend.

    Raises:
        BackendConfigError: If an examined entry names an unknown backend.
    """
    for preference in preferences:
        backend = create_backend(preference)
        if backend.is_available():
            logger.debug("Selected %s backend", backend.identifier.value)
            return backend
        logger.debug(
            "Backend %s not found (override=%s), trying next",
            preference.tool,
            preference.executable,
        )

    logger.debug("No external backend available, using directory walk")
    return WalkBackend()


def probe_backends(preferences: Iterable[BackendPreference]) -> list[BackendProbe]:
    """Resolve every backend preference without stopping at the first hit.

    Unknown identifiers are reported in the result instead of raising.

    Args:
        preferences: Ordered backend preferences.

    Returns:
        One BackendProbe per preference, in order.
    """
    probes: list[BackendProbe] = []
    for preference in preferences:
        try:
            backend = create_backend(preference)
        except BackendConfigError:
            probes.append(
                BackendProbe(
                    tool=preference.tool,
                    override=preference.executable,
                    executable=None,
                    known=False,
                )
            )
            continue

        executable = backend.executable if isinstance(backend, CommandBackend) else "(built-in)"
        probes.append(
            BackendProbe(
                tool=preference.tool,
                override=preference.executable,
                executable=executable,
            )
        )
    return probes

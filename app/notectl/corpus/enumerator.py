"""Corpus file enumeration.

Lists the managed files of a corpus: selects a backend, collects its
candidates, classifies them, and canonicalizes the survivors. Each call
is independent; nothing is cached between calls.
"""

import logging

from notectl.backends.base import Backend
from notectl.backends.selector import select_backend
from notectl.corpus.classifier import canonical_path, is_managed
from notectl.models.config import CorpusConfig

logger = logging.getLogger(__name__)


def list_files_with(backend: Backend, config: CorpusConfig) -> list[str]:
    """List the managed files of a corpus using a given backend.

    Every candidate is classified here, whichever backend produced it.
    External tools do not know the exclusion patterns or the root
    boundary, and a link may point somewhere its name does not suggest.

    Args:
        backend: Backend producing the candidates.
        config: Corpus configuration.

    Returns:
        Absolute, symlink-resolved paths in discovery order, without
        duplicates.

    Raises:
        BackendExecutionError: If an external tool fails.
    """
    if backend.is_fallback:
        logger.debug("Walking %s without external tools", config.root)
        timeout = None
    else:
        timeout = config.command_timeout

    candidates = backend.list_candidates(config.root, config.extensions, timeout=timeout)

    files: dict[str, None] = {}
    for candidate in candidates:
        if is_managed(candidate, config):
            files.setdefault(str(canonical_path(candidate)), None)

    logger.debug(
        "Accepted %d of %d candidates from %s",
        len(files),
        len(candidates),
        backend.identifier.value,
    )
    return list(files)


def list_files(config: CorpusConfig) -> list[str]:
    """List the managed files of a corpus.

    A missing tool moves on to the next preference; a selected tool that
    fails is an error, never a silent switch to another backend.

    Args:
        config: Corpus configuration.

    Returns:
        Absolute, symlink-resolved paths of the managed files.

    Raises:
        BackendConfigError: If the preference list names an unknown backend.
        BackendExecutionError: If the selected external tool fails.
    """
    backend = select_backend(config.backends)
    return list_files_with(backend, config)

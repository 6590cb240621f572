"""File listing backends.

This module exports the backend classes for enumerating note files and
the selector choosing between them.
"""

from notectl.backends.base import (
    Backend,
    BackendConfigError,
    BackendError,
    BackendExecutionError,
    CommandBackend,
)
from notectl.backends.fd import FdBackend, FdfindBackend
from notectl.backends.find import FindBackend
from notectl.backends.rg import RgBackend
from notectl.backends.selector import create_backend, probe_backends, select_backend
from notectl.backends.walk import WalkBackend

__all__ = [
    "Backend",
    "BackendConfigError",
    "BackendError",
    "BackendExecutionError",
    "CommandBackend",
    "FdBackend",
    "FdfindBackend",
    "FindBackend",
    "RgBackend",
    "WalkBackend",
    "create_backend",
    "probe_backends",
    "select_backend",
]

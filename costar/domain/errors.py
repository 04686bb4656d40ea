# costar/domain/errors.py
from __future__ import annotations


class CostarError(Exception):
    """Base class for faults raised by the costar core."""


class StorageUnavailableError(CostarError):
    """The adjacency store could not be reached or failed mid-read. Retryable."""


class PathInvariantError(CostarError):
    """Search bookkeeping is inconsistent (corrupted visited map). Not recoverable."""

from __future__ import annotations
from enum import StrEnum

class PathErrorKind(StrEnum):
    invalid_input = "invalid_input"
    not_found = "not_found"
    timeout = "timeout"
    storage_unavailable = "storage_unavailable"

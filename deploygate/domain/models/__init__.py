"""Domain models for deploygate."""

from .path_status import PathStatus
from .verdict import InvalidVerdict, ValidVerdict, Verdict


__all__ = [
    "PathStatus",
    "ValidVerdict",
    "InvalidVerdict",
    "Verdict",
]

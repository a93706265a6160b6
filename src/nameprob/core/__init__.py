"""
Core exports for nameprob.
"""

from .contracts import (
    FetchResult,
    FetchStatus,
    NameRecord,
    NameRecordSet,
    Resolution,
    ResolveStatus,
)
from .interfaces import NameSource

__all__ = [
    "NameRecord",
    "NameRecordSet",
    "FetchStatus",
    "FetchResult",
    "ResolveStatus",
    "Resolution",
    "NameSource",
]

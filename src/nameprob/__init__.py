"""
nameprob
========
Looks names up on nationalize.io, keeps the answers in an in-memory cache and
reports the least- and most-likely country of origin for each name.

Typical usage:
    from nameprob import NameProb
    NameProb().check("Aljosja").as_tuple()   # -> ("BE", "NL")
"""

from ._version import __version__
from .cache import NameCache
from .client import NameProb
from .core.contracts import (
    FetchResult,
    FetchStatus,
    NameRecord,
    NameRecordSet,
    Resolution,
    ResolveStatus,
)
from .fetch import NationalizeFetcher
from .resolver import ProbabilityResolver, scan_extremes

__all__ = [
    "NameCache",
    "NameProb",
    "NationalizeFetcher",
    "ProbabilityResolver",
    "scan_extremes",
    "NameRecord",
    "NameRecordSet",
    "FetchStatus",
    "FetchResult",
    "ResolveStatus",
    "Resolution",
]

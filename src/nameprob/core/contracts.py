from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Optional, Tuple


class FetchStatus(str, Enum):
    OK = "ok"
    NETWORK_ERROR = "network_error"
    HTTP_ERROR = "http_error"
    DECODE_ERROR = "decode_error"


class ResolveStatus(str, Enum):
    FOUND = "found"
    NOT_FOUND = "not_found"  # entry stored, but the service knew no countries
    FETCH_ERROR = "fetch_error"  # no entry after the fetch attempt


@dataclass(frozen=True)
class NameRecord:
    name: str
    country_code: str
    probability: float


@dataclass(frozen=True)
class NameRecordSet:
    """
    All (country, probability) records returned by one fetch for a name,
    in the service's array order.
    """

    name: str
    records: Tuple[NameRecord, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[NameRecord]:
        return iter(self.records)

    @property
    def empty(self) -> bool:
        return not self.records


@dataclass(frozen=True)
class FetchResult:
    name: str
    status: FetchStatus
    records: Optional[NameRecordSet] = None
    error: str = ""
    status_code: int = 0

    @property
    def ok(self) -> bool:
        return self.status == FetchStatus.OK


@dataclass(frozen=True)
class Resolution:
    name: str
    min_country: str
    max_country: str
    status: ResolveStatus
    error: str = ""
    fetched: bool = False  # True if this call had to go to the service

    def as_tuple(self) -> Tuple[str, str]:
        return self.min_country, self.max_country

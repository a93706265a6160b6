from __future__ import annotations

import sys
from typing import Iterable, Tuple

from .cache import NameCache
from .core.contracts import (
    FetchResult,
    NameRecord,
    Resolution,
    ResolveStatus,
)
from .core.interfaces import NameSource


def scan_extremes(records: Iterable[NameRecord]) -> Tuple[str, str]:
    """
    Return (min_country, max_country) over `records`.

    Bounds start at min=1.0 / max=0.0 and only move on strict comparisons, so
    the first record wins ties. A record at exactly 1.0 never becomes the
    minimum and one at exactly 0.0 never becomes the maximum; an empty input
    gives ("", "").
    """
    min_prob, max_prob = 1.0, 0.0
    min_country, max_country = "", ""
    for r in records:
        if r.probability < min_prob:
            min_prob = r.probability
            min_country = r.country_code
        if r.probability > max_prob:
            max_prob = r.probability
            max_country = r.country_code
    return min_country, max_country


class ProbabilityResolver:
    """
    Cache-aside lookup of the least- and most-likely country for a name.
    """

    def __init__(
        self, cache: NameCache, source: NameSource, *, debug: bool = False
    ) -> None:
        self._cache = cache
        self._source = source
        self._debug = bool(debug)

    def failed(self, res: FetchResult) -> Resolution:
        """Resolution for a name whose fetch left no cache entry."""
        error = res.error
        if not error:
            error = (
                "source did not store an entry"
                if res.ok
                else res.status.value
            )
        if self._debug:
            print(
                f"[resolve] no data for name={res.name!r} ({error})",
                file=sys.stderr,
            )
        return Resolution(
            name=res.name,
            min_country="",
            max_country="",
            status=ResolveStatus.FETCH_ERROR,
            error=error,
            fetched=True,
        )

    def resolve(self, name: str) -> Resolution:
        records = self._cache.get(name)
        fetched = False
        if records is None:
            res = self._source.fetch(name)
            fetched = True
            records = self._cache.get(name)
            if records is None:
                return self.failed(res)

        min_country, max_country = scan_extremes(records)
        status = (
            ResolveStatus.NOT_FOUND if records.empty else ResolveStatus.FOUND
        )
        if self._debug:
            print(
                f"[resolve] name={name!r} records={len(records)} "
                f"min={min_country!r} max={max_country!r} fetched={fetched}",
                file=sys.stderr,
            )
        return Resolution(
            name=name,
            min_country=min_country,
            max_country=max_country,
            status=status,
            fetched=fetched,
        )

    def min_max(self, name: str) -> Tuple[str, str]:
        return self.resolve(name).as_tuple()

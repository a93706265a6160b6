from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from .cache import NameCache
from .core.contracts import FetchResult, Resolution
from .core.interfaces import NameSource
from .fetch import NationalizeFetcher
from .resolver import ProbabilityResolver


class NameProb:
    """
    Public façade. Owns one cache, one fetcher and one resolver.
    Independent instances share nothing.

    A custom `source` must write into the same cache the resolver reads;
    when no cache is passed, the source's own `cache` attribute is used.
    """

    def __init__(
        self,
        cache: Optional[NameCache] = None,
        source: Optional[NameSource] = None,
        *,
        api_url: Optional[str] = None,
        timeout: Optional[float] = None,
        debug: bool = False,
    ) -> None:
        source_cache = getattr(source, "cache", None)
        if cache is None:
            cache = source_cache if source_cache is not None else NameCache()
        elif source_cache is not None and source_cache is not cache:
            raise ValueError("source writes into a different NameCache")
        self._cache = cache
        self._source = source or NationalizeFetcher(
            self._cache, api_url=api_url, timeout=timeout, debug=debug
        )
        self._resolver = ProbabilityResolver(
            self._cache, self._source, debug=debug
        )

    @property
    def cache(self) -> NameCache:
        return self._cache

    def check(self, name: str) -> Resolution:
        return self._resolver.resolve(name)

    def check_many(self, names: Iterable[str]) -> List[Resolution]:
        return [self._resolver.resolve(n) for n in names]

    def prefetch(self, names: Iterable[str]) -> List[FetchResult]:
        """Fetch every name not cached yet, once each, in order."""
        out: List[FetchResult] = []
        seen = set()
        for n in names:
            if n in seen or n in self._cache:
                continue
            seen.add(n)
            out.append(self._source.fetch(n))
        return out

    def batch(self, names: Iterable[str]) -> List[Resolution]:
        """
        Prefetch all names, then resolve each. A name whose prefetch failed
        is reported from that failure instead of being fetched again.
        """
        names = list(names)
        failures: Dict[str, FetchResult] = {
            r.name: r
            for r in self.prefetch(names)
            if r.name not in self._cache
        }
        return [
            self._resolver.failed(failures[n])
            if n in failures
            else self._resolver.resolve(n)
            for n in names
        ]

    def refresh(self, name: str) -> FetchResult:
        """Re-fetch `name`; a successful fetch replaces the cached entry."""
        return self._source.fetch(name)

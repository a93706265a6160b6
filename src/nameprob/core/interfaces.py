from __future__ import annotations

from typing import Protocol

from .contracts import FetchResult


class NameSource(Protocol):
    """
    Anything that can look a name up remotely and populate the cache.
    Implementations must report failures through the result, never raise.
    """

    def fetch(self, name: str) -> FetchResult: ...

from __future__ import annotations

import threading
from typing import Dict, List, Optional

from .core.contracts import NameRecordSet

# In-memory cache of nationality lookups, keyed by the exact (case-sensitive)
# name string sent to the service. Values are never mutated once stored.
#
# NOTE: no TTL and no eviction; entries live as long as the cache object.
# put() on an existing key replaces it (last store wins).


class NameCache:
    def __init__(self) -> None:
        self._mem: Dict[str, NameRecordSet] = {}
        self._lock = threading.Lock()

    def get(self, name: str) -> Optional[NameRecordSet]:
        with self._lock:
            return self._mem.get(name)

    def put(self, name: str, records: NameRecordSet) -> None:
        with self._lock:
            self._mem[name] = records

    def names(self) -> List[str]:
        with self._lock:
            return list(self._mem)

    def clear(self) -> None:
        with self._lock:
            self._mem.clear()

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._mem

    def __len__(self) -> int:
        with self._lock:
            return len(self._mem)

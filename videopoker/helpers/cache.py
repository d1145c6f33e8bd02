from __future__ import annotations

import threading
from collections import OrderedDict
from typing import Callable, Dict, Generic, Hashable, Optional, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class LRUCache(Generic[K, V]):
    """
    Bounded LRU map, safe to share between threads.
    Used for draw tallies, which are expensive and pay-table independent.
    Two threads missing the same key both compute it; the second put just
    overwrites an identical value.
    """
    def __init__(self, capacity: int = 4096):
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._od: "OrderedDict[K, V]" = OrderedDict()
        self._lock = threading.Lock()

        self.hits = 0
        self.misses = 0
        self.evictions = 0

    def __len__(self) -> int:
        return len(self._od)

    def __contains__(self, key: object) -> bool:
        return key in self._od

    def get(self, key: K) -> Optional[V]:
        with self._lock:
            v = self._od.get(key)
            if v is None:
                self.misses += 1
                return None
            self.hits += 1
            # mark as recently used
            self._od.move_to_end(key, last=True)
            return v

    def put(self, key: K, value: V) -> None:
        with self._lock:
            self._od[key] = value
            self._od.move_to_end(key, last=True)
            self._evict_if_needed()

    def _evict_if_needed(self) -> None:
        while len(self._od) > self.capacity:
            self._od.popitem(last=False)  # least recently used
            self.evictions += 1

    def clear(self) -> None:
        with self._lock:
            self._od.clear()
            self.hits = self.misses = self.evictions = 0


class ClassificationMemo(Generic[K, V]):
    """
    Unbounded memo for a pure function of a small key space (a few thousand
    canonical hand keys). Plain dict reads/writes; concurrent first writes of
    a key store the same value, so no lock is taken.
    """
    def __init__(self, compute: Callable[[K], V]):
        self._compute = compute
        self._table: Dict[K, V] = {}

    def __len__(self) -> int:
        return len(self._table)

    def __getitem__(self, key: K) -> V:
        v = self._table.get(key)
        if v is None:
            v = self._compute(key)
            self._table[key] = v
        return v

    @property
    def table(self) -> Dict[K, V]:
        return self._table

    def clear(self) -> None:
        self._table.clear()

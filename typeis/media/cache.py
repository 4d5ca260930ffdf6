"""Bounded memoization cache.

Entries are never evicted: once the cache reaches its capacity further
keys are computed by the caller but not stored.  Stored values may be
falsy (``False`` is a legitimate memoized result), so lookups return the
:data:`MISSING` sentinel on a miss.
"""

from __future__ import annotations

import contextlib
import logging
import threading
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)


class _Missing:
    __slots__ = ()

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


@dataclass(frozen=True, slots=True)
class CacheStats:
    name: str
    size: int
    capacity: int
    hits: int
    misses: int

    @property
    def full(self) -> bool:
        return self.size >= self.capacity


class BoundedCache:
    """Mapping of ``str`` keys to memoized results, capped at *capacity*."""

    def __init__(self, name: str, capacity: int, *, thread_safe: bool = True) -> None:
        self.name = name
        self.capacity = capacity
        self._data: dict[str, Any] = {}
        self._hits = 0
        self._misses = 0
        self._lock: contextlib.AbstractContextManager[Any] = (
            threading.Lock() if thread_safe else contextlib.nullcontext()
        )

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def get(self, key: str) -> Any:
        with self._lock:
            value = self._data.get(key, MISSING)
            if value is MISSING:
                self._misses += 1
            else:
                self._hits += 1
            return value

    def put(self, key: str, value: Any) -> bool:
        """Store *value* unless the cache is full; return whether it was stored."""
        with self._lock:
            if key in self._data:
                return True
            if len(self._data) >= self.capacity:
                return False
            self._data[key] = value
            if len(self._data) == self.capacity:
                logger.debug("%s cache reached capacity (%d entries)", self.name, self.capacity)
            return True

    def clear(self) -> None:
        """Drop every entry -- tests only; live caches are never cleared."""
        with self._lock:
            self._data.clear()
            self._hits = 0
            self._misses = 0

    def stats(self) -> CacheStats:
        with self._lock:
            return CacheStats(
                name=self.name,
                size=len(self._data),
                capacity=self.capacity,
                hits=self._hits,
                misses=self._misses,
            )

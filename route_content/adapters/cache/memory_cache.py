"""Thread-safe in-memory LRU cache for generated fallback content.

One instance lives for the lifetime of the process and is cleared on
deploy. Entries are plain strings or tuples derived from pre-authored
templates, so sharing them between concurrent requests is safe.
"""

from __future__ import annotations

import logging
import threading
import time
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Generic, Optional, Tuple, TypeVar

T = TypeVar("T")

_NO_EXPIRY = float("inf")


@dataclass
class InMemoryCache(Generic[T]):
    """LRU cache with optional TTL, implementing CachePort.

    Attributes:
        default_ttl_seconds: Time-to-live for entries (None = no expiry)
        max_size: Maximum number of entries (None = unlimited); the least
            recently used entry is evicted first
        name: Cache name, used for the logger name

    Example:
        cache = InMemoryCache[str](name="fallback", max_size=5000)
        html = cache.get_or_compute("fr:classes:...", lambda: render())
    """

    default_ttl_seconds: Optional[float] = None
    max_size: Optional[int] = None
    name: str = "cache"
    clock: Callable[[], float] = field(default=time.monotonic, repr=False)

    _store: "OrderedDict[str, Tuple[Any, float]]" = field(
        default_factory=OrderedDict, repr=False
    )
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    _hits: int = field(default=0, repr=False)
    _misses: int = field(default=0, repr=False)
    _evictions: int = field(default=0, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(f"cache.{self.name}")

    def _lookup(self, key: str) -> Tuple[bool, Optional[T]]:
        # Caller holds the lock.
        entry = self._store.get(key)
        if entry is None:
            self._misses += 1
            return False, None

        value, expiry = entry
        if self.clock() > expiry:
            del self._store[key]
            self._logger.debug("Cache entry expired", extra={"key": key})
            self._misses += 1
            return False, None

        self._store.move_to_end(key)
        self._hits += 1
        return True, value

    def get(self, key: str) -> Optional[T]:
        """Return the cached value, or None if missing or expired."""
        with self._lock:
            _, value = self._lookup(key)
            return value

    def set(self, key: str, value: T, ttl: Optional[float] = None) -> None:
        """Store ``value``; ``ttl`` overrides the default time-to-live."""
        effective_ttl = ttl if ttl is not None else self.default_ttl_seconds
        expiry = self.clock() + effective_ttl if effective_ttl is not None else _NO_EXPIRY

        with self._lock:
            if key in self._store:
                self._store.move_to_end(key)
            self._store[key] = (value, expiry)

            while self.max_size is not None and len(self._store) > self.max_size:
                evicted, _ = self._store.popitem(last=False)
                self._evictions += 1
                self._logger.debug(
                    "Cache evicted entry",
                    extra={"key": evicted, "reason": "max_size"},
                )

    def get_or_compute(self, key: str, compute_fn: Callable[[], T]) -> T:
        """Cache-aside lookup.

        A stored None counts as a hit, so compute functions returning None
        are not re-run. ``compute_fn`` runs outside the lock; exceptions
        propagate and nothing is stored.
        """
        with self._lock:
            found, value = self._lookup(key)
        if found:
            self._logger.debug("Cache hit", extra={"key": key})
            return value  # type: ignore[return-value]

        self._logger.debug("Cache miss, computing", extra={"key": key})
        computed = compute_fn()
        self.set(key, computed)
        return computed

    def clear(self) -> int:
        """Drop every entry and reset statistics."""
        with self._lock:
            count = len(self._store)
            self._store.clear()
            self._hits = 0
            self._misses = 0
            self._evictions = 0
            self._logger.info("Cache cleared", extra={"entries_cleared": count})
            return count

    def invalidate(self, key: str) -> bool:
        with self._lock:
            if self._store.pop(key, None) is None:
                return False
            self._logger.debug("Cache entry invalidated", extra={"key": key})
            return True

    def size(self) -> int:
        with self._lock:
            return len(self._store)

    def stats(self) -> Dict[str, Any]:
        """Return hit/miss/eviction counters and current size."""
        with self._lock:
            total = self._hits + self._misses
            hit_rate = (self._hits / total * 100) if total > 0 else 0.0
            return {
                "size": len(self._store),
                "hits": self._hits,
                "misses": self._misses,
                "evictions": self._evictions,
                "hit_rate_percent": round(hit_rate, 1),
            }

    def keys(self) -> list[str]:
        """Return keys from least to most recently used."""
        with self._lock:
            return list(self._store.keys())

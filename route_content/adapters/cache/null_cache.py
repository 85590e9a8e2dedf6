"""Null cache - always misses.

Used when caching is disabled by configuration and in test fixtures,
so that a resolver never sees fragments produced by a previous test.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass
class NullCache(Generic[T]):
    """No-op CachePort implementation.

    Every get() returns None and every get_or_compute() calls the
    compute function. ``computations`` counts those calls, which lets
    tests assert how often the resolver rendered a fragment.
    """

    name: str = "null"
    computations: int = field(default=0, repr=False)

    def get(self, key: str) -> Optional[T]:
        return None

    def set(self, key: str, value: T, ttl: Optional[float] = None) -> None:
        pass

    def get_or_compute(self, key: str, compute_fn: Callable[[], T]) -> T:
        self.computations += 1
        return compute_fn()

    def clear(self) -> int:
        return 0

    def invalidate(self, key: str) -> bool:
        return False

    def size(self) -> int:
        return 0

    def stats(self) -> Dict[str, int]:
        return {
            "size": 0,
            "hits": 0,
            "misses": self.computations,
            "evictions": 0,
            "hit_rate_percent": 0,
        }

    def keys(self) -> list[str]:
        return []

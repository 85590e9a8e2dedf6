"""Cache port - Injectable caching abstraction.

Generated fallback fragments are memoized through this protocol instead
of a module-level map, so every resolver owns an explicit cache with a
defined lifecycle and tests can run against a fresh, isolated one.
"""

from __future__ import annotations

from typing import Callable, Optional, Protocol, TypeVar

T = TypeVar("T")


class CachePort(Protocol[T]):
    """Port for caching.

    Implementations:
    - adapters/cache/memory_cache.py (InMemoryCache) - Production
    - adapters/cache/null_cache.py (NullCache) - Testing
    """

    def get(self, key: str) -> Optional[T]:
        """Get a value from the cache.

        Returns:
            The cached value, or None if not found or expired.
        """
        ...

    def set(self, key: str, value: T) -> None:
        """Store a value under ``key``."""
        ...

    def get_or_compute(self, key: str, compute_fn: Callable[[], T]) -> T:
        """Return the cached value, or compute, store and return it.

        Exceptions raised by ``compute_fn`` propagate and nothing is stored.
        """
        ...

    def clear(self) -> int:
        """Drop every entry.

        Returns:
            Number of entries that were cleared.
        """
        ...

    def invalidate(self, key: str) -> bool:
        """Drop one entry.

        Returns:
            True if the key existed and was removed, False otherwise.
        """
        ...

    def size(self) -> int:
        """Return the number of entries in the cache."""
        ...

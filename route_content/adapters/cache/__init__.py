"""Cache adapters - Implementations of the CachePort.

Available implementations:
- InMemoryCache: Thread-safe LRU cache with optional TTL
- NullCache: No-op cache for tests and disabled caching (always misses)
"""

from .memory_cache import InMemoryCache
from .null_cache import NullCache

__all__ = ["InMemoryCache", "NullCache"]

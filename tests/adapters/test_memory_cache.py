"""Tests for the in-memory LRU cache and the null cache."""

from route_content.adapters.cache import InMemoryCache, NullCache


class FakeClock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


class TestInMemoryCache:
    """Test suite for InMemoryCache."""

    def test_get_and_set(self):
        cache = InMemoryCache()
        cache.set("a", 1)

        assert cache.get("a") == 1
        assert cache.get("missing") is None
        assert cache.size() == 1

    def test_get_or_compute_computes_once(self):
        cache = InMemoryCache()
        calls = []

        def compute():
            calls.append(1)
            return "value"

        assert cache.get_or_compute("k", compute) == "value"
        assert cache.get_or_compute("k", compute) == "value"
        assert len(calls) == 1

        stats = cache.stats()
        assert stats["hits"] == 1
        assert stats["misses"] == 1

    def test_stored_none_is_a_hit(self):
        cache = InMemoryCache()
        calls = []

        def compute():
            calls.append(1)
            return None

        cache.get_or_compute("k", compute)
        cache.get_or_compute("k", compute)
        assert len(calls) == 1

    def test_compute_errors_are_not_stored(self):
        cache = InMemoryCache()

        def boom():
            raise ValueError("nope")

        try:
            cache.get_or_compute("k", boom)
        except ValueError:
            pass
        assert cache.size() == 0

    def test_lru_eviction(self):
        cache = InMemoryCache(max_size=2)
        cache.set("a", 1)
        cache.set("b", 2)
        cache.get("a")  # "b" is now least recently used
        cache.set("c", 3)

        assert cache.keys() == ["a", "c"]
        assert cache.stats()["evictions"] == 1

    def test_ttl_expiry(self):
        clock = FakeClock()
        cache = InMemoryCache(default_ttl_seconds=10, clock=clock)
        cache.set("a", 1)
        cache.set("b", 2, ttl=100)

        clock.now = 11
        assert cache.get("a") is None
        assert cache.get("b") == 2

    def test_invalidate_and_clear(self):
        cache = InMemoryCache()
        cache.set("a", 1)
        cache.set("b", 2)

        assert cache.invalidate("a") is True
        assert cache.invalidate("a") is False
        assert cache.clear() == 1
        assert cache.size() == 0
        assert cache.stats()["hits"] == 0


class TestNullCache:
    """Test suite for NullCache."""

    def test_always_misses(self):
        cache = NullCache()
        cache.set("a", 1)

        assert cache.get("a") is None
        assert cache.size() == 0
        assert cache.invalidate("a") is False
        assert cache.clear() == 0

    def test_counts_computations(self):
        cache = NullCache()
        cache.get_or_compute("k", lambda: 1)
        cache.get_or_compute("k", lambda: 1)

        assert cache.computations == 2
        assert cache.stats()["misses"] == 2

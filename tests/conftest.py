"""Shared fixtures for the route content engine tests."""

from __future__ import annotations

import pytest

from route_content.adapters.cache import InMemoryCache, NullCache
from route_content.config import SiteConfig, reset_config
from route_content.services import FallbackContentResolver

BASE_URL = "https://airlinesmap.com"


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    """Isolate every test from RCE_* variables and cached configuration."""
    for name in ("RCE_SITE_DOMAIN", "RCE_SITE_BRAND_NAME", "RCE_CACHE_ENABLED"):
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def site() -> SiteConfig:
    return SiteConfig(domain=BASE_URL, brand_name="AirlinesMap")


@pytest.fixture
def null_cache() -> NullCache:
    return NullCache()


@pytest.fixture
def memory_cache() -> InMemoryCache:
    return InMemoryCache(name="test", max_size=100)


@pytest.fixture
def resolver(null_cache, site) -> FallbackContentResolver:
    return FallbackContentResolver(cache=null_cache, site=site)

from pathlib import Path

import pytest

from route_content.config import AppConfig, SiteConfig, get_config, reset_config
from route_content.domain.errors import ConfigurationError


def test_defaults():
    config = get_config()

    assert config.site.domain == "https://airlinesmap.com"
    assert config.site.brand_name == "AirlinesMap"
    assert config.site.meta_description_length == 158
    assert config.cache.enabled is True
    assert config.observability.level == "INFO"
    assert isinstance(config.upstream.data_dir, Path)


def test_get_config_is_cached():
    assert get_config() is get_config()


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("RCE_SITE_DOMAIN", "https://staging.airlinesmap.com/")
    monkeypatch.setenv("RCE_CACHE_MAX_SIZE", "50")
    monkeypatch.setenv("RCE_UPSTREAM_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("RCE_LOG_STRUCTURED", "true")
    reset_config()

    config = get_config()

    assert config.site.domain == "https://staging.airlinesmap.com"
    assert config.cache.max_size == 50
    assert config.upstream.content_path == tmp_path / "content"
    assert config.upstream.flights_path == tmp_path / "flights"
    assert config.observability.structured is True


def test_project_root_holds_the_package():
    assert (AppConfig().project_root / "route_content").is_dir()


def test_relative_domain_is_rejected(monkeypatch):
    monkeypatch.setenv("RCE_SITE_DOMAIN", "airlinesmap.com")

    with pytest.raises(ConfigurationError) as excinfo:
        SiteConfig()
    assert excinfo.value.setting_name == "domain"


def test_meta_description_length_needs_room_for_ellipsis():
    with pytest.raises(ConfigurationError) as excinfo:
        SiteConfig(meta_description_length=1)
    assert excinfo.value.setting_name == "meta_description_length"
    assert SiteConfig(meta_description_length=2).meta_description_length == 2

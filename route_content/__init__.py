"""Route content engine.

Turns a URL route (flight, airport, hotel or airline page) and a locale
into a complete, de-duplicated content bundle, falling back from
upstream content to pre-authored per-locale templates to English
defaults. Also provides slug parsing, template selection, flight
metrics and canonical URLs.
"""

from .config import AppConfig, get_config, reset_config
from .domain.models import ContentBundle, Locale, RouteDescriptor, TemplateType
from .routing import alternate_urls, canonical_url, parse_path, parse_slug, select_template
from .services import FallbackContentResolver, PageResult, PageService

__all__ = [
    "AppConfig",
    "get_config",
    "reset_config",
    "ContentBundle",
    "Locale",
    "RouteDescriptor",
    "TemplateType",
    "parse_slug",
    "parse_path",
    "select_template",
    "canonical_url",
    "alternate_urls",
    "FallbackContentResolver",
    "PageService",
    "PageResult",
]

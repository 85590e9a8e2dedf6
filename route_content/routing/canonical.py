"""Canonical and alternate URLs for SEO link tags.

English pages live at the unprefixed root; every other locale is
prefixed ``/{locale}/``. All functions are pure string computation; the
base URL defaults to the configured site domain.
"""

from __future__ import annotations

from typing import Optional, Union

from ..config import get_config
from ..domain.models import Locale
from ..i18n.locales import DEFAULT_LOCALE, SUPPORTED_LOCALES, is_supported, normalize


def _base(base_url: Optional[str]) -> str:
    return (base_url or get_config().site.domain).rstrip("/")


def _clean_path(path: str) -> str:
    """Drop leading slashes and an existing locale prefix."""
    clean = (path or "").lstrip("/")
    head, _, tail = clean.partition("/")
    if is_supported(head.lower()):
        clean = tail
    return clean


def _join(base: str, locale: Locale, clean_path: str) -> str:
    if locale == DEFAULT_LOCALE:
        return f"{base}/{clean_path}"
    return f"{base}/{locale.value}/{clean_path}"


def canonical_url(
    path: str,
    locale: Union[str, Locale, None],
    base_url: Optional[str] = None,
) -> str:
    """Full canonical URL of ``path`` in ``locale``.

    Example:
        canonical_url("/flights/jfk-agp", "fr")
        -> "https://airlinesmap.com/fr/flights/jfk-agp"
    """
    return _join(_base(base_url), normalize(locale), _clean_path(path))


def alternate_urls(path: str, base_url: Optional[str] = None) -> dict[str, str]:
    """hreflang alternates: one entry per locale plus region-qualified tags."""
    base = _base(base_url)
    clean = _clean_path(path)
    urls = {locale.value: _join(base, locale, clean) for locale in SUPPORTED_LOCALES}
    urls.update(
        {locale.region_tag: _join(base, locale, clean) for locale in SUPPORTED_LOCALES}
    )
    return urls


def flight_canonical_url(slug: str, locale, base_url: Optional[str] = None) -> str:
    return canonical_url(f"/flights/{slug}", locale, base_url)


def airport_canonical_url(slug: str, locale, base_url: Optional[str] = None) -> str:
    return canonical_url(f"/airports/{slug}", locale, base_url)


def hotel_canonical_url(airport_code: str, locale, base_url: Optional[str] = None) -> str:
    return canonical_url(f"/hotels/{airport_code.lower()}-airport-hotels", locale, base_url)


def airline_canonical_url(
    airline: str,
    route: Optional[str] = None,
    locale=DEFAULT_LOCALE,
    base_url: Optional[str] = None,
) -> str:
    if route:
        return canonical_url(f"/airlines/{airline}/{route}", locale, base_url)
    return canonical_url(f"/airlines/{airline}", locale, base_url)


def flights_from_canonical_url(airport: str, locale, base_url: Optional[str] = None) -> str:
    return canonical_url(f"/flights/from/{airport}", locale, base_url)


def static_page_canonical_url(page: str, locale, base_url: Optional[str] = None) -> str:
    return canonical_url(f"/{page.lstrip('/')}", locale, base_url)

"""Locale resolution.

``normalize`` is total and idempotent: any tag, None, or an already
normalized Locale maps to one of the supported locales, with English as
the catch-all.
"""

from __future__ import annotations

from typing import Optional, Union

from ..domain.models import Locale

DEFAULT_LOCALE = Locale.EN
SUPPORTED_LOCALES: tuple[Locale, ...] = tuple(Locale)

_BY_TAG = {locale.value: locale for locale in Locale}


def normalize(tag: Optional[Union[str, Locale]]) -> Locale:
    """Map a locale tag to a supported Locale.

    Case and surrounding whitespace are ignored, so "FR" and " fr " give
    Locale.FR. Anything else, including None and region-qualified tags
    such as "fr-FR", gives Locale.EN.
    """
    if isinstance(tag, Locale):
        return tag
    if not tag:
        return DEFAULT_LOCALE
    return _BY_TAG.get(tag.strip().lower(), DEFAULT_LOCALE)


def is_supported(tag: Optional[str]) -> bool:
    """True if ``tag`` is exactly one of the supported locale values."""
    return tag in _BY_TAG


def language_id(locale: Union[str, Locale, None]) -> int:
    """Upstream API language id (en=1, es=2, ru=3, fr=4)."""
    return normalize(locale).language_id


def locale_from_language_id(lang_id: int) -> Locale:
    """Inverse of language_id; unknown ids map to English."""
    for locale in Locale:
        if locale.language_id == lang_id:
            return locale
    return DEFAULT_LOCALE

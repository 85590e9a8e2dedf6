"""Locale resolution, phrase tables and pre-authored content templates."""

from .calendar_names import canonical_month, canonical_weekday, month_name, weekday_name
from .cities import IATA_CITIES, city_for_code, city_or_code
from .locales import (
    DEFAULT_LOCALE,
    SUPPORTED_LOCALES,
    is_supported,
    language_id,
    locale_from_language_id,
    normalize,
)
from .phrases import PHRASE_KEYS, phrase, phrases_for
from .templates import fill

__all__ = [
    "DEFAULT_LOCALE",
    "SUPPORTED_LOCALES",
    "normalize",
    "is_supported",
    "language_id",
    "locale_from_language_id",
    "PHRASE_KEYS",
    "phrases_for",
    "phrase",
    "fill",
    "IATA_CITIES",
    "city_for_code",
    "city_or_code",
    "weekday_name",
    "month_name",
    "canonical_weekday",
    "canonical_month",
]

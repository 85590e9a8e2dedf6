"""URL routing: slug parsing, template selection and canonical URLs."""

from .canonical import (
    airline_canonical_url,
    airport_canonical_url,
    alternate_urls,
    canonical_url,
    flight_canonical_url,
    flights_from_canonical_url,
    hotel_canonical_url,
    static_page_canonical_url,
)
from .slug_parser import RoutedPath, airport_code_from_slug, parse_path, parse_slug
from .template_selector import select_template

__all__ = [
    "RoutedPath",
    "parse_slug",
    "parse_path",
    "airport_code_from_slug",
    "select_template",
    "canonical_url",
    "alternate_urls",
    "flight_canonical_url",
    "airport_canonical_url",
    "hotel_canonical_url",
    "airline_canonical_url",
    "flights_from_canonical_url",
    "static_page_canonical_url",
]

"""Upstream adapters: payload parsing and content / flight-data sources."""

from .json_source import JsonFileContentSource, JsonFileFlightSource
from .payload import parse_aggregates, parse_faq_field, parse_text_field, parse_upstream_payload
from .static_source import (
    NullContentSource,
    NullFlightSource,
    StaticContentSource,
    StaticFlightSource,
    route_key,
)

__all__ = [
    "parse_upstream_payload",
    "parse_text_field",
    "parse_faq_field",
    "parse_aggregates",
    "StaticContentSource",
    "NullContentSource",
    "StaticFlightSource",
    "NullFlightSource",
    "JsonFileContentSource",
    "JsonFileFlightSource",
    "route_key",
]

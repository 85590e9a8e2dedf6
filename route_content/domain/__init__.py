"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the engine. No external dependencies.
"""

from .errors import (
    ConfigurationError,
    ContentEngineError,
    DuplicateSectionError,
    InterpolationError,
    UpstreamPayloadError,
)
from .models import (
    ABSENT,
    CANONICAL_SECTIONS,
    EMPTY_UPSTREAM,
    Absent,
    ContentBundle,
    ContentSource,
    DerivedMetrics,
    EntityType,
    Faq,
    Locale,
    NormalizedFlight,
    PerLocale,
    Plain,
    PriceAggregates,
    PriceCard,
    RouteDescriptor,
    SectionKey,
    SeoMeta,
    TemplateType,
    UpstreamContent,
    UpstreamField,
)

__all__ = [
    # Models
    "Locale",
    "EntityType",
    "TemplateType",
    "SectionKey",
    "CANONICAL_SECTIONS",
    "ContentSource",
    "RouteDescriptor",
    "Faq",
    "Plain",
    "PerLocale",
    "Absent",
    "ABSENT",
    "UpstreamField",
    "UpstreamContent",
    "EMPTY_UPSTREAM",
    "PriceAggregates",
    "NormalizedFlight",
    "DerivedMetrics",
    "PriceCard",
    "SeoMeta",
    "ContentBundle",
    # Errors
    "ContentEngineError",
    "InterpolationError",
    "DuplicateSectionError",
    "UpstreamPayloadError",
    "ConfigurationError",
]

"""Immutable domain models for the route content engine.

All models are frozen dataclasses with slots. They carry no external
dependencies and describe the concepts shared by the routing, i18n,
metrics and resolver layers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, Mapping, Optional, TypeVar, Union

T = TypeVar("T")


class Locale(str, Enum):
    """Supported page languages.

    The numeric id is the language id expected by the upstream content API.
    """

    EN = "en"
    ES = "es"
    RU = "ru"
    FR = "fr"

    @property
    def language_id(self) -> int:
        return _LANGUAGE_IDS[self]

    @property
    def region_tag(self) -> str:
        """Region-qualified tag used in hreflang alternates (e.g. 'en-US')."""
        return _REGION_TAGS[self]


_LANGUAGE_IDS = {Locale.EN: 1, Locale.ES: 2, Locale.RU: 3, Locale.FR: 4}
_REGION_TAGS = {
    Locale.EN: "en-US",
    Locale.ES: "es-ES",
    Locale.RU: "ru-RU",
    Locale.FR: "fr-FR",
}


class EntityType(Enum):
    """Kind of entity a route descriptor points at."""

    FLIGHT = "flight"
    AIRPORT = "airport"
    HOTEL = "hotel"
    AIRLINE = "airline"


class TemplateType(Enum):
    """Page template consuming a content bundle."""

    FLIGHT = "flight"
    AIRPORT = "airport"
    HOTEL = "hotel"
    AIRLINE = "airline"


class SectionKey(str, Enum):
    """Content sections of a bundle, in canonical render order."""

    BOOKING_STEPS = "booking_steps"
    CANCELLATION_POLICY = "cancellation_policy"
    CLASSES = "classes"
    DESTINATIONS_OVERVIEW = "destinations_overview"
    POPULAR_DESTINATIONS = "popular_destinations"
    PLACES_TO_VISIT = "places_to_visit"
    CITY_INFO = "city_info"
    BEST_TIME_TO_VISIT = "best_time_to_visit"


CANONICAL_SECTIONS: tuple[SectionKey, ...] = tuple(SectionKey)


class ContentSource(str, Enum):
    """Tier of the fallback chain that produced a piece of content."""

    UPSTREAM = "upstream"
    UPSTREAM_LOCALE = "upstream_locale"
    UPSTREAM_FALLBACK_LOCALE = "upstream_fallback_locale"
    GENERATED = "generated"
    DEFAULT = "default"


@dataclass(frozen=True, slots=True)
class RouteDescriptor:
    """Typed route key parsed from a URL segment.

    Attributes:
        entity_type: What the page is about
        departure_code: Departure (or sole) IATA code, upper-cased
        arrival_code: Arrival IATA code, empty for single-airport routes
        raw_slug: The untouched URL segment, kept for diagnostics
        airline_slug: Airline identifier for airline pages, empty otherwise
    """

    entity_type: EntityType
    departure_code: str = ""
    arrival_code: str = ""
    raw_slug: str = ""
    airline_slug: str = ""

    @property
    def has_arrival(self) -> bool:
        return bool(self.arrival_code)

    @property
    def entity_ids(self) -> tuple[str, ...]:
        """Identifiers handed to upstream fetchers, in a stable order."""
        ids = [self.airline_slug, self.departure_code, self.arrival_code]
        return tuple(i for i in ids if i)


@dataclass(frozen=True, slots=True)
class Faq:
    """A single question/answer pair."""

    q: str
    a: str


# Upstream content is modelled as a tagged variant instead of loosely
# typed objects, so the fallback chain can dispatch on the variant.


@dataclass(frozen=True, slots=True)
class Plain(Generic[T]):
    """Upstream value that is the same for every locale."""

    value: T


@dataclass(frozen=True, slots=True)
class PerLocale(Generic[T]):
    """Upstream value keyed by locale tag, in the order received."""

    values: tuple[tuple[str, T], ...]

    def get(self, tag: str) -> Optional[T]:
        for key, value in self.values:
            if key == tag:
                return value
        return None


@dataclass(frozen=True, slots=True)
class Absent:
    """Upstream did not provide the field."""


ABSENT = Absent()

UpstreamField = Union[Plain[T], PerLocale[T], Absent]


@dataclass(frozen=True, slots=True)
class PriceAggregates:
    """Day/month price signals supplied by upstream, separate from flights.

    Attributes:
        cheapest_day: Explicit cheapest weekday, if upstream computed it
        cheapest_month: Explicit cheapest month, if upstream computed it
        weekly_prices: Weekday name -> price curve
        monthly_prices: Month name -> price curve
        round_trip_from: Lowest round-trip fare advertised upstream
        one_way_from: Lowest one-way fare advertised upstream
    """

    cheapest_day: Optional[str] = None
    cheapest_month: Optional[str] = None
    weekly_prices: tuple[tuple[str, float], ...] = field(default_factory=tuple)
    monthly_prices: tuple[tuple[str, float], ...] = field(default_factory=tuple)
    round_trip_from: float = 0.0
    one_way_from: float = 0.0


@dataclass(frozen=True, slots=True)
class UpstreamContent:
    """Read-only, partially populated content returned by the content API.

    ``sections`` only holds keys upstream actually sent; lookups for other
    keys yield ``ABSENT``. A missing payload is represented by ``EMPTY``.
    """

    title: UpstreamField[str] = ABSENT
    description: UpstreamField[str] = ABSENT
    sections: Mapping[SectionKey, UpstreamField[str]] = field(default_factory=dict)
    faqs: UpstreamField[tuple[Faq, ...]] = ABSENT
    airline_name: UpstreamField[str] = ABSENT
    departure_city: UpstreamField[str] = ABSENT
    arrival_city: UpstreamField[str] = ABSENT
    aggregates: Optional[PriceAggregates] = None

    def section(self, key: SectionKey) -> UpstreamField[str]:
        return self.sections.get(key, ABSENT)


EMPTY_UPSTREAM = UpstreamContent()


@dataclass(frozen=True, slots=True)
class NormalizedFlight:
    """A flight record after in-process normalization.

    Attributes:
        origin: Departure IATA code
        destination: Arrival IATA code
        city: Arrival city display name
        airport: Arrival airport display name
        price: Canonical price string (e.g. '$129')
        price_value: Numeric price, 0.0 when upstream sent nothing usable
        duration: Human-readable duration
        airline: Carrier display name
        airline_code: Carrier IATA code or 'N/A'
        stops: Number of stops
        is_direct: True when the flight has no stops
        flights_per_week: Weekly frequency estimate
        departure_time: Departure time as received
    """

    origin: str
    destination: str
    city: str
    airport: str
    price: str
    price_value: float
    duration: str
    airline: str
    airline_code: str = "N/A"
    stops: int = 0
    is_direct: bool = True
    flights_per_week: int = 0
    departure_time: str = ""


@dataclass(frozen=True, slots=True)
class DerivedMetrics:
    """Statistics computed from a list of normalized flights.

    An empty flight list yields the zero record, never None.
    """

    total_flights: int = 0
    avg_price: int = 0
    cheapest_price: float = 0.0
    most_expensive_price: float = 0.0
    cheapest_weekday: str = "Monday"
    cheapest_month: str = "January"
    direct_flights: int = 0
    direct_ratio: float = 0.0
    destinations: int = 0
    round_trip_from: float = 0.0
    one_way_from: float = 0.0


@dataclass(frozen=True, slots=True)
class PriceCard:
    """A headline price card shown above the flight list."""

    kind: str
    label: str
    value: str
    description: str


@dataclass(frozen=True, slots=True)
class SeoMeta:
    """SEO strings consumed by the metadata layer."""

    keywords: str
    og_title: str
    og_description: str
    meta_description: str = ""


@dataclass(frozen=True)
class ContentBundle:
    """Fully resolved, locale-specific content for one route.

    Attributes:
        locale: Locale the bundle was resolved for
        title: Page title
        description: Page description
        sections: Section key -> HTML, each key present exactly once,
            in canonical order
        faqs: Ordered FAQ entries
        ui: Phrase table for the locale
        seo: SEO strings
        price_cards: Headline price cards
        sources: Which fallback tier produced each field
    """

    locale: Locale
    title: str
    description: str
    sections: Mapping[SectionKey, str]
    faqs: tuple[Faq, ...]
    ui: Mapping[str, str]
    seo: SeoMeta
    price_cards: tuple[PriceCard, ...] = field(default_factory=tuple)
    sources: Mapping[str, ContentSource] = field(default_factory=dict)

    def section(self, key: SectionKey) -> str:
        return self.sections[key]

"""Tests for end-to-end page rendering."""

import pytest

from route_content.adapters.upstream import (
    NullContentSource,
    NullFlightSource,
    StaticContentSource,
    StaticFlightSource,
)
from route_content.domain.errors import DuplicateSectionError
from route_content.domain.models import (
    ContentSource,
    EntityType,
    Locale,
    SectionKey,
    TemplateType,
)
from route_content.services import PageService

BASE_URL = "https://airlinesmap.com"

PAYLOADS = {
    "jfk-agp": {
        "title": {"en": "New York to Malaga flights", "fr": "Vols New York - Malaga"},
        "cancellation": {"en": "<p>Free cancellation within 24 hours.</p>"},
        "cheapest_month": "mar",
        "round_trip_start": 702,
    },
    "jfk-agp@2": {
        "title": "Vuelos Nueva York - Málaga",
    },
}

RECORDS = {
    "jfk-agp": [
        {"iata_from": "JFK", "iata_to": "AGP", "price": 389, "airline": "Delta Air Lines", "stops": 0},
        {"iata_from": "JFK", "iata_to": "AGP", "price": "455", "airline": "Iberia", "stops": 1},
    ],
}


class ExplodingContentSource:
    def fetch_content(self, entity_ids, language_id):
        raise ConnectionError("content API down")


class ExplodingFlightSource:
    def fetch_flight_data(self, entity_ids):
        raise TimeoutError("flight API timed out")


@pytest.fixture
def content_source():
    return StaticContentSource(PAYLOADS)


@pytest.fixture
def pages(resolver, content_source):
    return PageService(
        resolver=resolver,
        content_source=content_source,
        flight_source=StaticFlightSource(RECORDS),
        base_url=BASE_URL,
    )


class TestRender:
    """Suite for PageService.render."""

    def test_locale_prefixed_flight_page(self, pages, content_source):
        result = pages.render("/fr/flights/jfk-agp")

        assert result.template == TemplateType.FLIGHT
        assert result.locale == Locale.FR
        assert result.routed.route.entity_type == EntityType.FLIGHT
        assert result.bundle.title == "Vols New York - Malaga"
        assert result.bundle.sources["title"] == ContentSource.UPSTREAM_LOCALE
        assert content_source.calls == [("jfk-agp", 4)]

    def test_english_upstream_prose_on_french_page(self, pages):
        result = pages.render("/fr/flights/jfk-agp")

        assert result.bundle.section(SectionKey.CANCELLATION_POLICY) == "<p>Free cancellation within 24 hours.</p>"
        assert result.bundle.sources["cancellation_policy"] == ContentSource.UPSTREAM_FALLBACK_LOCALE

    def test_language_specific_payload(self, pages):
        result = pages.render("/es/flights/jfk-agp")
        assert result.bundle.title == "Vuelos Nueva York - Málaga"

    def test_flights_and_metrics(self, pages):
        result = pages.render("/flights/jfk-agp")

        assert len(result.flights) == 2
        assert result.metrics.total_flights == 2
        assert result.metrics.cheapest_price == 389.0
        assert result.metrics.round_trip_from == 702.0
        assert result.metrics.cheapest_month == "March"
        assert result.bundle.price_cards[0].value == "$702"
        assert result.bundle.price_cards[1].value == "$389"

    def test_canonical_and_alternates(self, pages):
        result = pages.render("/fr/flights/jfk-agp?utm_source=x")

        assert result.canonical_url == f"{BASE_URL}/fr/flights/jfk-agp"
        assert result.alternate_urls["en"] == f"{BASE_URL}/flights/jfk-agp"
        assert result.alternate_urls["ru-RU"] == f"{BASE_URL}/ru/flights/jfk-agp"

    def test_locale_argument_overrides_prefix(self, pages):
        result = pages.render("/fr/flights/jfk-agp", locale="ru")

        assert result.locale == Locale.RU
        assert result.canonical_url == f"{BASE_URL}/ru/flights/jfk-agp"

    def test_airline_route_page(self, pages):
        result = pages.render("/airlines/air-india-ai-aic-in/del-bom")

        assert result.template == TemplateType.AIRLINE
        assert result.bundle.title == "Air India flights from Delhi to Mumbai"
        assert result.flights == ()

    def test_hotel_page(self, pages):
        result = pages.render("/hotels/del-airport-hotels")

        assert result.template == TemplateType.HOTEL
        assert result.bundle.title == "Hotels near Delhi Airport (DEL)"

    def test_malformed_slug_still_renders(self, pages):
        result = pages.render("/flights/jfk--")

        assert result.template == TemplateType.AIRPORT
        assert result.routed.route.departure_code == "JFK--"

    def test_unknown_namespace_renders_nothing(self, pages):
        assert pages.render("/blog/summer-deals") is None

    @pytest.mark.parametrize("path", ["", "/", "/flights", "/fr", "/flights/a/b/c"])
    def test_unusable_paths(self, pages, path):
        assert pages.render(path) is None


class TestUpstreamFailures:
    """Failing fetches degrade to generated content."""

    def test_exploding_sources_are_treated_as_missing(self, resolver):
        pages = PageService(
            resolver=resolver,
            content_source=ExplodingContentSource(),
            flight_source=ExplodingFlightSource(),
            base_url=BASE_URL,
        )
        result = pages.render("/flights/jfk-agp")

        assert result is not None
        assert result.flights == ()
        assert result.metrics.total_flights == 0
        assert result.bundle.sources["title"] == ContentSource.GENERATED

    def test_matches_null_sources(self, resolver):
        exploding = PageService(resolver, ExplodingContentSource(), ExplodingFlightSource(), BASE_URL)
        empty = PageService(resolver, NullContentSource(), NullFlightSource(), BASE_URL)

        assert exploding.render("/es/flights/jfk-agp").bundle == empty.render("/es/flights/jfk-agp").bundle

    def test_oversized_upstream_price_does_not_fail_the_page(self, resolver):
        source = StaticContentSource({"jfk-agp": {"round_trip_start": 10**400}})
        pages = PageService(resolver, source, StaticFlightSource(RECORDS), BASE_URL)

        result, error = pages.render_safe("/flights/jfk-agp")

        assert error is None
        assert result.metrics.round_trip_from == 778.0

    def test_malformed_payload_fields_are_ignored(self, resolver):
        source = StaticContentSource({"jfk-agp": {"title": 42, "classes": ["nope"]}})
        pages = PageService(resolver, source, NullFlightSource(), BASE_URL)

        bundle = pages.render("/flights/jfk-agp").bundle

        assert bundle.sources["title"] == ContentSource.GENERATED
        assert bundle.sources["classes"] == ContentSource.GENERATED


class TestRenderSafe:
    """Suite for PageService.render_safe."""

    def test_success(self, pages):
        result, error = pages.render_safe("/flights/jfk-agp")

        assert error is None
        assert result.template == TemplateType.FLIGHT

    def test_no_content(self, pages):
        result, error = pages.render_safe("/blog/summer-deals")

        assert result is None
        assert error == "No content for path: /blog/summer-deals"

    def test_engine_error_becomes_message(self, pages, monkeypatch):
        def broken(*args, **kwargs):
            raise DuplicateSectionError("Section 'classes' attached twice", section="classes")

        monkeypatch.setattr(pages.resolver, "resolve", broken)
        result, error = pages.render_safe("/flights/jfk-agp")

        assert result is None
        assert error == "Error: Section 'classes' attached twice"

    def test_unexpected_error_becomes_message(self, pages, monkeypatch):
        def broken(*args, **kwargs):
            raise RuntimeError("boom")

        monkeypatch.setattr(pages.resolver, "resolve", broken)
        result, error = pages.render_safe("/flights/jfk-agp")

        assert result is None
        assert error == "Error: boom"

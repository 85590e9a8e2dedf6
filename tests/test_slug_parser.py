from route_content.domain.models import EntityType, Locale
from route_content.routing import airport_code_from_slug, parse_path, parse_slug


def test_parse_route_slug():
    route = parse_slug("jfk-agp")

    assert route.entity_type == EntityType.FLIGHT
    assert route.departure_code == "JFK"
    assert route.arrival_code == "AGP"
    assert route.raw_slug == "jfk-agp"


def test_parse_airport_slug():
    route = parse_slug("hyd")

    assert route.entity_type == EntityType.AIRPORT
    assert route.departure_code == "HYD"
    assert route.arrival_code == ""
    assert not route.has_arrival


def test_parse_accepts_unknown_codes():
    route = parse_slug("xqz-qqq")
    assert (route.departure_code, route.arrival_code) == ("XQZ", "QQQ")


def test_malformed_slugs_keep_raw_input():
    for slug in ("a-b-c", "-agp", "jfk-", "--"):
        route = parse_slug(slug)
        assert route.entity_type == EntityType.AIRPORT
        assert route.departure_code == slug.upper()
        assert route.arrival_code == ""
        assert route.raw_slug == slug


def test_empty_slug_does_not_raise():
    route = parse_slug("")
    assert route.departure_code == ""
    assert route.raw_slug == ""


def test_entity_ids_order():
    assert parse_slug("jfk-agp").entity_ids == ("JFK", "AGP")
    assert parse_slug("hyd").entity_ids == ("HYD",)


class TestParsePath:
    """Namespaced request paths."""

    def test_flight_path_defaults_to_english(self):
        routed = parse_path("/flights/jfk-agp")

        assert routed is not None
        assert routed.namespace == "flights"
        assert routed.locale == Locale.EN
        assert routed.route.entity_type == EntityType.FLIGHT
        assert routed.path == "/flights/jfk-agp"

    def test_locale_prefix_is_stripped(self):
        routed = parse_path("/fr/flights/jfk-agp")

        assert routed.locale == Locale.FR
        assert routed.path == "/flights/jfk-agp"
        assert routed.route.arrival_code == "AGP"

    def test_flights_from_airport(self):
        routed = parse_path("/es/flights/from/del")

        assert routed.locale == Locale.ES
        assert routed.route.entity_type == EntityType.AIRPORT
        assert routed.route.departure_code == "DEL"

    def test_airport_slug_uses_last_code_token(self):
        routed = parse_path("/airports/a-a-bere-tallo-wata-abu-id")

        assert routed.route.entity_type == EntityType.AIRPORT
        assert routed.route.departure_code == "ABU"

    def test_hotel_paths(self):
        assert parse_path("/hotels/del-airport-hotels").route.departure_code == "DEL"
        assert parse_path("/hotels/bom").route.departure_code == "BOM"
        routed = parse_path("/ru/airport-hotels/hyd")
        assert routed.route.entity_type == EntityType.HOTEL
        assert routed.locale == Locale.RU

    def test_airline_with_and_without_route(self):
        bare = parse_path("/airlines/air-india-ai-aic-in")
        assert bare.route.entity_type == EntityType.AIRLINE
        assert bare.route.airline_slug == "air-india-ai-aic-in"
        assert bare.route.departure_code == ""

        with_route = parse_path("/airlines/air-india-ai-aic-in/del-bom")
        assert with_route.route.departure_code == "DEL"
        assert with_route.route.arrival_code == "BOM"
        assert with_route.route.entity_ids == ("air-india-ai-aic-in", "DEL", "BOM")

    def test_query_string_is_ignored(self):
        routed = parse_path("/flights/jfk-agp?utm_source=x#faq")
        assert routed.route.arrival_code == "AGP"

    def test_unknown_namespace_still_parses(self):
        routed = parse_path("/trains/par-lyo")
        assert routed is not None
        assert routed.namespace == "trains"

    def test_unusable_paths(self):
        assert parse_path("") is None
        assert parse_path("/") is None
        assert parse_path("/fr") is None
        assert parse_path("/flights") is None
        assert parse_path("/flights/a/b/c") is None


def test_airport_code_from_slug_falls_back_to_slug():
    assert airport_code_from_slug("heathrow") == "HEATHROW"

"""Tests for the fallback content resolver."""

import pytest

from route_content.adapters.cache import InMemoryCache
from route_content.adapters.upstream import parse_upstream_payload
from route_content.domain.errors import DuplicateSectionError
from route_content.domain.models import (
    CANONICAL_SECTIONS,
    ContentSource,
    DerivedMetrics,
    EntityType,
    Faq,
    Locale,
    PerLocale,
    Plain,
    RouteDescriptor,
    SectionKey,
    UpstreamContent,
)
from route_content.i18n import templates as tpl
from route_content.routing import parse_slug
from route_content.services import FallbackContentResolver
from route_content.services.content_resolver import (
    _attach,
    airline_display_name,
    from_upstream,
    strip_html,
    truncate,
)

FLIGHT = parse_slug("jfk-agp")
AIRPORT = parse_slug("hyd")
HOTEL = RouteDescriptor(entity_type=EntityType.HOTEL, departure_code="DEL", raw_slug="del")
AIRLINE = RouteDescriptor(
    entity_type=EntityType.AIRLINE, airline_slug="air-india-ai-aic-in", raw_slug="air-india-ai-aic-in"
)
AIRLINE_ROUTE = RouteDescriptor(
    entity_type=EntityType.AIRLINE,
    departure_code="DEL",
    arrival_code="BOM",
    airline_slug="air-india-ai-aic-in",
)
ALL_ROUTES = [FLIGHT, AIRPORT, HOTEL, AIRLINE, AIRLINE_ROUTE]


class TestBundleShape:
    """Every bundle carries each canonical section exactly once."""

    @pytest.mark.parametrize("route", ALL_ROUTES, ids=lambda r: r.entity_type.value)
    @pytest.mark.parametrize("locale", list(Locale))
    def test_exact_canonical_sections(self, resolver, route, locale):
        bundle = resolver.resolve(route, locale)

        assert tuple(bundle.sections) == CANONICAL_SECTIONS
        assert all(html.strip() for html in bundle.sections.values())

    @pytest.mark.parametrize("route", ALL_ROUTES, ids=lambda r: r.entity_type.value)
    def test_generated_content_has_no_unfilled_placeholders(self, resolver, route):
        for locale in Locale:
            bundle = resolver.resolve(route, locale)
            texts = [bundle.title, bundle.description, *bundle.sections.values()]
            texts += [part for faq in bundle.faqs for part in (faq.q, faq.a)]
            assert not any("{" in text or "}" in text for text in texts)

    def test_attach_rejects_duplicates(self):
        sections = {}
        _attach(sections, SectionKey.CLASSES, "<p>a</p>")

        with pytest.raises(DuplicateSectionError) as excinfo:
            _attach(sections, SectionKey.CLASSES, "<p>b</p>")
        assert excinfo.value.section == "classes"

    def test_ui_is_the_locale_phrase_table(self, resolver):
        assert resolver.resolve(FLIGHT, "es").ui["book_now"] == "Reservar Ahora"


class TestDeterminism:
    """Equal inputs give equal bundles."""

    @pytest.mark.parametrize("route", ALL_ROUTES, ids=lambda r: r.entity_type.value)
    def test_resolve_twice(self, resolver, route):
        upstream = UpstreamContent(title=PerLocale((("en", "Hello"),)))
        metrics = DerivedMetrics(total_flights=2, avg_price=150, cheapest_price=120.0, one_way_from=120.0)

        for locale in Locale:
            first = resolver.resolve(route, locale, upstream, metrics)
            second = resolver.resolve(route, locale, upstream, metrics)
            assert first == second

    def test_memoized_output_matches_uncached_output(self, site):
        cached = FallbackContentResolver(cache=InMemoryCache(name="t"), site=site)
        uncached = FallbackContentResolver(site=site)

        for _ in range(2):
            assert cached.resolve(FLIGHT, "ru") == uncached.resolve(FLIGHT, "ru")

    def test_cache_is_used_for_generated_fragments(self, site):
        cache = InMemoryCache(name="t")
        resolver = FallbackContentResolver(cache=cache, site=site)

        resolver.resolve(FLIGHT, "fr")
        misses = cache.stats()["misses"]
        resolver.resolve(FLIGHT, "fr")

        assert cache.size() > 0
        assert cache.stats()["misses"] == misses
        assert cache.stats()["hits"] >= misses

    def test_memo_key_separates_values_with_delimiters(self, site):
        cache = InMemoryCache(name="t")
        cached = FallbackContentResolver(cache=cache, site=site)
        uncached = FallbackContentResolver(site=site)
        first = UpstreamContent(
            departure_city=Plain("A|arrival_city=B"), arrival_city=Plain("C"), airline_name=Plain("D")
        )
        second = UpstreamContent(
            departure_city=Plain("A"), arrival_city=Plain("B|arrival_city=C"), airline_name=Plain("D")
        )

        cached.resolve(FLIGHT, "en", first)
        bundle = cached.resolve(FLIGHT, "en", second)

        assert bundle.title == uncached.resolve(FLIGHT, "en", second).title
        assert bundle.title.startswith("Cheap flights from A to B|arrival_city=C")

    def test_normalizes_locale(self, resolver):
        assert resolver.resolve(FLIGHT, "de") == resolver.resolve(FLIGHT, "en")
        assert resolver.resolve(FLIGHT, None).locale == Locale.EN


class TestFallbackPriority:
    """Upstream first, then per-locale map, then generated, then default."""

    @pytest.mark.parametrize("locale", list(Locale))
    def test_plain_upstream_wins_for_every_locale(self, resolver, locale):
        upstream = UpstreamContent(
            title=Plain("Upstream title"),
            sections={SectionKey.CLASSES: Plain("<p>Upstream classes</p>")},
        )
        bundle = resolver.resolve(FLIGHT, locale, upstream)

        assert bundle.title == "Upstream title"
        assert bundle.section(SectionKey.CLASSES) == "<p>Upstream classes</p>"
        assert bundle.sources["title"] == ContentSource.UPSTREAM
        assert bundle.sources["classes"] == ContentSource.UPSTREAM
        assert bundle.sources["booking_steps"] == ContentSource.GENERATED

    def test_requested_locale_from_map(self, resolver):
        upstream = UpstreamContent(
            sections={SectionKey.CITY_INFO: PerLocale((("en", "<p>EN</p>"), ("fr", "<p>FR</p>")))}
        )
        bundle = resolver.resolve(FLIGHT, "fr", upstream)

        assert bundle.section(SectionKey.CITY_INFO) == "<p>FR</p>"
        assert bundle.sources["city_info"] == ContentSource.UPSTREAM_LOCALE

    def test_english_only_upstream_is_shown_verbatim(self, resolver):
        upstream = UpstreamContent(
            sections={SectionKey.CANCELLATION_POLICY: PerLocale((("en", "<p>English policy</p>"),))}
        )
        bundle = resolver.resolve(FLIGHT, "ru", upstream)
        generated = resolver.resolve(FLIGHT, "ru").section(SectionKey.CANCELLATION_POLICY)

        assert bundle.section(SectionKey.CANCELLATION_POLICY) == "<p>English policy</p>"
        assert bundle.section(SectionKey.CANCELLATION_POLICY) != generated
        assert bundle.sources["cancellation_policy"] == ContentSource.UPSTREAM_FALLBACK_LOCALE

    def test_first_non_empty_entry_when_no_english(self, resolver):
        upstream = UpstreamContent(
            description=PerLocale((("es", ""), ("ru", "Описание"), ("fr", "Description")))
        )
        assert resolver.resolve(FLIGHT, "en", upstream).description == "Описание"

    def test_blank_plain_value_falls_through(self, resolver):
        upstream = UpstreamContent(title=Plain("   "))
        bundle = resolver.resolve(FLIGHT, "en", upstream)

        assert bundle.sources["title"] == ContentSource.GENERATED

    def test_region_tag_key_matches_locale(self, resolver):
        upstream = UpstreamContent(title=PerLocale((("en", "Hello"), ("es-es", "Hola"))))
        assert resolver.resolve(FLIGHT, "es", upstream).title == "Hola"

    def test_null_locale_entry_keeps_english_upstream(self, resolver):
        upstream = parse_upstream_payload({"title": {"en": "English upstream title", "ru": None}})
        bundle = resolver.resolve(FLIGHT, "ru", upstream)

        assert bundle.title == "English upstream title"
        assert bundle.sources["title"] == ContentSource.UPSTREAM_FALLBACK_LOCALE

    def test_null_locale_faq_entry_keeps_english_faqs(self, resolver):
        upstream = parse_upstream_payload({"faqs": {"en": [{"q": "Q?", "a": "A."}], "fr": None}})
        bundle = resolver.resolve(FLIGHT, "fr", upstream)

        assert bundle.faqs == (Faq("Q?", "A."),)

    def test_upstream_faqs_replace_generated_list(self, resolver):
        faqs = (Faq("Q?", "A."),)
        bundle = resolver.resolve(FLIGHT, "fr", UpstreamContent(faqs=PerLocale((("en", faqs),))))

        assert bundle.faqs == faqs
        assert bundle.sources["faqs"] == ContentSource.UPSTREAM_FALLBACK_LOCALE


class TestGeneratedContent:
    """Hand-authored per-locale templates."""

    def test_route_title_uses_both_cities(self, resolver):
        bundle = resolver.resolve(FLIGHT, "en")
        assert bundle.title == "Cheap flights from New York to Malaga | AirlinesMap"

    def test_french_route_title(self, resolver):
        bundle = resolver.resolve(FLIGHT, "fr")
        assert bundle.title == "Vols pas chers de New York à Malaga | AirlinesMap"

    def test_single_city_variant_without_arrival(self, resolver):
        bundle = resolver.resolve(AIRLINE_ROUTE, "en")
        single = resolver.resolve(
            RouteDescriptor(EntityType.AIRLINE, departure_code="DEL", airline_slug="air-india-ai-aic-in"),
            "en",
        )

        assert bundle.title == "Air India flights from Delhi to Mumbai"
        assert single.title == "Air India flights from Delhi"

    def test_airline_without_route_uses_network_copy(self, resolver):
        bundle = resolver.resolve(AIRLINE, "en")

        assert bundle.title == "Air India flights, routes and deals"
        assert bundle.sources["title"] == ContentSource.GENERATED
        assert all(src != ContentSource.DEFAULT for src in bundle.sources.values())

    def test_upstream_names_are_interpolated(self, resolver):
        upstream = UpstreamContent(
            airline_name=Plain("Iberia"),
            arrival_city=PerLocale((("en", "Malaga"), ("es", "Málaga"))),
        )
        bundle = resolver.resolve(FLIGHT, "es", upstream)

        assert bundle.title == "Vuelos baratos de New York a Málaga | Iberia"
        assert "Iberia" in bundle.section(SectionKey.BOOKING_STEPS)

    def test_unknown_codes_show_raw_code(self, resolver):
        bundle = resolver.resolve(parse_slug("xqz-qqw"), "en")
        assert bundle.title == "Cheap flights from XQZ to QQW | AirlinesMap"

    def test_hotel_title(self, resolver):
        assert resolver.resolve(HOTEL, "en").title == "Hotels near Delhi Airport (DEL)"

    def test_configured_brand_name(self, null_cache):
        from route_content.config import SiteConfig

        resolver = FallbackContentResolver(cache=null_cache, site=SiteConfig(brand_name="SkyDeals"))
        assert resolver.resolve(FLIGHT, "en").title.endswith("| SkyDeals")

    def test_price_answer_depends_on_metrics(self, resolver):
        priced = resolver.resolve(FLIGHT, "en", metrics=DerivedMetrics(total_flights=1, cheapest_price=129.0))
        unpriced = resolver.resolve(FLIGHT, "en")

        assert "$129" in priced.faqs[0].a
        assert "$" not in unpriced.faqs[0].a

    def test_cheapest_day_is_localized(self, resolver):
        metrics = DerivedMetrics(cheapest_weekday="Tuesday", cheapest_month="March")
        bundle = resolver.resolve(FLIGHT, "fr", metrics=metrics)

        assert "mardi" in bundle.faqs[2].a
        assert "mars" in bundle.faqs[3].a


class TestFaqShape:
    """FAQ list length and order do not depend on the locale."""

    @pytest.mark.parametrize("route", ALL_ROUTES, ids=lambda r: r.entity_type.value)
    def test_same_length_for_every_locale(self, resolver, route):
        lengths = {len(resolver.resolve(route, locale).faqs) for locale in Locale}
        assert lengths == {len(tpl.FAQ_TOPICS)}

    def test_english_and_french_lengths_match(self, resolver):
        assert len(resolver.resolve(FLIGHT, "en", None).faqs) == len(resolver.resolve(FLIGHT, "fr", None).faqs)

    def test_topic_order(self, resolver):
        faqs = resolver.resolve(FLIGHT, "en").faqs

        assert faqs[0].q.startswith("How much does it cost")
        assert faqs[1].q.startswith("Where can I fly")
        assert faqs[2].q.startswith("When are")
        assert faqs[3].q.startswith("What's the best season")
        assert faqs[4].q.startswith("How do I book")


class TestHardDefaults:
    """Interpolation failures degrade to English defaults, never raise."""

    def test_missing_city_uses_default_title(self, resolver):
        broken = RouteDescriptor(entity_type=EntityType.FLIGHT, raw_slug="")
        bundle = resolver.resolve(broken, "fr")

        assert bundle.title == tpl.DEFAULT_TITLE
        assert bundle.sources["title"] == ContentSource.DEFAULT
        assert tuple(bundle.sections) == CANONICAL_SECTIONS

    def test_hotel_without_code_uses_defaults(self, resolver):
        bundle = resolver.resolve(RouteDescriptor(entity_type=EntityType.HOTEL), "es")

        assert bundle.title == tpl.DEFAULT_TITLE
        assert bundle.description == tpl.DEFAULT_DESCRIPTION
        assert len(bundle.faqs) == len(tpl.FAQ_TOPICS)

    def test_failing_fill_keeps_faq_count(self, resolver, monkeypatch):
        broken = dict(tpl.FAQ_TEMPLATES[Locale.EN])
        broken["cheapest_day"] = {"q": "{no_such_value}?", "a": "x"}
        monkeypatch.setitem(tpl.FAQ_TEMPLATES, Locale.EN, broken)

        bundle = resolver.resolve(FLIGHT, "en")

        assert len(bundle.faqs) == len(tpl.FAQ_TOPICS)
        assert bundle.faqs[2] == Faq(*tpl.DEFAULT_FAQ)
        assert bundle.sources["faqs"] == ContentSource.DEFAULT

    def test_failing_section_template(self, resolver, monkeypatch):
        broken = dict(tpl.SECTION_TEMPLATES[Locale.RU])
        broken[SectionKey.CLASSES] = "<p>{no_such_value}</p>"
        monkeypatch.setitem(tpl.SECTION_TEMPLATES, Locale.RU, broken)

        bundle = resolver.resolve(FLIGHT, "ru")

        assert bundle.section(SectionKey.CLASSES) == tpl.DEFAULT_SECTIONS[SectionKey.CLASSES]
        assert bundle.sources["classes"] == ContentSource.DEFAULT


class TestSeoAndCards:
    """SEO strings and price cards."""

    def test_seo_mirrors_title_and_description(self, resolver):
        bundle = resolver.resolve(FLIGHT, "en")

        assert bundle.seo.og_title == bundle.title
        assert bundle.seo.og_description == bundle.description
        assert bundle.seo.keywords.startswith("AirlinesMap, New York, Malaga, flights")

    def test_meta_description_is_truncated(self, resolver):
        long_text = "<p>" + "word " * 80 + "</p>"
        bundle = resolver.resolve(FLIGHT, "en", UpstreamContent(description=Plain(long_text)))

        assert len(bundle.seo.meta_description) <= 158
        assert bundle.seo.meta_description.endswith("…")
        assert "<p>" not in bundle.seo.meta_description

    def test_four_price_cards(self, resolver):
        metrics = DerivedMetrics(
            total_flights=1, round_trip_from=240.0, one_way_from=120.0,
            cheapest_weekday="Friday", cheapest_month="May",
        )
        cards = resolver.resolve(FLIGHT, "es", metrics=metrics).price_cards

        assert [c.kind for c in cards] == list(tpl.PRICE_CARD_KINDS)
        assert [c.value for c in cards] == ["$240", "$120", "mayo", "viernes"]
        assert cards[0].label == "Ida y vuelta desde:"
        assert cards[0].description == "Vuelos de ida y vuelta de AirlinesMap desde New York a Malaga"

    def test_cards_without_prices(self, resolver):
        cards = resolver.resolve(AIRLINE, "en").price_cards

        assert cards[0].value == "N/A"
        assert "Various Destinations" in cards[0].description


def test_from_upstream_variants():
    assert from_upstream(Plain("x"), Locale.EN) == ("x", ContentSource.UPSTREAM)
    assert from_upstream(PerLocale((("fr", "y"),)), Locale.EN) == ("y", ContentSource.UPSTREAM_FALLBACK_LOCALE)
    assert from_upstream(UpstreamContent().title, Locale.EN) == (None, None)


def test_helpers():
    assert airline_display_name("air-india-ai-aic-in") == "Air India"
    assert airline_display_name("emirates") == "Emirates"
    assert strip_html("<p>A &amp; <b>B</b></p>") == "A B"
    assert truncate("abcdef", 4) == "abc…"
    assert truncate("abc", 4) == "abc"

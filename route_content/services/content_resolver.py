"""Fallback content resolver - the single authority for page content.

Every field of a ContentBundle (title, description, each section, the
FAQ list) goes through the same priority chain:

1. Upstream plain value for the field
2. Upstream per-locale value: requested locale, then "en", then the
   first non-empty entry
3. Generated fallback from the locale's hand-authored templates
4. English hard default, when a generated template cannot be filled

Step 2 means a non-English page can show English upstream prose when
upstream only sent English. That is kept as is.

Resolution is deterministic: the same route, locale, upstream content and
metrics always give an equal bundle. Generated fragments are memoized in
the injected cache; the bundle itself is never cached.
"""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass, field
from typing import Callable, Mapping, Optional, TypeVar, Union

from ..adapters.cache.null_cache import NullCache
from ..config import SiteConfig, get_config
from ..domain.errors import DuplicateSectionError, InterpolationError
from ..domain.models import (
    CANONICAL_SECTIONS,
    EMPTY_UPSTREAM,
    ContentBundle,
    ContentSource,
    DerivedMetrics,
    EntityType,
    Faq,
    Locale,
    PerLocale,
    Plain,
    PriceCard,
    RouteDescriptor,
    SectionKey,
    SeoMeta,
    UpstreamContent,
    UpstreamField,
)
from ..i18n import templates as tpl
from ..i18n.calendar_names import month_name, weekday_name
from ..i18n.cities import city_for_code
from ..i18n.locales import DEFAULT_LOCALE, normalize
from ..i18n.phrases import phrase, phrases_for
from ..metrics.normalizer import format_price
from ..ports.cache import CachePort

T = TypeVar("T")

_PAGE_KINDS = {
    EntityType.FLIGHT: "flight",
    EntityType.AIRPORT: "airport",
    EntityType.HOTEL: "hotel",
    EntityType.AIRLINE: "airline",
}

_TAG_RE = re.compile(r"<[^>]*>")
_ENTITY_RE = re.compile(r"&[^;\s]+;")
_SPACE_RE = re.compile(r"\s+")


def strip_html(text: str) -> str:
    """Plain text of an HTML fragment, whitespace collapsed."""
    text = _ENTITY_RE.sub(" ", _TAG_RE.sub(" ", text))
    return _SPACE_RE.sub(" ", text).strip()


def truncate(text: str, max_length: int) -> str:
    """Cut ``text`` to at most ``max_length`` characters, ending with an ellipsis."""
    if len(text) <= max_length:
        return text
    return text[: max_length - 1].rstrip() + "…"


def airline_display_name(slug: str) -> str:
    """Prettify an airline slug.

    Slugs end with code tokens ("air-india-ai-aic-in" is Air India,
    IATA AI, ICAO AIC, country IN); those are dropped when present.
    """
    tokens = [t for t in slug.split("-") if t]
    if len(tokens) >= 4 and all(len(t) <= 3 for t in tokens[-3:]):
        tokens = tokens[:-3]
    return " ".join(t.capitalize() for t in tokens)


def _non_empty(value: object) -> bool:
    if isinstance(value, str):
        return bool(value.strip())
    return bool(value)


def from_upstream(
    value: UpstreamField[T], locale: Locale
) -> tuple[Optional[T], Optional[ContentSource]]:
    """Apply the upstream tiers of the chain to one field.

    Returns:
        (value, source), or (None, None) when upstream has nothing usable.
    """
    if isinstance(value, Plain):
        if _non_empty(value.value):
            return value.value, ContentSource.UPSTREAM
        return None, None

    if isinstance(value, PerLocale):
        for tag in (locale.value, locale.region_tag.lower()):
            localized = value.get(tag)
            if _non_empty(localized):
                return localized, ContentSource.UPSTREAM_LOCALE
        english = value.get(DEFAULT_LOCALE.value)
        if _non_empty(english):
            return english, ContentSource.UPSTREAM_FALLBACK_LOCALE
        for _, candidate in value.values:
            if _non_empty(candidate):
                return candidate, ContentSource.UPSTREAM_FALLBACK_LOCALE

    return None, None


@dataclass(frozen=True)
class _Context:
    """Interpolation context for one (route, locale) pair."""

    locale: Locale
    kind: str
    variant: str
    values: Mapping[str, Optional[str]]


@dataclass
class FallbackContentResolver:
    """Builds a ContentBundle for a route and locale.

    Attributes:
        cache: Memo for generated fragments; NullCache disables memoization
        site: Site identity (brand name, meta description length)

    Example:
        resolver = FallbackContentResolver(cache=InMemoryCache(max_size=5000))
        bundle = resolver.resolve(parse_slug("jfk-agp"), "fr")
    """

    cache: CachePort = field(default_factory=NullCache)
    site: SiteConfig = field(default_factory=lambda: get_config().site)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def resolve(
        self,
        route: RouteDescriptor,
        locale: Union[str, Locale, None],
        upstream: Optional[UpstreamContent] = None,
        metrics: Optional[DerivedMetrics] = None,
    ) -> ContentBundle:
        """Resolve the full content bundle.

        Args:
            route: Parsed route descriptor.
            locale: Requested locale tag; normalized here.
            upstream: Upstream content; None means every field is empty.
            metrics: Derived metrics; None means the zero record.

        Returns:
            A bundle with every canonical section exactly once.
        """
        loc = normalize(locale)
        upstream = upstream or EMPTY_UPSTREAM
        metrics = metrics or DerivedMetrics()
        ctx = self._context(route, loc, upstream, metrics)
        sources: dict[str, ContentSource] = {}

        title = self._resolve_field(
            "title",
            upstream.title,
            ctx,
            lambda: self._generate(f"title.{ctx.kind}", tpl.TITLES[loc][ctx.kind], ctx),
            tpl.DEFAULT_TITLE,
            sources,
        )
        description = self._resolve_field(
            "description",
            upstream.description,
            ctx,
            lambda: self._generate(
                f"description.{ctx.kind}", tpl.DESCRIPTIONS[loc][ctx.kind], ctx
            ),
            tpl.DEFAULT_DESCRIPTION,
            sources,
        )

        sections: dict[SectionKey, str] = {}
        for key in CANONICAL_SECTIONS:
            html = self._resolve_field(
                key.value,
                upstream.section(key),
                ctx,
                self._section_generator(key, ctx),
                tpl.DEFAULT_SECTIONS[key],
                sources,
            )
            _attach(sections, key, html)

        faqs = self._resolve_faqs(upstream, ctx, sources)

        self._logger.debug(
            "Bundle resolved",
            extra={
                "slug": route.raw_slug,
                "locale": loc.value,
                "kind": ctx.kind,
                "variant": ctx.variant,
            },
        )

        return ContentBundle(
            locale=loc,
            title=title,
            description=description,
            sections=sections,
            faqs=faqs,
            ui=phrases_for(loc),
            seo=self._seo(title, description, ctx),
            price_cards=self._price_cards(metrics, ctx),
            sources=sources,
        )

    # ------------------------------------------------------------------
    # Interpolation context
    # ------------------------------------------------------------------

    def _context(
        self,
        route: RouteDescriptor,
        locale: Locale,
        upstream: UpstreamContent,
        metrics: DerivedMetrics,
    ) -> _Context:
        departure_city = self._city(route.departure_code, upstream.departure_city, locale)
        arrival_city = self._city(route.arrival_code, upstream.arrival_city, locale)

        if departure_city and arrival_city:
            variant = tpl.ROUTE
        elif departure_city:
            variant = tpl.CITY
        else:
            variant = tpl.NETWORK

        values: dict[str, Optional[str]] = {
            "airline_name": self._airline_name(route, upstream, locale),
            "departure_city": departure_city,
            "arrival_city": arrival_city,
            "departure_code": route.departure_code or None,
            "arrival_code": route.arrival_code or None,
            "city": arrival_city or departure_city,
            "destination": arrival_city or phrase(locale, "various_destinations"),
            "cheapest_price": self._advertised_price(metrics),
            "cheapest_day": weekday_name(locale, metrics.cheapest_weekday),
            "cheapest_month": month_name(locale, metrics.cheapest_month),
        }
        phrases = tpl.ROUTE_PHRASES[locale]
        values["route_phrase"] = phrases[variant].format_map(values)
        values["origin_phrase"] = phrases[tpl.CITY if departure_city else tpl.NETWORK].format_map(values)

        return _Context(
            locale=locale,
            kind=_PAGE_KINDS[route.entity_type],
            variant=variant,
            values=values,
        )

    def _city(
        self, code: str, upstream_city: UpstreamField[str], locale: Locale
    ) -> Optional[str]:
        # A city is only meaningful for a code the route actually has.
        if not code:
            return None
        name, _ = from_upstream(upstream_city, locale)
        return name or city_for_code(code) or code

    def _airline_name(
        self, route: RouteDescriptor, upstream: UpstreamContent, locale: Locale
    ) -> str:
        name, _ = from_upstream(upstream.airline_name, locale)
        if name:
            return name
        if route.airline_slug:
            pretty = airline_display_name(route.airline_slug)
            if pretty:
                return pretty
        return self.site.brand_name

    @staticmethod
    def _advertised_price(metrics: DerivedMetrics) -> Optional[str]:
        price = metrics.one_way_from or metrics.cheapest_price
        return format_price(price) if price > 0 else None

    # ------------------------------------------------------------------
    # Fallback chain
    # ------------------------------------------------------------------

    def _resolve_field(
        self,
        name: str,
        upstream_value: UpstreamField[str],
        ctx: _Context,
        generate: Callable[[], str],
        default: str,
        sources: dict[str, ContentSource],
    ) -> str:
        value, source = from_upstream(upstream_value, ctx.locale)
        if value is None:
            try:
                value, source = generate(), ContentSource.GENERATED
            except InterpolationError as e:
                self._logger.warning(
                    "Template interpolation failed, using default",
                    extra={
                        "field": name,
                        "template": e.template_key,
                        "missing": e.missing_key,
                        "locale": ctx.locale.value,
                    },
                )
                value, source = default, ContentSource.DEFAULT

        sources[name] = source
        self._logger.debug(
            "Field resolved",
            extra={"field": name, "source": source.value, "locale": ctx.locale.value},
        )
        return value

    def _section_generator(self, key: SectionKey, ctx: _Context) -> Callable[[], str]:
        def generate() -> str:
            return self._generate(
                f"section.{key.value}", tpl.SECTION_TEMPLATES[ctx.locale][key], ctx
            )

        return generate

    def _generate(self, template_key: str, templates: tpl.TemplateVariants, ctx: _Context) -> str:
        """Fill the context's variant of a template, memoized in the cache.

        Raises:
            InterpolationError: If a placeholder has no value.
        """
        template = tpl.pick_variant(templates, ctx.variant)
        names = tpl.placeholders(template)
        cache_key = json.dumps(
            [ctx.locale.value, template_key, ctx.variant, [[name, ctx.values.get(name)] for name in names]],
            ensure_ascii=False,
        )
        return self.cache.get_or_compute(
            cache_key, lambda: tpl.fill(template_key, template, ctx.values)
        )

    def _resolve_faqs(
        self,
        upstream: UpstreamContent,
        ctx: _Context,
        sources: dict[str, ContentSource],
    ) -> tuple[Faq, ...]:
        faqs, source = from_upstream(upstream.faqs, ctx.locale)
        if faqs:
            sources["faqs"] = source  # type: ignore[assignment]
            return tuple(faqs)

        generated = []
        source = ContentSource.GENERATED
        for topic in tpl.FAQ_TOPICS:
            entry = tpl.FAQ_TEMPLATES[ctx.locale][topic]
            answer_key = "a"
            if topic == "price" and ctx.values.get("cheapest_price") is None:
                answer_key = "a_unpriced"
            try:
                generated.append(
                    Faq(
                        q=self._generate(f"faq.{topic}.q", entry["q"], ctx),
                        a=self._generate(f"faq.{topic}.{answer_key}", entry[answer_key], ctx),
                    )
                )
            except InterpolationError as e:
                self._logger.warning(
                    "FAQ interpolation failed, using default",
                    extra={"topic": topic, "missing": e.missing_key, "locale": ctx.locale.value},
                )
                generated.append(Faq(q=tpl.DEFAULT_FAQ[0], a=tpl.DEFAULT_FAQ[1]))
                source = ContentSource.DEFAULT

        sources["faqs"] = source
        return tuple(generated)

    # ------------------------------------------------------------------
    # Derived bundle parts
    # ------------------------------------------------------------------

    def _seo(self, title: str, description: str, ctx: _Context) -> SeoMeta:
        terms = [
            ctx.values.get("airline_name"),
            ctx.values.get("departure_city"),
            ctx.values.get("arrival_city"),
            *tpl.KEYWORD_TERMS[ctx.locale],
        ]
        keywords: list[str] = []
        for term in terms:
            if term and term not in keywords:
                keywords.append(term)

        plain_description = strip_html(description)
        return SeoMeta(
            keywords=", ".join(keywords),
            og_title=strip_html(title),
            og_description=plain_description,
            meta_description=truncate(plain_description, self.site.meta_description_length),
        )

    def _price_cards(self, metrics: DerivedMetrics, ctx: _Context) -> tuple[PriceCard, ...]:
        loc = ctx.locale
        card_values = {
            "round_trip": format_price(metrics.round_trip_from),
            "one_way": format_price(metrics.one_way_from),
            "cheapest_month": ctx.values["cheapest_month"] or "",
            "cheapest_day": ctx.values["cheapest_day"] or "",
        }

        cards = []
        for kind in tpl.PRICE_CARD_KINDS:
            try:
                description = self._generate(
                    f"price_card.{kind}", tpl.PRICE_CARD_TEMPLATES[loc][kind], ctx
                )
            except InterpolationError:
                description = tpl.DEFAULT_DESCRIPTION
            cards.append(
                PriceCard(
                    kind=kind,
                    label=phrase(loc, kind),
                    value=card_values[kind],
                    description=description,
                )
            )
        return tuple(cards)


def _attach(sections: dict[SectionKey, str], key: SectionKey, html: str) -> None:
    """Attach a resolved section; each key may be attached once."""
    if key in sections:
        raise DuplicateSectionError(
            f"Section {key.value!r} attached twice",
            section=key.value,
        )
    sections[key] = html

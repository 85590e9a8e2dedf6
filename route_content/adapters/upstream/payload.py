"""Conversion of raw upstream content payloads into UpstreamContent.

Upstream fields arrive in several shapes: a plain string, an object
carrying the text under "content", "text", "description" or "html", or
an object keyed by locale. Each field is converted once into a tagged
variant (Plain, PerLocale or Absent) so the resolver never inspects
shapes at render time. A field with an unusable shape becomes Absent
and is logged; it never fails the whole payload.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Callable, Iterator, Mapping, Optional, TypeVar

from ...domain.errors import UpstreamPayloadError
from ...domain.models import (
    ABSENT,
    EMPTY_UPSTREAM,
    Faq,
    PerLocale,
    Plain,
    PriceAggregates,
    SectionKey,
    UpstreamContent,
    UpstreamField,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

TEXT_KEYS = ("content", "text", "description", "html")

TITLE_ALIASES = ("title", "meta_title")
DESCRIPTION_ALIASES = ("description", "meta_description")
FAQ_ALIASES = ("faqs", "faq")
AIRLINE_ALIASES = ("airline_name", "airline")
DEPARTURE_CITY_ALIASES = ("departure_city", "from_city")
ARRIVAL_CITY_ALIASES = ("arrival_city", "to_city")

SECTION_ALIASES: dict[SectionKey, tuple[str, ...]] = {
    SectionKey.BOOKING_STEPS: ("booking_steps", "how_to_book", "booking"),
    SectionKey.CANCELLATION_POLICY: ("cancellation_policy", "cancellation"),
    SectionKey.CLASSES: ("classes", "flight_classes"),
    SectionKey.DESTINATIONS_OVERVIEW: ("destinations_overview", "destinations"),
    SectionKey.POPULAR_DESTINATIONS: ("popular_destinations",),
    SectionKey.PLACES_TO_VISIT: ("places_to_visit", "places"),
    SectionKey.CITY_INFO: ("city_info", "about_city"),
    SectionKey.BEST_TIME_TO_VISIT: ("best_time_to_visit", "best_time_visit"),
}

WEEKLY_ALIASES = ("weeks", "weekly_prices_avg", "weekly_prices")
MONTHLY_ALIASES = ("months", "monthly_prices_avg", "monthly_prices")
_CURVE_LABEL_KEYS = ("day", "month", "name", "label")
_CURVE_VALUE_KEYS = ("avg_price", "price", "value")


def _first_present(raw: Mapping[str, Any], aliases: tuple[str, ...]) -> tuple[str, Any]:
    """First alias holding a value; blank strings count as missing."""
    for alias in aliases:
        value = raw.get(alias)
        if value is None or (isinstance(value, str) and not value.strip()):
            continue
        return alias, value
    return aliases[0], None


def _object_text(name: str, value: Any) -> Optional[str]:
    """Text of a plain string or text-carrying object; None when empty."""
    if isinstance(value, str):
        return value.strip() or None
    if isinstance(value, Mapping):
        for key in TEXT_KEYS:
            inner = value.get(key)
            if isinstance(inner, str):
                return inner.strip() or None
        return None
    raise UpstreamPayloadError(
        f"Unsupported value type {type(value).__name__}",
        field_name=name,
    )


def _locale_entries(
    name: str, value: Mapping[Any, Any], parse: Callable[[str, Any], T]
) -> Iterator[tuple[str, T]]:
    """Parse each entry of a per-locale map on its own.

    Null entries are skipped and a malformed entry is logged and dropped,
    so one bad locale never hides the others.
    """
    for tag, localized in value.items():
        if localized is None:
            continue
        try:
            parsed = parse(f"{name}.{tag}", localized)
        except UpstreamPayloadError as e:
            logger.warning(
                "Ignoring malformed upstream locale entry",
                extra={"field": e.field_name, "error": e.message},
            )
            continue
        yield str(tag).lower(), parsed


def parse_text_field(name: str, value: Any) -> UpstreamField[str]:
    """Convert one raw text field into a tagged variant.

    Raises:
        UpstreamPayloadError: If the value is neither a string nor an object.
    """
    if value is None:
        return ABSENT
    if isinstance(value, str):
        text = value.strip()
        return Plain(text) if text else ABSENT
    if not isinstance(value, Mapping):
        raise UpstreamPayloadError(
            f"Unsupported value type {type(value).__name__}",
            field_name=name,
        )

    if any(key in value for key in TEXT_KEYS):
        text = _object_text(name, value)
        return Plain(text) if text else ABSENT

    entries = []
    for tag, localized in _locale_entries(name, value, _object_text):
        if localized:
            entries.append((tag, localized))
    return PerLocale(tuple(entries)) if entries else ABSENT


def _faq_list(name: str, value: Any) -> tuple[Faq, ...]:
    if not isinstance(value, list):
        raise UpstreamPayloadError("FAQ list expected", field_name=name)
    faqs = []
    for item in value:
        if not isinstance(item, Mapping):
            continue
        question = item.get("q") or item.get("question")
        answer = item.get("a") or item.get("answer")
        if isinstance(question, str) and isinstance(answer, str) and question.strip() and answer.strip():
            faqs.append(Faq(q=question.strip(), a=answer.strip()))
    return tuple(faqs)


def parse_faq_field(name: str, value: Any) -> UpstreamField[tuple[Faq, ...]]:
    """Convert a FAQ list, or a per-locale map of FAQ lists.

    Raises:
        UpstreamPayloadError: If the value has neither shape.
    """
    if value is None:
        return ABSENT
    if isinstance(value, Mapping):
        entries = []
        for tag, faqs in _locale_entries(name, value, _faq_list):
            if faqs:
                entries.append((tag, faqs))
        return PerLocale(tuple(entries)) if entries else ABSENT
    faqs = _faq_list(name, value)
    return Plain(faqs) if faqs else ABSENT


def _number(value: Any) -> float:
    if isinstance(value, bool):
        return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return 0.0
    return number if math.isfinite(number) and number > 0 else 0.0


def _curve(value: Any) -> tuple[tuple[str, float], ...]:
    """Price curve from a list of labelled points or a label -> price map."""
    if isinstance(value, Mapping):
        return tuple((str(label), _number(price)) for label, price in value.items())
    if not isinstance(value, list):
        return ()
    points = []
    for item in value:
        if not isinstance(item, Mapping):
            continue
        label = next((item[k] for k in _CURVE_LABEL_KEYS if isinstance(item.get(k), str)), None)
        price = next((item[k] for k in _CURVE_VALUE_KEYS if item.get(k) is not None), None)
        if label and label.strip():
            # "Mon 12" style labels carry the name first
            points.append((label.split()[0], _number(price)))
    return tuple(points)


def _label(value: Any) -> Optional[str]:
    return value.strip() if isinstance(value, str) and value.strip() else None


def parse_aggregates(raw: Mapping[str, Any]) -> Optional[PriceAggregates]:
    """Extract day/month price signals; None when the payload has none."""
    weekly = _curve(_first_present(raw, WEEKLY_ALIASES)[1])
    monthly = _curve(_first_present(raw, MONTHLY_ALIASES)[1])
    cheapest_day = _label(raw.get("cheapest_day"))
    cheapest_month = _label(raw.get("cheapest_month") or raw.get("popular_month"))
    round_trip = _number(raw.get("round_trip_start"))
    one_way = _number(raw.get("oneway_trip_start"))

    if not (weekly or monthly or cheapest_day or cheapest_month or round_trip or one_way):
        return None
    return PriceAggregates(
        cheapest_day=cheapest_day,
        cheapest_month=cheapest_month,
        weekly_prices=weekly,
        monthly_prices=monthly,
        round_trip_from=round_trip,
        one_way_from=one_way,
    )


def _safe(parse, raw: Mapping[str, Any], aliases: tuple[str, ...]):
    name, value = _first_present(raw, aliases)
    try:
        return parse(name, value)
    except UpstreamPayloadError as e:
        logger.warning(
            "Ignoring malformed upstream field",
            extra={"field": e.field_name, "error": e.message},
        )
        return ABSENT


def parse_upstream_payload(raw: Optional[Mapping[str, Any]]) -> UpstreamContent:
    """Convert a decoded content API response into UpstreamContent.

    None, and anything that is not a mapping, gives EMPTY_UPSTREAM.
    """
    if not isinstance(raw, Mapping) or not raw:
        return EMPTY_UPSTREAM

    sections = {}
    for key, aliases in SECTION_ALIASES.items():
        parsed = _safe(parse_text_field, raw, aliases)
        if parsed is not ABSENT:
            sections[key] = parsed

    return UpstreamContent(
        title=_safe(parse_text_field, raw, TITLE_ALIASES),
        description=_safe(parse_text_field, raw, DESCRIPTION_ALIASES),
        sections=sections,
        faqs=_safe(parse_faq_field, raw, FAQ_ALIASES),
        airline_name=_safe(parse_text_field, raw, AIRLINE_ALIASES),
        departure_city=_safe(parse_text_field, raw, DEPARTURE_CITY_ALIASES),
        arrival_city=_safe(parse_text_field, raw, ARRIVAL_CITY_ALIASES),
        aggregates=parse_aggregates(raw),
    )

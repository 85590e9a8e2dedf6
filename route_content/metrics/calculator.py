"""Derived metrics over normalized flights."""

from __future__ import annotations

import math
from typing import Optional, Sequence

from ..domain.models import DerivedMetrics, NormalizedFlight, PriceAggregates
from ..i18n.calendar_names import canonical_month, canonical_weekday

DEFAULT_WEEKDAY = "Monday"
DEFAULT_MONTH = "January"


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _cheapest_label(
    explicit: Optional[str],
    curve: tuple[tuple[str, float], ...],
    default: str,
) -> str:
    """Explicit upstream value, else the lowest positive curve entry, else default."""
    if explicit and explicit.strip():
        return explicit.strip()
    priced = [(label, price) for label, price in curve if price > 0]
    if priced:
        # min() keeps the first of equal prices, so ties resolve in curve order
        return min(priced, key=lambda item: item[1])[0]
    return default


def cheapest_weekday(aggregates: Optional[PriceAggregates]) -> str:
    if aggregates is None:
        return DEFAULT_WEEKDAY
    label = _cheapest_label(aggregates.cheapest_day, aggregates.weekly_prices, DEFAULT_WEEKDAY)
    return canonical_weekday(label)


def cheapest_month(aggregates: Optional[PriceAggregates]) -> str:
    if aggregates is None:
        return DEFAULT_MONTH
    label = _cheapest_label(aggregates.cheapest_month, aggregates.monthly_prices, DEFAULT_MONTH)
    return canonical_month(label)


def compute_metrics(
    flights: Sequence[NormalizedFlight],
    aggregates: Optional[PriceAggregates] = None,
) -> DerivedMetrics:
    """Compute statistics for a page.

    Prices that are not positive are left out of the price statistics.
    The cheapest weekday and month are never inferred from the flights;
    they come from upstream day/month aggregates or default to
    "Monday" / "January".

    Args:
        flights: Normalized flights, possibly empty.
        aggregates: Upstream day/month price signals, if any.

    Returns:
        DerivedMetrics; the zero record for an empty list.
    """
    weekday = cheapest_weekday(aggregates)
    month = cheapest_month(aggregates)
    advertised_one_way = aggregates.one_way_from if aggregates else 0.0
    advertised_round_trip = aggregates.round_trip_from if aggregates else 0.0

    if not flights:
        return DerivedMetrics(
            cheapest_weekday=weekday,
            cheapest_month=month,
            round_trip_from=advertised_round_trip,
            one_way_from=advertised_one_way,
        )

    prices = [
        f.price_value for f in flights if f.price_value > 0 and math.isfinite(f.price_value)
    ]
    total = len(flights)
    direct = sum(1 for f in flights if f.is_direct)

    avg_price = _round_half_up(sum(prices) / len(prices)) if prices else 0
    cheapest = min(prices) if prices else 0.0
    most_expensive = max(prices) if prices else 0.0

    one_way_from = advertised_one_way or cheapest
    round_trip_from = advertised_round_trip or one_way_from * 2

    return DerivedMetrics(
        total_flights=total,
        avg_price=avg_price,
        cheapest_price=cheapest,
        most_expensive_price=most_expensive,
        cheapest_weekday=weekday,
        cheapest_month=month,
        direct_flights=direct,
        direct_ratio=direct / total,
        destinations=len({f.destination for f in flights if f.destination}),
        round_trip_from=round_trip_from,
        one_way_from=one_way_from,
    )

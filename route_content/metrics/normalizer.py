"""Normalization of raw flight records into NormalizedFlight."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping, Optional

from pydantic import ValidationError

from ..domain.models import NormalizedFlight
from ..i18n.cities import city_for_code
from .records import CarrierRoute, FlightRecord

logger = logging.getLogger(__name__)

# Keys under which upstream wraps the flight list
_BATCH_KEYS = ("flights", "oneway_flights", "data")


def extract_flight_list(payload: Any) -> list[Mapping[str, Any]]:
    """Return the list of raw records from any upstream batch shape.

    Accepts a bare list, a mapping wrapping the list under one of
    "flights", "oneway_flights" or "data", or a single flat record.
    Anything else yields an empty list.
    """
    if payload is None:
        return []
    if isinstance(payload, list):
        return [item for item in payload if isinstance(item, Mapping)]
    if isinstance(payload, Mapping):
        for key in _BATCH_KEYS:
            nested = payload.get(key)
            if isinstance(nested, list):
                return [item for item in nested if isinstance(item, Mapping)]
        if payload.get("iata_from") and payload.get("iata_to"):
            return [payload]
    return []


def format_price(value: float) -> str:
    """Canonical price string: "$129", "$129.50", or "N/A" for no price."""
    if value <= 0:
        return "N/A"
    if float(value).is_integer():
        return f"${int(value)}"
    return f"${value:.2f}"


def _weekly_frequency(record: FlightRecord) -> int:
    if record.flights_per_week:
        return record.flights_per_week
    if record.flights_per_day:
        return record.flights_per_day * 7
    return 0


def _city(record: FlightRecord) -> str:
    return record.city or city_for_code(record.destination) or f"{record.destination} City"


def _build(record: FlightRecord, airline: str, airline_code: str) -> NormalizedFlight:
    city = _city(record)
    return NormalizedFlight(
        origin=record.origin,
        destination=record.destination,
        city=city,
        airport=record.airport or f"{city} ({record.destination})",
        price=record.localized_price or format_price(record.price),
        price_value=record.price,
        duration=record.duration or "",
        airline=airline,
        airline_code=airline_code,
        stops=record.stops,
        is_direct=record.stops == 0,
        flights_per_week=_weekly_frequency(record),
        departure_time=record.departure_time,
    )


def normalize_record(raw: Mapping[str, Any]) -> list[NormalizedFlight]:
    """Normalize one raw record; legacy route records expand per carrier.

    Raises:
        pydantic.ValidationError: If the record cannot be validated.
    """
    record = FlightRecord.model_validate(raw)

    if record.airlineroutes:
        carriers: list[CarrierRoute] = record.airlineroutes
        return [_build(record, c.carrier_name, c.carrier) for c in carriers]

    if record.airline:
        return [_build(record, record.airline, record.airline_code or "N/A")]

    return [_build(record, "Unknown", record.airline_code or "N/A")]


def normalize_flights(records: Optional[Iterable[Mapping[str, Any]]]) -> list[NormalizedFlight]:
    """Normalize a batch of raw records.

    None is treated as an empty batch. Records that fail validation are
    skipped with a warning; the rest of the batch is kept.
    """
    if records is None:
        return []

    flights: list[NormalizedFlight] = []
    skipped = 0
    for raw in records:
        if not isinstance(raw, Mapping):
            skipped += 1
            continue
        try:
            flights.extend(normalize_record(raw))
        except ValidationError as e:
            skipped += 1
            logger.warning(
                "Skipping invalid flight record",
                extra={"error_count": e.error_count()},
            )

    logger.debug(
        "Flights normalized",
        extra={"flights": len(flights), "skipped": skipped},
    )
    return flights

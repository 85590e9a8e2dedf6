"""Pydantic models for raw upstream flight records.

Upstream sends flights in three shapes (flat records, legacy route
records with an ``airlineroutes`` list, bare route records). The models
accept all of them, with lenient coercion: a price that is not a finite
positive number becomes 0.0 and is ignored by the metrics calculator.
"""

from __future__ import annotations

import math
import re
from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationInfo, field_validator

_LEADING_INT = re.compile(r"\d+")


def _to_price(value: Any) -> float:
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, str):
        value = value.replace("$", "").replace(",", "").strip()
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return 0.0
    if not math.isfinite(number) or number <= 0:
        return 0.0
    return number


def _to_count(value: Any) -> Optional[int]:
    """Parse counts such as 6, "6" or "1 flight".

    Raises:
        ValueError: For a non-finite number, so the record fails validation.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, float) and not math.isfinite(value):
        raise ValueError(f"count must be finite, got {value}")
    if isinstance(value, (int, float)):
        return int(value) if value > 0 else None
    match = _LEADING_INT.search(str(value))
    return int(match.group()) if match else None


class CarrierRoute(BaseModel):
    """One carrier operating a legacy route record."""

    model_config = ConfigDict(extra="ignore")

    carrier_name: str = Field("Unknown", validation_alias=AliasChoices("carrier_name", "name"))
    carrier: str = Field("N/A", validation_alias=AliasChoices("carrier", "iata"))

    @field_validator("carrier_name", "carrier", mode="before")
    @classmethod
    def _blank_to_default(cls, value: Any, info: ValidationInfo) -> Any:
        if value in (None, ""):
            return "Unknown" if info.field_name == "carrier_name" else "N/A"
        return str(value)


class FlightRecord(BaseModel):
    """A raw flight record as received from the flight data API."""

    model_config = ConfigDict(extra="ignore")

    origin: str = Field("", validation_alias=AliasChoices("iata_from", "from", "origin"))
    destination: str = Field("", validation_alias=AliasChoices("iata_to", "to", "destination"))
    price: float = 0.0
    localized_price: Optional[str] = None
    duration: Optional[str] = Field(
        None, validation_alias=AliasChoices("duration", "common_duration")
    )
    airline: Optional[str] = None
    airline_code: Optional[str] = Field(
        None, validation_alias=AliasChoices("airline_iata", "airline_code", "airlineCode")
    )
    city: Optional[str] = Field(None, validation_alias=AliasChoices("city", "city_name_en"))
    airport: Optional[str] = None
    stops: int = 0
    departure_time: str = Field(
        "", validation_alias=AliasChoices("departure_time", "departureTime")
    )
    flights_per_week: Optional[int] = Field(
        None, validation_alias=AliasChoices("flights_per_week", "flightsPerWeek")
    )
    flights_per_day: Optional[int] = Field(
        None, validation_alias=AliasChoices("flights_per_day", "flightsPerDay")
    )
    airlineroutes: list[CarrierRoute] = Field(default_factory=list)

    @field_validator("origin", "destination", mode="before")
    @classmethod
    def _upper_code(cls, value: Any) -> str:
        return str(value).strip().upper() if value else ""

    @field_validator("price", mode="before")
    @classmethod
    def _parse_price(cls, value: Any) -> float:
        return _to_price(value)

    @field_validator("duration", mode="before")
    @classmethod
    def _format_duration(cls, value: Any) -> Optional[str]:
        if value in (None, ""):
            return None
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            if isinstance(value, float) and not math.isfinite(value):
                return None
            return f"{int(value)} min"
        return str(value)

    @field_validator("airport", mode="before")
    @classmethod
    def _airport_name(cls, value: Any) -> Optional[str]:
        # Legacy records nest the airport as {"display_name": ..., "city_name": ...}
        if isinstance(value, dict):
            return value.get("display_name") or value.get("city_name")
        return str(value) if value else None

    @field_validator("stops", mode="before")
    @classmethod
    def _parse_stops(cls, value: Any) -> int:
        count = _to_count(value)
        return count or 0

    @field_validator("departure_time", mode="before")
    @classmethod
    def _time_to_str(cls, value: Any) -> str:
        return "" if value is None else str(value)

    @field_validator("flights_per_week", "flights_per_day", mode="before")
    @classmethod
    def _parse_count(cls, value: Any) -> Optional[int]:
        return _to_count(value)

    @field_validator("airlineroutes", mode="before")
    @classmethod
    def _only_mappings(cls, value: Any) -> list:
        if not isinstance(value, list):
            return []
        return [item for item in value if isinstance(item, dict)]

    @field_validator("localized_price", "airline", "airline_code", "city", mode="before")
    @classmethod
    def _optional_text(cls, value: Any) -> Optional[str]:
        if value is None:
            return None
        text = str(value).strip()
        return text or None

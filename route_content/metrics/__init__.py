"""Flight record normalization and derived metrics."""

from .calculator import cheapest_month, cheapest_weekday, compute_metrics
from .normalizer import extract_flight_list, format_price, normalize_flights, normalize_record
from .records import CarrierRoute, FlightRecord

__all__ = [
    "FlightRecord",
    "CarrierRoute",
    "normalize_flights",
    "normalize_record",
    "extract_flight_list",
    "format_price",
    "compute_metrics",
    "cheapest_weekday",
    "cheapest_month",
]

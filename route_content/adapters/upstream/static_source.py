"""In-memory upstream sources.

Used for wiring without a fetch layer and in tests. Payloads are keyed
by the route key: entity ids joined with "-", lower-cased
(e.g. "jfk-agp", "air-india-ai-aic-in-del-bom").
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Sequence


def route_key(entity_ids: Sequence[str]) -> str:
    """Lookup key for a route's entity ids."""
    return "-".join(i.strip().lower() for i in entity_ids if i and i.strip())


@dataclass
class StaticContentSource:
    """ContentSourcePort backed by a dict.

    A payload for a specific language can be registered under
    "<key>@<language_id>"; it wins over the language-neutral "<key>".

    Attributes:
        payloads: Route key -> raw payload
        calls: (key, language_id) for every fetch, oldest first
    """

    payloads: Mapping[str, Mapping[str, Any]] = field(default_factory=dict)
    calls: list[tuple[str, int]] = field(default_factory=list, repr=False)

    def fetch_content(
        self, entity_ids: Sequence[str], language_id: int
    ) -> Optional[Mapping[str, Any]]:
        key = route_key(entity_ids)
        self.calls.append((key, language_id))
        return self.payloads.get(f"{key}@{language_id}") or self.payloads.get(key)


@dataclass
class NullContentSource:
    """ContentSourcePort that never has content."""

    def fetch_content(
        self, entity_ids: Sequence[str], language_id: int
    ) -> Optional[Mapping[str, Any]]:
        return None


@dataclass
class StaticFlightSource:
    """FlightDataPort backed by a dict of route key -> raw records."""

    records: Mapping[str, Sequence[Mapping[str, Any]]] = field(default_factory=dict)

    def fetch_flight_data(
        self, entity_ids: Sequence[str]
    ) -> Optional[Sequence[Mapping[str, Any]]]:
        return self.records.get(route_key(entity_ids))


@dataclass
class NullFlightSource:
    """FlightDataPort that never has flights."""

    def fetch_flight_data(
        self, entity_ids: Sequence[str]
    ) -> Optional[Sequence[Mapping[str, Any]]]:
        return None

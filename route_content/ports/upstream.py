"""Upstream ports - Contracts of the content and flight-data fetchers.

The fetch layer (HTTP client, retries, response caching) lives outside
the engine. These protocols describe what the engine expects back: raw
decoded JSON, or None when the upstream call failed or found nothing.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, Sequence


class ContentSourcePort(Protocol):
    """Port for the upstream content API.

    Implementations:
    - adapters/upstream/static_source.py (StaticContentSource, NullContentSource)
    - adapters/upstream/json_source.py (JsonFileContentSource)
    """

    def fetch_content(
        self, entity_ids: Sequence[str], language_id: int
    ) -> Optional[Mapping[str, Any]]:
        """Fetch the raw content payload for a route.

        Args:
            entity_ids: Route identifiers (airline slug, IATA codes).
            language_id: Upstream language id (en=1, es=2, ru=3, fr=4).

        Returns:
            The decoded payload, or None; None means "all fields empty".
        """
        ...


class FlightDataPort(Protocol):
    """Port for the upstream flight-data API."""

    def fetch_flight_data(
        self, entity_ids: Sequence[str]
    ) -> Optional[Sequence[Mapping[str, Any]]]:
        """Fetch raw flight records for a route.

        Returns:
            Raw records as decoded JSON objects, or None.
        """
        ...

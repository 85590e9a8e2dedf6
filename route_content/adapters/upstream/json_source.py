"""JSON file upstream adapters.

Reads upstream responses saved as JSON files, one file per route, from
the directories configured in UpstreamConfig:

    <data_dir>/content/<route-key>.json        language-neutral payload
    <data_dir>/content/<route-key>.<lang>.json payload for one language id
    <data_dir>/flights/<route-key>.json        flight batch

Used for local fixtures and tests; it is not a network client.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Sequence

from ...config import UpstreamConfig, get_config
from ...domain.errors import UpstreamPayloadError
from ...metrics.normalizer import extract_flight_list
from .static_source import route_key


def _read_json(path: Path) -> Any:
    """Load one JSON document.

    Raises:
        UpstreamPayloadError: If the file cannot be read or decoded.
    """
    try:
        with path.open(encoding="utf-8") as f:
            return json.load(f)
    except (OSError, ValueError) as e:
        raise UpstreamPayloadError(
            f"Failed to read upstream file {path.name}",
            field_name=str(path),
            cause=e,
        )


@dataclass
class JsonFileContentSource:
    """ContentSourcePort reading payloads from JSON files.

    Decoded files are kept in memory until clear_cache() is called.

    Attributes:
        config: Upstream configuration (directories)
    """

    config: UpstreamConfig = field(default_factory=lambda: get_config().upstream)
    _logger: logging.Logger = field(init=False, repr=False)
    _loaded: Dict[Path, Optional[Mapping[str, Any]]] = field(default_factory=dict, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def fetch_content(
        self, entity_ids: Sequence[str], language_id: int
    ) -> Optional[Mapping[str, Any]]:
        """Return the payload for a route, preferring the language-specific file.

        Raises:
            UpstreamPayloadError: If a file exists but is not a JSON object.
        """
        key = route_key(entity_ids)
        if not key:
            return None

        base = self.config.content_path
        for path in (base / f"{key}.{language_id}.json", base / f"{key}.json"):
            payload = self._load(path)
            if payload is not None:
                return payload

        self._logger.debug("No upstream content file", extra={"route_key": key})
        return None

    def _load(self, path: Path) -> Optional[Mapping[str, Any]]:
        if path in self._loaded:
            return self._loaded[path]
        if not path.is_file():
            return None

        data = _read_json(path)
        if not isinstance(data, Mapping):
            raise UpstreamPayloadError(
                "Upstream content must be a JSON object",
                field_name=str(path),
            )
        self._loaded[path] = data
        self._logger.debug("Upstream content loaded", extra={"path": str(path)})
        return data

    def clear_cache(self) -> None:
        """Forget decoded files."""
        self._loaded.clear()


@dataclass
class JsonFileFlightSource:
    """FlightDataPort reading flight batches from JSON files.

    Any batch shape accepted by extract_flight_list works: a bare list,
    or an object wrapping it under "flights", "oneway_flights" or "data".
    """

    config: UpstreamConfig = field(default_factory=lambda: get_config().upstream)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def fetch_flight_data(
        self, entity_ids: Sequence[str]
    ) -> Optional[Sequence[Mapping[str, Any]]]:
        """Return raw records for a route, or None when there is no file.

        Raises:
            UpstreamPayloadError: If the file cannot be decoded.
        """
        key = route_key(entity_ids)
        path = self.config.flights_path / f"{key}.json"
        if not key or not path.is_file():
            return None

        records = extract_flight_list(_read_json(path))
        self._logger.debug(
            "Flight batch loaded",
            extra={"route_key": key, "records": len(records)},
        )
        return records

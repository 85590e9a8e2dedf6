"""URL slug and path parsing.

``parse_slug`` turns a single URL segment into a RouteDescriptor;
``parse_path`` understands the site's URL namespaces and an optional
locale prefix. Neither function validates codes against a real IATA
table, and neither raises: malformed input degrades to a descriptor
carrying the raw, upper-cased segment.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from ..domain.models import EntityType, Locale, RouteDescriptor
from ..i18n.locales import DEFAULT_LOCALE, is_supported, normalize

logger = logging.getLogger(__name__)

SEPARATOR = "-"

FLIGHTS = "flights"
AIRPORTS = "airports"
HOTELS = "hotels"
AIRPORT_HOTELS = "airport-hotels"
AIRLINES = "airlines"

HOTEL_SUFFIX = "-airport-hotels"


@dataclass(frozen=True, slots=True)
class RoutedPath:
    """A request path split into its parts.

    Attributes:
        namespace: First path segment after the locale prefix (e.g. 'flights')
        locale: Locale from the path prefix, English when there is none
        route: Descriptor parsed from the remaining segments
        path: The path without its locale prefix, used for canonical URLs
    """

    namespace: str
    locale: Locale
    route: RouteDescriptor
    path: str


def parse_slug(slug: str) -> RouteDescriptor:
    """Parse a route slug.

    "jfk-agp" gives a flight JFK -> AGP, "hyd" gives the airport HYD.
    Anything else ("a-b-c", "-agp", "") gives an airport descriptor whose
    departure code is the whole upper-cased input.

    Args:
        slug: The URL segment.

    Returns:
        A RouteDescriptor. Never raises.
    """
    raw = slug or ""
    cleaned = raw.strip()

    if SEPARATOR in cleaned:
        tokens = cleaned.split(SEPARATOR)
        if len(tokens) == 2 and all(tokens):
            return RouteDescriptor(
                entity_type=EntityType.FLIGHT,
                departure_code=tokens[0].upper(),
                arrival_code=tokens[1].upper(),
                raw_slug=raw,
            )
        logger.debug("Malformed route slug", extra={"slug": raw})

    return RouteDescriptor(
        entity_type=EntityType.AIRPORT,
        departure_code=cleaned.upper(),
        raw_slug=raw,
    )


def airport_code_from_slug(slug: str) -> str:
    """Extract the IATA code from an airport slug.

    Airport slugs end with the code ("a-a-bere-tallo-wata-abu-id" has
    "abu"), so the last three-letter alphabetic token wins. Falls back to
    the whole slug.
    """
    for token in reversed(slug.split(SEPARATOR)):
        if len(token) == 3 and token.isalpha():
            return token.upper()
    return slug.upper()


def _split_path(path: str) -> list[str]:
    path = path.split("?", 1)[0].split("#", 1)[0]
    return [segment for segment in path.split("/") if segment]


def parse_path(path: str) -> Optional[RoutedPath]:
    """Parse a request path such as "/fr/flights/jfk-agp".

    Recognized namespaces:
        /flights/{slug}, /flights/from/{code}, /airports/{slug},
        /hotels/{code}[-airport-hotels], /airport-hotels/{code},
        /airlines/{airline}[/{route}]

    A path in an unknown namespace still yields a RoutedPath (the template
    selector decides it has no template); a path with no usable segments
    yields None.
    """
    segments = _split_path(path or "")
    locale = DEFAULT_LOCALE
    if segments and is_supported(segments[0].lower()):
        locale = normalize(segments[0])
        segments = segments[1:]

    if len(segments) < 2:
        return None

    namespace = segments[0].lower()
    rest = segments[1:]
    bare_path = "/" + "/".join(segments)
    route = _route_for(namespace, rest)
    if route is None:
        logger.debug("Unparseable path", extra={"path": path})
        return None

    return RoutedPath(namespace=namespace, locale=locale, route=route, path=bare_path)


def _route_for(namespace: str, rest: list[str]) -> Optional[RouteDescriptor]:
    if namespace == FLIGHTS:
        if len(rest) == 2 and rest[0].lower() == "from":
            return RouteDescriptor(
                entity_type=EntityType.AIRPORT,
                departure_code=rest[1].upper(),
                raw_slug=rest[1],
            )
        if len(rest) == 1:
            return parse_slug(rest[0])
        return None

    if namespace == AIRPORTS:
        if len(rest) != 1:
            return None
        return RouteDescriptor(
            entity_type=EntityType.AIRPORT,
            departure_code=airport_code_from_slug(rest[0]),
            raw_slug=rest[0],
        )

    if namespace in (HOTELS, AIRPORT_HOTELS):
        if len(rest) != 1:
            return None
        code = rest[0]
        if code.lower().endswith(HOTEL_SUFFIX):
            code = code[: -len(HOTEL_SUFFIX)]
        return RouteDescriptor(
            entity_type=EntityType.HOTEL,
            departure_code=code.upper(),
            raw_slug=rest[0],
        )

    if namespace == AIRLINES:
        if len(rest) not in (1, 2):
            return None
        airline = rest[0].lower()
        departure = arrival = ""
        if len(rest) == 2:
            leg = parse_slug(rest[1])
            departure, arrival = leg.departure_code, leg.arrival_code
        return RouteDescriptor(
            entity_type=EntityType.AIRLINE,
            departure_code=departure,
            arrival_code=arrival,
            raw_slug="/".join(rest),
            airline_slug=airline,
        )

    if len(rest) == 1:
        return parse_slug(rest[0])
    return None

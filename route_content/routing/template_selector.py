"""Template selection.

A pure function of the URL namespace and the presence of an arrival
code. Unrecognized combinations select nothing; callers render nothing
instead of guessing a template.
"""

from __future__ import annotations

import logging
from typing import Optional

from ..domain.models import RouteDescriptor, TemplateType
from .slug_parser import AIRLINES, AIRPORT_HOTELS, AIRPORTS, FLIGHTS, HOTELS

logger = logging.getLogger(__name__)


def select_template(namespace: str, route: RouteDescriptor) -> Optional[TemplateType]:
    """Pick the page template for a parsed route.

    Args:
        namespace: URL namespace (e.g. 'flights', 'hotels').
        route: Parsed route descriptor.

    Returns:
        The template type, or None when the combination is not recognized.
    """
    namespace = (namespace or "").lower()

    if namespace == AIRLINES:
        return TemplateType.AIRLINE if route.airline_slug else None

    if not route.departure_code:
        return None

    if namespace in (HOTELS, AIRPORT_HOTELS):
        return TemplateType.HOTEL
    if namespace in (FLIGHTS, AIRPORTS):
        return TemplateType.FLIGHT if route.has_arrival else TemplateType.AIRPORT

    logger.info(
        "No template for namespace",
        extra={"namespace": namespace, "slug": route.raw_slug},
    )
    return None

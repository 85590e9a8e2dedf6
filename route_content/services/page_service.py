"""Page service - end-to-end orchestration for one request path.

Parses the path, selects the template, fetches upstream content and
flights through the ports, computes metrics and resolves the bundle.
Upstream failures never fail a page: a fetch that raises is logged and
treated exactly like a fetch that returned nothing.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Sequence, Union

from ..adapters.upstream.payload import parse_upstream_payload
from ..domain.errors import ContentEngineError
from ..domain.models import (
    ContentBundle,
    DerivedMetrics,
    Locale,
    NormalizedFlight,
    RouteDescriptor,
    TemplateType,
)
from ..i18n.locales import normalize
from ..metrics.calculator import compute_metrics
from ..metrics.normalizer import normalize_flights
from ..ports.upstream import ContentSourcePort, FlightDataPort
from ..routing.canonical import alternate_urls, canonical_url
from ..routing.slug_parser import RoutedPath, parse_path
from ..routing.template_selector import select_template
from .content_resolver import FallbackContentResolver


@dataclass(frozen=True)
class PageResult:
    """Everything a page template needs.

    Attributes:
        template: Template that consumes the bundle
        routed: Parsed request path
        locale: Locale the page was rendered in
        bundle: Resolved content
        flights: Normalized flights shown on the page
        metrics: Statistics over ``flights``
        canonical_url: Canonical URL for the page in ``locale``
        alternate_urls: hreflang tag -> URL
    """

    template: TemplateType
    routed: RoutedPath
    locale: Locale
    bundle: ContentBundle
    flights: tuple[NormalizedFlight, ...]
    metrics: DerivedMetrics
    canonical_url: str
    alternate_urls: Mapping[str, str]


@dataclass
class PageService:
    """Renders content for request paths.

    Attributes:
        resolver: Fallback content resolver
        content_source: Upstream content API
        flight_source: Upstream flight-data API
        base_url: Canonical base URL; the configured site domain when None
    """

    resolver: FallbackContentResolver
    content_source: ContentSourcePort
    flight_source: FlightDataPort
    base_url: Optional[str] = None

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def render(
        self, path: str, locale: Union[str, Locale, None] = None
    ) -> Optional[PageResult]:
        """Render the page for ``path``.

        Args:
            path: Request path, optionally locale-prefixed ("/fr/flights/jfk-agp").
            locale: Overrides the locale from the path prefix when given.

        Returns:
            The page result, or None when no template applies to the path.

        Raises:
            DuplicateSectionError: If a section is attached twice (a bug).
        """
        routed = parse_path(path)
        if routed is None:
            self._logger.info("Unrecognized path", extra={"path": path})
            return None

        template = select_template(routed.namespace, routed.route)
        if template is None:
            self._logger.info(
                "No template selected, rendering nothing",
                extra={"path": path, "namespace": routed.namespace},
            )
            return None

        loc = normalize(locale) if locale is not None else routed.locale
        route = routed.route

        upstream = parse_upstream_payload(self._fetch_content(route, loc))
        flights = normalize_flights(self._fetch_flights(route))
        metrics = compute_metrics(flights, upstream.aggregates)
        bundle = self.resolver.resolve(route, loc, upstream, metrics)

        self._logger.info(
            "Page rendered",
            extra={
                "path": routed.path,
                "template": template.value,
                "locale": loc.value,
                "flights": metrics.total_flights,
            },
        )

        return PageResult(
            template=template,
            routed=routed,
            locale=loc,
            bundle=bundle,
            flights=tuple(flights),
            metrics=metrics,
            canonical_url=canonical_url(routed.path, loc, self.base_url),
            alternate_urls=alternate_urls(routed.path, self.base_url),
        )

    def render_safe(
        self, path: str, locale: Union[str, Locale, None] = None
    ) -> tuple[Optional[PageResult], Optional[str]]:
        """Render a page, returning an error message instead of raising.

        Returns:
            Tuple of (PageResult or None, error message or None).
        """
        try:
            result = self.render(path, locale)
        except ContentEngineError as e:
            return None, f"Error: {e.message}"
        except Exception as e:
            self._logger.exception("Unexpected error rendering page")
            return None, f"Error: {e}"

        if result is None:
            return None, f"No content for path: {path}"
        return result, None

    def _fetch_content(
        self, route: RouteDescriptor, locale: Locale
    ) -> Optional[Mapping[str, Any]]:
        try:
            return self.content_source.fetch_content(route.entity_ids, locale.language_id)
        except Exception as e:
            self._logger.warning(
                "Upstream content fetch failed, using fallbacks",
                extra={"slug": route.raw_slug, "error": str(e)},
            )
            return None

    def _fetch_flights(
        self, route: RouteDescriptor
    ) -> Optional[Sequence[Mapping[str, Any]]]:
        try:
            return self.flight_source.fetch_flight_data(route.entity_ids)
        except Exception as e:
            self._logger.warning(
                "Upstream flight fetch failed, showing no flights",
                extra={"slug": route.raw_slug, "error": str(e)},
            )
            return None

"""Services layer - Application orchestration.

Available services:
- FallbackContentResolver: Resolves the content bundle for a route and locale
- PageService: Path -> template, upstream fetch, metrics and bundle
"""

from .content_resolver import FallbackContentResolver, from_upstream
from .page_service import PageResult, PageService

__all__ = ["FallbackContentResolver", "from_upstream", "PageService", "PageResult"]

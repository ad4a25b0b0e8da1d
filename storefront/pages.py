"""
Page rendering with analytics.
"""

import logging
from typing import Optional

from providers.analytics import AnalyticsTracker, PageViewTracker
from shared.templates import HOME_PAGE_CONTENT, HOME_PAGE_PATH

logger = logging.getLogger("page_service")


class PageService:
    """Renders pages and records a page view for each render."""

    def __init__(self, tracker: Optional[AnalyticsTracker] = None):
        self.tracker = tracker or PageViewTracker()

    def render_page(self) -> str:
        """Track a view of the home page and return its content."""
        self.tracker.track_page_view(HOME_PAGE_PATH)
        logger.debug(f"Rendered {HOME_PAGE_PATH}")
        return HOME_PAGE_CONTENT

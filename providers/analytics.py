"""
Analytics tracker.

Page views are fire-and-forget: callers do not look at the result.
"""

import logging
from typing import Protocol

logger = logging.getLogger("analytics")


class AnalyticsTracker(Protocol):
    """Records that a page was viewed."""

    def track_page_view(self, path: str) -> None:
        ...


class PageViewTracker:
    """In-memory tracker that logs and remembers every page view."""

    def __init__(self):
        self.page_views: list[str] = []

    def track_page_view(self, path: str) -> None:
        self.page_views.append(path)
        logger.info(f"[PAGE VIEW] {path}")

    def count_views(self, path: str) -> int:
        """How many times a path was viewed."""
        return sum(1 for p in self.page_views if p == path)

    def clear_history(self):
        self.page_views.clear()

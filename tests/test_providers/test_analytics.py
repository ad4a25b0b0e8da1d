"""
Tests for the page-view tracker.
"""

from providers.analytics import PageViewTracker


class TestPageViewTracker:

    def test_tracks_views(self, tracker: PageViewTracker):
        tracker.track_page_view("/home")
        tracker.track_page_view("/cart")
        tracker.track_page_view("/home")

        assert tracker.page_views == ["/home", "/cart", "/home"]
        assert tracker.count_views("/home") == 2

    def test_clear_history(self, tracker: PageViewTracker):
        tracker.track_page_view("/home")
        tracker.clear_history()
        assert tracker.page_views == []

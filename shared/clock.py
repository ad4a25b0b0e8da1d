"""
Injectable clock.

Time-based business rules (store hours, seasonal discounts) read the current
instant through this module instead of calling datetime.now() directly, so
tests can pin the clock to a known instant.

Design decisions:
- The clock is a tiny protocol with a single `now()` method
- `now()` at module level is the single accessor used by the business rules
- A module-level default clock, swappable with `set_clock()` / `reset_clock()`
- All times are naive local time, as reported by the operating system
"""

from datetime import datetime, timedelta
from typing import Optional, Protocol


class Clock(Protocol):
    """Source of the current instant."""

    def now(self) -> datetime:
        ...


class SystemClock:
    """Reads the local wall-clock time."""

    def now(self) -> datetime:
        return datetime.now()


class FixedClock:
    """
    A clock frozen at a chosen instant.

    Example:
        clock = FixedClock(datetime(2024, 12, 25, 9, 30))
        clock.advance(timedelta(hours=12))
        clock.now()  # 2024-12-25 21:30
    """

    def __init__(self, instant: datetime):
        self.instant = instant

    def now(self) -> datetime:
        return self.instant

    def set(self, instant: datetime) -> None:
        """Move the clock to a new instant."""
        self.instant = instant

    def advance(self, delta: timedelta) -> datetime:
        """Move the clock forward by `delta` and return the new instant."""
        self.instant = self.instant + delta
        return self.instant


# Module-level default clock
# In tests, call set_clock() with a FixedClock and reset_clock() afterwards
_default_clock: Optional[Clock] = None


def get_clock() -> Clock:
    """Get the default clock singleton."""
    global _default_clock
    if _default_clock is None:
        _default_clock = SystemClock()
    return _default_clock


def set_clock(clock: Clock) -> Clock:
    """Replace the default clock."""
    global _default_clock
    _default_clock = clock
    return clock


def reset_clock() -> Clock:
    """Restore the system clock as the default (useful for testing)."""
    global _default_clock
    _default_clock = SystemClock()
    return _default_clock


def now() -> datetime:
    """The current instant according to the default clock."""
    return get_clock().now()

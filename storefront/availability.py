"""
Store hours and seasonal discount.

Both rules are pure functions of the current instant. The instant comes from
an injected clock, or from the module-level clock in shared.clock when none
is given, so tests can pin time without patching datetime.
"""

import logging
from typing import Optional

from shared import clock as store_clock
from shared.clock import Clock
from shared.config import StorePolicy, get_store_policy

logger = logging.getLogger("store_hours")


class StoreHours:
    """
    Time-based business rules.

    Example:
        hours = StoreHours(clock=FixedClock(datetime(2024, 12, 25, 21, 0)))
        hours.is_online()     # False, closes at 20:00
        hours.get_discount()  # 0.2, it's December 25
    """

    def __init__(
        self,
        clock: Optional[Clock] = None,
        policy: Optional[StorePolicy] = None,
    ):
        self._clock = clock
        self.policy = policy or get_store_policy()

    def _now(self):
        if self._clock is not None:
            return self._clock.now()
        return store_clock.now()

    def is_online(self) -> bool:
        """True during [open_hour, close_hour) local time."""
        hour = self._now().hour
        return self.policy.open_hour <= hour < self.policy.close_hour

    def get_discount(self) -> float:
        """The seasonal discount rate on the discount date, otherwise 0."""
        today = self._now()
        if (today.month, today.day) == (self.policy.discount_month, self.policy.discount_day):
            logger.debug(f"Seasonal discount applies on {today.date()}")
            return self.policy.seasonal_discount_rate
        return 0

"""
Store policy configuration.

Business constants used by the time-based rules: opening hours and the
seasonal discount date. Every field can be overridden with an environment
variable prefixed with STOREFRONT_, e.g.:

    STOREFRONT_OPEN_HOUR              Opening hour, inclusive (default 8)
    STOREFRONT_CLOSE_HOUR             Closing hour, exclusive (default 20)
    STOREFRONT_DISCOUNT_MONTH         Month of the seasonal discount (default 12)
    STOREFRONT_DISCOUNT_DAY           Day of the seasonal discount (default 25)
    STOREFRONT_SEASONAL_DISCOUNT_RATE Discount on the seasonal date (default 0.2)

Malformed values raise pydantic's ValidationError naming the field.
"""

import logging
from typing import Optional
from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger("store_config")


class StorePolicy(BaseSettings):
    """
    Opening hours and seasonal discount rules.

    The store is online during [open_hour, close_hour) local time.
    The discount applies for the whole of discount_month/discount_day.
    """
    model_config = SettingsConfigDict(env_prefix="STOREFRONT_", extra="ignore")

    open_hour: int = Field(default=8, ge=0, le=23)
    close_hour: int = Field(default=20, ge=1, le=24)
    discount_month: int = Field(default=12, ge=1, le=12)
    discount_day: int = Field(default=25, ge=1, le=31)
    seasonal_discount_rate: float = Field(default=0.2, ge=0, lt=1)

    @model_validator(mode="after")
    def _check_hours(self) -> "StorePolicy":
        if self.close_hour <= self.open_hour:
            raise ValueError(
                f"close_hour ({self.close_hour}) must be after open_hour ({self.open_hour})"
            )
        return self


def load_store_policy() -> StorePolicy:
    """Build a policy from defaults plus any STOREFRONT_* environment overrides."""
    policy = StorePolicy()
    logger.info(
        f"Store policy: open {policy.open_hour}-{policy.close_hour}, "
        f"{policy.seasonal_discount_rate:.0%} off on {policy.discount_month}/{policy.discount_day}"
    )
    return policy


_default_policy: Optional[StorePolicy] = None


def get_store_policy() -> StorePolicy:
    """Get the default store policy singleton."""
    global _default_policy
    if _default_policy is None:
        _default_policy = load_store_policy()
    return _default_policy


def reset_store_policy() -> None:
    """Forget the cached policy so the next call reloads it (useful for testing)."""
    global _default_policy
    _default_policy = None

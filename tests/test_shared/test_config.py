"""
Tests for store policy configuration.
"""

import pytest
from pydantic import ValidationError

from shared.config import StorePolicy, get_store_policy, load_store_policy


POLICY_ENV_VARS = (
    "STOREFRONT_OPEN_HOUR",
    "STOREFRONT_CLOSE_HOUR",
    "STOREFRONT_DISCOUNT_MONTH",
    "STOREFRONT_DISCOUNT_DAY",
    "STOREFRONT_SEASONAL_DISCOUNT_RATE",
)


@pytest.fixture(autouse=True)
def clean_policy_env(monkeypatch):
    """Start every test without STOREFRONT_* overrides."""
    for name in POLICY_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestStorePolicy:
    """Tests for policy defaults and validation."""

    def test_defaults(self):
        policy = StorePolicy()

        assert policy.open_hour == 8
        assert policy.close_hour == 20
        assert (policy.discount_month, policy.discount_day) == (12, 25)
        assert policy.seasonal_discount_rate == 0.2

    def test_close_must_follow_open(self):
        with pytest.raises(ValidationError):
            StorePolicy(open_hour=20, close_hour=8)
        with pytest.raises(ValidationError):
            StorePolicy(open_hour=9, close_hour=9)

    def test_hours_bounded(self):
        with pytest.raises(ValidationError):
            StorePolicy(close_hour=25)


class TestLoadStorePolicy:
    """Tests for environment overrides."""

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("STOREFRONT_OPEN_HOUR", "9")
        monkeypatch.setenv("STOREFRONT_CLOSE_HOUR", "17")
        monkeypatch.setenv("STOREFRONT_SEASONAL_DISCOUNT_RATE", "0.3")

        policy = load_store_policy()

        assert policy.open_hour == 9
        assert policy.close_hour == 17
        assert policy.seasonal_discount_rate == 0.3

    def test_discount_date_overrides(self, monkeypatch):
        monkeypatch.setenv("STOREFRONT_DISCOUNT_MONTH", "11")
        monkeypatch.setenv("STOREFRONT_DISCOUNT_DAY", "29")

        policy = load_store_policy()

        assert (policy.discount_month, policy.discount_day) == (11, 29)

    @pytest.mark.parametrize("name,value", [
        ("STOREFRONT_OPEN_HOUR", "nine"),
        ("STOREFRONT_CLOSE_HOUR", "30"),
        ("STOREFRONT_SEASONAL_DISCOUNT_RATE", "lots"),
        ("STOREFRONT_DISCOUNT_MONTH", "13"),
    ])
    def test_malformed_value_raises_validation_error(self, monkeypatch, name, value):
        monkeypatch.setenv(name, value)

        with pytest.raises(ValidationError):
            load_store_policy()

    def test_no_overrides_gives_defaults(self):
        assert load_store_policy() == StorePolicy()

    def test_get_store_policy_is_cached(self):
        assert get_store_policy() is get_store_policy()

"""
Shared pytest fixtures for the storefront tests.

These fixtures provide fresh mock collaborators for every test and restore
module-level state (clock, store policy) afterwards.
"""

import pytest
from datetime import datetime

from providers.analytics import PageViewTracker
from providers.currency import StaticRateProvider
from providers.payment import MockPaymentCharger
from providers.security import RandomCodeGenerator
from providers.shipping import TableShippingProvider
from shared.channels import EmailChannel
from shared.clock import FixedClock, reset_clock
from shared.config import StorePolicy, reset_store_policy
from shared.models import ShippingQuote


@pytest.fixture(autouse=True)
def restore_module_state():
    """Put the default clock and cached policy back after each test."""
    yield
    reset_clock()
    reset_store_policy()


# =============================================================================
# Collaborator Fixtures
# =============================================================================

@pytest.fixture
def email_channel() -> EmailChannel:
    """Fresh EmailChannel for each test."""
    return EmailChannel(fail_rate=0.0)


@pytest.fixture
def rate_provider() -> StaticRateProvider:
    """Rate table with a few known currencies."""
    return StaticRateProvider({"USD": 1.0, "EUR": 0.5, "IRT": 60.0})


@pytest.fixture
def shipping_provider() -> TableShippingProvider:
    """Route table with Tehran (100, 2 days) and Boston (7.5, 1 day)."""
    return TableShippingProvider({
        "Tehran": ShippingQuote(cost=100, estimated_days=2),
        "Boston": ShippingQuote(cost=7.5, estimated_days=1),
    })


@pytest.fixture
def charger() -> MockPaymentCharger:
    """Charger that always succeeds."""
    return MockPaymentCharger(fail_rate=0.0)


@pytest.fixture
def declining_charger() -> MockPaymentCharger:
    """Charger that always declines."""
    return MockPaymentCharger(fail_rate=1.0)


@pytest.fixture
def code_generator() -> RandomCodeGenerator:
    return RandomCodeGenerator()


@pytest.fixture
def tracker() -> PageViewTracker:
    return PageViewTracker()


# =============================================================================
# Time Fixtures
# =============================================================================

@pytest.fixture
def policy() -> StorePolicy:
    """Default policy: open 8-20, 20% off on December 25."""
    return StorePolicy()


@pytest.fixture
def fixed_clock() -> FixedClock:
    """A clock frozen at 2024-01-01 12:00; tests move it with set()."""
    return FixedClock(datetime(2024, 1, 1, 12, 0))


@pytest.fixture
def valid_email() -> str:
    return "test@test.com"

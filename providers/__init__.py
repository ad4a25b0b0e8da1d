"""
External collaborators used by the storefront.

Each collaborator is a Protocol with a single method plus an in-memory mock
implementation that logs every call and keeps a history for assertions.
In a real system these would wrap third-party services:
- Currency: an exchange-rate API
- Shipping: a carrier rate-quote API
- Payment: a card processor such as Stripe
- Analytics: a page-view tracker
- Security: a one-time password service

The Notifier (email) lives in shared.channels.
"""

from providers.currency import RateProvider, StaticRateProvider
from providers.shipping import ShippingQuoteProvider, TableShippingProvider
from providers.payment import PaymentCharger, MockPaymentCharger
from providers.analytics import AnalyticsTracker, PageViewTracker
from providers.security import SecurityCodeGenerator, RandomCodeGenerator

__all__ = [
    "RateProvider",
    "StaticRateProvider",
    "ShippingQuoteProvider",
    "TableShippingProvider",
    "PaymentCharger",
    "MockPaymentCharger",
    "AnalyticsTracker",
    "PageViewTracker",
    "SecurityCodeGenerator",
    "RandomCodeGenerator",
]

"""
Shared infrastructure for the storefront.

This package contains code used by the orchestration services and the API:
- Domain models (Cart, ShippingQuote, OrderResult, etc.)
- Mock email channel (the Notifier)
- Message templates
- Injectable clock and store policy configuration
"""

from shared.models import (
    Cart,
    ShippingQuote,
    ChargeResult,
    OrderResult,
    Coupon,
    PaymentStatus,
)
from shared.channels import EmailChannel, SentEmail, Notifier
from shared.clock import Clock, FixedClock, SystemClock
from shared.config import StorePolicy

__all__ = [
    "Cart",
    "ShippingQuote",
    "ChargeResult",
    "OrderResult",
    "Coupon",
    "PaymentStatus",
    "EmailChannel",
    "SentEmail",
    "Notifier",
    "Clock",
    "FixedClock",
    "SystemClock",
    "StorePolicy",
]

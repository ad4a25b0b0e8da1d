"""
Storefront orchestration services.

Each service sequences calls to external collaborators and turns their
outcomes into caller-facing values:
- CheckoutService: currency conversion, shipping messages, order submission
- AccountService: signup with a welcome email, login with a one-time code
- StoreHours: opening hours and the seasonal discount
- PageService: page rendering with analytics
- coupons: fixed coupon table and discount calculation
"""

from storefront.accounts import AccountService
from storefront.availability import StoreHours
from storefront.checkout import CheckoutService
from storefront.coupons import calculate_discount, get_coupons
from storefront.pages import PageService

__all__ = [
    "AccountService",
    "StoreHours",
    "CheckoutService",
    "PageService",
    "calculate_discount",
    "get_coupons",
]

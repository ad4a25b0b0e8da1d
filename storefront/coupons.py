"""
Coupon codes.

A fixed table of discount codes. Bad input is reported with an error string
instead of an exception, so the result can be shown to a shopper as-is.
"""

from numbers import Real
from typing import Union

from shared.models import Coupon


COUPONS: list[Coupon] = [
    Coupon(code="SAVE20", discount=0.2),
    Coupon(code="SAVE10", discount=0.1),
]

INVALID_PRICE = "Invalid price"
INVALID_CODE = "Invalid discount code"


def get_coupons() -> list[Coupon]:
    """All available coupons."""
    return list(COUPONS)


def find_coupon(code: str):
    """The coupon with this exact code, or None."""
    for coupon in COUPONS:
        if coupon.code == code:
            return coupon
    return None


def calculate_discount(price, discount_code) -> Union[float, str]:
    """
    Apply a coupon to a price.

    Returns:
        The discounted price for a known code, the unchanged price for an
        unknown code, or an "Invalid ..." message for bad input.
    """
    if isinstance(price, bool) or not isinstance(price, Real) or price < 0:
        return INVALID_PRICE
    if not isinstance(discount_code, str):
        return INVALID_CODE

    coupon = find_coupon(discount_code)
    if coupon is None:
        return price
    return price * (1 - coupon.discount)

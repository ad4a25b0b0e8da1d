"""
Demonstration scripts for the storefront.

Each function wires the orchestration services to the mock collaborators,
runs a short scenario, and prints what happened. Logs from the mock
collaborators show the order in which they were called.
"""

import asyncio
import logging
from datetime import datetime

from providers.analytics import PageViewTracker
from providers.payment import MockPaymentCharger
from providers.security import RandomCodeGenerator
from shared.channels import EmailChannel
from shared.clock import FixedClock
from shared.models import Cart
from storefront.accounts import AccountService
from storefront.availability import StoreHours
from storefront.checkout import CheckoutService
from storefront.coupons import calculate_discount
from storefront.pages import PageService

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(name)-24s | %(levelname)-5s | %(message)s",
    datefmt="%H:%M:%S",
)


def run_checkout_demo():
    """
    Walk through a checkout: price conversion, shipping, coupon and payment.

    The second order uses a charger that always declines, to show that a
    declined payment comes back as a failed OrderResult, not an exception.
    """
    print("\n" + "=" * 70)
    print("DEMO: Checkout")
    print("=" * 70 + "\n")

    service = CheckoutService(charger=MockPaymentCharger())

    print(f"Price of 25.00 in EUR:  {service.convert(25.0, 'EUR')}")
    print(f"Shipping to London:     {service.shipping_info('London')}")
    print(f"Shipping to Atlantis:   {service.shipping_info('Atlantis')}")
    print(f"40.00 with SAVE20:      {calculate_discount(40.0, 'SAVE20')}")

    print("\n" + "-" * 70)
    print("ACTION: Submitting two orders (second card is declined)")
    print("-" * 70 + "\n")

    credentials = {"card_number": "4242424242424242", "expiry": "12/30"}
    paid = asyncio.run(service.submit_order(Cart(total_amount=32.0), credentials))

    declining = CheckoutService(charger=MockPaymentCharger(fail_rate=1.0))
    declined = asyncio.run(declining.submit_order(Cart(total_amount=32.0), credentials))

    print(f"\nFirst order:  {paid.to_dict()}")
    print(f"Second order: {declined.to_dict()}")

    return [paid, declined]


def run_accounts_demo():
    """Sign up one valid and one invalid address, then log in."""
    print("\n" + "=" * 70)
    print("DEMO: Accounts")
    print("=" * 70 + "\n")

    channel = EmailChannel()
    codes = RandomCodeGenerator()
    service = AccountService(notifier=channel, code_generator=codes)

    print(f"sign_up('ada@example.com') -> {service.sign_up('ada@example.com')}")
    print(f"sign_up('ada.example.com') -> {service.sign_up('ada.example.com')}")
    service.login("ada@example.com")

    print("\nEmails sent:")
    for msg in channel.sent_messages:
        print(f"  {msg}")
    print(f"\nLogin code issued: {codes.last_code}")

    return channel.sent_messages


def run_store_demo():
    """Evaluate store hours and the seasonal discount at a few instants."""
    print("\n" + "=" * 70)
    print("DEMO: Store hours and seasonal discount")
    print("=" * 70 + "\n")

    clock = FixedClock(datetime(2024, 12, 24, 7, 59))
    hours = StoreHours(clock=clock)
    pages = PageService(tracker=PageViewTracker())

    rows = []
    for instant in (
        datetime(2024, 12, 24, 7, 59),
        datetime(2024, 12, 24, 8, 0),
        datetime(2024, 12, 25, 19, 59),
        datetime(2024, 12, 25, 20, 0),
    ):
        clock.set(instant)
        rows.append((instant, hours.is_online(), hours.get_discount()))
        print(f"  {instant:%Y-%m-%d %H:%M}  online={hours.is_online()!s:<5}  discount={hours.get_discount()}")

    print(f"\nHome page: {pages.render_page()}")
    return rows


if __name__ == "__main__":
    print("\nRunning Storefront Demos")
    print("=" * 70)

    run_checkout_demo()
    print("\n")

    run_accounts_demo()
    print("\n")

    run_store_demo()

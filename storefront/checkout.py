"""
Checkout service.

Coordinates the collaborators involved in buying something: exchange rates,
shipping quotes and the payment charger. The service holds references to its
collaborators but no per-call state, so one instance can serve concurrent
callers.

Outcomes that are part of normal business (no shipping route, a declined
payment) are returned as values. Faults raised by a collaborator propagate
to the caller untouched.
"""

import logging
from typing import Optional

from providers.currency import RateProvider, StaticRateProvider
from providers.payment import MockPaymentCharger, PaymentCharger
from providers.shipping import ShippingQuoteProvider, TableShippingProvider
from shared.models import Cart, ChargeResult, OrderResult, PaymentCredentials
from shared.templates import SHIPPING_UNAVAILABLE_MESSAGE, render_shipping_quote

logger = logging.getLogger("checkout_service")


class CheckoutService:
    """
    Currency conversion, shipping messages and order submission.

    Example:
        service = CheckoutService(charger=MockPaymentCharger())
        result = await service.submit_order(Cart(total_amount=100), {"card": "4242"})
        result.to_dict()  # {"success": True}
    """

    def __init__(
        self,
        rate_provider: Optional[RateProvider] = None,
        shipping_provider: Optional[ShippingQuoteProvider] = None,
        charger: Optional[PaymentCharger] = None,
    ):
        self.rate_provider = rate_provider or StaticRateProvider()
        self.shipping_provider = shipping_provider or TableShippingProvider()
        self.charger = charger or MockPaymentCharger()

    def convert(self, amount: float, target_currency: str) -> float:
        """
        Convert an amount into `target_currency`.

        Returns the raw product of amount and rate; no rounding is applied.
        Errors from the rate provider are not caught.
        """
        rate = self.rate_provider.get_exchange_rate(target_currency)
        converted = amount * rate
        logger.debug(f"Converted {amount} to {converted} {target_currency} at rate {rate}")
        return converted

    def shipping_info(self, destination: str) -> str:
        """Describe shipping cost and time to `destination`."""
        quote = self.shipping_provider.get_shipping_quote(destination)
        if quote is None:
            return SHIPPING_UNAVAILABLE_MESSAGE
        return render_shipping_quote(quote.cost, quote.estimated_days)

    async def submit_order(self, cart: Cart, credentials: PaymentCredentials) -> OrderResult:
        """
        Charge the cart total and report the outcome.

        Only a charge status of exactly "success" yields a successful order.
        Anything else, including statuses the gateway is not documented to
        return, is a failed order. Exceptions from the charger propagate.
        """
        result = await self.charger.charge(credentials, cart.total_amount)
        if not isinstance(result, ChargeResult):
            # Gateways may answer with a mapping or any object exposing .status
            result = ChargeResult.model_validate(result)

        if result.succeeded:
            logger.info(f"Order paid: ${cart.total_amount:.2f}")
            return OrderResult.ok()

        logger.warning(f"Payment not accepted: status={result.status!r}")
        return OrderResult.failed(f"Payment error: charge was {result.status!r}")

"""
Shipping quote provider.

The mock answers from a table of destinations. Destinations without a route
get None rather than an error: "no route" is an expected outcome.
"""

import logging
from typing import Optional, Protocol

from shared.models import ShippingQuote

logger = logging.getLogger("shipping_provider")


DEFAULT_ROUTES: dict[str, ShippingQuote] = {
    "new york": ShippingQuote(cost=10, estimated_days=2),
    "london": ShippingQuote(cost=35, estimated_days=5),
    "tehran": ShippingQuote(cost=100, estimated_days=2),
    "toronto": ShippingQuote(cost=18.5, estimated_days=3),
}


class ShippingQuoteProvider(Protocol):
    """Quotes shipping for a destination, or returns None when there is no route."""

    def get_shipping_quote(self, destination: str) -> Optional[ShippingQuote]:
        ...


class TableShippingProvider:
    """Shipping provider backed by an in-memory route table."""

    def __init__(self, routes: Optional[dict[str, ShippingQuote]] = None):
        source = DEFAULT_ROUTES if routes is None else routes
        self.routes = {name.lower(): quote for name, quote in source.items()}
        self.requests: list[str] = []

    def get_shipping_quote(self, destination: str) -> Optional[ShippingQuote]:
        """Look up a quote; destinations are matched case-insensitively."""
        self.requests.append(destination)
        quote = self.routes.get(destination.strip().lower())
        if quote is None:
            logger.info(f"[QUOTE] No route to {destination}")
            return None

        logger.info(f"[QUOTE] {destination}: ${quote.cost} in {quote.estimated_days} days")
        return quote

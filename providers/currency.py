"""
Exchange-rate provider.

The mock keeps a fixed table of rates relative to the store's base currency.
Unknown currency codes raise ValueError, which the orchestration layer lets
propagate to its caller.
"""

import logging
from typing import Optional, Protocol

logger = logging.getLogger("currency_provider")


DEFAULT_RATES: dict[str, float] = {
    "USD": 1.0,
    "EUR": 0.92,
    "GBP": 0.79,
    "CAD": 1.36,
    "JPY": 149.5,
    "IRT": 60.0,
}


class RateProvider(Protocol):
    """Looks up the conversion rate for a currency code."""

    def get_exchange_rate(self, currency: str) -> float:
        ...


class StaticRateProvider:
    """Rate provider backed by an in-memory table."""

    def __init__(self, rates: Optional[dict[str, float]] = None):
        source = DEFAULT_RATES if rates is None else rates
        self.rates = {code.upper(): rate for code, rate in source.items()}
        self.lookups: list[str] = []

    def get_exchange_rate(self, currency: str) -> float:
        """
        Get the rate for a currency code.

        Raises:
            ValueError: If the currency is not in the table
        """
        self.lookups.append(currency)
        code = currency.upper()
        if code not in self.rates:
            logger.warning(f"[RATE] No rate for currency: {currency}")
            raise ValueError(f"Unknown currency: {currency}")

        rate = self.rates[code]
        logger.info(f"[RATE] {code} = {rate}")
        return rate

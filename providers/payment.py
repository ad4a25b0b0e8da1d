"""
Payment charger.

Charging is asynchronous: the orchestration layer awaits the charger's
result. The mock never talks to a network; it records every charge and can
simulate declined payments with a failure rate, the same way the email
channel simulates delivery failures.

Design decisions:
- Credentials are opaque and stored exactly as received
- A declined payment is a normal result with status "failed", not an exception
- Gateway faults (e.g. a negative amount) raise, and callers let them propagate
"""

import logging
import random
from dataclasses import dataclass, field
from datetime import datetime
from typing import Protocol
from uuid import uuid4

from shared.models import ChargeResult, PaymentCredentials, PaymentStatus

logger = logging.getLogger("payment_charger")


class PaymentCharger(Protocol):
    """Charges an amount against the given credentials."""

    async def charge(self, credentials: PaymentCredentials, amount: float) -> ChargeResult:
        ...


@dataclass
class ChargeRecord:
    """One call made to the mock charger."""
    credentials: PaymentCredentials
    amount: float
    result: ChargeResult
    timestamp: datetime = field(default_factory=datetime.now)


class MockPaymentCharger:
    """
    Mock payment gateway.

    Example:
        charger = MockPaymentCharger(fail_rate=0.0)
        result = await charger.charge({"card_number": "4242"}, 25.0)
        result.status  # "success"
    """

    def __init__(self, fail_rate: float = 0.0):
        """
        Initialize the charger.

        Args:
            fail_rate: Probability of a declined charge (0.0 to 1.0), for testing.
        """
        self.fail_rate = fail_rate
        self.charges: list[ChargeRecord] = []

    async def charge(self, credentials: PaymentCredentials, amount: float) -> ChargeResult:
        """
        Charge `amount` to `credentials`.

        Raises:
            ValueError: If the amount is negative
        """
        if amount < 0:
            raise ValueError(f"Cannot charge a negative amount: {amount}")

        if random.random() < self.fail_rate:
            result = ChargeResult(status=PaymentStatus.FAILED.value)
            logger.warning(f"[CHARGE DECLINED] ${amount:.2f}")
        else:
            result = ChargeResult(
                status=PaymentStatus.SUCCESS.value,
                transaction_id=f"txn-{uuid4().hex[:12]}",
            )
            logger.info(f"[CHARGE] ${amount:.2f} | Transaction: {result.transaction_id}")

        self.charges.append(ChargeRecord(credentials=credentials, amount=amount, result=result))
        return result

    def get_charge_count(self) -> int:
        """Get the number of charges attempted (for testing)."""
        return len(self.charges)

    def clear_history(self):
        """Clear charge history (useful between tests)."""
        self.charges.clear()

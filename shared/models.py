"""
Domain models for the storefront orchestration layer.

These are transient value shapes: every instance is created for a single
orchestration call and discarded when the call returns. Nothing here is
persisted.

Design decisions:
- Using Pydantic for validation and serialization
- Charge statuses are kept as plain strings so an unrecognised status from a
  payment gateway can still be represented (and mapped to a failed order)
- Order results carry exactly one of two variants: success, or failure with
  an error message
"""

from enum import Enum
from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


# Payment credentials are forwarded verbatim to the charger and never inspected.
PaymentCredentials = Any

UNKNOWN_STATUS = "unknown"


# =============================================================================
# Enums
# =============================================================================

class PaymentStatus(str, Enum):
    """Statuses a payment charger is expected to report."""
    SUCCESS = "success"
    FAILED = "failed"


# =============================================================================
# Checkout Models
# =============================================================================

class Cart(BaseModel):
    """
    Shopping cart submitted at checkout.

    Line items and quantities are out of scope; only the total is charged.
    """
    total_amount: float = Field(..., ge=0, description="Amount to charge")


class ShippingQuote(BaseModel):
    """A quote returned by the shipping provider for one destination."""
    cost: float = Field(..., ge=0, description="Shipping cost")
    estimated_days: int = Field(..., ge=1, description="Estimated delivery time in days")


class ChargeResult(BaseModel):
    """
    Outcome reported by the payment charger.

    `status` is normally one of PaymentStatus, but is not restricted to it.
    Gateways may answer with a mapping or any object carrying a `status`
    attribute; non-string statuses are kept in their string form and a
    missing status reads as "unknown".
    """
    model_config = ConfigDict(from_attributes=True)

    status: str = Field(default=UNKNOWN_STATUS, description="Charge status reported by the gateway")
    transaction_id: Optional[str] = Field(default=None)

    @field_validator("status", mode="before")
    @classmethod
    def _status_as_text(cls, value: Any) -> str:
        if value is None:
            return UNKNOWN_STATUS
        if isinstance(value, Enum):
            return str(value.value)
        return value if type(value) is str else str(value)

    @property
    def succeeded(self) -> bool:
        """True only for an exact success status."""
        return self.status == PaymentStatus.SUCCESS.value


class OrderResult(BaseModel):
    """
    Caller-facing result of submitting an order.

    Either `{success: true}` or `{success: false, error: "..."}`.
    """
    success: bool
    error: Optional[str] = None

    @model_validator(mode="after")
    def _check_variant(self) -> "OrderResult":
        if self.success and self.error is not None:
            raise ValueError("a successful order result cannot carry an error")
        if not self.success and not self.error:
            raise ValueError("a failed order result requires an error message")
        return self

    @classmethod
    def ok(cls) -> "OrderResult":
        return cls(success=True)

    @classmethod
    def failed(cls, error: str) -> "OrderResult":
        return cls(success=False, error=error)

    def to_dict(self) -> dict[str, Any]:
        """Serialize without the error key on success."""
        return self.model_dump(exclude_none=True)


# =============================================================================
# Promotions
# =============================================================================

class Coupon(BaseModel):
    """A discount code and the fraction it takes off the price."""
    code: str = Field(..., min_length=1)
    discount: float = Field(..., gt=0, lt=1)

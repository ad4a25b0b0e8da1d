"""
Tests for shared domain models.

These tests verify validation rules and the two-variant shape of order
results.
"""

from types import SimpleNamespace

import pytest
from pydantic import ValidationError

from shared.models import (
    Cart,
    ChargeResult,
    Coupon,
    OrderResult,
    PaymentStatus,
    ShippingQuote,
)


class TestCart:
    """Tests for Cart model."""

    def test_create_cart(self):
        cart = Cart(total_amount=100)
        assert cart.total_amount == 100

    def test_negative_total_rejected(self):
        with pytest.raises(ValidationError):
            Cart(total_amount=-1)


class TestShippingQuote:
    """Tests for ShippingQuote model."""

    def test_create_quote(self):
        quote = ShippingQuote(cost=100, estimated_days=2)
        assert quote.cost == 100
        assert quote.estimated_days == 2

    def test_zero_days_rejected(self):
        """Delivery takes at least one day."""
        with pytest.raises(ValidationError):
            ShippingQuote(cost=10, estimated_days=0)

    def test_negative_cost_rejected(self):
        with pytest.raises(ValidationError):
            ShippingQuote(cost=-5, estimated_days=3)


class TestChargeResult:
    """Tests for ChargeResult model."""

    def test_success_status(self):
        assert ChargeResult(status=PaymentStatus.SUCCESS.value).succeeded is True

    def test_failed_status(self):
        assert ChargeResult(status="failed").succeeded is False

    def test_unrecognised_status_is_not_success(self):
        """Statuses outside the documented set are kept, and never count as success."""
        result = ChargeResult(status="pending_review")
        assert result.status == "pending_review"
        assert result.succeeded is False

    def test_success_is_case_sensitive(self):
        assert ChargeResult(status="SUCCESS").succeeded is False

    @pytest.mark.parametrize("payload,expected", [
        ({"status": None}, "unknown"),
        ({"status": 0}, "0"),
        ({}, "unknown"),
        ({"status": PaymentStatus.SUCCESS}, "success"),
    ])
    def test_lenient_status_parsing(self, payload, expected):
        result = ChargeResult.model_validate(payload)

        assert result.status == expected

    def test_from_object_attributes(self):
        result = ChargeResult.model_validate(SimpleNamespace(status="failed", transaction_id="tx-1"))

        assert result.status == "failed"
        assert result.transaction_id == "tx-1"
        assert result.succeeded is False

    def test_enum_status_succeeds(self):
        assert ChargeResult(status=PaymentStatus.SUCCESS).succeeded is True


class TestOrderResult:
    """Tests for the OrderResult variants."""

    def test_ok_serializes_without_error(self):
        assert OrderResult.ok().to_dict() == {"success": True}

    def test_failed_carries_error(self):
        result = OrderResult.failed("Payment error")
        assert result.to_dict() == {"success": False, "error": "Payment error"}

    def test_success_with_error_rejected(self):
        with pytest.raises(ValidationError):
            OrderResult(success=True, error="boom")

    def test_failure_without_error_rejected(self):
        with pytest.raises(ValidationError):
            OrderResult(success=False)

    def test_failure_with_empty_error_rejected(self):
        with pytest.raises(ValidationError):
            OrderResult(success=False, error="")


class TestCoupon:
    """Tests for Coupon model."""

    def test_discount_must_be_a_fraction(self):
        with pytest.raises(ValidationError):
            Coupon(code="FREE", discount=1.0)
        with pytest.raises(ValidationError):
            Coupon(code="NOTHING", discount=0)

    def test_code_required(self):
        with pytest.raises(ValidationError):
            Coupon(code="", discount=0.1)

"""Unit tests for services/finance_service.py (balance and payment status)."""

from decimal import Decimal

import pytest

from inkwell.schemas.sale_schema import PaymentStatus
from inkwell.services.finance_service import compute_balance, to_money


class TestComputeBalance:
    """remaining = max(0, total - deposit) and the derived payment status."""

    def test_partial_payment(self):
        result = compute_balance(Decimal("500.00"), Decimal("150.00"))
        assert result.remaining_balance == Decimal("350.00")
        assert result.payment_status == PaymentStatus.PARTIAL

    def test_deposit_equal_to_total_is_completed(self):
        result = compute_balance("200.00", "200.00")
        assert result.remaining_balance == Decimal("0.00")
        assert result.payment_status == PaymentStatus.COMPLETED

    def test_no_deposit_is_pending(self):
        result = compute_balance("80.00", "0")
        assert result.remaining_balance == Decimal("80.00")
        assert result.payment_status == PaymentStatus.PENDING

    def test_overpayment_clamps_to_zero(self):
        """Overpayment is not an error: balance is zero and the sale is completed."""
        result = compute_balance("100.00", "150.00")
        assert result.remaining_balance == Decimal("0.00")
        assert result.payment_status == PaymentStatus.COMPLETED

    def test_zero_total_is_completed(self):
        result = compute_balance("0", "0")
        assert result.remaining_balance == Decimal("0.00")
        assert result.payment_status == PaymentStatus.COMPLETED

    def test_result_has_two_decimals(self):
        result = compute_balance(100, "33.3")
        assert str(result.remaining_balance) == "66.70"

    def test_negative_amount_rejected(self):
        with pytest.raises(ValueError):
            compute_balance("-1.00", "0")


class TestToMoney:

    def test_rounds_half_up(self):
        assert to_money("10.005") == Decimal("10.01")

    def test_integer_gets_cents(self):
        assert str(to_money(7)) == "7.00"

"""Tests for order arithmetic: subtotal, discounts and clamping."""

from decimal import Decimal

from bondpos.services.order_service import apply_discount, compute_totals, to_money


class TestComputeTotals:
    """Totals over (unit_price, quantity) lines."""

    def test_no_discount(self):
        totals = compute_totals([(Decimal("2.00"), 3), (Decimal("10.50"), 1)])
        assert totals.subtotal == Decimal("16.50")
        assert totals.effective_discount == Decimal("0.00")
        assert totals.total == Decimal("16.50")

    def test_amount_discount(self):
        totals = compute_totals([(Decimal("10.00"), 2)], Decimal("5"), "amount")
        assert totals.effective_discount == Decimal("5.00")
        assert totals.total == Decimal("15.00")

    def test_percentage_discount(self):
        totals = compute_totals([(Decimal("6.00"), 1)], Decimal("10"), "percentage")
        assert totals.effective_discount == Decimal("0.60")
        assert totals.total == Decimal("5.40")

    def test_percentage_discount_rounds_half_up(self):
        # 3 x 3.35 = 10.05, 5% = 0.5025
        totals = compute_totals([(Decimal("3.35"), 3)], Decimal("5"), "percentage")
        assert totals.subtotal == Decimal("10.05")
        assert totals.effective_discount == Decimal("0.50")
        assert totals.total == Decimal("9.55")

    def test_total_invariant_holds(self):
        for discount, kind in [("0", "amount"), ("3.33", "amount"), ("12.5", "percentage"), ("100", "percentage")]:
            totals = compute_totals([(Decimal("7.77"), 3), (Decimal("0.99"), 2)], Decimal(discount), kind)
            assert totals.total == totals.subtotal - totals.effective_discount

    def test_discount_clamped_to_subtotal(self):
        totals = compute_totals([(Decimal("4.00"), 1)], Decimal("10"), "amount")
        assert totals.effective_discount == Decimal("4.00")
        assert totals.total == Decimal("0.00")

    def test_percentage_over_100_clamped(self):
        totals = compute_totals([(Decimal("4.00"), 1)], Decimal("150"), "percentage")
        assert totals.total == Decimal("0.00")

    def test_negative_discount_clamped_to_zero(self):
        totals = compute_totals([(Decimal("4.00"), 1)], Decimal("-3"), "amount")
        assert totals.effective_discount == Decimal("0.00")
        assert totals.total == Decimal("4.00")

    def test_empty_lines(self):
        totals = compute_totals([], Decimal("5"), "amount")
        assert totals.subtotal == Decimal("0.00")
        assert totals.total == Decimal("0.00")


class TestApplyDiscount:
    """Discount applied to a known subtotal."""

    def test_accepts_strings_and_none(self):
        totals = apply_discount("45.50", None, "amount")
        assert totals.total == Decimal("45.50")

    def test_unknown_discount_type_treated_as_amount(self):
        totals = apply_discount(Decimal("20"), Decimal("2"), "voucher")
        assert totals.total == Decimal("18.00")

    def test_to_money(self):
        assert to_money("2") == Decimal("2.00")
        assert to_money(Decimal("1.005")) == Decimal("1.01")
        assert str(to_money(Decimal("6"))) == "6.00"

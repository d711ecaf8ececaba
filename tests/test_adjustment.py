from decimal import Decimal

import pytest

from payment_payload.payload.adjustment import build_adjustment_line_item, line_item_total
from payment_payload.payload.exceptions import ReconciliationError
from payment_payload.schemas.transaction import LineItemType


class TestAdjustmentLineItem:
    """Tests for build_adjustment_line_item"""

    def test_no_adjustment_when_totals_match(self, make_order, make_line_item, payment_settings, translator):
        order = make_order(amount_total="100.00")
        line_items = [make_line_item("60.00"), make_line_item("40.00")]

        assert build_adjustment_line_item(line_items, order, payment_settings, translator) is None

    def test_shortfall_becomes_fee(self, make_order, make_line_item, payment_settings, translator):
        order = make_order(amount_total="100.00")

        adjustment = build_adjustment_line_item([make_line_item("99.00")], order, payment_settings, translator)

        assert adjustment.amount_including_tax == Decimal("1.00")
        assert adjustment.type == LineItemType.FEE
        assert adjustment.unique_id == "Adjustment-Line-Item"
        assert adjustment.sku == "Adjustment-Line-Item"
        assert adjustment.name == "Adjustment"
        assert adjustment.quantity == 1

    def test_excess_becomes_discount(self, make_order, make_line_item, payment_settings, translator):
        order = make_order(amount_total="100.00")

        adjustment = build_adjustment_line_item([make_line_item("101.00")], order, payment_settings, translator)

        assert adjustment.amount_including_tax == Decimal("-1.00")
        assert adjustment.type == LineItemType.DISCOUNT

    def test_sub_cent_drift_is_ignored(self, make_order, make_line_item, payment_settings, translator):
        order = make_order(amount_total="100.004")

        assert build_adjustment_line_item([make_line_item("100.00")], order, payment_settings, translator) is None

    def test_strict_mode_raises(self, make_order, make_line_item, strict_settings, translator, caplog):
        order = make_order(amount_total="100.00")

        with pytest.raises(ReconciliationError) as exc_info:
            build_adjustment_line_item([make_line_item("99.00")], order, strict_settings, translator)

        assert exc_info.value.line_item_total == Decimal("99.00")
        assert exc_info.value.order_total == Decimal("100.00")
        assert str(exc_info.value) == "LineItems total 99.00 does not add up to order total 100.00"
        assert "does not add up" in caplog.text

    def test_strict_mode_passes_matching_totals(self, make_order, make_line_item, strict_settings, translator):
        order = make_order(amount_total="99.00")

        assert build_adjustment_line_item([make_line_item("99.00")], order, strict_settings, translator) is None

    def test_empty_line_items(self, make_order, payment_settings, translator):
        adjustment = build_adjustment_line_item([], make_order(amount_total="5.00"), payment_settings, translator)

        assert adjustment.amount_including_tax == Decimal("5.00")
        assert adjustment.type == LineItemType.FEE


def test_line_item_total(make_line_item):
    assert line_item_total([make_line_item("1.10"), make_line_item("-0.10")]) == Decimal("1.00")
    assert line_item_total([]) == Decimal("0")

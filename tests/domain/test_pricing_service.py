"""Unit tests for the pricing domain service."""

from decimal import Decimal

import pytest

from salon.domain.exceptions import InvalidShippingFeeError, ValidationError
from salon.domain.model.discount import DiscountPolicy
from salon.domain.model.line_item import ItemKind, LineItem
from salon.domain.model.order_totals import shipping_fee_of
from salon.domain.model.value_objects import Money
from salon.domain.service.pricing_service import compute_totals, line_total


def _item(qty: int, price: str, kind: ItemKind = ItemKind.PRODUCT) -> LineItem:
    return LineItem.create(kind, qty, price)


class TestComputeTotalsScenarios:

    def test_percentage_discount_with_shipping(self):
        items = [_item(2, "150000"), _item(1, "80000", ItemKind.SERVICE)]
        totals = compute_totals(items, DiscountPolicy.percentage(10), shipping_fee_of("20000"))

        assert totals.subtotal == Money.of("380000")
        assert totals.discount_amount == Money.of("38000")
        assert totals.shipping_fee == Money.of("20000")
        assert totals.total_amount == Money.of("362000")

    def test_fixed_discount_capped_at_subtotal(self):
        totals = compute_totals(
            [_item(1, "100000")], DiscountPolicy.fixed("500000"), shipping_fee_of("0")
        )
        assert totals.discount_amount == Money.of("100000")
        assert totals.total_amount.is_zero

    def test_empty_cart_is_just_shipping(self):
        totals = compute_totals([], DiscountPolicy.none(), shipping_fee_of("15000"))
        assert totals.subtotal.is_zero
        assert totals.total_amount == Money.of("15000")

    def test_defaults_to_no_discount_and_no_shipping(self):
        totals = compute_totals([_item(3, "1000")])
        assert totals.discount_amount.is_zero
        assert totals.shipping_fee.is_zero
        assert totals.total_amount == Money.of("3000")


class TestComputeTotalsProperties:

    def test_subtotal_is_sum_of_line_totals(self):
        items = [_item(2, "150000"), _item(5, "12500"), _item(1, "0")]
        totals = compute_totals(items)
        expected = sum((line_total(i).amount for i in items), Decimal("0"))
        assert totals.subtotal.amount == expected

    @pytest.mark.parametrize("n, price", [(1, "99000"), (3, "0.1"), (7, "12345.67")])
    def test_splitting_a_line_preserves_subtotal(self, n, price):
        whole = compute_totals([_item(n, price)])
        split = compute_totals([_item(1, price) for _ in range(n)])
        assert whole.subtotal.amount == split.subtotal.amount

    @pytest.mark.parametrize(
        "policy",
        [
            DiscountPolicy.none(),
            DiscountPolicy.percentage(0),
            DiscountPolicy.percentage(100),
            DiscountPolicy.fixed(0),
            DiscountPolicy.fixed("999999999"),
        ],
    )
    @pytest.mark.parametrize("shipping", ["0", "15000"])
    def test_total_never_negative(self, policy, shipping):
        totals = compute_totals([_item(2, "50000")], policy, shipping_fee_of(shipping))
        assert totals.total_amount.amount >= Decimal("0")
        assert totals.total_amount.amount == (
            totals.subtotal.amount - totals.discount_amount.amount + totals.shipping_fee.amount
        )

    def test_same_inputs_same_output(self):
        items = [_item(2, "150000")]
        policy = DiscountPolicy.percentage("12.5")
        fee = shipping_fee_of("20000")
        assert compute_totals(items, policy, fee) == compute_totals(items, policy, fee)

    def test_does_not_mutate_items(self):
        items = [_item(2, "150000")]
        snapshot = list(items)
        compute_totals(items, DiscountPolicy.fixed(1000))
        assert items == snapshot

    def test_fractional_discount_kept_exact(self):
        totals = compute_totals([_item(1, "33333")], DiscountPolicy.percentage(15))
        assert totals.discount_amount.amount == Decimal("4999.95")
        assert totals.total_amount.amount == Decimal("28333.05")
        assert totals.total_amount.rounded() == Decimal("28333")


class TestComputeTotalsCurrency:

    def test_currency_follows_items_when_no_shipping_fee(self):
        items = [LineItem.create(ItemKind.SERVICE, 2, "12.50", currency="USD")]
        totals = compute_totals(items, DiscountPolicy.fixed("5"))
        assert totals.shipping_fee == Money.zero("USD")
        assert totals.total_amount == Money.of("20", "USD")

    def test_empty_cart_uses_default_currency(self):
        assert compute_totals([], currency="USD").total_amount == Money.zero("USD")

    def test_result_currency_follows_shipping_fee(self):
        items = [LineItem.create(ItemKind.PRODUCT, 1, "10", currency="USD")]
        totals = compute_totals(items, shipping_fee=shipping_fee_of("2.5", "USD"))
        assert totals.total_amount == Money.of("12.5", "USD")

    def test_mixed_currencies_rejected(self):
        items = [LineItem.create(ItemKind.PRODUCT, 1, "10", currency="USD")]
        with pytest.raises(ValidationError, match="Cannot combine"):
            compute_totals(items, shipping_fee=shipping_fee_of("0", "VND"))


class TestShippingFee:

    def test_negative_rejected(self):
        with pytest.raises(InvalidShippingFeeError, match="cannot be negative"):
            shipping_fee_of("-1")

    @pytest.mark.parametrize("raw", ["free", "nan"])
    def test_malformed_rejected(self, raw):
        with pytest.raises(InvalidShippingFeeError, match="Invalid shipping fee"):
            shipping_fee_of(raw)

    def test_blank_means_zero(self):
        assert shipping_fee_of("").is_zero


class TestComputeTotalsLargeAmounts:

    def test_amounts_past_default_decimal_precision(self):
        items = [_item(10**20, "10000000000")]
        totals = compute_totals(items, DiscountPolicy.percentage(10), shipping_fee_of("1"))
        assert totals.subtotal.amount == Decimal(10) ** 30
        assert totals.total_amount.amount == Decimal("9" + "0" * 28 + "1")
        assert totals.total_amount.rounded() == totals.total_amount.amount

    def test_total_over_the_limit_is_a_validation_error(self):
        items = [_item(10**30, "10000000000")]
        with pytest.raises(ValidationError, match="too large"):
            compute_totals(items)

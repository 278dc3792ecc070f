"""Unit tests for DiscountPolicy and resolve_discount."""

from decimal import Decimal

import pytest

from salon.domain.exceptions import InvalidDiscountValueError
from salon.domain.model.discount import DiscountMode, DiscountPolicy, resolve_discount
from salon.domain.model.value_objects import Money


class TestNoneMode:

    @pytest.mark.parametrize("value", ["0", "15", "500000", "-3", "abc"])
    def test_always_zero_whatever_the_value(self, value):
        policy = DiscountPolicy(DiscountMode.NONE, value)  # type: ignore[arg-type]
        assert resolve_discount(Money.of("380000"), policy).is_zero

    def test_value_is_discarded(self):
        policy = DiscountPolicy(DiscountMode.NONE, Decimal("42"))
        assert policy.value == Decimal("0")
        assert policy == DiscountPolicy.none()

    def test_default_policy_is_none(self):
        assert DiscountPolicy().mode is DiscountMode.NONE


class TestPercentageMode:

    def test_ten_percent(self):
        discount = resolve_discount(Money.of("380000"), DiscountPolicy.percentage(10))
        assert discount == Money.of("38000")

    @pytest.mark.parametrize("subtotal", ["0", "1", "99999", "380000", "12345.67"])
    @pytest.mark.parametrize("value", ["0", "0.5", "33.3", "99", "100"])
    def test_bounded_by_subtotal(self, subtotal, value):
        sub = Money.of(subtotal)
        discount = DiscountPolicy.percentage(value).resolve(sub)
        assert Decimal("0") <= discount.amount <= sub.amount

    def test_hundred_percent_equals_subtotal(self):
        assert DiscountPolicy.percentage(100).resolve(Money.of("50000")) == Money.of("50000")

    def test_above_hundred_rejected(self):
        with pytest.raises(InvalidDiscountValueError, match="between 0 and 100"):
            DiscountPolicy.percentage("100.01")

    def test_negative_rejected(self):
        with pytest.raises(InvalidDiscountValueError, match="cannot be negative"):
            DiscountPolicy.percentage(-1)

    def test_keeps_subtotal_currency(self):
        discount = DiscountPolicy.percentage(10).resolve(Money.of("20", "USD"))
        assert discount == Money.of("2", "USD")


class TestFixedMode:

    @pytest.mark.parametrize(
        "subtotal, value, expected",
        [
            ("100000", "500000", "100000"),
            ("100000", "100000", "100000"),
            ("100000", "25000", "25000"),
            ("0", "10000", "0"),
            ("100000", "0", "0"),
        ],
    )
    def test_is_min_of_value_and_subtotal(self, subtotal, value, expected):
        discount = resolve_discount(Money.of(subtotal), DiscountPolicy.fixed(value))
        assert discount == Money.of(expected)

    def test_negative_rejected(self):
        with pytest.raises(InvalidDiscountValueError, match="cannot be negative"):
            DiscountPolicy.fixed("-5000")

    def test_garbage_rejected(self):
        with pytest.raises(InvalidDiscountValueError, match="Invalid discount value"):
            DiscountPolicy.fixed("ten")

    def test_nan_rejected(self):
        with pytest.raises(InvalidDiscountValueError, match="Invalid discount value"):
            DiscountPolicy.fixed(float("nan"))

    def test_value_coerced_to_decimal(self):
        assert DiscountPolicy.fixed(50000).value == Decimal("50000")

"""Discount policy and resolver.

A policy is one of three modes.  Resolution never drives the subtotal
below zero: percentages are bounded to [0, 100] and fixed amounts are
capped at the subtotal.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from enum import Enum

from salon.domain.exceptions import InvalidDiscountValueError
from salon.domain.model.value_objects import Money

MAX_PERCENTAGE = Decimal("100")


class DiscountMode(Enum):
    NONE = "none"
    PERCENTAGE = "percentage"
    FIXED = "fixed"


@dataclass(frozen=True)
class DiscountPolicy:
    """Discount mode plus its value.

    With ``NONE`` the value is discarded and stored as 0, so switching a
    cart back to "no discount" gives the same result whatever was typed
    before.
    """

    mode: DiscountMode = DiscountMode.NONE
    value: Decimal = Decimal("0")

    def __post_init__(self) -> None:
        if self.mode is DiscountMode.NONE:
            object.__setattr__(self, "value", Decimal("0"))
            return

        value = _to_decimal(self.value)
        if value < Decimal("0"):
            raise InvalidDiscountValueError(
                f"Discount value cannot be negative, got {value}"
            )
        if self.mode is DiscountMode.PERCENTAGE and value > MAX_PERCENTAGE:
            raise InvalidDiscountValueError(
                f"Percentage discount must be between 0 and 100, got {value}"
            )
        object.__setattr__(self, "value", value)

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def none() -> DiscountPolicy:
        return DiscountPolicy(DiscountMode.NONE)

    @staticmethod
    def percentage(value: str | int | float | Decimal) -> DiscountPolicy:
        return DiscountPolicy(DiscountMode.PERCENTAGE, value)  # type: ignore[arg-type]

    @staticmethod
    def fixed(value: str | int | float | Decimal) -> DiscountPolicy:
        return DiscountPolicy(DiscountMode.FIXED, value)  # type: ignore[arg-type]

    def resolve(self, subtotal: Money) -> Money:
        return resolve_discount(subtotal, self)


def resolve_discount(subtotal: Money, policy: DiscountPolicy) -> Money:
    """Return the discount amount for *subtotal* under *policy*.

    - NONE: always zero.
    - PERCENTAGE: ``subtotal * value / 100``, unrounded.
    - FIXED: ``min(value, subtotal)``.  An over-large fixed discount is
      silently capped, not rejected.
    """
    if policy.mode is DiscountMode.PERCENTAGE:
        return subtotal.percent(policy.value)
    if policy.mode is DiscountMode.FIXED:
        return Money(min(policy.value, subtotal.amount), subtotal.currency)
    return Money.zero(subtotal.currency)


def _to_decimal(raw: object) -> Decimal:
    try:
        value = Decimal(str(raw).strip())
    except (InvalidOperation, ValueError) as exc:
        raise InvalidDiscountValueError(f"Invalid discount value: {raw!r}") from exc
    if not value.is_finite():
        raise InvalidDiscountValueError(f"Invalid discount value: {raw!r}")
    return value

"""OrderTotals value object and shipping fee parsing."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from salon.domain.exceptions import InvalidShippingFeeError
from salon.domain.model.value_objects import DEFAULT_CURRENCY, Money


@dataclass(frozen=True)
class OrderTotals:
    """Derived pricing summary of a cart.

    Invariant: ``total_amount == max(0, subtotal - discount_amount + shipping_fee)``.
    """

    subtotal: Money
    discount_amount: Money
    shipping_fee: Money
    total_amount: Money


def shipping_fee_of(
    raw: str | int | float | Decimal,
    currency: str = DEFAULT_CURRENCY,
) -> Money:
    """Parse a caller-supplied shipping fee; blank means no fee."""
    if not str(raw).strip():
        return Money.zero(currency)
    return Money.of(raw, currency, error=InvalidShippingFeeError, label="shipping fee")

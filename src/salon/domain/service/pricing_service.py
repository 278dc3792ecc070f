"""Domain service: order pricing.

Turns a cart of line items plus a discount policy into the figures shown
in the pricing summary and sent with the order.  Inputs are assumed valid
(validation happens when LineItem, DiscountPolicy and the shipping fee are
built), so nothing here raises on well-formed values.
"""

from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal, localcontext

from salon.domain.model.discount import DiscountPolicy, resolve_discount
from salon.domain.model.line_item import LineItem
from salon.domain.model.order_totals import OrderTotals
from salon.domain.model.value_objects import DEFAULT_CURRENCY, MONEY_CONTEXT, Money


def line_total(item: LineItem) -> Money:
    """``quantity * unit_price``, exact."""
    return item.line_total


def compute_totals(
    items: Iterable[LineItem],
    discount: DiscountPolicy | None = None,
    shipping_fee: Money | None = None,
    currency: str = DEFAULT_CURRENCY,
) -> OrderTotals:
    """Price a cart.

    Steps:
    1. Sum every line total (an empty cart gives a zero subtotal).
    2. Resolve the discount against the subtotal.
    3. ``total = max(0, subtotal - discount + shipping)``.

    The currency of the result is taken from *shipping_fee* when given,
    else from the first item, else *currency*.  Mixing currencies raises
    ValidationError.
    """
    items = list(items)
    if shipping_fee is None:
        if items:
            currency = items[0].unit_price.currency
        shipping_fee = Money.zero(currency)
    if discount is None:
        discount = DiscountPolicy.none()

    subtotal = Money.zero(shipping_fee.currency)
    for item in items:
        subtotal = subtotal + line_total(item)

    discount_amount = resolve_discount(subtotal, discount)

    # Money is non-negative, so the floor only matters for malformed callers.
    with localcontext(MONEY_CONTEXT):
        total = subtotal.amount - discount_amount.amount + shipping_fee.amount
    total_amount = Money(max(Decimal("0"), total), subtotal.currency)

    return OrderTotals(
        subtotal=subtotal,
        discount_amount=discount_amount,
        shipping_fee=shipping_fee,
        total_amount=total_amount,
    )

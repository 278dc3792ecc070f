"""LineItem value object: one row of a cart.

A line item is a quantity of a single product or service at a unit price.
It carries only what pricing needs; the full catalog record lives in the
external backend.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from salon.domain.exceptions import InvalidPriceError, InvalidQuantityError
from salon.domain.model.value_objects import DEFAULT_CURRENCY, Money, Quantity


class ItemKind(Enum):
    PRODUCT = "product"
    SERVICE = "service"


@dataclass(frozen=True)
class LineItem:
    """Immutable cart row.

    Never mutated in place: when quantity or price changes the caller
    builds a new LineItem.  Use ``LineItem.create()`` for raw operator
    input so bad values surface as InvalidQuantityError / InvalidPriceError.
    """

    kind: ItemKind
    quantity: Quantity
    unit_price: Money
    name: str = ""

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def create(
        kind: ItemKind,
        quantity: int,
        unit_price: str | int | float | Decimal,
        name: str = "",
        currency: str = DEFAULT_CURRENCY,
    ) -> LineItem:
        """Build a line item from raw input, enforcing all invariants."""
        if isinstance(quantity, bool) or not isinstance(quantity, int):
            raise InvalidQuantityError(
                f"Quantity must be an integer, got {quantity!r}"
            )
        if quantity < 1:
            raise InvalidQuantityError(f"Quantity must be at least 1, got {quantity}")

        price = Money.of(unit_price, currency, error=InvalidPriceError, label="unit price")

        return LineItem(
            kind=kind,
            quantity=Quantity(quantity),
            unit_price=price,
            name=name.strip(),
        )

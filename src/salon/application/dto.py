"""Data Transfer Objects passed between the CLI and application layers."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class LineItemSpec:
    """Input: one cart row as entered by the operator."""

    kind: str  # "product" | "service"
    quantity: int
    unit_price: str
    name: str = ""


@dataclass(frozen=True)
class DiscountSpec:
    """Input: discount mode and value as entered by the operator."""

    mode: str = "none"  # "none" | "percentage" | "fixed"
    value: str = "0"


@dataclass(frozen=True)
class QuoteLineDTO:
    """Output: a single priced line as displayed to the user."""

    kind: str
    name: str
    quantity: int
    unit_price: str  # formatted, e.g. "150.000 ₫"
    line_total: str


@dataclass(frozen=True)
class OrderQuoteDTO:
    """Output: the pricing summary of a cart."""

    currency: str
    items: list[QuoteLineDTO]
    subtotal: str
    discount: str
    shipping_fee: str
    total: str
    has_discount: bool
    has_shipping: bool
    total_amount: Decimal  # rounded to the currency's minor unit, for submission


@dataclass(frozen=True)
class StockPreviewDTO:
    """Output: validation result and projected stock of an add/adjust."""

    mode: str
    current_stock: int
    delta: object
    reason: str
    notes: str
    accepted: bool
    rejection: str | None  # mode-specific message when not accepted
    projected_stock: int | None
    level_before: str
    level_after: str | None

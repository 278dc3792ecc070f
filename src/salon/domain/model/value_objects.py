"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Context, Decimal, InvalidOperation, localcontext

from salon.domain.exceptions import InvalidQuantityError, ValidationError

DEFAULT_CURRENCY = "VND"

# Number of decimal places in each currency's minor unit.
MINOR_UNIT_EXPONENTS = {
    "VND": 0,
    "USD": 2,
    "EUR": 2,
}

# Amounts must stay below 10**MAX_AMOUNT_DIGITS.  MONEY_CONTEXT carries
# enough precision that sums, products and rounding of such amounts are exact.
MAX_AMOUNT_DIGITS = 40
MONEY_CONTEXT = Context(prec=100, rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class Money:
    """Monetary amount with currency.

    Uses Decimal to avoid floating-point rounding errors that would be
    unacceptable in financial calculations.  Arithmetic is exact; the
    amount is only rounded to the currency's minor unit by ``rounded()``
    and ``__str__``.
    """

    amount: Decimal
    currency: str = DEFAULT_CURRENCY

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise ValidationError(f"Money amount must be finite, got {self.amount}")
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )
        if self.amount and self.amount.adjusted() >= MAX_AMOUNT_DIGITS:
            raise ValidationError(
                f"Money amount is too large (limit is {MAX_AMOUNT_DIGITS} digits)"
            )

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        with localcontext(MONEY_CONTEXT):
            return Money(self.amount + other.amount, self.currency)

    def __mul__(self, factor: int) -> Money:
        if isinstance(factor, bool) or not isinstance(factor, int):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        with localcontext(MONEY_CONTEXT):
            return Money(self.amount * factor, self.currency)

    def percent(self, value: Decimal) -> Money:
        """Return ``value`` percent of this amount, unrounded."""
        with localcontext(MONEY_CONTEXT):
            return Money(self.amount * value / Decimal("100"), self.currency)

    @property
    def is_zero(self) -> bool:
        return self.amount == Decimal("0")

    # --- Display --------------------------------------------------------------

    @property
    def minor_unit_exponent(self) -> int:
        return MINOR_UNIT_EXPONENTS.get(self.currency, 2)

    def rounded(self) -> Decimal:
        """Amount rounded half-up to the currency's minor unit."""
        quantum = Decimal(1).scaleb(-self.minor_unit_exponent)
        return self.amount.quantize(quantum, rounding=ROUND_HALF_UP, context=MONEY_CONTEXT)

    def __str__(self) -> str:
        value = self.rounded()
        places = self.minor_unit_exponent
        with localcontext(MONEY_CONTEXT):
            if self.currency == "VND":
                # vi-VN grouping: 150.000 ₫
                return f"{value:,.{places}f}".replace(",", ".") + " ₫"
            if self.currency == "USD":
                return f"${value:,.{places}f}"
            return f"{value:,.{places}f} {self.currency}"

    # --- Internal helpers -----------------------------------------------------

    def _assert_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise ValidationError(
                f"Cannot combine {self.currency} with {other.currency}"
            )

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def of(
        amount: str | float | int | Decimal,
        currency: str = DEFAULT_CURRENCY,
        error: type[ValidationError] = ValidationError,
        label: str = "money amount",
    ) -> Money:
        """Coerce raw input to Money.

        Anything that is not a finite, non-negative amount below the size
        limit raises *error*, so each caller reports its own error kind.
        """
        try:
            value = Decimal(str(amount).strip())
        except (InvalidOperation, ValueError) as exc:
            raise error(f"Invalid {label}: {amount!r}") from exc
        if not value.is_finite():
            raise error(f"Invalid {label}: {amount!r}")
        if value < Decimal("0"):
            raise error(f"{label.capitalize()} cannot be negative, got {value}")
        if value and value.adjusted() >= MAX_AMOUNT_DIGITS:
            raise error(
                f"{label.capitalize()} is too large (limit is {MAX_AMOUNT_DIGITS} digits)"
            )
        return Money(value, currency)

    @staticmethod
    def zero(currency: str = DEFAULT_CURRENCY) -> Money:
        return Money(Decimal("0"), currency)


@dataclass(frozen=True)
class Quantity:
    """A positive integer quantity.

    Enforces the invariant that you cannot sell zero or negative items.
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise InvalidQuantityError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value < 1:
            raise InvalidQuantityError("Quantity must be at least 1")

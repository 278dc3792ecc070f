"""Stock adjustment types.

The authoritative stock level lives in the external inventory system.
Everything here describes a *proposed* change so it can be validated and
previewed before the operator confirms it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from salon.domain.exceptions import RejectedDeltaError, ValidationError

MUST_BE_POSITIVE = "must be greater than zero"
MUST_NOT_BE_ZERO = "must not be zero"
MUST_BE_WHOLE_NUMBER = "must be a whole number"


class StockMode(Enum):
    ADD = "add"        # incoming inventory, delta > 0
    ADJUST = "adjust"  # correction in either direction, delta != 0


class StockLevel(Enum):
    OUT = "out"
    LOW = "low"
    IN_STOCK = "in_stock"


@dataclass(frozen=True)
class StockDeltaCheck:
    """Outcome of validating a stock delta.

    Truthy when accepted.  A rejection carries a mode-specific ``reason``
    meant to be shown next to the quantity field.
    """

    accepted: bool
    reason: str | None = None

    def __bool__(self) -> bool:
        return self.accepted

    @staticmethod
    def ok() -> StockDeltaCheck:
        return StockDeltaCheck(accepted=True)

    @staticmethod
    def rejected(reason: str) -> StockDeltaCheck:
        return StockDeltaCheck(accepted=False, reason=reason)

    def raise_if_rejected(self) -> None:
        if not self.accepted:
            raise RejectedDeltaError(self.reason or MUST_BE_WHOLE_NUMBER)


@dataclass(frozen=True)
class StockAdjustmentRequest:
    """A transient add/adjust request against a known stock level.

    Every request carries the operator's reason (e.g. "supplier delivery",
    "stocktake correction"); notes are optional.
    """

    mode: StockMode
    current_stock: int
    delta: int
    reason: str
    notes: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.mode, StockMode):
            raise ValidationError(f"Unknown stock mode {self.mode!r}")
        if not isinstance(self.reason, str) or not self.reason.strip():
            raise ValidationError("A reason is required for every stock change")
        object.__setattr__(self, "reason", self.reason.strip())
        object.__setattr__(self, "notes", (self.notes or "").strip())
        if isinstance(self.current_stock, bool) or not isinstance(self.current_stock, int):
            raise ValidationError(
                f"Current stock must be an integer, got {self.current_stock!r}"
            )
        if self.current_stock < 0:
            raise ValidationError(
                f"Current stock cannot be negative, got {self.current_stock}"
            )

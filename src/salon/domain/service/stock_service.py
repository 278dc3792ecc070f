"""Domain service: stock delta validation and preview.

Pure functions.  They never read or write the external inventory; they
only decide whether a requested delta makes sense for the operation mode
and what the stock level would become.
"""

from __future__ import annotations

from salon.domain.exceptions import ValidationError
from salon.domain.model.stock import (
    MUST_BE_POSITIVE,
    MUST_BE_WHOLE_NUMBER,
    MUST_NOT_BE_ZERO,
    StockAdjustmentRequest,
    StockDeltaCheck,
    StockLevel,
    StockMode,
)


def validate_delta(mode: StockMode, delta: object) -> StockDeltaCheck:
    """Check *delta* against the rules for *mode*.

    - ADD accepts only ``delta > 0``.
    - ADJUST accepts any ``delta != 0``; negative values lower stock.

    Non-integers (including NaN and numeric strings) are rejected in both
    modes.  Does not look at the current stock level.  A *mode* that is not
    a StockMode raises ValidationError.
    """
    _require_mode(mode)
    if isinstance(delta, bool) or not isinstance(delta, int):
        return StockDeltaCheck.rejected(MUST_BE_WHOLE_NUMBER)

    if mode is StockMode.ADD:
        if delta <= 0:
            return StockDeltaCheck.rejected(MUST_BE_POSITIVE)
        return StockDeltaCheck.ok()

    if delta == 0:
        return StockDeltaCheck.rejected(MUST_NOT_BE_ZERO)
    return StockDeltaCheck.ok()


def project_stock(mode: StockMode, current_stock: int, delta: int) -> int:
    """Stock level after applying an already-validated *delta*.

    ADJUST is floored at zero: physical stock cannot go negative, so an
    adjustment larger than the on-hand quantity is silently clamped.
    """
    _require_mode(mode)
    if mode is StockMode.ADD:
        return current_stock + delta
    return max(0, current_stock + delta)


def preview_adjustment(request: StockAdjustmentRequest) -> int:
    """Validate *request* and return its projected stock.

    Raises RejectedDeltaError when the delta is not valid for the mode.
    """
    validate_delta(request.mode, request.delta).raise_if_rejected()
    return project_stock(request.mode, request.current_stock, request.delta)


def classify_stock(current_stock: int, min_stock_alert: int = 0) -> StockLevel:
    """OUT at zero, LOW at or below the alert threshold, else IN_STOCK."""
    if min_stock_alert < 0:
        raise ValidationError(
            f"Minimum stock alert cannot be negative, got {min_stock_alert}"
        )
    if current_stock <= 0:
        return StockLevel.OUT
    if current_stock <= min_stock_alert:
        return StockLevel.LOW
    return StockLevel.IN_STOCK


def _require_mode(mode: object) -> None:
    if not isinstance(mode, StockMode):
        raise ValidationError(
            f"Unknown stock mode {mode!r}. Expected StockMode.ADD or StockMode.ADJUST."
        )

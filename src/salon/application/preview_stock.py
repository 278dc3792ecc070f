"""Application service: Preview Stock use case (query).

Validates an add/adjust quantity and projects the resulting stock level.
A rejected delta is a normal outcome here, returned in the DTO so the
form can show the message inline.
"""

from __future__ import annotations

import logging

from salon.application.dto import StockPreviewDTO
from salon.domain.exceptions import ValidationError
from salon.domain.model.stock import StockAdjustmentRequest, StockMode
from salon.domain.service.stock_service import (
    classify_stock,
    project_stock,
    validate_delta,
)

logger = logging.getLogger(__name__)


class PreviewStockHandler:

    def handle(
        self,
        mode: str,
        current_stock: int,
        delta: object,
        reason: str,
        notes: str = "",
        min_stock_alert: int = 0,
    ) -> StockPreviewDTO:
        """Preview an add/adjust.

        Raises ValidationError for an unknown mode, a negative current
        stock or a blank reason; a bad delta is reported in the DTO.
        """
        try:
            stock_mode = StockMode(mode.strip().lower())
        except ValueError as exc:
            raise ValidationError(
                f"Unknown stock mode '{mode}'. Expected 'add' or 'adjust'."
            ) from exc

        request = StockAdjustmentRequest(
            stock_mode, current_stock, delta, reason, notes  # type: ignore[arg-type]
        )
        level_before = classify_stock(request.current_stock, min_stock_alert)

        check = validate_delta(request.mode, request.delta)
        if not check:
            logger.info(
                "Rejected %s delta %r (%s): %s",
                stock_mode.value, delta, request.reason, check.reason,
            )
            return StockPreviewDTO(
                mode=stock_mode.value,
                current_stock=request.current_stock,
                delta=delta,
                reason=request.reason,
                notes=request.notes,
                accepted=False,
                rejection=check.reason,
                projected_stock=None,
                level_before=level_before.value,
                level_after=None,
            )

        projected = project_stock(request.mode, request.current_stock, request.delta)
        level_after = classify_stock(projected, min_stock_alert)
        logger.debug(
            "Stock %s %+d (%s): %d -> %d (%s)",
            stock_mode.value,
            request.delta,
            request.reason,
            request.current_stock,
            projected,
            level_after.value,
        )
        return StockPreviewDTO(
            mode=stock_mode.value,
            current_stock=request.current_stock,
            delta=delta,
            reason=request.reason,
            notes=request.notes,
            accepted=True,
            rejection=None,
            projected_stock=projected,
            level_before=level_before.value,
            level_after=level_after.value,
        )

"""Application service: Quote Order use case.

Turns raw cart input into domain objects, prices it, and maps the result
to a DTO for the pricing summary.  All input validation happens here,
at the boundary, before the pure pricing functions run.
"""

from __future__ import annotations

import logging

from salon.application.dto import DiscountSpec, LineItemSpec, OrderQuoteDTO, QuoteLineDTO
from salon.domain.exceptions import InvalidDiscountValueError, ValidationError
from salon.domain.model.discount import DiscountMode, DiscountPolicy
from salon.domain.model.line_item import ItemKind, LineItem
from salon.domain.model.order_totals import OrderTotals, shipping_fee_of
from salon.domain.model.value_objects import DEFAULT_CURRENCY
from salon.domain.service.pricing_service import compute_totals

logger = logging.getLogger(__name__)


class QuoteOrderHandler:

    def __init__(self, currency: str = DEFAULT_CURRENCY) -> None:
        self._currency = currency.strip().upper()

    def handle(
        self,
        item_specs: list[LineItemSpec],
        discount_spec: DiscountSpec | None = None,
        shipping_fee: str = "0",
    ) -> OrderQuoteDTO:
        """Price a cart.

        Steps:
        1. Build a LineItem per spec (InvalidQuantityError / InvalidPriceError).
        2. Build the DiscountPolicy (InvalidDiscountValueError).
        3. Parse the shipping fee (InvalidShippingFeeError).
        4. Compute totals and return a DTO.
        """
        items = [self._to_line_item(spec) for spec in item_specs]
        policy = self._to_policy(discount_spec or DiscountSpec())
        fee = shipping_fee_of(shipping_fee, self._currency)

        totals = compute_totals(items, policy, fee)
        logger.debug(
            "Quoted %d item(s): subtotal=%s discount=%s shipping=%s total=%s",
            len(items),
            totals.subtotal.amount,
            totals.discount_amount.amount,
            totals.shipping_fee.amount,
            totals.total_amount.amount,
        )
        return self._to_dto(items, totals)

    # --- Parsing --------------------------------------------------------------

    def _to_line_item(self, spec: LineItemSpec) -> LineItem:
        try:
            kind = ItemKind(spec.kind.strip().lower())
        except ValueError as exc:
            raise ValidationError(
                f"Unknown item kind '{spec.kind}'. Expected 'product' or 'service'."
            ) from exc
        return LineItem.create(
            kind=kind,
            quantity=spec.quantity,
            unit_price=spec.unit_price,
            name=spec.name,
            currency=self._currency,
        )

    @staticmethod
    def _to_policy(spec: DiscountSpec) -> DiscountPolicy:
        try:
            mode = DiscountMode(spec.mode.strip().lower())
        except ValueError as exc:
            raise InvalidDiscountValueError(
                f"Unknown discount mode '{spec.mode}'. "
                f"Expected 'none', 'percentage' or 'fixed'."
            ) from exc
        return DiscountPolicy(mode, spec.value)  # type: ignore[arg-type]

    # --- Mapping --------------------------------------------------------------

    def _to_dto(self, items: list[LineItem], totals: OrderTotals) -> OrderQuoteDTO:
        return OrderQuoteDTO(
            currency=self._currency,
            items=[
                QuoteLineDTO(
                    kind=item.kind.value,
                    name=item.name,
                    quantity=item.quantity.value,
                    unit_price=str(item.unit_price),
                    line_total=str(item.line_total),
                )
                for item in items
            ],
            subtotal=str(totals.subtotal),
            discount=str(totals.discount_amount),
            shipping_fee=str(totals.shipping_fee),
            total=str(totals.total_amount),
            has_discount=totals.discount_amount.rounded() != 0,
            has_shipping=totals.shipping_fee.rounded() != 0,
            total_amount=totals.total_amount.rounded(),
        )

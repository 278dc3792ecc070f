"""CLI commands for order pricing."""

from __future__ import annotations

import click

from salon.application.dto import DiscountSpec, LineItemSpec, OrderQuoteDTO
from salon.application.quote_order import QuoteOrderHandler
from salon.domain.exceptions import DomainException
from salon.domain.model.value_objects import DEFAULT_CURRENCY


def _parse_item(raw: str) -> LineItemSpec:
    """Parse 'service:2:150000[:Name]' into a LineItemSpec."""
    parts = raw.split(":", 3)
    if len(parts) < 3:
        raise click.BadParameter(
            f"Invalid item format '{raw}'. Expected 'Kind:Quantity:Price[:Name]'."
        )
    kind, qty_str, price = parts[0], parts[1], parts[2]
    name = parts[3] if len(parts) == 4 else ""
    try:
        qty = int(qty_str)
    except ValueError:
        raise click.BadParameter(
            f"Invalid quantity '{qty_str}' for item '{raw}'."
        )
    return LineItemSpec(kind=kind.strip(), quantity=qty, unit_price=price.strip(), name=name.strip())


def _parse_discount(raw: str) -> DiscountSpec:
    """Parse 'percentage:10', 'fixed:50000' or 'none'."""
    mode, _, value = raw.partition(":")
    return DiscountSpec(mode=mode.strip(), value=value.strip() or "0")


def _display_quote(dto: OrderQuoteDTO) -> None:
    """Line table followed by the pricing summary."""
    if dto.items:
        click.echo(f"  {'Item':<20} {'Kind':<8} {'Qty':>5} {'Price':>14} {'Total':>14}")
        click.echo(f"  {'-'*65}")
        for item in dto.items:
            click.echo(
                f"  {item.name or '-':<20} {item.kind:<8} {item.quantity:>5} "
                f"{item.unit_price:>14} {item.line_total:>14}"
            )
        click.echo(f"  {'-'*65}")
    else:
        click.echo("  (no items)")

    click.echo(f"  {'Subtotal':<35} {dto.subtotal:>30}")
    if dto.has_discount:
        click.echo(f"  {'Discount':<35} {'-' + dto.discount:>30}")
    if dto.has_shipping:
        click.echo(f"  {'Shipping':<35} {'+' + dto.shipping_fee:>30}")
    click.echo(f"  {'Total':<35} {dto.total:>30}")


@click.command("quote")
@click.option(
    "--item", "items", multiple=True,
    help="Cart row as 'Kind:Qty:Price[:Name]', kind is product or service. Repeatable.",
)
@click.option("--discount", default="none", show_default=True,
              help="Discount as 'none', 'percentage:N' or 'fixed:AMOUNT'.")
@click.option("--shipping", default="0", show_default=True, help="Shipping fee.")
@click.option("--currency", default=DEFAULT_CURRENCY, show_default=True,
              envvar="SALON_CURRENCY", help="Currency code.")
def order_quote(items: tuple[str, ...], discount: str, shipping: str, currency: str) -> None:
    """Price a cart: subtotal, discount, shipping and total."""
    specs = [_parse_item(raw) for raw in items]
    discount_spec = _parse_discount(discount)

    handler = QuoteOrderHandler(currency=currency)

    try:
        dto = handler.handle(specs, discount_spec, shipping_fee=shipping)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_quote(dto)

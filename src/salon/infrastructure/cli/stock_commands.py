"""CLI commands for stock add/adjust previews."""

from __future__ import annotations

import click

from salon.application.preview_stock import PreviewStockHandler
from salon.domain.exceptions import DomainException

_LEVEL_LABELS = {
    "out": "OUT OF STOCK",
    "low": "LOW STOCK",
    "in_stock": "in stock",
}


@click.command("preview")
@click.option("--mode", required=True, type=click.Choice(["add", "adjust"]),
              help="'add' for incoming stock, 'adjust' for corrections (+/-).")
@click.option("--current", "current_stock", required=True, type=int,
              help="Current stock on hand.")
@click.option("--delta", required=True, type=int, help="Quantity to add or adjust by.")
@click.option("--reason", required=True, help="Why the stock changes, e.g. 'supplier delivery'.")
@click.option("--notes", default="", help="Optional free-text notes.")
@click.option("--min-alert", "min_stock_alert", default=0, show_default=True, type=int,
              help="Low-stock alert threshold.")
def stock_preview(
    mode: str,
    current_stock: int,
    delta: int,
    reason: str,
    notes: str,
    min_stock_alert: int,
) -> None:
    """Validate a stock change and show the stock level after it."""
    handler = PreviewStockHandler()

    try:
        dto = handler.handle(
            mode, current_stock, delta, reason, notes, min_stock_alert=min_stock_alert
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not dto.accepted:
        raise click.ClickException(f"Quantity {dto.rejection}")

    click.echo(f"Current stock:  {dto.current_stock} ({_LEVEL_LABELS[dto.level_before]})")
    click.echo(f"Change ({dto.mode}): {dto.delta:+d}")
    click.echo(f"After {dto.mode}:    {dto.projected_stock} ({_LEVEL_LABELS[dto.level_after]})")
    click.echo(f"Reason:         {dto.reason}")
    if dto.notes:
        click.echo(f"Notes:          {dto.notes}")

    if dto.mode == "adjust" and dto.current_stock + delta < 0:
        click.echo("Note: adjustment exceeds stock on hand; result clamped to 0.")

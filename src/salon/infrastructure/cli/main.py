import logging
from pathlib import Path

import click

from salon.infrastructure.cli.order_commands import order_quote
from salon.infrastructure.cli.stock_commands import stock_preview
from salon.infrastructure.logging_config import configure_logging


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
@click.option("--log-file", type=click.Path(dir_okay=False, path_type=Path), default=None,
              help="Also write logs to this file.")
def cli(verbose: bool, log_file: Path | None) -> None:
    """Salon order pricing and stock preview."""
    configure_logging(logging.DEBUG if verbose else logging.WARNING, log_file)


@cli.group()
def order() -> None:
    """Price orders."""


@cli.group()
def stock() -> None:
    """Preview stock changes."""


# Register subcommands
order.add_command(order_quote)
stock.add_command(stock_preview)

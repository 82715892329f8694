"""CLI command for the inventory dashboard."""

from __future__ import annotations

import click

from ims.application.show_dashboard import ShowDashboardHandler
from ims.domain.exceptions import DomainException
from ims.infrastructure.bootstrap import product_repository


@click.command("dashboard")
def dashboard() -> None:
    """Show totals for the whole inventory."""
    handler = ShowDashboardHandler(product_repo=product_repository())

    try:
        summary = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"{'Total products:':<20} {summary.total_count}")
    click.echo(f"{'Inventory value:':<20} {summary.total_value}")
    click.echo(f"{'Low stock items:':<20} {summary.low_stock_count}")

"""CLI commands for managing products."""

from __future__ import annotations

import click

from ims.application.add_product import AddProductHandler
from ims.application.dto import ProductDTO
from ims.application.list_products import ListProductsHandler
from ims.application.remove_product import RemoveProductHandler
from ims.application.update_product import UpdateProductHandler
from ims.domain.exceptions import DomainException
from ims.domain.service.catalog_queries import SortKey
from ims.infrastructure.bootstrap import product_repository


def _echo_row(p: ProductDTO) -> None:
    flag = " (low)" if p.low_stock else ""
    click.echo(
        f"{p.id:<6} {p.name:<20} {p.category:<15} {p.price:>16} {p.quantity:>8}{flag}"
    )


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--category", required=True, help="Product category.")
@click.option("--price", required=True, help="Unit price (e.g. 2500 or 19.99).")
@click.option("--quantity", required=True, type=int, help="Units in stock.")
def product_add(name: str, category: str, price: str, quantity: int) -> None:
    """Add a new product to the inventory."""
    handler = AddProductHandler(product_repo=product_repository())

    try:
        product = handler.handle(name=name, category=category, price=price, quantity=quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.name}' added at {product.price}")


@click.command("update")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--category", default=None, help="New category.")
@click.option("--price", default=None, help="New unit price.")
@click.option("--quantity", default=None, type=int, help="New stock level.")
def product_update(
    product_id: int,
    name: str | None,
    category: str | None,
    price: str | None,
    quantity: int | None,
) -> None:
    """Edit a product. Omitted fields keep their current value."""
    handler = UpdateProductHandler(product_repo=product_repository())

    try:
        product = handler.handle(
            product_id, name=name, category=category, price=price, quantity=quantity
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.name}' updated")


@click.command("remove")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
def product_remove(product_id: int) -> None:
    """Delete a product from the inventory."""
    handler = RemoveProductHandler(product_repo=product_repository())

    try:
        handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} removed")


@click.command("list")
@click.option("--search", default="", help="Filter by name or category.")
@click.option(
    "--sort",
    type=click.Choice([k.value for k in SortKey], case_sensitive=False),
    default=SortKey.NONE.value,
    show_default=True,
    help="Column to sort by.",
)
def product_list(search: str, sort: str) -> None:
    """List products in the inventory."""
    handler = ListProductsHandler(product_repo=product_repository())

    try:
        rows = handler.handle(search=search, sort=sort)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not rows:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Category':<15} {'Price':>16} {'Qty':>8}")
    click.echo("-" * 69)
    for row in rows:
        _echo_row(row)

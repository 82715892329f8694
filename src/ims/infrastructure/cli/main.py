import locale
import logging

import click

from ims.infrastructure import config
from ims.infrastructure.cli.dashboard_commands import dashboard
from ims.infrastructure.cli.product_commands import (
    product_add,
    product_list,
    product_remove,
    product_update,
)

logger = logging.getLogger(__name__)


@click.group(help=config.APP_NAME)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else config.log_level(),
        format=config.LOG_FORMAT,
    )
    # Name and category sorting collates by the user's locale.
    try:
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error as exc:
        logger.warning("Unsupported locale, sorting by code point: %s", exc)


@cli.group()
def product() -> None:
    """Manage products."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_list)
product.add_command(product_remove)
product.add_command(product_update)
cli.add_command(dashboard)

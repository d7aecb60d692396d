import logging
from pathlib import Path

import click

from storefront.infrastructure.cli._context import CliState
from storefront.infrastructure.cli.order_commands import (
    order_list,
    order_place,
    order_ship,
    order_show,
)
from storefront.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_update,
)
from storefront.infrastructure.cli.shop_commands import catalog, shop
from storefront.infrastructure.config import StorefrontConfig

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory holding the document store (env: STOREFRONT_DATA_DIR).",
)
@click.option("--app-id", default=None, help="App whose collections to use (env: STOREFRONT_APP_ID).")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log debug output to stderr.")
@click.pass_context
def cli(ctx: click.Context, data_dir: Path | None, app_id: str | None, verbose: bool) -> None:
    """Storefront: catalog, cart, checkout and order admin"""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format=LOG_FORMAT)
    config = StorefrontConfig.from_env().with_overrides(data_dir=data_dir, app_id=app_id)
    ctx.obj = CliState(config=config)


@cli.group()
def order() -> None:
    """Place and manage orders."""


@cli.group()
def product() -> None:
    """Manage products (admin)."""


# Register subcommands
cli.add_command(catalog)
cli.add_command(shop)
order.add_command(order_list)
order.add_command(order_place)
order.add_command(order_ship)
order.add_command(order_show)
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_update)

"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from storefront.application.list_orders import ListOrdersHandler
from storefront.application.place_order import PlaceOrderHandler
from storefront.application.ship_order import ShipOrderHandler
from storefront.application.show_order import ShowOrderHandler
from storefront.domain.model.cart import Cart
from storefront.infrastructure.cli._context import get_container, reported
from storefront.infrastructure.cli._display import show_order, show_order_table, show_stock_warning


def _parse_items(raw: str) -> Cart:
    """Parse '1:3,2:5' (product id : quantity) into a cart."""
    cart = Cart()
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductId:Quantity'."
            )
        product_id, qty_str = pair.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product '{product_id}'."
            )
        product_id = product_id.strip()
        cart.set_quantity(product_id, cart.quantity_of(product_id) + qty)
    return cart


@click.command("place")
@click.option("--name", required=True, help="Customer name.")
@click.option("--email", required=True, help="Customer email.")
@click.option("--items", required=True, help="Items as 'ProductId:Qty,ProductId:Qty'.")
def order_place(name: str, email: str, items: str) -> None:
    """Check out a cart in one step."""
    cart = _parse_items(items)
    container = get_container()
    handler = PlaceOrderHandler(order_repo=container.orders, product_repo=container.products)

    with reported("Placing order"):
        placed = handler.handle(customer_name=name, customer_email=email, cart=cart)

    click.echo(f"Order #{placed.order.id} placed.")
    show_order(placed.order)
    show_stock_warning(placed)


@click.command("list")
def order_list() -> None:
    """List orders, newest first."""
    handler = ListOrdersHandler(order_repo=get_container().orders)

    with reported("Loading orders"):
        result = handler.handle()

    show_order_table(result.orders, result.new_count)


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
def order_show(order_id: int) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(order_repo=get_container().orders)

    with reported("Loading order"):
        dto = handler.handle(order_id)

    show_order(dto)


@click.command("ship")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to ship.")
def order_ship(order_id: int) -> None:
    """Mark a new order as shipped."""
    handler = ShipOrderHandler(order_repo=get_container().orders)

    with reported("Updating order status"):
        handler.handle(order_id)

    click.echo(f"Order #{order_id} marked as shipped.")

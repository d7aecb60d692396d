"""Customer-facing commands: the catalog and an interactive shop.

The shop keeps its cart in memory for the lifetime of the session.
Leaving the session discards the cart, the same way reloading a web
storefront would.
"""

from __future__ import annotations

import logging
import shlex

import click

from storefront.application.browse_catalog import BrowseCatalogHandler, available_products
from storefront.application.dto import ProductDTO
from storefront.application.place_order import PlaceOrderHandler
from storefront.application.view_cart import ViewCartHandler
from storefront.domain.model.cart import Cart
from storefront.domain.model.product import Product
from storefront.infrastructure.bootstrap import Container
from storefront.infrastructure.cli._context import get_container, reported
from storefront.infrastructure.cli._display import show_cart, show_catalog, show_order, show_stock_warning

logger = logging.getLogger(__name__)

SHOP_HELP = """\
Commands:
  list                 show the catalog
  add <id>             add one unit of a product to the cart
  qty <id> <n>         set a cart quantity (0 or less removes it)
  remove <id>          remove a product from the cart
  cart                 show the cart
  checkout             place the order
  help                 show this help
  quit                 leave the shop (the cart is discarded)"""


class ShopSession:
    """One shopper, one cart, and a live view of the catalog."""

    def __init__(self, container: Container) -> None:
        self._container = container
        self.cart = Cart()
        self.catalog: list[Product] = []
        self._unsubscribe = container.products.subscribe(self._on_products)

    def _on_products(self, products: list[Product]) -> None:
        self.catalog = available_products(products)

    def refresh(self) -> None:
        """Pick up catalog changes made by other processes."""
        self._container.products.poll()

    def close(self) -> None:
        self._unsubscribe()

    # --- Command dispatch -----------------------------------------------------

    def execute(self, line: str) -> bool:
        """Run one command line. Returns False when the shopper leaves."""
        try:
            words = shlex.split(line)
        except ValueError as exc:
            click.echo(f"Error: {exc}")
            return True
        if not words:
            return True

        command, args = words[0].lower(), words[1:]
        if command in ("quit", "exit"):
            return False

        handlers = {
            "list": self._list,
            "add": self._add,
            "qty": self._qty,
            "remove": self._remove,
            "cart": self._cart,
            "checkout": self._checkout,
            "help": self._help,
        }
        handler = handlers.get(command)
        if handler is None:
            click.echo(f"Unknown command '{command}'. Type 'help' for a list.")
            return True

        try:
            with reported("Refreshing catalog"):
                self.refresh()
            handler(args)
        except click.ClickException as exc:
            click.echo(f"Error: {exc.format_message()}")
        except click.Abort:
            click.echo()
            click.echo("Cancelled.")
        return True

    def _list(self, args: list[str]) -> None:
        show_catalog([ProductDTO.from_product(p) for p in self.catalog])

    def _add(self, args: list[str]) -> None:
        product = self._find(self._one_id(args, "add <id>"))
        quantity = self.cart.add(product.id)
        click.echo(f"Added {product.name} to cart ({quantity} in cart, {self.cart.item_count} total).")

    def _qty(self, args: list[str]) -> None:
        if len(args) != 2:
            raise click.UsageError("Usage: qty <id> <n>")
        product = self._find(args[0])
        try:
            quantity = int(args[1])
        except ValueError:
            raise click.UsageError(f"Invalid quantity '{args[1]}'.")
        self.cart.set_quantity(product.id, quantity)
        self._cart([])

    def _remove(self, args: list[str]) -> None:
        product_id = self._one_id(args, "remove <id>")
        self.cart.remove(product_id)
        self._cart([])

    def _cart(self, args: list[str]) -> None:
        with reported("Loading cart"):
            show_cart(ViewCartHandler(self._container.products).handle(self.cart))

    def _checkout(self, args: list[str]) -> None:
        if self.cart.is_empty:
            click.echo("Your cart is empty.")
            return
        self._cart([])
        name = click.prompt("Full name")
        email = click.prompt("Email address")

        handler = PlaceOrderHandler(
            order_repo=self._container.orders,
            product_repo=self._container.products,
        )
        with reported("Placing order"):
            placed = handler.handle(customer_name=name, customer_email=email, cart=self.cart)

        click.echo("Order placed successfully! The merchant has been notified.")
        show_order(placed.order)
        show_stock_warning(placed)

    def _help(self, args: list[str]) -> None:
        click.echo(SHOP_HELP)

    # --- Helpers --------------------------------------------------------------

    @staticmethod
    def _one_id(args: list[str], usage: str) -> str:
        if len(args) != 1:
            raise click.UsageError(f"Usage: {usage}")
        return args[0]

    def _find(self, product_id: str) -> Product:
        for product in self.catalog:
            if product.id == product_id:
                return product
        raise click.ClickException(f"Product '{product_id}' is not in the catalog")


@click.command("catalog")
def catalog() -> None:
    """Show the products customers can buy right now."""
    handler = BrowseCatalogHandler(product_repo=get_container().products)

    with reported("Loading catalog"):
        products = handler.handle()

    show_catalog(products)


@click.command("shop")
def shop() -> None:
    """Browse, fill a cart and check out interactively."""
    with reported("Opening the shop"):
        session = ShopSession(get_container())

    click.echo("Welcome! Type 'help' for commands.")
    session.execute("list")
    try:
        while True:
            try:
                line = click.prompt("shop", default="", show_default=False, prompt_suffix="> ")
            except click.Abort:
                click.echo()
                break
            if not session.execute(line):
                break
    finally:
        session.close()

    if not session.cart.is_empty:
        logger.debug("Discarding cart with %d item(s)", session.cart.item_count)
    click.echo("Goodbye!")

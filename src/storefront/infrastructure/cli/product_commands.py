"""CLI commands for the Product aggregate (admin)."""

from __future__ import annotations

import click

from storefront.application.add_product import AddProductHandler
from storefront.application.delete_product import DeleteProductHandler
from storefront.application.list_products import ListProductsHandler
from storefront.application.update_product import UpdateProductHandler
from storefront.infrastructure.cli._context import get_container, reported
from storefront.infrastructure.cli._display import show_product_table


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--description", required=True, help="Product description.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--stock", required=True, type=click.IntRange(min=0), help="Stock quantity.")
@click.option("--image-url", required=True, help="Image URL (https://...).")
def product_add(name: str, description: str, price: str, stock: int, image_url: str) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(product_repo=get_container().products)

    with reported("Saving product"):
        product = handler.handle(
            name=name,
            description=description,
            price=price,
            stock=stock,
            image_url=image_url,
        )

    click.echo(f"Product #{product.id} '{product.name}' added at {product.price}")


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--description", default=None, help="New description.")
@click.option("--price", default=None, help="New price (e.g. 29.99).")
@click.option("--stock", default=None, type=click.IntRange(min=0), help="New stock quantity.")
@click.option("--image-url", default=None, help="New image URL.")
def product_update(
    product_id: str,
    name: str | None,
    description: str | None,
    price: str | None,
    stock: int | None,
    image_url: str | None,
) -> None:
    """Edit a product. Existing orders keep their prices."""
    handler = UpdateProductHandler(product_repo=get_container().products)

    with reported("Saving product"):
        product = handler.handle(
            product_id=product_id,
            name=name,
            description=description,
            price=price,
            stock=stock,
            image_url=image_url,
        )

    click.echo(f"Product #{product.id} '{product.name}' updated ({product.price}, stock {product.stock})")


@click.command("delete")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--yes", is_flag=True, default=False, help="Do not ask for confirmation.")
def product_delete(product_id: str, yes: bool) -> None:
    """Delete a product from the catalog."""
    if not yes and not click.confirm("Are you sure you want to delete this product?"):
        click.echo("Cancelled.")
        return

    handler = DeleteProductHandler(product_repo=get_container().products)

    with reported("Deleting product"):
        name = handler.handle(product_id)

    click.echo(f"Product #{product_id} '{name}' deleted.")


@click.command("list")
def product_list() -> None:
    """List all products, including sold-out ones."""
    handler = ListProductsHandler(product_repo=get_container().products)

    with reported("Loading products"):
        products = handler.handle()

    show_product_table(products)

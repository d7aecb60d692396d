"""Shared table formatting for CLI output."""

from __future__ import annotations

import click

from storefront.application.dto import CartDTO, OrderDTO, PlacedOrderDTO, ProductDTO


def show_catalog(products: list[ProductDTO]) -> None:
    if not products:
        click.echo("No products available at the moment.")
        return

    click.echo(f"{'ID':<6} {'Name':<24} {'Price':>10}  Description")
    click.echo("-" * 70)
    for p in products:
        click.echo(f"{p.id:<6} {p.name:<24} {p.price:>10}  {p.description}")


def show_product_table(products: list[ProductDTO]) -> None:
    if not products:
        click.echo("No products found. Add one to get started!")
        return

    click.echo(f"{'ID':<6} {'Name':<24} {'Price':>10} {'Stock':>7}  Image")
    click.echo("-" * 70)
    for p in products:
        click.echo(f"{p.id:<6} {p.name:<24} {p.price:>10} {p.stock:>7}  {p.image_url}")


def show_cart(cart: CartDTO) -> None:
    if not cart.lines:
        click.echo("Your cart is empty.")
        return

    click.echo(f"Cart ({cart.item_count} item{'s' if cart.item_count != 1 else ''})")
    click.echo(f"  {'ID':<6} {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*54}")
    for line in cart.lines:
        click.echo(
            f"  {line.product_id:<6} {line.product_name:<20} {line.quantity:>5} "
            f"{line.unit_price:>10} {line.line_total:>10}"
        )
    click.echo(f"  {'-'*54}")
    click.echo(f"  {'Subtotal':<34} {cart.subtotal:>20}")


def show_order(dto: OrderDTO) -> None:
    click.echo(f"Order #{dto.id}  (status={dto.status})")
    click.echo(f"Customer: {dto.customer_name} <{dto.customer_email}>")
    click.echo(f"Created:  {dto.created_at}")
    click.echo()
    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*47}")
    for item in dto.items:
        click.echo(
            f"  {item.product_name:<20} {item.quantity:>5} {item.unit_price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*47}")
    click.echo(f"  {'Order Total':<27} {dto.total:>20}")


def show_order_table(orders: list[OrderDTO], new_count: int) -> None:
    click.echo(f"Incoming Orders ({new_count} new)")
    if not orders:
        click.echo("No orders yet.")
        return

    click.echo(f"{'ID':<6} {'Created':<21} {'Customer':<28} {'Total':>10} {'Status':>9}")
    click.echo("-" * 78)
    for o in orders:
        customer = f"{o.customer_name} <{o.customer_email}>"
        click.echo(f"{o.id:<6} {o.created_at:<21} {customer:<28} {o.total:>10} {o.status:>9}")
        for item in o.items:
            click.echo(f"{'':<6} {item.product_name} (x{item.quantity})")


def show_stock_warning(placed: PlacedOrderDTO) -> None:
    if placed.stock_warning:
        click.echo(f"Warning: {placed.stock_warning}", err=True)

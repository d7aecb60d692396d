"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.model.cart import CartLine
from storefront.domain.model.order import Order
from storefront.domain.model.product import Product


@dataclass(frozen=True)
class ProductDTO:
    id: str
    name: str
    description: str
    price: str  # formatted, e.g. "$15.00"
    stock: int
    image_url: str

    @staticmethod
    def from_product(product: Product) -> ProductDTO:
        return ProductDTO(
            id=product.id,
            name=product.name,
            description=product.description,
            price=str(product.price),
            stock=product.stock,
            image_url=product.display_image_url,
        )


@dataclass(frozen=True)
class CartLineDTO:
    product_id: str
    product_name: str
    quantity: int
    unit_price: str
    line_total: str

    @staticmethod
    def from_line(line: CartLine) -> CartLineDTO:
        return CartLineDTO(
            product_id=line.product.id,
            product_name=line.product.name,
            quantity=line.quantity,
            unit_price=str(line.product.price),
            line_total=str(line.line_total),
        )


@dataclass(frozen=True)
class CartDTO:
    """Output: the cart as the shopper sees it."""

    lines: list[CartLineDTO]
    item_count: int
    subtotal: str


@dataclass(frozen=True)
class OrderLineItemDTO:
    """Output: a single line item as displayed to the user."""

    product_id: str
    product_name: str
    quantity: int
    unit_price: str
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: int
    customer_name: str
    customer_email: str
    status: str
    items: list[OrderLineItemDTO]
    total: str
    created_at: str

    @staticmethod
    def from_order(order: Order) -> OrderDTO:
        return OrderDTO(
            id=order.id,  # type: ignore[arg-type]
            customer_name=order.customer_name,
            customer_email=order.customer_email,
            status=order.status.value,
            items=[
                OrderLineItemDTO(
                    product_id=item.product_id,
                    product_name=item.product_name,
                    quantity=item.quantity.value,
                    unit_price=str(item.unit_price),
                    line_total=str(item.line_total),
                )
                for item in order.items
            ],
            total=str(order.total),
            created_at=order.created_at.strftime("%Y-%m-%d %H:%M UTC"),
        )


@dataclass(frozen=True)
class OrderListDTO:
    orders: list[OrderDTO]
    new_count: int


@dataclass(frozen=True)
class PlacedOrderDTO:
    """Output of checkout.

    ``stock_warning`` is set when the order was written but the stock
    deduction afterwards failed; the order stands either way.
    """

    order: OrderDTO
    stock_warning: str | None = None

"""Application service: Place Order (checkout) use case.

Orchestrates the flow between the cart, the repositories and the
domain model. Steps:

1. Resolve the cart against the *current* catalog.
2. Snapshot each line into an OrderLineItem (price locked here).
3. Let the Order aggregate validate contact details and items.
4. Check stock for every line before anything is written.
5. Write the order and clear the cart, then deduct stock.

If anything fails before the order is written, the cart is left as it
was so the shopper can try again by hand. Once the order is written the
cart is cleared even if the stock deduction fails; that failure is
logged and handed back as a warning rather than as a failed checkout.
"""

from __future__ import annotations

import logging

from storefront.application.browse_catalog import available_products
from storefront.application.dto import OrderDTO, PlacedOrderDTO
from storefront.domain.exceptions import RepositoryError, ValidationError
from storefront.domain.model.cart import Cart
from storefront.domain.model.order import Order, OrderLineItem
from storefront.domain.model.value_objects import Quantity
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.service.stock_allocation_service import StockAllocationService

logger = logging.getLogger(__name__)


class PlaceOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo

    def handle(self, customer_name: str, customer_email: str, cart: Cart) -> PlacedOrderDTO:
        catalog = available_products(self._product_repo.list_all())
        lines = cart.lines(catalog)
        if not lines:
            raise ValidationError("Cart is empty")

        line_items = [
            OrderLineItem(
                product_id=line.product.id,
                product_name=line.product.name,
                quantity=Quantity(line.quantity),
                unit_price=line.product.price,  # <-- price snapshot
            )
            for line in lines
        ]

        order = Order.create(
            customer_name=customer_name,
            customer_email=customer_email,
            items=line_items,
        )

        stock = StockAllocationService(self._product_repo)
        allocations = stock.check_availability(order.items)

        self._order_repo.save(order)
        # The order exists from here on; the cart must not be reused.
        cart.clear()
        logger.info("Order #%s placed: %d line(s), total %s", order.id, len(order.items), order.total)

        stock_warning = None
        try:
            stock.withdraw(allocations)
        except RepositoryError as exc:
            logger.exception("Order #%s placed but stock was not deducted", order.id)
            stock_warning = f"Order #{order.id} was placed, but stock could not be updated: {exc}"

        return PlacedOrderDTO(order=OrderDTO.from_order(order), stock_warning=stock_warning)

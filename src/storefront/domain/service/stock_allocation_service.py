"""Domain service: Stock Allocation.

Deducts sold quantities from product stock when an order is placed.
It lives in the domain layer because "never sell what is not in stock"
is a business rule, not just orchestration.

The two-phase approach (validate-then-mutate) ensures stock is never
left partially deducted when one product fails validation.
"""

from __future__ import annotations

import logging

from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.order import OrderLineItem
from storefront.domain.model.product import Product
from storefront.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class StockAllocationService:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def check_availability(self, items: list[OrderLineItem]) -> list[tuple[Product, int]]:
        """Phase 1: load every product and make sure enough stock exists.

        Returns the (product, quantity) pairs to withdraw. Nothing is
        mutated.
        """
        requested: dict[str, int] = {}
        for line in items:
            requested[line.product_id] = requested.get(line.product_id, 0) + line.quantity.value

        allocations: list[tuple[Product, int]] = []
        for product_id, qty in requested.items():
            product = self._product_repo.get_by_id(product_id)
            if product is None:
                raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
            if qty > product.stock:
                raise ValidationError(
                    f"Insufficient stock for {product.name} "
                    f"(need {qty}, have {product.stock})"
                )
            allocations.append((product, qty))
        return allocations

    def withdraw(self, allocations: list[tuple[Product, int]]) -> None:
        """Phase 2: deduct and persist."""
        for product, qty in allocations:
            product.withdraw_stock(qty)
            self._product_repo.save(product)
            logger.debug("Withdrew %d of product %s, %d left", qty, product.id, product.stock)

"""Ephemeral, client-local shopping cart.

A cart is a plain mapping from product id to quantity. It is never
persisted: it lives for one shopping session and is discarded after a
successful checkout.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money


@dataclass(frozen=True)
class CartLine:
    """A cart entry resolved against the current catalog."""

    product: Product
    quantity: int

    @property
    def line_total(self) -> Money:
        return self.product.price * self.quantity


class Cart:

    def __init__(self) -> None:
        self._quantities: dict[str, int] = {}

    def add(self, product_id: str) -> int:
        """Add one unit of a product; returns the new quantity."""
        self._quantities[product_id] = self._quantities.get(product_id, 0) + 1
        return self._quantities[product_id]

    def set_quantity(self, product_id: str, quantity: int) -> None:
        """Set an entry's quantity. Zero or less removes the entry."""
        if quantity > 0:
            self._quantities[product_id] = quantity
        else:
            self._quantities.pop(product_id, None)

    def remove(self, product_id: str) -> None:
        self._quantities.pop(product_id, None)

    def clear(self) -> None:
        self._quantities.clear()

    def quantity_of(self, product_id: str) -> int:
        return self._quantities.get(product_id, 0)

    @property
    def entries(self) -> dict[str, int]:
        return dict(self._quantities)

    @property
    def is_empty(self) -> bool:
        return not self._quantities

    @property
    def item_count(self) -> int:
        return sum(self._quantities.values())

    # --- Derived views --------------------------------------------------------

    def lines(self, catalog: Iterable[Product]) -> list[CartLine]:
        """Resolve entries against *catalog*.

        Entries whose product is no longer in the catalog (deleted, or
        sold out) are skipped rather than reported.
        """
        by_id = {product.id: product for product in catalog}
        return [
            CartLine(product=by_id[product_id], quantity=quantity)
            for product_id, quantity in self._quantities.items()
            if product_id in by_id
        ]

    def subtotal(self, catalog: Iterable[Product]) -> Money:
        result = Money.zero()
        for line in self.lines(catalog):
            result = result + line.line_total
        return result

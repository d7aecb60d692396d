"""Application service: View Cart use case (query)."""

from __future__ import annotations

from storefront.application.browse_catalog import available_products
from storefront.application.dto import CartDTO, CartLineDTO
from storefront.domain.model.cart import Cart
from storefront.domain.repository.product_repository import ProductRepository


class ViewCartHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, cart: Cart) -> CartDTO:
        catalog = available_products(self._product_repo.list_all())
        lines = cart.lines(catalog)
        return CartDTO(
            lines=[CartLineDTO.from_line(line) for line in lines],
            item_count=sum(line.quantity for line in lines),
            subtotal=str(cart.subtotal(catalog)),
        )

"""Application service: List Products use case (admin query)."""

from __future__ import annotations

from collections.abc import Iterable

from storefront.application.dto import ProductDTO
from storefront.domain.model.product import Product
from storefront.domain.repository.product_repository import ProductRepository


def sorted_by_name(products: Iterable[Product]) -> list[Product]:
    return sorted(products, key=lambda p: p.name.casefold())


class ListProductsHandler:
    """Every product, including sold-out ones, ordered by name."""

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self) -> list[ProductDTO]:
        return [
            ProductDTO.from_product(product)
            for product in sorted_by_name(self._product_repo.list_all())
        ]

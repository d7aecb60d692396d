"""Application service: Browse Catalog use case (query).

The customer-facing catalog only ever contains products in stock.
"""

from __future__ import annotations

from collections.abc import Iterable

from storefront.application.dto import ProductDTO
from storefront.domain.model.product import Product
from storefront.domain.repository.product_repository import ProductRepository


def available_products(products: Iterable[Product]) -> list[Product]:
    """Filter a product snapshot down to the purchasable catalog."""
    return [product for product in products if product.is_available]


class BrowseCatalogHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self) -> list[ProductDTO]:
        return [
            ProductDTO.from_product(product)
            for product in available_products(self._product_repo.list_all())
        ]

"""Application service: Add Product use case."""

from __future__ import annotations

import logging

from storefront.application.dto import ProductDTO
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        name: str,
        description: str,
        price: str,
        stock: int,
        image_url: str,
    ) -> ProductDTO:
        """Add a new product to the catalog."""
        product = Product.create(
            id=self._product_repo.next_id(),
            name=name,
            description=description,
            price=Money.of(price),
            stock=stock,
            image_url=image_url,
        )
        self._product_repo.save(product)
        logger.info("Added product %s (%s)", product.id, product.name)
        return ProductDTO.from_product(product)

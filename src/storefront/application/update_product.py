"""Application service: Update Product use case."""

from __future__ import annotations

import logging

from storefront.application.dto import ProductDTO
from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        product_id: str,
        name: str | None = None,
        description: str | None = None,
        price: str | None = None,
        stock: int | None = None,
        image_url: str | None = None,
    ) -> ProductDTO:
        """Edit a product. Only the fields given are changed.

        This does NOT affect any existing orders: they captured a
        price snapshot at checkout.
        """
        if all(v is None for v in (name, description, price, stock, image_url)):
            raise ValidationError("Nothing to update")

        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        product.update(
            name=name,
            description=description,
            price=Money.of(price) if price is not None else None,
            stock=stock,
            image_url=image_url,
        )
        self._product_repo.save(product)
        logger.info("Updated product %s", product.id)
        return ProductDTO.from_product(product)

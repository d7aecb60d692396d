"""Application service: Delete Product use case.

Past orders keep their own copy of the product name and price, so
deleting a product never touches order history.
"""

from __future__ import annotations

import logging

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class DeleteProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str) -> str:
        """Delete a product and return the name it had."""
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        self._product_repo.delete(product_id)
        logger.info("Deleted product %s (%s)", product.id, product.name)
        return product.name

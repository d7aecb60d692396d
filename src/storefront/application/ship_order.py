"""Application service: Ship Order use case.

Moves an order from ``new`` to ``shipped``. The transition is one-way.
"""

from __future__ import annotations

import logging

from storefront.application.dto import OrderDTO
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class ShipOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int) -> OrderDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")

        order.mark_shipped()
        self._order_repo.save(order)
        logger.info("Order #%s marked as shipped", order.id)
        return OrderDTO.from_order(order)

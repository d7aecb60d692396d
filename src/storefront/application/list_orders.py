"""Application service: List Orders use case (admin query)."""

from __future__ import annotations

from collections.abc import Iterable

from storefront.application.dto import OrderDTO, OrderListDTO
from storefront.domain.model.order import Order
from storefront.domain.repository.order_repository import OrderRepository


def newest_first(orders: Iterable[Order]) -> list[Order]:
    return sorted(orders, key=lambda o: o.created_at, reverse=True)


class ListOrdersHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self) -> OrderListDTO:
        orders = newest_first(self._order_repo.list_all())
        return OrderListDTO(
            orders=[OrderDTO.from_order(order) for order in orders],
            new_count=sum(1 for order in orders if order.is_new),
        )

"""Abstract repository for Order aggregate.

Orders are never deleted, so there is no ``delete``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.order import Order
from storefront.domain.repository.subscription import SnapshotCallback, Unsubscribe


class OrderRepository(ABC):

    @abstractmethod
    def get_by_id(self, order_id: int) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return every order, in storage order."""

    @abstractmethod
    def save(self, order: Order) -> None:
        """Persist a new or updated order, assigning an ID if it has none."""

    @abstractmethod
    def subscribe(self, callback: SnapshotCallback) -> Unsubscribe:
        """Push the full order list to *callback* now and on every change."""

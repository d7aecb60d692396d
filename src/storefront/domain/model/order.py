"""Order aggregate.

The Order is an aggregate root that owns its line items. An order is
written once at checkout; its status is the only thing that changes
afterwards, and only forwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import EmailAddress, Money, Quantity


class OrderStatus(Enum):
    NEW = "new"
    SHIPPED = "shipped"


@dataclass(frozen=True)
class OrderLineItem:
    """Captures the price of a product at checkout time.

    The ``unit_price`` is never recomputed from the catalog, so later
    price edits leave historical orders untouched.
    """

    product_id: str
    product_name: str
    quantity: Quantity
    unit_price: Money  # locked at checkout

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value


@dataclass
class Order:
    """Aggregate root for customer orders.

    Use the ``Order.create()`` factory for new orders. The ``__init__``
    is intentionally simple so the repository can reconstitute persisted
    orders without re-validating.
    """

    id: int | None
    customer_name: str
    customer_email: str
    items: list[OrderLineItem]
    status: OrderStatus = OrderStatus.NEW
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(
        customer_name: str,
        customer_email: str,
        items: list[OrderLineItem],
    ) -> Order:
        """Create a new order, enforcing all invariants."""
        if not customer_name or not customer_name.strip():
            raise ValidationError("Customer name is required")

        email = EmailAddress.of(customer_email)

        if not items:
            raise ValidationError("Order must contain at least one item")

        return Order(
            id=None,
            customer_name=customer_name.strip(),
            customer_email=str(email),
            items=list(items),
        )

    # --- State transitions ----------------------------------------------------

    def mark_shipped(self) -> None:
        """Transition new -> shipped. There is no way back."""
        if self.status == OrderStatus.SHIPPED:
            raise ValidationError(f"Order #{self.id} has already been shipped")
        self.status = OrderStatus.SHIPPED

    # --- Computed properties --------------------------------------------------

    @property
    def total(self) -> Money:
        result = Money.zero()
        for item in self.items:
            result = result + item.line_total
        return result

    @property
    def is_new(self) -> bool:
        return self.status == OrderStatus.NEW

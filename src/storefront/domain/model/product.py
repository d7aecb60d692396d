"""Product aggregate.

Products live independently of orders. They have their own lifecycle:
prices and stock change, products are added and removed from the catalog.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from urllib.parse import urlparse

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money

PLACEHOLDER_IMAGE_URL = "https://placehold.co/600x400/e2e8f0/a0aec0?text=Image+Not+Found"
MAX_PRICE = Decimal("1000000000.00")


@dataclass
class Product:
    """A product in the catalog.

    Kept as a mutable dataclass because price, stock and copy edits are
    legitimate mutations on the aggregate. Use ``Product.create()`` for
    new products; ``__init__`` stays simple so repositories can
    reconstitute stored records without re-validating.
    """

    id: str
    name: str
    description: str
    price: Money
    stock: int
    image_url: str = ""

    @staticmethod
    def create(
        id: str,
        name: str,
        description: str,
        price: Money,
        stock: int,
        image_url: str,
    ) -> Product:
        return Product(
            id=id,
            name=_required(name, "Product name"),
            description=_required(description, "Description"),
            price=_valid_price(price),
            stock=_valid_stock(stock),
            image_url=_valid_image_url(image_url),
        )

    @property
    def is_available(self) -> bool:
        """Customers only ever see products that are in stock."""
        return self.stock > 0

    @property
    def display_image_url(self) -> str:
        return self.image_url or PLACEHOLDER_IMAGE_URL

    # --- Mutations ------------------------------------------------------------

    def update(
        self,
        name: str | None = None,
        description: str | None = None,
        price: Money | None = None,
        stock: int | None = None,
        image_url: str | None = None,
    ) -> None:
        """Apply an admin edit. Fields left as None keep their value.

        Existing orders are unaffected: they hold their own price snapshot.
        """
        # Validate everything before touching any field.
        new_name = _required(name, "Product name") if name is not None else self.name
        new_description = (
            _required(description, "Description") if description is not None else self.description
        )
        new_price = _valid_price(price) if price is not None else self.price
        new_stock = _valid_stock(stock) if stock is not None else self.stock
        new_image = _valid_image_url(image_url) if image_url is not None else self.image_url

        self.name = new_name
        self.description = new_description
        self.price = new_price
        self.stock = new_stock
        self.image_url = new_image

    def withdraw_stock(self, quantity: int) -> None:
        """Deduct sold units from stock."""
        if quantity <= 0:
            raise ValidationError("Withdrawn quantity must be positive")
        if quantity > self.stock:
            raise ValidationError(
                f"Insufficient stock for {self.name} "
                f"(need {quantity}, have {self.stock})"
            )
        self.stock -= quantity


def _required(value: str | None, label: str) -> str:
    if value is None or not value.strip():
        raise ValidationError(f"{label} is required")
    return value.strip()


def _valid_price(price: Money) -> Money:
    if price.amount > MAX_PRICE:
        raise ValidationError(f"Price cannot exceed {Money(MAX_PRICE)}")
    if not price.has_cents_precision:
        raise ValidationError(f"Price {price.amount} has more than two decimal places")
    return price


def _valid_stock(stock: int) -> int:
    if not isinstance(stock, int) or isinstance(stock, bool):
        raise ValidationError(f"Stock must be an integer, got {type(stock).__name__}")
    if stock < 0:
        raise ValidationError("Stock cannot be negative")
    return stock


def _valid_image_url(url: str | None) -> str:
    url = _required(url, "Image URL")
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValidationError(f"Image URL must be an absolute http(s) URL, got {url!r}")
    return url

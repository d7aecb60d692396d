"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

from decimal import Decimal

from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository
from storefront.infrastructure.persistence.json_collection import JsonCollection


class JsonProductRepository(JsonCollection[Product], ProductRepository):

    # --- ProductRepository interface ------------------------------------------

    def next_id(self) -> str:
        numeric = [int(raw["id"]) for raw in self._load_raw() if str(raw["id"]).isdigit()]
        return str(max(numeric) + 1) if numeric else "1"

    def get_by_id(self, product_id: str) -> Product | None:
        for raw in self._load_raw():
            if raw["id"] == product_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Product]:
        return self.snapshot()

    def save(self, product: Product) -> None:
        records = self._load_raw()
        for i, raw in enumerate(records):
            if raw["id"] == product.id:
                records[i] = self._to_raw(product)
                break
        else:
            records.append(self._to_raw(product))
        self._persist_raw(records)

    def delete(self, product_id: str) -> None:
        records = self._load_raw()
        remaining = [raw for raw in records if raw["id"] != product_id]
        if len(remaining) != len(records):
            self._persist_raw(remaining)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "description": product.description,
            "price": str(product.price.amount),
            "currency": product.price.currency,
            "stock": product.stock,
            "image_url": product.image_url,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=raw["id"],
            name=raw["name"],
            description=raw.get("description", ""),
            price=Money(Decimal(raw["price"]), raw.get("currency", "USD")),
            stock=raw.get("stock", 0),
            image_url=raw.get("image_url", ""),
        )

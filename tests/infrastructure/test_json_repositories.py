"""Tests for the JSON-file document store."""

import json
import os
from decimal import Decimal

import pytest

from storefront.domain.model.order import Order, OrderLineItem, OrderStatus
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money, Quantity
from storefront.infrastructure.errors import PersistenceError
from storefront.infrastructure.persistence.json_order_repository import JsonOrderRepository
from storefront.infrastructure.persistence.json_product_repository import JsonProductRepository


def _mug(pid: str = "1", stock: int = 5) -> Product:
    return Product(
        id=pid,
        name="Mug",
        description="Stoneware",
        price=Money.of("12.50"),
        stock=stock,
        image_url="https://example.com/mug.png",
    )


def _order() -> Order:
    return Order.create(
        "Ada",
        "ada@example.com",
        [OrderLineItem("1", "Mug", Quantity(2), Money.of("12.50"))],
    )


def _with_id(order: Order, order_id: int) -> Order:
    order.id = order_id
    return order


class TestJsonProductRepository:

    def test_creates_missing_file(self, tmp_path):
        path = tmp_path / "nested" / "products.json"
        JsonProductRepository(path)
        assert json.loads(path.read_text()) == []

    def test_save_and_reload(self, tmp_path):
        path = tmp_path / "products.json"
        JsonProductRepository(path).save(_mug())

        product = JsonProductRepository(path).get_by_id("1")
        assert product == _mug()
        assert product.price.amount == Decimal("12.50")

    def test_save_replaces_existing(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "products.json")
        repo.save(_mug(stock=5))
        repo.save(_mug(stock=1))
        assert [p.stock for p in repo.list_all()] == [1]

    def test_next_id(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "products.json")
        assert repo.next_id() == "1"
        repo.save(_mug("7"))
        assert repo.next_id() == "8"

    def test_delete(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "products.json")
        repo.save(_mug("1"))
        repo.save(_mug("2"))
        repo.delete("1")
        repo.delete("does-not-exist")
        assert [p.id for p in repo.list_all()] == ["2"]

    def test_corrupt_file_raises_persistence_error(self, tmp_path):
        path = tmp_path / "products.json"
        path.write_text("{not json")
        repo = JsonProductRepository(path)
        with pytest.raises(PersistenceError, match="Could not read products.json"):
            repo.list_all()

    def test_no_temp_file_left_behind(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "products.json")
        repo.save(_mug())
        assert sorted(p.name for p in tmp_path.iterdir()) == ["products.json"]


class TestJsonOrderRepository:

    def test_assigns_ids_and_round_trips(self, tmp_path):
        path = tmp_path / "orders.json"
        repo = JsonOrderRepository(path)
        order = _order()
        repo.save(order)
        assert order.id == 1

        loaded = JsonOrderRepository(path).get_by_id(1)
        assert loaded.customer_email == "ada@example.com"
        assert loaded.total == Money.of("25.00")
        assert loaded.created_at == order.created_at
        assert loaded.status == OrderStatus.NEW

    def test_save_assigns_ids_after_highest_stored_id(self, tmp_path):
        path = tmp_path / "orders.json"
        path.write_text(json.dumps([JsonOrderRepository._to_raw(_with_id(_order(), 41))]))
        repo = JsonOrderRepository(path)
        first, second = _order(), _order()
        repo.save(first)
        repo.save(second)
        assert (first.id, second.id) == (42, 43)

    def test_total_is_stored_with_the_order(self, tmp_path):
        path = tmp_path / "orders.json"
        JsonOrderRepository(path).save(_order())
        [raw] = json.loads(path.read_text())
        assert raw["total"] == "25.00"
        assert raw["items"][0]["unit_price"] == "12.50"

    def test_status_update_is_persisted(self, tmp_path):
        path = tmp_path / "orders.json"
        repo = JsonOrderRepository(path)
        order = _order()
        repo.save(order)
        order.mark_shipped()
        repo.save(order)
        assert len(repo.list_all()) == 1
        assert JsonOrderRepository(path).get_by_id(1).status == OrderStatus.SHIPPED

    def test_unwritable_directory_raises_persistence_error(self, tmp_path):
        repo = JsonOrderRepository(tmp_path / "orders.json")
        (tmp_path / "orders.json.tmp").mkdir()
        with pytest.raises(PersistenceError, match="Could not write orders.json"):
            repo.save(_order())


class TestSnapshotSubscription:

    def test_subscriber_gets_initial_and_updated_snapshots(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "products.json")
        snapshots = []
        repo.subscribe(snapshots.append)

        repo.save(_mug("1"))
        repo.save(_mug("2"))

        assert [[p.id for p in s] for s in snapshots] == [[], ["1"], ["1", "2"]]

    def test_poll_picks_up_writes_from_another_instance(self, tmp_path):
        path = tmp_path / "products.json"
        reader = JsonProductRepository(path)
        snapshots = []
        reader.subscribe(snapshots.append)
        assert reader.poll() is False

        JsonProductRepository(path).save(_mug("1"))
        # Make sure the stamp differs even on coarse-grained filesystems.
        stat = path.stat()
        os.utime(path, ns=(stat.st_atime_ns, stat.st_mtime_ns + 1_000_000_000))

        assert reader.poll() is True
        assert [p.id for p in snapshots[-1]] == ["1"]
        assert reader.poll() is False

    def test_unsubscribe(self, tmp_path):
        repo = JsonOrderRepository(tmp_path / "orders.json")
        snapshots = []
        unsubscribe = repo.subscribe(snapshots.append)
        unsubscribe()
        repo.save(_order())
        assert snapshots == [[]]

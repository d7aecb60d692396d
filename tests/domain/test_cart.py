"""Unit tests for the in-memory Cart."""

import pytest

from storefront.domain.model.cart import Cart
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money


def _product(pid: str, price: str, stock: int = 10) -> Product:
    return Product(id=pid, name=f"P{pid}", description="", price=Money.of(price), stock=stock)


CATALOG = [_product("1", "12.50"), _product("2", "3.00"), _product("3", "0.99")]


class TestCartEntries:

    def test_add_increments_by_one(self):
        cart = Cart()
        cart.add("1")
        assert cart.add("1") == 2
        assert cart.entries == {"1": 2}

    def test_set_quantity(self):
        cart = Cart()
        cart.set_quantity("2", 4)
        assert cart.quantity_of("2") == 4

    @pytest.mark.parametrize("quantity", [0, -1, -50])
    def test_non_positive_quantity_removes_entry(self, quantity):
        cart = Cart()
        cart.add("1")
        cart.set_quantity("1", quantity)
        assert "1" not in cart.entries
        assert cart.is_empty

    def test_non_positive_quantity_on_missing_entry_is_noop(self):
        cart = Cart()
        cart.set_quantity("1", 0)
        assert cart.is_empty

    def test_item_count_sums_quantities(self):
        cart = Cart()
        cart.set_quantity("1", 2)
        cart.set_quantity("2", 3)
        assert cart.item_count == 5

    def test_clear(self):
        cart = Cart()
        cart.add("1")
        cart.clear()
        assert cart.is_empty

    def test_entries_is_a_copy(self):
        cart = Cart()
        cart.add("1")
        cart.entries["1"] = 99
        assert cart.quantity_of("1") == 1


class TestCartSubtotal:

    def test_empty_cart_subtotal_is_zero(self):
        assert Cart().subtotal(CATALOG) == Money.of("0")

    def test_subtotal_is_sum_of_price_times_quantity(self):
        cart = Cart()
        cart.set_quantity("1", 2)   # 25.00
        cart.set_quantity("2", 3)   #  9.00
        cart.set_quantity("3", 1)   #  0.99
        assert cart.subtotal(CATALOG) == Money.of("34.99")

    def test_removed_entries_do_not_count(self):
        cart = Cart()
        cart.set_quantity("1", 2)
        cart.set_quantity("2", 3)
        cart.set_quantity("2", 0)
        assert cart.subtotal(CATALOG) == Money.of("25.00")

    def test_entries_missing_from_catalog_are_skipped(self):
        cart = Cart()
        cart.set_quantity("1", 1)
        cart.set_quantity("gone", 5)
        lines = cart.lines(CATALOG)
        assert [line.product.id for line in lines] == ["1"]
        assert cart.subtotal(CATALOG) == Money.of("12.50")

    def test_subtotal_uses_current_catalog_price(self):
        cart = Cart()
        cart.set_quantity("1", 2)
        repriced = [_product("1", "10.00")]
        assert cart.subtotal(repriced) == Money.of("20.00")

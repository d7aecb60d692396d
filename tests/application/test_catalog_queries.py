"""Tests for the catalog, product list and cart queries."""

from storefront.application.browse_catalog import BrowseCatalogHandler
from storefront.application.list_products import ListProductsHandler
from storefront.application.view_cart import ViewCartHandler
from storefront.domain.model.cart import Cart
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from tests.fakes import FakeProductRepository


def _repo() -> FakeProductRepository:
    return FakeProductRepository([
        Product(id="1", name="teapot", description="", price=Money.of("30.00"), stock=2),
        Product(id="2", name="Mug", description="", price=Money.of("12.50"), stock=0),
        Product(id="3", name="Bowl", description="", price=Money.of("8.00"), stock=4),
    ])


class TestBrowseCatalog:

    def test_sold_out_products_never_listed(self):
        products = BrowseCatalogHandler(_repo()).handle()
        assert [p.id for p in products] == ["1", "3"]
        assert all(p.stock > 0 for p in products)

    def test_product_disappears_when_stock_hits_zero(self):
        repo = _repo()
        bowl = repo.get_by_id("3")
        bowl.withdraw_stock(4)
        repo.save(bowl)
        assert [p.id for p in BrowseCatalogHandler(repo).handle()] == ["1"]

    def test_prices_are_formatted(self):
        products = BrowseCatalogHandler(_repo()).handle()
        assert products[0].price == "$30.00"


class TestListProducts:

    def test_lists_everything_sorted_by_name(self):
        products = ListProductsHandler(_repo()).handle()
        assert [p.name for p in products] == ["Bowl", "Mug", "teapot"]


class TestViewCart:

    def test_summary(self):
        cart = Cart()
        cart.set_quantity("1", 2)
        cart.set_quantity("3", 1)
        summary = ViewCartHandler(_repo()).handle(cart)
        assert summary.item_count == 3
        assert summary.subtotal == "$68.00"
        assert [line.line_total for line in summary.lines] == ["$60.00", "$8.00"]

    def test_sold_out_entry_is_not_shown(self):
        cart = Cart()
        cart.set_quantity("2", 5)
        summary = ViewCartHandler(_repo()).handle(cart)
        assert summary.lines == []
        assert summary.subtotal == "$0.00"

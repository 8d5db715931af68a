"""Tests for listing, filtering, sorting and exporting products."""

import io

import pytest

from ims.application.dto import ProductQuery
from ims.application.export_products import ExportProductsHandler
from ims.application.list_products import ListProductsHandler, distinct_categories
from ims.domain.exceptions import ValidationError
from ims.domain.model.product import StockStatus
from ims.infrastructure.persistence.local_product_repository import (
    LocalProductRepository,
)
from tests.fakes import InMemoryProductStore, make_product


def _repo():
    products = [
        make_product(id="1", sku="LAPTOP-001", name="Dell XPS 13 Laptop",
                     category="Electronics", price="1299.99", quantity=25, min_stock=5),
        make_product(id="2", sku="MOUSE-001", name="Logitech MX Master 3",
                     category="Electronics", price="99.99", quantity=3, min_stock=10),
        make_product(id="3", sku="CHAIR-001", name="Herman Miller Aeron",
                     category="Furniture", price="1395.00", quantity=0, min_stock=2),
        make_product(id="4", sku="DESK-001", name="Standing Desk",
                     category="Furniture", price="450.00", quantity=4, min_stock=4),
    ]
    return LocalProductRepository(InMemoryProductStore(products))


def _ids(listing):
    return [p.id for p in listing.products]


class TestFiltering:

    def test_default_query_returns_everything_sorted_by_name(self):
        listing = ListProductsHandler(_repo()).handle()
        assert _ids(listing) == ["1", "3", "2", "4"]
        assert listing.total == 4
        assert listing.shown == 4

    def test_search_matches_name_case_insensitively(self):
        listing = ListProductsHandler(_repo()).handle(ProductQuery(search="logitech"))
        assert _ids(listing) == ["2"]
        assert listing.total == 4

    def test_search_matches_sku(self):
        listing = ListProductsHandler(_repo()).handle(ProductQuery(search="desk-0"))
        assert _ids(listing) == ["4"]

    def test_search_matches_category(self):
        listing = ListProductsHandler(_repo()).handle(ProductQuery(search="furn"))
        assert sorted(_ids(listing)) == ["3", "4"]

    def test_category_filter(self):
        listing = ListProductsHandler(_repo()).handle(ProductQuery(category="Electronics"))
        assert sorted(_ids(listing)) == ["1", "2"]

    def test_low_stock_filter_includes_quantity_equal_to_min(self):
        query = ProductQuery(stock=StockStatus.LOW_STOCK)
        assert sorted(_ids(ListProductsHandler(_repo()).handle(query))) == ["2", "4"]

    def test_out_of_stock_filter(self):
        query = ProductQuery(stock=StockStatus.OUT_OF_STOCK)
        assert _ids(ListProductsHandler(_repo()).handle(query)) == ["3"]

    def test_in_stock_filter(self):
        query = ProductQuery(stock=StockStatus.IN_STOCK)
        assert _ids(ListProductsHandler(_repo()).handle(query)) == ["1"]

    def test_filters_combine(self):
        query = ProductQuery(search="e", category="Furniture", stock=StockStatus.LOW_STOCK)
        assert _ids(ListProductsHandler(_repo()).handle(query)) == ["4"]

    def test_no_match(self):
        listing = ListProductsHandler(_repo()).handle(ProductQuery(search="zzz"))
        assert listing.products == []
        assert listing.total == 4


class TestSorting:

    def test_sort_by_price(self):
        listing = ListProductsHandler(_repo()).handle(ProductQuery(sort_by="price"))
        assert _ids(listing) == ["2", "4", "1", "3"]

    def test_sort_by_quantity_descending(self):
        query = ProductQuery(sort_by="quantity", descending=True)
        assert _ids(ListProductsHandler(_repo()).handle(query)) == ["1", "4", "2", "3"]

    def test_sort_by_sku(self):
        listing = ListProductsHandler(_repo()).handle(ProductQuery(sort_by="sku"))
        assert [p.sku for p in listing.products] == [
            "CHAIR-001", "DESK-001", "LAPTOP-001", "MOUSE-001",
        ]

    def test_unknown_sort_field_rejected(self):
        with pytest.raises(ValidationError, match="Cannot sort by"):
            ProductQuery(sort_by="colour")


class TestDistinctCategories:

    def test_first_seen_order(self):
        products = _repo().list_all()
        assert distinct_categories(products) == ["Electronics", "Furniture"]


class TestExportProducts:

    def test_csv_layout(self):
        out = io.StringIO()
        rows = ExportProductsHandler(_repo()).handle(out, ProductQuery(sort_by="sku"))

        assert rows == 4
        lines = out.getvalue().splitlines()
        assert lines[0] == "SKU,Name,Category,Price,Quantity,Min Stock,Status"
        assert lines[1] == '"CHAIR-001","Herman Miller Aeron","Furniture",1395.00,0,2,"active"'
        assert lines[3] == '"LAPTOP-001","Dell XPS 13 Laptop","Electronics",1299.99,25,5,"active"'
        assert len(lines) == 5

    def test_export_respects_filters(self):
        out = io.StringIO()
        rows = ExportProductsHandler(_repo()).handle(
            out, ProductQuery(stock=StockStatus.OUT_OF_STOCK)
        )
        assert rows == 1
        assert out.getvalue().splitlines()[1].startswith('"CHAIR-001"')

    def test_quotes_inside_names_are_escaped(self):
        repo = LocalProductRepository(
            InMemoryProductStore([make_product(name='27" Monitor')])
        )
        out = io.StringIO()
        ExportProductsHandler(repo).handle(out)
        assert '"27"" Monitor"' in out.getvalue()

    def test_empty_catalog_writes_header_only(self):
        out = io.StringIO()
        rows = ExportProductsHandler(LocalProductRepository(InMemoryProductStore())).handle(out)
        assert rows == 0
        assert out.getvalue() == "SKU,Name,Category,Price,Quantity,Min Stock,Status\n"

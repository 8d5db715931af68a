"""Unit tests for the Product aggregate."""

from datetime import timedelta

from ims.domain.model.product import StockStatus
from ims.domain.model.value_objects import Money
from tests.fakes import T0, make_product


class TestStockStatus:

    def test_zero_quantity_is_out_of_stock(self):
        assert make_product(quantity=0, min_stock=5).stock_status is StockStatus.OUT_OF_STOCK

    def test_zero_quantity_with_zero_min_stock_is_out_of_stock(self):
        assert make_product(quantity=0, min_stock=0).stock_status is StockStatus.OUT_OF_STOCK

    def test_below_min_stock_is_low(self):
        assert make_product(quantity=3, min_stock=10).stock_status is StockStatus.LOW_STOCK

    def test_exactly_min_stock_is_low(self):
        assert make_product(quantity=5, min_stock=5).stock_status is StockStatus.LOW_STOCK

    def test_above_min_stock_is_in_stock(self):
        assert make_product(quantity=6, min_stock=5).stock_status is StockStatus.IN_STOCK

    def test_labels(self):
        assert StockStatus.LOW_STOCK.label == "Low Stock"
        assert StockStatus.OUT_OF_STOCK.label == "Out Of Stock"


class TestInventoryValue:

    def test_price_times_quantity(self):
        assert make_product(price="10.00", quantity=5).inventory_value == Money.of("50")


class TestApply:

    def test_apply_sets_fields_and_stamps_update(self):
        product = make_product()
        later = T0 + timedelta(hours=1)

        product.apply({"name": "Gizmo", "quantity": 9}, updated_at=later)

        assert product.name == "Gizmo"
        assert product.quantity == 9
        assert product.updated_at == later
        assert product.created_at == T0

    def test_updated_at_never_precedes_created_at(self):
        product = make_product()
        product.apply({}, updated_at=T0 - timedelta(days=1))
        assert product.updated_at == T0

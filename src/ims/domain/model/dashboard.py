"""Derived dashboard values.

None of these are persisted; they are rebuilt from the product list
every time they are requested.
"""

from __future__ import annotations

from dataclasses import dataclass

from ims.domain.model.value_objects import Money


@dataclass(frozen=True)
class DashboardStats:
    total_products: int
    total_value: Money
    low_stock_items: int
    out_of_stock_items: int

    @property
    def needs_attention(self) -> bool:
        return self.low_stock_items > 0 or self.out_of_stock_items > 0


@dataclass(frozen=True)
class CategoryBreakdown:
    """Inventory value and product count for one category."""

    name: str
    value: Money
    products: int


@dataclass(frozen=True)
class ProductValue:
    """A single product's contribution to total inventory value."""

    product_id: str
    name: str
    value: Money
    quantity: int

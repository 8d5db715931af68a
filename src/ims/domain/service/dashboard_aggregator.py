"""Domain service: Dashboard aggregation.

Pure functions over a product list. Nothing here reads storage or keeps
state between calls, so every figure reflects exactly the list passed in.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from ims.domain.model.dashboard import CategoryBreakdown, DashboardStats, ProductValue
from ims.domain.model.product import Product, StockStatus
from ims.domain.model.value_objects import Money

TOP_PRODUCTS_LIMIT = 10


def total_inventory_value(products: Iterable[Product]) -> Money:
    result = Money.zero()
    for product in products:
        result = result + product.inventory_value
    return result


def compute_stats(products: Sequence[Product]) -> DashboardStats:
    """Summarise the catalog for the dashboard cards."""
    stock = stock_breakdown(products)
    return DashboardStats(
        total_products=len(products),
        total_value=total_inventory_value(products),
        low_stock_items=stock[StockStatus.LOW_STOCK],
        out_of_stock_items=stock[StockStatus.OUT_OF_STOCK],
    )


def stock_breakdown(products: Iterable[Product]) -> dict[StockStatus, int]:
    """Count products per stock status; every status is always present."""
    counts = {status: 0 for status in StockStatus}
    for product in products:
        counts[product.stock_status] += 1
    return counts


def category_breakdown(products: Iterable[Product]) -> list[CategoryBreakdown]:
    """Value and product count per category, in first-seen order."""
    values: dict[str, Money] = {}
    counts: dict[str, int] = {}
    for product in products:
        values[product.category] = (
            values.get(product.category, Money.zero()) + product.inventory_value
        )
        counts[product.category] = counts.get(product.category, 0) + 1
    return [
        CategoryBreakdown(name=name, value=value, products=counts[name])
        for name, value in values.items()
    ]


def top_products_by_value(
    products: Iterable[Product], limit: int = TOP_PRODUCTS_LIMIT
) -> list[ProductValue]:
    """The *limit* most valuable stock positions, highest first.

    Works on a sorted copy; the caller's list keeps its order.
    """
    ranked = sorted(products, key=lambda p: p.inventory_value, reverse=True)
    return [
        ProductValue(
            product_id=p.id,
            name=p.name,
            value=p.inventory_value,
            quantity=p.quantity,
        )
        for p in ranked[:limit]
    ]


def average_product_value(products: Sequence[Product]) -> Money:
    if not products:
        return Money.zero()
    return total_inventory_value(products).split(len(products))

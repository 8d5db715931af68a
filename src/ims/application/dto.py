"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry query parameters in from the CLI and result bundles back out
of the application layer.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ims.domain.exceptions import ValidationError
from ims.domain.model.dashboard import CategoryBreakdown, DashboardStats, ProductValue
from ims.domain.model.product import Product, StockStatus
from ims.domain.model.value_objects import Money

SORT_FIELDS = (
    "sku",
    "name",
    "category",
    "price",
    "quantity",
    "min_stock",
    "status",
    "created_at",
    "updated_at",
)


@dataclass(frozen=True)
class ProductQuery:
    """Input: how to filter and order the product list.

    ``None`` for a filter means "all".
    """

    search: str | None = None
    category: str | None = None
    stock: StockStatus | None = None
    sort_by: str = "name"
    descending: bool = False

    def __post_init__(self) -> None:
        if self.sort_by not in SORT_FIELDS:
            raise ValidationError(
                f"Cannot sort by '{self.sort_by}'; choose one of: {', '.join(SORT_FIELDS)}"
            )


@dataclass(frozen=True)
class ProductListing:
    """Output: the filtered products plus the size of the whole catalog."""

    products: list[Product]
    total: int

    @property
    def shown(self) -> int:
        return len(self.products)


@dataclass(frozen=True)
class AnalyticsReport:
    """Output: everything the analytics view charts."""

    stats: DashboardStats
    average_value: Money
    categories: list[CategoryBreakdown]
    stock: dict[StockStatus, int]
    top_products: list[ProductValue] = field(default_factory=list)

"""Product aggregate.

The product is the only entity in the catalog. Its stock position is not
stored; it is derived from ``quantity`` and ``min_stock`` whenever asked.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from ims.domain.model.value_objects import Money

CATEGORIES = (
    "Electronics",
    "Furniture",
    "Clothing",
    "Books",
    "Sports",
    "Home & Garden",
    "Automotive",
    "Health & Beauty",
    "Toys & Games",
    "Food & Beverage",
)


class ProductStatus(Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    DISCONTINUED = "discontinued"


class StockStatus(Enum):
    IN_STOCK = "in-stock"
    LOW_STOCK = "low-stock"
    OUT_OF_STOCK = "out-of-stock"

    @property
    def label(self) -> str:
        return self.value.replace("-", " ").title()


@dataclass
class Product:
    """A product in the catalog.

    Use ``ProductRepository.add()`` for new products; the plain
    constructor exists so stores can reconstitute persisted records
    without re-validating them.
    """

    id: str
    sku: str
    name: str
    category: str
    price: Money
    quantity: int
    min_stock: int
    status: ProductStatus
    created_at: datetime
    updated_at: datetime
    description: str | None = None
    supplier: str | None = None
    image_url: str | None = None

    @property
    def stock_status(self) -> StockStatus:
        """Classify the stock position.

        Zero is always out of stock. Anything up to and including
        ``min_stock`` counts as low, so a product sitting exactly at its
        minimum is already flagged.
        """
        if self.quantity == 0:
            return StockStatus.OUT_OF_STOCK
        if self.quantity <= self.min_stock:
            return StockStatus.LOW_STOCK
        return StockStatus.IN_STOCK

    @property
    def inventory_value(self) -> Money:
        return self.price * self.quantity

    def apply(self, changes: dict[str, object], updated_at: datetime) -> None:
        """Merge already-validated field values and stamp the update.

        ``id`` and ``created_at`` are never part of *changes*.
        """
        for field_name, value in changes.items():
            setattr(self, field_name, value)
        self.updated_at = max(updated_at, self.created_at)

"""Starter catalog written into a brand-new product store."""

from __future__ import annotations

from datetime import datetime, timezone

from ims.domain.model.product import Product, ProductStatus
from ims.domain.model.value_objects import Money


def _day(year: int, month: int, day: int) -> datetime:
    return datetime(year, month, day, tzinfo=timezone.utc)


def demo_products() -> list[Product]:
    return [
        Product(
            id="1",
            sku="LAPTOP-001",
            name="Dell XPS 13 Laptop",
            description="High-performance ultrabook with 16GB RAM",
            category="Electronics",
            price=Money.of("1299.99"),
            quantity=25,
            min_stock=5,
            supplier="Dell Inc.",
            image_url="https://images.unsplash.com/photo-1531297484001-80022131f5a1.jpg",
            status=ProductStatus.ACTIVE,
            created_at=_day(2024, 1, 15),
            updated_at=_day(2024, 1, 20),
        ),
        Product(
            id="2",
            sku="MOUSE-001",
            name="Logitech MX Master 3",
            description="Wireless ergonomic mouse",
            category="Electronics",
            price=Money.of("99.99"),
            quantity=3,
            min_stock=10,
            supplier="Logitech",
            image_url="https://images.unsplash.com/photo-1527864550417-7fd91fc51a46.jpg",
            status=ProductStatus.ACTIVE,
            created_at=_day(2024, 1, 10),
            updated_at=_day(2024, 1, 18),
        ),
        Product(
            id="3",
            sku="CHAIR-001",
            name="Herman Miller Aeron",
            description="Ergonomic office chair",
            category="Furniture",
            price=Money.of("1395.00"),
            quantity=0,
            min_stock=2,
            supplier="Herman Miller",
            image_url="https://images.unsplash.com/photo-1721322800607-8c38375eef04.jpg",
            status=ProductStatus.ACTIVE,
            created_at=_day(2024, 1, 5),
            updated_at=_day(2024, 1, 15),
        ),
        Product(
            id="4",
            sku="PHONE-001",
            name="iPhone 15 Pro",
            description="Latest Apple smartphone",
            category="Electronics",
            price=Money.of("999.99"),
            quantity=50,
            min_stock=10,
            supplier="Apple Inc.",
            image_url="https://images.unsplash.com/photo-1511707171634-5f897ff02aa9.jpg",
            status=ProductStatus.ACTIVE,
            created_at=_day(2024, 1, 1),
            updated_at=_day(2024, 1, 22),
        ),
    ]

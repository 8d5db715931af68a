"""JSON mapping for products, forms and dashboard stats.

Shared by the JSON file store and the remote API client, which use the
same camelCase record layout.
"""

from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation

from ims.domain.exceptions import ValidationError
from ims.domain.model.dashboard import DashboardStats
from ims.domain.model.product import Product, ProductStatus
from ims.domain.model.product_form import ProductChanges, ProductFormData
from ims.domain.model.value_objects import Money

# Domain attribute name -> JSON key
_FIELD_KEYS = {
    "sku": "sku",
    "name": "name",
    "description": "description",
    "category": "category",
    "price": "price",
    "quantity": "quantity",
    "min_stock": "minStock",
    "supplier": "supplier",
    "image_url": "imageUrl",
    "status": "status",
}


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 string; naive values are taken as UTC."""
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def format_timestamp(value: datetime) -> str:
    return value.isoformat()


def parse_money(value: object, currency: str = "USD") -> Money:
    """Decode a stored amount; anything that is not a valid price is a ValueError."""
    if value is None or isinstance(value, bool):
        raise ValueError(f"invalid amount {value!r}")
    try:
        amount = Decimal(str(value))
    except InvalidOperation:
        raise ValueError(f"invalid amount {value!r}") from None
    if not amount.is_finite():
        raise ValueError(f"invalid amount {value!r}")
    try:
        return Money(amount, currency)
    except ValidationError as exc:
        raise ValueError(f"invalid amount {value!r}: {exc}") from exc


def product_to_record(product: Product) -> dict:
    return {
        "id": product.id,
        "sku": product.sku,
        "name": product.name,
        "description": product.description,
        "category": product.category,
        "price": str(product.price.amount),
        "currency": product.price.currency,
        "quantity": product.quantity,
        "minStock": product.min_stock,
        "supplier": product.supplier,
        "imageUrl": product.image_url,
        "status": product.status.value,
        "createdAt": format_timestamp(product.created_at),
        "updatedAt": format_timestamp(product.updated_at),
    }


def product_from_record(raw: dict) -> Product:
    return Product(
        id=str(raw["id"]),
        sku=raw["sku"],
        name=raw["name"],
        description=raw.get("description"),
        category=raw["category"],
        price=parse_money(raw["price"], raw.get("currency", "USD")),
        quantity=int(raw["quantity"]),
        min_stock=int(raw["minStock"]),
        supplier=raw.get("supplier"),
        image_url=raw.get("imageUrl"),
        status=ProductStatus(raw.get("status", ProductStatus.ACTIVE.value)),
        created_at=parse_timestamp(raw["createdAt"]),
        updated_at=parse_timestamp(raw["updatedAt"]),
    )


def _to_payload(values: dict[str, object]) -> dict:
    payload = {}
    for attr, value in values.items():
        if isinstance(value, Money):
            value = float(value.amount)
        elif isinstance(value, ProductStatus):
            value = value.value
        payload[_FIELD_KEYS[attr]] = value
    return payload


def form_to_payload(form: ProductFormData) -> dict:
    """Request body for a remote create."""
    return _to_payload(form.as_dict())


def changes_to_payload(changes: ProductChanges) -> dict:
    """Request body for a remote update; only supplied fields are sent."""
    return _to_payload(changes.as_dict())


def stats_from_record(raw: dict) -> DashboardStats:
    return DashboardStats(
        total_products=int(raw["totalProducts"]),
        total_value=parse_money(raw["totalValue"]),
        low_stock_items=int(raw["lowStockItems"]),
        out_of_stock_items=int(raw["outOfStockItems"]),
    )

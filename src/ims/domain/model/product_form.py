"""Validated product input.

``ProductFormData`` is what a create accepts, ``ProductChanges`` is what an
update accepts. Both validate on construction, so a form that reaches a
repository is already well-formed and the repository only has to enforce
rules that need the rest of the catalog (SKU uniqueness).
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field, fields
from decimal import Decimal

from ims.domain.exceptions import ValidationError
from ims.domain.model.product import CATEGORIES, ProductStatus
from ims.domain.model.value_objects import Money

SKU_PATTERN = re.compile(r"^[A-Z0-9-]+$")
IMAGE_URL_PATTERN = re.compile(r"^https?://.+\.(jpg|jpeg|png|gif|webp)$", re.IGNORECASE)
MIN_PRICE = Decimal("0.01")
MIN_NAME_LENGTH = 2


# ---------------------------------------------------------------------------
# Field cleaners: coerce raw input and raise ValidationError on bad values
# ---------------------------------------------------------------------------


def clean_sku(value: object) -> str:
    sku = str(value or "").strip()
    if not sku:
        raise ValidationError("SKU is required")
    if not SKU_PATTERN.match(sku):
        raise ValidationError(
            "SKU must contain only uppercase letters, numbers, and hyphens"
        )
    return sku


def clean_name(value: object) -> str:
    name = str(value or "").strip()
    if not name:
        raise ValidationError("Product name is required")
    if len(name) < MIN_NAME_LENGTH:
        raise ValidationError(
            f"Product name must be at least {MIN_NAME_LENGTH} characters"
        )
    return name


def clean_category(value: object) -> str:
    category = str(value or "").strip()
    if not category:
        raise ValidationError("Category is required")
    if category not in CATEGORIES:
        raise ValidationError(f"Unknown category '{category}'")
    return category


def clean_price(value: object) -> Money:
    if value is None or value == "":
        raise ValidationError("Price is required")
    price = value if isinstance(value, Money) else Money.of(value)  # type: ignore[arg-type]
    if not price.amount.is_finite() or price.amount < MIN_PRICE:
        raise ValidationError("Price must be greater than 0")
    return price


def clean_count(value: object, label: str) -> int:
    if value is None or value == "":
        raise ValidationError(f"{label} is required")
    if isinstance(value, bool):
        raise ValidationError(f"{label} must be a whole number")
    if isinstance(value, str):
        try:
            value = int(value.strip())
        except ValueError as exc:
            raise ValidationError(f"{label} must be a whole number") from exc
    if not isinstance(value, int):
        raise ValidationError(f"{label} must be a whole number")
    if value < 0:
        raise ValidationError(f"{label} cannot be negative")
    return value


def clean_status(value: object) -> ProductStatus:
    if isinstance(value, ProductStatus):
        return value
    try:
        return ProductStatus(str(value).strip().lower())
    except ValueError as exc:
        allowed = ", ".join(s.value for s in ProductStatus)
        raise ValidationError(
            f"Status must be one of: {allowed} (got {value!r})"
        ) from exc


def clean_optional_text(value: object) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def clean_image_url(value: object) -> str | None:
    url = clean_optional_text(value)
    if url is not None and not IMAGE_URL_PATTERN.match(url):
        raise ValidationError("Please enter a valid image URL")
    return url


_CLEANERS = {
    "sku": clean_sku,
    "name": clean_name,
    "category": clean_category,
    "price": clean_price,
    "quantity": lambda v: clean_count(v, "Quantity"),
    "min_stock": lambda v: clean_count(v, "Minimum stock"),
    "status": clean_status,
    "description": clean_optional_text,
    "supplier": clean_optional_text,
    "image_url": clean_image_url,
}


# ---------------------------------------------------------------------------
# Forms
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ProductFormData:
    """Every business field of a product, as entered for a create.

    Raw strings are accepted for the numeric fields and coerced, which
    keeps the CLI and the remote codec free of parsing code.
    """

    sku: str
    name: str
    category: str
    price: Money
    quantity: int
    min_stock: int
    status: ProductStatus = ProductStatus.ACTIVE
    description: str | None = None
    supplier: str | None = None
    image_url: str | None = None

    def __post_init__(self) -> None:
        for f in fields(self):
            cleaned = _CLEANERS[f.name](getattr(self, f.name))
            object.__setattr__(self, f.name, cleaned)

    def as_dict(self) -> dict[str, object]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass(frozen=True)
class ProductChanges:
    """A partial form for updates.

    ``None`` means "not supplied". For the optional text fields an empty
    string clears the stored value.
    """

    sku: str | None = None
    name: str | None = None
    category: str | None = None
    price: Money | str | None = None
    quantity: int | str | None = None
    min_stock: int | str | None = None
    status: ProductStatus | str | None = None
    description: str | None = None
    supplier: str | None = None
    image_url: str | None = None
    _values: dict[str, object] = field(
        init=False, repr=False, compare=False, default_factory=dict
    )

    def __post_init__(self) -> None:
        values: dict[str, object] = {}
        for name, cleaner in _CLEANERS.items():
            raw = getattr(self, name)
            if raw is not None:
                values[name] = cleaner(raw)
        object.__setattr__(self, "_values", values)

    def as_dict(self) -> dict[str, object]:
        """Cleaned values of the supplied fields only."""
        return dict(self._values)

    @property
    def is_empty(self) -> bool:
        return not self._values

"""ProductRepository backed by a local ProductStore.

Every mutating call loads the whole collection, validates against it,
applies the change and saves the whole collection back before returning.
There is no locking: two overlapping writers against the same store race
and the last save wins.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Callable
from datetime import datetime, timezone

from ims.domain.exceptions import DuplicateSkuError, EntityNotFoundError
from ims.domain.model.dashboard import DashboardStats
from ims.domain.model.product import Product
from ims.domain.model.product_form import ProductChanges, ProductFormData
from ims.domain.repository.product_repository import ProductRepository
from ims.domain.repository.product_store import ProductStore
from ims.domain.service.dashboard_aggregator import compute_stats

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def new_product_id() -> str:
    return uuid.uuid4().hex


class LocalProductRepository(ProductRepository):

    def __init__(
        self,
        store: ProductStore,
        clock: Callable[[], datetime] = utc_now,
        id_factory: Callable[[], str] = new_product_id,
    ) -> None:
        self._store = store
        self._clock = clock
        self._id_factory = id_factory

    # --- ProductRepository interface ------------------------------------------

    def list_all(self) -> list[Product]:
        return self._store.load()

    def get_by_id(self, product_id: str) -> Product | None:
        for product in self._store.load():
            if product.id == product_id:
                return product
        return None

    def add(self, form: ProductFormData) -> Product:
        products = self._store.load()
        self._assert_sku_free(products, form.sku)

        now = self._clock()
        product = Product(
            id=self._id_factory(),
            created_at=now,
            updated_at=now,
            **form.as_dict(),
        )
        products.append(product)
        self._store.save(products)
        logger.info("Created product %s (%s)", product.id, product.sku)
        return product

    def update(self, product_id: str, changes: ProductChanges) -> Product:
        products = self._store.load()
        product = self._find(products, product_id)

        values = changes.as_dict()
        if "sku" in values:
            self._assert_sku_free(products, values["sku"], exclude_id=product_id)

        product.apply(values, updated_at=self._clock())
        self._store.save(products)
        logger.info(
            "Updated product %s (fields: %s)", product_id, ", ".join(values) or "none"
        )
        return product

    def delete(self, product_id: str) -> None:
        products = self._store.load()
        remaining = [p for p in products if p.id != product_id]
        if len(remaining) == len(products):
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
        self._store.save(remaining)
        logger.info("Deleted product %s", product_id)

    def dashboard_stats(self) -> DashboardStats:
        return compute_stats(self._store.load())

    # --- Internal helpers -----------------------------------------------------

    @staticmethod
    def _find(products: list[Product], product_id: str) -> Product:
        for product in products:
            if product.id == product_id:
                return product
        raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

    @staticmethod
    def _assert_sku_free(
        products: list[Product], sku: object, exclude_id: str | None = None
    ) -> None:
        for product in products:
            if product.sku == sku and product.id != exclude_id:
                raise DuplicateSkuError(str(sku))

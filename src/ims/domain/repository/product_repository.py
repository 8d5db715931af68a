"""Abstract repository for the Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (local store, remote API,
remote-with-fallback) live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ims.domain.model.dashboard import DashboardStats
from ims.domain.model.product import Product
from ims.domain.model.product_form import ProductChanges, ProductFormData


class ProductRepository(ABC):

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in storage order."""

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def add(self, form: ProductFormData) -> Product:
        """Create a product from *form*.

        Raises DuplicateSkuError if a live product already uses the SKU.
        """

    @abstractmethod
    def update(self, product_id: str, changes: ProductChanges) -> Product:
        """Merge *changes* into an existing product and return it.

        Raises EntityNotFoundError for an unknown ID and DuplicateSkuError
        if the new SKU belongs to a different product.
        """

    @abstractmethod
    def delete(self, product_id: str) -> None:
        """Remove a product. Raises EntityNotFoundError for an unknown ID."""

    @abstractmethod
    def dashboard_stats(self) -> DashboardStats:
        """Return summary figures for the whole catalog."""

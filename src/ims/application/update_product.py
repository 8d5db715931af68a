"""Application service: Update Product use case."""

from __future__ import annotations

from ims.domain.model.product import Product
from ims.domain.model.product_form import ProductChanges
from ims.domain.repository.product_repository import ProductRepository


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str, changes: ProductChanges) -> Product:
        """Apply a partial update.

        An empty change set is still a successful update: nothing but
        ``updated_at`` moves.
        """
        return self._product_repo.update(product_id, changes)

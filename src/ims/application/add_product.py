"""Application service: Add Product use case."""

from __future__ import annotations

from ims.domain.model.product import Product
from ims.domain.model.product_form import ProductFormData
from ims.domain.repository.product_repository import ProductRepository


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, form: ProductFormData) -> Product:
        """Add a new product to the catalog.

        Field validation already happened when *form* was built; the
        repository rejects a SKU that is already taken.
        """
        return self._product_repo.add(form)

"""Remote-first repository that answers reads locally when the API fails.

Reads that hit a RemoteServiceError are retried once against the local
repository for that call only. Writes go to the remote side alone and
their errors propagate unchanged, so the two stores never diverge.
"""

from __future__ import annotations

import logging

from ims.domain.exceptions import RemoteServiceError
from ims.domain.model.dashboard import DashboardStats
from ims.domain.model.product import Product
from ims.domain.model.product_form import ProductChanges, ProductFormData
from ims.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class FallbackProductRepository(ProductRepository):

    def __init__(self, remote: ProductRepository, local: ProductRepository) -> None:
        self._remote = remote
        self._local = local

    # --- Reads ----------------------------------------------------------------

    def list_all(self) -> list[Product]:
        try:
            return self._remote.list_all()
        except RemoteServiceError as exc:
            logger.warning("Listing products from local store: %s", exc)
            return self._local.list_all()

    def get_by_id(self, product_id: str) -> Product | None:
        try:
            return self._remote.get_by_id(product_id)
        except RemoteServiceError as exc:
            logger.warning("Reading product %s from local store: %s", product_id, exc)
            return self._local.get_by_id(product_id)

    def dashboard_stats(self) -> DashboardStats:
        try:
            return self._remote.dashboard_stats()
        except RemoteServiceError as exc:
            logger.warning("Computing dashboard stats from local store: %s", exc)
            return self._local.dashboard_stats()

    # --- Writes ---------------------------------------------------------------

    def add(self, form: ProductFormData) -> Product:
        return self._remote.add(form)

    def update(self, product_id: str, changes: ProductChanges) -> Product:
        return self._remote.update(product_id, changes)

    def delete(self, product_id: str) -> None:
        self._remote.delete(product_id)

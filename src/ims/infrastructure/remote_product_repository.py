"""ProductRepository that talks to the inventory HTTP API."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, TypeVar
from urllib.parse import quote

import requests

from ims.domain.exceptions import (
    DuplicateSkuError,
    EntityNotFoundError,
    RemoteServiceError,
    ValidationError,
)
from ims.domain.model.dashboard import DashboardStats
from ims.domain.model.product import Product
from ims.domain.model.product_form import ProductChanges, ProductFormData
from ims.domain.repository.product_repository import ProductRepository
from ims.infrastructure.persistence.product_codec import (
    changes_to_payload,
    form_to_payload,
    product_from_record,
    stats_from_record,
)

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 5.0

T = TypeVar("T")


class RemoteProductRepository(ProductRepository):
    """Maps repository calls onto REST endpoints.

    ``POST /api/products`` creates, ``GET`` reads, ``PUT
    /api/products/<id>`` updates and ``DELETE`` removes. Transport
    failures and unexpected statuses surface as RemoteServiceError.
    """

    def __init__(
        self,
        base_url: str,
        session: requests.Session | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        base = base_url.rstrip("/")
        self._products_url = f"{base}/api/products"
        self._stats_url = f"{base}/api/dashboard/stats"
        self._session = session or requests.Session()
        self._timeout = timeout

    # --- ProductRepository interface ------------------------------------------

    def list_all(self) -> list[Product]:
        response = self._request("GET", self._products_url)
        self._check(response)
        return self._parse(
            response, lambda body: [product_from_record(raw) for raw in body]
        )

    def get_by_id(self, product_id: str) -> Product | None:
        response = self._request("GET", self._product_url(product_id))
        if response.status_code == 404:
            return None
        self._check(response)
        return self._parse(response, product_from_record)

    def add(self, form: ProductFormData) -> Product:
        response = self._request("POST", self._products_url, json=form_to_payload(form))
        self._check(response, sku=form.sku)
        return self._parse(response, product_from_record)

    def update(self, product_id: str, changes: ProductChanges) -> Product:
        response = self._request(
            "PUT", self._product_url(product_id), json=changes_to_payload(changes)
        )
        self._check(
            response,
            product_id=product_id,
            sku=changes.as_dict().get("sku"),
        )
        return self._parse(response, product_from_record)

    def delete(self, product_id: str) -> None:
        response = self._request("DELETE", self._product_url(product_id))
        self._check(response, product_id=product_id)

    def dashboard_stats(self) -> DashboardStats:
        response = self._request("GET", self._stats_url)
        self._check(response)
        return self._parse(response, stats_from_record)

    # --- HTTP helpers ---------------------------------------------------------

    def _product_url(self, product_id: str) -> str:
        return f"{self._products_url}/{quote(product_id, safe='')}"

    def _request(self, method: str, url: str, **kwargs) -> requests.Response:
        try:
            return self._session.request(method, url, timeout=self._timeout, **kwargs)
        except requests.exceptions.RequestException as exc:
            logger.warning("%s %s failed: %s", method, url, exc)
            raise RemoteServiceError(f"Inventory API unreachable: {exc}") from exc

    @staticmethod
    def _check(
        response: requests.Response,
        product_id: str | None = None,
        sku: object = None,
    ) -> None:
        status = response.status_code
        if 200 <= status < 300:
            return
        if status == 404 and product_id is not None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
        if status == 409 and sku is not None:
            raise DuplicateSkuError(str(sku))
        if status in (400, 422):
            raise ValidationError(f"Inventory API rejected the request: {response.text}")
        raise RemoteServiceError(
            f"Inventory API returned HTTP {status} for {response.url}"
        )

    @staticmethod
    def _parse(response: requests.Response, parse: Callable[[Any], T]) -> T:
        try:
            return parse(response.json())
        except (KeyError, TypeError, ValueError, ValidationError) as exc:
            raise RemoteServiceError(
                f"Inventory API returned an unexpected body: {exc}"
            ) from exc

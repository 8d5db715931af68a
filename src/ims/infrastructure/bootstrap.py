"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Whether products come from the local JSON store or the remote API is
decided here, from settings, and nowhere else.
"""

from __future__ import annotations

import logging

from ims.application.change_notifier import ChangeNotifier
from ims.domain.repository.product_repository import ProductRepository
from ims.infrastructure.config import Settings, load_settings
from ims.infrastructure.fallback_product_repository import FallbackProductRepository
from ims.infrastructure.persistence.demo_catalog import demo_products
from ims.infrastructure.persistence.json_product_store import JsonProductStore
from ims.infrastructure.persistence.local_product_repository import (
    LocalProductRepository,
)
from ims.infrastructure.remote_product_repository import RemoteProductRepository
from ims.infrastructure.ticker import ThreadingTicker

logger = logging.getLogger(__name__)


def product_store(settings: Settings | None = None) -> JsonProductStore:
    settings = settings or load_settings()
    seed = demo_products() if settings.seed_demo_data else None
    return JsonProductStore(settings.products_file, seed=seed)


def product_repository(settings: Settings | None = None) -> ProductRepository:
    settings = settings or load_settings()
    local = LocalProductRepository(product_store(settings))
    if not settings.remote_enabled:
        return local

    logger.debug("Using inventory API at %s", settings.api_base_url)
    remote = RemoteProductRepository(
        settings.api_base_url, timeout=settings.request_timeout
    )
    return FallbackProductRepository(remote=remote, local=local)


def change_notifier(settings: Settings | None = None) -> ChangeNotifier:
    settings = settings or load_settings()
    return ChangeNotifier(
        ThreadingTicker(),
        interval=settings.poll_interval,
        probability=settings.change_probability,
    )

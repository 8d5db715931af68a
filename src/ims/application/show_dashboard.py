"""Application services: dashboard and analytics queries."""

from __future__ import annotations

from ims.application.dto import AnalyticsReport
from ims.domain.model.dashboard import DashboardStats
from ims.domain.repository.product_repository import ProductRepository
from ims.domain.service.dashboard_aggregator import (
    average_product_value,
    category_breakdown,
    compute_stats,
    stock_breakdown,
    top_products_by_value,
)


class DashboardStatsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self) -> DashboardStats:
        return self._product_repo.dashboard_stats()


class AnalyticsHandler:

    def __init__(self, product_repo: ProductRepository, top_limit: int = 10) -> None:
        self._product_repo = product_repo
        self._top_limit = top_limit

    def handle(self) -> AnalyticsReport:
        """Build every analytics figure from one snapshot of the catalog."""
        products = self._product_repo.list_all()
        return AnalyticsReport(
            stats=compute_stats(products),
            average_value=average_product_value(products),
            categories=category_breakdown(products),
            stock=stock_breakdown(products),
            top_products=top_products_by_value(products, limit=self._top_limit),
        )

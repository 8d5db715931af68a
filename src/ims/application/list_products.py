"""Application service: List Products use case (query)."""

from __future__ import annotations

from collections.abc import Iterable

from ims.application.dto import ProductListing, ProductQuery
from ims.domain.model.product import Product
from ims.domain.model.value_objects import Money
from ims.domain.repository.product_repository import ProductRepository


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, query: ProductQuery | None = None) -> ProductListing:
        """Return the products matching *query*, sorted."""
        query = query or ProductQuery()
        products = self._product_repo.list_all()
        matches = [p for p in products if matches_query(p, query)]
        matches.sort(key=lambda p: sort_key(p, query.sort_by), reverse=query.descending)
        return ProductListing(products=matches, total=len(products))


def matches_query(product: Product, query: ProductQuery) -> bool:
    if query.search:
        needle = query.search.lower()
        haystacks = (product.name, product.sku, product.category)
        if not any(needle in h.lower() for h in haystacks):
            return False
    if query.category is not None and product.category != query.category:
        return False
    if query.stock is not None and product.stock_status is not query.stock:
        return False
    return True


def sort_key(product: Product, field_name: str) -> object:
    value = getattr(product, field_name)
    if isinstance(value, Money):
        return value.amount
    if field_name == "status":
        return value.value
    return value


def distinct_categories(products: Iterable[Product]) -> list[str]:
    """Categories in use, in the order they first appear."""
    return list(dict.fromkeys(p.category for p in products))


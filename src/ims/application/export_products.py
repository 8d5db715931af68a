"""Application service: Export Products use case.

Writes the filtered product list as CSV. Text columns are quoted and
numeric columns are written bare.
"""

from __future__ import annotations

import csv
from typing import TextIO

from ims.application.dto import ProductQuery
from ims.application.list_products import ListProductsHandler
from ims.domain.repository.product_repository import ProductRepository

CSV_HEADER = ("SKU", "Name", "Category", "Price", "Quantity", "Min Stock", "Status")


class ExportProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._list_products = ListProductsHandler(product_repo)

    def handle(self, stream: TextIO, query: ProductQuery | None = None) -> int:
        """Write matching products to *stream*; return the number of rows."""
        listing = self._list_products.handle(query)

        csv.writer(stream, lineterminator="\n").writerow(CSV_HEADER)
        writer = csv.writer(stream, quoting=csv.QUOTE_NONNUMERIC, lineterminator="\n")
        for p in listing.products:
            writer.writerow(
                (
                    p.sku,
                    p.name,
                    p.category,
                    p.price.amount,
                    p.quantity,
                    p.min_stock,
                    p.status.value,
                )
            )
        return listing.shown

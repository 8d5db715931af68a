"""Abstract storage port for the product collection.

The store holds the catalog as one ordered list and is always read and
written as a whole. Only ``LocalProductRepository`` talks to it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ims.domain.model.product import Product


class ProductStore(ABC):

    @abstractmethod
    def load(self) -> list[Product]:
        """Return every stored product in storage order."""

    @abstractmethod
    def save(self, products: list[Product]) -> None:
        """Replace the stored collection with *products*.

        Raises StorageUnavailableError if the write does not complete.
        """

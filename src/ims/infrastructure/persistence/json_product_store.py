"""JSON-file-backed implementation of ProductStore."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from ims.domain.exceptions import StorageUnavailableError
from ims.domain.model.product import Product
from ims.domain.repository.product_store import ProductStore
from ims.infrastructure.persistence.product_codec import (
    product_from_record,
    product_to_record,
)

logger = logging.getLogger(__name__)


class JsonProductStore(ProductStore):
    """Keeps the whole catalog as one JSON array in a single file."""

    def __init__(self, file_path: Path, seed: list[Product] | None = None) -> None:
        self._file_path = file_path
        self._ensure_file(seed or [])

    @property
    def file_path(self) -> Path:
        return self._file_path

    # --- ProductStore interface -----------------------------------------------

    def load(self) -> list[Product]:
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        except OSError as exc:
            raise StorageUnavailableError(
                f"Cannot read product data from {self._file_path}: {exc}"
            ) from exc
        except json.JSONDecodeError as exc:
            raise StorageUnavailableError(
                f"Product data in {self._file_path} is not valid JSON"
            ) from exc
        try:
            return [product_from_record(item) for item in raw]
        except (KeyError, TypeError, ValueError) as exc:
            raise StorageUnavailableError(
                f"Product data in {self._file_path} is malformed: {exc}"
            ) from exc

    def save(self, products: list[Product]) -> None:
        raw = [product_to_record(p) for p in products]
        self._write(json.dumps(raw, indent=2) + "\n")

    # --- Internal helpers -----------------------------------------------------

    def _write(self, text: str) -> None:
        # Atomic swap: the catalog file is never half-written.
        tmp_path = self._file_path.with_suffix(self._file_path.suffix + ".tmp")
        try:
            tmp_path.write_text(text, encoding="utf-8")
            tmp_path.replace(self._file_path)
        except OSError as exc:
            raise StorageUnavailableError(
                f"Cannot write product data to {self._file_path}: {exc}"
            ) from exc

    def _ensure_file(self, seed: list[Product]) -> None:
        if self._file_path.exists():
            return
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise StorageUnavailableError(
                f"Cannot create data directory {self._file_path.parent}: {exc}"
            ) from exc
        self.save(seed)
        logger.info(
            "Created product store %s with %d seed products", self._file_path, len(seed)
        )

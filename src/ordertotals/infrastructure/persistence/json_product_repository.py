"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from ordertotals.domain.model.product import Product
from ordertotals.domain.repository.product_repository import ProductRepository
from ordertotals.infrastructure.persistence.json_records import (
    int_field,
    number_field,
    read_json_array,
    str_field,
)
from ordertotals.utils.logging import get_logger

log = get_logger(__name__)


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = Path(file_path)

    # --- ProductRepository interface ------------------------------------------

    def list_all(self) -> list[Product]:
        if not self._file_path.is_file():
            log.warning("Products file not found", path=str(self._file_path))
            return []

        products = [self._to_domain(item) for item in read_json_array(self._file_path)]
        log.info("Loaded products", path=str(self._file_path), count=len(products))
        return products

    # --- Serialization helpers ------------------------------------------------

    @staticmethod
    def _to_domain(item: dict[str, Any]) -> Product:
        return Product(
            product_id=int_field(item, "ProductId"),
            product_name=str_field(item, "ProductName"),
            price=number_field(item, "Price"),
        )

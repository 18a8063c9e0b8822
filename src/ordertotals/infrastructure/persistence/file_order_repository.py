"""File-backed implementation of OrderRepository (JSON or CSV)."""

from __future__ import annotations

import csv
from pathlib import Path
from typing import Any

from ordertotals.domain.exceptions import RecordLoadError
from ordertotals.domain.model.order import Order
from ordertotals.domain.repository.order_repository import OrderRepository
from ordertotals.infrastructure.persistence.json_records import (
    int_field,
    parse_timestamp,
    read_json_array,
    str_field,
    timestamp_field,
)
from ordertotals.utils.logging import get_logger

log = get_logger(__name__)

CSV_FIELD_COUNT = 6


class FileOrderRepository(OrderRepository):
    """Reads order line items from a ``.json`` or ``.csv`` file.

    A missing file (a directory counts as missing) or an unsupported
    extension is logged and yields no orders.  Malformed JSON and unparseable CSV dates raise
    RecordLoadError; unparseable CSV integers are read as 0.
    """

    def __init__(self, file_path: Path) -> None:
        self._file_path = Path(file_path)

    # --- OrderRepository interface --------------------------------------------

    def list_all(self) -> list[Order]:
        if not self._file_path.is_file():
            log.warning("Orders file not found", path=str(self._file_path))
            return []

        suffix = self._file_path.suffix.lower()
        if suffix == ".json":
            orders = [self._from_json(item) for item in read_json_array(self._file_path)]
        elif suffix == ".csv":
            orders = self._load_csv()
        else:
            log.warning(
                "Unsupported order file format",
                path=str(self._file_path),
                suffix=suffix,
            )
            return []

        log.info("Loaded orders", path=str(self._file_path), count=len(orders))
        return orders

    # --- JSON -----------------------------------------------------------------

    @staticmethod
    def _from_json(item: dict[str, Any]) -> Order:
        return Order(
            order_id=int_field(item, "OrderId"),
            product_id=int_field(item, "ProductId"),
            quantity=int_field(item, "Quantity"),
            delivery_at=timestamp_field(item, "DeliveryAt"),
            created_at=timestamp_field(item, "CreatedAt"),
            delivery_address=str_field(item, "DeliveryAddress"),
        )

    # --- CSV ------------------------------------------------------------------

    def _load_csv(self) -> list[Order]:
        orders: list[Order] = []

        with self._file_path.open(encoding="utf-8-sig", newline="") as f:
            reader = csv.reader(f, delimiter=",", quoting=csv.QUOTE_NONE)
            try:
                next(reader, None)  # header
                for parts in reader:
                    if len(parts) < CSV_FIELD_COUNT:
                        log.debug(
                            "Skipping short CSV row",
                            line=reader.line_num,
                            fields=len(parts),
                        )
                        continue
                    orders.append(self._from_csv_row(parts, reader.line_num))
            except UnicodeDecodeError as exc:
                raise RecordLoadError(
                    f"{self._file_path} is not valid UTF-8: {exc}"
                ) from exc

        return orders

    def _from_csv_row(self, parts: list[str], line_no: int) -> Order:
        try:
            delivery_at = parse_timestamp(parts[3])
            created_at = parse_timestamp(parts[4])
        except ValueError as exc:
            raise RecordLoadError(
                f"Invalid date on line {line_no} of {self._file_path}: {exc}"
            ) from exc

        return Order(
            order_id=_int_or_zero(parts[0]),
            product_id=_int_or_zero(parts[1]),
            quantity=_int_or_zero(parts[2]),
            delivery_at=delivery_at,
            created_at=created_at,
            delivery_address=parts[5],
        )


def _int_or_zero(raw: str) -> int:
    try:
        return int(raw.strip())
    except ValueError:
        return 0

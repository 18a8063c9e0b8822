"""Shared helpers for reading record files.

The repositories in this package turn raw file content into domain
records; these helpers hold the pieces they have in common: whole-file
JSON reading and field coercion.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from decimal import Decimal
from pathlib import Path
from typing import Any

from ordertotals.domain.exceptions import RecordLoadError


def read_json_array(file_path: Path) -> list[dict[str, Any]]:
    """Read a whole JSON document that must be an array of objects.

    Floats are parsed as Decimal so prices keep their exact base-10
    value.  A leading UTF-8 byte-order mark is ignored and a ``null``
    document is read as an empty array.
    """
    try:
        text = file_path.read_text(encoding="utf-8-sig")
    except UnicodeDecodeError as exc:
        raise RecordLoadError(f"{file_path} is not valid UTF-8: {exc}") from exc

    try:
        raw = json.loads(text, parse_float=Decimal)
    except json.JSONDecodeError as exc:
        raise RecordLoadError(f"Malformed JSON in {file_path}: {exc}") from exc

    if raw is None:
        return []
    if not isinstance(raw, list):
        raise RecordLoadError(
            f"Expected a JSON array in {file_path}, got {type(raw).__name__}"
        )
    for position, item in enumerate(raw):
        if not isinstance(item, dict):
            raise RecordLoadError(
                f"Expected an object at index {position} in {file_path}, "
                f"got {type(item).__name__}"
            )
    return raw


def int_field(item: dict[str, Any], key: str) -> int:
    """Integer field; missing or null reads as 0, anything else must be an int."""
    value = item.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise RecordLoadError(f"Field {key!r} must be an integer, got {value!r}")
    return value


def str_field(item: dict[str, Any], key: str) -> str | None:
    value = item.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise RecordLoadError(f"Field {key!r} must be a string, got {value!r}")
    return value


def number_field(item: dict[str, Any], key: str) -> Decimal:
    """Numeric field as an exact Decimal; missing or null reads as 0."""
    value = item.get(key)
    if value is None:
        return Decimal("0")
    if isinstance(value, bool) or not isinstance(value, (int, Decimal)):
        raise RecordLoadError(f"Field {key!r} must be a number, got {value!r}")
    return Decimal(value)


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 timestamp.

    Aware values are converted to UTC and made naive so that timestamps
    from different sources can always be compared.  Raises ValueError on
    unparseable input.
    """
    parsed = datetime.fromisoformat(value.strip())
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def timestamp_field(item: dict[str, Any], key: str) -> datetime | None:
    value = str_field(item, key)
    if value is None:
        return None
    try:
        return parse_timestamp(value)
    except ValueError as exc:
        raise RecordLoadError(f"Field {key!r} is not a timestamp: {value!r}") from exc

"""Order line item as read from an orders file.

Several records may share an ``order_id``; each one is a single line
item for one product.  Nothing is checked at construction time: raw
input is allowed to be invalid and the validation rules report it.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Order:

    order_id: int
    product_id: int
    quantity: int
    delivery_at: datetime | None
    created_at: datetime | None
    delivery_address: str | None = None

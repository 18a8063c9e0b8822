"""Product catalog entry."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class Product:
    """A sellable item with a unit price.

    ``price`` is a Decimal so that order totals summed over many line
    items never pick up binary floating-point drift.
    """

    product_id: int
    product_name: str | None
    price: Decimal

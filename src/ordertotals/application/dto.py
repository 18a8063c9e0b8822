"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry results from the application layer to the CLI without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from ordertotals.domain.service.totals_calculator import IngredientTotals
from ordertotals.domain.validation.rules import RuleViolation


@dataclass(frozen=True)
class RecordFailure:
    """A record that failed validation, with every rule it broke."""

    entity_type: str  # "Order", "Product" or "ProductIngredients"
    key: str  # e.g. "OrderId: 7"
    violations: tuple[RuleViolation, ...]


@dataclass(frozen=True)
class BatchTotalsDTO:
    """Output of a complete batch run."""

    order_count: int
    product_count: int
    recipe_count: int
    order_totals: dict[int, Decimal]
    ingredient_totals: dict[int, IngredientTotals]

"""Composition root: wires file-backed repositories to the domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from pathlib import Path

from ordertotals.infrastructure.persistence.file_order_repository import (
    FileOrderRepository,
)
from ordertotals.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from ordertotals.infrastructure.persistence.json_recipe_repository import (
    JsonRecipeRepository,
)

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
DATA_DIR = Path(__file__).resolve().parents[3] / "data"

DEFAULT_ORDERS_FILE = DATA_DIR / "orders.json"
DEFAULT_PRODUCTS_FILE = DATA_DIR / "products.json"
DEFAULT_INGREDIENTS_FILE = DATA_DIR / "ingredients.json"


def order_repository(file_path: Path = DEFAULT_ORDERS_FILE) -> FileOrderRepository:
    return FileOrderRepository(file_path)


def product_repository(file_path: Path = DEFAULT_PRODUCTS_FILE) -> JsonProductRepository:
    return JsonProductRepository(file_path)


def recipe_repository(file_path: Path = DEFAULT_INGREDIENTS_FILE) -> JsonRecipeRepository:
    return JsonRecipeRepository(file_path)

"""Entry points for loading the three record kinds from files.

Thin wrappers over the file-backed repositories, for callers that just
want the records behind a path.
"""

from __future__ import annotations

from pathlib import Path

from ordertotals.domain.model.order import Order
from ordertotals.domain.model.product import Product
from ordertotals.domain.model.recipe import ProductIngredients
from ordertotals.infrastructure.persistence.file_order_repository import (
    FileOrderRepository,
)
from ordertotals.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from ordertotals.infrastructure.persistence.json_recipe_repository import (
    JsonRecipeRepository,
)


def load_orders(file_path: str | Path) -> list[Order]:
    return FileOrderRepository(Path(file_path)).list_all()


def load_products(file_path: str | Path) -> list[Product]:
    return JsonProductRepository(Path(file_path)).list_all()


def load_ingredients(file_path: str | Path) -> list[ProductIngredients]:
    return JsonRecipeRepository(Path(file_path)).list_all()

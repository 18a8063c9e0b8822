"""JSON-file-backed implementation of RecipeRepository."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from ordertotals.domain.exceptions import RecordLoadError
from ordertotals.domain.model.recipe import IngredientInfo, ProductIngredients
from ordertotals.domain.repository.recipe_repository import RecipeRepository
from ordertotals.infrastructure.persistence.json_records import (
    int_field,
    number_field,
    read_json_array,
    str_field,
)
from ordertotals.utils.logging import get_logger

log = get_logger(__name__)


class JsonRecipeRepository(RecipeRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = Path(file_path)

    # --- RecipeRepository interface -------------------------------------------

    def list_all(self) -> list[ProductIngredients]:
        if not self._file_path.is_file():
            log.warning("Ingredients file not found", path=str(self._file_path))
            return []

        recipes = [self._to_domain(item) for item in read_json_array(self._file_path)]
        log.info("Loaded ingredients", path=str(self._file_path), count=len(recipes))
        return recipes

    # --- Serialization helpers ------------------------------------------------

    @staticmethod
    def _to_domain(item: dict[str, Any]) -> ProductIngredients:
        raw_ingredients = item.get("Ingredients")
        if raw_ingredients is None:
            ingredients = None
        elif isinstance(raw_ingredients, list):
            ingredients = tuple(
                JsonRecipeRepository._ingredient(entry) for entry in raw_ingredients
            )
        else:
            raise RecordLoadError(
                f"Field 'Ingredients' must be an array, got {raw_ingredients!r}"
            )

        return ProductIngredients(
            product_id=int_field(item, "ProductId"),
            ingredients=ingredients,
        )

    @staticmethod
    def _ingredient(entry: Any) -> IngredientInfo:
        if not isinstance(entry, dict):
            raise RecordLoadError(f"Ingredient entry must be an object, got {entry!r}")
        return IngredientInfo(
            ingredient=str_field(entry, "Ingredient"),
            amount=float(number_field(entry, "Amount")),
        )

"""Abstract source of ProductIngredients records."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ordertotals.domain.model.recipe import ProductIngredients


class RecipeRepository(ABC):

    @abstractmethod
    def list_all(self) -> list[ProductIngredients]:
        """Return every product recipe, in source order."""

"""Recipes: the ingredients that go into one unit of a product."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class IngredientInfo:
    """One ingredient and the amount needed per unit of product."""

    ingredient: str | None
    amount: float


@dataclass(frozen=True)
class ProductIngredients:
    """Recipe for a single product.

    ``ingredients`` is ``None`` when the source document omitted the list;
    validation reports that, aggregation treats it like an empty recipe.
    """

    product_id: int
    ingredients: tuple[IngredientInfo, ...] | None

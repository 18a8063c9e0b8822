"""Business rules for loaded records.

One pure function per record kind.  Each evaluates *all* of its rules
and returns the complete list of violations, so an empty list means the
record is valid.  Nothing here raises: deciding what to do with the
violations is the caller's job.
"""

from __future__ import annotations

from dataclasses import dataclass

from ordertotals.domain.model.order import Order
from ordertotals.domain.model.product import Product
from ordertotals.domain.model.recipe import IngredientInfo, ProductIngredients

MAX_INGREDIENTS = 5


@dataclass(frozen=True)
class RuleViolation:
    """A single broken rule: the offending field and a readable message."""

    field: str
    message: str

    def __str__(self) -> str:
        return self.message


def _is_blank(value: str | None) -> bool:
    return not value or not value.strip()


# --- Orders -------------------------------------------------------------------


def validate_order(order: Order) -> list[RuleViolation]:
    violations: list[RuleViolation] = []

    if order.order_id <= 0:
        violations.append(RuleViolation("OrderId", "OrderId must be greater than 0."))
    if order.product_id <= 0:
        violations.append(RuleViolation("ProductId", "ProductId must be greater than 0."))
    if order.quantity <= 0:
        violations.append(RuleViolation("Quantity", "Quantity must be greater than 0."))

    # An unset CreatedAt is reported by its own rule below.
    if order.delivery_at is None or (
        order.created_at is not None and order.delivery_at <= order.created_at
    ):
        violations.append(
            RuleViolation("DeliveryAt", "DeliveryAt must be after CreatedAt.")
        )
    if order.created_at is None:
        violations.append(RuleViolation("CreatedAt", "CreatedAt is required."))

    if _is_blank(order.delivery_address):
        violations.append(
            RuleViolation("DeliveryAddress", "DeliveryAddress is required.")
        )

    return violations


# --- Products -----------------------------------------------------------------


def validate_product(product: Product) -> list[RuleViolation]:
    violations: list[RuleViolation] = []

    if product.product_id <= 0:
        violations.append(RuleViolation("ProductId", "ProductId must be greater than 0."))
    if _is_blank(product.product_name):
        violations.append(RuleViolation("ProductName", "ProductName is required."))
    if product.price <= 0:
        violations.append(RuleViolation("Price", "Price must be greater than 0."))

    return violations


# --- Recipes ------------------------------------------------------------------


def validate_ingredient_info(info: IngredientInfo) -> list[RuleViolation]:
    violations: list[RuleViolation] = []

    if _is_blank(info.ingredient):
        violations.append(RuleViolation("Ingredient", "Ingredient name is required."))
    if info.amount <= 0:
        violations.append(
            RuleViolation("Amount", "Ingredient amount must be greater than 0.")
        )

    return violations


def validate_product_ingredients(recipe: ProductIngredients) -> list[RuleViolation]:
    """Validate a recipe and, recursively, every ingredient in it.

    Nested violations are reported against ``Ingredients[<index>].<field>``
    so the offending entry can be found in the source file.
    """
    violations: list[RuleViolation] = []

    if recipe.product_id <= 0:
        violations.append(RuleViolation("ProductId", "ProductId must be greater than 0."))

    ingredients = recipe.ingredients
    if ingredients is None:
        violations.append(
            RuleViolation("Ingredients", "Ingredients list is required.")
        )
    if not ingredients or len(ingredients) > MAX_INGREDIENTS:
        violations.append(
            RuleViolation(
                "Ingredients",
                f"Ingredients list must have 1 to {MAX_INGREDIENTS} items.",
            )
        )

    for index, info in enumerate(ingredients or ()):
        for nested in validate_ingredient_info(info):
            violations.append(
                RuleViolation(f"Ingredients[{index}].{nested.field}", nested.message)
            )

    return violations

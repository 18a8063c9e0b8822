"""Application service: Compute Totals use case.

Orchestrates a whole batch run: load the three record kinds, reject the
batch if any record is invalid, then compute the per-order price and
ingredient totals over the same lists.
"""

from __future__ import annotations

from ordertotals.application.dto import BatchTotalsDTO
from ordertotals.application.validate_records import ValidateRecordsHandler
from ordertotals.domain.repository.order_repository import OrderRepository
from ordertotals.domain.repository.product_repository import ProductRepository
from ordertotals.domain.repository.recipe_repository import RecipeRepository
from ordertotals.domain.service.totals_calculator import (
    calculate_ingredient_totals,
    calculate_order_totals,
)


class ComputeTotalsHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
        recipe_repo: RecipeRepository,
        max_workers: int | None = None,
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo
        self._recipe_repo = recipe_repo
        self._validator = ValidateRecordsHandler(max_workers)

    def handle(self) -> BatchTotalsDTO:
        """Run the batch.

        Raises ValidationError before any totals are computed if a single
        record is invalid; RecordLoadError propagates from the loaders.
        """
        orders = self._order_repo.list_all()
        products = self._product_repo.list_all()
        recipes = self._recipe_repo.list_all()

        self._validator.handle(orders, products, recipes)

        return BatchTotalsDTO(
            order_count=len(orders),
            product_count=len(products),
            recipe_count=len(recipes),
            order_totals=calculate_order_totals(orders, products),
            ingredient_totals=calculate_ingredient_totals(orders, recipes),
        )

"""Application service: validate every loaded record.

Each record is checked independently on a worker pool; the results are
joined, and if *any* record is invalid the whole batch is rejected after
every violation has been reported.  Validation never filters or changes
the records themselves.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from concurrent.futures import Future, ThreadPoolExecutor, as_completed
from typing import Any

from ordertotals.application.dto import RecordFailure
from ordertotals.domain.exceptions import ValidationError
from ordertotals.domain.model.order import Order
from ordertotals.domain.model.product import Product
from ordertotals.domain.model.recipe import ProductIngredients
from ordertotals.domain.validation.rules import (
    RuleViolation,
    validate_order,
    validate_product,
    validate_product_ingredients,
)
from ordertotals.utils.logging import get_logger

log = get_logger(__name__)

VALIDATION_FAILED_MESSAGE = "Validation failed, please check validation messages!"


class ValidateRecordsHandler:

    def __init__(self, max_workers: int | None = None) -> None:
        self._max_workers = max_workers

    def collect_failures(
        self,
        orders: Sequence[Order],
        products: Sequence[Product],
        recipes: Sequence[ProductIngredients],
    ) -> list[RecordFailure]:
        """Validate every record and return the ones that broke a rule.

        The order of the returned failures is not defined.
        """
        jobs: list[tuple[str, str, Callable[[Any], list[RuleViolation]], Any]] = []
        jobs += [("Order", f"OrderId: {o.order_id}", validate_order, o) for o in orders]
        jobs += [
            ("Product", f"ProductId: {p.product_id}", validate_product, p)
            for p in products
        ]
        jobs += [
            (
                "ProductIngredients",
                f"ProductId: {r.product_id}",
                validate_product_ingredients,
                r,
            )
            for r in recipes
        ]

        failures: list[RecordFailure] = []
        if not jobs:
            return failures

        with ThreadPoolExecutor(max_workers=self._max_workers) as pool:
            pending: dict[Future[list[RuleViolation]], tuple[str, str]] = {
                pool.submit(rule_set, record): (entity_type, key)
                for entity_type, key, rule_set, record in jobs
            }
            for future in as_completed(pending):
                violations = future.result()
                if violations:
                    entity_type, key = pending[future]
                    failures.append(RecordFailure(entity_type, key, tuple(violations)))

        return failures

    def handle(
        self,
        orders: Sequence[Order],
        products: Sequence[Product],
        recipes: Sequence[ProductIngredients],
    ) -> None:
        """Return normally when every record is valid.

        Otherwise log each violation and raise a single ValidationError.
        """
        failures = self.collect_failures(orders, products, recipes)
        if not failures:
            log.info(
                "Validation passed",
                orders=len(orders),
                products=len(products),
                recipes=len(recipes),
            )
            return

        for failure in failures:
            for violation in failure.violations:
                log.error(
                    "Validation failed",
                    entity=failure.entity_type,
                    key=failure.key,
                    field=violation.field,
                    message=violation.message,
                )
        raise ValidationError(VALIDATION_FAILED_MESSAGE)


def validate_all(
    orders: Sequence[Order],
    products: Sequence[Product],
    recipes: Sequence[ProductIngredients],
    max_workers: int | None = None,
) -> None:
    """Validate all three record lists; raises ValidationError on any failure."""
    ValidateRecordsHandler(max_workers).handle(orders, products, recipes)

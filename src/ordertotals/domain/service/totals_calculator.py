"""Domain service: per-order price and ingredient totals.

Both calculations are pure functions of their inputs.  Each builds a
product lookup, walks the order line items once and accumulates into a
result owned by the call, so running them again over the same lists
always yields the same totals.

Line items whose product is unknown are skipped rather than treated as
errors: they never create an entry in the result.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, MutableMapping
from decimal import Decimal
from typing import Callable, TypeVar

from ordertotals.domain.model.order import Order
from ordertotals.domain.model.product import Product
from ordertotals.domain.model.recipe import IngredientInfo, ProductIngredients
from ordertotals.utils.logging import get_logger

log = get_logger(__name__)

R = TypeVar("R")
V = TypeVar("V")


class IngredientTotals(MutableMapping[str, float]):
    """Ingredient name -> accumulated amount, with case-insensitive keys.

    "Cheese" and "CHEESE" address the same entry.  The spelling used by
    the first insertion is the one kept for display; later writes under a
    different case only change the value.
    """

    def __init__(self, data: Iterable[tuple[str, float]] = ()) -> None:
        self._store: dict[str, tuple[str, float]] = {}
        for name, amount in data:
            self[name] = amount

    @staticmethod
    def _fold(name: str) -> str:
        return name.casefold()

    def add(self, name: str, amount: float) -> None:
        """Add *amount* to the running total for *name*."""
        self[name] = self.get(name, 0.0) + amount

    # --- MutableMapping interface ---------------------------------------------

    def __getitem__(self, name: str) -> float:
        return self._store[self._fold(name)][1]

    def __setitem__(self, name: str, amount: float) -> None:
        key = self._fold(name)
        existing = self._store.get(key)
        display = existing[0] if existing is not None else name
        self._store[key] = (display, amount)

    def __delitem__(self, name: str) -> None:
        del self._store[self._fold(name)]

    def __iter__(self) -> Iterator[str]:
        return (display for display, _ in self._store.values())

    def __len__(self) -> int:
        return len(self._store)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self.items())!r})"


def _index_by_product_id(
    records: Iterable[R],
    product_id: Callable[[R], int],
    value: Callable[[R], V],
    kind: str,
) -> dict[int, V]:
    """Build a productId lookup; on duplicate ids the first record wins."""
    lookup: dict[int, V] = {}
    for record in records:
        key = product_id(record)
        if key in lookup:
            log.warning("Ignoring duplicate product id", kind=kind, product_id=key)
            continue
        lookup[key] = value(record)
    return lookup


def calculate_order_totals(
    orders: Iterable[Order],
    products: Iterable[Product],
) -> dict[int, Decimal]:
    """Sum ``price x quantity`` over the line items of every order.

    Returns a mapping of order id to total price.  An order whose line
    items all reference unknown products has no entry at all (not a
    zero entry).
    """
    prices = _index_by_product_id(
        products, lambda p: p.product_id, lambda p: p.price, "Product"
    )
    totals: dict[int, Decimal] = {}

    for order in orders:
        price = prices.get(order.product_id)
        if price is None:
            continue
        line_total = price * order.quantity
        if order.order_id in totals:
            totals[order.order_id] += line_total
        else:
            totals[order.order_id] = line_total

    return totals


def calculate_ingredient_totals(
    orders: Iterable[Order],
    recipes: Iterable[ProductIngredients],
) -> dict[int, IngredientTotals]:
    """Sum ``amount x quantity`` per ingredient over every order's items.

    Ingredient names are grouped case-insensitively.  An order that only
    references products with an empty recipe still gets an (empty)
    entry, which keeps "no ingredients" apart from "product not found".
    """
    recipe_lookup: dict[int, tuple[IngredientInfo, ...]] = _index_by_product_id(
        recipes,
        lambda r: r.product_id,
        lambda r: r.ingredients or (),
        "ProductIngredients",
    )
    totals: dict[int, IngredientTotals] = {}

    for order in orders:
        ingredients = recipe_lookup.get(order.product_id)
        if ingredients is None:
            log.warning(
                "No ingredients found for product",
                product_id=order.product_id,
                order_id=order.order_id,
            )
            continue

        order_totals = totals.setdefault(order.order_id, IngredientTotals())
        for info in ingredients:
            order_totals.add(info.ingredient or "", info.amount * order.quantity)

    return totals

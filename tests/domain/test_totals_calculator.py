"""Unit tests for the order price and ingredient totals."""

from decimal import Decimal

from structlog.testing import capture_logs

from ordertotals.domain.model.recipe import ProductIngredients
from ordertotals.domain.service.totals_calculator import (
    IngredientTotals,
    calculate_ingredient_totals,
    calculate_order_totals,
)
from tests.fakes import make_order, make_product, make_recipe


# ── Order totals ─────────────────────────────────────────────────────────────


class TestCalculateOrderTotals:

    def test_price_times_quantity_per_order(self):
        orders = [
            make_order(order_id=1, product_id=101, quantity=2),
            make_order(order_id=2, product_id=102, quantity=1),
        ]
        products = [
            make_product(101, "Pizza", "12.99"),
            make_product(102, "Burger", "8.99"),
        ]
        result = calculate_order_totals(orders, products)
        assert result == {1: Decimal("25.98"), 2: Decimal("8.99")}

    def test_line_items_sharing_an_order_id_are_summed(self):
        orders = [
            make_order(order_id=1, product_id=101, quantity=2),
            make_order(order_id=1, product_id=102, quantity=1),
        ]
        products = [
            make_product(101, "Pizza", "12.99"),
            make_product(102, "Burger", "8.99"),
        ]
        assert calculate_order_totals(orders, products) == {1: Decimal("34.97")}

    def test_repeated_addition_is_exact(self):
        orders = [make_order(order_id=1, product_id=101, quantity=1) for _ in range(10)]
        products = [make_product(101, "Gum", "0.10")]
        assert calculate_order_totals(orders, products)[1] == Decimal("1.00")

    def test_unknown_product_creates_no_entry(self):
        orders = [
            make_order(order_id=1, product_id=101, quantity=2),
            make_order(order_id=2, product_id=999, quantity=1),
        ]
        result = calculate_order_totals(orders, [make_product(101, "Pizza", "12.99")])
        assert result == {1: Decimal("25.98")}
        assert 2 not in result

    def test_zero_quantity_adds_zero(self):
        orders = [make_order(order_id=1, product_id=101, quantity=0)]
        result = calculate_order_totals(orders, [make_product(101)])
        assert result == {1: Decimal("0")}

    def test_empty_inputs(self):
        assert calculate_order_totals([], [make_product()]) == {}
        assert calculate_order_totals([make_order()], []) == {}

    def test_first_duplicate_product_wins(self):
        products = [make_product(101, "Pizza", "10.00"), make_product(101, "Pizza", "99.00")]
        with capture_logs() as logs:
            result = calculate_order_totals([make_order(quantity=1)], products)
        assert result == {1: Decimal("10.00")}
        assert any(entry["event"] == "Ignoring duplicate product id" for entry in logs)

    def test_idempotent(self):
        orders = [make_order(order_id=1, quantity=3), make_order(order_id=2, quantity=1)]
        products = [make_product()]
        assert calculate_order_totals(orders, products) == calculate_order_totals(
            orders, products
        )


# ── Ingredient totals ────────────────────────────────────────────────────────


class TestCalculateIngredientTotals:

    def test_amount_times_quantity_per_ingredient(self):
        orders = [
            make_order(order_id=1, product_id=101, quantity=2),
            make_order(order_id=2, product_id=102, quantity=1),
        ]
        recipes = [
            make_recipe(101, ("Cheese", 100), ("Tomato", 50)),
            make_recipe(102, ("Beef", 150)),
        ]
        result = calculate_ingredient_totals(orders, recipes)
        assert len(result) == 2
        assert result[1] == {"Cheese": 200, "Tomato": 100}
        assert result[2] == {"Beef": 150}

    def test_line_items_sharing_an_order_id_are_summed(self):
        orders = [
            make_order(order_id=1, product_id=101, quantity=2),
            make_order(order_id=1, product_id=102, quantity=1),
        ]
        recipes = [
            make_recipe(101, ("Cheese", 100)),
            make_recipe(102, ("Cheese", 50)),
        ]
        assert calculate_ingredient_totals(orders, recipes)[1]["Cheese"] == 250

    def test_names_grouped_case_insensitively(self):
        orders = [
            make_order(order_id=1, product_id=101, quantity=1),
            make_order(order_id=1, product_id=102, quantity=1),
        ]
        recipes = [
            make_recipe(101, ("Cheese", 100)),
            make_recipe(102, ("CHEESE", 50)),
        ]
        totals = calculate_ingredient_totals(orders, recipes)[1]
        assert len(totals) == 1
        assert list(totals) == ["Cheese"]
        assert totals["cheese"] == 150

    def test_unknown_product_is_skipped_and_reported(self):
        orders = [
            make_order(order_id=1, product_id=101, quantity=2),
            make_order(order_id=2, product_id=999, quantity=1),
        ]
        with capture_logs() as logs:
            result = calculate_ingredient_totals(orders, [make_recipe(101, ("Cheese", 200))])

        assert list(result) == [1]
        assert result[1]["Cheese"] == 400
        [notice] = [e for e in logs if e["event"] == "No ingredients found for product"]
        assert notice["product_id"] == 999
        assert notice["log_level"] == "warning"

    def test_empty_recipe_still_creates_entry(self):
        orders = [make_order(order_id=1, product_id=101, quantity=1)]
        result = calculate_ingredient_totals(orders, [make_recipe(101)])
        assert 1 in result
        assert len(result[1]) == 0

    def test_missing_ingredient_list_treated_as_empty(self):
        orders = [make_order(order_id=1, product_id=101, quantity=1)]
        recipes = [ProductIngredients(product_id=101, ingredients=None)]
        assert calculate_ingredient_totals(orders, recipes) == {1: IngredientTotals()}

    def test_zero_quantity_adds_zero_amount(self):
        orders = [make_order(order_id=1, product_id=101, quantity=0)]
        result = calculate_ingredient_totals(orders, [make_recipe(101, ("Cheese", 100))])
        assert result[1]["Cheese"] == 0

    def test_empty_inputs(self):
        assert calculate_ingredient_totals([], [make_recipe(101, ("Cheese", 1))]) == {}
        with capture_logs():
            assert calculate_ingredient_totals([make_order()], []) == {}

    def test_idempotent(self):
        orders = [make_order(order_id=1, product_id=101, quantity=3)]
        recipes = [make_recipe(101, ("Cheese", 100), ("cheese", 1))]
        first = calculate_ingredient_totals(orders, recipes)
        second = calculate_ingredient_totals(orders, recipes)
        assert first == second
        assert first[1]["Cheese"] == 303


# ── IngredientTotals mapping ─────────────────────────────────────────────────


class TestIngredientTotals:

    def test_first_spelling_is_kept(self):
        totals = IngredientTotals()
        totals.add("tomato", 1)
        totals.add("Tomato", 2)
        assert list(totals.items()) == [("tomato", 3)]

    def test_lookup_and_delete_ignore_case(self):
        totals = IngredientTotals([("Basil", 5)])
        assert "BASIL" in totals
        del totals["basil"]
        assert len(totals) == 0

    def test_equals_plain_dict(self):
        assert IngredientTotals([("Salt", 1.5)]) == {"Salt": 1.5}

"""CLI command for a batch totals run."""

from __future__ import annotations

from pathlib import Path

import click

from ordertotals.application.compute_totals import ComputeTotalsHandler
from ordertotals.application.dto import BatchTotalsDTO
from ordertotals.domain.exceptions import DomainException
from ordertotals.infrastructure.bootstrap import (
    DEFAULT_INGREDIENTS_FILE,
    DEFAULT_ORDERS_FILE,
    DEFAULT_PRODUCTS_FILE,
    order_repository,
    product_repository,
    recipe_repository,
)
from ordertotals.utils.logging import configure_logging

_PATH = click.Path(dir_okay=False, path_type=Path)


@click.command("run")
@click.option(
    "--orders", "orders_file", type=_PATH, default=DEFAULT_ORDERS_FILE,
    envvar="ORDERTOTALS_ORDERS", show_default=True,
    help="Orders file (.json or .csv).",
)
@click.option(
    "--products", "products_file", type=_PATH, default=DEFAULT_PRODUCTS_FILE,
    envvar="ORDERTOTALS_PRODUCTS", show_default=True,
    help="Products file (.json).",
)
@click.option(
    "--ingredients", "ingredients_file", type=_PATH, default=DEFAULT_INGREDIENTS_FILE,
    envvar="ORDERTOTALS_INGREDIENTS", show_default=True,
    help="Product ingredients file (.json).",
)
@click.option(
    "--workers", type=click.IntRange(min=1), default=None,
    help="Validation worker threads (default: executor's choice).",
)
@click.option(
    "--log-level", default="INFO", show_default=True,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
)
@click.option("--json-logs", is_flag=True, help="Emit logs as JSON lines.")
def totals_run(
    orders_file: Path,
    products_file: Path,
    ingredients_file: Path,
    workers: int | None,
    log_level: str,
    json_logs: bool,
) -> None:
    """Validate the input files and print per-order totals."""
    configure_logging(level=log_level, json_output=json_logs)

    handler = ComputeTotalsHandler(
        order_repo=order_repository(orders_file),
        product_repo=product_repository(products_file),
        recipe_repo=recipe_repository(ingredients_file),
        max_workers=workers,
    )

    try:
        result = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_totals(result)


def _display_totals(result: BatchTotalsDTO) -> None:
    click.echo(
        f"Loaded {result.order_count} order lines, "
        f"{result.product_count} products, {result.recipe_count} recipes"
    )
    click.echo()
    click.echo("Order Totals:")
    for order_id, total in result.order_totals.items():
        click.echo(f"Order ID: {order_id}, Total: ${total:.2f}")

    click.echo()
    click.echo("Ingredient Totals:")
    for order_id, ingredients in result.ingredient_totals.items():
        click.echo(f"OrderId: {order_id}")
        for name, amount in ingredients.items():
            click.echo(f"  {name:<20} {amount:>10g}")
        click.echo()

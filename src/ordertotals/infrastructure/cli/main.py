import click

from ordertotals.infrastructure.cli.totals_commands import totals_run


@click.group()
def cli() -> None:
    """ordertotals: order price and ingredient totals from batch files"""


# Register subcommands
cli.add_command(totals_run)

import logging

import click

from acme_basket.infrastructure.cli.basket_commands import basket_total
from acme_basket.infrastructure.cli.catalogue_commands import catalogue_list


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """ACME Basket: basket pricing with offers and delivery rules"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@cli.group()
def basket() -> None:
    """Price baskets."""


@cli.group()
def catalogue() -> None:
    """Browse the product catalogue."""


# Register subcommands
basket.add_command(basket_total)
catalogue.add_command(catalogue_list)

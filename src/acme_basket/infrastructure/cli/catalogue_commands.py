"""CLI commands for the product catalogue."""

from __future__ import annotations

from pathlib import Path

import click

from acme_basket.application.show_catalogue import ShowCatalogueHandler
from acme_basket.domain.exceptions import DomainException
from acme_basket.infrastructure.bootstrap import catalogue_repository


@click.command("list")
@click.option(
    "--catalogue",
    "catalogue_file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Catalogue JSON file (defaults to the bundled catalogue).",
)
def catalogue_list(catalogue_file: Path | None) -> None:
    """List all products in the catalogue."""
    handler = ShowCatalogueHandler(catalogue_repo=catalogue_repository(catalogue_file))

    try:
        entries = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not entries:
        click.echo("No products found.")
        return

    click.echo(f"{'Code':<20} {'Name':<22} {'Price':>10}")
    click.echo("-" * 54)
    for entry in entries:
        click.echo(f"{entry.code:<20} {entry.name:<22} {entry.price:>10}")

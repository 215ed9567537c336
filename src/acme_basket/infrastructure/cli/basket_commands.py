"""CLI commands for pricing a basket."""

from __future__ import annotations

from pathlib import Path

import click

from acme_basket.application.dto import BasketItemSpec, BasketQuoteDTO
from acme_basket.application.price_basket import PriceBasketHandler
from acme_basket.domain.exceptions import DomainException
from acme_basket.infrastructure.bootstrap import (
    DELIVERY_RULES,
    build_delivery_rules,
    build_offer,
    catalogue_repository,
)


def _parse_items(raw: str) -> list[BasketItemSpec]:
    """Parse 'RED_WIDGET:2,APPLE' into BasketItemSpec list (quantity defaults to 1)."""
    specs: list[BasketItemSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if not pair:
            raise click.BadParameter("Empty item in list. Expected 'CODE' or 'CODE:Quantity'.")
        if ":" not in pair:
            specs.append(BasketItemSpec(code=pair))
            continue
        code, qty_str = pair.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product '{code}'."
            )
        specs.append(BasketItemSpec(code=code.strip(), quantity=qty))
    return specs


def _display_quote(dto: BasketQuoteDTO) -> None:
    for offer in dto.offers:
        click.echo(f"Offer:    {offer}")
    click.echo(f"Delivery: {dto.delivery_rule or 'none'}")
    click.echo()
    click.echo(f"  {'Code':<20} {'Product':<22} {'Price':>10} {'Charged':>10}")
    click.echo(f"  {'-'*65}")
    for line in dto.lines:
        click.echo(
            f"  {line.code:<20} {line.name:<22} {line.list_price:>10} {line.charged_price:>10}"
        )
    click.echo(f"  {'-'*65}")
    click.echo(f"  {'Subtotal':<43} {dto.subtotal:>21}")
    click.echo(f"  {'Delivery':<43} {dto.delivery:>21}")
    click.echo(f"  {'Total':<43} {dto.total:>21}")


@click.command("total")
@click.option("--items", required=True, help="Items as 'CODE:Qty,CODE' (Qty defaults to 1).")
@click.option(
    "--offer",
    "offer_specs",
    multiple=True,
    help="Offer to apply, in order: 'red-widget' or 'percent:<N>'. Repeatable.",
)
@click.option(
    "--delivery",
    type=click.Choice(DELIVERY_RULES, case_sensitive=False),
    default="none",
    show_default=True,
    help="Delivery rule.",
)
@click.option("--threshold", default=None, help="Free-delivery threshold (threshold rule).")
@click.option("--delivery-cost", default=None, help="Delivery cost below the threshold.")
@click.option(
    "--catalogue",
    "catalogue_file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Catalogue JSON file (defaults to the bundled catalogue).",
)
def basket_total(
    items: str,
    offer_specs: tuple[str, ...],
    delivery: str,
    threshold: str | None,
    delivery_cost: str | None,
    catalogue_file: Path | None,
) -> None:
    """Price a basket: offers in the given order, then delivery."""
    specs = _parse_items(items)
    if delivery.lower() != "threshold":
        for flag, value in (("--threshold", threshold), ("--delivery-cost", delivery_cost)):
            if value is not None:
                raise click.BadParameter(
                    f"{flag} only applies to '--delivery threshold'."
                )

    try:
        handler = PriceBasketHandler(
            catalogue_repo=catalogue_repository(catalogue_file),
            offers=[build_offer(spec) for spec in offer_specs],
            delivery_rules=build_delivery_rules(delivery, threshold, delivery_cost),
        )
        dto = handler.handle(specs)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_quote(dto)

"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import os
from collections.abc import Callable
from pathlib import Path

from acme_basket.domain.delivery.delivery_rule import DeliveryRule
from acme_basket.domain.delivery.threshold import ThresholdDeliveryRule
from acme_basket.domain.delivery.tiered import TieredDeliveryRule
from acme_basket.domain.exceptions import ValidationError
from acme_basket.domain.offers.offer import Offer
from acme_basket.domain.offers.percentage_discount import PercentageDiscountOffer
from acme_basket.domain.offers.red_widget import BuyOneGetHalfOffRedWidgetOffer
from acme_basket.infrastructure.persistence.json_catalogue_repository import (
    JsonCatalogueRepository,
)

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DATA_DIR = Path(__file__).resolve().parents[3] / "data"

CATALOGUE_ENV_VAR = "ACME_BASKET_CATALOGUE"


def catalogue_path() -> Path:
    override = os.environ.get(CATALOGUE_ENV_VAR)
    if override:
        return Path(override)
    return _DATA_DIR / "catalogue.json"


def catalogue_repository(path: Path | None = None) -> JsonCatalogueRepository:
    return JsonCatalogueRepository(path or catalogue_path())


# --- Offers -------------------------------------------------------------------

def _red_widget_offer(argument: str | None) -> Offer:
    if argument is not None:
        raise ValidationError("The red-widget offer takes no argument")
    return BuyOneGetHalfOffRedWidgetOffer()


def _percentage_offer(argument: str | None) -> Offer:
    if argument is None:
        raise ValidationError("The percent offer needs a percentage, e.g. 'percent:10'")
    return PercentageDiscountOffer(argument)


OFFERS: dict[str, Callable[[str | None], Offer]] = {
    "red-widget": _red_widget_offer,
    "percent": _percentage_offer,
}


def build_offer(spec: str) -> Offer:
    """Build an offer from ``name`` or ``name:argument`` (e.g. ``percent:10``)."""
    name, _, argument = spec.partition(":")
    factory = OFFERS.get(name.strip().lower())
    if factory is None:
        raise ValidationError(
            f"Unknown offer '{name}'. Expected one of: {', '.join(sorted(OFFERS))}"
        )
    return factory(argument.strip() if argument else None)


# --- Delivery rules -----------------------------------------------------------

DELIVERY_RULES = ("tiered", "threshold", "none")


def build_delivery_rules(
    name: str,
    threshold: str | None = None,
    cost: str | None = None,
) -> list[DeliveryRule]:
    """Build the delivery rule list for *name* (empty for ``none``)."""
    name = name.strip().lower()
    if name == "none":
        return []
    if name == "tiered":
        return [TieredDeliveryRule()]
    if name == "threshold":
        if threshold is None or cost is None:
            raise ValidationError("Threshold delivery needs both a threshold and a cost")
        return [ThresholdDeliveryRule(threshold, cost)]
    raise ValidationError(
        f"Unknown delivery rule '{name}'. Expected one of: {', '.join(DELIVERY_RULES)}"
    )

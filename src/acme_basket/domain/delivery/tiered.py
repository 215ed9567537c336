"""Tiered delivery pricing.

    spend <  50.00          4.95
    50.00 <= spend < 90.00  2.95
    spend >= 90.00          free

Each lower bound belongs to the cheaper band: exactly 50.00 pays 2.95
and exactly 90.00 ships free.
"""

from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal

from acme_basket.domain.delivery.delivery_rule import DeliveryRule
from acme_basket.domain.model.product import Product
from acme_basket.domain.model.value_objects import sum_prices

# (lower bound, cost), highest band first
TIERS: tuple[tuple[Decimal, Decimal], ...] = (
    (Decimal("90.00"), Decimal("0.00")),
    (Decimal("50.00"), Decimal("2.95")),
    (Decimal("0.00"), Decimal("4.95")),
)


class TieredDeliveryRule(DeliveryRule):

    @property
    def description(self) -> str:
        return "Delivery 4.95 under 50.00, 2.95 under 90.00, free from 90.00"

    def calculate(self, products: Sequence[Product]) -> Decimal:
        spend = sum_prices(products)
        for lower_bound, cost in TIERS:
            if spend >= lower_bound:
                return cost
        # unreachable: spend is never negative
        return TIERS[-1][1]

    def __repr__(self) -> str:
        return "TieredDeliveryRule()"

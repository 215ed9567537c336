"""Free delivery at or above a spend threshold, flat cost below it."""

from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal

from acme_basket.domain.delivery.delivery_rule import DeliveryRule
from acme_basket.domain.model.product import Product
from acme_basket.domain.model.value_objects import (
    ZERO,
    AmountLike,
    format_amount,
    sum_prices,
    to_amount,
)


class ThresholdDeliveryRule(DeliveryRule):

    def __init__(self, threshold: AmountLike, cost: AmountLike) -> None:
        self._threshold = to_amount(threshold, "threshold")
        self._cost = to_amount(cost, "delivery cost")

    @property
    def threshold(self) -> Decimal:
        return self._threshold

    @property
    def cost(self) -> Decimal:
        return self._cost

    @property
    def description(self) -> str:
        return (
            f"Free delivery from {format_amount(self._threshold)}, "
            f"otherwise {format_amount(self._cost)}"
        )

    def calculate(self, products: Sequence[Product]) -> Decimal:
        if sum_prices(products) >= self._threshold:
            return ZERO
        return self._cost

    def __repr__(self) -> str:
        return f"ThresholdDeliveryRule({self._threshold}, {self._cost})"

"""Percentage discount applied to every product in the basket."""

from __future__ import annotations

from collections.abc import Sequence

from acme_basket.domain.model.product import Product
from acme_basket.domain.model.value_objects import AmountLike, Percentage
from acme_basket.domain.offers.offer import Offer


class PercentageDiscountOffer(Offer):

    def __init__(self, percentage: AmountLike) -> None:
        self._percentage = Percentage.of(percentage)

    @property
    def percentage(self) -> Percentage:
        return self._percentage

    @property
    def description(self) -> str:
        return f"{self._percentage} off everything"

    def apply(self, products: Sequence[Product]) -> list[Product]:
        factor = self._percentage.remaining_factor
        return [product.with_price(product.price * factor) for product in products]

    def __repr__(self) -> str:
        return f"PercentageDiscountOffer({self._percentage.value})"

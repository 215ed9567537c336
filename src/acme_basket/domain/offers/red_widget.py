"""Buy one red widget, get the second half price.

A product is a red widget when its name contains both "red" and
"widget", case-insensitively and in any order ("Widget Red" and
"Special Red Widget" both count).
"""

from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal

from acme_basket.domain.model.product import Product
from acme_basket.domain.offers.offer import Offer

HALF = Decimal("0.5")


def is_red_widget(product: Product) -> bool:
    name = product.name.lower()
    return "red" in name and "widget" in name


class BuyOneGetHalfOffRedWidgetOffer(Offer):
    """Every second red widget, counted in basket order, is half price.

    The 1st, 3rd, 5th... red widgets stay at full price; the 2nd, 4th,
    6th... are repriced. Other products keep their position and price.
    """

    @property
    def description(self) -> str:
        return "Buy one red widget, get the second half price"

    def apply(self, products: Sequence[Product]) -> list[Product]:
        if sum(1 for product in products if is_red_widget(product)) < 2:
            return list(products)

        discounted: list[Product] = []
        seen = 0
        for product in products:
            if not is_red_widget(product):
                discounted.append(product)
                continue
            seen += 1
            if seen % 2 == 0:
                discounted.append(product.with_price(product.price * HALF))
            else:
                discounted.append(product)
        return discounted

    def __repr__(self) -> str:
        return "BuyOneGetHalfOffRedWidgetOffer()"

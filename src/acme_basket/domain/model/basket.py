"""Basket aggregate: the pricing pipeline.

The Basket owns a snapshot of the catalogue, a quantity per product code,
and the offers and delivery rules it was configured with. Pricing is
derived on demand:

    quantities -> one Product per unit -> offer 1 -> offer 2 -> ...
               -> subtotal of discounted prices
               -> delivery cost from the first delivery rule
               -> subtotal + delivery

Nothing is cached between calls, so ``total()`` always reflects the
current quantities.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal

from acme_basket.domain.delivery.delivery_rule import DeliveryRule
from acme_basket.domain.exceptions import ProductNotFoundError, ValidationError
from acme_basket.domain.model.product import Product
from acme_basket.domain.model.value_objects import ZERO, sum_prices
from acme_basket.domain.offers.offer import Offer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BasketQuote:
    """Breakdown of one pricing run."""

    products: tuple[Product, ...]  # after every offer
    subtotal: Decimal
    delivery: Decimal

    @property
    def total(self) -> Decimal:
        return self.subtotal + self.delivery


class Basket:
    """Aggregate root for a shopping basket.

    Not thread-safe: ``add``/``remove``/``clear`` mutate the quantity map
    without locking, so a basket shared between callers needs external
    synchronisation.
    """

    def __init__(
        self,
        catalogue: Iterable[Product],
        delivery_rules: Iterable[DeliveryRule] = (),
        offers: Iterable[Offer] = (),
    ) -> None:
        catalogue = list(catalogue)
        delivery_rules = tuple(delivery_rules)
        offers = tuple(offers)

        # Validate everything before building any state
        if not all(isinstance(product, Product) for product in catalogue):
            raise ValidationError("Catalogue must contain only Product objects")
        if not all(isinstance(rule, DeliveryRule) for rule in delivery_rules):
            raise ValidationError("Delivery rules must contain only DeliveryRule objects")
        if not all(isinstance(offer, Offer) for offer in offers):
            raise ValidationError("Offers must contain only Offer objects")

        # Later duplicates win; catalogue uniqueness is the caller's concern
        self._catalogue: dict[str, Product] = {p.code: p for p in catalogue}
        self._delivery_rules = delivery_rules
        self._offers = offers
        self._items: dict[str, int] = {}

        if len(delivery_rules) > 1:
            logger.debug(
                "%d delivery rules configured; only %r is used",
                len(delivery_rules),
                delivery_rules[0],
            )

    # --- Configuration --------------------------------------------------------

    @property
    def offers(self) -> tuple[Offer, ...]:
        return self._offers

    @property
    def delivery_rules(self) -> tuple[DeliveryRule, ...]:
        return self._delivery_rules

    def catalogue(self) -> list[Product]:
        """Every product this basket can hold."""
        return list(self._catalogue.values())

    # --- Mutations ------------------------------------------------------------

    def add(self, code: str) -> None:
        """Add one unit of the product with *code*."""
        if code not in self._catalogue:
            raise ProductNotFoundError(code)
        self._items[code] = self._items.get(code, 0) + 1

    def remove(self, code: str) -> bool:
        """Remove one unit of *code*.

        Returns False, and changes nothing, when the product is not in
        the basket. The entry is dropped once its quantity reaches zero.
        """
        quantity = self._items.get(code, 0)
        if quantity == 0:
            return False
        if quantity > 1:
            self._items[code] = quantity - 1
        else:
            del self._items[code]
        return True

    def clear(self) -> None:
        self._items.clear()

    # --- Queries --------------------------------------------------------------

    def item_count(self) -> int:
        """Number of distinct products in the basket."""
        return len(self._items)

    def total_quantity(self) -> int:
        return sum(self._items.values())

    def contains(self, code: str) -> bool:
        return code in self._items

    def quantity_of(self, code: str) -> int:
        return self._items.get(code, 0)

    def is_empty(self) -> bool:
        return not self._items

    def products_in_basket(self) -> list[Product]:
        """One catalogue Product per unit, in the order codes were first added.

        A product with quantity 3 appears three times in a row. Offers that
        pair items by position rely on this ordering.
        """
        products: list[Product] = []
        for code, quantity in self._items.items():
            products.extend([self._catalogue[code]] * quantity)
        return products

    # --- Pricing --------------------------------------------------------------

    def quote(self) -> BasketQuote:
        """Run the full pricing pipeline and return its breakdown."""
        products = self.products_in_basket()
        for offer in self._offers:
            products = offer.apply(products)
            logger.debug("Applied %r: %d products", offer, len(products))

        subtotal = sum_prices(products)
        delivery = self._delivery_cost(products)
        logger.debug("Subtotal %s, delivery %s", subtotal, delivery)
        return BasketQuote(products=tuple(products), subtotal=subtotal, delivery=delivery)

    def total(self) -> Decimal:
        """Discounted subtotal plus delivery."""
        return self.quote().total

    # --- Internal helpers -----------------------------------------------------

    def _delivery_cost(self, products: list[Product]) -> Decimal:
        # Only the first configured rule is consulted
        if not self._delivery_rules:
            return ZERO
        return self._delivery_rules[0].calculate(products)

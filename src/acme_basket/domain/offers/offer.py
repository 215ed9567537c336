"""Abstract offer.

An offer is a pure transformation of the basket's expanded product list.
Offers are chained by the Basket: each one receives the output of the
previous one, so the order they are configured in matters.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from acme_basket.domain.model.product import Product


class Offer(ABC):

    @abstractmethod
    def apply(self, products: Sequence[Product]) -> list[Product]:
        """Return a new product list with this offer applied.

        Implementations must not mutate *products*.
        """

    @property
    @abstractmethod
    def description(self) -> str:
        """Short human-readable summary of the offer."""

"""Abstract delivery rule.

A delivery rule prices delivery from the product list *after* offers
have been applied, so discounts can move a basket between bands.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from decimal import Decimal

from acme_basket.domain.model.product import Product


class DeliveryRule(ABC):

    @abstractmethod
    def calculate(self, products: Sequence[Product]) -> Decimal:
        """Return the non-negative delivery cost for *products*."""

    @property
    @abstractmethod
    def description(self) -> str:
        """Short human-readable summary of the rule."""

"""Abstract repository for the product catalogue.

Defined in the domain layer so the domain never depends on
infrastructure. The catalogue is read-only: a Basket takes a snapshot
of it at construction and never writes back.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from acme_basket.domain.model.product import Product


class CatalogueRepository(ABC):

    @abstractmethod
    def get_by_code(self, code: str) -> Product | None:
        """Return a product by its code, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalogue, in catalogue order."""

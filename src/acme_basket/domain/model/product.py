"""Product value object.

Products are catalogue entries. They are never mutated: an offer that
reprices a product builds a new one, so the catalogue a Basket was built
from is never altered by pricing.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from decimal import Decimal

from acme_basket.domain.exceptions import ValidationError
from acme_basket.domain.model.value_objects import AmountLike, to_amount


@dataclass(frozen=True, eq=False)
class Product:
    """A product in the catalogue.

    Identity is the ``code``: two products with the same code are the same
    product whatever their name or price, which is what lets a repriced
    copy stand in for the catalogue entry it came from.
    """

    code: str
    name: str
    price: Decimal

    def __post_init__(self) -> None:
        for field_name in ("code", "name"):
            if not isinstance(getattr(self, field_name), str):
                raise ValidationError(
                    f"Product {field_name} must be a string, "
                    f"got {type(getattr(self, field_name)).__name__}"
                )
        # frozen dataclass, so the coerced price goes in through object.__setattr__
        object.__setattr__(self, "price", to_amount(self.price, "product price"))

    def with_price(self, price: AmountLike) -> Product:
        """Return a copy of this product at a different price."""
        return replace(self, price=price)

    def equals(self, other: Product) -> bool:
        return self.code == other.code

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Product):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash(self.code)

    def __str__(self) -> str:
        return f"{self.name} ({self.code})"

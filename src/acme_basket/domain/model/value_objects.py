"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Union

from acme_basket.domain.exceptions import ValidationError

AmountLike = Union[str, float, int, Decimal]

ZERO = Decimal("0.00")
CENT = Decimal("0.01")
HUNDRED = Decimal("100")


def to_amount(value: AmountLike, label: str = "amount") -> Decimal:
    """Coerce *value* to a non-negative Decimal.

    Floats go through ``str()`` first so ``1.50`` becomes ``Decimal("1.50")``
    rather than the binary approximation.
    """
    if isinstance(value, bool):
        raise ValidationError(f"Invalid {label}: {value!r}")
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError) as exc:
        raise ValidationError(f"Invalid {label}: {value!r}") from exc

    if not amount.is_finite():
        raise ValidationError(f"Invalid {label}: {value!r}")
    if amount < 0:
        raise ValidationError(f"{label.capitalize()} cannot be negative, got {amount}")
    return amount


def format_amount(amount: Decimal) -> str:
    """Two-decimal display string, rounding half a cent up (14.025 -> "14.03")."""
    return f"{amount.quantize(CENT, rounding=ROUND_HALF_UP)}"


def sum_prices(products: Iterable) -> Decimal:
    """Sum the ``price`` of every product, starting from 0.00."""
    total = ZERO
    for product in products:
        total += product.price
    return total


@dataclass(frozen=True)
class Percentage:
    """A percentage in the closed range [0, 100]."""

    value: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.value, Decimal):
            raise ValidationError(
                f"Percentage must be a Decimal, got {type(self.value).__name__}"
            )
        if not self.value.is_finite() or self.value < 0 or self.value > HUNDRED:
            raise ValidationError(
                f"Percentage must be between 0 and 100, got {self.value}"
            )

    @property
    def remaining_factor(self) -> Decimal:
        """Multiplier left after taking the percentage off (10% -> 0.9)."""
        return 1 - self.value / HUNDRED

    def __str__(self) -> str:
        return f"{self.value.normalize():f}%"

    @staticmethod
    def of(value: AmountLike) -> Percentage:
        """Convenient factory that coerces to Decimal safely."""
        if isinstance(value, bool):
            raise ValidationError(f"Invalid percentage: {value!r}")
        try:
            return Percentage(value if isinstance(value, Decimal) else Decimal(str(value)))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid percentage: {value!r}") from exc


@dataclass(frozen=True)
class Quantity:
    """How many units of one product code a customer asks for.

    The basket drops a code once its count reaches zero, so a requested
    count of zero or less has no meaning.
    """

    value: int

    def __post_init__(self) -> None:
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise ValidationError(
                f"Quantity must be a whole number of units, got {self.value!r}"
            )
        if self.value <= 0:
            raise ValidationError(f"Quantity must be positive, got {self.value}")

    def __str__(self) -> str:
        return str(self.value)

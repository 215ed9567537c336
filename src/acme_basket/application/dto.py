"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BasketItemSpec:
    """Input: what the customer put in the basket (product code + quantity)."""

    code: str
    quantity: int = 1


@dataclass(frozen=True)
class QuoteLineDTO:
    """Output: one unit of a product as charged, after offers."""

    code: str
    name: str
    list_price: str  # catalogue price, e.g. "10.00"
    charged_price: str


@dataclass(frozen=True)
class BasketQuoteDTO:
    """Output: a priced basket as displayed to the user."""

    lines: list[QuoteLineDTO]
    offers: list[str]
    delivery_rule: str | None
    subtotal: str
    delivery: str
    total: str


@dataclass(frozen=True)
class CatalogueEntryDTO:
    """Output: a catalogue product as displayed to the user."""

    code: str
    name: str
    price: str

"""Application service: Price Basket use case.

Orchestrates the flow between the catalogue repository and the Basket
aggregate. The basket lives only for the duration of one call; nothing
is persisted.
"""

from __future__ import annotations

from collections.abc import Sequence

from acme_basket.application.dto import BasketItemSpec, BasketQuoteDTO, QuoteLineDTO
from acme_basket.domain.delivery.delivery_rule import DeliveryRule
from acme_basket.domain.model.basket import Basket, BasketQuote
from acme_basket.domain.model.value_objects import Quantity, format_amount
from acme_basket.domain.offers.offer import Offer
from acme_basket.domain.repository.catalogue_repository import CatalogueRepository


class PriceBasketHandler:

    def __init__(
        self,
        catalogue_repo: CatalogueRepository,
        offers: Sequence[Offer] = (),
        delivery_rules: Sequence[DeliveryRule] = (),
    ) -> None:
        self._catalogue_repo = catalogue_repo
        self._offers = tuple(offers)
        self._delivery_rules = tuple(delivery_rules)

    def handle(self, item_specs: list[BasketItemSpec]) -> BasketQuoteDTO:
        """Price a basket.

        Steps:
        1. Build a Basket over the current catalogue.
        2. Validate every quantity, then add each unit (unknown codes fail).
        3. Run the pricing pipeline and return a DTO.
        """
        basket = Basket(
            self._catalogue_repo.list_all(),
            delivery_rules=self._delivery_rules,
            offers=self._offers,
        )

        quantities = [(spec.code, Quantity(spec.quantity)) for spec in item_specs]
        for code, quantity in quantities:
            for _ in range(quantity.value):
                basket.add(code)

        return self._to_dto(basket, basket.quote())

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_dto(basket: Basket, quote: BasketQuote) -> BasketQuoteDTO:
        catalogue = {p.code: p for p in basket.catalogue()}
        rules = basket.delivery_rules
        return BasketQuoteDTO(
            lines=[
                QuoteLineDTO(
                    code=charged.code,
                    name=charged.name,
                    list_price=format_amount(catalogue.get(charged.code, charged).price),
                    charged_price=format_amount(charged.price),
                )
                for charged in quote.products
            ],
            offers=[offer.description for offer in basket.offers],
            delivery_rule=rules[0].description if rules else None,
            subtotal=format_amount(quote.subtotal),
            delivery=format_amount(quote.delivery),
            total=format_amount(quote.total),
        )

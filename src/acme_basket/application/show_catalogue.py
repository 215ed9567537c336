"""Application service: Show Catalogue use case (query)."""

from __future__ import annotations

from acme_basket.application.dto import CatalogueEntryDTO
from acme_basket.domain.model.value_objects import format_amount
from acme_basket.domain.repository.catalogue_repository import CatalogueRepository


class ShowCatalogueHandler:

    def __init__(self, catalogue_repo: CatalogueRepository) -> None:
        self._catalogue_repo = catalogue_repo

    def handle(self) -> list[CatalogueEntryDTO]:
        return [
            CatalogueEntryDTO(code=p.code, name=p.name, price=format_amount(p.price))
            for p in self._catalogue_repo.list_all()
        ]

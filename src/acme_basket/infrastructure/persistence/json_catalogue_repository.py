"""JSON-file-backed implementation of CatalogueRepository.

The file is a list of ``{"code", "name", "price"}`` objects with prices
written as strings so they load as exact Decimals. The repository is
read-only.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from acme_basket.domain.exceptions import EntityNotFoundError, ValidationError
from acme_basket.domain.model.product import Product
from acme_basket.domain.repository.catalogue_repository import CatalogueRepository

logger = logging.getLogger(__name__)


class JsonCatalogueRepository(CatalogueRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    # --- CatalogueRepository interface ----------------------------------------

    def get_by_code(self, code: str) -> Product | None:
        for product in self._load():
            if product.code == code:
                return product
        return None

    def list_all(self) -> list[Product]:
        return self._load()

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> list[Product]:
        if not self._file_path.exists():
            raise EntityNotFoundError(f"Catalogue file not found: {self._file_path}")

        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise ValidationError(
                f"Catalogue file {self._file_path} is not valid JSON: {exc}"
            ) from exc

        if not isinstance(raw, list):
            raise ValidationError(f"Catalogue file {self._file_path} must hold a list")

        products = []
        for index, item in enumerate(raw):
            try:
                products.append(
                    Product(code=item["code"], name=item["name"], price=item["price"])
                )
            except (KeyError, TypeError) as exc:
                raise ValidationError(
                    f"Catalogue entry #{index} needs 'code', 'name' and 'price'"
                ) from exc

        logger.debug("Loaded %d products from %s", len(products), self._file_path)
        return products

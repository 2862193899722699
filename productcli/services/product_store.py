"""Helpers for managing the product catalog JSON store."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, MutableSequence, Optional, Sequence

from commonlib.storage import ListStore, StoreParseError

from ..models import CatalogParseError, Product, decode_catalog, encode_catalog

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ProductCatalog:
    """Loads and saves the whole product list for one command invocation."""

    path: str | Path
    _store: ListStore = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._store = ListStore(self.path)

    def load(self) -> List[Product]:
        try:
            raw = self._store.load()
        except StoreParseError as exc:
            raise CatalogParseError(str(exc)) from exc
        return decode_catalog(raw)

    def save(self, products: Sequence[Product]) -> None:
        self._store.save(encode_catalog(products))


# ----------------------------------------------------------------------
# List operations
# ----------------------------------------------------------------------
def next_id(products: Sequence[Product]) -> int:
    # Assumes the list is in append order; the last id is the largest.
    if not products:
        return 1
    return products[-1].id + 1


def find_by_id(products: Sequence[Product], product_id: int) -> Optional[Product]:
    for product in products:
        if product.id == product_id:
            return product
    return None


def insert(products: MutableSequence[Product], product: Product) -> None:
    products.append(product)


def update_fields(product: Product, title: str, price: float) -> Product:
    product.title = title
    product.price = price
    return product


def remove_by_id(products: MutableSequence[Product], product_id: int) -> Optional[Product]:
    for index, product in enumerate(products):
        if product.id == product_id:
            logger.debug("Removing product %s at position %d", product_id, index)
            return products.pop(index)
    return None

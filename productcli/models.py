"""Typed product records and the decode step for the catalog file."""

from __future__ import annotations

import math
from typing import Any, Iterable, List

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from commonlib.storage import StoreParseError


class CatalogParseError(StoreParseError):
    """Raised when the catalog file does not decode into products."""


class Product(BaseModel):
    model_config = ConfigDict(strict=True, extra="forbid", validate_assignment=True)

    id: int = Field(gt=0, frozen=True)
    title: str
    price: float

    @field_validator("title")
    @classmethod
    def _title_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("title must not be empty")
        return value

    @field_validator("price")
    @classmethod
    def _price_is_finite(cls, value: float) -> float:
        if not math.isfinite(value):
            raise ValueError("price must be a finite number")
        return value


def decode_catalog(raw: Any) -> List[Product]:
    """Turn parsed JSON into products, rejecting anything that is not one."""

    if not isinstance(raw, list):
        raise CatalogParseError(f"catalog must be a list, found {type(raw).__name__}")

    products: List[Product] = []
    seen: set[int] = set()
    for index, item in enumerate(raw):
        try:
            product = Product.model_validate(item)
        except ValidationError as exc:
            raise CatalogParseError(f"entry {index} is not a valid product: {exc}") from exc
        if product.id in seen:
            raise CatalogParseError(f"entry {index} repeats product id {product.id}")
        seen.add(product.id)
        products.append(product)
    return products


def encode_catalog(products: Iterable[Product]) -> List[dict]:
    return [product.model_dump() for product in products]

"""Input validators for the interactive prompts.

Each validator takes the raw text the user typed and returns a
``ValidationResult``. They know nothing about how the text was collected,
which keeps them usable from tests and from any prompt implementation.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class ValidationResult(Generic[T]):
    ok: bool
    value: Optional[T] = None
    error: Optional[str] = None

    @classmethod
    def accept(cls, value: T) -> "ValidationResult[T]":
        return cls(ok=True, value=value)

    @classmethod
    def reject(cls, error: str) -> "ValidationResult[T]":
        return cls(ok=False, error=error)


def validate_title(raw: Any) -> ValidationResult[str]:
    text = "" if raw is None else str(raw)
    if not text.strip():
        return ValidationResult.reject("Please enter a title")
    return ValidationResult.accept(text)


def validate_price(raw: Any) -> ValidationResult[float]:
    text = str(raw).strip()
    if "_" in text:
        return ValidationResult.reject("Please enter a valid price")
    try:
        price = float(text)
    except ValueError:
        return ValidationResult.reject("Please enter a valid price")
    if not math.isfinite(price):
        return ValidationResult.reject("Please enter a valid price")
    return ValidationResult.accept(price)


def validate_id(raw: Any) -> ValidationResult[int]:
    text = str(raw).strip()
    if "_" in text:
        return ValidationResult.reject("Please enter a valid id")
    try:
        product_id = int(text)
    except ValueError:
        return ValidationResult.reject("Please enter a valid id")
    if product_id < 1:
        return ValidationResult.reject("Please enter a valid id")
    return ValidationResult.accept(product_id)

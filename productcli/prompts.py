"""Interactive prompts for product fields."""

from __future__ import annotations

from typing import Any, Callable, Tuple, TypeVar

import typer

from .validators import ValidationResult, validate_id, validate_price, validate_title

T = TypeVar("T")

PromptFn = Callable[[str], Any]

TITLE_MESSAGE = "What is product title?"
PRICE_MESSAGE = "What is product price?"
ID_MESSAGE = "What is product id?"


def ask(
    message: str,
    validator: Callable[[Any], ValidationResult[T]],
    prompt: PromptFn = typer.prompt,
) -> T:
    """Prompt until ``validator`` accepts the answer."""

    while True:
        result = validator(prompt(message))
        if result.ok:
            return result.value  # type: ignore[return-value]
        typer.echo(result.error)


def ask_product_fields(prompt: PromptFn = typer.prompt) -> Tuple[str, float]:
    title = ask(TITLE_MESSAGE, validate_title, prompt)
    price = ask(PRICE_MESSAGE, validate_price, prompt)
    return title, price


def ask_product_id(prompt: PromptFn = typer.prompt) -> int:
    return ask(ID_MESSAGE, validate_id, prompt)

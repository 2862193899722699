"""Plain-text table rendering for product listings."""

from __future__ import annotations

from typing import Iterable, List

import typer

from .models import Product

COLUMNS = ["id", "title", "price"]


def render_table(products: Iterable[Product]) -> str:
    rows: List[dict] = [product.model_dump() for product in products]
    if not rows:
        return "(no entries)"
    widths = {col: max(len(col), max(len(str(row[col])) for row in rows)) for col in COLUMNS}
    lines = [
        " | ".join(col.ljust(widths[col]) for col in COLUMNS),
        "-+-".join("-" * widths[col] for col in COLUMNS),
    ]
    for row in rows:
        lines.append(" | ".join(str(row[col]).ljust(widths[col]) for col in COLUMNS))
    return "\n".join(lines)


def show_products(products: Iterable[Product]) -> None:
    typer.echo(render_table(products))

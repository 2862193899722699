"""Command-line entry point for the product catalog.

Every command loads the catalog fresh, applies at most one change and writes
the whole list back. Store failures are logged and end the command without
a traceback; "no products" and "not found" are ordinary outcomes.
"""

from __future__ import annotations

import logging
from typing import List

import typer

from commonlib.config import load_catalog_config
from commonlib.storage import StoreError

from .display import show_products
from .models import Product
from .prompts import ask_product_fields, ask_product_id
from .services.product_store import (
    ProductCatalog,
    find_by_id,
    insert,
    next_id,
    remove_by_id,
    update_fields,
)

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"

NO_PRODUCTS = "No products found"
NOT_FOUND = "Product not found"

app = typer.Typer(help="Manage the product catalog.", no_args_is_help=True, add_completion=False)


@app.callback()
def configure(ctx: typer.Context) -> None:
    config = load_catalog_config()
    logging.basicConfig(level=config.log_level_number, format=LOG_FORMAT)
    if ctx.obj is None:
        ctx.obj = ProductCatalog(config.data_file)
    logger.debug("Using catalog at %s", ctx.obj.path)


def _has_products(products: List[Product]) -> bool:
    if not products:
        typer.echo(NO_PRODUCTS)
        return False
    return True


@app.command("add", help="Create Product")
def add_product(ctx: typer.Context) -> None:
    catalog: ProductCatalog = ctx.obj
    try:
        products = catalog.load()
        title, price = ask_product_fields()
        insert(products, Product(id=next_id(products), title=title, price=price))
        catalog.save(products)
    except StoreError as exc:
        logger.error("Error adding product: %s", exc)
        return
    typer.echo("Product added successfully")


@app.command("get", help="Read Product By Id")
def get_product(ctx: typer.Context) -> None:
    catalog: ProductCatalog = ctx.obj
    try:
        products = catalog.load()
    except StoreError as exc:
        logger.error("Error getting products: %s", exc)
        return
    if not _has_products(products):
        return
    product = find_by_id(products, ask_product_id())
    if product is None:
        typer.echo(NOT_FOUND)
        return
    show_products([product])


@app.command("patch", help="Update Product By Id")
def patch_product(ctx: typer.Context) -> None:
    catalog: ProductCatalog = ctx.obj
    try:
        products = catalog.load()
        if not _has_products(products):
            return
        product = find_by_id(products, ask_product_id())
        if product is None:
            typer.echo(NOT_FOUND)
            return
        typer.echo("===== Before Update =====")
        show_products([product])
        title, price = ask_product_fields()
        update_fields(product, title, price)
        typer.echo("===== After Update =====")
        show_products([product])
        catalog.save(products)
    except StoreError as exc:
        logger.error("Error getting products: %s", exc)
        return
    typer.echo("Product updated successfully")


@app.command("delete", help="Delete Product By Id")
def delete_product(ctx: typer.Context) -> None:
    catalog: ProductCatalog = ctx.obj
    try:
        products = catalog.load()
        if not _has_products(products):
            return
        product_id = ask_product_id()
        product = find_by_id(products, product_id)
        if product is None:
            typer.echo(NOT_FOUND)
            return
        show_products([product])
        remove_by_id(products, product_id)
        catalog.save(products)
    except StoreError as exc:
        logger.error("Error getting products: %s", exc)
        return
    typer.echo("Product deleted successfully")


@app.command("list", help="Get All Products")
def list_products(ctx: typer.Context) -> None:
    catalog: ProductCatalog = ctx.obj
    try:
        products = catalog.load()
    except StoreError as exc:
        logger.error("Error getting products: %s", exc)
        return
    if _has_products(products):
        show_products(products)


# Single-letter aliases.
app.command("a", hidden=True, help="Alias for add")(add_product)
app.command("g", hidden=True, help="Alias for get")(get_product)
app.command("p", hidden=True, help="Alias for patch")(patch_product)
app.command("d", hidden=True, help="Alias for delete")(delete_product)
app.command("l", hidden=True, help="Alias for list")(list_products)


def main() -> None:
    app()


if __name__ == "__main__":
    main()

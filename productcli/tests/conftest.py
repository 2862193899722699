import json

import pytest
from typer.testing import CliRunner

from productcli.models import Product


@pytest.fixture(autouse=True)
def configure_test_env(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    product_file = tmp_path / "data" / "products.json"
    monkeypatch.setenv("PRODUCTS_FILE", str(product_file))
    monkeypatch.delenv("PRODUCTS_LOG_LEVEL", raising=False)
    yield product_file


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def seed_products(configure_test_env):
    product_file = configure_test_env

    def _seed(*products: Product) -> None:
        product_file.parent.mkdir(parents=True, exist_ok=True)
        payload = [product.model_dump() for product in products]
        product_file.write_text(json.dumps(payload), encoding="utf-8")

    return _seed

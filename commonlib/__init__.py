"""Common helpers shared by the product catalog tools."""

from .storage import ListStore, StoreError, StoreParseError  # noqa: F401
from .config import CatalogConfig, load_catalog_config

__all__ = [
    "ListStore",
    "StoreError",
    "StoreParseError",
    "CatalogConfig",
    "load_catalog_config",
]

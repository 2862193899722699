"""Configuration helpers for the product catalog CLI.

Values come from an optional ``.env`` file and the process environment.
Centralising the lookup here lets tests prime a configuration without
touching the command module.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Mapping
import logging
import os

from dotenv import load_dotenv

DEFAULT_DATA_FILE = Path("data") / "products.json"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class CatalogConfig:
    """Strongly typed configuration for the catalog CLI."""

    data_file: Path
    log_level: str

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)


def _coerce_log_level(raw: str | None) -> str:
    name = (raw or "").strip().upper()
    if isinstance(logging.getLevelName(name), int):
        return name
    return DEFAULT_LOG_LEVEL


def load_catalog_config(
    base_dir: Path | None = None, env: Mapping[str, str] | None = None
) -> CatalogConfig:
    """Load catalog configuration from ``base_dir/.env`` and the env mapping."""

    base = Path(base_dir) if base_dir is not None else Path.cwd()
    load_dotenv(base / ".env")
    env_map = dict(os.environ if env is None else env)

    data_file = env_map.get("PRODUCTS_FILE", "").strip()
    log_level = _coerce_log_level(env_map.get("PRODUCTS_LOG_LEVEL"))

    return CatalogConfig(
        data_file=Path(data_file) if data_file else DEFAULT_DATA_FILE,
        log_level=log_level,
    )

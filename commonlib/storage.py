"""Shared storage helpers for the product catalog tools.

The catalog lives in a single JSON file holding a list of records. This module
owns reading and writing that file so the command layer never touches the
filesystem directly. Writes go through a temporary sibling file followed by
``os.replace`` so a crash mid-write leaves the previous catalog intact.
"""
from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Iterable, List

logger = logging.getLogger(__name__)


class StoreError(RuntimeError):
    """Raised when a persistence operation fails."""


class StoreParseError(StoreError):
    """Raised when the backing file exists but does not hold a JSON list."""


class ListStore:
    """JSON list store with atomic whole-file writes.

    A missing backing file reads as an empty list. Anything else that goes
    wrong (permissions, invalid JSON, a top-level value that is not a list)
    is raised to the caller.
    """

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    # ------------------------------------------------------------------
    # Persistence helpers
    # ------------------------------------------------------------------
    def _read_text(self) -> str | None:
        try:
            return self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except UnicodeDecodeError as exc:
            raise StoreParseError(f"{self.path} is not valid UTF-8: {exc}") from exc
        except OSError as exc:
            raise StoreError(f"Could not read {self.path}: {exc}") from exc

    def _write_text(self, payload: str) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise StoreError(f"Could not create {self.path.parent}: {exc}") from exc
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            with tmp_path.open("w", encoding="utf-8") as fh:
                fh.write(payload)
                fh.flush()
                os.fsync(fh.fileno())
            os.replace(tmp_path, self.path)
        except OSError as exc:
            raise StoreError(f"Could not write {self.path}: {exc}") from exc
        finally:
            tmp_path.unlink(missing_ok=True)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def load(self) -> List[Any]:
        raw = self._read_text()
        if raw is None:
            logger.debug("No catalog at %s; starting empty", self.path)
            return []
        if not raw.strip():
            return []
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise StoreParseError(f"{self.path} is not valid JSON: {exc}") from exc
        if not isinstance(data, list):
            raise StoreParseError(
                f"{self.path} must contain a JSON array, found {type(data).__name__}"
            )
        logger.debug("Loaded %d records from %s", len(data), self.path)
        return data

    def save(self, items: Iterable[Any]) -> List[Any]:
        snapshot = list(items)
        self._write_text(json.dumps(snapshot, separators=(",", ":")))
        logger.debug("Wrote %d records to %s", len(snapshot), self.path)
        return snapshot

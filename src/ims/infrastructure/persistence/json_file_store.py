"""JSON-file-backed implementation of KeyValueStore.

All keys live in a single JSON object on disk, e.g.::

    {"productIdCounter": "4", "products": "[{...}, ...]"}
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from ims.domain.exceptions import PersistenceError
from ims.domain.repository.key_value_store import KeyValueStore

logger = logging.getLogger(__name__)


class JsonFileKeyValueStore(KeyValueStore):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    # --- KeyValueStore interface ----------------------------------------------

    def get(self, key: str) -> str | None:
        value = self._load().get(key)
        logger.debug("Read key '%s' from %s (%s)", key, self._file_path,
                     "hit" if value is not None else "miss")
        return value

    def set(self, key: str, value: str) -> None:
        if not isinstance(value, str):
            raise TypeError(f"Store values must be str, got {type(value).__name__}")
        entries = self._load()
        entries[key] = value
        self._persist(entries)
        logger.debug("Wrote key '%s' to %s", key, self._file_path)

    # --- File helpers ---------------------------------------------------------

    def _load(self) -> dict[str, str]:
        if not self._file_path.exists():
            return {}
        try:
            text = self._file_path.read_text(encoding="utf-8")
        except OSError as exc:
            logger.error("Failed to read %s: %s", self._file_path, exc)
            raise PersistenceError(f"Cannot read {self._file_path}: {exc}") from exc
        if not text.strip():
            return {}
        try:
            entries = json.loads(text)
        except ValueError as exc:
            raise PersistenceError(f"{self._file_path} is not valid JSON: {exc}") from exc
        if not isinstance(entries, dict) or not all(
            isinstance(v, str) for v in entries.values()
        ):
            raise PersistenceError(f"{self._file_path} does not hold a key-value object")
        return entries

    def _persist(self, entries: dict[str, str]) -> None:
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text(
                json.dumps(entries, indent=2, sort_keys=True) + "\n", encoding="utf-8"
            )
        except OSError as exc:
            logger.error("Failed to write %s: %s", self._file_path, exc)
            raise PersistenceError(f"Cannot write {self._file_path}: {exc}") from exc

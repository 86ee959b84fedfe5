"""File-backed string key-value store with browser local storage semantics."""

from __future__ import annotations

from pathlib import Path
from threading import Lock
import json
import logging
import os

logger = logging.getLogger(__name__)


class LocalStorage:
    """Persists string values under string keys in a single JSON document.

    Writes go to a sibling temporary file that is renamed over the target, so a
    reader never observes a partially written document.
    """

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._lock = Lock()

    def get_item(self, key: str) -> str | None:
        with self._lock:
            value = self._read_all().get(key)
        return value if isinstance(value, str) else None

    def set_item(self, key: str, value: str) -> None:
        with self._lock:
            items = self._read_all()
            items[key] = value
            self._write_all(items)

    def _read_all(self) -> dict[str, object]:
        if not self._file_path.exists():
            return {}
        try:
            document = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.warning("Ignoring unreadable storage file %s: %s", self._file_path, exc)
            return {}
        if not isinstance(document, dict):
            logger.warning("Ignoring storage file %s: top level is not an object", self._file_path)
            return {}
        return document

    def _write_all(self, items: dict[str, object]) -> None:
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        temp_path = self._file_path.with_name(self._file_path.name + ".tmp")
        temp_path.write_text(json.dumps(items, ensure_ascii=False, indent=2), encoding="utf-8")
        os.replace(temp_path, self._file_path)

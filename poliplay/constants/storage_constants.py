"""Persistence constants for the question bank."""

from pathlib import Path

STORAGE_KEY: str = "poliplayQuestions"
DEFAULT_STORAGE_PATH: Path = Path.home() / ".poliplay" / "local_storage.json"

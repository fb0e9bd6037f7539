from __future__ import annotations

import logging
import threading
from pathlib import Path

from app.application.ports.key_value_store import KeyValueStorePort


class JsonFileKeyValueStore(KeyValueStorePort):
    """Stores each key as its own `<key>.json` file holding the raw string value."""

    def __init__(self, data_dir: str = "./data/storage") -> None:
        self._data_dir = Path(data_dir)
        self._data_dir.mkdir(parents=True, exist_ok=True)
        self._locks: dict[str, threading.Lock] = {}
        self._lock_lock = threading.Lock()  # Lock for managing locks dict
        self._logger = logging.getLogger(__name__)

    def _get_lock(self, key: str) -> threading.Lock:
        """Get or create a lock for a key."""
        with self._lock_lock:
            if key not in self._locks:
                self._locks[key] = threading.Lock()
            return self._locks[key]

    def _get_file_path(self, key: str) -> Path:
        return self._data_dir / f"{key}.json"

    def get_item(self, key: str) -> str | None:
        """Return the stored string, None if the key was never written."""
        file_path = self._get_file_path(key)
        with self._get_lock(key):
            if not file_path.exists():
                return None
            return file_path.read_text(encoding="utf-8")

    def set_item(self, key: str, value: str) -> None:
        """Write the value atomically via a temp file and rename."""
        file_path = self._get_file_path(key)
        temp_path = file_path.with_suffix(".json.tmp")

        with self._get_lock(key):
            try:
                temp_path.write_text(value, encoding="utf-8")
                temp_path.replace(file_path)
            except OSError:
                # Clean up temp file on error
                temp_path.unlink(missing_ok=True)
                raise
        self._logger.debug("Stored item", extra={"storage_key": key})

"""JSON file backed key-value store."""

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from fittrack.services.store import KeyValueStore

_logger = logging.getLogger(__name__)


@dataclass
class FileKeyValueStore(KeyValueStore):
    """Stores every key in one JSON document on disk."""

    path: Path
    prefix: str = "fittrack_"

    def get(self, key: str, default: object = None) -> object:
        """Return the stored value, or ``default`` when missing or corrupt."""
        value = self._load().get(self.prefix + key)
        return default if value is None else value

    def set(self, key: str, value: object) -> None:
        """Persist a value under the prefixed key."""
        data = self._load()
        data[self.prefix + key] = value
        self._write(data)

    def delete(self, key: str) -> None:
        """Remove a key from the document."""
        data = self._load()
        if data.pop(self.prefix + key, None) is not None:
            self._write(data)

    def _load(self) -> dict[str, object]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            _logger.warning("Store file unreadable, treating as empty: %s", self.path)
            return {}
        if not isinstance(data, dict):
            return {}
        return data

    def _write(self, data: dict[str, object]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        tmp_path.write_text(json.dumps(data, ensure_ascii=False, indent=2), "utf-8")
        tmp_path.replace(self.path)

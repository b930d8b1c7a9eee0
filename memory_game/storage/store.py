"""Key-value stores for persisted game data."""

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path

logger = logging.getLogger(__name__)


class KeyValueStore(ABC):
    """String key-value store (local-storage style)."""

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Get the value stored under key, or None if absent."""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value."""


class InMemoryStore(KeyValueStore):
    """Store that lives only as long as the process."""

    def __init__(self, data: dict[str, str] | None = None):
        self._data: dict[str, str] = dict(data) if data else {}

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class JsonFileStore(KeyValueStore):
    """Store kept in a single JSON file mapping keys to string values.

    A missing, unreadable or corrupt file reads as an empty store.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def _read_all(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning(f"Ignoring unreadable store {self.path}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Ignoring store {self.path}: expected a JSON object")
            return {}
        return {k: v for k, v in data.items() if isinstance(v, str)}

    def get(self, key: str) -> str | None:
        return self._read_all().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._read_all()
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)

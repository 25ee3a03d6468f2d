"""JSON file option store for OptionsGroup.

All groups live in one JSON document keyed by group name. Writes go to a
temporary sibling file which then replaces the original, so a crash mid-write
leaves the previous document intact.
"""

import copy
import json
import os
from pathlib import Path
from threading import RLock
from typing import Any, Dict, List, Union

from loguru import logger

from core.types import OptionMapping


class JsonFileOptionStore:
    """OptionStore backed by a single JSON file."""

    def __init__(self, path: Union[Path, str]):
        """Initialize the store.

        Args:
            path: Location of the JSON document; created on first write
        """
        self._path = Path(path)
        self._lock = RLock()

    @property
    def path(self) -> Path:
        """Path of the backing JSON document."""
        return self._path

    def _read_all(self) -> Dict[str, Any]:
        if not self._path.exists():
            return {}
        try:
            with open(self._path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError, UnicodeDecodeError) as e:
            logger.warning(f"Failed to read option store {self._path}, treating as empty: {e}")
            return {}

        if not isinstance(data, dict):
            logger.warning(f"Option store {self._path} does not hold an object, treating as empty")
            return {}
        return data

    def _write_all(self, data: Dict[str, Any]) -> bool:
        tmp_path = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, sort_keys=True)
            os.replace(tmp_path, self._path)
        except (OSError, TypeError, ValueError) as e:
            logger.error(f"Failed to write option store {self._path}: {e}")
            tmp_path.unlink(missing_ok=True)
            return False
        return True

    def load(self, name: str, default: Any = None) -> Any:
        with self._lock:
            data = self._read_all()
        if name not in data:
            return default
        return data[name]

    def save(self, name: str, value: OptionMapping) -> bool:
        with self._lock:
            data = self._read_all()
            data[name] = copy.deepcopy(value)
            saved = self._write_all(data)
        if saved:
            logger.debug(f"Saved group {name} to {self._path}")
        return saved

    def delete(self, name: str) -> bool:
        with self._lock:
            data = self._read_all()
            if name not in data:
                return False
            del data[name]
            return self._write_all(data)

    def exists(self, name: str) -> bool:
        with self._lock:
            return name in self._read_all()

    def list_names(self) -> List[str]:
        """Return the stored group names."""
        with self._lock:
            return sorted(self._read_all())

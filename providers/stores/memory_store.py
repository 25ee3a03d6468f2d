"""In-process option store for OptionsGroup."""

import copy
from typing import Any, Dict, List

from loguru import logger

from core.types import OptionMapping


class InMemoryOptionStore:
    """OptionStore kept in a process-local dictionary.

    Values are deep-copied on the way in and out so callers never share
    mutable state with the store.
    """

    def __init__(self, initial: Dict[str, OptionMapping] | None = None):
        """Initialize the store.

        Args:
            initial: Optional groups to seed the store with
        """
        self._data: Dict[str, OptionMapping] = copy.deepcopy(initial) if initial else {}

    def load(self, name: str, default: Any = None) -> Any:
        if name not in self._data:
            return default
        return copy.deepcopy(self._data[name])

    def save(self, name: str, value: OptionMapping) -> bool:
        self._data[name] = copy.deepcopy(value)
        logger.debug(f"Stored group {name} in memory ({len(value)} keys)")
        return True

    def delete(self, name: str) -> bool:
        return self._data.pop(name, None) is not None

    def exists(self, name: str) -> bool:
        return name in self._data

    def list_names(self) -> List[str]:
        """Return the stored group names in insertion order."""
        return list(self._data)

    def clear(self) -> None:
        """Drop every stored group."""
        self._data.clear()

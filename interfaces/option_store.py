"""OptionStore protocol for OptionsGroup - abstract interface for persistence backends."""

from typing import Any, Protocol

from core.types import OptionMapping


class OptionStore(Protocol):
    """Abstract protocol for option stores.

    A store maps group names to mappings of option values. Reads fall back
    to the caller's default, writes report success as a boolean. Neither
    raises for ordinary I/O problems.
    """

    def load(self, name: str, default: Any = None) -> Any:
        """Return the stored mapping for ``name``, or ``default`` when absent."""
        ...

    def save(self, name: str, value: OptionMapping) -> bool:
        """Persist ``value`` under ``name`` and report whether the write succeeded."""
        ...

    def delete(self, name: str) -> bool:
        """Remove ``name`` from the store. Returns False when nothing was removed."""
        ...

    def exists(self, name: str) -> bool:
        """Check whether ``name`` has a stored value."""
        ...

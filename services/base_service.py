"""Base service class for OptionsGroup services."""

from abc import ABC

from interfaces.option_store import OptionStore


class BaseService(ABC):
    """Base service class providing common functionality and dependency management."""

    def __init__(self, store: OptionStore):
        """Initialize service with option store dependency.

        Args:
            store: Option store implementation
        """
        self._store = store

    @property
    def store(self) -> OptionStore:
        """Get option store instance."""
        return self._store

"""Providers package for OptionsGroup - concrete implementations of the collaborator interfaces."""

from .database import DuckDBOptionStore
from .host import SettingsHost
from .stores import InMemoryOptionStore, JsonFileOptionStore

__all__ = [
    # Option stores
    "InMemoryOptionStore",
    "JsonFileOptionStore",
    "DuckDBOptionStore",

    # Host
    "SettingsHost",
]

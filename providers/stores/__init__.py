"""Option store providers package for OptionsGroup - file and in-process stores."""

from .json_store import JsonFileOptionStore
from .memory_store import InMemoryOptionStore

__all__ = [
    "InMemoryOptionStore",
    "JsonFileOptionStore",
]

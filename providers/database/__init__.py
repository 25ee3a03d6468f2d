"""Database providers package for OptionsGroup - database-backed option stores."""

from .duckdb_provider import DuckDBOptionStore

__all__ = [
    "DuckDBOptionStore",
]

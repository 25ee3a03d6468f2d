"""DuckDB provider implementation for OptionsGroup - option store backed by a DuckDB table.

Each group is one row of the ``options`` table: the group name as primary
key, the mapping as JSON text, an autoload flag and the last write time.
"""

import json
from pathlib import Path
from typing import Any, List, Optional, Union

import duckdb
from loguru import logger

from core.exceptions import StoreError
from core.models import StoredOption
from core.types import OptionMapping


class DuckDBOptionStore:
    """DuckDB implementation of the OptionStore protocol."""

    def __init__(self, db_path: Union[Path, str], autoload: bool = True):
        """Initialize DuckDB option store.

        Args:
            db_path: Path to DuckDB database file or ":memory:" for in-memory database
            autoload: Autoload flag given to newly inserted groups
        """
        self._db_path = db_path
        self._autoload = autoload
        self.connection: Optional[Any] = None

    @property
    def db_path(self) -> Union[Path, str]:
        """Database connection path or identifier."""
        return self._db_path

    @property
    def is_connected(self) -> bool:
        """Check if database connection is active."""
        return self.connection is not None

    def connect(self) -> None:
        """Establish database connection and initialize schema.

        Raises:
            StoreError: If the database cannot be opened or the schema created
        """
        logger.info(f"Connecting to DuckDB option store: {self.db_path}")

        try:
            # Ensure parent directory exists for file-based databases
            if str(self.db_path) != ":memory:":
                Path(self.db_path).parent.mkdir(parents=True, exist_ok=True)

            self.connection = duckdb.connect(str(self.db_path))
            self.create_schema()
        except (duckdb.Error, OSError) as e:
            self.connection = None
            logger.error(f"DuckDB connection failed: {e}")
            raise StoreError("duckdb", "connect", str(e), {"db_path": str(self.db_path)}, e)

        logger.info("DuckDB option store ready")

    def disconnect(self) -> None:
        """Close database connection."""
        if self.connection is not None:
            self.connection.close()
            self.connection = None
            logger.info("DuckDB connection closed")

    def __enter__(self) -> "DuckDBOptionStore":
        self._ensure_connection()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.disconnect()

    def _ensure_connection(self) -> Any:
        if self.connection is None:
            self.connect()
        return self.connection

    def create_schema(self) -> None:
        """Create the options table."""
        if self.connection is None:
            raise RuntimeError("No database connection")

        self.connection.execute("""
            CREATE TABLE IF NOT EXISTS options (
                option_name TEXT PRIMARY KEY,
                option_value TEXT NOT NULL,
                autoload BOOLEAN DEFAULT TRUE,
                updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
        """)
        logger.debug("DuckDB options schema ensured")

    def get_record(self, name: str) -> Optional[StoredOption]:
        """Get the stored row for a group."""
        connection = self._ensure_connection()

        try:
            result = connection.execute("""
                SELECT option_name, option_value, autoload, updated_at
                FROM options WHERE option_name = ?
            """, [name]).fetchone()
        except duckdb.Error as e:
            logger.error(f"Failed to read group {name}: {e}")
            return None

        if not result:
            return None

        return StoredOption.from_row(result[0], result[1], result[2], result[3])

    def load(self, name: str, default: Any = None) -> Any:
        record = self.get_record(name)
        if record is None:
            return default
        return record.value

    def save(self, name: str, value: OptionMapping) -> bool:
        connection = self._ensure_connection()

        try:
            encoded = json.dumps(value, sort_keys=True)
        except (TypeError, ValueError) as e:
            logger.error(f"Group {name} is not serializable: {e}")
            return False

        try:
            connection.execute("""
                INSERT INTO options (option_name, option_value, autoload, updated_at)
                VALUES (?, ?, ?, CURRENT_TIMESTAMP)
                ON CONFLICT (option_name) DO UPDATE SET
                    option_value = excluded.option_value,
                    updated_at = excluded.updated_at
            """, [name, encoded, self._autoload])
        except duckdb.Error as e:
            logger.error(f"Failed to save group {name}: {e}")
            return False

        logger.debug(f"Saved group {name} to DuckDB ({len(value)} keys)")
        return True

    def delete(self, name: str) -> bool:
        if not self.exists(name):
            return False

        try:
            self._ensure_connection().execute("DELETE FROM options WHERE option_name = ?", [name])
        except duckdb.Error as e:
            logger.error(f"Failed to delete group {name}: {e}")
            return False

        logger.info(f"Group {name} deleted")
        return True

    def exists(self, name: str) -> bool:
        connection = self._ensure_connection()

        try:
            result = connection.execute(
                "SELECT COUNT(*) FROM options WHERE option_name = ?", [name]
            ).fetchone()
        except duckdb.Error as e:
            logger.error(f"Failed to check group {name}: {e}")
            return False

        return bool(result and result[0])

    def set_autoload(self, name: str, autoload: bool) -> bool:
        """Change the autoload flag of an existing group."""
        if not self.exists(name):
            return False

        try:
            self._ensure_connection().execute(
                "UPDATE options SET autoload = ? WHERE option_name = ?", [autoload, name]
            )
        except duckdb.Error as e:
            logger.error(f"Failed to update autoload for {name}: {e}")
            return False
        return True

    def list_names(self, autoload_only: bool = False) -> List[str]:
        """Return stored group names, optionally only those flagged for autoload."""
        connection = self._ensure_connection()

        query = "SELECT option_name FROM options"
        if autoload_only:
            query += " WHERE autoload"
        query += " ORDER BY option_name"

        try:
            rows = connection.execute(query).fetchall()
        except duckdb.Error as e:
            logger.error(f"Failed to list groups: {e}")
            return []

        return [row[0] for row in rows]

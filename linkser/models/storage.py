"""SQLite key/value storage for persisted application state."""

import json
import logging
import sqlite3
from pathlib import Path
from typing import Any, List, Optional

from ..utils.app_paths import get_app_data_dir

logger = logging.getLogger(__name__)

# Key the whole-state snapshot is stored under
APP_KEY = "app"


class Storage:
    """Manages the SQLite connection and the key/value table."""

    def __init__(self, db_path: Optional[Path] = None):
        """Initialize storage.

        Args:
            db_path: Path to the database file. If None, uses the default
                     application data directory.
        """
        if db_path is None:
            db_path = get_app_data_dir() / "linkser.db"

        self.db_path = Path(db_path)
        self.connection: Optional[sqlite3.Connection] = None

    def connect(self) -> sqlite3.Connection:
        """Establish database connection."""
        if self.connection is None:
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
            self.connection = sqlite3.connect(str(self.db_path))
            self.connection.row_factory = sqlite3.Row
        return self.connection

    def close(self):
        """Close database connection."""
        if self.connection:
            self.connection.close()
            self.connection = None

    def initialize_schema(self):
        """Create the storage table if it doesn't exist."""
        conn = self.connect()
        conn.execute("""
            CREATE TABLE IF NOT EXISTS app_storage (
                key TEXT PRIMARY KEY,
                value TEXT NOT NULL,
                updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
        """)
        conn.commit()

    def get_value(self, key: str) -> Optional[Any]:
        """Get the decoded value stored under a key.

        Returns:
            The JSON-decoded value, or None if the key is missing or the
            stored blob cannot be decoded
        """
        cursor = self.connect().execute(
            "SELECT value FROM app_storage WHERE key = ?", (key,)
        )
        row = cursor.fetchone()
        if row is None:
            return None

        try:
            return json.loads(row["value"])
        except json.JSONDecodeError as e:
            logger.warning(f"Ignoring undecodable value for key '{key}': {e}")
            return None

    def set_value(self, key: str, value: Any):
        """Encode a value as JSON and store it under a key."""
        conn = self.connect()
        conn.execute(
            """
            INSERT INTO app_storage (key, value) VALUES (?, ?)
            ON CONFLICT(key) DO UPDATE
            SET value = excluded.value, updated_at = CURRENT_TIMESTAMP
            """,
            (key, json.dumps(value)),
        )
        conn.commit()

    def delete_value(self, key: str):
        """Remove a key from storage."""
        conn = self.connect()
        conn.execute("DELETE FROM app_storage WHERE key = ?", (key,))
        conn.commit()

    def keys(self) -> List[str]:
        """Get all stored keys."""
        cursor = self.connect().execute("SELECT key FROM app_storage ORDER BY key")
        return [row["key"] for row in cursor.fetchall()]


# Global storage instance
_storage: Optional[Storage] = None


def get_storage(db_path: Optional[Path] = None) -> Storage:
    """Get or create the global storage instance."""
    global _storage
    if _storage is None:
        _storage = Storage(db_path)
        _storage.initialize_schema()
    return _storage


def reset_storage():
    """Reset the global storage instance (mainly for testing)."""
    global _storage
    if _storage:
        _storage.close()
    _storage = None

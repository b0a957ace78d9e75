"""
Database schema initialization and version handling.
The schema version lives in PRAGMA user_version. A database stamped with a
different version is wiped and recreated; there is no data migration.
"""

import logging
from typing import Optional

from todolist_app.db.base_repository import BaseRepository, ConnectionPool

logger = logging.getLogger(__name__)

DATABASE_VERSION = 1
TABLE_NAME = 'tasks'

SQL_CREATE_TABLE = f"""
CREATE TABLE IF NOT EXISTS {TABLE_NAME} (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    title TEXT NOT NULL,
    description TEXT,
    deadline TEXT,
    duration TEXT,
    is_done INTEGER DEFAULT 0
);
"""


class DatabaseInitializer(BaseRepository):
    """Initialize and manage database schema."""

    def __init__(self, pool: Optional[ConnectionPool] = None, version: int = DATABASE_VERSION):
        super().__init__(pool)
        self.version = version

    def get_version(self) -> int:
        row = self.execute_query("PRAGMA user_version", fetch_one=True)
        return row[0] if row else 0

    def setup_database(self):
        """
        Create the tasks table if needed. Idempotent - safe to call multiple times.

        A stored version other than the current one triggers a destructive
        upgrade: the table is dropped and created again.
        """
        stored_version = self.get_version()

        if stored_version == self.version:
            # Still make sure the table exists, e.g. after a manual DROP
            self.execute_query(SQL_CREATE_TABLE)
            return

        if stored_version == 0:
            self.execute_transaction(
                [(SQL_CREATE_TABLE, ()), (f"PRAGMA user_version = {int(self.version)}", ())],
                description=f"Database schema v{self.version} created.",
            )
            return

        logger.warning(
            "Schema version changed %s -> %s, dropping table %s",
            stored_version, self.version, TABLE_NAME,
        )
        self.execute_transaction(
            [
                (f"DROP TABLE IF EXISTS {TABLE_NAME}", ()),
                (SQL_CREATE_TABLE, ()),
                (f"PRAGMA user_version = {int(self.version)}", ()),
            ],
            description=f"Database schema upgraded to v{self.version}.",
        )

    def verify_schema(self) -> bool:
        """
        Verify that the tasks table exists and carries the expected version.

        Returns:
            True if the schema is current, False otherwise
        """
        row = self.execute_query(
            "SELECT name FROM sqlite_master WHERE type='table' AND name = ?",
            (TABLE_NAME,),
            fetch_one=True
        )
        if row is None:
            logger.warning("Missing table: %s", TABLE_NAME)
            return False

        stored_version = self.get_version()
        if stored_version != self.version:
            logger.warning("Schema version %s, expected %s", stored_version, self.version)
            return False

        return True

    def reset_database(self):
        """
        Drop the tasks table and clear the version (for development/testing only).
        WARNING: This will delete all data!
        """
        self.execute_transaction(
            [(f"DROP TABLE IF EXISTS {TABLE_NAME}", ()), ("PRAGMA user_version = 0", ())],
            description="Database reset - tasks table dropped.",
        )

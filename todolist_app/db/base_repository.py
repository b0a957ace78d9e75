"""
Base Repository class with connection pooling and common database operations.
All repository classes inherit from this to avoid code duplication.
"""

import contextlib
import logging
import sqlite3
import threading
from queue import Empty, Full, Queue
from typing import Any, Iterator, List, Optional, Tuple

from todolist_app.db.errors import StoreUnavailableError

logger = logging.getLogger(__name__)

DB_NAME = 'tasks.db'


class ConnectionPool:
    """Thread-safe connection pool for SQLite database."""

    def __init__(self, db_name: str = DB_NAME, pool_size: int = 5):
        self.db_name = str(db_name)
        self.pool_size = pool_size
        self.pool = Queue(maxsize=pool_size)
        self.lock = threading.Lock()
        self._initialized = False
        # Connections opened for the current db_name; anything else is closed on return
        self._owned = set()

    def initialize(self):
        """Fill the pool with fresh connections."""
        if self._initialized:
            return

        with self.lock:
            if not self._initialized:
                for _ in range(self.pool_size):
                    self.pool.put(self._create_connection())
                self._initialized = True
                logger.debug("Connection pool ready db=%s size=%s", self.db_name, self.pool_size)

    def reconfigure(self, db_name: str, pool_size: int):
        """Point the pool at another database file, dropping open connections."""
        with self.lock:
            self._drain()
            self._owned = set()
            self.db_name = str(db_name)
            self.pool_size = pool_size
            self.pool = Queue(maxsize=pool_size)
            self._initialized = False

    def _create_connection(self) -> sqlite3.Connection:
        """Create a single database connection. Caller holds the lock."""
        try:
            conn = sqlite3.connect(self.db_name, check_same_thread=False)
            conn.row_factory = sqlite3.Row
        except sqlite3.Error as e:
            logger.error("Database connection error db=%s: %s", self.db_name, e)
            raise StoreUnavailableError(f"Cannot open database {self.db_name}: {e}") from e
        self._owned.add(conn)
        return conn

    def get_connection(self) -> sqlite3.Connection:
        """Get a connection from the pool, or open a new one if it is empty."""
        try:
            return self.pool.get_nowait()
        except Empty:
            with self.lock:
                return self._create_connection()

    def return_connection(self, conn: sqlite3.Connection):
        """Return a connection to the pool."""
        with self.lock:
            if conn not in self._owned:
                # Borrowed before a reconfigure; it points at the old file
                logger.debug("Closing connection from a previous pool configuration")
                with contextlib.suppress(sqlite3.Error):
                    conn.close()
                return
            try:
                self.pool.put_nowait(conn)
            except Full:
                self._owned.discard(conn)
                conn.close()

    def close_all(self):
        """Close all connections in the pool."""
        with self.lock:
            self._drain()
            self._initialized = False

    def _drain(self):
        while True:
            try:
                conn = self.pool.get_nowait()
            except Empty:
                break
            self._owned.discard(conn)
            with contextlib.suppress(sqlite3.Error):
                conn.close()


# Global connection pool instance
_connection_pool = ConnectionPool(DB_NAME)


def get_default_pool() -> ConnectionPool:
    return _connection_pool


class BaseRepository:
    """
    Base repository class providing common database operations and connection management.
    Every operation borrows a connection and hands it back on all exit paths.
    """

    def __init__(self, pool: Optional[ConnectionPool] = None):
        self.pool = pool or _connection_pool

    @contextlib.contextmanager
    def connection(self) -> Iterator[sqlite3.Connection]:
        """
        Borrow a connection for one logical operation.

        Commits when the block finishes, rolls back when it raises.
        sqlite3 errors are re-raised as StoreUnavailableError.
        """
        conn = self.pool.get_connection()
        try:
            yield conn
            conn.commit()
        except sqlite3.Error as e:
            with contextlib.suppress(sqlite3.Error):
                conn.rollback()
            logger.error("Database error db=%s: %s", self.pool.db_name, e)
            raise StoreUnavailableError(str(e)) from e
        except BaseException:
            with contextlib.suppress(sqlite3.Error):
                conn.rollback()
            raise
        finally:
            self.pool.return_connection(conn)

    def execute_query(
        self,
        query: str,
        params: Tuple = (),
        fetch_one: bool = False,
        fetch_all: bool = False
    ) -> Any:
        """
        Execute a database query with proper connection management.

        Args:
            query: SQL query string
            params: Query parameters (for parameterized queries)
            fetch_one: If True, return single row
            fetch_all: If True, return all rows

        Returns:
            The fetched row(s), or the affected row count for write statements

        Raises:
            StoreUnavailableError: the database could not be read or written
        """
        with self.connection() as conn:
            cursor = conn.execute(query, params)
            if fetch_one:
                return cursor.fetchone()
            if fetch_all:
                return cursor.fetchall()
            return cursor.rowcount

    def execute_transaction(
        self,
        operations: List[Tuple[str, Tuple]],
        description: str = ""
    ):
        """
        Execute multiple operations in a single transaction.

        Args:
            operations: List of (query, params) tuples
            description: Human-readable description for logging
        """
        with self.connection() as conn:
            for query, params in operations:
                conn.execute(query, params)
        if description:
            logger.info("%s", description)

    def get_lastrowid(self, query: str, params: Tuple = ()) -> int:
        """
        Execute INSERT query and return the last inserted row ID.

        Args:
            query: SQL INSERT query
            params: Query parameters

        Returns:
            Last inserted row ID
        """
        with self.connection() as conn:
            cursor = conn.execute(query, params)
            return cursor.lastrowid

"""
Task Repository - durable CRUD over the tasks table.
"""

import logging
import threading
from typing import List, Optional

from todolist_app.db.base_repository import BaseRepository, ConnectionPool
from todolist_app.db.database_initializer import DatabaseInitializer
from todolist_app.models.data_models import Task

logger = logging.getLogger(__name__)


def _row_to_task(row) -> Task:
    return Task(
        id=row['id'],
        title=row['title'],
        description=row['description'] or "",
        deadline=row['deadline'] or "",
        duration=row['duration'] or "",
        is_done=bool(row['is_done']),
    )


class TaskRepository(BaseRepository):
    """Handle all task-related database operations."""

    def __init__(self, pool: Optional[ConnectionPool] = None):
        super().__init__(pool)
        self._schema_lock = threading.Lock()
        self._schema_ready = False

    def _ensure_schema(self):
        """Create the table on first use."""
        if self._schema_ready:
            return
        with self._schema_lock:
            if not self._schema_ready:
                DatabaseInitializer(self.pool).setup_database()
                self._schema_ready = True

    def insert_task(self, task: Task) -> int:
        """
        Insert a new row built from every field except the id.

        Args:
            task: Task to persist; its content is not validated here

        Returns:
            The id assigned by the database

        Raises:
            StoreUnavailableError: the database could not be written
        """
        self._ensure_schema()
        task_id = self.get_lastrowid(
            """
            INSERT INTO tasks (title, description, deadline, duration, is_done)
            VALUES (?, ?, ?, ?, ?)
            """,
            (task.title, task.description, task.deadline, task.duration, int(task.is_done))
        )
        logger.debug("Inserted task id=%s", task_id)
        return task_id

    def update_task_is_done(self, task_id: int, is_done: bool) -> bool:
        """
        Update only the completion flag.

        Returns:
            True if a row matched, False if the id is unknown (ignored)
        """
        self._ensure_schema()
        updated = self.execute_query(
            "UPDATE tasks SET is_done = ? WHERE id = ?",
            (int(is_done), task_id)
        )
        if not updated:
            logger.debug("update_task_is_done: no task with id=%s", task_id)
        return updated > 0

    def delete_task(self, task_id: int) -> bool:
        """
        Delete a task. Deleting an id that does not exist is not an error.

        Returns:
            True if a row was removed, False otherwise
        """
        self._ensure_schema()
        deleted = self.execute_query("DELETE FROM tasks WHERE id = ?", (task_id,))
        if not deleted:
            logger.debug("delete_task: no task with id=%s", task_id)
        return deleted > 0

    def get_all_tasks(self) -> List[Task]:
        """
        Get all tasks in insertion order.

        Returns:
            List of Task objects
        """
        self._ensure_schema()
        rows = self.execute_query("SELECT * FROM tasks ORDER BY id ASC", fetch_all=True)
        return [_row_to_task(row) for row in rows]

    def get_task_by_id(self, task_id: int) -> Optional[Task]:
        self._ensure_schema()
        row = self.execute_query(
            "SELECT * FROM tasks WHERE id = ?",
            (task_id,),
            fetch_one=True
        )
        return _row_to_task(row) if row else None

    def count_tasks(self) -> int:
        self._ensure_schema()
        row = self.execute_query("SELECT COUNT(*) FROM tasks", fetch_one=True)
        return int(row[0]) if row else 0

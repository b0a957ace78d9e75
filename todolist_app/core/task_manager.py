import logging
import threading
from typing import Optional

from PySide6.QtCore import QObject, Signal
from todolist_app.core.task_list_model import TaskListModel
from todolist_app.db.errors import StoreUnavailableError
from todolist_app.db.task_repository import TaskRepository
from todolist_app.models.data_models import Task

logger = logging.getLogger(__name__)


class TaskManager(QObject):
    """
    Keeps the task list model and the database in step.

    The store is always written first and the model mutated second, so a
    failed write never leaves an in-memory change behind. After any store
    failure the model is re-derived from the database.
    """

    task_created_signal = Signal(int)  # task_id
    task_updated_signal = Signal(int)  # task_id
    task_deleted_signal = Signal(int)  # task_id
    tasks_loaded_signal = Signal(int)  # number of tasks
    operation_failed_signal = Signal(str)  # user-facing message

    def __init__(self, repository: Optional[TaskRepository] = None,
                 model: Optional[TaskListModel] = None, parent=None):
        super().__init__(parent)
        self.repository = repository if repository is not None else TaskRepository()
        self.model = model if model is not None else TaskListModel()
        # Position lookups and the actions that use them happen under this lock
        self._lock = threading.RLock()

    def load_tasks(self) -> bool:
        """Seed the model from the database (startup)."""
        with self._lock:
            try:
                tasks = self.repository.get_all_tasks()
            except StoreUnavailableError as e:
                failure = self._log_failure("load tasks", e)
            else:
                failure = None
                self.model.reset_tasks(tasks)

        if failure:
            self.operation_failed_signal.emit(failure)
            return False
        logger.info("Loaded %s task(s)", len(tasks))
        self.tasks_loaded_signal.emit(len(tasks))
        return True

    def reload(self) -> bool:
        """Re-derive the model from a fresh read of the database."""
        with self._lock:
            try:
                tasks = self.repository.get_all_tasks()
            except StoreUnavailableError:
                logger.exception("Resync failed, keeping current list")
                return False
            self.model.reset_tasks(tasks)
        logger.info("Resynced list from database (%s task(s))", len(tasks))
        return True

    def create_task(self, title: str, description: str = "", deadline: str = "",
                    duration: str = "") -> Optional[int]:
        """
        Persist a new task and append it to the list.

        Fields are expected to be validated by the caller (non-empty title).
        Returns the new task id, or None if the database write failed.
        """
        task = Task(title=title, description=description, deadline=deadline, duration=duration)
        with self._lock:
            try:
                task.id = self.repository.insert_task(task)
            except StoreUnavailableError as e:
                failure = self._fail_and_resync("save the task", e)
            else:
                failure = None
                self.model.append(task)

        if failure:
            self.operation_failed_signal.emit(failure)
            return None
        logger.info("Task created id=%s", task.id)
        self.task_created_signal.emit(task.id)
        return task.id

    def toggle_done_at(self, position: int, expected_id: Optional[int] = None) -> bool:
        """
        Flip the done flag of the task shown at `position`.

        `expected_id` is the id the caller saw at that position; if the list
        changed in the meantime the action is refused. A task whose row is
        gone from the database is dropped from the list by a resync.
        """
        failure = None
        with self._lock:
            task = self._resolve(position, expected_id)
            if task is None:
                return False

            if task.is_persisted:
                try:
                    found = self.repository.update_task_is_done(task.id, not task.is_done)
                except StoreUnavailableError as e:
                    failure = self._fail_and_resync("update the task", e)
                else:
                    if not found:
                        logger.warning("Task id=%s no longer in database, resyncing", task.id)
                        self.reload()
                        return False
            if failure is None:
                self.model.toggle_done_at(position)

        if failure:
            self.operation_failed_signal.emit(failure)
            return False
        logger.info("Task id=%s done=%s", task.id, task.is_done)
        self.task_updated_signal.emit(task.id)
        return True

    def delete_at(self, position: int, expected_id: Optional[int] = None) -> bool:
        """Delete the task shown at `position` from the database and the list."""
        failure = None
        with self._lock:
            task = self._resolve(position, expected_id)
            if task is None:
                return False

            if task.is_persisted:
                try:
                    self.repository.delete_task(task.id)
                except StoreUnavailableError as e:
                    failure = self._fail_and_resync("delete the task", e)
            if failure is None:
                # Same position that was resolved above
                self.model.remove_at(position)

        if failure:
            self.operation_failed_signal.emit(failure)
            return False
        logger.info("Task deleted id=%s", task.id)
        self.task_deleted_signal.emit(task.id)
        return True

    def _resolve(self, position: int, expected_id: Optional[int]) -> Optional[Task]:
        try:
            task = self.model.task_at(position)
        except IndexError:
            logger.warning("Ignoring action on stale position %s (size=%s)",
                           position, self.model.rowCount())
            return None

        if expected_id is not None and task.id != expected_id:
            logger.warning("Ignoring action on stale position %s: expected id=%s, found id=%s",
                           position, expected_id, task.id)
            return None
        return task

    def _log_failure(self, action: str, error: Exception) -> str:
        logger.error("Could not %s: %s", action, error)
        return f"Could not {action}: {error}"

    def _fail_and_resync(self, action: str, error: Exception) -> str:
        """Resync the list; the returned message is emitted once the lock is released."""
        message = self._log_failure(action, error)
        self.reload()
        return message

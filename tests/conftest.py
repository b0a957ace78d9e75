# tests/conftest.py

from __future__ import annotations

import os
from pathlib import Path

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtWidgets import QApplication  # noqa: E402

from todolist_app.db.base_repository import ConnectionPool  # noqa: E402
from todolist_app.db.errors import StoreUnavailableError  # noqa: E402
from todolist_app.db.task_repository import TaskRepository  # noqa: E402


@pytest.fixture(scope="session", autouse=True)
def qapp():
    """Signals, item models and dialogs expect a Qt application object to exist."""
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture()
def db_path(tmp_path: Path) -> Path:
    return tmp_path / "tasks.db"


@pytest.fixture()
def pool(db_path: Path):
    pool = ConnectionPool(str(db_path), pool_size=2)
    yield pool
    pool.close_all()


@pytest.fixture()
def repository(pool: ConnectionPool) -> TaskRepository:
    return TaskRepository(pool)


class FlakyTaskRepository:
    """
    Wraps a real TaskRepository and fails chosen operations on demand.

    Every call is recorded so tests can assert which store operations ran.
    """

    def __init__(self, inner: TaskRepository) -> None:
        self.inner = inner
        self.fail_on: set[str] = set()
        self.calls: list[tuple] = []

    def _call(self, name: str, *args):
        self.calls.append((name, *args))
        if name in self.fail_on:
            raise StoreUnavailableError(f"{name} failed: disk I/O error")
        return getattr(self.inner, name)(*args)

    def insert_task(self, task):
        return self._call("insert_task", task)

    def update_task_is_done(self, task_id, is_done):
        return self._call("update_task_is_done", task_id, is_done)

    def delete_task(self, task_id):
        return self._call("delete_task", task_id)

    def get_all_tasks(self):
        return self._call("get_all_tasks")

    def call_names(self) -> list[str]:
        return [c[0] for c in self.calls]


@pytest.fixture()
def flaky_repository(repository: TaskRepository) -> FlakyTaskRepository:
    return FlakyTaskRepository(repository)

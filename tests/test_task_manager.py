# tests/test_task_manager.py

from __future__ import annotations

import random
import threading

from todolist_app.core.task_manager import TaskManager
from todolist_app.db.task_repository import TaskRepository
from todolist_app.models.data_models import Task


def _record(signal) -> list:
    events: list = []
    signal.connect(lambda *args: events.append(args))
    return events


def _store_ids(repository) -> list[int]:
    inner = getattr(repository, "inner", repository)
    return [t.id for t in inner.get_all_tasks()]


def test_load_tasks_seeds_model_in_store_order(repository: TaskRepository) -> None:
    ids = [repository.insert_task(Task(title)) for title in ("a", "b", "c")]
    repository.update_task_is_done(ids[1], True)

    manager = TaskManager(repository)
    loaded = _record(manager.tasks_loaded_signal)

    assert manager.load_tasks() is True
    assert manager.model.ids() == ids
    assert [t.is_done for t in manager.model.tasks()] == [False, True, False]
    assert loaded == [(3,)]


def test_create_toggle_delete_scenario(repository: TaskRepository) -> None:
    manager = TaskManager(repository)
    manager.load_tasks()
    created = _record(manager.task_created_signal)

    task_id = manager.create_task("Buy milk", "", "", "")

    assert task_id is not None and task_id >= 0
    assert created == [(task_id,)]
    assert manager.model.task_at(0).id == task_id
    assert repository.get_task_by_id(task_id).is_done is False

    assert manager.toggle_done_at(0) is True
    assert manager.model.task_at(0).is_done is True
    assert repository.get_task_by_id(task_id).is_done is True

    assert manager.delete_at(0) is True
    assert manager.model.rowCount() == 0
    assert task_id not in _store_ids(repository)


def test_delete_middle_task_keeps_others_in_order(repository: TaskRepository) -> None:
    manager = TaskManager(repository)
    first = manager.create_task("first")
    second = manager.create_task("second")
    third = manager.create_task("third")

    assert manager.delete_at(1) is True

    assert [t.title for t in manager.model.tasks()] == ["first", "third"]
    assert manager.model.ids() == [first, third]
    assert repository.get_task_by_id(second) is None


def test_model_and_store_never_drift(repository: TaskRepository) -> None:
    rng = random.Random(1234)
    manager = TaskManager(repository)
    manager.load_tasks()

    for step in range(60):
        size = manager.model.rowCount()
        action = rng.choice(["create", "toggle", "delete"]) if size else "create"
        if action == "create":
            manager.create_task(f"task {step}")
        elif action == "toggle":
            manager.toggle_done_at(rng.randrange(size))
        else:
            manager.delete_at(rng.randrange(size))

        stored = repository.get_all_tasks()
        assert manager.model.ids() == [t.id for t in stored]
        assert [t.is_done for t in manager.model.tasks()] == [t.is_done for t in stored]


def test_insert_failure_appends_nothing(flaky_repository) -> None:
    manager = TaskManager(flaky_repository)
    manager.create_task("kept")
    failures = _record(manager.operation_failed_signal)
    created = _record(manager.task_created_signal)

    flaky_repository.fail_on.add("insert_task")
    assert manager.create_task("lost") is None

    assert len(failures) == 1
    assert "save the task" in failures[0][0]
    assert created == []
    assert [t.title for t in manager.model.tasks()] == ["kept"]
    assert manager.model.ids() == _store_ids(flaky_repository)


def test_toggle_failure_leaves_flag_untouched(flaky_repository) -> None:
    manager = TaskManager(flaky_repository)
    task_id = manager.create_task("stubborn")
    failures = _record(manager.operation_failed_signal)
    updated = _record(manager.task_updated_signal)

    flaky_repository.fail_on.add("update_task_is_done")
    assert manager.toggle_done_at(0) is False

    assert len(failures) == 1
    assert updated == []
    assert manager.model.task_at(0).is_done is False
    assert flaky_repository.inner.get_task_by_id(task_id).is_done is False


def test_delete_failure_keeps_row_everywhere(flaky_repository) -> None:
    manager = TaskManager(flaky_repository)
    task_id = manager.create_task("persistent")
    failures = _record(manager.operation_failed_signal)
    deleted = _record(manager.task_deleted_signal)

    flaky_repository.fail_on.add("delete_task")
    assert manager.delete_at(0) is False

    assert len(failures) == 1
    assert deleted == []
    assert manager.model.ids() == [task_id]
    assert _store_ids(flaky_repository) == [task_id]


def test_store_failure_resyncs_model_from_database(flaky_repository) -> None:
    manager = TaskManager(flaky_repository)
    manager.create_task("mine")
    # Row written behind the manager's back
    outside_id = flaky_repository.inner.insert_task(Task("outside"))

    flaky_repository.fail_on.add("update_task_is_done")
    manager.toggle_done_at(0)

    assert outside_id in manager.model.ids()
    assert manager.model.ids() == _store_ids(flaky_repository)


def test_load_failure_reports_once_and_keeps_model(flaky_repository) -> None:
    manager = TaskManager(flaky_repository)
    failures = _record(manager.operation_failed_signal)

    flaky_repository.fail_on.add("get_all_tasks")

    assert manager.load_tasks() is False
    assert len(failures) == 1
    assert manager.model.rowCount() == 0


def test_stale_expected_id_is_refused(flaky_repository) -> None:
    manager = TaskManager(flaky_repository)
    first = manager.create_task("first")
    second = manager.create_task("second")
    flaky_repository.calls.clear()

    # The view still thinks `first` sits at position 1
    assert manager.delete_at(1, expected_id=first) is False
    assert manager.toggle_done_at(1, expected_id=first) is False

    assert flaky_repository.calls == []
    assert manager.model.ids() == [first, second]

    assert manager.delete_at(1, expected_id=second) is True
    assert manager.model.ids() == [first]


def test_out_of_range_position_is_ignored(flaky_repository) -> None:
    manager = TaskManager(flaky_repository)
    manager.create_task("only")
    flaky_repository.calls.clear()

    assert manager.toggle_done_at(5) is False
    assert manager.delete_at(-1) is False
    assert flaky_repository.calls == []


def test_unsaved_task_never_reaches_store(flaky_repository) -> None:
    manager = TaskManager(flaky_repository)
    manager.model.append(Task("draft"))

    assert manager.toggle_done_at(0) is True
    assert manager.model.task_at(0).is_done is True
    assert manager.delete_at(0) is True

    assert "update_task_is_done" not in flaky_repository.call_names()
    assert "delete_task" not in flaky_repository.call_names()
    assert manager.model.rowCount() == 0


def test_toggle_of_row_missing_from_store_resyncs(repository: TaskRepository) -> None:
    manager = TaskManager(repository)
    a = manager.create_task("a")
    b = manager.create_task("b")
    updated = _record(manager.task_updated_signal)

    # Row removed behind the manager's back
    repository.delete_task(a)

    assert manager.toggle_done_at(0) is False
    assert updated == []
    assert manager.model.ids() == _store_ids(repository) == [b]
    assert manager.model.task_at(0).is_done is False


def test_failure_is_reported_after_resync_and_unlock(flaky_repository) -> None:
    manager = TaskManager(flaky_repository)
    manager.create_task("first")
    outside = flaky_repository.inner.insert_task(Task("outside"))
    flaky_repository.fail_on.add("update_task_is_done")

    seen: list = []

    def on_failure(message: str) -> None:
        free: list = []
        # Another thread must be able to take the lock while listeners run
        worker = threading.Thread(target=lambda: free.append(_try_lock(manager)))
        worker.start()
        worker.join()
        seen.append((message, manager.model.ids(), free))

    manager.operation_failed_signal.connect(on_failure)

    assert manager.toggle_done_at(0) is False
    assert len(seen) == 1
    message, ids_at_emit, free = seen[0]
    assert message.startswith("Could not update the task")
    assert outside in ids_at_emit
    assert free == [True]


def _try_lock(manager: TaskManager) -> bool:
    acquired = manager._lock.acquire(blocking=False)
    if acquired:
        manager._lock.release()
    return acquired

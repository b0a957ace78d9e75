from typing import Iterable, List

from PySide6.QtCore import QAbstractListModel, QByteArray, QModelIndex, Qt
from PySide6.QtGui import QFont
from todolist_app.models.data_models import Task

TaskIdRole = int(Qt.UserRole) + 1
TitleRole = int(Qt.UserRole) + 2
DescriptionRole = int(Qt.UserRole) + 3
DeadlineRole = int(Qt.UserRole) + 4
DurationRole = int(Qt.UserRole) + 5
IsDoneRole = int(Qt.UserRole) + 6

# Roles affected by a done toggle
_TOGGLED_ROLES = [int(Qt.DisplayRole), int(Qt.FontRole), int(Qt.CheckStateRole), IsDoneRole]


class TaskListModel(QAbstractListModel):
    """
    Ordered in-memory task list behind the list view.

    Every mutation reports the exact change (rows inserted, rows removed or
    data changed) instead of resetting the whole model. Positions are view
    coordinates only; the task id is the durable key.
    """

    def __init__(self, tasks: Iterable[Task] = (), parent=None):
        super().__init__(parent)
        self._tasks: List[Task] = list(tasks)

    # --- Qt model interface ---

    def rowCount(self, parent=QModelIndex()) -> int:
        if parent.isValid():
            return 0
        return len(self._tasks)

    def data(self, index, role=Qt.DisplayRole):
        if not index.isValid() or not 0 <= index.row() < len(self._tasks):
            return None

        task = self._tasks[index.row()]
        if role == Qt.DisplayRole:
            return task.display_text()
        if role == Qt.ToolTipRole:
            return task.description or None
        if role == Qt.FontRole:
            # Done tasks are struck through
            font = QFont()
            font.setStrikeOut(task.is_done)
            return font
        if role == Qt.CheckStateRole:
            return Qt.Checked if task.is_done else Qt.Unchecked
        if role == TaskIdRole:
            return task.id
        if role == TitleRole:
            return task.title
        if role == DescriptionRole:
            return task.description
        if role == DeadlineRole:
            return task.deadline
        if role == DurationRole:
            return task.duration
        if role == IsDoneRole:
            return task.is_done
        return None

    def roleNames(self):
        roles = super().roleNames()
        roles.update({
            TaskIdRole: QByteArray(b"taskId"),
            TitleRole: QByteArray(b"title"),
            DescriptionRole: QByteArray(b"description"),
            DeadlineRole: QByteArray(b"deadline"),
            DurationRole: QByteArray(b"duration"),
            IsDoneRole: QByteArray(b"isDone"),
        })
        return roles

    # --- Mutations ---

    def append(self, task: Task) -> int:
        """Add a task at the end and report a single inserted row."""
        position = len(self._tasks)
        self.beginInsertRows(QModelIndex(), position, position)
        self._tasks.append(task)
        self.endInsertRows()
        return position

    def remove_at(self, position: int) -> Task:
        """Remove the task at `position` and report a single removed row."""
        self._check_position(position)
        self.beginRemoveRows(QModelIndex(), position, position)
        task = self._tasks.pop(position)
        self.endRemoveRows()
        return task

    def toggle_done_at(self, position: int) -> Task:
        """Flip the done flag in place."""
        self._check_position(position)
        task = self._tasks[position]
        task.is_done = not task.is_done
        index = self.index(position, 0)
        self.dataChanged.emit(index, index, _TOGGLED_ROLES)
        return task

    def reset_tasks(self, tasks: Iterable[Task]):
        """Replace the whole list (startup load or resync)."""
        self.beginResetModel()
        self._tasks = list(tasks)
        self.endResetModel()

    # --- Lookups ---

    def task_at(self, position: int) -> Task:
        self._check_position(position)
        return self._tasks[position]

    def tasks(self) -> List[Task]:
        return list(self._tasks)

    def ids(self) -> List[int]:
        return [task.id for task in self._tasks]

    def _check_position(self, position: int):
        if not 0 <= position < len(self._tasks):
            raise IndexError(f"Position {position} out of range (size={len(self._tasks)})")

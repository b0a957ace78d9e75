from typing import Dict

from PySide6.QtCore import QDate, Qt
from PySide6.QtWidgets import (
    QCalendarWidget, QDialog, QDialogButtonBox, QFormLayout, QHBoxLayout,
    QLabel, QLineEdit, QMessageBox, QPushButton, QVBoxLayout
)
from todolist_app.db.errors import TaskValidationError


def format_deadline(date: QDate) -> str:
    """D/M/YYYY without zero padding, e.g. 5/3/2025."""
    return f"{date.day()}/{date.month()}/{date.year()}"


def clean_task_fields(title: str, description: str = "", deadline: str = "",
                      duration: str = "") -> Dict[str, str]:
    """
    Trim form input and reject an empty title.

    Raises:
        TaskValidationError: title is empty after trimming
    """
    title = (title or "").strip()
    if not title:
        raise TaskValidationError("Title cannot be empty")
    return {
        "title": title,
        "description": (description or "").strip(),
        "deadline": (deadline or "").strip(),
        "duration": (duration or "").strip(),
    }


class DatePickerDialog(QDialog):
    def __init__(self, initial: QDate = None, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Pick Deadline")

        layout = QVBoxLayout(self)
        self.calendar = QCalendarWidget()
        self.calendar.setSelectedDate(initial or QDate.currentDate())
        self.calendar.activated.connect(self.accept)
        layout.addWidget(self.calendar)

        buttons = QDialogButtonBox(QDialogButtonBox.Ok | QDialogButtonBox.Cancel)
        buttons.accepted.connect(self.accept)
        buttons.rejected.connect(self.reject)
        layout.addWidget(buttons)

    def selected_date(self) -> QDate:
        return self.calendar.selectedDate()


class AddTaskDialog(QDialog):
    """Form for a new task. The dialog only closes with a non-empty title."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Add Task")
        self.setMinimumWidth(360)

        self.selected_deadline = ""
        self._values: Dict[str, str] = {}

        main_layout = QVBoxLayout(self)
        main_layout.setSpacing(12)

        form = QFormLayout()
        form.setSpacing(10)

        self.input_title = QLineEdit()
        self.input_title.setPlaceholderText("Task title")
        form.addRow("Title:", self.input_title)

        self.input_description = QLineEdit()
        self.input_description.setPlaceholderText("Description")
        form.addRow("Description:", self.input_description)

        self.input_duration = QLineEdit()
        self.input_duration.setPlaceholderText("e.g. 2h")
        form.addRow("Duration:", self.input_duration)

        deadline_layout = QHBoxLayout()
        self.btn_pick_date = QPushButton("Pick Date")
        self.btn_pick_date.setCursor(Qt.PointingHandCursor)
        self.btn_pick_date.clicked.connect(self.pick_date)
        deadline_layout.addWidget(self.btn_pick_date)

        self.lbl_deadline = QLabel("No deadline")
        self.lbl_deadline.setObjectName("DeadlineLabel")
        deadline_layout.addWidget(self.lbl_deadline)
        deadline_layout.addStretch()
        form.addRow("Deadline:", deadline_layout)

        main_layout.addLayout(form)

        self.btn_save = QPushButton("Save")
        self.btn_save.setObjectName("SaveButton")
        self.btn_save.setCursor(Qt.PointingHandCursor)
        self.btn_save.clicked.connect(self.save_task)
        main_layout.addWidget(self.btn_save)

    def pick_date(self):
        dialog = DatePickerDialog(parent=self)
        if dialog.exec():
            self.selected_deadline = format_deadline(dialog.selected_date())
            self.lbl_deadline.setText(self.selected_deadline)

    def save_task(self):
        try:
            self._values = clean_task_fields(
                self.input_title.text(),
                self.input_description.text(),
                self.selected_deadline,
                self.input_duration.text(),
            )
        except TaskValidationError as e:
            QMessageBox.warning(self, "Add Task", str(e))
            self.input_title.setFocus()
            return
        self.accept()

    def task_values(self) -> Dict[str, str]:
        """Validated field values; only meaningful after the dialog was accepted."""
        return dict(self._values)

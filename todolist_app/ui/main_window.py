from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QAbstractItemView, QHBoxLayout, QLabel, QListView, QMainWindow,
    QMessageBox, QPushButton, QVBoxLayout, QWidget
)
from todolist_app.core.task_list_model import TaskIdRole
from todolist_app.core.task_manager import TaskManager
from todolist_app.ui.add_task_dialog import AddTaskDialog


class MainWindow(QMainWindow):
    def __init__(self, task_manager: TaskManager):
        super().__init__()
        self.task_manager = task_manager

        self.setWindowTitle("To Do List")
        self.resize(450, 600)

        self.task_manager.operation_failed_signal.connect(self.show_error)
        self.task_manager.task_created_signal.connect(self.on_task_created)

        self.init_ui()

    def init_ui(self):
        central_widget = QWidget()
        self.setCentralWidget(central_widget)

        main_layout = QVBoxLayout()
        main_layout.setContentsMargins(20, 20, 20, 20)
        main_layout.setSpacing(15)
        central_widget.setLayout(main_layout)

        header = QLabel("My Tasks")
        header.setObjectName("HeaderLabel")
        main_layout.addWidget(header)

        self.list_view = QListView()
        self.list_view.setModel(self.task_manager.model)
        self.list_view.setSelectionMode(QAbstractItemView.SingleSelection)
        self.list_view.setWordWrap(True)
        self.list_view.doubleClicked.connect(lambda index: self.toggle_done(index.row()))
        main_layout.addWidget(self.list_view)

        btn_layout = QHBoxLayout()
        self.btn_done = QPushButton("Done")
        self.btn_done.setCursor(Qt.PointingHandCursor)
        self.btn_done.clicked.connect(lambda: self.toggle_done(self.current_position()))
        btn_layout.addWidget(self.btn_done)

        self.btn_delete = QPushButton("Delete")
        self.btn_delete.setObjectName("DeleteButton")
        self.btn_delete.setCursor(Qt.PointingHandCursor)
        self.btn_delete.clicked.connect(lambda: self.delete_task(self.current_position()))
        btn_layout.addWidget(self.btn_delete)
        main_layout.addLayout(btn_layout)

        self.btn_add = QPushButton("Add Task")
        self.btn_add.setObjectName("AddButton")
        self.btn_add.setCursor(Qt.PointingHandCursor)
        self.btn_add.setMinimumHeight(50)
        self.btn_add.clicked.connect(self.open_add_task)
        main_layout.addWidget(self.btn_add)

    def current_position(self) -> int:
        return self.list_view.currentIndex().row()

    def _id_at(self, position: int):
        index = self.task_manager.model.index(position, 0)
        return index.data(TaskIdRole) if index.isValid() else None

    def toggle_done(self, position: int):
        if position < 0:
            return
        self.task_manager.toggle_done_at(position, expected_id=self._id_at(position))

    def delete_task(self, position: int):
        if position < 0:
            return
        self.task_manager.delete_at(position, expected_id=self._id_at(position))

    def open_add_task(self):
        dialog = AddTaskDialog(self)
        if dialog.exec():
            self.task_manager.create_task(**dialog.task_values())

    def on_task_created(self, task_id: int):
        self.list_view.scrollToBottom()
        self.statusBar().showMessage("Task added", 2000)

    def show_error(self, message: str):
        QMessageBox.critical(self, "To Do List", message)

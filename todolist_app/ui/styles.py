# todolist_app/ui/styles.py

MODERN_DARK_THEME = """
/* Window */
QMainWindow, QDialog {
    background-color: #1e1e2e;
}

QWidget {
    font-family: 'Segoe UI', 'Roboto', sans-serif;
    font-size: 14px;
    color: #cdd6f4;
}

QLabel#HeaderLabel {
    font-size: 24px;
    font-weight: bold;
    color: #a6e3a1;
    padding: 10px;
}

QLabel#DeadlineLabel {
    color: #f9e2af;
}

/* Inputs */
QLineEdit, QTextEdit {
    background-color: #313244;
    border: 1px solid #45475a;
    border-radius: 5px;
    padding: 5px;
}

/* Task list */
QListView {
    background-color: #313244;
    border: 1px solid #45475a;
    border-radius: 5px;
}
QListView::item {
    padding: 8px;
    border-bottom: 1px solid #45475a;
}
QListView::item:selected {
    background-color: #45475a;
}

/* Buttons */
QPushButton {
    background-color: #313244;
    border: 2px solid #45475a;
    border-radius: 8px;
    color: #ffffff;
    padding: 8px 16px;
    font-weight: bold;
}

QPushButton:hover {
    background-color: #45475a;
    border-color: #585b70;
}

QPushButton:pressed {
    background-color: #1e1e2e;
    border-color: #a6e3a1;
}

QPushButton#AddButton, QPushButton#SaveButton {
    background-color: #a6e3a1;
    color: #1e1e2e;
    border: none;
}
QPushButton#AddButton:hover, QPushButton#SaveButton:hover {
    background-color: #94e2d5;
}

QPushButton#DeleteButton {
    background-color: #f38ba8;
    color: #1e1e2e;
    border: none;
}
"""

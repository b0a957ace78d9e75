import logging
import sys

from PySide6.QtCore import QtMsgType, qInstallMessageHandler
from PySide6.QtWidgets import QApplication, QMessageBox
from todolist_app.config import get_settings
from todolist_app.core.task_manager import TaskManager
from todolist_app.db.db_manager import close_database, get_task_repository, setup_database
from todolist_app.db.errors import StoreUnavailableError
from todolist_app.logging_setup import QT_LOGGER_NAME, setup_logging
from todolist_app.ui.main_window import MainWindow
from todolist_app.ui.styles import MODERN_DARK_THEME

logger = logging.getLogger(__name__)

_QT_LEVELS = {
    QtMsgType.QtDebugMsg: logging.DEBUG,
    QtMsgType.QtInfoMsg: logging.INFO,
    QtMsgType.QtWarningMsg: logging.WARNING,
    QtMsgType.QtCriticalMsg: logging.ERROR,
    QtMsgType.QtFatalMsg: logging.CRITICAL,
}


def message_handler(msg_type, context, message):
    """Route Qt's own messages into the 'qt' logger."""
    logging.getLogger(QT_LOGGER_NAME).log(_QT_LEVELS.get(msg_type, logging.INFO), "%s", message)


def main():
    settings = get_settings()
    setup_logging(
        log_dir=settings.log_dir,
        console_level=getattr(logging, settings.log_level, logging.INFO),
    )
    qInstallMessageHandler(message_handler)
    logger.info("Starting %s db=%s", settings.app_name, settings.db_path)

    app = QApplication(sys.argv)
    app.setStyleSheet(MODERN_DARK_THEME)

    # 1. Prepare the database
    try:
        setup_database(str(settings.db_path), settings.db_pool_size)
    except StoreUnavailableError as e:
        logger.exception("Database setup failed")
        QMessageBox.critical(None, settings.app_name, f"Cannot open the task database:\n{e}")
        return 1

    # 2. Load tasks and show the window
    task_manager = TaskManager(get_task_repository())
    task_manager.load_tasks()

    window = MainWindow(task_manager)
    window.show()

    try:
        return app.exec()
    finally:
        close_database()
        logger.info("Stopped %s", settings.app_name)


if __name__ == "__main__":
    sys.exit(main())

import logging
import sys

from PySide6.QtWidgets import QApplication
from todolist_app.ui.styles import MODERN_DARK_THEME
from unitconverter_app.ui.converter_window import ConverterWindow


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    app = QApplication(sys.argv)
    app.setStyleSheet(MODERN_DARK_THEME)

    window = ConverterWindow()
    window.show()

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())

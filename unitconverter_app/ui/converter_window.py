import logging

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QComboBox, QFormLayout, QLineEdit, QMainWindow, QMessageBox,
    QPushButton, QVBoxLayout, QWidget
)
from unitconverter_app.core.length_converter import UNIT_FACTORS, convert_length, parse_value

logger = logging.getLogger(__name__)


class ConverterWindow(QMainWindow):
    def __init__(self):
        super().__init__()
        self.setWindowTitle("Unit Converter")
        self.resize(360, 260)
        self.init_ui()

    def init_ui(self):
        central_widget = QWidget()
        self.setCentralWidget(central_widget)

        main_layout = QVBoxLayout()
        main_layout.setContentsMargins(30, 30, 30, 30)
        main_layout.setSpacing(15)
        central_widget.setLayout(main_layout)

        form = QFormLayout()
        self.input_value = QLineEdit()
        self.input_value.setPlaceholderText("Value")
        form.addRow("Value:", self.input_value)

        self.combo_from = QComboBox()
        self.combo_from.addItems(list(UNIT_FACTORS))
        form.addRow("From:", self.combo_from)

        self.combo_to = QComboBox()
        self.combo_to.addItems(list(UNIT_FACTORS))
        form.addRow("To:", self.combo_to)

        self.output_result = QLineEdit()
        self.output_result.setReadOnly(True)
        form.addRow("Result:", self.output_result)
        main_layout.addLayout(form)

        self.btn_convert = QPushButton("Convert")
        self.btn_convert.setCursor(Qt.PointingHandCursor)
        self.btn_convert.clicked.connect(self.convert)
        main_layout.addWidget(self.btn_convert)

    def convert(self):
        try:
            value = parse_value(self.input_value.text())
        except ValueError as e:
            QMessageBox.information(self, "Unit Converter", str(e))
            return

        from_unit = self.combo_from.currentText()
        to_unit = self.combo_to.currentText()
        result = convert_length(value, from_unit, to_unit)
        logger.debug("%s %s -> %s %s", value, from_unit, result, to_unit)
        self.output_result.setText(str(result))

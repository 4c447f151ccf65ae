"""Dialog showing the CircuiTikZ export with a copy-to-clipboard button."""

from controllers.circuit_controller import CircuitController
from PyQt6.QtCore import QTimer
from PyQt6.QtGui import QFontDatabase
from PyQt6.QtWidgets import (
    QApplication,
    QCheckBox,
    QDialog,
    QHBoxLayout,
    QPlainTextEdit,
    QPushButton,
    QVBoxLayout,
)

COPIED_FEEDBACK_MS = 2000


class ExportDialog(QDialog):
    def __init__(self, controller: CircuitController, parent=None):
        super().__init__(parent)
        self.controller = controller
        self.setWindowTitle("Export CircuiTikZ")
        self.resize(560, 360)

        layout = QVBoxLayout(self)

        self.output = QPlainTextEdit()
        self.output.setReadOnly(True)
        self.output.setFont(QFontDatabase.systemFont(QFontDatabase.SystemFont.FixedFont))
        layout.addWidget(self.output)

        self.standalone_check = QCheckBox("Standalone document")
        self.standalone_check.toggled.connect(lambda _checked: self.refresh())
        layout.addWidget(self.standalone_check)

        buttons = QHBoxLayout()
        buttons.addStretch()
        self.copy_button = QPushButton("Copy")
        self.copy_button.clicked.connect(self.copy_to_clipboard)
        buttons.addWidget(self.copy_button)
        close_button = QPushButton("Close")
        close_button.clicked.connect(self.accept)
        buttons.addWidget(close_button)
        layout.addLayout(buttons)

        self._feedback_timer = QTimer(self)
        self._feedback_timer.setSingleShot(True)
        self._feedback_timer.timeout.connect(lambda: self.copy_button.setText("Copy"))

        self.refresh()

    def refresh(self):
        self.output.setPlainText(
            self.controller.export_latex(standalone=self.standalone_check.isChecked())
        )

    def copy_to_clipboard(self):
        QApplication.clipboard().setText(self.output.toPlainText())
        self.copy_button.setText("Copied!")
        self._feedback_timer.start(COPIED_FEEDBACK_MS)

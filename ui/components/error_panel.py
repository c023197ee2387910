"""Error message with retry and start-over actions."""

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import QHBoxLayout, QLabel, QPushButton, QVBoxLayout, QWidget

from i18n import t


class ErrorPanel(QWidget):
    """Shows the Failed state's message."""

    retry_clicked = pyqtSignal()
    try_again_clicked = pyqtSignal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setObjectName("errorPanel")
        self._setup_ui()
        self.hide()

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 12, 16, 12)
        layout.setSpacing(8)

        self._message_label = QLabel("")
        self._message_label.setProperty("class", "errorMessage")
        self._message_label.setWordWrap(True)

        button_row = QHBoxLayout()
        self._retry_btn = QPushButton(t("error.retry"))
        self._retry_btn.setObjectName("primaryButton")
        self._retry_btn.clicked.connect(self.retry_clicked.emit)

        self._try_again_btn = QPushButton(t("error.try_again"))
        self._try_again_btn.setProperty("class", "secondaryButton")
        self._try_again_btn.clicked.connect(self.try_again_clicked.emit)

        button_row.addWidget(self._retry_btn)
        button_row.addWidget(self._try_again_btn)
        button_row.addStretch()

        layout.addWidget(self._message_label)
        layout.addLayout(button_row)

    def show_error(self, message: str, can_retry: bool = True):
        self._message_label.setText(f"⚠ {message}")
        self._retry_btn.setVisible(can_retry)
        self.show()

    def reset(self):
        self._message_label.setText("")
        self.hide()

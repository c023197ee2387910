"""Indeterminate progress indicator shown while a request is in flight."""

from PyQt6.QtWidgets import QLabel, QProgressBar, QVBoxLayout, QWidget

from i18n import t


class ProgressWidget(QWidget):
    """Busy bar with a status message. The service reports no progress steps."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self._setup_ui()
        self.hide()

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 8, 0, 8)
        layout.setSpacing(8)

        self._bar = QProgressBar()
        self._bar.setRange(0, 0)  # busy mode
        self._bar.setTextVisible(False)
        self._bar.setFixedHeight(8)

        self._status_label = QLabel(t("analyze.busy_text"))
        self._status_label.setProperty("class", "progressStatus")

        layout.addWidget(self._bar)
        layout.addWidget(self._status_label)

    def start(self, message: str = ""):
        """Show the indicator."""
        self._status_label.setText(message or t("analyze.busy_text"))
        self.show()

    def reset(self):
        """Hide the indicator."""
        self.hide()

"""About dialog showing application info."""

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QDialog,
    QLabel,
    QPushButton,
    QVBoxLayout,
)

from i18n import t

APP_VERSION = "1.0.0"


class AboutDialog(QDialog):
    """About SkinEval dialog."""

    def __init__(self, endpoint_url: str = "", parent=None):
        super().__init__(parent)
        self._endpoint_url = endpoint_url
        self._setup_ui()

    def _setup_ui(self):
        self.setWindowTitle(t("about.title"))
        self.setFixedSize(400, 280)

        layout = QVBoxLayout(self)
        layout.setSpacing(12)
        layout.setAlignment(Qt.AlignmentFlag.AlignCenter)

        title = QLabel(t("app.title"))
        title.setProperty("class", "sectionTitle")
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        title.setStyleSheet("font-size: 20px;")

        version = QLabel(t("about.version", version=APP_VERSION))
        version.setAlignment(Qt.AlignmentFlag.AlignCenter)
        version.setStyleSheet("color: #888;")

        desc = QLabel(t("about.description"))
        desc.setAlignment(Qt.AlignmentFlag.AlignCenter)
        desc.setWordWrap(True)

        layout.addWidget(title)
        layout.addWidget(version)
        layout.addWidget(desc)

        if self._endpoint_url:
            endpoint = QLabel(t("about.endpoint", url=self._endpoint_url))
            endpoint.setAlignment(Qt.AlignmentFlag.AlignCenter)
            endpoint.setStyleSheet("font-size: 11px; color: #888;")
            endpoint.setWordWrap(True)
            layout.addWidget(endpoint)

        disclaimer = QLabel(t("notice.text"))
        disclaimer.setAlignment(Qt.AlignmentFlag.AlignCenter)
        disclaimer.setStyleSheet("font-size: 11px; font-style: italic; color: #888;")
        disclaimer.setWordWrap(True)
        layout.addWidget(disclaimer)

        layout.addStretch()

        close_btn = QPushButton(t("about.close"))
        close_btn.setProperty("class", "secondaryButton")
        close_btn.clicked.connect(self.accept)
        layout.addWidget(close_btn, alignment=Qt.AlignmentFlag.AlignCenter)

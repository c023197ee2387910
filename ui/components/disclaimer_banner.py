"""Medical notice banner shown above the workflow and below results."""

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QHBoxLayout, QLabel, QVBoxLayout, QWidget

from i18n import t


class DisclaimerBanner(QWidget):
    """Amber warning banner. Always visible, cannot be dismissed."""

    def __init__(self, title_key: str = "notice.title", text_key: str = "notice.text", parent=None):
        super().__init__(parent)
        self.setObjectName("disclaimerBanner")
        self._title_key = title_key
        self._text_key = text_key
        self._setup_ui()

    def _setup_ui(self):
        layout = QHBoxLayout(self)
        layout.setContentsMargins(16, 12, 16, 12)
        layout.setSpacing(10)

        icon_label = QLabel("⚠")
        icon_label.setProperty("class", "disclaimerIcon")
        icon_label.setFixedWidth(24)
        icon_label.setAlignment(Qt.AlignmentFlag.AlignTop)

        text_col = QVBoxLayout()
        text_col.setSpacing(4)

        title_label = QLabel(f"<b>{t(self._title_key)}</b>")
        title_label.setProperty("class", "disclaimerTitle")

        text_label = QLabel(t(self._text_key))
        text_label.setProperty("class", "disclaimerText")
        text_label.setWordWrap(True)

        text_col.addWidget(title_label)
        text_col.addWidget(text_label)

        layout.addWidget(icon_label)
        layout.addLayout(text_col, 1)

"""Titled bullet list used for the photo guidelines and privacy notes."""

from typing import Sequence

from PyQt6.QtWidgets import QLabel, QVBoxLayout, QWidget

from i18n import t


class InfoList(QWidget):
    """A heading, optional intro lines, and a bulleted list of translated keys."""

    def __init__(self, title_key: str, item_keys: Sequence[str], intro_keys: Sequence[str] = (), parent=None):
        super().__init__(parent)
        self.setObjectName("infoList")
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 8, 0, 8)
        layout.setSpacing(6)

        title = QLabel(t(title_key))
        title.setProperty("class", "sectionTitle")
        title.setStyleSheet("font-size: 16px;")
        layout.addWidget(title)

        for key in intro_keys:
            intro = QLabel(t(key))
            intro.setWordWrap(True)
            layout.addWidget(intro)

        for key in item_keys:
            item = QLabel(f"•  {t(key)}")
            item.setWordWrap(True)
            item.setProperty("class", "infoListItem")
            layout.addWidget(item)

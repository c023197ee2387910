"""Table of alternative conditions, in the order the service ranked them."""

from typing import Sequence

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QHeaderView,
    QLabel,
    QTableWidget,
    QTableWidgetItem,
    QVBoxLayout,
    QWidget,
)

from core.utils import Condition, format_confidence
from i18n import t


class AlternativesTable(QWidget):
    """Name and confidence of each alternative condition. Sorting is disabled."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self._setup_ui()
        self.hide()

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(8)

        title = QLabel(t("results.alternatives_title"))
        title.setProperty("class", "sectionTitle")
        title.setStyleSheet("font-size: 16px;")

        self._table = QTableWidget()
        self._table.setColumnCount(2)
        self._table.setHorizontalHeaderLabels([
            t("results.condition"),
            t("results.confidence"),
        ])
        self._table.horizontalHeader().setSectionResizeMode(0, QHeaderView.ResizeMode.Stretch)
        self._table.horizontalHeader().setSectionResizeMode(1, QHeaderView.ResizeMode.Fixed)
        self._table.setColumnWidth(1, 120)
        self._table.setSortingEnabled(False)
        self._table.setSelectionBehavior(QTableWidget.SelectionBehavior.SelectRows)
        self._table.setEditTriggers(QTableWidget.EditTrigger.NoEditTriggers)
        self._table.setAlternatingRowColors(True)
        self._table.verticalHeader().setVisible(False)
        self._table.setShowGrid(False)

        layout.addWidget(title)
        layout.addWidget(self._table)

    def set_alternatives(self, alternatives: Sequence[Condition]):
        """Populate the table, hiding it when there is nothing to show."""
        if not alternatives:
            self.reset()
            return

        self._table.setRowCount(len(alternatives))
        for row, alt in enumerate(alternatives):
            self._table.setItem(row, 0, QTableWidgetItem(alt.name))

            conf_item = QTableWidgetItem(format_confidence(alt.confidence))
            conf_item.setTextAlignment(Qt.AlignmentFlag.AlignCenter)
            self._table.setItem(row, 1, conf_item)

        self._table.setMinimumHeight(min(40 + len(alternatives) * 36, 260))
        self.show()

    def reset(self):
        """Clear the table and hide."""
        self._table.setRowCount(0)
        self.hide()

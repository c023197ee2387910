"""Analysis result card: primary condition, alternatives, disclaimer."""

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from core.utils import AnalysisResult
from i18n import t
from ui.components.alternatives_table import AlternativesTable
from ui.components.confidence_gauge import ConfidenceGauge
from ui.components.disclaimer_banner import DisclaimerBanner


class ResultCard(QWidget):
    """Displays one AnalysisResult."""

    analyze_another = pyqtSignal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setObjectName("resultCard")
        self._result = None
        self._setup_ui()
        self.hide()

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(20, 20, 20, 20)
        layout.setSpacing(16)

        heading = QLabel(t("results.title"))
        heading.setProperty("class", "sectionTitle")

        # Primary condition: gauge + name + badge + description
        header_row = QHBoxLayout()
        header_row.setSpacing(20)

        self._gauge = ConfidenceGauge(label=t("results.confidence_label"), size=120)

        info_col = QVBoxLayout()
        info_col.setSpacing(4)
        self._condition_label = QLabel("")
        self._condition_label.setProperty("class", "sectionTitle")
        self._condition_label.setStyleSheet("font-size: 18px;")
        self._condition_label.setWordWrap(True)

        self._badge_label = QLabel("")
        self._badge_label.setProperty("class", "confidenceBadge")

        self._description_label = QLabel("")
        self._description_label.setProperty("class", "description")
        self._description_label.setWordWrap(True)

        info_col.addWidget(self._condition_label)
        info_col.addWidget(self._badge_label)
        info_col.addWidget(self._description_label)
        info_col.addStretch()

        header_row.addWidget(self._gauge)
        header_row.addLayout(info_col, 1)

        self._alternatives_table = AlternativesTable()

        self._disclaimer = DisclaimerBanner("disclaimer.label", "disclaimer.full")

        button_row = QHBoxLayout()
        button_row.addStretch()
        self._another_btn = QPushButton(t("results.analyze_another"))
        self._another_btn.setObjectName("primaryButton")
        self._another_btn.clicked.connect(self.analyze_another.emit)
        button_row.addWidget(self._another_btn)

        layout.addWidget(heading)
        layout.addLayout(header_row)
        layout.addWidget(self._alternatives_table)
        layout.addWidget(self._disclaimer)
        layout.addLayout(button_row)

    def show_result(self, result: AnalysisResult):
        """Display an analysis result. Alternatives only appear when present."""
        if result is self._result:
            return
        self._result = result

        self._gauge.set_percent(result.confidence)
        self._condition_label.setText(result.condition)
        self._badge_label.setText(t("results.confidence_badge", confidence=result.confidence))
        self._description_label.setText(result.description)
        self._alternatives_table.set_alternatives(result.alternatives)

        self.show()

    def reset(self):
        """Clear results and hide."""
        self._result = None
        self._gauge.reset()
        self._condition_label.setText("")
        self._badge_label.setText("")
        self._description_label.setText("")
        self._alternatives_table.reset()
        self.hide()

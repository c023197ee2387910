"""Main application window."""

from functools import partial

from PyQt6.QtGui import QAction, QActionGroup
from PyQt6.QtWidgets import (
    QApplication,
    QLabel,
    QMainWindow,
    QMessageBox,
    QVBoxLayout,
    QWidget,
)

import i18n
from core.analysis_client import AnalysisClient
from i18n import LANGUAGES, t
from ui.analysis_widget import AnalysisWidget
from ui.dialogs.about_dialog import AboutDialog


class MainWindow(QMainWindow):
    """Header plus the analysis page."""

    def __init__(self, client: AnalysisClient = None):
        super().__init__()
        self._client = client or AnalysisClient()
        self.setWindowTitle(t("app.title"))
        self.setMinimumSize(720, 620)
        self.resize(860, 760)
        self._setup_ui()
        self._setup_menu_bar()

    def _setup_ui(self):
        central = QWidget()
        self.setCentralWidget(central)

        layout = QVBoxLayout(central)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        header = QWidget()
        header.setObjectName("header")
        header_layout = QVBoxLayout(header)
        header_layout.setContentsMargins(32, 20, 32, 8)
        header_layout.setSpacing(2)

        title = QLabel(t("app.title"))
        title.setObjectName("headerTitle")
        title.setStyleSheet("font-size: 26px; font-weight: bold;")

        subtitle = QLabel(t("app.subtitle"))
        subtitle.setObjectName("headerSubtitle")
        subtitle.setStyleSheet("font-size: 13px; color: #888;")

        header_layout.addWidget(title)
        header_layout.addWidget(subtitle)

        self._analysis_widget = AnalysisWidget(client=self._client)

        layout.addWidget(header)
        layout.addWidget(self._analysis_widget, 1)

    def _setup_menu_bar(self):
        menu_bar = self.menuBar()

        file_menu = menu_bar.addMenu(t("menu.file"))
        quit_action = QAction(t("menu.quit"), self)
        quit_action.setShortcut("Ctrl+Q")
        quit_action.triggered.connect(self.close)
        file_menu.addAction(quit_action)

        language_menu = menu_bar.addMenu(t("menu.language"))
        group = QActionGroup(self)
        group.setExclusive(True)
        current = i18n.get_current_language()
        for code, info in LANGUAGES.items():
            action = QAction(f"{info['native_name']} ({info['name']})", self)
            action.setCheckable(True)
            action.setChecked(code == current)
            action.triggered.connect(partial(self._on_language_chosen, code))
            group.addAction(action)
            language_menu.addAction(action)

        help_menu = menu_bar.addMenu(t("menu.help"))
        about_action = QAction(t("menu.about"), self)
        about_action.triggered.connect(self._show_about)
        help_menu.addAction(about_action)

    def _on_language_chosen(self, code: str, checked: bool = True):
        if code == i18n.get_current_language():
            return
        i18n.set_language(code)
        QMessageBox.information(self, t("common.notice"), t("settings.language_restart"))

    def _show_about(self):
        AboutDialog(self._client.config.base_url, parent=self).exec()

    def closeEvent(self, event):
        """Wait for background work before closing."""
        self._analysis_widget.cleanup()
        QApplication.processEvents()
        event.accept()

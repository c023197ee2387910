"""SkinEval: AI-powered skin analysis client.

Entry point for the desktop application.
"""

import logging
import os
import sys

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QApplication

import i18n
from core.analysis_client import AnalysisClient
from core.logger import setup_logging
from core.utils import ClientConfig
from ui.dialogs.about_dialog import APP_VERSION

logger = logging.getLogger(__name__)


def main():
    """Application entry point."""
    # Handle PyInstaller frozen app
    if getattr(sys, "frozen", False):
        os.chdir(os.path.dirname(sys.executable))

    setup_logging()

    app = QApplication(sys.argv)
    app.setApplicationName(i18n.APPLICATION)
    app.setApplicationVersion(APP_VERSION)
    app.setOrganizationName(i18n.ORGANIZATION)

    # Initialize i18n before any UI
    i18n.init()
    if i18n.is_rtl():
        app.setLayoutDirection(Qt.LayoutDirection.RightToLeft)

    config = ClientConfig.from_env()
    logger.info("SkinEval %s using analysis service at %s", APP_VERSION, config.base_url)

    # Imported after i18n.init() so module-level widgets see translations
    from ui.main_window import MainWindow

    window = MainWindow(AnalysisClient(config))
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()

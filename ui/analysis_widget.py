"""Skin analysis page: upload view and results view."""

import logging

from PyQt6.QtWidgets import (
    QLabel,
    QMessageBox,
    QPushButton,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from core.analysis_client import AnalysisClient
from core.errors import PreconditionError
from core.utils import SelectedImage
from core.workflow import ViewState, WorkflowController, WorkflowState
from i18n import t
from ui.components.disclaimer_banner import DisclaimerBanner
from ui.components.error_panel import ErrorPanel
from ui.components.image_drop_zone import ImageDropZone
from ui.components.info_list import InfoList
from ui.components.progress_widget import ProgressWidget
from ui.components.result_card import ResultCard
from workers.task_worker import TaskLauncher

logger = logging.getLogger(__name__)

GUIDELINE_KEYS = (
    "guidelines.lighting",
    "guidelines.steady",
    "guidelines.context",
    "guidelines.glare",
    "guidelines.environment",
)

PRIVACY_KEYS = (
    "privacy.not_stored",
    "privacy.session_only",
    "privacy.no_account",
    "privacy.cleared",
    "privacy.no_tracking",
)


class AnalysisWidget(QWidget):
    """Renders the workflow controller's state and forwards user intents to it."""

    def __init__(self, client: AnalysisClient = None, parent=None):
        super().__init__(parent)
        self._launcher = TaskLauncher(parent=self)
        self._controller = WorkflowController(client=client, launcher=self._launcher)
        self._setup_ui()
        self._connect_signals()
        self._controller.subscribe(self._render)
        self._render(self._controller.state)

    @property
    def controller(self) -> WorkflowController:
        return self._controller

    def _setup_ui(self):
        scroll = QScrollArea(self)
        scroll.setWidgetResizable(True)
        scroll.setFrameShape(QScrollArea.Shape.NoFrame)

        container = QWidget()
        layout = QVBoxLayout(container)
        layout.setContentsMargins(32, 24, 32, 24)
        layout.setSpacing(16)

        self._notice = DisclaimerBanner()

        # Upload view
        self._upload_view = QWidget()
        upload_layout = QVBoxLayout(self._upload_view)
        upload_layout.setContentsMargins(0, 0, 0, 0)
        upload_layout.setSpacing(16)

        title = QLabel(t("upload.title"))
        title.setProperty("class", "sectionTitle")

        intro = QLabel(t("upload.intro"))
        intro.setProperty("class", "sectionSubtitle")
        intro.setWordWrap(True)

        self._drop_zone = ImageDropZone()

        guidelines = InfoList("guidelines.title", GUIDELINE_KEYS)
        privacy = InfoList(
            "privacy.title",
            PRIVACY_KEYS,
            intro_keys=("privacy.intro", "privacy.subtitle"),
        )

        self._analyze_btn = QPushButton(t("analyze.button"))
        self._analyze_btn.setObjectName("primaryButton")

        self._progress = ProgressWidget()
        self._error_panel = ErrorPanel()

        upload_layout.addWidget(title)
        upload_layout.addWidget(intro)
        upload_layout.addWidget(self._drop_zone)
        upload_layout.addWidget(guidelines)
        upload_layout.addWidget(privacy)
        upload_layout.addWidget(self._analyze_btn)
        upload_layout.addWidget(self._progress)
        upload_layout.addWidget(self._error_panel)

        # Results view
        self._result_card = ResultCard()

        layout.addWidget(self._notice)
        layout.addWidget(self._upload_view)
        layout.addWidget(self._result_card)
        layout.addStretch()

        scroll.setWidget(container)
        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.addWidget(scroll)

    def _connect_signals(self):
        self._drop_zone.file_selected.connect(self._on_file_selected)
        self._drop_zone.change_requested.connect(self._controller.reset)
        self._analyze_btn.clicked.connect(self._on_analyze)
        self._error_panel.retry_clicked.connect(self._on_retry)
        self._error_panel.try_again_clicked.connect(self._controller.reset)
        self._result_card.analyze_another.connect(self._controller.reset)

    # --- Intents ---

    def _on_file_selected(self, path: str):
        try:
            image = SelectedImage.from_path(path)
        except OSError as e:
            logger.warning("Cannot read %s: %s", path, e)
            QMessageBox.warning(
                self, t("common.error"), t("upload.read_failed", name=path, reason=e.strerror or str(e))
            )
            return
        self._controller.select_image(image)

    def _on_analyze(self):
        try:
            self._controller.submit()
        except PreconditionError as e:
            QMessageBox.information(self, t("common.notice"), str(e))

    def _on_retry(self):
        try:
            self._controller.retry()
        except PreconditionError as e:
            QMessageBox.information(self, t("common.notice"), str(e))

    # --- Rendering ---

    def _render(self, state: WorkflowState):
        view = ViewState.from_state(state)

        self._upload_view.setVisible(not view.show_results)
        if view.show_results:
            self._result_card.show_result(view.result)
        else:
            self._result_card.reset()

        if view.image is not None:
            self._drop_zone.show_image(view.image, view.preview)
        else:
            self._drop_zone.clear()
        self._drop_zone.setEnabled(not view.is_loading)

        self._analyze_btn.setVisible(view.image is not None)
        self._analyze_btn.setEnabled(view.can_submit)
        self._analyze_btn.setText(t("analyze.busy_button") if view.is_loading else t("analyze.button"))

        if view.is_loading:
            self._progress.start()
        else:
            self._progress.reset()

        if view.error_message:
            self._error_panel.show_error(view.error_message, can_retry=view.can_submit)
        else:
            self._error_panel.reset()

    def cleanup(self):
        self._controller.unsubscribe(self._render)
        self._launcher.cleanup()
        self._controller.close()

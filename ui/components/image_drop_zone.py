"""Image drag-and-drop zone with preview of the held image."""

from typing import Optional

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QColor, QDragEnterEvent, QDropEvent, QPainter, QPen, QPixmap
from PyQt6.QtWidgets import (
    QFileDialog,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from core.utils import (
    SUPPORTED_IMAGE_EXTENSIONS,
    PreviewHandle,
    SelectedImage,
    describe_image,
    is_supported_extension,
)
from i18n import t


class ImageDropZone(QWidget):
    """Picks an image file and displays whatever the controller holds.

    The zone never keeps its own copy of the selection: it emits
    ``file_selected`` and is told what to show through ``show_image``.
    """

    file_selected = pyqtSignal(str)
    change_requested = pyqtSignal()

    def __init__(self, placeholder_text: str = "", parent=None):
        super().__init__(parent)
        self._placeholder_text = placeholder_text or t("upload.drop_text")
        self._has_image = False
        self._drag_over = False
        self.setAcceptDrops(True)
        self.setObjectName("imageDropZone")
        self.setMinimumHeight(180)
        self._setup_ui()

    def _setup_ui(self):
        self._layout = QVBoxLayout(self)
        self._layout.setContentsMargins(20, 20, 20, 20)
        self._layout.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._icon_label = QLabel("\U0001f5bc")
        self._icon_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._icon_label.setProperty("class", "dropZoneIcon")

        self._text_label = QLabel(self._placeholder_text)
        self._text_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._text_label.setWordWrap(True)
        self._text_label.setProperty("class", "dropZoneText")

        self._preview_label = QLabel()
        self._preview_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._preview_label.setMinimumHeight(140)
        self._preview_label.hide()

        self._file_info_label = QLabel()
        self._file_info_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._file_info_label.setProperty("class", "dropZoneFileInfo")
        self._file_info_label.hide()

        self._change_row = QWidget()
        change_layout = QHBoxLayout(self._change_row)
        change_layout.setContentsMargins(0, 0, 0, 0)
        change_layout.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._change_btn = QPushButton(t("upload.change_image"))
        self._change_btn.setProperty("class", "secondaryButton")
        self._change_btn.clicked.connect(self.change_requested.emit)
        change_layout.addWidget(self._change_btn)
        self._change_row.hide()

        self._layout.addWidget(self._icon_label)
        self._layout.addWidget(self._text_label)
        self._layout.addWidget(self._preview_label)
        self._layout.addWidget(self._file_info_label)
        self._layout.addWidget(self._change_row)

    def show_image(self, image: SelectedImage, preview: Optional[PreviewHandle]):
        """Display the held image. ``preview`` may still be pending (None)."""
        self._has_image = True
        self._file_info_label.setText(describe_image(image))
        self._file_info_label.show()

        pixmap = QPixmap()
        if preview is not None and preview.is_renderable and pixmap.loadFromData(preview.data):
            scaled = pixmap.scaled(
                320, 240,
                Qt.AspectRatioMode.KeepAspectRatio,
                Qt.TransformationMode.SmoothTransformation,
            )
            self._preview_label.setPixmap(scaled)
        else:
            self._preview_label.clear()
            self._preview_label.setText(image.name)
        self._preview_label.show()

        self._icon_label.hide()
        self._text_label.hide()
        self._change_row.show()
        self.update()

    def clear(self):
        """Return to the placeholder without emitting anything."""
        self._has_image = False
        self._preview_label.hide()
        self._preview_label.clear()
        self._file_info_label.hide()
        self._change_row.hide()
        self._icon_label.show()
        self._text_label.show()
        self._drag_over = False
        self.update()

    def browse(self):
        patterns = " ".join(f"*{e}" for e in sorted(SUPPORTED_IMAGE_EXTENSIONS))
        file_path, _ = QFileDialog.getOpenFileName(
            self,
            t("upload.browse_title"),
            "",
            t("upload.file_filter", patterns=patterns),
        )
        if file_path:
            self.file_selected.emit(file_path)

    # --- Drag and drop ---

    def dragEnterEvent(self, event: QDragEnterEvent):
        if event.mimeData().hasUrls():
            urls = event.mimeData().urls()
            if urls and is_supported_extension(urls[0].toLocalFile()):
                event.acceptProposedAction()
                self._drag_over = True
                self.update()

    def dragLeaveEvent(self, event):
        self._drag_over = False
        self.update()

    def dropEvent(self, event: QDropEvent):
        self._drag_over = False
        urls = event.mimeData().urls()
        if urls:
            file_path = urls[0].toLocalFile()
            if is_supported_extension(file_path):
                self.file_selected.emit(file_path)
        self.update()

    def mousePressEvent(self, event):
        if event.button() == Qt.MouseButton.LeftButton and not self._has_image:
            self.browse()

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)

        if self._drag_over:
            pen = QPen(QColor("#007AFF"), 2, Qt.PenStyle.DashLine)
        elif self._has_image:
            pen = QPen(QColor("#34C759"), 2, Qt.PenStyle.SolidLine)
        else:
            pen = QPen(QColor("#888888"), 2, Qt.PenStyle.DashLine)

        pen.setDashPattern([8, 4])
        painter.setPen(pen)
        painter.drawRoundedRect(self.rect().adjusted(1, 1, -1, -1), 12, 12)
        painter.end()

"""Circular confidence gauge with animated fill."""

from PyQt6.QtCore import QPropertyAnimation, QEasingCurve, QRectF, Qt, pyqtProperty
from PyQt6.QtGui import QColor, QFont, QPainter, QPen
from PyQt6.QtWidgets import QWidget


class ConfidenceGauge(QWidget):
    """Animated circular gauge for an integer confidence percentage."""

    COLOR_HIGH = QColor("#2563EB")    # Strong match
    COLOR_MEDIUM = QColor("#60A5FA")
    COLOR_LOW = QColor("#9CA3AF")     # Weak match
    COLOR_BG = QColor("#E5E7EB")      # Track color

    def __init__(self, label: str = "", size: int = 120, parent=None):
        super().__init__(parent)
        self._label = label
        self._size = size
        self._percent = 0
        self._animated_percent = 0.0
        self.setFixedSize(size, size)

        self._animation = QPropertyAnimation(self, b"animatedPercent")
        self._animation.setDuration(800)
        self._animation.setEasingCurve(QEasingCurve.Type.OutCubic)

    def set_percent(self, percent: int):
        """Set the percentage (0-100) and animate to it."""
        self._percent = max(0, min(100, int(percent)))
        self._animation.stop()
        self._animation.setStartValue(self._animated_percent)
        self._animation.setEndValue(float(self._percent))
        self._animation.start()

    def percent(self) -> int:
        return self._percent

    def _get_animated_percent(self) -> float:
        return self._animated_percent

    def _set_animated_percent(self, value: float):
        self._animated_percent = value
        self.update()

    animatedPercent = pyqtProperty(float, _get_animated_percent, _set_animated_percent)

    def _get_color(self, percent: float) -> QColor:
        if percent >= 60:
            return self.COLOR_HIGH
        elif percent >= 30:
            return self.COLOR_MEDIUM
        return self.COLOR_LOW

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)

        pen_width = 10
        margin = pen_width / 2 + 4
        rect = QRectF(margin, margin, self._size - 2 * margin, self._size - 2 * margin)

        # Track
        bg_pen = QPen(self.COLOR_BG, pen_width, Qt.PenStyle.SolidLine, Qt.PenCapStyle.RoundCap)
        painter.setPen(bg_pen)
        painter.drawArc(rect, 225 * 16, -270 * 16)

        color = self._get_color(self._animated_percent)
        fg_pen = QPen(color, pen_width, Qt.PenStyle.SolidLine, Qt.PenCapStyle.RoundCap)
        painter.setPen(fg_pen)
        span = int(-270 * (self._animated_percent / 100.0) * 16)
        painter.drawArc(rect, 225 * 16, span)

        painter.setPen(QPen(color))
        font = QFont()
        font.setPixelSize(int(self._size * 0.22))
        font.setBold(True)
        painter.setFont(font)
        painter.drawText(rect, Qt.AlignmentFlag.AlignCenter, f"{round(self._animated_percent)}%")

        if self._label:
            painter.setPen(QPen(QColor("#888888")))
            label_font = QFont()
            label_font.setPixelSize(int(self._size * 0.1))
            painter.setFont(label_font)
            label_rect = QRectF(rect.x(), rect.center().y() + 12, rect.width(), 20)
            painter.drawText(label_rect, Qt.AlignmentFlag.AlignHCenter | Qt.AlignmentFlag.AlignTop, self._label)

        painter.end()

    def reset(self):
        """Reset gauge to zero."""
        self._animation.stop()
        self._animated_percent = 0.0
        self._percent = 0
        self.update()

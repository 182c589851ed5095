"""Intensity slider shown under the photo."""

from __future__ import annotations

from typing import Optional

from PySide6.QtCore import QPointF, QRectF, Qt, Signal
from PySide6.QtGui import QColor, QFont, QPainter, QPainterPath, QPen
from PySide6.QtWidgets import QWidget

from ....config import DEFAULT_INTENSITY


class IntensitySlider(QWidget):
    """Horizontal ``[0, 1]`` slider that renders a filled track and bold labels."""

    valueChanged = Signal(float)
    """Emitted whenever the slider's value changes."""

    def __init__(
        self,
        name: str = "Intensity",
        parent: QWidget | None = None,
        *,
        initial: Optional[float] = None,
    ) -> None:
        super().__init__(parent)
        self._name = name
        self._value = self._clamp(initial if initial is not None else DEFAULT_INTENSITY)
        self._dragging = False
        self.setMouseTracking(True)
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)

        self.setMinimumHeight(35)
        self.setMinimumWidth(260)
        self.track_height = 30
        self.radius = 10
        self.h_padding = 14
        self.line_width = 3

        self.c_left = QColor(132, 132, 132)
        self.c_bg = QColor(42, 42, 42)
        self.c_line = QColor(0, 122, 255)
        self.c_text = QColor(235, 235, 235)

    # ------------------------------------------------------------------
    # Public API
    def value(self) -> float:
        return self._value

    def setValue(self, value: float, emit: bool = True) -> None:
        """Update the slider to *value* and optionally emit :attr:`valueChanged`."""

        clamped = self._clamp(value)
        if abs(clamped - self._value) <= 1e-6:
            return
        self._value = clamped
        self.update()
        if emit:
            self.valueChanged.emit(self._value)

    # ------------------------------------------------------------------
    # Event handlers
    def mousePressEvent(self, event):  # type: ignore[override]
        if event.button() == Qt.MouseButton.LeftButton:
            self._dragging = True
            self._set_by_pos(event.position().x())
            self.setCursor(Qt.CursorShape.ClosedHandCursor)

    def mouseMoveEvent(self, event):  # type: ignore[override]
        if self._dragging:
            self._set_by_pos(event.position().x())

    def mouseReleaseEvent(self, event):  # type: ignore[override]
        if event.button() == Qt.MouseButton.LeftButton and self._dragging:
            self._dragging = False
            self.unsetCursor()

    def keyPressEvent(self, event):  # type: ignore[override]
        if event.key() in (Qt.Key.Key_Left, Qt.Key.Key_Down):
            self.setValue(self._value - 0.01)
        elif event.key() in (Qt.Key.Key_Right, Qt.Key.Key_Up):
            self.setValue(self._value + 0.01)
        else:
            super().keyPressEvent(event)

    # ------------------------------------------------------------------
    # Rendering helpers
    def paintEvent(self, _):  # type: ignore[override]
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing, True)

        height = self.height()
        track_height = self.track_height
        track_rect = QRectF(
            self.h_padding,
            (height - track_height) / 2,
            self.width() - 2 * self.h_padding,
            track_height,
        )
        x_line = track_rect.left() + self._value * track_rect.width()

        round_path = QPainterPath()
        round_path.addRoundedRect(track_rect, self.radius, self.radius)

        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(self.c_bg)
        painter.drawPath(round_path)

        painter.save()
        painter.setClipPath(round_path)
        painter.setClipRect(
            QRectF(track_rect.left(), track_rect.top(), max(0.0, x_line - track_rect.left()), track_height),
            Qt.ClipOperation.IntersectClip,
        )
        painter.fillRect(track_rect, self.c_left)
        painter.restore()

        painter.save()
        painter.setClipPath(round_path)
        pen = QPen(self.c_line)
        pen.setWidth(self.line_width)
        pen.setCapStyle(Qt.PenCapStyle.FlatCap)
        painter.setPen(pen)
        painter.drawLine(QPointF(x_line, track_rect.top()), QPointF(x_line, track_rect.bottom()))
        painter.restore()

        font = QFont(self.font())
        font.setBold(True)
        painter.setFont(font)
        painter.setPen(self.c_text)

        left_rect = QRectF(track_rect.left() + 10, track_rect.top(), track_rect.width() / 2 - 12, track_height)
        right_rect = QRectF(track_rect.center().x(), track_rect.top(), track_rect.width() / 2 - 10, track_height)
        painter.drawText(left_rect, Qt.AlignmentFlag.AlignVCenter | Qt.AlignmentFlag.AlignLeft, self._name)
        painter.drawText(right_rect, Qt.AlignmentFlag.AlignVCenter | Qt.AlignmentFlag.AlignRight, f"{self._value:.2f}")
        painter.end()

    # ------------------------------------------------------------------
    # Internal helpers
    @staticmethod
    def _clamp(value: float) -> float:
        return max(0.0, min(1.0, float(value)))

    def _set_by_pos(self, x: float) -> None:
        left = self.h_padding
        right = self.width() - self.h_padding
        if right <= left:
            return
        self.setValue((x - left) / (right - left))


__all__ = ["IntensitySlider"]

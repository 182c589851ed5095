"""Widget that displays the filtered photo while preserving aspect ratio."""

from __future__ import annotations

from typing import Optional

from PySide6.QtCore import QEvent, Qt, Signal
from PySide6.QtGui import QImage, QMouseEvent, QPixmap
from PySide6.QtWidgets import QLabel, QSizePolicy, QVBoxLayout, QWidget

from ..palette import viewer_surface_color

PLACEHOLDER_TEXT = "No picture selected\nClick to import a photo"


class ImageViewer(QWidget):
    """Canvas that scales the current frame to fit and invites a click to import."""

    clicked = Signal()
    """Emitted when the user clicks the canvas, placeholder included."""

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._pixmap: Optional[QPixmap] = None

        self._label = QLabel(self)
        self._label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._label.setSizePolicy(QSizePolicy.Policy.Ignored, QSizePolicy.Policy.Ignored)
        # Scaling is done manually in ``_render_pixmap`` so the aspect ratio is kept.
        self._label.setScaledContents(False)
        self._label.setCursor(Qt.CursorShape.PointingHandCursor)

        # Translucent overlay shown while a picked photo is decoded.
        self._loading_overlay = QLabel("Loading…", self)
        self._loading_overlay.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._loading_overlay.setAttribute(Qt.WidgetAttribute.WA_TransparentForMouseEvents, True)
        self._loading_overlay.setStyleSheet(
            "background-color: rgba(0, 0, 0, 128); color: white; font-size: 18px;"
        )
        self._loading_overlay.hide()

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self._label)

        self.setStyleSheet(f"background-color: {viewer_surface_color(self)};")
        self.setMinimumSize(240, 240)
        self._show_placeholder()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def set_image(self, image: Optional[QImage]) -> None:
        """Display *image*, or the import placeholder when it is empty."""

        self._loading_overlay.hide()
        if image is None or image.isNull():
            self._pixmap = None
            self._show_placeholder()
            return
        self._pixmap = QPixmap.fromImage(image)
        self._render_pixmap()

    def pixmap(self) -> Optional[QPixmap]:
        """Return a copy of the displayed pixmap."""

        if self._pixmap is None or self._pixmap.isNull():
            return None
        return QPixmap(self._pixmap)

    def has_image(self) -> bool:
        return self._pixmap is not None and not self._pixmap.isNull()

    def set_loading(self, loading: bool) -> None:
        """Toggle the inline loading indicator on the viewer surface."""

        if loading:
            self._loading_overlay.setGeometry(self.rect())
            self._loading_overlay.show()
            self._loading_overlay.raise_()
            return
        self._loading_overlay.hide()

    # ------------------------------------------------------------------
    # QWidget overrides
    # ------------------------------------------------------------------
    def resizeEvent(self, event: QEvent) -> None:  # type: ignore[override]
        super().resizeEvent(event)
        if self._loading_overlay.isVisible():
            self._loading_overlay.setGeometry(self.rect())
        if self._pixmap is not None:
            self._render_pixmap()

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:  # type: ignore[override]
        if event.button() == Qt.MouseButton.LeftButton:
            self.clicked.emit()
            event.accept()
            return
        super().mouseReleaseEvent(event)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _show_placeholder(self) -> None:
        self._label.clear()
        self._label.setText(PLACEHOLDER_TEXT)

    def _render_pixmap(self) -> None:
        if self._pixmap is None or self._pixmap.isNull():
            return
        target = self._label.size()
        if target.width() <= 0 or target.height() <= 0:
            target = self.size()
        scaled = self._pixmap.scaled(
            target,
            Qt.AspectRatioMode.KeepAspectRatio,
            Qt.TransformationMode.SmoothTransformation,
        )
        self._label.setPixmap(scaled)


__all__ = ["ImageViewer", "PLACEHOLDER_TEXT"]

"""Main application window: photo canvas, intensity slider and actions."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from PySide6.QtGui import QAction, QImage
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QMenu,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from ...config import APP_NAME
from ...core.filter_kinds import FilterKind
from ...core.image_source import FileImageSelection
from .controllers.filter_controller import FilterController
from .controllers.share_controller import ShareController
from .palette import BUTTON_STYLESHEET, WINDOW_MARGINS, WINDOW_SPACING
from .widgets import dialogs
from .widgets.filter_picker import pick_filter
from .widgets.image_viewer import ImageViewer
from .widgets.intensity_slider import IntensitySlider

_LOGGER = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Single screen hosting the whole filter workflow."""

    def __init__(
        self,
        controller: FilterController,
        share: Optional[ShareController] = None,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self._controller = controller
        self._share = share if share is not None else ShareController(self)
        self._last_directory: Optional[Path] = None

        self.setWindowTitle(APP_NAME)
        self.resize(720, 820)
        self._build_ui()

        self._viewer.clicked.connect(self.import_photo)
        self._slider.valueChanged.connect(self._controller.set_intensity)
        self._change_filter_button.clicked.connect(self.choose_filter)
        self._controller.outputChanged.connect(self._handle_output_changed)
        self._controller.loadingChanged.connect(self._viewer.set_loading)
        self._controller.filterChanged.connect(self._handle_filter_changed)
        self._controller.reviewRequested.connect(self._handle_review_requested)

    # ------------------------------------------------------------------
    # UI construction
    # ------------------------------------------------------------------
    def _build_ui(self) -> None:
        central = QWidget(self)
        layout = QVBoxLayout(central)
        layout.setContentsMargins(*WINDOW_MARGINS)
        layout.setSpacing(WINDOW_SPACING)

        title = QLabel(APP_NAME, central)
        font = title.font()
        font.setPointSize(font.pointSize() + 10)
        font.setBold(True)
        title.setFont(font)
        layout.addWidget(title)

        self._viewer = ImageViewer(central)
        layout.addWidget(self._viewer, 1)

        self._slider = IntensitySlider("Intensity", central, initial=self._controller.intensity())
        layout.addWidget(self._slider)

        actions = QHBoxLayout()
        self._change_filter_button = QPushButton("Change filter", central)
        self._change_filter_button.setStyleSheet(BUTTON_STYLESHEET)
        actions.addWidget(self._change_filter_button)

        self._filter_label = QLabel(self._controller.filter_kind().label, central)
        actions.addWidget(self._filter_label)
        actions.addStretch(1)

        self._share_button = QPushButton("Share", central)
        self._share_button.setStyleSheet(BUTTON_STYLESHEET)
        share_menu = QMenu(self._share_button)
        self._copy_action = QAction("Copy Image", self)
        self._copy_action.triggered.connect(self.copy_image)
        self._save_action = QAction("Save As…", self)
        self._save_action.triggered.connect(self.save_image_as)
        share_menu.addAction(self._copy_action)
        share_menu.addAction(self._save_action)
        self._share_button.setMenu(share_menu)
        self._share_button.setVisible(False)
        actions.addWidget(self._share_button)

        layout.addLayout(actions)
        self.setCentralWidget(central)

    # ------------------------------------------------------------------
    # Accessors used by tests and the application entry point
    # ------------------------------------------------------------------
    @property
    def viewer(self) -> ImageViewer:
        return self._viewer

    @property
    def slider(self) -> IntensitySlider:
        return self._slider

    @property
    def share_button(self) -> QPushButton:
        return self._share_button

    # ------------------------------------------------------------------
    # User actions
    # ------------------------------------------------------------------
    def import_photo(self) -> None:
        path = dialogs.select_image_file(self, self._last_directory)
        if path is None:
            self._controller.load_selection(None)
            return
        self.open_path(path)

    def open_path(self, path: Path) -> None:
        """Load *path* in the background and render it once decoded."""

        self._last_directory = path.parent
        _LOGGER.info("Importing %s", path)
        self._controller.load_selection(FileImageSelection(path))

    def choose_filter(self) -> None:
        kind = pick_filter(self, self._controller.filter_kind())
        if kind is None:
            return
        self._controller.select_filter(kind)

    def copy_image(self) -> None:
        self._share.copy_to_clipboard(self._controller.share_payload())

    def save_image_as(self) -> None:
        payload = self._controller.share_payload()
        if payload is None:
            return
        target = dialogs.ask_save_image_path(self, "Instafilter.png")
        if target is None:
            return
        self._share.save_to_path(payload, target)

    # ------------------------------------------------------------------
    # Controller callbacks
    # ------------------------------------------------------------------
    def _handle_output_changed(self, image: QImage) -> None:
        self._viewer.set_image(image)
        self._share_button.setVisible(not image.isNull())

    def _handle_filter_changed(self, value: str) -> None:
        self._filter_label.setText(FilterKind(value).label)

    def _handle_review_requested(self) -> None:
        dialogs.show_review_prompt(self)


__all__ = ["MainWindow"]

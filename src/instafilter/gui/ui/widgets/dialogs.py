"""Reusable dialog helpers for the desktop UI."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from PySide6.QtGui import QPalette
from PySide6.QtWidgets import QApplication, QFileDialog, QMessageBox, QWidget

from ....config import APP_NAME, SUPPORTED_IMAGE_PATTERNS


def select_image_file(parent: QWidget, start: Optional[Path] = None) -> Optional[Path]:
    """Return an image chosen by the user or ``None`` when cancelled."""

    patterns = " ".join(SUPPORTED_IMAGE_PATTERNS)
    directory = str(start) if start is not None else ""
    path, _ = QFileDialog.getOpenFileName(
        parent,
        "Import a photo",
        directory,
        f"Images ({patterns});;All Files (*)",
    )
    if not path:
        return None
    return Path(path)


def ask_save_image_path(parent: QWidget, suggested_name: str) -> Optional[Path]:
    """Return the destination for an exported PNG or ``None`` when cancelled."""

    path, _ = QFileDialog.getSaveFileName(parent, "Save image", suggested_name, "PNG Image (*.png)")
    if not path:
        return None
    target = Path(path)
    if target.suffix.lower() != ".png":
        target = target.with_suffix(".png")
    return target


def _apply_theme(box: QMessageBox, parent: Optional[QWidget]) -> None:
    """Apply the active theme colors to the message box."""

    palette = parent.palette() if parent else QApplication.palette()
    bg_color = palette.color(QPalette.ColorRole.Window).name()
    text_color = palette.color(QPalette.ColorRole.WindowText).name()
    stylesheet = (
        f"QMessageBox {{ background-color: {bg_color}; color: {text_color}; }}"
        f"QLabel {{ color: {text_color}; }}"
    )
    box.setStyleSheet(stylesheet)


def show_review_prompt(parent: Optional[QWidget], *, title: str = APP_NAME) -> None:
    """Ask the user to rate the app."""

    box = QMessageBox(
        QMessageBox.Icon.Question,
        title,
        f"Enjoying {APP_NAME}? Tap a star to rate it in the store.",
        QMessageBox.StandardButton.Ok,
        parent,
    )
    _apply_theme(box, parent)
    box.exec()


__all__ = ["ask_save_image_path", "select_image_file", "show_review_prompt"]

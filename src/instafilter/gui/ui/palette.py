"""Shared colour utilities and constants for the Qt GUI layer."""

from __future__ import annotations

from PySide6.QtGui import QPalette
from PySide6.QtWidgets import QWidget

# Accent used for the primary action buttons.
ACCENT_COLOR_HEX = "#1e73ff"

BUTTON_STYLESHEET = (
    f"QPushButton {{ color: {ACCENT_COLOR_HEX}; border: none; padding: 6px 4px; font-weight: 600; }}"
    "QPushButton:disabled { color: rgba(0, 0, 0, 90); }"
)

WINDOW_MARGINS = (16, 16, 16, 16)
WINDOW_SPACING = 12


def viewer_surface_color(widget: QWidget) -> str:
    """Return the name of the palette-derived viewer surface colour.

    Deriving the canvas colour from *widget*'s palette keeps the photo area
    aligned with the surrounding window chrome under any theme.
    """

    background_role = widget.backgroundRole()
    if background_role == QPalette.ColorRole.NoRole:
        background_role = QPalette.ColorRole.Window
    return widget.palette().color(background_role).name()


__all__ = [
    "ACCENT_COLOR_HEX",
    "BUTTON_STYLESHEET",
    "WINDOW_MARGINS",
    "WINDOW_SPACING",
    "viewer_surface_color",
]

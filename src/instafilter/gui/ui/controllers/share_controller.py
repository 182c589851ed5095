"""Controller exporting the rendered image to the clipboard or disk."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from PySide6.QtCore import QByteArray, QMimeData, QObject, Signal
from PySide6.QtGui import QGuiApplication

from ....core.share import SharePayload
from ..image_utils import pil_to_qimage

_LOGGER = logging.getLogger(__name__)


class ShareController(QObject):
    """Hand a :class:`SharePayload` to the platform share targets."""

    shared = Signal(str)
    """Emitted with a short description of where the image went."""

    def copy_to_clipboard(self, payload: Optional[SharePayload]) -> bool:
        """Place the image, its PNG bytes and its title on the clipboard."""

        if payload is None:
            return False
        mime = QMimeData()
        mime.setImageData(pil_to_qimage(payload.image))
        mime.setData(payload.mime_type, QByteArray(payload.data))
        mime.setText(payload.title)
        QGuiApplication.clipboard().setMimeData(mime)
        self.shared.emit("clipboard")
        return True

    def save_to_path(self, payload: Optional[SharePayload], path: Path) -> bool:
        """Write the PNG bytes to *path*."""

        if payload is None:
            return False
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(payload.data)
        except OSError:
            _LOGGER.exception("Failed to save shared image to %s", path)
            return False
        self.shared.emit(str(path))
        return True


__all__ = ["ShareController"]

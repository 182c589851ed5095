"""Worker that fetches and decodes a picked image on a background thread."""

from __future__ import annotations

import logging

from PySide6.QtCore import QObject, QRunnable, Signal

from ....core.image_codec import decode_image
from ....core.image_source import ImageSelection
from ....core.session import SessionStatus
from ....errors import DecodeError

_LOGGER = logging.getLogger(__name__)


class ImageLoadSignals(QObject):
    """Signals emitted by :class:`ImageLoadWorker`."""

    loaded = Signal(int, object)
    """Emitted with the selection token and the decoded ``PIL.Image``."""

    failed = Signal(int, str, str)
    """Emitted with the selection token, a ``SessionStatus`` value and a reason."""

    finished = Signal(int)
    """Emitted once the worker has completed, even on failure."""

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)


class ImageLoadWorker(QRunnable):
    """Read the selection's bytes and decode them off the GUI thread."""

    def __init__(self, selection: ImageSelection, token: int) -> None:
        super().__init__()
        self.setAutoDelete(True)
        self._selection = selection
        self._token = int(token)
        # Created on the caller's thread so connected slots run there.
        self.signals = ImageLoadSignals()

    @property
    def token(self) -> int:
        return self._token

    def run(self) -> None:  # type: ignore[override]
        """Fetch, decode and report the outcome for this token."""

        try:
            data = self._selection.read_bytes()
            if data is None:
                self.signals.failed.emit(
                    self._token, SessionStatus.NO_SELECTION.value, "No image data available"
                )
                return
            try:
                image = decode_image(data)
            except DecodeError as exc:
                self.signals.failed.emit(self._token, SessionStatus.DECODE_FAILURE.value, str(exc))
                return
            self.signals.loaded.emit(self._token, image)
        except Exception as exc:  # pragma: no cover
            _LOGGER.exception("Image load worker crashed")
            self.signals.failed.emit(self._token, SessionStatus.DECODE_FAILURE.value, str(exc))
        finally:
            self.signals.finished.emit(self._token)


__all__ = ["ImageLoadSignals", "ImageLoadWorker"]

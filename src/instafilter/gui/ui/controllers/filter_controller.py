"""Controller that drives the filter session from UI events."""

from __future__ import annotations

import logging
from typing import Optional

from PIL import Image
from PySide6.QtCore import QObject, QThreadPool, Signal
from PySide6.QtGui import QImage

from ....core.filter_engine import FilterEngine, PillowFilterEngine
from ....core.filter_kinds import FilterKind
from ....core.image_source import ImageSelection
from ....core.session import FilterSession, SessionResult, SessionStatus
from ....core.share import SharePayload, build_share_payload
from ....core.usage import ReviewPolicy, UsageCounter
from ..image_utils import pil_to_qimage
from ..tasks.image_load_worker import ImageLoadSignals, ImageLoadWorker

_LOGGER = logging.getLogger(__name__)


class FilterController(QObject):
    """Own the :class:`FilterSession` and publish its output to the window.

    Every public method runs on the GUI thread.  Image decoding is handed to
    :class:`ImageLoadWorker`; its result is routed back through queued
    signals and applied only if no newer pick has started meanwhile.
    Failures never reach the user, they simply leave the current preview in
    place.
    """

    outputChanged = Signal(QImage)
    """Emitted with the freshly rendered frame."""

    filterChanged = Signal(str)
    """Emitted with the ``FilterKind`` value after a filter switch."""

    loadingChanged = Signal(bool)
    """Emitted when a background image load starts or the latest one ends."""

    reviewRequested = Signal()
    """Emitted when the usage counter asks for the review prompt."""

    def __init__(
        self,
        *,
        engine: Optional[FilterEngine] = None,
        usage: Optional[UsageCounter] = None,
        review_policy: ReviewPolicy = ReviewPolicy.EVERY_CHANGE,
        thread_pool: Optional[QThreadPool] = None,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self._session = FilterSession(
            engine if engine is not None else PillowFilterEngine(),
            usage,
            review_requester=self.reviewRequested.emit,
            review_policy=review_policy,
        )
        self._pool = thread_pool if thread_pool is not None else QThreadPool.globalInstance()
        # Keeps each worker's signal holder alive until its queued signals land.
        self._pending: dict[int, ImageLoadSignals] = {}

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    @property
    def session(self) -> FilterSession:
        return self._session

    def filter_kind(self) -> FilterKind:
        return self._session.filter_kind

    def intensity(self) -> float:
        return self._session.intensity

    def output_image(self) -> Optional[Image.Image]:
        return self._session.output_image

    def has_output(self) -> bool:
        return self._session.output_image is not None

    def share_payload(self) -> Optional[SharePayload]:
        """Return the current output packaged for the share surface."""

        return build_share_payload(self._session.output_image)

    def load_selection(self, selection: Optional[ImageSelection]) -> Optional[int]:
        """Fetch and decode *selection* in the background.

        Returns the selection token, or ``None`` when the picker was
        dismissed and nothing was scheduled.
        """

        if selection is None:
            self._session.select_image(None)
            return None

        token = self._session.begin_selection()
        worker = ImageLoadWorker(selection, token)
        worker.signals.loaded.connect(self._handle_loaded)
        worker.signals.failed.connect(self._handle_failed)
        worker.signals.finished.connect(self._handle_finished)
        self._pending[token] = worker.signals
        self.loadingChanged.emit(True)
        self._pool.start(worker)
        return token

    def set_intensity(self, value: float) -> SessionResult:
        result = self._session.set_intensity(value)
        self._publish(result)
        return result

    def select_filter(self, kind: FilterKind) -> SessionResult:
        result = self._session.select_filter(kind)
        self.filterChanged.emit(self._session.filter_kind.value)
        self._publish(result)
        return result

    def wait_for_done(self, msecs: int = -1) -> bool:
        """Block until queued image loads have finished running."""

        return self._pool.waitForDone(msecs)

    # ------------------------------------------------------------------
    # Worker callbacks
    # ------------------------------------------------------------------
    def _handle_loaded(self, token: int, image: Image.Image) -> None:
        self._publish(self._session.accept_image(token, image))

    def _handle_failed(self, token: int, status: str, reason: str) -> None:
        self._session.reject_selection(token, SessionStatus(status), reason)

    def _handle_finished(self, token: int) -> None:
        self._pending.pop(token, None)
        if token == self._session.selection_token:
            self.loadingChanged.emit(False)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _publish(self, result: SessionResult) -> None:
        if not result.ok or result.output is None:
            return
        self.outputChanged.emit(pil_to_qimage(result.output))


__all__ = ["FilterController"]

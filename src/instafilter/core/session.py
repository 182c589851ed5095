"""State and workflow behind the single filter screen."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from PIL import Image

from ..config import DEFAULT_INTENSITY, REVIEW_THRESHOLD
from ..errors import DecodeError, RenderError
from .filter_engine import FilterEngine
from .filter_kinds import DEFAULT_FILTER, FilterKind, ParameterRole
from .image_codec import decode_image
from .parameters import clamp_intensity, derive_parameters
from .usage import ReviewPolicy, UsageCounter, should_request_review

_LOGGER = logging.getLogger(__name__)


class SessionStatus(str, Enum):
    """Outcome of a session operation."""

    OK = "ok"
    NO_SELECTION = "no_selection"
    DECODE_FAILURE = "decode_failure"
    RENDER_UNAVAILABLE = "render_unavailable"
    NO_SOURCE = "no_source"
    STALE_SELECTION = "stale_selection"


@dataclass(frozen=True)
class SessionResult:
    """Status of an operation plus the output image visible afterwards."""

    status: SessionStatus
    output: Optional[Image.Image] = None
    review_requested: bool = False

    @property
    def ok(self) -> bool:
        return self.status is SessionStatus.OK


class FilterSession:
    """Hold the selected filter, source image and intensity; render on change.

    Every failure is reported through :class:`SessionResult` and leaves the
    previously displayed output untouched.  Image selection is split into
    :meth:`begin_selection` and :meth:`accept_image` so a slow background
    decode can never overwrite a newer pick: only the result carrying the
    latest token is applied.
    """

    def __init__(
        self,
        engine: FilterEngine,
        usage: Optional[UsageCounter] = None,
        *,
        filter_kind: FilterKind = DEFAULT_FILTER,
        intensity: float = DEFAULT_INTENSITY,
        review_requester: Optional[Callable[[], None]] = None,
        review_policy: ReviewPolicy = ReviewPolicy.EVERY_CHANGE,
        review_threshold: int = REVIEW_THRESHOLD,
    ) -> None:
        self._engine = engine
        self._usage = usage if usage is not None else UsageCounter()
        self._filter_kind = filter_kind
        self._intensity = clamp_intensity(intensity)
        self._review_requester = review_requester
        self._review_policy = review_policy
        self._review_threshold = review_threshold
        self._source: Optional[Image.Image] = None
        self._output: Optional[Image.Image] = None
        self._token = 0

    # ------------------------------------------------------------------
    # State accessors
    # ------------------------------------------------------------------
    @property
    def filter_kind(self) -> FilterKind:
        return self._filter_kind

    @property
    def intensity(self) -> float:
        return self._intensity

    @property
    def source_image(self) -> Optional[Image.Image]:
        return self._source

    @property
    def output_image(self) -> Optional[Image.Image]:
        return self._output

    @property
    def usage(self) -> UsageCounter:
        return self._usage

    @property
    def selection_token(self) -> int:
        """Return the token of the most recent selection."""

        return self._token

    def current_parameters(self) -> dict[ParameterRole, float]:
        """Return the engine parameters the next render would use."""

        roles = self._engine.accepted_roles(self._filter_kind)
        return derive_parameters(roles, self._intensity)

    # ------------------------------------------------------------------
    # Image selection
    # ------------------------------------------------------------------
    def select_image(self, data: Optional[bytes]) -> SessionResult:
        """Decode *data* and render it with the current filter.

        ``None`` means the picker was dismissed and leaves the session
        untouched.
        """

        if data is None:
            return self._result(SessionStatus.NO_SELECTION)
        token = self.begin_selection()
        try:
            image = decode_image(data)
        except DecodeError as exc:
            return self.reject_selection(token, SessionStatus.DECODE_FAILURE, str(exc))
        return self.accept_image(token, image)

    def begin_selection(self) -> int:
        """Start a new selection and return its token."""

        self._token += 1
        return self._token

    def accept_image(self, token: int, image: Image.Image) -> SessionResult:
        """Install *image* as the source if *token* is still the latest."""

        if token != self._token:
            _LOGGER.debug("Dropping stale image for selection %d (latest %d)", token, self._token)
            return self._result(SessionStatus.STALE_SELECTION)
        self._source = image
        return self.render()

    def reject_selection(
        self, token: int, status: SessionStatus, reason: str = ""
    ) -> SessionResult:
        """Record that loading for *token* failed with *status*."""

        if token != self._token:
            return self._result(SessionStatus.STALE_SELECTION)
        _LOGGER.debug("Selection %d not applied (%s) %s", token, status.value, reason)
        return self._result(status)

    # ------------------------------------------------------------------
    # User adjustments
    # ------------------------------------------------------------------
    def set_intensity(self, value: float) -> SessionResult:
        self._intensity = clamp_intensity(value)
        return self.render()

    def select_filter(self, kind: FilterKind) -> SessionResult:
        """Switch to *kind*, render, and count the change toward a review."""

        self._filter_kind = FilterKind(kind)
        result = self.render()

        old_count, new_count = self._usage.increment()
        review = should_request_review(
            old_count,
            new_count,
            threshold=self._review_threshold,
            policy=self._review_policy,
        )
        if review and self._review_requester is not None:
            self._review_requester()
        return SessionResult(result.status, result.output, review_requested=review)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    def render(self) -> SessionResult:
        """Re-run the engine for the current source, filter and intensity."""

        if self._source is None:
            return self._result(SessionStatus.NO_SOURCE)

        parameters = self.current_parameters()
        try:
            output = self._engine.render(self._filter_kind, self._source, parameters)
        except RenderError as exc:
            _LOGGER.debug("Render of %s unavailable: %s", self._filter_kind.label, exc)
            return self._result(SessionStatus.RENDER_UNAVAILABLE)
        self._output = output
        return self._result(SessionStatus.OK)

    def _result(self, status: SessionStatus) -> SessionResult:
        return SessionResult(status, self._output)


__all__ = ["FilterSession", "SessionResult", "SessionStatus"]

"""Filter usage tracking and the review prompt threshold rule."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Optional, Protocol

from ..config import FILTER_COUNT_KEY, REVIEW_THRESHOLD

_LOGGER = logging.getLogger(__name__)


class SettingsStore(Protocol):
    def get(self, key: str, default: Any = None) -> Any: ...

    def set(self, key: str, value: Any) -> None: ...


class ReviewPolicy(str, Enum):
    """When a filter change should trigger the review prompt."""

    EVERY_CHANGE = "every_change"
    """Fire on every change once the counter reached the threshold."""

    ONCE = "once"
    """Fire only on the change that crosses the threshold."""


def should_request_review(
    old_count: int,
    new_count: int,
    *,
    threshold: int = REVIEW_THRESHOLD,
    policy: ReviewPolicy = ReviewPolicy.EVERY_CHANGE,
) -> bool:
    """Return ``True`` when moving from *old_count* to *new_count* asks for a review."""

    if policy is ReviewPolicy.ONCE:
        return old_count < threshold <= new_count
    return new_count >= threshold


class UsageCounter:
    """Count filter changes, optionally persisting through a settings store."""

    def __init__(
        self,
        settings: Optional[SettingsStore] = None,
        *,
        key: str = FILTER_COUNT_KEY,
        initial: int = 0,
    ) -> None:
        self._settings = settings
        self._key = key
        self._value = self._restore(initial)

    @property
    def value(self) -> int:
        return self._value

    def increment(self) -> tuple[int, int]:
        """Bump the counter and return the ``(old, new)`` pair."""

        old = self._value
        self._value = old + 1
        if self._settings is not None:
            try:
                self._settings.set(self._key, self._value)
            except OSError as exc:
                _LOGGER.warning("Could not persist %s=%d: %s", self._key, self._value, exc)
        return old, self._value

    def _restore(self, initial: int) -> int:
        if self._settings is None:
            return int(initial)
        stored = self._settings.get(self._key, initial)
        try:
            return max(0, int(stored))
        except (TypeError, ValueError):
            _LOGGER.warning("Discarding invalid %s value %r", self._key, stored)
            return int(initial)


__all__ = ["ReviewPolicy", "SettingsStore", "UsageCounter", "should_request_review"]

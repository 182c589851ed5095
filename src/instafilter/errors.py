"""Exception hierarchy shared across Instafilter."""

from __future__ import annotations


class InstafilterError(Exception):
    """Base class for all application errors."""


class DecodeError(InstafilterError):
    """Raised when selected image bytes cannot be decoded."""


class RenderError(InstafilterError):
    """Raised when the filter engine cannot produce an output image."""


class SettingsInvalidError(InstafilterError):
    """Raised when the persisted settings file is unreadable or malformed."""

"""Application wide constants and environment lookups."""

from __future__ import annotations

import os
from pathlib import Path

APP_NAME = "Instafilter"

SHARE_TITLE = "Instafilter processed image"
"""Title attached to exported images and the share preview."""

DEFAULT_INTENSITY = 0.5

# Slider value multipliers per parameter role.
INTENSITY_SCALE = 1.0
RADIUS_SCALE = 200.0
SCALE_SCALE = 10.0

REVIEW_THRESHOLD = 3
FILTER_COUNT_KEY = "filterCount"

SETTINGS_FILE_NAME = "settings.json"
HOME_ENV_VAR = "INSTAFILTER_HOME"
LOG_LEVEL_ENV_VAR = "INSTAFILTER_LOG_LEVEL"

SUPPORTED_IMAGE_PATTERNS = (
    "*.jpg",
    "*.jpeg",
    "*.png",
    "*.bmp",
    "*.gif",
    "*.tif",
    "*.tiff",
    "*.webp",
)


def app_home() -> Path:
    """Return the directory holding persisted application state."""

    override = os.environ.get(HOME_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".instafilter"


def settings_path() -> Path:
    """Return the location of the JSON settings file."""

    return app_home() / SETTINGS_FILE_NAME

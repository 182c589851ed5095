"""Logging helpers for Instafilter."""

from __future__ import annotations

import logging
import os
from typing import Optional

from ..config import LOG_LEVEL_ENV_VAR

_LOGGER: Optional[logging.Logger] = None


def _resolve_level() -> int:
    name = os.environ.get(LOG_LEVEL_ENV_VAR, "INFO").strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def get_logger() -> logging.Logger:
    """Return the package logger configured for Instafilter."""

    global _LOGGER
    if _LOGGER is None:
        _LOGGER = logging.getLogger("instafilter")
        if not _LOGGER.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
            handler.setFormatter(formatter)
            _LOGGER.addHandler(handler)
        _LOGGER.setLevel(_resolve_level())
    return _LOGGER

"""Persistent key/value settings backed by a JSON file."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional

from .config import settings_path
from .errors import SettingsInvalidError
from .utils.jsonio import read_json, write_json

_LOGGER = logging.getLogger(__name__)


class SettingsManager:
    """Load, query and persist user preferences.

    Values are written through to disk on every :meth:`set` so a crash never
    loses the usage counter.  A missing file simply yields an empty store, and
    a malformed one is logged and replaced on the next write.
    """

    def __init__(self, path: Optional[Path] = None) -> None:
        self._path = Path(path) if path is not None else settings_path()
        self._data: dict[str, Any] = {}
        self._loaded = False

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> None:
        """Read the settings file, falling back to defaults on failure."""

        self._loaded = True
        if not self._path.exists():
            self._data = {}
            return
        try:
            self._data = read_json(self._path)
        except SettingsInvalidError:
            _LOGGER.warning("Ignoring unreadable settings file %s", self._path)
            self._data = {}

    def get(self, key: str, default: Any = None) -> Any:
        if not self._loaded:
            self.load()
        return self._data.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """Store *value* under *key* and persist the file immediately."""

        if not self._loaded:
            self.load()
        self._data[key] = value
        write_json(self._path, self._data)


__all__ = ["SettingsManager"]

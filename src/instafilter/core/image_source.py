"""Where picked image bytes come from."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Protocol

_LOGGER = logging.getLogger(__name__)


class ImageSelection(Protocol):
    """A user pick whose encoded bytes may be fetched later, off the UI thread."""

    def read_bytes(self) -> Optional[bytes]:
        """Return the encoded image, or ``None`` when nothing is available."""


@dataclass(frozen=True)
class FileImageSelection:
    """Selection backed by a file on disk."""

    path: Path

    def read_bytes(self) -> Optional[bytes]:
        try:
            return self.path.read_bytes()
        except OSError as exc:
            _LOGGER.debug("Unable to read %s: %s", self.path, exc)
            return None


@dataclass(frozen=True)
class BytesImageSelection:
    """Selection whose bytes are already in memory, e.g. from the clipboard."""

    data: Optional[bytes]

    def read_bytes(self) -> Optional[bytes]:
        return self.data


__all__ = ["BytesImageSelection", "FileImageSelection", "ImageSelection"]

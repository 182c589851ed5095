"""Conversions between Pillow images and Qt image types."""

from __future__ import annotations

from PIL import Image
from PIL.ImageQt import ImageQt
from PySide6.QtGui import QImage


def pil_to_qimage(image: Image.Image) -> QImage:
    """Return a detached ``ARGB32`` :class:`QImage` copy of *image*.

    ``ImageQt`` wraps Pillow's buffer without copying it, so the result is
    deep-copied before the Pillow image can be garbage collected.
    """

    rgba = image if image.mode == "RGBA" else image.convert("RGBA")
    qt_image = QImage(ImageQt(rgba)).copy()
    if qt_image.format() != QImage.Format.Format_ARGB32:
        qt_image = qt_image.convertToFormat(QImage.Format.Format_ARGB32)
    return qt_image


__all__ = ["pil_to_qimage"]

"""Channel helpers shared by the filter executors."""

from __future__ import annotations

from typing import Optional

from PIL import Image


def split_alpha(image: Image.Image) -> tuple[Image.Image, Optional[Image.Image]]:
    """Return the colour channels of *image* and its alpha band, if any.

    Filters only ever touch colour data.  Detaching the alpha band keeps
    blurs and edge kernels from bleeding transparency into the result.
    """

    if image.mode == "RGBA":
        return image.convert("RGB"), image.getchannel("A")
    if image.mode != "RGB":
        return image.convert("RGB"), None
    return image, None


def merge_alpha(rgb: Image.Image, alpha: Optional[Image.Image]) -> Image.Image:
    """Reattach *alpha* to *rgb*, resizing it when the filter changed geometry."""

    if alpha is None:
        return rgb
    if alpha.size != rgb.size:
        alpha = alpha.resize(rgb.size)
    result = rgb.convert("RGBA")
    result.putalpha(alpha)
    return result

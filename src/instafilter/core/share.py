"""Package the rendered output for sharing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from PIL import Image

from ..config import SHARE_TITLE
from .image_codec import encode_png


@dataclass(frozen=True)
class SharePayload:
    """Image plus the title/preview pair shown by the share surface."""

    title: str
    image: Image.Image
    data: bytes
    """PNG encoded pixels."""

    mime_type: str = "image/png"


def build_share_payload(
    image: Optional[Image.Image], title: str = SHARE_TITLE
) -> Optional[SharePayload]:
    """Return a payload for *image*, or ``None`` when nothing has been rendered."""

    if image is None:
        return None
    return SharePayload(title=title, image=image, data=encode_png(image))


__all__ = ["SharePayload", "build_share_payload"]

"""Decode picked image bytes and encode rendered output."""

from __future__ import annotations

import io

from PIL import Image, ImageOps, UnidentifiedImageError

from ..errors import DecodeError


def decode_image(data: bytes) -> Image.Image:
    """Return a fully loaded image decoded from *data*.

    EXIF orientation is applied so the pixels match what a photo viewer
    would show, and the mode is normalised to ``RGB`` or ``RGBA``.
    """

    if not data:
        raise DecodeError("No image data")
    try:
        with Image.open(io.BytesIO(data)) as handle:
            handle.load()
            image = ImageOps.exif_transpose(handle)
            if image is handle:
                image = handle.copy()
        image = normalise_mode(image)
    except (
        UnidentifiedImageError,
        Image.DecompressionBombError,
        OSError,
        SyntaxError,
        ValueError,
    ) as exc:
        raise DecodeError(f"Unable to decode image: {exc}") from exc
    return image


def normalise_mode(image: Image.Image) -> Image.Image:
    """Convert *image* to ``RGBA`` when it carries transparency, otherwise ``RGB``."""

    if image.mode in ("RGB", "RGBA"):
        return image
    has_alpha = image.mode in ("LA", "PA") or (
        image.mode == "P" and "transparency" in image.info
    )
    return image.convert("RGBA" if has_alpha else "RGB")


def encode_png(image: Image.Image) -> bytes:
    """Return *image* encoded as PNG."""

    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()


__all__ = ["decode_image", "encode_png", "normalise_mode"]

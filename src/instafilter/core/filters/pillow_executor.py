"""Filters implemented with Pillow's native kernels.

Every function takes an ``RGB`` image and returns a new ``RGB`` image of the
same size; alpha handling lives in the engine.
"""

from __future__ import annotations

from PIL import Image, ImageFilter


def gaussian_blur(image: Image.Image, radius: float) -> Image.Image:
    """Blur *image* with a Gaussian of standard deviation *radius* pixels."""

    if radius <= 0.0:
        return image.copy()
    return image.filter(ImageFilter.GaussianBlur(radius=radius))


def unsharp_mask(image: Image.Image, radius: float, intensity: float) -> Image.Image:
    """Sharpen *image*; *intensity* ``1.0`` adds the full high-pass detail."""

    if radius <= 0.0 or intensity <= 0.0:
        return image.copy()
    percent = int(round(intensity * 100.0))
    return image.filter(ImageFilter.UnsharpMask(radius=radius, percent=percent, threshold=0))


def build_gain_lut(gain: float) -> list[int]:
    """Return an 8-bit lookup table multiplying each channel value by *gain*."""

    return [max(0, min(255, int(round(value * gain)))) for value in range(256)]


def edges(image: Image.Image, intensity: float) -> Image.Image:
    """Return the edge map of *image* with its magnitude scaled by *intensity*."""

    detected = image.filter(ImageFilter.FIND_EDGES)
    # ``Image.point`` applies the table per channel in native code, so one
    # curve is repeated for R, G and B.
    table = build_gain_lut(max(0.0, intensity)) * 3
    return detected.point(table)


__all__ = ["build_gain_lut", "edges", "gaussian_blur", "unsharp_mask"]

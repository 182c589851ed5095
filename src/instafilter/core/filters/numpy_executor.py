"""NumPy vectorised filters that Pillow has no native kernel for.

Each function takes an ``RGB`` image and returns a new ``RGB`` image of the
same size.
"""

from __future__ import annotations

import numpy as np
from PIL import Image

_CRYSTALLIZE_SEED = 0x5EED
"""Fixed seed so the cell layout is stable while the slider moves."""

_SEPIA_MATRIX = np.array(
    [
        [0.393, 0.769, 0.189],
        [0.349, 0.686, 0.168],
        [0.272, 0.534, 0.131],
    ],
    dtype=np.float32,
)


def _to_float(image: Image.Image) -> np.ndarray:
    return np.asarray(image, dtype=np.float32)


def _to_image(array: np.ndarray) -> Image.Image:
    return Image.fromarray(np.clip(array, 0, 255).astype(np.uint8))


def _np_mix(a: np.ndarray, b: np.ndarray, t: float) -> np.ndarray:
    """Vectorised equivalent of GLSL's ``mix`` helper."""

    return a * (1.0 - t) + b * t


def sepia_tone(image: Image.Image, intensity: float) -> Image.Image:
    """Blend *image* towards its sepia rendition by *intensity*."""

    amount = float(max(0.0, min(1.0, intensity)))
    if amount == 0.0:
        return image.copy()
    rgb = _to_float(image)
    sepia = rgb @ _SEPIA_MATRIX.T
    return _to_image(_np_mix(rgb, sepia, amount))


def vignette(image: Image.Image, intensity: float, radius: float) -> Image.Image:
    """Darken a border band *radius* pixels wide by up to *intensity*."""

    amount = float(max(0.0, min(1.0, intensity)))
    band = float(radius)
    if amount == 0.0 or band <= 0.0:
        return image.copy()

    rgb = _to_float(image)
    h, w = rgb.shape[:2]
    yy, xx = np.ogrid[:h, :w]
    cy = (h - 1) / 2.0
    cx = (w - 1) / 2.0
    dist = np.sqrt((xx - cx) ** 2 + (yy - cy) ** 2)
    max_dist = float(np.sqrt(cx**2 + cy**2)) or 1.0
    inner = max(0.0, max_dist - band)
    mask = np.clip((dist - inner) / max(1e-3, max_dist - inner), 0.0, 1.0)
    # Smoothstep keeps the falloff free of a visible ring at the inner edge.
    mask = mask * mask * (3.0 - 2.0 * mask)
    factor = 1.0 - mask * amount
    rgb *= factor[..., None].astype(np.float32)
    return _to_image(rgb)


def pixellate(image: Image.Image, scale: float) -> Image.Image:
    """Replace *image* with square blocks of ``round(scale)`` pixels.

    Every block is filled with the mean colour of the pixels it covers.
    Blocks on the right and bottom edges are padded by edge replication
    before averaging so partial tiles are not darkened.
    """

    block = int(round(scale))
    if block <= 1:
        return image.copy()

    rgb = _to_float(image)
    h, w = rgb.shape[:2]
    rows = -(-h // block)
    cols = -(-w // block)
    padded = np.pad(
        rgb,
        ((0, rows * block - h), (0, cols * block - w), (0, 0)),
        mode="edge",
    )
    tiles = padded.reshape(rows, block, cols, block, 3).mean(axis=(1, 3))
    expanded = np.repeat(np.repeat(tiles, block, axis=0), block, axis=1)
    return _to_image(np.rint(expanded[:h, :w]))


def crystallize(image: Image.Image, radius: float) -> Image.Image:
    """Shatter *image* into Voronoi cells roughly *radius* pixels across.

    One seed is jittered inside every cell of a square grid.  Each pixel
    takes the colour found under the nearest seed, which only needs the
    3x3 neighbourhood of grid cells around the pixel to be searched.
    """

    cell = int(round(radius))
    if cell <= 1:
        return image.copy()

    rgb = np.asarray(image, dtype=np.uint8)
    h, w = rgb.shape[:2]
    rows = -(-h // cell)
    cols = -(-w // cell)

    # Seeds for a grid padded by one cell on every side so border pixels
    # still see a full neighbourhood.
    rng = np.random.default_rng(_CRYSTALLIZE_SEED)
    jitter = rng.random((2, rows + 2, cols + 2), dtype=np.float32)
    seed_y = (np.arange(-1, rows + 1, dtype=np.float32)[:, None] + jitter[0]) * cell
    seed_x = (np.arange(-1, cols + 1, dtype=np.float32)[None, :] + jitter[1]) * cell

    ys = np.arange(h, dtype=np.float32) + 0.5
    xs = np.arange(w, dtype=np.float32) + 0.5
    cell_y = np.arange(h) // cell
    cell_x = np.arange(w) // cell

    best = np.full((h, w), np.inf, dtype=np.float32)
    best_r = np.zeros((h, w), dtype=np.intp)
    best_c = np.zeros((h, w), dtype=np.intp)
    for dy in (-1, 0, 1):
        r = (cell_y + dy + 1)[:, None]
        for dx in (-1, 0, 1):
            c = (cell_x + dx + 1)[None, :]
            dist = (seed_y[r, c] - ys[:, None]) ** 2 + (seed_x[r, c] - xs[None, :]) ** 2
            closer = dist < best
            best = np.where(closer, dist, best)
            best_r = np.where(closer, r, best_r)
            best_c = np.where(closer, c, best_c)

    sample_y = np.clip(seed_y.astype(np.intp), 0, h - 1)
    sample_x = np.clip(seed_x.astype(np.intp), 0, w - 1)
    palette = rgb[sample_y, sample_x]
    return Image.fromarray(np.ascontiguousarray(palette[best_r, best_c]))


__all__ = ["crystallize", "pixellate", "sepia_tone", "vignette"]

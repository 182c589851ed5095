"""Image filter implementations backing :class:`PillowFilterEngine`.

- pillow_executor: filters built from Pillow's native kernels
- numpy_executor: vectorised filters Pillow does not provide
- utils: alpha channel helpers
"""

from __future__ import annotations

from .numpy_executor import crystallize, pixellate, sepia_tone, vignette
from .pillow_executor import edges, gaussian_blur, unsharp_mask
from .utils import merge_alpha, split_alpha

__all__ = [
    "crystallize",
    "edges",
    "gaussian_blur",
    "merge_alpha",
    "pixellate",
    "sepia_tone",
    "split_alpha",
    "unsharp_mask",
    "vignette",
]

"""Filter identifiers and the parameter roles they may accept."""

from __future__ import annotations

from enum import Enum


class ParameterRole(str, Enum):
    """Numeric parameter slots a filter may expose."""

    INTENSITY = "intensity"
    RADIUS = "radius"
    SCALE = "scale"


class FilterKind(str, Enum):
    """The image transformations offered in the filter picker."""

    CRYSTALLIZE = "crystallize"
    EDGES = "edges"
    GAUSSIAN_BLUR = "gaussian_blur"
    PIXELLATE = "pixellate"
    SEPIA_TONE = "sepia_tone"
    UNSHARP_MASK = "unsharp_mask"
    VIGNETTE = "vignette"

    @property
    def label(self) -> str:
        """Return the title shown on the picker button."""

        return _LABELS[self]


_LABELS = {
    FilterKind.CRYSTALLIZE: "Crystallize",
    FilterKind.EDGES: "Edges",
    FilterKind.GAUSSIAN_BLUR: "Gaussian Blur",
    FilterKind.PIXELLATE: "Pixellate",
    FilterKind.SEPIA_TONE: "Sepia Tone",
    FilterKind.UNSHARP_MASK: "Unsharp Mask",
    FilterKind.VIGNETTE: "Vignette",
}

DEFAULT_FILTER = FilterKind.SEPIA_TONE

__all__ = ["DEFAULT_FILTER", "FilterKind", "ParameterRole"]

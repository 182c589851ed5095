"""Filter engine boundary and its Pillow implementation."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Callable, Mapping

from PIL import Image

from ..errors import RenderError
from . import filters
from .filter_kinds import FilterKind, ParameterRole

_LOGGER = logging.getLogger(__name__)

_I = ParameterRole.INTENSITY
_R = ParameterRole.RADIUS
_S = ParameterRole.SCALE

FILTER_ROLES: dict[FilterKind, frozenset[ParameterRole]] = {
    FilterKind.CRYSTALLIZE: frozenset({_R}),
    FilterKind.EDGES: frozenset({_I}),
    FilterKind.GAUSSIAN_BLUR: frozenset({_R}),
    FilterKind.PIXELLATE: frozenset({_S}),
    FilterKind.SEPIA_TONE: frozenset({_I}),
    FilterKind.UNSHARP_MASK: frozenset({_I, _R}),
    FilterKind.VIGNETTE: frozenset({_I, _R}),
}
"""Parameter roles each filter accepts."""

# Values used when a caller omits a role the filter accepts.
_ROLE_DEFAULTS: dict[FilterKind, dict[ParameterRole, float]] = {
    FilterKind.CRYSTALLIZE: {_R: 20.0},
    FilterKind.EDGES: {_I: 1.0},
    FilterKind.GAUSSIAN_BLUR: {_R: 10.0},
    FilterKind.PIXELLATE: {_S: 8.0},
    FilterKind.SEPIA_TONE: {_I: 1.0},
    FilterKind.UNSHARP_MASK: {_I: 0.5, _R: 2.5},
    FilterKind.VIGNETTE: {_I: 0.0, _R: 1.0},
}

_Operation = Callable[[Image.Image, Mapping[ParameterRole, float]], Image.Image]

_OPERATIONS: dict[FilterKind, _Operation] = {
    FilterKind.CRYSTALLIZE: lambda img, p: filters.crystallize(img, p[_R]),
    FilterKind.EDGES: lambda img, p: filters.edges(img, p[_I]),
    FilterKind.GAUSSIAN_BLUR: lambda img, p: filters.gaussian_blur(img, p[_R]),
    FilterKind.PIXELLATE: lambda img, p: filters.pixellate(img, p[_S]),
    FilterKind.SEPIA_TONE: lambda img, p: filters.sepia_tone(img, p[_I]),
    FilterKind.UNSHARP_MASK: lambda img, p: filters.unsharp_mask(img, p[_R], p[_I]),
    FilterKind.VIGNETTE: lambda img, p: filters.vignette(img, p[_I], p[_R]),
}


class FilterEngine(ABC):
    """Turn an input image plus named numeric parameters into an output image."""

    @abstractmethod
    def accepted_roles(self, kind: FilterKind) -> frozenset[ParameterRole]:
        """Return the parameter roles *kind* understands."""

    @abstractmethod
    def render(
        self,
        kind: FilterKind,
        image: Image.Image,
        parameters: Mapping[ParameterRole, float],
    ) -> Image.Image:
        """Apply *kind* to *image*.

        Raises :class:`RenderError` when no output can be produced.
        """


class PillowFilterEngine(FilterEngine):
    """CPU engine built on Pillow kernels and numpy array math."""

    def accepted_roles(self, kind: FilterKind) -> frozenset[ParameterRole]:
        return FILTER_ROLES[kind]

    def render(
        self,
        kind: FilterKind,
        image: Image.Image,
        parameters: Mapping[ParameterRole, float],
    ) -> Image.Image:
        accepted = self.accepted_roles(kind)
        unexpected = set(parameters) - accepted
        if unexpected:
            names = ", ".join(sorted(role.value for role in unexpected))
            raise RenderError(f"{kind.label} does not accept: {names}")
        if image.width == 0 or image.height == 0:
            raise RenderError("Cannot render an empty image")

        resolved = dict(_ROLE_DEFAULTS[kind])
        resolved.update({role: float(value) for role, value in parameters.items()})

        rgb, alpha = filters.split_alpha(image)
        try:
            output = _OPERATIONS[kind](rgb, resolved)
        except (ValueError, MemoryError, OSError) as exc:
            raise RenderError(f"{kind.label} failed: {exc}") from exc
        _LOGGER.debug("Rendered %s with %s", kind.label, resolved)
        return filters.merge_alpha(output, alpha)


__all__ = ["FILTER_ROLES", "FilterEngine", "PillowFilterEngine"]

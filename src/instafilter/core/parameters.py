"""Map the single intensity slider onto a filter's native parameters."""

from __future__ import annotations

from collections.abc import Iterable

from ..config import INTENSITY_SCALE, RADIUS_SCALE, SCALE_SCALE
from .filter_kinds import ParameterRole

ROLE_SCALES: dict[ParameterRole, float] = {
    ParameterRole.INTENSITY: INTENSITY_SCALE,
    ParameterRole.RADIUS: RADIUS_SCALE,
    ParameterRole.SCALE: SCALE_SCALE,
}


def clamp_intensity(value: float) -> float:
    """Return *value* limited to the slider's ``[0, 1]`` range."""

    numeric = float(value)
    if numeric != numeric:  # NaN
        raise ValueError("Intensity must be a number")
    return max(0.0, min(1.0, numeric))


def derive_parameters(
    roles: Iterable[ParameterRole], intensity: float
) -> dict[ParameterRole, float]:
    """Return the engine parameters for *roles* derived from *intensity*.

    Only the roles present in *roles* appear in the result, each scaled
    linearly by :data:`ROLE_SCALES`.
    """

    value = clamp_intensity(intensity)
    return {role: value * ROLE_SCALES[role] for role in roles}


__all__ = ["ROLE_SCALES", "clamp_intensity", "derive_parameters"]

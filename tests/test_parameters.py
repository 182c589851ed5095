"""Tests for the intensity to parameter mapping."""

import pytest

from instafilter.core.filter_engine import FILTER_ROLES
from instafilter.core.filter_kinds import FilterKind, ParameterRole
from instafilter.core.parameters import clamp_intensity, derive_parameters

_VALUES = [0.0, 0.25, 0.5, 0.7, 1.0]


@pytest.mark.parametrize("value", _VALUES)
def test_radius_role_scales_by_two_hundred(value):
    params = derive_parameters(FILTER_ROLES[FilterKind.GAUSSIAN_BLUR], value)
    assert params == {ParameterRole.RADIUS: pytest.approx(value * 200)}


@pytest.mark.parametrize("value", _VALUES)
def test_scale_role_scales_by_ten(value):
    params = derive_parameters(FILTER_ROLES[FilterKind.PIXELLATE], value)
    assert params == {ParameterRole.SCALE: pytest.approx(value * 10)}


@pytest.mark.parametrize("value", _VALUES)
def test_intensity_role_is_passed_through(value):
    params = derive_parameters(FILTER_ROLES[FilterKind.SEPIA_TONE], value)
    assert params == {ParameterRole.INTENSITY: value}


def test_radius_boundaries():
    roles = {ParameterRole.RADIUS}
    assert derive_parameters(roles, 0.0)[ParameterRole.RADIUS] == 0.0
    assert derive_parameters(roles, 1.0)[ParameterRole.RADIUS] == 200.0


def test_multiple_roles_each_get_their_own_scale():
    params = derive_parameters(FILTER_ROLES[FilterKind.VIGNETTE], 0.5)
    assert params == {ParameterRole.INTENSITY: 0.5, ParameterRole.RADIUS: 100.0}


def test_no_roles_yields_empty_mapping():
    assert derive_parameters([], 0.8) == {}


def test_out_of_range_values_are_clamped():
    assert clamp_intensity(-0.5) == 0.0
    assert clamp_intensity(3.0) == 1.0
    assert derive_parameters({ParameterRole.SCALE}, 2.0) == {ParameterRole.SCALE: 10.0}


def test_nan_is_rejected():
    with pytest.raises(ValueError):
        clamp_intensity(float("nan"))

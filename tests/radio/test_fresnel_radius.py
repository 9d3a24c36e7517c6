"""Tests for wavelength and first Fresnel-zone radius."""

from __future__ import annotations

import math

import pytest

from domain.geodesy.errors import InvalidInputError
from domain.radio.services import (
    SPEED_OF_LIGHT_M_S,
    first_fresnel_radius,
    midpoint_fresnel_radius,
    wavelength_m,
)


# ===========================================================================
# Wavelength
# ===========================================================================
def test_wavelength_at_5ghz_uses_simplified_speed_of_light():
    assert SPEED_OF_LIGHT_M_S == 3.0e8
    assert wavelength_m(5e9) == pytest.approx(0.06, rel=1e-12)


@pytest.mark.parametrize("frequency_hz", [0, -1.0, math.nan, math.inf, True, "5e9"])
def test_wavelength_rejects_bad_frequency(frequency_hz):
    with pytest.raises(InvalidInputError):
        wavelength_m(frequency_hz)


# ===========================================================================
# Radius formula
# ===========================================================================
def test_radius_symmetric_split():
    """sqrt(0.06 * 1000 * 1000 / 2000) = sqrt(30)."""
    assert first_fresnel_radius(1000.0, 1000.0, 5e9) == pytest.approx(
        math.sqrt(30.0), rel=1e-12
    )


def test_radius_asymmetric_split():
    # sqrt(0.03 * 250 * 750 / 1000)
    assert first_fresnel_radius(250.0, 750.0, 10e9) == pytest.approx(
        math.sqrt(5.625), rel=1e-12
    )


def test_radius_is_symmetric_in_legs():
    assert first_fresnel_radius(300.0, 700.0, 2.4e9) == pytest.approx(
        first_fresnel_radius(700.0, 300.0, 2.4e9), rel=1e-12
    )


def test_radius_is_zero_at_an_antenna():
    assert first_fresnel_radius(0.0, 5000.0, 5e9) == 0.0


@pytest.mark.parametrize("frequency_hz", [900e6, 2.4e9, 5e9, 24e9])
def test_doubling_frequency_divides_radius_by_sqrt2(frequency_hz):
    r1 = first_fresnel_radius(6000.0, 4000.0, frequency_hz)
    r2 = first_fresnel_radius(6000.0, 4000.0, 2 * frequency_hz)

    assert r1 / r2 == pytest.approx(math.sqrt(2), rel=1e-12)


def test_midpoint_split_is_the_maximum_along_the_path():
    total = 10_000.0
    peak = first_fresnel_radius(total / 2, total / 2, 5e9)

    for d1 in (0.0, 1000.0, 2500.0, 4999.0, 7500.0, 10_000.0):
        assert first_fresnel_radius(d1, total - d1, 5e9) <= peak


@pytest.mark.parametrize(
    "d1, d2, frequency_hz",
    [
        (-1.0, 100.0, 5e9),
        (100.0, -0.5, 5e9),
        (0.0, 0.0, 5e9),
        (math.nan, 100.0, 5e9),
        (100.0, math.inf, 5e9),
        (100.0, 100.0, 0.0),
        (100.0, 100.0, -5e9),
    ],
)
def test_radius_invalid_input(d1, d2, frequency_hz):
    with pytest.raises(InvalidInputError):
        first_fresnel_radius(d1, d2, frequency_hz)


# ===========================================================================
# Midpoint radius
# ===========================================================================
def test_midpoint_radius_closed_form():
    """At the midpoint r = sqrt(lambda * d / 4)."""
    assert midpoint_fresnel_radius(14442.26, 5e9) == pytest.approx(
        math.sqrt(0.06 * 14442.26 / 4), rel=1e-12
    )


def test_midpoint_radius_zero_length_link():
    assert midpoint_fresnel_radius(0.0, 5e9) == 0.0


def test_midpoint_radius_zero_length_still_checks_frequency():
    with pytest.raises(InvalidInputError):
        midpoint_fresnel_radius(0.0, -1.0)

"""Tests for the closed-form thermodynamic formulas (sounding/thermodynamics.py)."""

from __future__ import annotations

import math

import metpy.calc as mpcalc
import pytest
from metpy.units import units

from soundingbrief.analysis.sounding.thermodynamics import (
    celsius_to_kelvin,
    equivalent_potential_temperature_k,
    kelvin_to_celsius,
    knots_to_ms,
    lcl_pressure_hpa,
    lcl_temperature_k,
    mixing_ratio,
    ms_to_knots,
    saturation_vapor_pressure,
    virtual_temperature_k,
)
from soundingbrief.errors import InvalidInputError


def test_saturation_vapor_pressure_at_freezing():
    """Bolton formula reduces to its leading constant at 0 C."""
    assert saturation_vapor_pressure(0) == 6.112


@pytest.mark.parametrize("t_c", [-20.0, -5.0, 10.0, 25.0, 35.0])
def test_saturation_vapor_pressure_matches_metpy(t_c):
    expected = mpcalc.saturation_vapor_pressure(t_c * units.degC).to("hPa").magnitude
    assert saturation_vapor_pressure(t_c) == pytest.approx(float(expected), rel=5e-3)


def test_mixing_ratio_reference_value():
    """About 14.9 g/kg for saturated air at 20 C and 1000 hPa."""
    assert mixing_ratio(20, 1000) == pytest.approx(14.9, abs=0.1)


def test_mixing_ratio_increases_as_pressure_drops():
    assert mixing_ratio(10, 700) > mixing_ratio(10, 850) > mixing_ratio(10, 1000)


def test_mixing_ratio_rejects_pressure_below_vapor_pressure():
    """At 30 C the vapor pressure (~42 hPa) exceeds 40 hPa."""
    with pytest.raises(InvalidInputError):
        mixing_ratio(30, 40)


def test_virtual_temperature_uses_dewpoint_moisture():
    w = mixing_ratio(15, 900) / 1000
    assert virtual_temperature_k(25, 15, 900) == pytest.approx(298.15 * (1 + 0.61 * w))
    assert virtual_temperature_k(25, 15, 900) > celsius_to_kelvin(25)


def test_virtual_temperature_dry_air_is_close_to_temperature():
    assert virtual_temperature_k(20, -60, 1000) == pytest.approx(293.15, abs=0.01)


def test_lcl_temperature_saturated_parcel():
    """A saturated parcel is already at its LCL."""
    assert lcl_temperature_k(20, 20) == pytest.approx(293.15)
    assert lcl_pressure_hpa(20, 20, 950) == pytest.approx(950)


def test_lcl_below_parcel_for_dry_air():
    t_lcl = lcl_temperature_k(30, 22)
    assert t_lcl < celsius_to_kelvin(22)
    p_lcl = lcl_pressure_hpa(30, 22, 1000)
    assert 880 < p_lcl < 900


def test_lcl_matches_metpy():
    expected_p, expected_t = mpcalc.lcl(1000 * units.hPa, 30 * units.degC, 22 * units.degC)
    assert lcl_pressure_hpa(30, 22, 1000) == pytest.approx(expected_p.to("hPa").magnitude, abs=3)
    assert lcl_temperature_k(30, 22) == pytest.approx(expected_t.to("kelvin").magnitude, abs=0.5)


def test_equivalent_potential_temperature_exceeds_theta():
    theta = 303.15 * (1000 / 950) ** 0.2854
    assert equivalent_potential_temperature_k(30, 22, 950) > theta


def test_equivalent_potential_temperature_matches_metpy():
    expected = mpcalc.equivalent_potential_temperature(
        1000 * units.hPa, 30 * units.degC, 22 * units.degC
    ).to("kelvin").magnitude
    assert equivalent_potential_temperature_k(30, 22, 1000) == pytest.approx(float(expected), abs=1.5)


def test_equivalent_potential_temperature_dry_limit():
    """With negligible moisture theta-e collapses to theta."""
    theta = 273.15 * (1000 / 500) ** 0.2854
    assert equivalent_potential_temperature_k(0, -80, 500) == pytest.approx(theta, abs=0.05)


def test_unit_conversions():
    assert kelvin_to_celsius(celsius_to_kelvin(-17.5)) == pytest.approx(-17.5)
    assert knots_to_ms(10) == pytest.approx(5.1444)
    assert ms_to_knots(knots_to_ms(40)) == pytest.approx(40, rel=1e-4)
    assert math.isclose(celsius_to_kelvin(0), 273.15)

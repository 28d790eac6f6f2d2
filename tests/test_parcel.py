"""Tests for parcel lifting and parcel selection (sounding/parcel.py)."""

from __future__ import annotations

import pytest

from soundingbrief.analysis.sounding.adiabats import moist_adiabat_temperature_c
from soundingbrief.analysis.sounding.parcel import (
    lift_parcel,
    mixed_layer_average,
    most_unstable_level,
)
from soundingbrief.analysis.sounding.thermodynamics import (
    kelvin_to_celsius,
    lcl_pressure_hpa,
    lcl_temperature_k,
)


def test_lift_parcel_one_point_per_level(supercell_levels):
    lift = lift_parcel(30.0, 22.0, 1000.0, supercell_levels)
    assert [pt.pressure_hpa for pt in lift.path] == [lv.pressure_hpa for lv in supercell_levels]
    assert lift.path[0].temperature_c == pytest.approx(30.0)


def test_lift_parcel_reports_lcl(supercell_levels):
    lift = lift_parcel(30.0, 22.0, 1000.0, supercell_levels)
    assert lift.lcl_pressure_hpa == lcl_pressure_hpa(30.0, 22.0, 1000.0)
    assert lift.lcl_temperature_c == kelvin_to_celsius(lcl_temperature_k(30.0, 22.0))


def test_lift_parcel_switches_to_moist_above_lcl(supercell_levels):
    lift = lift_parcel(30.0, 22.0, 1000.0, supercell_levels)
    above = [pt for pt in lift.path if pt.pressure_hpa < lift.lcl_pressure_hpa]
    assert above
    for pt in above:
        assert pt.temperature_c == moist_adiabat_temperature_c(
            lift.lcl_temperature_c, lift.lcl_pressure_hpa, pt.pressure_hpa
        )


def test_lift_parcel_dry_below_lcl_cools_at_dry_rate(supercell_levels):
    lift = lift_parcel(30.0, 22.0, 1000.0, supercell_levels)
    at_950 = next(pt for pt in lift.path if pt.pressure_hpa == 950)
    assert at_950.temperature_c == pytest.approx(303.15 * 0.95 ** (287.04 / 1005.7) - 273.15)


def test_lift_parcel_skips_levels_below_origin(supercell_levels):
    lift = lift_parcel(18.0, 13.0, 850.0, supercell_levels)
    assert lift.path[0].pressure_hpa == 850
    assert all(pt.pressure_hpa <= 850 for pt in lift.path)
    assert len(lift.path) == 10


def test_lift_parcel_path_is_immutable(supercell_levels):
    lift = lift_parcel(30.0, 22.0, 1000.0, supercell_levels)
    assert isinstance(lift.path, tuple)


def test_mixed_layer_average(make_level):
    levels = [
        make_level(1000, 0, 30.0, 20.0),
        make_level(950, 450, 26.0, 18.0),
        make_level(900, 900, 22.0, 16.0),
        make_level(850, 1400, 18.0, 6.0),
        make_level(700, 3000, 5.0, -10.0),
    ]
    t, td = mixed_layer_average(levels)
    assert t == pytest.approx(26.0)
    assert td == pytest.approx(18.0)

    t, td = mixed_layer_average(levels, depth_hpa=50)
    assert t == pytest.approx(28.0)
    assert td == pytest.approx(19.0)


def test_mixed_layer_average_empty_window_falls_back_to_surface(make_level):
    levels = [make_level(1000, 0, 30.0, 20.0), make_level(900, 900, 22.0, 16.0)]
    assert mixed_layer_average(levels, depth_hpa=-10) == (30.0, 20.0)


def test_most_unstable_level_finds_elevated_moist_layer(make_level):
    levels = [
        make_level(1000, 0, 12.0, 0.0),
        make_level(925, 700, 14.0, 4.0),
        make_level(850, 1450, 20.0, 18.0),
        make_level(700, 3000, 6.0, -5.0),
        make_level(500, 5600, -15.0, -30.0),
    ]
    assert most_unstable_level(levels) is levels[2]


def test_most_unstable_level_ignores_levels_above_depth(make_level):
    levels = [
        make_level(1000, 0, 12.0, 0.0),
        make_level(900, 900, 8.0, -2.0),
        make_level(650, 3500, 15.0, 14.0),  # very high theta-e, but 350 hPa up
        make_level(500, 5600, -15.0, -30.0),
    ]
    assert most_unstable_level(levels) in levels[:2]
    assert most_unstable_level(levels, depth_hpa=400) is levels[2]


def test_most_unstable_level_tie_keeps_lowest(make_level):
    """Equal theta-e: the first (lowest) level wins."""
    first = make_level(1000, 0, 25.0, 18.0, wdir=180)
    twin = make_level(1000, 0, 25.0, 18.0, wdir=200)
    levels = [first, twin, make_level(700, 3000, 0.0, -20.0)]
    assert most_unstable_level(levels) is first

"""Lapse rates and precipitable water."""

from __future__ import annotations

from typing import Sequence

from soundingbrief.analysis.sounding.constants import G, MM_PER_INCH
from soundingbrief.analysis.sounding.interpolation import (
    height_at_pressure,
    interpolate_at_pressure,
    pressure_at_height,
)
from soundingbrief.analysis.sounding.thermodynamics import mixing_ratio
from soundingbrief.models import Level


def lapse_rate(levels: Sequence[Level], h_bottom_m: float, h_top_m: float) -> float | None:
    """Environmental lapse rate (C/km) between two AGL heights.

    Positive means cooling with height. None when either temperature is
    unavailable or the layer has no depth.
    """
    if h_top_m == h_bottom_m:
        return None
    t_bottom = interpolate_at_pressure(levels, pressure_at_height(levels, h_bottom_m), "temperature_c")
    t_top = interpolate_at_pressure(levels, pressure_at_height(levels, h_top_m), "temperature_c")
    if t_bottom is None or t_top is None:
        return None
    return -((t_top - t_bottom) / ((h_top_m - h_bottom_m) / 1000.0))


def lapse_rate_between_pressures(
    levels: Sequence[Level], p_bottom_hpa: float = 700.0, p_top_hpa: float = 500.0,
) -> float | None:
    """Environmental lapse rate (C/km) between two pressure levels, 700-500 hPa by default."""
    t_bottom = interpolate_at_pressure(levels, p_bottom_hpa, "temperature_c")
    t_top = interpolate_at_pressure(levels, p_top_hpa, "temperature_c")
    h_bottom = height_at_pressure(levels, p_bottom_hpa)
    h_top = height_at_pressure(levels, p_top_hpa)
    if None in (t_bottom, t_top, h_bottom, h_top) or h_top == h_bottom:
        return None
    return -((t_top - t_bottom) / ((h_top - h_bottom) / 1000.0))


def precipitable_water(levels: Sequence[Level]) -> float:
    """Total-column precipitable water in inches.

    Trapezoidal integral of dewpoint mixing ratio over pressure, divided by g.
    """
    pw = 0.0  # kg/m2
    for a, b in zip(levels, levels[1:]):
        w1 = mixing_ratio(a.dewpoint_c, a.pressure_hpa) / 1000.0
        w2 = mixing_ratio(b.dewpoint_c, b.pressure_hpa) / 1000.0
        dp_pa = (a.pressure_hpa - b.pressure_hpa) * 100.0
        pw += ((w1 + w2) / 2.0) * dp_pa / G
    return pw / MM_PER_INCH

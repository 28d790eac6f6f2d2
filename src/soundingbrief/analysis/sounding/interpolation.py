"""Vertical interpolation within a sounding profile.

A target outside the profile's coverage is "data unavailable", reported as
None rather than an error. Callers decide how to degrade.
"""

from __future__ import annotations

import math
from typing import Sequence

from soundingbrief.models import Level

LEVEL_FIELDS = frozenset({
    "pressure_hpa",
    "height_m",
    "temperature_c",
    "dewpoint_c",
    "wind_direction_deg",
    "wind_speed_kt",
})


def interpolate_at_pressure(
    levels: Sequence[Level], target_hpa: float, field: str,
) -> float | None:
    """Interpolate a level field at target pressure, linear in ln(p).

    Uses the first adjacent pair bracketing the target (inclusive, either
    orientation). Returns None if no pair brackets it.
    """
    if field not in LEVEL_FIELDS:
        raise ValueError(f"Unknown level field: {field}")

    for a, b in zip(levels, levels[1:]):
        pa, pb = a.pressure_hpa, b.pressure_hpa
        if not ((pa >= target_hpa >= pb) or (pa <= target_hpa <= pb)):
            continue
        va = getattr(a, field)
        if pa == pb:
            # zero-thickness pair can only bracket its own pressure
            return va
        frac = (math.log(target_hpa) - math.log(pa)) / (math.log(pb) - math.log(pa))
        return va + frac * (getattr(b, field) - va)
    return None


def height_at_pressure(levels: Sequence[Level], target_hpa: float) -> float | None:
    """Height (profile reference) at target pressure, or None outside coverage."""
    return interpolate_at_pressure(levels, target_hpa, "height_m")


def pressure_at_height(levels: Sequence[Level], height_agl_m: float) -> float:
    """Pressure at a height above the surface level.

    Pressure is linear in height between the first bracketing pair. When the
    target lies beyond the profile the topmost level's pressure is returned.
    """
    target = levels[0].height_m + height_agl_m

    for a, b in zip(levels, levels[1:]):
        ha, hb = a.height_m, b.height_m
        if not ((ha <= target <= hb) or (ha >= target >= hb)):
            continue
        if ha == hb:
            return a.pressure_hpa
        frac = (target - ha) / (hb - ha)
        return a.pressure_hpa + frac * (b.pressure_hpa - a.pressure_hpa)
    return levels[-1].pressure_hpa

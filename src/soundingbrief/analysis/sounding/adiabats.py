"""Dry and pseudo-adiabatic parcel temperature integrators."""

from __future__ import annotations

from soundingbrief.analysis.sounding.constants import CP, EPSILON, LV, RD
from soundingbrief.analysis.sounding.thermodynamics import (
    celsius_to_kelvin,
    kelvin_to_celsius,
    mixing_ratio,
)

MOIST_ADIABAT_STEPS = 200


def dry_adiabat_temperature_c(t0_c: float, p0_hpa: float, p1_hpa: float) -> float:
    """Temperature (C) at p1 of a dry parcel starting at (t0_c, p0)."""
    return kelvin_to_celsius(celsius_to_kelvin(t0_c) * (p1_hpa / p0_hpa) ** (RD / CP))


def moist_adiabat_temperature_c(
    t0_c: float,
    p0_hpa: float,
    p1_hpa: float,
    steps: int = MOIST_ADIABAT_STEPS,
) -> float:
    """Temperature (C) at p1 of a saturated parcel starting at (t0_c, p0).

    Explicit Euler integration of dT/dp = gamma_m / p over a fixed number of
    equal pressure steps, so the same inputs always give the same answer.
    Works upward (p1 < p0) and downward.
    """
    if steps < 1:
        raise ValueError(f"steps must be >= 1, got {steps}")

    t = celsius_to_kelvin(t0_c)
    p = p0_hpa
    dp = (p1_hpa - p0_hpa) / steps

    for _ in range(steps):
        w = mixing_ratio(kelvin_to_celsius(t), p) / 1000.0
        gamma_m = (RD * t + LV * w) / (CP + (LV * LV * w * EPSILON) / (RD * t * t))
        t += gamma_m / p * dp
        p += dp

    return kelvin_to_celsius(t)

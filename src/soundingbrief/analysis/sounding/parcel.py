"""Parcel lifting and parcel selection (mixed-layer, most-unstable)."""

from __future__ import annotations

import logging
from typing import Sequence

from soundingbrief.analysis.sounding.adiabats import (
    MOIST_ADIABAT_STEPS,
    dry_adiabat_temperature_c,
    moist_adiabat_temperature_c,
)
from soundingbrief.analysis.sounding.thermodynamics import (
    equivalent_potential_temperature_k,
    kelvin_to_celsius,
    lcl_pressure_hpa,
    lcl_temperature_k,
)
from soundingbrief.models import Level, ParcelLift, ParcelPoint

logger = logging.getLogger(__name__)

MIXED_LAYER_DEPTH_HPA = 100.0
MOST_UNSTABLE_DEPTH_HPA = 300.0


def lift_parcel(
    t_c: float,
    td_c: float,
    origin_hpa: float,
    levels: Sequence[Level],
    moist_steps: int = MOIST_ADIABAT_STEPS,
) -> ParcelLift:
    """Lift a parcel through the profile levels at or above its origin.

    Dry adiabat from the origin down to the LCL pressure, moist adiabat from
    the LCL above it. One path point per profile level; levels below the
    origin (higher pressure) are skipped.
    """
    p_lcl = lcl_pressure_hpa(t_c, td_c, origin_hpa)
    t_lcl = kelvin_to_celsius(lcl_temperature_k(t_c, td_c))

    path = []
    for lv in levels:
        p = lv.pressure_hpa
        if p > origin_hpa:
            continue
        if p >= p_lcl:
            parcel_t = dry_adiabat_temperature_c(t_c, origin_hpa, p)
        else:
            parcel_t = moist_adiabat_temperature_c(t_lcl, p_lcl, p, moist_steps)
        path.append(ParcelPoint(pressure_hpa=p, temperature_c=parcel_t))

    return ParcelLift(path=tuple(path), lcl_pressure_hpa=p_lcl, lcl_temperature_c=t_lcl)


def mixed_layer_average(
    levels: Sequence[Level], depth_hpa: float = MIXED_LAYER_DEPTH_HPA,
) -> tuple[float, float]:
    """Mean (temperature, dewpoint) of the levels within depth_hpa of the surface.

    Falls back to the surface values when no level lies in the window.
    """
    sfc = levels[0]
    top_hpa = sfc.pressure_hpa - depth_hpa
    temps: list[float] = []
    dewpoints: list[float] = []

    for lv in levels:
        if lv.pressure_hpa < top_hpa:
            break
        if lv.pressure_hpa > sfc.pressure_hpa:
            continue
        temps.append(lv.temperature_c)
        dewpoints.append(lv.dewpoint_c)

    if not temps:
        logger.debug("Empty %.0f hPa mixed layer, using surface values", depth_hpa)
        return sfc.temperature_c, sfc.dewpoint_c
    return sum(temps) / len(temps), sum(dewpoints) / len(dewpoints)


def most_unstable_level(
    levels: Sequence[Level], depth_hpa: float = MOST_UNSTABLE_DEPTH_HPA,
) -> Level:
    """Level with the highest theta-e in the lowest depth_hpa.

    Strict ``>`` keeps the first (lowest) level on ties.
    """
    top_hpa = levels[0].pressure_hpa - depth_hpa
    best = levels[0]
    best_theta_e = float("-inf")

    for lv in levels:
        if lv.pressure_hpa < top_hpa:
            break
        theta_e = equivalent_potential_temperature_k(lv.temperature_c, lv.dewpoint_c, lv.pressure_hpa)
        if theta_e > best_theta_e:
            best_theta_e = theta_e
            best = lv

    logger.debug("Most-unstable level %.1f hPa (theta-e %.1f K)", best.pressure_hpa, best_theta_e)
    return best

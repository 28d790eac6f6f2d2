"""CAPE/CIN integration of a parcel path against the environment."""

from __future__ import annotations

import logging
from typing import Sequence

from soundingbrief.analysis.sounding.constants import G
from soundingbrief.analysis.sounding.interpolation import height_at_pressure, interpolate_at_pressure
from soundingbrief.analysis.sounding.thermodynamics import celsius_to_kelvin
from soundingbrief.models import EnergyResult, Level, LevelPoint, ParcelPoint

logger = logging.getLogger(__name__)


def integrate_buoyancy(
    levels: Sequence[Level], path: Sequence[ParcelPoint],
) -> EnergyResult:
    """Accumulate layer buoyant energy along the parcel path.

    Each layer's energy is g * mean fractional buoyancy * thickness. Positive
    layers add to CAPE; the first one fixes the LFC at its base and every one
    moves the EL to its top. Negative layers add to CIN only until the LFC is
    found. Layers the environment does not cover are skipped.
    """
    cape = 0.0
    cin = 0.0
    lfc: LevelPoint | None = None
    el: LevelPoint | None = None

    for lower, upper in zip(path, path[1:]):
        p1, p2 = lower.pressure_hpa, upper.pressure_hpa

        env_t1 = interpolate_at_pressure(levels, p1, "temperature_c")
        env_t2 = interpolate_at_pressure(levels, p2, "temperature_c")
        if env_t1 is None or env_t2 is None:
            logger.debug("No environment temperature for %.1f-%.1f hPa, skipping", p1, p2)
            continue

        env_k1 = celsius_to_kelvin(env_t1)
        env_k2 = celsius_to_kelvin(env_t2)
        buoyancy1 = (celsius_to_kelvin(lower.temperature_c) - env_k1) / env_k1
        buoyancy2 = (celsius_to_kelvin(upper.temperature_c) - env_k2) / env_k2
        mean_buoyancy = (buoyancy1 + buoyancy2) / 2.0

        z1 = height_at_pressure(levels, p1)
        z2 = height_at_pressure(levels, p2)
        if z1 is None or z2 is None:
            logger.debug("No height for %.1f-%.1f hPa, skipping", p1, p2)
            continue

        energy = G * mean_buoyancy * (z2 - z1)

        if energy > 0:
            cape += energy
            if lfc is None:
                lfc = LevelPoint(pressure_hpa=p1, height_m=z1)
            el = LevelPoint(pressure_hpa=p2, height_m=z2)
        elif lfc is None:
            cin += energy

    return EnergyResult(cape_jkg=max(0.0, cape), cin_jkg=min(0.0, cin), lfc=lfc, el=el)

"""Wind components, layer-mean wind, bulk shear, Bunkers motion and SRH.

All vectors are in m/s. Heights are metres above the surface level.
"""

from __future__ import annotations

import logging
import math
from typing import Sequence

from soundingbrief.analysis.sounding.interpolation import interpolate_at_pressure, pressure_at_height
from soundingbrief.analysis.sounding.thermodynamics import knots_to_ms
from soundingbrief.models import Level, StormMotion, WindVector

logger = logging.getLogger(__name__)

BUNKERS_DEVIATION_MS = 7.5
BUNKERS_DEPTH_M = 6000.0


def wind_components(direction_deg: float, speed_kt: float) -> WindVector:
    """(u, v) in m/s from a meteorological direction (wind from) and speed in kt."""
    speed_ms = knots_to_ms(speed_kt)
    rad = math.radians(direction_deg)
    return WindVector(u_ms=-speed_ms * math.sin(rad), v_ms=-speed_ms * math.cos(rad))


def layer_mean_wind(levels: Sequence[Level], p_bottom_hpa: float, p_top_hpa: float) -> WindVector:
    """Pressure-weighted mean wind of the levels in [p_top, p_bottom].

    Zero vector when no level falls in the layer.
    """
    u_sum = v_sum = weight_sum = 0.0

    for lv in levels:
        if lv.pressure_hpa > p_bottom_hpa or lv.pressure_hpa < p_top_hpa:
            continue
        wind = wind_components(lv.wind_direction_deg, lv.wind_speed_kt)
        weight = lv.pressure_hpa
        u_sum += wind.u_ms * weight
        v_sum += wind.v_ms * weight
        weight_sum += weight

    if weight_sum == 0:
        return WindVector()
    return WindVector(u_ms=u_sum / weight_sum, v_ms=v_sum / weight_sum)


def bulk_shear(levels: Sequence[Level], h_bottom_m: float, h_top_m: float) -> WindVector:
    """Vector wind difference, top minus bottom, between two AGL heights.

    Direction and speed are interpolated separately at each bound. Returns a
    zero vector when either bound has no wind data.
    """
    p_bottom = pressure_at_height(levels, h_bottom_m)
    p_top = pressure_at_height(levels, h_top_m)

    dir_bottom = interpolate_at_pressure(levels, p_bottom, "wind_direction_deg")
    spd_bottom = interpolate_at_pressure(levels, p_bottom, "wind_speed_kt")
    dir_top = interpolate_at_pressure(levels, p_top, "wind_direction_deg")
    spd_top = interpolate_at_pressure(levels, p_top, "wind_speed_kt")

    if None in (dir_bottom, spd_bottom, dir_top, spd_top):
        logger.debug("Shear %.0f-%.0f m unavailable", h_bottom_m, h_top_m)
        return WindVector()

    bottom = wind_components(dir_bottom, spd_bottom)
    top = wind_components(dir_top, spd_top)
    return WindVector(u_ms=top.u_ms - bottom.u_ms, v_ms=top.v_ms - bottom.v_ms)


def bunkers_storm_motion(levels: Sequence[Level]) -> StormMotion:
    """Bunkers (2000) right- and left-mover estimates.

    0-6 km mean wind plus/minus 7.5 m/s perpendicular to the 0-6 km shear.
    Both movers equal the mean wind when the shear is exactly zero.
    """
    p_top = pressure_at_height(levels, BUNKERS_DEPTH_M)
    mean = layer_mean_wind(levels, levels[0].pressure_hpa, p_top)
    shear = bulk_shear(levels, 0.0, BUNKERS_DEPTH_M)

    shear_mag = shear.magnitude_ms
    if shear_mag == 0:
        return StormMotion(right=mean, left=mean, mean_wind=mean)

    cross_u = shear.v_ms / shear_mag
    cross_v = -shear.u_ms / shear_mag
    d = BUNKERS_DEVIATION_MS

    return StormMotion(
        right=WindVector(u_ms=mean.u_ms + d * cross_u, v_ms=mean.v_ms + d * cross_v),
        left=WindVector(u_ms=mean.u_ms - d * cross_u, v_ms=mean.v_ms - d * cross_v),
        mean_wind=mean,
    )


def storm_relative_helicity(
    levels: Sequence[Level],
    h_bottom_m: float,
    h_top_m: float,
    storm_u_ms: float,
    storm_v_ms: float,
) -> float:
    """Storm-relative helicity (m2/s2) over an AGL height band.

    Discrete sum of (u2*v1 - u1*v2) over consecutive storm-relative winds of
    the levels inside the band; sensitive to level spacing.
    """
    sfc_height = levels[0].height_m
    layer = [lv for lv in levels if h_bottom_m <= lv.height_m - sfc_height <= h_top_m]

    srh = 0.0
    for a, b in zip(layer, layer[1:]):
        wa = wind_components(a.wind_direction_deg, a.wind_speed_kt)
        wb = wind_components(b.wind_direction_deg, b.wind_speed_kt)
        sru1, srv1 = wa.u_ms - storm_u_ms, wa.v_ms - storm_v_ms
        sru2, srv2 = wb.u_ms - storm_u_ms, wb.v_ms - storm_v_ms
        srh += sru2 * srv1 - sru1 * srv2
    return srh

"""Sounding analysis subpackage.

Public API: analyze_sounding() takes a list of sounding levels and returns an
AnalysisResult with surface-based, mixed-layer and most-unstable parcel
energetics, shear, helicity, storm motion, lapse rates, precipitable water
and the STP/SCP composites.
"""

from __future__ import annotations

import logging
import math
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Iterable, Mapping, Sequence, Union

from soundingbrief.analysis.sounding.buoyancy import integrate_buoyancy
from soundingbrief.analysis.sounding.composites import (
    significant_tornado_parameter,
    supercell_composite_parameter,
)
from soundingbrief.analysis.sounding.diagnostics import (
    lapse_rate,
    lapse_rate_between_pressures,
    precipitable_water,
)
from soundingbrief.analysis.sounding.interpolation import height_at_pressure
from soundingbrief.analysis.sounding.kinematics import (
    bulk_shear,
    bunkers_storm_motion,
    storm_relative_helicity,
)
from soundingbrief.analysis.sounding.parcel import (
    lift_parcel,
    mixed_layer_average,
    most_unstable_level,
)
from soundingbrief.analysis.sounding.prepare import Profile, prepare_profile
from soundingbrief.analysis.sounding.thermodynamics import ms_to_knots
from soundingbrief.config import AnalysisConfig
from soundingbrief.errors import InsufficientDataError
from soundingbrief.models import AnalysisResult, Level, ParcelAnalysis, ParcelLift

logger = logging.getLogger(__name__)


def _analyze_parcel(
    levels: Sequence[Level], t_c: float, td_c: float, origin_hpa: float, moist_steps: int,
) -> tuple[ParcelLift, ParcelAnalysis]:
    """Lift one parcel and integrate its buoyancy."""
    lift = lift_parcel(t_c, td_c, origin_hpa, levels, moist_steps)
    energy = integrate_buoyancy(levels, lift.path)
    return lift, ParcelAnalysis(
        origin_pressure_hpa=origin_hpa,
        origin_temperature_c=t_c,
        origin_dewpoint_c=td_c,
        lcl_pressure_hpa=lift.lcl_pressure_hpa,
        lcl_temperature_c=lift.lcl_temperature_c,
        energy=energy,
    )


def _run_parcels(
    profile: Profile, config: AnalysisConfig,
) -> list[tuple[ParcelLift, ParcelAnalysis]]:
    """Surface-based, mixed-layer and most-unstable parcels, in that order.

    The three pipelines share only the immutable profile, so they may run on
    a thread pool; results are joined in submission order.
    """
    levels = profile.levels
    sfc = profile.surface
    ml_t, ml_td = mixed_layer_average(levels, config.mixed_layer_depth_hpa)
    mu = most_unstable_level(levels, config.most_unstable_depth_hpa)

    origins = [
        (sfc.temperature_c, sfc.dewpoint_c, sfc.pressure_hpa),
        (ml_t, ml_td, sfc.pressure_hpa),
        (mu.temperature_c, mu.dewpoint_c, mu.pressure_hpa),
    ]

    if not config.parallel_parcels:
        return [_analyze_parcel(levels, *origin, config.moist_adiabat_steps) for origin in origins]

    with ThreadPoolExecutor(max_workers=len(origins)) as pool:
        futures = [
            pool.submit(_analyze_parcel, levels, *origin, config.moist_adiabat_steps)
            for origin in origins
        ]
        return [future.result() for future in futures]


def _round_half_up(value: float, ndigits: int = 0) -> float:
    """Round exact halves toward +inf (2.5 -> 3, -2.5 -> -2); int when ndigits is 0."""
    if ndigits == 0:
        return math.floor(value + 0.5)
    scale = 10 ** ndigits
    return math.floor(value * scale + 0.5) / scale


def _round_or_none(value: float | None, ndigits: int = 0) -> float | None:
    """Round for display; missing or non-finite values become None."""
    if value is None or not math.isfinite(value):
        return None
    return _round_half_up(value, ndigits)


def analyze_sounding(
    levels: Iterable[Union[Level, Mapping[str, Any]]],
    config: AnalysisConfig | None = None,
) -> AnalysisResult | None:
    """Run the full convective analysis on a sounding.

    Pipeline: prepare → parcels (SB/ML/MU) → kinematics → diagnostics →
    composites. Returns None when the profile has too few levels; raises
    InvalidInputError for non-physical input. Values are rounded only here.
    """
    config = config or AnalysisConfig()

    try:
        profile = prepare_profile(levels)
    except InsufficientDataError as exc:
        logger.warning("Sounding not analyzed: %s", exc)
        return None

    lv = profile.levels
    sfc_height = profile.surface.height_m

    (sb_lift, sb), (_, ml), (_, mu) = _run_parcels(profile, config)

    lcl_height = height_at_pressure(lv, sb_lift.lcl_pressure_hpa)
    lcl_agl = lcl_height - sfc_height if lcl_height is not None else None

    # Kinematics
    storm_motion = bunkers_storm_motion(lv)
    shear_01 = bulk_shear(lv, 0.0, 1000.0)
    shear_06 = bulk_shear(lv, 0.0, 6000.0)
    right = storm_motion.right
    srh_01 = storm_relative_helicity(lv, 0.0, 1000.0, right.u_ms, right.v_ms)
    srh_03 = storm_relative_helicity(lv, 0.0, 3000.0, right.u_ms, right.v_ms)

    # Scalar diagnostics
    lr_03 = lapse_rate(lv, 0.0, 3000.0)
    lr_700_500 = lapse_rate_between_pressures(lv, 700.0, 500.0)
    pw = precipitable_water(lv)

    # Composites
    shear_06_kt = ms_to_knots(shear_06.magnitude_ms)
    stp = significant_tornado_parameter(
        sb.energy.cape_jkg, lcl_agl, srh_01, shear_06_kt, sb.energy.cin_jkg,
    )
    scp = supercell_composite_parameter(mu.energy.cape_jkg, srh_03, shear_06_kt)

    lfc = sb.energy.lfc
    el = sb.energy.el
    logger.debug(
        "SBCAPE %.0f, MLCAPE %.0f, MUCAPE %.0f J/kg, 0-6 km shear %.1f kt, STP %.2f, SCP %.2f",
        sb.energy.cape_jkg, ml.energy.cape_jkg, mu.energy.cape_jkg, shear_06_kt, stp, scp,
    )

    return AnalysisResult(
        surface_height_m=sfc_height,
        sbcape_jkg=_round_half_up(sb.energy.cape_jkg),
        sbcin_jkg=_round_half_up(sb.energy.cin_jkg),
        mlcape_jkg=_round_half_up(ml.energy.cape_jkg),
        mlcin_jkg=_round_half_up(ml.energy.cin_jkg),
        mucape_jkg=_round_half_up(mu.energy.cape_jkg),
        mucin_jkg=_round_half_up(mu.energy.cin_jkg),
        lcl_pressure_hpa=_round_half_up(sb.lcl_pressure_hpa),
        lcl_height_m=_round_or_none(lcl_agl),
        lcl_temperature_c=_round_half_up(sb.lcl_temperature_c, 1),
        lfc_pressure_hpa=_round_or_none(lfc.pressure_hpa) if lfc else None,
        lfc_height_m=_round_or_none(lfc.height_m - sfc_height) if lfc else None,
        el_pressure_hpa=_round_or_none(el.pressure_hpa) if el else None,
        el_height_m=_round_or_none(el.height_m - sfc_height) if el else None,
        shear_0_1km_kt=_round_half_up(ms_to_knots(shear_01.magnitude_ms)),
        shear_0_6km_kt=_round_half_up(shear_06_kt),
        srh_0_1km_m2s2=_round_half_up(srh_01),
        srh_0_3km_m2s2=_round_half_up(srh_03),
        lapse_rate_0_3km_c_per_km=_round_or_none(lr_03, 1),
        lapse_rate_700_500_c_per_km=_round_or_none(lr_700_500, 1),
        precipitable_water_in=_round_half_up(pw, 2),
        stp=_round_half_up(stp, 1),
        scp=_round_half_up(scp, 1),
        surface_based=sb,
        mixed_layer=ml,
        most_unstable=mu,
        shear_0_1km=shear_01,
        shear_0_6km=shear_06,
        storm_motion=storm_motion,
        surface_parcel_path=sb_lift.path,
    )

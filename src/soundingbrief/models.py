"""Pydantic v2 models for soundingbrief.

Input levels and every analysis record are frozen: the engine only ever
builds new objects from the ones it receives.
"""

from __future__ import annotations

import math
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Plausible atmospheric range; the Bolton formulas diverge near -243.5 C
MIN_TEMPERATURE_C = -150.0
MAX_TEMPERATURE_C = 70.0


class Level(BaseModel):
    """One observed sounding level."""

    model_config = ConfigDict(frozen=True)

    pressure_hpa: float = Field(gt=0, allow_inf_nan=False)
    height_m: float = Field(allow_inf_nan=False)
    temperature_c: float = Field(ge=MIN_TEMPERATURE_C, le=MAX_TEMPERATURE_C, allow_inf_nan=False)
    dewpoint_c: float = Field(ge=MIN_TEMPERATURE_C, le=MAX_TEMPERATURE_C, allow_inf_nan=False)
    wind_direction_deg: float = Field(allow_inf_nan=False)  # wind from, meteorological
    wind_speed_kt: float = Field(ge=0, allow_inf_nan=False)

    @model_validator(mode="after")
    def _validate_dewpoint(self) -> Level:
        if self.dewpoint_c > self.temperature_c:
            raise ValueError(
                f"Dewpoint {self.dewpoint_c} C above temperature "
                f"{self.temperature_c} C at {self.pressure_hpa} hPa"
            )
        return self


class ParcelPoint(BaseModel):
    """A single point on a lifted parcel's ascent."""

    model_config = ConfigDict(frozen=True)

    pressure_hpa: float
    temperature_c: float


class ParcelLift(BaseModel):
    """Ascent path of one parcel plus its lifted condensation level."""

    model_config = ConfigDict(frozen=True)

    path: tuple[ParcelPoint, ...]
    lcl_pressure_hpa: float
    lcl_temperature_c: float


class LevelPoint(BaseModel):
    """Pressure/height pair marking an LFC or EL."""

    model_config = ConfigDict(frozen=True)

    pressure_hpa: float
    height_m: float


class EnergyResult(BaseModel):
    """Buoyant energy of one parcel path against the environment."""

    model_config = ConfigDict(frozen=True)

    cape_jkg: float = Field(ge=0)
    cin_jkg: float = Field(le=0)
    lfc: Optional[LevelPoint] = None
    el: Optional[LevelPoint] = None


class ParcelAnalysis(BaseModel):
    """Full-precision result for one parcel variant (SB, ML or MU)."""

    model_config = ConfigDict(frozen=True)

    origin_pressure_hpa: float
    origin_temperature_c: float
    origin_dewpoint_c: float
    lcl_pressure_hpa: float
    lcl_temperature_c: float
    energy: EnergyResult


class WindVector(BaseModel):
    """Wind or shear vector in m/s."""

    model_config = ConfigDict(frozen=True)

    u_ms: float = 0.0
    v_ms: float = 0.0

    @property
    def magnitude_ms(self) -> float:
        return math.hypot(self.u_ms, self.v_ms)


class StormMotion(BaseModel):
    """Bunkers right/left mover estimates and the 0-6 km mean wind."""

    model_config = ConfigDict(frozen=True)

    right: WindVector
    left: WindVector
    mean_wind: WindVector


class AnalysisResult(BaseModel):
    """Complete convective analysis of one sounding.

    Scalar summary fields are rounded for display; the parcel analyses,
    vectors and parcel path keep full precision for rendering (parcel
    trace, CAPE/CIN shading, hodograph markers).
    """

    model_config = ConfigDict(frozen=True)

    surface_height_m: float

    # Buoyancy (J/kg)
    sbcape_jkg: int
    sbcin_jkg: int
    mlcape_jkg: int
    mlcin_jkg: int
    mucape_jkg: int
    mucin_jkg: int

    # Surface-based parcel milestones, heights AGL
    lcl_pressure_hpa: int
    lcl_height_m: Optional[int] = None
    lcl_temperature_c: float
    lfc_pressure_hpa: Optional[int] = None
    lfc_height_m: Optional[int] = None
    el_pressure_hpa: Optional[int] = None
    el_height_m: Optional[int] = None

    # Kinematics
    shear_0_1km_kt: int
    shear_0_6km_kt: int
    srh_0_1km_m2s2: int
    srh_0_3km_m2s2: int

    # Scalar diagnostics
    lapse_rate_0_3km_c_per_km: Optional[float] = None
    lapse_rate_700_500_c_per_km: Optional[float] = None
    precipitable_water_in: float

    # Composites
    stp: float
    scp: float

    # Full precision, for rendering
    surface_based: ParcelAnalysis
    mixed_layer: ParcelAnalysis
    most_unstable: ParcelAnalysis
    shear_0_1km: WindVector
    shear_0_6km: WindVector
    storm_motion: StormMotion
    surface_parcel_path: tuple[ParcelPoint, ...]

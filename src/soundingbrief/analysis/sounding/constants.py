"""Physical constants shared by every sounding routine."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PhysicalConstants:
    rd: float = 287.04  # dry air gas constant, J/kg/K
    rv: float = 461.5  # water vapour gas constant, J/kg/K
    cp: float = 1005.7  # specific heat of dry air at constant pressure, J/kg/K
    lv: float = 2.501e6  # latent heat of vaporization, J/kg
    g: float = 9.80665  # gravitational acceleration, m/s^2
    zero_c_k: float = 273.15
    kt_to_ms: float = 0.51444
    ms_to_kt: float = 1.94384
    mm_per_inch: float = 25.4

    @property
    def epsilon(self) -> float:
        """Rd/Rv, ~0.622."""
        return self.rd / self.rv


CONSTANTS = PhysicalConstants()

RD = CONSTANTS.rd
RV = CONSTANTS.rv
CP = CONSTANTS.cp
LV = CONSTANTS.lv
G = CONSTANTS.g
EPSILON = CONSTANTS.epsilon
ZERO_C_K = CONSTANTS.zero_c_k
KT_TO_MS = CONSTANTS.kt_to_ms
MS_TO_KT = CONSTANTS.ms_to_kt
MM_PER_INCH = CONSTANTS.mm_per_inch

"""Closed-form thermodynamic formulas (Bolton 1980).

Temperatures in Celsius unless the name says Kelvin, pressures in hPa,
mixing ratios in g/kg. Constants must stay exactly as written so results
remain comparable with existing analyses.
"""

from __future__ import annotations

import math

from soundingbrief.analysis.sounding.constants import EPSILON, KT_TO_MS, MS_TO_KT, ZERO_C_K
from soundingbrief.errors import InvalidInputError

# Poisson exponent used by Bolton's LCL and theta-e approximations
BOLTON_KAPPA = 0.2854


def celsius_to_kelvin(t_c: float) -> float:
    return t_c + ZERO_C_K


def kelvin_to_celsius(t_k: float) -> float:
    return t_k - ZERO_C_K


def knots_to_ms(speed_kt: float) -> float:
    return speed_kt * KT_TO_MS


def ms_to_knots(speed_ms: float) -> float:
    return speed_ms * MS_TO_KT


def saturation_vapor_pressure(t_c: float) -> float:
    """Saturation vapor pressure in hPa (Bolton 1980)."""
    return 6.112 * math.exp((17.67 * t_c) / (t_c + 243.5))


def mixing_ratio(t_c: float, pressure_hpa: float) -> float:
    """Saturation mixing ratio in g/kg at temperature t_c and pressure.

    Pass a dewpoint to get the actual mixing ratio of the air. Raises
    InvalidInputError when the pressure does not exceed the saturation
    vapor pressure, where the formula has no physical meaning.
    """
    e = saturation_vapor_pressure(t_c)
    if pressure_hpa <= e:
        raise InvalidInputError(
            f"Pressure {pressure_hpa} hPa not above saturation vapor pressure "
            f"{e:.3f} hPa at {t_c} C"
        )
    return (1000.0 * EPSILON * e) / (pressure_hpa - e)


def virtual_temperature_k(t_c: float, td_c: float, pressure_hpa: float) -> float:
    """Virtual temperature in K.

    Moisture comes from the dewpoint while the temperature is the dry-bulb
    value, the usual approximation for unsaturated air.
    """
    w = mixing_ratio(td_c, pressure_hpa) / 1000.0
    return celsius_to_kelvin(t_c) * (1.0 + 0.61 * w)


def lcl_temperature_k(t_c: float, td_c: float) -> float:
    """Temperature at the lifted condensation level in K (Bolton eq. 15)."""
    tk = celsius_to_kelvin(t_c)
    tdk = celsius_to_kelvin(td_c)
    return 1.0 / (1.0 / (tdk - 56.0) + math.log(tk / tdk) / 800.0) + 56.0


def lcl_pressure_hpa(t_c: float, td_c: float, pressure_hpa: float) -> float:
    """LCL pressure in hPa from Poisson's equation and the Bolton LCL temperature."""
    t_lcl = lcl_temperature_k(t_c, td_c)
    return pressure_hpa * (t_lcl / celsius_to_kelvin(t_c)) ** (1.0 / BOLTON_KAPPA)


def equivalent_potential_temperature_k(t_c: float, td_c: float, pressure_hpa: float) -> float:
    """Equivalent potential temperature in K (simplified Bolton)."""
    tk = celsius_to_kelvin(t_c)
    w = mixing_ratio(td_c, pressure_hpa) / 1000.0
    t_lcl = lcl_temperature_k(t_c, td_c)
    theta = tk * (1000.0 / pressure_hpa) ** (BOLTON_KAPPA * (1.0 - 0.28 * w))
    return theta * math.exp((3.376 / t_lcl - 0.00254) * w * 1000.0 * (1.0 + 0.81 * w))

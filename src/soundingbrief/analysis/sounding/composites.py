"""Composite severe-weather indices (STP, SCP).

Empirical formulas: the breakpoints are deliberately hard steps and must not
be smoothed.
"""

from __future__ import annotations


def _lcl_term(lcl_height_m: float | None) -> float:
    # unknown LCL height counts as above 2000 m
    if lcl_height_m is None or lcl_height_m >= 2000.0:
        return 0.0
    return (2000.0 - lcl_height_m) / 1000.0


def _cin_term(cin_jkg: float) -> float:
    if cin_jkg > -50.0:
        return 1.0
    if cin_jkg > -150.0:
        return (200.0 + cin_jkg) / 150.0
    return 0.0


def significant_tornado_parameter(
    cape_jkg: float,
    lcl_height_m: float | None,
    srh_0_1km: float,
    shear_0_6km_kt: float,
    cin_jkg: float,
) -> float:
    """Fixed-layer Significant Tornado Parameter.

    CAPE/1500 * LCL term * SRH/150 * min(shear/20, 1.5) * CIN term, where the
    LCL term is (2000 - LCL)/1000 below 2000 m and 0 above, and the CIN term
    is 1 above -50 J/kg, (200 + CIN)/150 above -150 J/kg and 0 below.
    """
    cape_term = cape_jkg / 1500.0
    srh_term = srh_0_1km / 150.0
    shear_term = min(shear_0_6km_kt / 20.0, 1.5)
    return cape_term * _lcl_term(lcl_height_m) * srh_term * shear_term * _cin_term(cin_jkg)


def supercell_composite_parameter(mucape_jkg: float, srh_0_3km: float, shear_0_6km_kt: float) -> float:
    """Supercell Composite Parameter: MUCAPE/1000 * SRH/100 * shear/20."""
    return (mucape_jkg / 1000.0) * (srh_0_3km / 100.0) * (shear_0_6km_kt / 20.0)

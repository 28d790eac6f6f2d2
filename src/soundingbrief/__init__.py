"""Convective sounding analysis: CAPE/CIN, shear, helicity and composite indices."""

__version__ = "0.1.0"

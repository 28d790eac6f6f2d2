"""Validate raw levels into an immutable, surface-first Profile.

This is the single entry point where non-physical input is rejected; the
numeric routines downstream assume a validated profile.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Union

import numpy as np
from pydantic import ValidationError

from soundingbrief.analysis.sounding.thermodynamics import saturation_vapor_pressure
from soundingbrief.errors import InsufficientDataError, InvalidInputError
from soundingbrief.models import Level

logger = logging.getLogger(__name__)

MIN_LEVELS = 5


@dataclass(frozen=True)
class Profile:
    """Validated sounding levels, strictly decreasing pressure, surface first."""

    levels: tuple[Level, ...]

    @property
    def surface(self) -> Level:
        return self.levels[0]

    def __len__(self) -> int:
        return len(self.levels)


def _to_level(raw: Union[Level, Mapping[str, Any]], index: int) -> Level:
    if isinstance(raw, Level):
        return raw
    try:
        return Level.model_validate(raw)
    except ValidationError as exc:
        raise InvalidInputError(f"Level {index} is invalid: {exc}") from exc


def prepare_profile(
    levels: Iterable[Union[Level, Mapping[str, Any]]],
    min_levels: int = MIN_LEVELS,
) -> Profile:
    """Build a Profile from Level instances or mappings of Level fields.

    Sorts by descending pressure (surface first). Raises InvalidInputError for
    non-physical values or duplicate pressures, InsufficientDataError when
    fewer than ``min_levels`` levels are supplied.
    """
    valid = [_to_level(raw, i) for i, raw in enumerate(levels)]

    if len(valid) < min_levels:
        raise InsufficientDataError(len(valid), min_levels)

    valid.sort(key=lambda lv: lv.pressure_hpa, reverse=True)

    pressures = np.array([lv.pressure_hpa for lv in valid])
    duplicates = pressures[1:][np.diff(pressures) >= 0]
    if duplicates.size:
        raise InvalidInputError(f"Duplicate pressure levels: {sorted(set(duplicates.tolist()))}")

    for lv in valid:
        if lv.pressure_hpa <= saturation_vapor_pressure(lv.temperature_c):
            raise InvalidInputError(
                f"Pressure {lv.pressure_hpa} hPa not above saturation vapor pressure "
                f"at {lv.temperature_c} C"
            )

    logger.debug(
        "Prepared profile: %d levels, %.1f-%.1f hPa",
        len(valid), valid[0].pressure_hpa, valid[-1].pressure_hpa,
    )
    return Profile(levels=tuple(valid))

"""Shared test fixtures."""

from __future__ import annotations

import pytest

from soundingbrief.models import Level

# pressure hPa, height m MSL, T C, Td C, wind dir deg, wind speed kt
SUPERCELL_SOUNDING = [
    (1000, 350, 30.0, 22.0, 160, 15),
    (975, 575, 27.5, 21.0, 170, 25),
    (950, 805, 25.5, 20.0, 180, 30),
    (925, 1040, 23.5, 19.0, 190, 35),
    (900, 1280, 21.5, 17.0, 200, 35),
    (850, 1780, 18.0, 13.0, 215, 35),
    (800, 2300, 15.0, 8.0, 225, 35),
    (750, 2840, 11.5, 2.0, 230, 40),
    (700, 3410, 8.0, -4.0, 235, 45),
    (600, 4640, -1.0, -15.0, 240, 50),
    (500, 6040, -11.0, -28.0, 245, 60),
    (400, 7670, -24.0, -40.0, 250, 70),
    (300, 9630, -40.0, -55.0, 255, 80),
    (250, 10830, -50.0, -63.0, 255, 85),
    (200, 12240, -57.0, -70.0, 260, 80),
]

# Cold, dry surface air under a nearly isothermal column
STABLE_SOUNDING = [
    (1000, 0, 5.0, -10.0, 90, 5),
    (900, 850, 4.0, -12.0, 120, 10),
    (800, 1800, 2.0, -15.0, 180, 15),
    (700, 2900, 0.0, -20.0, 240, 20),
    (600, 4150, -5.0, -25.0, 260, 25),
    (500, 5600, -12.0, -30.0, 270, 30),
]


def build_levels(rows) -> list[Level]:
    return [
        Level(
            pressure_hpa=p, height_m=h, temperature_c=t, dewpoint_c=td,
            wind_direction_deg=wdir, wind_speed_kt=wspd,
        )
        for p, h, t, td, wdir, wspd in rows
    ]


@pytest.fixture
def supercell_levels() -> list[Level]:
    """Warm, moist, strongly sheared warm-sector sounding."""
    return build_levels(SUPERCELL_SOUNDING)


@pytest.fixture
def stable_levels() -> list[Level]:
    return build_levels(STABLE_SOUNDING)


@pytest.fixture
def make_level():
    """Factory for single levels with a default westerly wind."""

    def _make(p, h, t, td, wdir=270.0, wspd=20.0) -> Level:
        return Level(
            pressure_hpa=p, height_m=h, temperature_c=t, dewpoint_c=td,
            wind_direction_deg=wdir, wind_speed_kt=wspd,
        )

    return _make


@pytest.fixture
def supercell_rows() -> list[dict]:
    """The supercell sounding as JSON-style level mappings."""
    return [lv.model_dump() for lv in build_levels(SUPERCELL_SOUNDING)]

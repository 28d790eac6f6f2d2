"""Tests for the pydantic models and error types."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from soundingbrief.errors import InsufficientDataError, SoundingError
from soundingbrief.models import EnergyResult, LevelPoint, WindVector


def test_wind_vector_magnitude():
    assert WindVector(u_ms=3.0, v_ms=4.0).magnitude_ms == pytest.approx(5.0)
    assert WindVector().magnitude_ms == 0.0


def test_energy_result_signs_enforced():
    with pytest.raises(ValidationError):
        EnergyResult(cape_jkg=-1.0, cin_jkg=0.0)
    with pytest.raises(ValidationError):
        EnergyResult(cape_jkg=0.0, cin_jkg=5.0)


def test_energy_result_optional_levels():
    result = EnergyResult(cape_jkg=1200.0, cin_jkg=-30.0, lfc=LevelPoint(pressure_hpa=850, height_m=1500))
    assert result.el is None
    assert result.lfc.height_m == 1500


def test_dewpoint_equal_to_temperature_allowed(make_level):
    level = make_level(900, 1000, 15.0, 15.0)
    assert level.dewpoint_c == level.temperature_c


def test_insufficient_data_message():
    exc = InsufficientDataError(3, 5)
    assert isinstance(exc, SoundingError)
    assert str(exc) == "Profile has 3 levels, need at least 5"

"""Exceptions raised by the sounding analysis engine."""

from __future__ import annotations


class SoundingError(Exception):
    """Base class for sounding analysis failures."""


class InsufficientDataError(SoundingError):
    """Profile has fewer levels than an analysis needs."""

    def __init__(self, level_count: int, required: int):
        self.level_count = level_count
        self.required = required
        super().__init__(f"Profile has {level_count} levels, need at least {required}")


class InvalidInputError(SoundingError, ValueError):
    """Non-physical input, e.g. dewpoint above temperature or pressure <= 0."""

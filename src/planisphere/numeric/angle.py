"""Angle constants and unit conversions. All angles are in radians unless noted."""

import math

import numpy as np

from .interval import RightOpenInterval, check_in_interval
from ..errors import InvalidArgumentError

TAU = 2.0 * math.pi

_HOURS_PER_RAD = 24.0 / TAU
_RAD_PER_HOUR = TAU / 24.0
_RAD_PER_ARCSEC = TAU / (360.0 * 3600.0)

_ZERO_TO_TAU = RightOpenInterval(0.0, TAU)
_ZERO_TO_SIXTY = RightOpenInterval(0.0, 60.0)


def normalize_positive(rad: float) -> float:
    """Reduce an angle into [0, τ)."""
    return _ZERO_TO_TAU.reduce(rad)


def normalize_positive_array(rad: np.ndarray) -> np.ndarray:
    """Reduce every angle of an array into [0, τ)."""
    return _ZERO_TO_TAU.reduce_array(rad)


def of_arcsec(sec: float) -> float:
    return sec * _RAD_PER_ARCSEC


def of_dms(deg: int, minutes: int, sec: float) -> float:
    """Convert degrees, arc minutes and arc seconds to radians.

    Args:
        deg: Whole degrees, non-negative
        minutes: Arc minutes in [0, 60)
        sec: Arc seconds in [0, 60)

    Returns:
        Angle in radians

    Raises:
        InvalidArgumentError: If deg is negative or minutes/sec are outside [0, 60)
    """
    if deg < 0:
        raise InvalidArgumentError(f"Degrees {deg!r} must not be negative")
    check_in_interval(_ZERO_TO_SIXTY, minutes, "arc minutes")
    check_in_interval(_ZERO_TO_SIXTY, sec, "arc seconds")

    total_seconds = (deg * 60.0 + minutes) * 60.0 + sec
    return total_seconds * _RAD_PER_ARCSEC


def of_deg(deg: float) -> float:
    return math.radians(deg)


def to_deg(rad: float) -> float:
    return math.degrees(rad)


def of_hr(hr: float) -> float:
    return hr * _RAD_PER_HOUR


def to_hr(rad: float) -> float:
    return rad * _HOURS_PER_RAD

"""Conversions between celestial coordinate systems at a fixed instant."""

import math
from datetime import datetime

import numpy as np

from .._identity import NoValueEquality
from ..numeric import ClosedInterval, Polynomial, angle
from ..timescale import J2000, sidereal
from .spherical import (
    EclipticCoordinates,
    EquatorialCoordinates,
    GeographicCoordinates,
    HorizontalCoordinates,
)

# Obliquity of the ecliptic as a function of Julian centuries since J2000.
_OBLIQUITY = Polynomial.of(
    angle.of_arcsec(0.00181),
    -angle.of_arcsec(0.0006),
    -angle.of_arcsec(46.815),
    angle.of_dms(23, 26, 21.45),
)

_SINE_RANGE = ClosedInterval(-1.0, 1.0)


class EclipticToEquatorialConversion(NoValueEquality):
    """Ecliptic to equatorial conversion for the obliquity at a given instant."""

    __slots__ = ("_sin_obliquity", "_cos_obliquity")

    def __init__(self, when: datetime):
        obliquity = _OBLIQUITY.at(J2000.julian_centuries_until(when))
        self._sin_obliquity = math.sin(obliquity)
        self._cos_obliquity = math.cos(obliquity)

    def apply(self, ecl: EclipticCoordinates) -> EquatorialCoordinates:
        sin_lon = math.sin(ecl.lon)
        ra = math.atan2(
            sin_lon * self._cos_obliquity - math.tan(ecl.lat) * self._sin_obliquity,
            math.cos(ecl.lon),
        )
        sin_dec = (
            math.sin(ecl.lat) * self._cos_obliquity
            + math.cos(ecl.lat) * self._sin_obliquity * sin_lon
        )
        return EquatorialCoordinates(
            angle.normalize_positive(ra), math.asin(_SINE_RANGE.clip(sin_dec))
        )


class EquatorialToHorizontalConversion(NoValueEquality):
    """Equatorial to horizontal conversion for one observer at one instant."""

    __slots__ = ("_local_sidereal_time", "_sin_lat", "_cos_lat")

    def __init__(self, when: datetime, where: GeographicCoordinates):
        self._local_sidereal_time = sidereal.local(when, where)
        self._sin_lat = math.sin(where.lat)
        self._cos_lat = math.cos(where.lat)

    def apply(self, equ: EquatorialCoordinates) -> HorizontalCoordinates:
        sin_dec = math.sin(equ.dec)
        cos_dec = math.cos(equ.dec)
        hour_angle = self._local_sidereal_time - equ.ra

        sin_alt = _SINE_RANGE.clip(
            sin_dec * self._sin_lat + cos_dec * self._cos_lat * math.cos(hour_angle)
        )
        az = math.atan2(
            -cos_dec * self._cos_lat * math.sin(hour_angle),
            sin_dec - self._sin_lat * sin_alt,
        )
        return HorizontalCoordinates(angle.normalize_positive(az), math.asin(sin_alt))

    def apply_arrays(
        self, ra: np.ndarray, dec: np.ndarray
    ) -> tuple[np.ndarray, np.ndarray]:
        """Vectorized :meth:`apply`.

        Args:
            ra: Right ascensions in radians
            dec: Declinations in radians

        Returns:
            Tuple of (azimuth, altitude) arrays in radians
        """
        sin_dec = np.sin(dec)
        cos_dec = np.cos(dec)
        hour_angle = self._local_sidereal_time - ra

        sin_alt = np.clip(
            sin_dec * self._sin_lat + cos_dec * self._cos_lat * np.cos(hour_angle),
            -1.0,
            1.0,
        )
        az = np.arctan2(
            -cos_dec * self._cos_lat * np.sin(hour_angle),
            sin_dec - self._sin_lat * sin_alt,
        )
        return angle.normalize_positive_array(az), np.arcsin(sin_alt)

"""Stereographic projection of the celestial sphere onto a plane."""

import math

import numpy as np

from .._identity import NoValueEquality
from ..numeric import ClosedInterval, angle
from .cartesian import CartesianCoordinates
from .spherical import HorizontalCoordinates

_SINE_RANGE = ClosedInterval(-1.0, 1.0)


def _ratio(numerator: float, denominator: float) -> float:
    # Circles through the antipode of the centre project to straight lines.
    if denominator == 0:
        return math.copysign(math.inf, numerator) if numerator != 0 else math.inf
    return numerator / denominator


class StereographicProjection(NoValueEquality):
    """Stereographic projection centred on a point of the horizontal sphere.

    The centre maps to the origin of the plane. Images of parallels and
    meridians are circles; when one passes through the point opposite the
    centre its image is a straight line and the circle helpers return an
    infinite radius, which callers must detect and draw as a line.
    """

    __slots__ = ("_center_az", "_center_alt", "_sin_center_alt", "_cos_center_alt")

    def __init__(self, center: HorizontalCoordinates):
        self._center_az = center.az
        self._center_alt = center.alt
        self._sin_center_alt = math.sin(center.alt)
        self._cos_center_alt = math.cos(center.alt)

    @property
    def center(self) -> HorizontalCoordinates:
        return HorizontalCoordinates(self._center_az, self._center_alt)

    def circle_center_for_parallel(
        self, parallel: HorizontalCoordinates
    ) -> CartesianCoordinates:
        """Centre of the image of the parallel at the altitude of parallel."""
        y = _ratio(self._cos_center_alt, math.sin(parallel.alt) + self._sin_center_alt)
        return CartesianCoordinates(0.0, y)

    def circle_radius_for_parallel(self, parallel: HorizontalCoordinates) -> float:
        """Radius of the image of the parallel at the altitude of parallel."""
        return abs(
            _ratio(math.cos(parallel.alt), math.sin(parallel.alt) + self._sin_center_alt)
        )

    def circle_center_for_meridian(
        self, meridian: HorizontalCoordinates
    ) -> CartesianCoordinates:
        """Centre of the image of the meridian at the azimuth of meridian."""
        x = -_ratio(
            1.0, self._cos_center_alt * math.tan(meridian.az - self._center_az)
        )
        y = -math.tan(self._center_alt)
        return CartesianCoordinates(x, y)

    def circle_radius_for_meridian(self, meridian: HorizontalCoordinates) -> float:
        """Radius of the image of the meridian at the azimuth of meridian."""
        return abs(
            _ratio(1.0, self._cos_center_alt * math.sin(meridian.az - self._center_az))
        )

    def apply_to_angle(self, rad: float) -> float:
        """Projected diameter of a disc of the given angular diameter at the centre."""
        return 2.0 * math.tan(rad / 4.0)

    def apply(self, azalt: HorizontalCoordinates) -> CartesianCoordinates:
        x, y = self._project(azalt.az, azalt.alt, math.sin, math.cos)
        return CartesianCoordinates(x, y)

    def apply_arrays(
        self, az: np.ndarray, alt: np.ndarray
    ) -> tuple[np.ndarray, np.ndarray]:
        """Vectorized :meth:`apply`, returning (x, y) arrays."""
        return self._project(az, alt, np.sin, np.cos)

    def _project(self, az, alt, sin, cos):
        sin_alt = sin(alt)
        cos_alt = cos(alt)
        az_delta = az - self._center_az
        cos_az_delta = cos(az_delta)

        d = 1.0 / (
            1.0
            + sin_alt * self._sin_center_alt
            + cos_alt * self._cos_center_alt * cos_az_delta
        )
        x = d * cos_alt * sin(az_delta)
        y = d * (sin_alt * self._cos_center_alt - cos_alt * self._sin_center_alt * cos_az_delta)
        return x, y

    def inverse_apply(self, xy: CartesianCoordinates) -> HorizontalCoordinates:
        """Point of the sphere whose image is xy."""
        x, y = xy.x, xy.y
        if x == 0 and y == 0:
            return HorizontalCoordinates(
                angle.normalize_positive(self._center_az), self._center_alt
            )

        rho_squared = x * x + y * y
        rho = math.sqrt(rho_squared)
        sin_c = 2.0 * rho / (rho_squared + 1.0)
        cos_c = (1.0 - rho_squared) / (rho_squared + 1.0)

        az = (
            math.atan2(
                x * sin_c,
                rho * self._cos_center_alt * cos_c - y * self._sin_center_alt * sin_c,
            )
            + self._center_az
        )
        sin_alt = cos_c * self._sin_center_alt + y * sin_c * self._cos_center_alt / rho
        return HorizontalCoordinates(
            angle.normalize_positive(az), math.asin(_SINE_RANGE.clip(sin_alt))
        )

    def __repr__(self) -> str:
        return f"StereographicProjection(center={self.center})"

from .spherical import (
    EclipticCoordinates,
    EquatorialCoordinates,
    GeographicCoordinates,
    HorizontalCoordinates,
    SphericalCoordinates,
)
from .cartesian import CartesianCoordinates
from .conversions import EclipticToEquatorialConversion, EquatorialToHorizontalConversion
from .projection import StereographicProjection

__all__ = [
    "SphericalCoordinates",
    "EquatorialCoordinates",
    "EclipticCoordinates",
    "HorizontalCoordinates",
    "GeographicCoordinates",
    "CartesianCoordinates",
    "EclipticToEquatorialConversion",
    "EquatorialToHorizontalConversion",
    "StereographicProjection",
]

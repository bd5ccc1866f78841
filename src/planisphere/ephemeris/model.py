from typing import Protocol, TypeVar

from ..coordinates import EclipticToEquatorialConversion
from ..models import CelestialObject

T = TypeVar("T", bound=CelestialObject, covariant=True)


class CelestialObjectModel(Protocol[T]):
    """Position model of an object of the solar system."""

    def at(
        self,
        days_since_j2010: float,
        ecliptic_to_equatorial: EclipticToEquatorialConversion,
    ) -> T:
        """Object as seen from Earth the given number of days after J2010."""
        ...

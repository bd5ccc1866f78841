"""Sun position from a first-order Keplerian orbit of the Earth."""

import math

from ..coordinates import EclipticCoordinates, EclipticToEquatorialConversion
from ..models import Sun
from ..numeric import angle

LONGITUDE_J2010 = angle.of_deg(279.557208)
LONGITUDE_PERIGEE = angle.of_deg(283.112438)
ECCENTRICITY = 0.016705
ANGULAR_SPEED = angle.TAU / 365.242191  # radians per day
ANGULAR_DIAMETER_AT_SEMI_MAJOR_AXIS = angle.of_deg(0.533128)


class SunModel:
    def at(
        self,
        days_since_j2010: float,
        ecliptic_to_equatorial: EclipticToEquatorialConversion,
    ) -> Sun:
        mean_anomaly = ANGULAR_SPEED * days_since_j2010 + LONGITUDE_J2010 - LONGITUDE_PERIGEE
        true_anomaly = mean_anomaly + 2 * ECCENTRICITY * math.sin(mean_anomaly)
        longitude = angle.normalize_positive(true_anomaly + LONGITUDE_PERIGEE)

        ecliptic = EclipticCoordinates(longitude, 0.0)
        angular_size = ANGULAR_DIAMETER_AT_SEMI_MAJOR_AXIS * (
            (1 + ECCENTRICITY * math.cos(true_anomaly)) / (1 - ECCENTRICITY**2)
        )

        return Sun(
            equatorial_position=ecliptic_to_equatorial.apply(ecliptic),
            angular_size=angular_size,
            ecliptic_position=ecliptic,
            mean_anomaly=mean_anomaly,
        )


SUN = SunModel()

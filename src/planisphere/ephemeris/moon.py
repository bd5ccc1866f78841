"""Moon position with the classical evection, annual equation and variation terms."""

import math

from ..coordinates import EclipticCoordinates, EclipticToEquatorialConversion
from ..models import Moon
from ..numeric import angle
from .sun import SUN

MEAN_LONGITUDE_J2010 = angle.of_deg(91.929336)
PERIGEE_LONGITUDE_J2010 = angle.of_deg(130.143076)
NODE_LONGITUDE_J2010 = angle.of_deg(291.682547)
INCLINATION = angle.of_deg(5.145396)
ECCENTRICITY = 0.0549
ANGULAR_DIAMETER_AT_SEMI_MAJOR_AXIS = angle.of_deg(0.5181)

# Daily motions
MEAN_LONGITUDE_RATE = angle.of_deg(13.1763966)
PERIGEE_RATE = angle.of_deg(0.1114041)
NODE_RATE = angle.of_deg(0.0529539)

# Correction amplitudes
EVECTION = angle.of_deg(1.2739)
ANNUAL_EQUATION = angle.of_deg(0.1858)
THIRD_CORRECTION = angle.of_deg(0.37)
EQUATION_OF_CENTER = angle.of_deg(6.2886)
FOURTH_CORRECTION = angle.of_deg(0.214)
VARIATION = angle.of_deg(0.6583)
NODE_CORRECTION = angle.of_deg(0.16)


class MoonModel:
    def at(
        self,
        days_since_j2010: float,
        ecliptic_to_equatorial: EclipticToEquatorialConversion,
    ) -> Moon:
        sun = SUN.at(days_since_j2010, ecliptic_to_equatorial)
        sun_longitude = sun.ecliptic_position.lon
        sin_sun_anomaly = math.sin(sun.mean_anomaly)

        # Orbital longitude
        mean_longitude = MEAN_LONGITUDE_RATE * days_since_j2010 + MEAN_LONGITUDE_J2010
        mean_anomaly = mean_longitude - PERIGEE_RATE * days_since_j2010 - PERIGEE_LONGITUDE_J2010
        evection = EVECTION * math.sin(2 * (mean_longitude - sun_longitude) - mean_anomaly)
        annual_equation = ANNUAL_EQUATION * sin_sun_anomaly
        third = THIRD_CORRECTION * sin_sun_anomaly
        corrected_anomaly = mean_anomaly + evection - annual_equation - third
        center = EQUATION_OF_CENTER * math.sin(corrected_anomaly)
        fourth = FOURTH_CORRECTION * math.sin(2 * corrected_anomaly)
        corrected_longitude = mean_longitude + evection + center - annual_equation + fourth
        variation = VARIATION * math.sin(2 * (corrected_longitude - sun_longitude))
        true_longitude = corrected_longitude + variation

        # Ecliptic position
        node = NODE_LONGITUDE_J2010 - NODE_RATE * days_since_j2010
        corrected_node = node - NODE_CORRECTION * sin_sun_anomaly
        from_node = true_longitude - corrected_node
        lon = (
            math.atan2(math.sin(from_node) * math.cos(INCLINATION), math.cos(from_node))
            + corrected_node
        )
        lat = math.asin(math.sin(from_node) * math.sin(INCLINATION))
        ecliptic = EclipticCoordinates(angle.normalize_positive(lon), lat)

        phase = (1 - math.cos(true_longitude - sun_longitude)) / 2
        distance = (1 - ECCENTRICITY**2) / (1 + ECCENTRICITY * math.cos(corrected_anomaly + center))

        return Moon(
            equatorial_position=ecliptic_to_equatorial.apply(ecliptic),
            angular_size=ANGULAR_DIAMETER_AT_SEMI_MAJOR_AXIS / distance,
            magnitude=0.0,
            phase=phase,
        )


MOON = MoonModel()

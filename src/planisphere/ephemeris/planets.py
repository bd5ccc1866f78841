"""Planet positions from Keplerian orbits of the planet and of the Earth."""

import math
from dataclasses import dataclass
from typing import Tuple

from ..coordinates import EclipticCoordinates, EclipticToEquatorialConversion
from ..models import Planet
from ..numeric import angle

DAYS_PER_TROPICAL_YEAR = 365.242191


@dataclass(frozen=True)
class _HeliocentricPosition:
    longitude: float
    radius: float
    # Projections on the ecliptic plane
    ecliptic_longitude: float
    ecliptic_radius: float
    ecliptic_latitude: float


@dataclass(frozen=True)
class PlanetModel:
    """Orbital elements of a planet at epoch J2010.

    Angles are in radians, the semi-major axis in astronomical units, the
    angular size in radians as seen from 1 AU and the magnitude as seen
    from 1 AU.
    """

    name: str
    period_years: float
    longitude_j2010: float
    longitude_perigee: float
    eccentricity: float
    semi_major_axis: float
    inclination: float
    longitude_ascending_node: float
    angular_size_at_1_au: float
    magnitude_at_1_au: float

    @classmethod
    def of(
        cls,
        name: str,
        period_years: float,
        longitude_j2010_deg: float,
        longitude_perigee_deg: float,
        eccentricity: float,
        semi_major_axis: float,
        inclination_deg: float,
        longitude_ascending_node_deg: float,
        angular_size_arcsec: float,
        magnitude_at_1_au: float,
    ) -> "PlanetModel":
        """Create a model from elements given in the units of almanac tables."""
        return cls(
            name=name,
            period_years=period_years,
            longitude_j2010=angle.of_deg(longitude_j2010_deg),
            longitude_perigee=angle.of_deg(longitude_perigee_deg),
            eccentricity=eccentricity,
            semi_major_axis=semi_major_axis,
            inclination=angle.of_deg(inclination_deg),
            longitude_ascending_node=angle.of_deg(longitude_ascending_node_deg),
            angular_size_at_1_au=angle.of_arcsec(angular_size_arcsec),
            magnitude_at_1_au=magnitude_at_1_au,
        )

    @property
    def is_inferior(self) -> bool:
        """True for planets orbiting inside the orbit of the Earth."""
        return self.semi_major_axis < EARTH.semi_major_axis

    def _heliocentric(self, days_since_j2010: float) -> _HeliocentricPosition:
        e = self.eccentricity
        mean_anomaly = (
            (angle.TAU / DAYS_PER_TROPICAL_YEAR) * (days_since_j2010 / self.period_years)
            + self.longitude_j2010
            - self.longitude_perigee
        )
        true_anomaly = mean_anomaly + 2 * e * math.sin(mean_anomaly)
        radius = self.semi_major_axis * (1 - e * e) / (1 + e * math.cos(true_anomaly))
        longitude = true_anomaly + self.longitude_perigee

        from_node = longitude - self.longitude_ascending_node
        latitude = math.asin(math.sin(from_node) * math.sin(self.inclination))
        ecliptic_longitude = (
            math.atan2(math.sin(from_node) * math.cos(self.inclination), math.cos(from_node))
            + self.longitude_ascending_node
        )
        return _HeliocentricPosition(
            longitude=longitude,
            radius=radius,
            ecliptic_longitude=ecliptic_longitude,
            ecliptic_radius=radius * math.cos(latitude),
            ecliptic_latitude=latitude,
        )

    def at(
        self,
        days_since_j2010: float,
        ecliptic_to_equatorial: EclipticToEquatorialConversion,
    ) -> Planet:
        planet = self._heliocentric(days_since_j2010)
        earth = EARTH._heliocentric(days_since_j2010)

        lp = planet.ecliptic_longitude
        rp = planet.ecliptic_radius
        le = earth.longitude
        re = earth.radius

        if self.is_inferior:
            lon = math.pi + le + math.atan2(rp * math.sin(le - lp), re - rp * math.cos(le - lp))
        else:
            lon = lp + math.atan2(re * math.sin(lp - le), rp - re * math.cos(lp - le))
        lat = math.atan(
            rp * math.tan(planet.ecliptic_latitude) * math.sin(lon - lp) / (re * math.sin(lp - le))
        )
        ecliptic = EclipticCoordinates(angle.normalize_positive(lon), lat)

        distance = math.sqrt(
            re * re
            + planet.radius**2
            - 2 * re * planet.radius
            * math.cos(planet.longitude - le)
            * math.cos(planet.ecliptic_latitude)
        )
        phase = (1 + math.cos(lon - planet.longitude)) / 2
        magnitude = self.magnitude_at_1_au + 5 * math.log10(
            planet.radius * distance / math.sqrt(phase)
        )

        return Planet(
            name=self.name,
            equatorial_position=ecliptic_to_equatorial.apply(ecliptic),
            angular_size=self.angular_size_at_1_au / distance,
            magnitude=magnitude,
        )


MERCURY = PlanetModel.of("Mercury", 0.24085, 75.5671, 77.612, 0.205627, 0.387098, 7.0051, 48.449, 6.74, -0.42)
VENUS = PlanetModel.of("Venus", 0.615207, 272.30044, 131.54, 0.006812, 0.723329, 3.3947, 76.769, 16.92, -4.40)
EARTH = PlanetModel.of("Earth", 0.999996, 99.556772, 103.2055, 0.016671, 0.999985, 0, 0, 0, 0)
MARS = PlanetModel.of("Mars", 1.880765, 109.09646, 336.217, 0.093348, 1.523689, 1.8497, 49.632, 9.36, -1.52)
JUPITER = PlanetModel.of("Jupiter", 11.857911, 337.917132, 14.6633, 0.048907, 5.20278, 1.3035, 100.595, 196.74, -9.40)
SATURN = PlanetModel.of("Saturn", 29.310579, 172.398316, 89.567, 0.053853, 9.51134, 2.4873, 113.752, 165.60, -8.88)
URANUS = PlanetModel.of("Uranus", 84.039492, 356.135400, 172.884833, 0.046321, 19.21814, 0.773059, 73.926961, 65.80, -7.19)
NEPTUNE = PlanetModel.of("Neptune", 165.84539, 326.895127, 23.07, 0.010483, 30.1985, 1.7673, 131.879, 62.20, -6.87)

ALL: Tuple[PlanetModel, ...] = (MERCURY, VENUS, EARTH, MARS, JUPITER, SATURN, URANUS, NEPTUNE)

# Planets visible from the Earth, in order of distance to the Sun
OBSERVABLE: Tuple[PlanetModel, ...] = tuple(model for model in ALL if model is not EARTH)

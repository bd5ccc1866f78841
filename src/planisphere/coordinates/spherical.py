"""Spherical coordinate value types. Angles are stored in radians."""

import math
from dataclasses import dataclass
from typing import ClassVar

from .._identity import NoValueEquality
from ..numeric import ClosedInterval, RightOpenInterval, angle, check_in_interval

_ZERO_TO_TAU = RightOpenInterval(0.0, angle.TAU)
_HALF_TURN_LATITUDE = ClosedInterval.symmetric(math.pi)


@dataclass(frozen=True, eq=False)
class SphericalCoordinates(NoValueEquality):
    """Longitude/latitude pair validated against class-level intervals."""

    lon: float
    lat: float

    LON_INTERVAL: ClassVar[RightOpenInterval] = _ZERO_TO_TAU
    LAT_INTERVAL: ClassVar[ClosedInterval] = _HALF_TURN_LATITUDE
    LON_NAME: ClassVar[str] = "longitude"
    LAT_NAME: ClassVar[str] = "latitude"

    def __post_init__(self):
        check_in_interval(self.LON_INTERVAL, self.lon, self.LON_NAME)
        check_in_interval(self.LAT_INTERVAL, self.lat, self.LAT_NAME)

    @property
    def lon_deg(self) -> float:
        return angle.to_deg(self.lon)

    @property
    def lat_deg(self) -> float:
        return angle.to_deg(self.lat)


@dataclass(frozen=True, eq=False)
class EquatorialCoordinates(SphericalCoordinates):
    LON_NAME: ClassVar[str] = "right ascension"
    LAT_NAME: ClassVar[str] = "declination"

    @property
    def ra(self) -> float:
        return self.lon

    @property
    def ra_deg(self) -> float:
        return self.lon_deg

    @property
    def ra_hr(self) -> float:
        return angle.to_hr(self.lon)

    @property
    def dec(self) -> float:
        return self.lat

    @property
    def dec_deg(self) -> float:
        return self.lat_deg

    def __str__(self) -> str:
        return f"(ra={self.ra_hr:.4f}h, dec={self.dec_deg:.4f}°)"


@dataclass(frozen=True, eq=False)
class EclipticCoordinates(SphericalCoordinates):
    LON_NAME: ClassVar[str] = "ecliptic longitude"
    LAT_NAME: ClassVar[str] = "ecliptic latitude"

    def __str__(self) -> str:
        return f"(λ={self.lon_deg:.4f}°, β={self.lat_deg:.4f}°)"


@dataclass(frozen=True, eq=False)
class HorizontalCoordinates(SphericalCoordinates):
    LON_NAME: ClassVar[str] = "azimuth"
    LAT_NAME: ClassVar[str] = "altitude"

    _AZ_INTERVAL_DEG: ClassVar[RightOpenInterval] = RightOpenInterval(0.0, 360.0)
    _ALT_INTERVAL_DEG: ClassVar[ClosedInterval] = ClosedInterval.symmetric(180.0)

    @classmethod
    def of_deg(cls, az_deg: float, alt_deg: float) -> "HorizontalCoordinates":
        check_in_interval(cls._AZ_INTERVAL_DEG, az_deg, "azimuth in degrees")
        check_in_interval(cls._ALT_INTERVAL_DEG, alt_deg, "altitude in degrees")
        return cls(angle.of_deg(az_deg), angle.of_deg(alt_deg))

    @property
    def az(self) -> float:
        return self.lon

    @property
    def az_deg(self) -> float:
        return self.lon_deg

    @property
    def alt(self) -> float:
        return self.lat

    @property
    def alt_deg(self) -> float:
        return self.lat_deg

    def az_octant_name(self, n: str, e: str, s: str, w: str) -> str:
        """Name of the compass octant containing the azimuth.

        The names of the four cardinal points are given so the caller chooses
        the language; intercardinal octants are built from them, e.g. n + e.
        """
        octants = (n, n + e, e, s + e, s, s + w, w, n + w)
        return octants[int(math.floor((self.az_deg + 22.5) / 45.0)) % 8]

    def angular_distance_to(self, that: "HorizontalCoordinates") -> float:
        """Great-circle angle between two points of the sky, in radians."""
        cos_distance = math.sin(self.alt) * math.sin(that.alt) + math.cos(
            self.alt
        ) * math.cos(that.alt) * math.cos(self.az - that.az)
        return math.acos(max(-1.0, min(1.0, cos_distance)))

    def __str__(self) -> str:
        return f"(az={self.az_deg:.4f}°, alt={self.alt_deg:.4f}°)"


@dataclass(frozen=True, eq=False)
class GeographicCoordinates(SphericalCoordinates):
    """Position on Earth; longitude is positive east of Greenwich."""

    LON_INTERVAL: ClassVar[RightOpenInterval] = RightOpenInterval.symmetric(angle.TAU)

    _LON_INTERVAL_DEG: ClassVar[RightOpenInterval] = RightOpenInterval.symmetric(360.0)
    _LAT_INTERVAL_DEG: ClassVar[ClosedInterval] = ClosedInterval.symmetric(180.0)

    @classmethod
    def of_deg(cls, lon_deg: float, lat_deg: float) -> "GeographicCoordinates":
        check_in_interval(cls._LON_INTERVAL_DEG, lon_deg, "longitude in degrees")
        check_in_interval(cls._LAT_INTERVAL_DEG, lat_deg, "latitude in degrees")
        return cls(angle.of_deg(lon_deg), angle.of_deg(lat_deg))

    @classmethod
    def is_valid_lon_deg(cls, lon_deg: float) -> bool:
        return cls._LON_INTERVAL_DEG.contains(lon_deg)

    @classmethod
    def is_valid_lat_deg(cls, lat_deg: float) -> bool:
        return cls._LAT_INTERVAL_DEG.contains(lat_deg)

    def __str__(self) -> str:
        return f"(lon={self.lon_deg:.4f}°, lat={self.lat_deg:.4f}°)"

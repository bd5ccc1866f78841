"""Snapshot of the sky seen by one observer at one instant."""

from datetime import datetime
from typing import Dict, Optional, Sequence, Tuple

import numpy as np

from ..catalogue import StarCatalogue
from ..coordinates import (
    CartesianCoordinates,
    EclipticToEquatorialConversion,
    EquatorialToHorizontalConversion,
    GeographicCoordinates,
    StereographicProjection,
)
from ..ephemeris import MOON, SUN, planets
from ..errors import InvalidArgumentError
from ..models import Asterism, CelestialObject, Moon, Planet, Star, Sun
from ..timescale import J2010


def _read_only(array: np.ndarray) -> np.ndarray:
    array.setflags(write=False)
    return array


class ObservedSky:
    """Positions on the projection plane of every object of the sky.

    Objects are kept in a fixed order: the Sun, the Moon, the planets from
    Mercury to Neptune, then the catalogue stars. Object ``i`` is projected
    to row ``i`` of an ``(n, 2)`` array of plane coordinates.

    Args:
        when: Observation instant, time zone aware
        where: Observer location
        projection: Projection of the horizontal sphere onto the plane
        catalogue: Stars and asterisms to observe
    """

    def __init__(
        self,
        when: datetime,
        where: GeographicCoordinates,
        projection: StereographicProjection,
        catalogue: StarCatalogue,
    ):
        days = J2010.days_until(when)
        ecliptic_to_equatorial = EclipticToEquatorialConversion(when)
        equatorial_to_horizontal = EquatorialToHorizontalConversion(when, where)

        self._sun: Sun = SUN.at(days, ecliptic_to_equatorial)
        self._moon: Moon = MOON.at(days, ecliptic_to_equatorial)
        self._planets: Tuple[Planet, ...] = tuple(
            model.at(days, ecliptic_to_equatorial) for model in planets.OBSERVABLE
        )
        self._catalogue = catalogue

        objects = (self._sun, self._moon) + self._planets + catalogue.stars
        self._objects: Tuple[CelestialObject, ...] = objects
        self._index_of: Dict[int, int] = {id(o): i for i, o in enumerate(objects)}

        ra = np.fromiter((o.equatorial_position.ra for o in objects), float, len(objects))
        dec = np.fromiter((o.equatorial_position.dec for o in objects), float, len(objects))
        az, alt = equatorial_to_horizontal.apply_arrays(ra, dec)
        x, y = projection.apply_arrays(az, alt)
        self._positions = _read_only(np.column_stack((x, y)))

    @property
    def sun(self) -> Sun:
        return self._sun

    @property
    def sun_position(self) -> CartesianCoordinates:
        return self._position_at(0)

    @property
    def moon(self) -> Moon:
        return self._moon

    @property
    def moon_position(self) -> CartesianCoordinates:
        return self._position_at(1)

    @property
    def planets(self) -> Tuple[Planet, ...]:
        return self._planets

    @property
    def planet_positions(self) -> np.ndarray:
        """Interleaved x, y plane coordinates of the planets, as a fresh copy."""
        return self._positions[2 : 2 + len(self._planets)].flatten()

    @property
    def stars(self) -> Tuple[Star, ...]:
        return self._catalogue.stars

    @property
    def star_positions(self) -> np.ndarray:
        """Interleaved x, y plane coordinates of the stars, as a fresh copy."""
        return self._positions[2 + len(self._planets) :].flatten()

    @property
    def asterisms(self) -> Tuple[Asterism, ...]:
        return self._catalogue.asterisms

    def asterism_indices(self, asterism: Asterism) -> Tuple[int, ...]:
        """Indices in ``stars`` of the stars of asterism.

        Raises:
            UnknownAsterismError: If asterism is not part of the catalogue
        """
        return self._catalogue.asterism_indices(asterism)

    def objects(self) -> Sequence[CelestialObject]:
        """All observed objects, in projection order."""
        return self._objects

    def position_of(self, body: CelestialObject) -> CartesianCoordinates:
        """Plane position of one of the observed objects.

        Raises:
            InvalidArgumentError: If body is not part of this sky
        """
        i = self._index_of.get(id(body))
        if i is None or self._objects[i] is not body:
            raise InvalidArgumentError(f"{body.name} is not part of this sky")
        return self._position_at(i)

    def _position_at(self, i: int) -> CartesianCoordinates:
        x, y = self._positions[i]
        return CartesianCoordinates(float(x), float(y))

    def object_closest_to(
        self, point: CartesianCoordinates, max_distance: float
    ) -> Optional[CelestialObject]:
        """Object whose plane position is closest to point, if close enough.

        Only objects at a distance of at most max_distance are considered.
        When several are equally close, the first one in projection order
        is returned.

        Raises:
            InvalidArgumentError: If max_distance is negative
        """
        if not max_distance >= 0:
            raise InvalidArgumentError(
                f"Maximum distance {max_distance!r} must not be negative"
            )

        dx = self._positions[:, 0] - point.x
        dy = self._positions[:, 1] - point.y
        candidates = np.flatnonzero((np.abs(dx) <= max_distance) & (np.abs(dy) <= max_distance))
        if candidates.size == 0:
            return None

        distances = dx[candidates] ** 2 + dy[candidates] ** 2
        best = int(np.argmin(distances))
        if distances[best] > max_distance * max_distance:
            return None
        return self._objects[int(candidates[best])]

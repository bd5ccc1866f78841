from dataclasses import dataclass, field
from typing import ClassVar, Sequence

from ..coordinates import EclipticCoordinates, EquatorialCoordinates
from ..errors import InvalidArgumentError, MissingValueError
from ..numeric import ClosedInterval, check_in_interval


@dataclass(frozen=True, eq=False)
class CelestialObject:
    """Fields shared by every object drawn on the sky.

    Instances compare and hash by identity.
    """

    name: str
    equatorial_position: EquatorialCoordinates
    angular_size: float
    magnitude: float

    def __post_init__(self):
        if self.name is None:
            raise MissingValueError("name")
        if self.equatorial_position is None:
            raise MissingValueError("equatorial_position")
        if not self.angular_size >= 0:
            raise InvalidArgumentError(
                f"Angular size {self.angular_size!r} of {self.name} must not be negative"
            )


@dataclass(frozen=True, eq=False)
class Sun(CelestialObject):
    name: str = field(default="Sun", init=False)
    magnitude: float = field(default=-26.7, init=False)
    ecliptic_position: EclipticCoordinates
    mean_anomaly: float

    def __post_init__(self):
        super().__post_init__()
        if self.ecliptic_position is None:
            raise MissingValueError("ecliptic_position")


@dataclass(frozen=True, eq=False)
class Moon(CelestialObject):
    name: str = field(default="Moon", init=False)
    phase: float

    PHASE_INTERVAL: ClassVar[ClosedInterval] = ClosedInterval(0.0, 1.0)

    def __post_init__(self):
        super().__post_init__()
        check_in_interval(self.PHASE_INTERVAL, self.phase, "moon phase")


@dataclass(frozen=True, eq=False)
class Planet(CelestialObject):
    pass


@dataclass(frozen=True, eq=False)
class Star(CelestialObject):
    angular_size: float = field(default=0.0, init=False)
    hipparcos_id: int
    color_index: float
    color_temperature: int = field(init=False)

    COLOR_INDEX_INTERVAL: ClassVar[ClosedInterval] = ClosedInterval(-0.5, 5.5)

    def __post_init__(self):
        super().__post_init__()
        if self.hipparcos_id < 0:
            raise InvalidArgumentError(
                f"Hipparcos id {self.hipparcos_id!r} of {self.name} must not be negative"
            )
        ci = check_in_interval(self.COLOR_INDEX_INTERVAL, self.color_index, "color index")
        temperature = 4600.0 * (1.0 / (0.92 * ci + 1.7) + 1.0 / (0.92 * ci + 0.62))
        object.__setattr__(self, "color_temperature", int(temperature))


@dataclass(frozen=True, eq=False)
class Asterism:
    """Ordered group of stars with the constellation label drawn for it.

    Asterisms sharing a constellation that is already labelled elsewhere
    carry the UNLABELLED marker instead of a name.
    """

    stars: Sequence[Star]
    constellation: str

    UNLABELLED: ClassVar[str] = "-"

    def __post_init__(self):
        if not self.stars:
            raise InvalidArgumentError(
                f"Asterism '{self.constellation}' must contain at least one star"
            )
        object.__setattr__(self, "stars", tuple(self.stars))

    @property
    def is_labelled(self) -> bool:
        return self.constellation != self.UNLABELLED


def describe(body: CelestialObject) -> str:
    """Short text shown for an object, e.g. in an info bar."""
    if isinstance(body, Moon):
        return f"{body.name} ({body.phase * 100:.1f}%)"
    return body.name

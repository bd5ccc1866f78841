"""Greenwich and local sidereal time."""

from datetime import datetime, timezone
from typing import TYPE_CHECKING

from ..numeric import Polynomial, angle
from .epoch import J2000, milliseconds_between, require_aware

if TYPE_CHECKING:
    from ..coordinates.spherical import GeographicCoordinates

_HOURS_PER_MILLISECOND = 1.0 / (1000.0 * 3600.0)
_SIDEREAL_RATE = 1.002737909

# Greenwich sidereal time at 0h UT, in hours, as a function of Julian
# centuries since J2000.
_MIDNIGHT_SIDEREAL_HOURS = Polynomial.of(0.000025862, 2400.051336, 6.697374558)


def greenwich(when: datetime) -> float:
    """Greenwich sidereal time at the given instant.

    Args:
        when: Time zone aware instant

    Returns:
        Sidereal time as an angle in [0, τ)
    """
    utc = require_aware(when).astimezone(timezone.utc)
    midnight = utc.replace(hour=0, minute=0, second=0, microsecond=0)

    centuries_at_midnight = J2000.julian_centuries_until(midnight)
    hours_since_midnight = milliseconds_between(midnight, utc) * _HOURS_PER_MILLISECOND

    sidereal_hours = (
        _MIDNIGHT_SIDEREAL_HOURS.at(centuries_at_midnight)
        + _SIDEREAL_RATE * hours_since_midnight
    )
    return angle.normalize_positive(angle.of_hr(sidereal_hours))


def local(when: datetime, where: "GeographicCoordinates") -> float:
    """Local sidereal time for an observer, in [0, τ)."""
    return angle.normalize_positive(greenwich(when) + where.lon)

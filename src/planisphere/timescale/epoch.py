"""Reference epochs used as time origins by the astronomical formulas."""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from ..errors import InvalidArgumentError

_DAYS_PER_MILLISECOND = 1.0 / (1000.0 * 3600.0 * 24.0)
_JULIAN_CENTURIES_PER_DAY = 1.0 / 36525.0
_ONE_MILLISECOND = timedelta(milliseconds=1)


def require_aware(when: datetime) -> datetime:
    """Return when unchanged if it carries a time zone.

    Raises:
        InvalidArgumentError: If when is a naive datetime
    """
    if when.tzinfo is None or when.utcoffset() is None:
        raise InvalidArgumentError(
            f"Observation instant {when.isoformat()} has no time zone",
            suggestions=["Attach a tzinfo, e.g. datetime(..., tzinfo=timezone.utc)"],
        )
    return when


def milliseconds_between(start: datetime, end: datetime) -> int:
    """Whole milliseconds from start to end, negative if end is earlier.

    Partial milliseconds are truncated toward zero.
    """
    whole, rest = divmod(require_aware(end) - start, _ONE_MILLISECOND)
    if whole < 0 and rest:
        whole += 1
    return whole


@dataclass(frozen=True)
class Epoch:
    name: str
    moment: datetime

    def days_until(self, when: datetime) -> float:
        """Signed number of days from this epoch to when.

        Computed at millisecond resolution; positive if when is later.
        """
        return milliseconds_between(self.moment, when) * _DAYS_PER_MILLISECOND

    def julian_centuries_until(self, when: datetime) -> float:
        return self.days_until(when) * _JULIAN_CENTURIES_PER_DAY


J2000 = Epoch("J2000", datetime(2000, 1, 1, 12, 0, tzinfo=timezone.utc))
J2010 = Epoch("J2010", datetime(2010, 1, 1, 0, 0, tzinfo=timezone.utc) - timedelta(days=1))

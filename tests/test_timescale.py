import math
from datetime import datetime, timedelta, timezone

import pytest
from skyfield.api import load

from planisphere.coordinates import GeographicCoordinates
from planisphere.errors import InvalidArgumentError
from planisphere.numeric import angle
from planisphere.timescale import J2000, J2010, sidereal

UTC = timezone.utc


def _angle_difference(a: float, b: float) -> float:
    return (a - b + math.pi) % angle.TAU - math.pi


class TestEpoch:
    def test_epoch_moments(self):
        assert J2000.moment == datetime(2000, 1, 1, 12, 0, tzinfo=UTC)
        assert J2010.moment == datetime(2009, 12, 31, 0, 0, tzinfo=UTC)

    def test_days_until_is_signed(self):
        assert J2000.days_until(J2000.moment) == 0.0
        assert J2010.days_until(datetime(2010, 1, 1, tzinfo=UTC)) == pytest.approx(1.0)
        assert J2010.days_until(datetime(2009, 12, 29, 12, tzinfo=UTC)) == pytest.approx(-1.5)
        assert J2010.days_until(datetime(2009, 12, 30, 12, tzinfo=UTC)) == pytest.approx(-0.5)

    def test_days_until_known_offsets(self):
        assert J2010.days_until(datetime(2003, 7, 27, tzinfo=UTC)) == pytest.approx(-2349.0)
        assert J2010.days_until(datetime(2003, 11, 22, tzinfo=UTC)) == pytest.approx(-2231.0)

    def test_days_until_has_millisecond_resolution(self):
        just_after = J2000.moment + timedelta(microseconds=999)
        assert J2000.days_until(just_after) == 0.0
        one_ms_after = J2000.moment + timedelta(milliseconds=1)
        assert J2000.days_until(one_ms_after) == pytest.approx(1.0 / 86_400_000)

    def test_days_until_truncates_toward_zero(self):
        just_before = J2010.moment - timedelta(microseconds=500)
        assert J2010.days_until(just_before) == 0.0
        earlier = J2010.moment - timedelta(microseconds=1500)
        assert J2010.days_until(earlier) == pytest.approx(-1.0 / 86_400_000)

    def test_days_until_accepts_other_time_zones(self):
        cet = timezone(timedelta(hours=1))
        assert J2000.days_until(datetime(2000, 1, 1, 13, 0, tzinfo=cet)) == 0.0

    def test_julian_centuries_until(self):
        when = datetime(2100, 1, 1, 12, 0, tzinfo=UTC)
        assert J2000.julian_centuries_until(when) == pytest.approx(1.0)

    def test_naive_datetime_rejected(self):
        with pytest.raises(InvalidArgumentError, match="time zone"):
            J2000.days_until(datetime(2020, 1, 1))


class TestSiderealTime:
    def test_greenwich_reference_value(self):
        when = datetime(1980, 4, 22, 14, 36, 51, 670000, tzinfo=UTC)
        assert angle.to_hr(sidereal.greenwich(when)) == pytest.approx(4.668119, abs=1e-6)

    def test_local_adds_longitude(self):
        when = datetime(1980, 4, 22, 14, 36, 51, 670000, tzinfo=UTC)
        where = GeographicCoordinates.of_deg(-64, 0)
        assert angle.to_hr(sidereal.local(when, where)) == pytest.approx(0.401453, abs=1e-6)

    def test_greenwich_in_range(self):
        for day in range(0, 365, 37):
            when = datetime(2020, 1, 1, tzinfo=UTC) + timedelta(days=day, hours=day % 24)
            assert 0.0 <= sidereal.greenwich(when) < angle.TAU

    def test_greenwich_naive_rejected(self):
        with pytest.raises(InvalidArgumentError):
            sidereal.greenwich(datetime(2020, 1, 1))

    @pytest.mark.parametrize(
        "when",
        [
            datetime(1980, 4, 22, 14, 36, 51, 670000, tzinfo=UTC),
            datetime(2003, 11, 22, 0, 0, tzinfo=UTC),
            datetime(2020, 4, 22, 20, 30, tzinfo=UTC),
        ],
    )
    def test_greenwich_matches_skyfield(self, when):
        """Independent check against skyfield's built-in timescale."""
        ts = load.timescale(builtin=True)
        t = ts.from_datetime(when)
        expected = angle.of_hr(t.gmst)
        assert abs(_angle_difference(sidereal.greenwich(when), expected)) < 1e-3

import math
from datetime import datetime, timezone

import pytest

from planisphere.coordinates import EclipticToEquatorialConversion
from planisphere.ephemeris import MOON, SUN, planets
from planisphere.models import Moon, Planet, Sun
from planisphere.numeric import angle
from planisphere.timescale import J2010

UTC = timezone.utc


def conversion_on(year, month, day):
    return EclipticToEquatorialConversion(datetime(year, month, day, tzinfo=UTC))


class TestSunModel:
    def test_textbook_position(self):
        sun = SUN.at(-2349, conversion_on(2003, 7, 27))
        assert isinstance(sun, Sun)
        assert sun.equatorial_position.ra_hr == pytest.approx(8.392683, abs=1e-5)
        assert sun.equatorial_position.dec_deg == pytest.approx(19.352884, abs=1e-5)

    def test_ecliptic_latitude_is_zero(self):
        sun = SUN.at(100.5, conversion_on(2010, 4, 10))
        assert sun.ecliptic_position.lat == 0.0

    def test_angular_size_about_half_a_degree(self):
        for days in (-3000, 0, 182, 4000):
            sun = SUN.at(days, conversion_on(2010, 1, 1))
            assert 0.52 < angle.to_deg(sun.angular_size) < 0.55


class TestMoonModel:
    def test_textbook_position(self):
        moon = MOON.at(-2313, conversion_on(2003, 9, 1))
        assert isinstance(moon, Moon)
        assert moon.equatorial_position.ra_hr == pytest.approx(14.211456, abs=1e-5)
        assert moon.equatorial_position.dec == pytest.approx(-0.201142, abs=1e-5)

    def test_phase_and_size(self):
        when = datetime(1979, 9, 1, tzinfo=UTC)
        moon = MOON.at(J2010.days_until(when), EclipticToEquatorialConversion(when))
        assert 0.0 <= moon.phase <= 1.0
        assert 0.45 < angle.to_deg(moon.angular_size) < 0.6
        assert moon.magnitude == 0.0

    def test_full_moon_opposite_sun(self):
        # Lunar eclipse of 2019-01-21 around 05:12 UTC
        when = datetime(2019, 1, 21, 5, 12, tzinfo=UTC)
        conversion = EclipticToEquatorialConversion(when)
        moon = MOON.at(J2010.days_until(when), conversion)
        assert moon.phase > 0.99


class TestPlanetModels:
    def test_parameter_sets(self):
        assert [p.name for p in planets.ALL] == [
            "Mercury", "Venus", "Earth", "Mars", "Jupiter", "Saturn", "Uranus", "Neptune",
        ]
        assert planets.EARTH not in planets.OBSERVABLE
        assert len(planets.OBSERVABLE) == 7

    def test_inferior_planets(self):
        assert [p.name for p in planets.ALL if p.is_inferior] == ["Mercury", "Venus"]

    def test_jupiter_textbook_position(self):
        jupiter = planets.JUPITER.at(-2231, conversion_on(2003, 11, 22))
        assert isinstance(jupiter, Planet)
        assert jupiter.name == "Jupiter"
        assert jupiter.equatorial_position.ra_hr == pytest.approx(11.187155, abs=1e-5)
        assert jupiter.equatorial_position.dec_deg == pytest.approx(6.356636, abs=1e-5)
        assert angle.to_deg(jupiter.angular_size) * 3600 == pytest.approx(35.111, abs=1e-2)
        assert jupiter.magnitude == pytest.approx(-1.99, abs=1e-2)

    def test_mercury_textbook_position(self):
        mercury = planets.MERCURY.at(-2231, conversion_on(2003, 11, 22))
        assert mercury.equatorial_position.ra_hr == pytest.approx(16.8201, abs=1e-3)
        assert mercury.equatorial_position.dec_deg == pytest.approx(-24.5009, abs=1e-3)

    @pytest.mark.parametrize("model", planets.OBSERVABLE, ids=lambda m: m.name)
    def test_positions_are_valid(self, model):
        for days in (-5000.0, -0.5, 0.0, 1234.25, 7000.0):
            planet = model.at(days, conversion_on(2010, 1, 1))
            assert 0.0 <= planet.equatorial_position.ra < angle.TAU
            assert abs(planet.equatorial_position.dec) <= math.pi / 2
            assert planet.angular_size > 0
            assert math.isfinite(planet.magnitude)

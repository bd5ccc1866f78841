"""Tests for the black body colour of stars."""

import re

import numpy as np
import pytest

from planisphere.color import (
    Color,
    blackbody_xyz,
    color_for_temperature,
    planck_radiance,
    srgb_to_8bit,
    to_hex,
    xyz_to_srgb,
)
from planisphere.errors import OutOfIntervalError


class TestPlanckRadiance:
    def test_hotter_is_brighter(self):
        wavelengths = np.arange(380, 781, 10.0)
        cool = planck_radiance(wavelengths, 3000)
        hot = planck_radiance(wavelengths, 10000)
        assert np.all(hot > cool)

    def test_peak_follows_wien_law(self):
        wavelengths = np.arange(300, 1500, 1.0)
        radiance = planck_radiance(wavelengths, 5000)
        peak = wavelengths[np.argmax(radiance)]
        assert peak == pytest.approx(2.897771955e6 / 5000, abs=2)


class TestBlackbodyXYZ:
    def test_luminance_normalized(self):
        assert blackbody_xyz(5800)[1] == pytest.approx(1.0)

    def test_hot_bodies_are_bluer(self):
        cool = blackbody_xyz(2500)
        hot = blackbody_xyz(25000)
        assert hot[2] > cool[2]
        assert hot[0] < cool[0]


class TestEncoding:
    def test_white_point_is_white(self):
        d65 = np.array([0.9505, 1.0, 1.089])
        assert xyz_to_srgb(d65) == pytest.approx(np.ones(3), abs=2e-3)

    def test_brightest_channel_is_one(self):
        srgb = xyz_to_srgb(np.array([0.3, 0.2, 0.05]))
        assert srgb.max() == pytest.approx(1.0)
        assert np.all(srgb >= 0)

    def test_black_stays_black(self):
        assert np.all(xyz_to_srgb(np.zeros(3)) == 0)

    def test_8bit_and_hex(self):
        assert srgb_to_8bit(np.array([1.0, 0.0, 0.5])) == (255, 0, 128)
        assert to_hex((255, 0, 16)) == "#ff0010"


class TestColorForTemperature:
    def test_sunlike_star_is_nearly_white(self):
        color = color_for_temperature(6500)
        assert min(color.red, color.green, color.blue) > 200

    def test_cool_star_is_red(self):
        color = color_for_temperature(3000)
        assert color.red == 255
        assert color.red > color.green > color.blue

    def test_hot_star_is_blue(self):
        color = color_for_temperature(25000)
        assert color.blue == 255
        assert color.blue > color.red

    def test_hex_form(self):
        color = color_for_temperature(4200)
        assert re.fullmatch(r"#[0-9a-f]{6}", color.hex)
        assert str(color) == color.hex

    def test_temperature_rounded_to_hundreds(self):
        assert color_for_temperature(5049) is color_for_temperature(5000)
        assert color_for_temperature(5051) is color_for_temperature(5100)

    @pytest.mark.parametrize("kelvin", [1000, 40000])
    def test_interval_bounds_accepted(self, kelvin):
        assert isinstance(color_for_temperature(kelvin), Color)

    @pytest.mark.parametrize("kelvin", [999.9, 40000.1, float("nan")])
    def test_out_of_range_rejected(self, kelvin):
        with pytest.raises(OutOfIntervalError):
            color_for_temperature(kelvin)

"""Colour of a black body, used to tint stars by their colour temperature."""

from dataclasses import dataclass
from functools import lru_cache

from ..numeric import ClosedInterval, check_in_interval
from .encoding import srgb_to_8bit, to_hex, xyz_to_srgb
from .spectral import blackbody_xyz

TEMPERATURE_INTERVAL = ClosedInterval(1000.0, 40000.0)
TEMPERATURE_STEP = 100


@dataclass(frozen=True)
class Color:
    red: int
    green: int
    blue: int

    @property
    def hex(self) -> str:
        return to_hex((self.red, self.green, self.blue))

    def __str__(self) -> str:
        return self.hex


def color_for_temperature(kelvin: float) -> Color:
    """sRGB colour of a black body at the given temperature.

    The temperature is rounded to the nearest multiple of 100 K.

    Args:
        kelvin: Temperature in [1000, 40000] K

    Returns:
        Color: Brightest sRGB colour with the black body's chromaticity

    Raises:
        OutOfIntervalError: If the temperature is outside [1000, 40000] K
    """
    check_in_interval(TEMPERATURE_INTERVAL, kelvin, "colour temperature")
    rounded = int(round(kelvin / TEMPERATURE_STEP)) * TEMPERATURE_STEP
    return _color_for_rounded_temperature(rounded)


@lru_cache(maxsize=None)
def _color_for_rounded_temperature(kelvin: int) -> Color:
    return Color(*srgb_to_8bit(xyz_to_srgb(blackbody_xyz(kelvin))))

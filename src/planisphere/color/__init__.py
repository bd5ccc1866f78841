from .blackbody import Color, color_for_temperature
from .encoding import srgb_to_8bit, to_hex, xyz_to_srgb
from .spectral import blackbody_xyz, planck_radiance

__all__ = [
    "Color",
    "color_for_temperature",
    "blackbody_xyz",
    "planck_radiance",
    "xyz_to_srgb",
    "srgb_to_8bit",
    "to_hex",
]

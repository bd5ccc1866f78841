from . import planets
from .model import CelestialObjectModel
from .moon import MOON, MoonModel
from .planets import PlanetModel
from .sun import SUN, SunModel

__all__ = [
    "CelestialObjectModel",
    "SunModel",
    "SUN",
    "MoonModel",
    "MOON",
    "PlanetModel",
    "planets",
]

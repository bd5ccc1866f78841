from .celestial import (
    Asterism,
    CelestialObject,
    Moon,
    Planet,
    Star,
    Sun,
    describe,
)

__all__ = [
    "CelestialObject",
    "Sun",
    "Moon",
    "Planet",
    "Star",
    "Asterism",
    "describe",
]

from .interval import ClosedInterval, Interval, RightOpenInterval, check_in_interval
from .polynomial import Polynomial
from . import angle

__all__ = [
    "angle",
    "Interval",
    "ClosedInterval",
    "RightOpenInterval",
    "check_in_interval",
    "Polynomial",
]

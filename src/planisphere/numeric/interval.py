"""Closed and right-open intervals of the real line."""

import math
from abc import ABC, abstractmethod

import numpy as np

from .._identity import NoValueEquality
from ..errors import InvalidArgumentError, OutOfIntervalError


class Interval(NoValueEquality, ABC):
    """Interval characterized by its lower and upper bounds."""

    __slots__ = ("_low", "_high")

    def __init__(self, low: float, high: float):
        if not low < high:
            raise InvalidArgumentError(
                f"Interval lower bound {low!r} must be below upper bound {high!r}"
            )
        self._low = float(low)
        self._high = float(high)

    @property
    def low(self) -> float:
        return self._low

    @property
    def high(self) -> float:
        return self._high

    @property
    def size(self) -> float:
        return self._high - self._low

    @abstractmethod
    def contains(self, v: float) -> bool:
        """Whether v lies in this interval."""

    def __contains__(self, v: float) -> bool:
        return self.contains(v)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._low!r}, {self._high!r})"


class ClosedInterval(Interval):
    """Interval including both of its bounds."""

    __slots__ = ()

    @classmethod
    def symmetric(cls, size: float) -> "ClosedInterval":
        """Closed interval of the given size centred on 0."""
        if not size > 0:
            raise InvalidArgumentError(f"Interval size {size!r} must be positive")
        return cls(-size / 2, size / 2)

    def contains(self, v: float) -> bool:
        return self._low <= v <= self._high

    def clip(self, v: float) -> float:
        """Saturate v to the nearest bound when it lies outside the interval."""
        if v <= self._low:
            return self._low
        return min(v, self._high)

    def __str__(self) -> str:
        return f"[{self._low},{self._high}]"


class RightOpenInterval(Interval):
    """Interval including its lower bound and excluding its upper bound."""

    __slots__ = ()

    @classmethod
    def symmetric(cls, size: float) -> "RightOpenInterval":
        """Right-open interval of the given size centred on 0."""
        if not size > 0:
            raise InvalidArgumentError(f"Interval size {size!r} must be positive")
        return cls(-size / 2, size / 2)

    def contains(self, v: float) -> bool:
        return self._low <= v < self._high

    def reduce(self, v: float) -> float:
        """Map v into the interval using floored division by its size.

        Values a rounding step below the lower bound would otherwise land
        exactly on the excluded upper bound; such results reduce to the lower
        bound.
        """
        size = self.size
        reduced = v - size * math.floor((v - self._low) / size)
        return reduced if self._low <= reduced < self._high else self._low

    def reduce_array(self, values: np.ndarray) -> np.ndarray:
        """Vectorized :meth:`reduce` over a numpy array."""
        size = self.size
        reduced = values - size * np.floor((values - self._low) / size)
        inside = (reduced >= self._low) & (reduced < self._high)
        return np.where(inside, reduced, self._low)

    def __str__(self) -> str:
        return f"[{self._low},{self._high}["


def check_in_interval(interval: Interval, value: float, what: str = "value") -> float:
    """Return value unchanged if it lies in the interval.

    Raises:
        OutOfIntervalError: If value is outside the interval (NaN included)
    """
    if not interval.contains(value):
        raise OutOfIntervalError(what, value, interval)
    return value

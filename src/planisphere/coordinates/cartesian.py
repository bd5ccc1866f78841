from dataclasses import dataclass

from .._identity import NoValueEquality


@dataclass(frozen=True, eq=False)
class CartesianCoordinates(NoValueEquality):
    """Point of the projection plane."""

    x: float
    y: float

    def distance_squared(self, that: "CartesianCoordinates") -> float:
        dx = that.x - self.x
        dy = that.y - self.y
        return dx * dx + dy * dy

    def __str__(self) -> str:
        return f"(x={self.x:.4f}, y={self.y:.4f})"

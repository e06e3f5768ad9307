"""Geometric primitives on the plan plane."""

from __future__ import annotations
import math
from pydantic import BaseModel, ConfigDict


class Point2D(BaseModel):
    """Point on the plan plane. World points are meters, screen points pixels."""
    model_config = ConfigDict(frozen=True)

    x: float
    y: float

    def distance_to(self, other: Point2D) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def lerp(self, other: Point2D, t: float) -> Point2D:
        return Point2D(
            x=self.x + (other.x - self.x) * t,
            y=self.y + (other.y - self.y) * t,
        )

    def __add__(self, other: Point2D) -> Point2D:
        return Point2D(x=self.x + other.x, y=self.y + other.y)

    def __sub__(self, other: Point2D) -> Point2D:
        return Point2D(x=self.x - other.x, y=self.y - other.y)


class Vector2D(BaseModel):
    """2D direction vector."""
    model_config = ConfigDict(frozen=True)

    x: float
    y: float

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def dot(self, other: Vector2D) -> float:
        return self.x * other.x + self.y * other.y

    def angle(self) -> float:
        """Orientation in radians, measured from +x towards +y."""
        return math.atan2(self.y, self.x)


def direction_from_points(start: Point2D, end: Point2D) -> Vector2D:
    """Get direction vector from start to end."""
    return Vector2D(x=end.x - start.x, y=end.y - start.y)

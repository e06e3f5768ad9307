"""Plan elements: walls and the openings attached to them."""

from __future__ import annotations
import math
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field, model_validator

from .geometry import Point2D, direction_from_points
from .parameters import DEFAULT_OPENING_LENGTH


class OpeningType(str, Enum):
    DOOR = "door"
    WINDOW = "window"


class Wall(BaseModel):
    """A straight wall segment between two world-space endpoints (meters)."""
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    id: str
    x1: float = Field(strict=True)
    y1: float = Field(strict=True)
    x2: float = Field(strict=True)
    y2: float = Field(strict=True)

    @model_validator(mode="after")
    def _check_endpoints(self) -> Wall:
        if self.x1 == self.x2 and self.y1 == self.y2:
            raise ValueError(f"wall {self.id!r} has coincident endpoints")
        return self

    @property
    def start(self) -> Point2D:
        return Point2D(x=self.x1, y=self.y1)

    @property
    def end(self) -> Point2D:
        return Point2D(x=self.x2, y=self.y2)

    @property
    def length(self) -> float:
        return math.hypot(self.x2 - self.x1, self.y2 - self.y1)

    @property
    def angle(self) -> float:
        """Orientation of the wall from start to end, in radians."""
        return direction_from_points(self.start, self.end).angle()

    @classmethod
    def between(cls, id: str, start: Point2D, end: Point2D) -> Wall:
        return cls(id=id, x1=start.x, y1=start.y, x2=end.x, y2=end.y)


class Opening(BaseModel):
    """A door or window anchored near a wall.

    The anchor and angle are copied from the wall at placement time; the
    opening keeps no reference to the wall afterwards.
    """
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    id: str
    type: OpeningType
    x: float = Field(strict=True)
    y: float = Field(strict=True)
    angle: float = Field(default=0.0, strict=True)  # Radians
    length: float = Field(default=DEFAULT_OPENING_LENGTH, gt=0, strict=True)  # Meters

    @property
    def anchor(self) -> Point2D:
        return Point2D(x=self.x, y=self.y)

"""Runtime view state — everything the editor tracks that is not persisted."""

from __future__ import annotations
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field

from .geometry import Point2D


class ToolMode(str, Enum):
    SELECT = "select"
    WALL = "wall"
    DOOR = "door"
    WINDOW = "window"
    ERASE = "erase"


class DraftWall(BaseModel):
    """An uncommitted wall being dragged out (world units)."""
    model_config = ConfigDict(frozen=True)

    start: Point2D
    end: Point2D

    @property
    def length(self) -> float:
        return self.start.distance_to(self.end)


class PanGesture(BaseModel):
    """Screen point and pan offset captured when a pan drag began."""
    model_config = ConfigDict(frozen=True)

    origin: Point2D
    start_pan: Point2D


class ViewState(BaseModel):
    """
    Interaction state owned by the controller.

    Holds ids only; wall and opening records live in the entity store.
    Instances are never mutated: the reducer returns updated copies.
    """
    model_config = ConfigDict(frozen=True)

    pan: Point2D = Field(default_factory=lambda: Point2D(x=0.0, y=0.0))
    tool: ToolMode = ToolMode.WALL
    selected_id: str | None = None
    draft: DraftWall | None = None
    pan_gesture: PanGesture | None = None

    @property
    def gesture_active(self) -> bool:
        return self.draft is not None or self.pan_gesture is not None

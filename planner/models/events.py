"""Pointer events consumed by the controller and the store effects it emits."""

from __future__ import annotations
from enum import Enum, IntEnum
from typing import Annotated, Literal, Union
from pydantic import BaseModel, ConfigDict, Field

from .building import Wall, Opening
from .geometry import Point2D


class PointerAction(str, Enum):
    DOWN = "down"
    MOVE = "move"
    UP = "up"
    LEAVE = "leave"      # Pointer left the drawing surface; cancels gestures


class PointerButton(IntEnum):
    PRIMARY = 0
    MIDDLE = 1           # Pans the view
    SECONDARY = 2


class PointerEvent(BaseModel):
    """A pointer event in screen pixels relative to the surface's top-left."""
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    action: PointerAction
    x: float
    y: float
    button: PointerButton = PointerButton.PRIMARY

    @property
    def screen(self) -> Point2D:
        return Point2D(x=self.x, y=self.y)


class AddWall(BaseModel):
    kind: Literal["add_wall"] = "add_wall"
    wall: Wall


class RemoveWall(BaseModel):
    kind: Literal["remove_wall"] = "remove_wall"
    wall_id: str


class AddOpening(BaseModel):
    kind: Literal["add_opening"] = "add_opening"
    opening: Opening


class RemoveOpening(BaseModel):
    kind: Literal["remove_opening"] = "remove_opening"
    opening_id: str


StoreEffect = Annotated[
    Union[AddWall, RemoveWall, AddOpening, RemoveOpening],
    Field(discriminator="kind"),
]

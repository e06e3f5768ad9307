from .geometry import Point2D, Vector2D, direction_from_points
from .building import Wall, Opening, OpeningType
from .parameters import (
    EditorSettings, SettingsUpdate, SvgStyle,
    MIN_WALL_LENGTH, ATTACH_DISTANCE, PICK_DISTANCE, DEFAULT_OPENING_LENGTH,
)
from .view import ToolMode, DraftWall, PanGesture, ViewState
from .events import (
    PointerAction, PointerButton, PointerEvent,
    AddWall, RemoveWall, AddOpening, RemoveOpening, StoreEffect,
)

__all__ = [
    "Point2D", "Vector2D", "direction_from_points",
    "Wall", "Opening", "OpeningType",
    "EditorSettings", "SettingsUpdate", "SvgStyle",
    "MIN_WALL_LENGTH", "ATTACH_DISTANCE", "PICK_DISTANCE", "DEFAULT_OPENING_LENGTH",
    "ToolMode", "DraftWall", "PanGesture", "ViewState",
    "PointerAction", "PointerButton", "PointerEvent",
    "AddWall", "RemoveWall", "AddOpening", "RemoveOpening", "StoreEffect",
]

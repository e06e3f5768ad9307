"""World <-> screen coordinate transform."""

from __future__ import annotations

from planner.models import Point2D


class ViewTransform:
    """
    Maps world meters to screen pixels.

    screen = world * scale + pan, applied per axis. Both directions are
    pure functions of the current scale and pan.
    """

    def __init__(self, scale: float, pan: Point2D | None = None) -> None:
        if not scale > 0:
            raise ValueError(f"scale must be positive, got {scale}")
        self.scale = scale
        self.pan = pan or Point2D(x=0.0, y=0.0)

    def world_to_screen(self, p: Point2D) -> Point2D:
        return Point2D(
            x=p.x * self.scale + self.pan.x,
            y=p.y * self.scale + self.pan.y,
        )

    def screen_to_world(self, p: Point2D) -> Point2D:
        return Point2D(
            x=(p.x - self.pan.x) / self.scale,
            y=(p.y - self.pan.y) / self.scale,
        )

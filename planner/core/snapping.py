"""Grid snapping.

Coordinates are rounded half away from zero: with a 0.5 m grid, 0.25
snaps to 0.5 and -0.25 snaps to -0.5.
"""

from __future__ import annotations
import math

from planner.models import Point2D


def round_half_away(value: float) -> float:
    magnitude = abs(value)
    whole = math.floor(magnitude)
    if magnitude - whole >= 0.5:
        whole += 1
    return math.copysign(whole, value)


def snap_value(value: float, grid_size: float) -> float:
    return round_half_away(value / grid_size) * grid_size


def snap_to_grid(p: Point2D, grid_size: float, enabled: bool = True) -> Point2D:
    """Snap a world point to the nearest grid intersection."""
    if not enabled:
        return p
    if not grid_size > 0:
        raise ValueError(f"grid size must be positive, got {grid_size}")
    return Point2D(x=snap_value(p.x, grid_size), y=snap_value(p.y, grid_size))

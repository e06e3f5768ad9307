"""Nearest-entity queries: point/segment distance, wall attachment, picking.

All queries are linear scans over the collections they are given. Where
several candidates are equally close, the first one in iteration order wins;
the entity store iterates in insertion order, so results are deterministic.
"""

from __future__ import annotations
import math
from enum import Enum
from typing import Iterable
from pydantic import BaseModel

from planner.models import (
    Point2D, Wall, Opening, direction_from_points,
    ATTACH_DISTANCE, PICK_DISTANCE,
)


class EntityKind(str, Enum):
    WALL = "wall"
    OPENING = "opening"


class WallHit(BaseModel):
    """Result of a nearest-wall search."""
    wall: Wall
    projection: Point2D
    distance: float


class EntityHit(BaseModel):
    """Result of a pick: which entity is under the pointer."""
    id: str
    kind: EntityKind


def _clamped_parameter(p: Point2D, a: Point2D, b: Point2D) -> float | None:
    seg = direction_from_points(a, b)
    len_sq = seg.length_squared()
    if len_sq == 0:
        return None
    t = direction_from_points(a, p).dot(seg) / len_sq
    return max(0.0, min(1.0, t))


def project_point_onto_segment(p: Point2D, a: Point2D, b: Point2D) -> Point2D:
    """Closest point to `p` on segment a-b."""
    t = _clamped_parameter(p, a, b)
    if t is None:
        return a
    return a.lerp(b, t)


def distance_point_to_segment(p: Point2D, a: Point2D, b: Point2D) -> float:
    """Euclidean distance from `p` to segment a-b (or to `a` if degenerate)."""
    return p.distance_to(project_point_onto_segment(p, a, b))


def find_nearest_wall(
    p: Point2D,
    walls: Iterable[Wall],
    max_distance: float = ATTACH_DISTANCE,
) -> WallHit | None:
    """
    Return the wall closest to `p`, if it is strictly closer than
    `max_distance`.
    """
    best: WallHit | None = None
    best_d = math.inf
    for wall in walls:
        proj = project_point_onto_segment(p, wall.start, wall.end)
        d = p.distance_to(proj)
        if d < best_d:
            best_d = d
            best = WallHit(wall=wall, projection=proj, distance=d)
    if best is not None and best_d < max_distance:
        return best
    return None


def pick_entity(
    p: Point2D,
    walls: Iterable[Wall],
    openings: Iterable[Opening],
    tolerance: float = PICK_DISTANCE,
) -> EntityHit | None:
    """
    Find the entity under `p` for select/erase.

    Openings are tested first against their anchor point, so an opening
    sitting on a wall always wins over the wall.
    """
    for opening in openings:
        if p.distance_to(opening.anchor) <= tolerance:
            return EntityHit(id=opening.id, kind=EntityKind.OPENING)
    for wall in walls:
        if distance_point_to_segment(p, wall.start, wall.end) <= tolerance:
            return EntityHit(id=wall.id, kind=EntityKind.WALL)
    return None

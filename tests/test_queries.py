import math

import pytest

from planner.core.queries import (
    EntityKind, distance_point_to_segment, find_nearest_wall,
    pick_entity, project_point_onto_segment,
)
from planner.models import Opening, OpeningType, Point2D, Wall


def P(x, y):
    return Point2D(x=x, y=y)


def test_distance_to_interior_of_segment():
    assert distance_point_to_segment(P(2, 3), P(0, 0), P(4, 0)) == pytest.approx(3.0)


def test_distance_clamps_to_endpoints():
    assert distance_point_to_segment(P(-3, 4), P(0, 0), P(4, 0)) == pytest.approx(5.0)
    assert distance_point_to_segment(P(7, 4), P(0, 0), P(4, 0)) == pytest.approx(5.0)


def test_degenerate_segment_measures_to_point():
    assert distance_point_to_segment(P(3, 4), P(0, 0), P(0, 0)) == pytest.approx(5.0)
    assert project_point_onto_segment(P(3, 4), P(1, 1), P(1, 1)) == P(1, 1)


def test_projection_onto_diagonal():
    proj = project_point_onto_segment(P(0, 2), P(0, 0), P(2, 2))
    assert proj.x == pytest.approx(1.0)
    assert proj.y == pytest.approx(1.0)


def test_projection_is_clamped():
    assert project_point_onto_segment(P(-5, 1), P(0, 0), P(4, 0)) == P(0, 0)
    assert project_point_onto_segment(P(9, 1), P(0, 0), P(4, 0)) == P(4, 0)


def test_nearest_wall_within_threshold():
    walls = [
        Wall(id="far", x1=0, y1=5, x2=4, y2=5),
        Wall(id="near", x1=0, y1=0, x2=4, y2=0),
    ]
    hit = find_nearest_wall(P(2, 0.1), walls)
    assert hit is not None
    assert hit.wall.id == "near"
    assert hit.projection == P(2, 0)
    assert hit.distance == pytest.approx(0.1)


def test_nearest_wall_outside_threshold():
    walls = [Wall(id="w", x1=0, y1=0, x2=4, y2=0)]
    assert find_nearest_wall(P(2, 0.6), walls) is None
    assert find_nearest_wall(P(2, 0.5), walls) is None
    assert find_nearest_wall(P(2, 0.0), []) is None


def test_nearest_wall_tie_goes_to_first_in_order():
    a = Wall(id="a", x1=0, y1=-0.25, x2=4, y2=-0.25)
    b = Wall(id="b", x1=0, y1=0.25, x2=4, y2=0.25)
    assert find_nearest_wall(P(2, 0), [a, b]).wall.id == "a"
    assert find_nearest_wall(P(2, 0), [b, a]).wall.id == "b"


def test_nearest_wall_angle_matches_wall_direction():
    wall = Wall(id="w", x1=0, y1=0, x2=0, y2=3)
    hit = find_nearest_wall(P(0.2, 1), [wall])
    assert hit.wall.angle == pytest.approx(math.pi / 2)


def test_pick_prefers_opening_over_wall():
    wall = Wall(id="w1", x1=0, y1=0, x2=4, y2=0)
    door = Opening(id="op1", type=OpeningType.DOOR, x=2, y=0)
    hit = pick_entity(P(2, 0), [wall], [door])
    assert hit.id == "op1"
    assert hit.kind == EntityKind.OPENING


def test_pick_falls_back_to_wall():
    wall = Wall(id="w1", x1=0, y1=0, x2=4, y2=0)
    door = Opening(id="op1", type=OpeningType.DOOR, x=2, y=0)
    hit = pick_entity(P(3, 0.1), [wall], [door])
    assert hit.id == "w1"
    assert hit.kind == EntityKind.WALL


def test_pick_nothing_in_range():
    wall = Wall(id="w1", x1=0, y1=0, x2=4, y2=0)
    assert pick_entity(P(2, 0.2), [wall], []) is None

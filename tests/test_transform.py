import pytest

from planner.core.transform import ViewTransform
from planner.models import Point2D


def test_world_to_screen_applies_scale_then_pan():
    t = ViewTransform(scale=50.0, pan=Point2D(x=10.0, y=-20.0))
    s = t.world_to_screen(Point2D(x=2.0, y=3.0))
    assert s == Point2D(x=110.0, y=130.0)


def test_screen_to_world_inverts_world_to_screen():
    t = ViewTransform(scale=50.0, pan=Point2D(x=10.0, y=-20.0))
    w = t.screen_to_world(Point2D(x=110.0, y=130.0))
    assert w == Point2D(x=2.0, y=3.0)


@pytest.mark.parametrize("scale", [0.5, 37.0, 100.0, 1234.5])
@pytest.mark.parametrize("pan", [(0.0, 0.0), (-315.2, 48.9), (1e4, -1e4)])
@pytest.mark.parametrize("point", [(0.0, 0.0), (3.3, -7.1), (-1e3, 0.001)])
def test_round_trip(scale, pan, point):
    t = ViewTransform(scale=scale, pan=Point2D(x=pan[0], y=pan[1]))
    p = Point2D(x=point[0], y=point[1])
    back = t.screen_to_world(t.world_to_screen(p))
    assert back.x == pytest.approx(p.x, abs=1e-9)
    assert back.y == pytest.approx(p.y, abs=1e-9)


@pytest.mark.parametrize("scale", [0.0, -1.0])
def test_rejects_non_positive_scale(scale):
    with pytest.raises(ValueError):
        ViewTransform(scale=scale)

import pytest

from candle.polygon import Polygon
from candle.transform import Rect
from candle.vector2 import Vector2


POINTS = [Vector2(0, 0), Vector2(4, 0), Vector2(5, 3), Vector2(1, 6)]


def test_one_edge_per_point():
    assert len(Polygon(POINTS).lines) == len(POINTS)


def test_edges_start_at_points_in_order():
    origins = [line.origin for line in Polygon(POINTS).lines]
    assert origins == POINTS


def test_edges_form_closed_chain():
    lines = Polygon(POINTS).lines
    ends = [tuple(line.point(1)) for line in lines]
    expected = [tuple(p) for p in POINTS[1:] + POINTS[:1]]
    assert len(ends) == len(expected)
    for end, start in zip(ends, expected):
        assert end == pytest.approx(start)


def test_empty_polygon_has_no_edges():
    assert Polygon([]).lines == []


def test_from_rect_corners():
    r = Rect(1, 2, 10, 5)
    poly = Polygon.from_rect(r)
    origins = [line.origin for line in poly.lines]
    assert origins == [
        Vector2(r.left, r.top),
        Vector2(r.right, r.top),
        Vector2(r.right, r.bottom),
        Vector2(r.left, r.bottom),
    ]
    assert tuple(poly.lines[-1].point(1)) == pytest.approx((r.left, r.top))
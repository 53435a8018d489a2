import math

import pytest

from mer_gen import (Point, Rectangle, Segment, find_violations, iter_segments, rectangle_edges,
                     segment_intersects_rectangle)


def test_extents_computed_from_endpoints():
    seg = Segment((8, 1), (2, 5))
    assert (seg.min_x, seg.max_x, seg.min_y, seg.max_y) == (2, 8, 1, 5)
    assert seg.p1 == Point(8, 1)
    assert seg.p1.x == 8.0


def test_slope_intercept_and_line_evaluation():
    seg = Segment((0, 1), (4, 9))
    assert seg.slope == 2
    assert seg.intercept == 1
    assert seg.get_y(3) == 7
    assert seg.get_x(5) == 2


def test_vertical_and_horizontal_lines():
    vertical = Segment((3, 0), (3, 10))
    assert vertical.is_vertical()
    assert vertical.slope == math.inf
    assert math.isnan(vertical.intercept)
    assert vertical.get_x(4) == 3
    assert vertical.get_y(1) == 10

    horizontal = Segment((0, 2), (6, 2))
    assert horizontal.is_horizontal()
    assert horizontal.get_x(2) == 6
    assert horizontal.get_y(100) == 2


def test_point_obstacle():
    seg = Segment((5, 5), (5, 5))
    assert seg.is_point()
    assert seg.clip(0, 0, 10, 10) is seg


def test_split_at_x_produces_new_segments():
    seg = Segment((10, 10), (0, 0))
    left, right = seg.split_at_x(4)
    assert left == Segment((0, 0), (4, 4))
    assert right == Segment((4, 4), (10, 10))
    assert seg == Segment((10, 10), (0, 0))


def test_split_at_y():
    lower, upper = Segment((10, 0), (0, 10)).split_at_y(5)
    assert lower == Segment((10, 0), (5, 5))
    assert upper == Segment((5, 5), (0, 10))


def test_clip_inside_returns_same_segment():
    seg = Segment((1, 1), (9, 9))
    assert seg.clip(0, 0, 10, 10) is seg


def test_clip_crossing_segment():
    clipped = Segment((-10, 50), (110, 50)).clip(0, 0, 100, 100)
    assert clipped.min_x == pytest.approx(0)
    assert clipped.max_x == pytest.approx(100)
    assert clipped.min_y == clipped.max_y == 50


def test_clip_outside_returns_none():
    assert Segment((200, 200), (300, 300)).clip(0, 0, 100, 100) is None
    assert Segment((-5, 50), (-1, 60)).clip(0, 0, 100, 100) is None


def test_clip_touching_edge_is_kept():
    clipped = Segment((100, 20), (140, 20)).clip(0, 0, 100, 100)
    assert clipped is not None
    assert clipped.is_point()
    assert clipped.p1 == Point(100, 20)


def test_coerce():
    seg = Segment((0, 0), (1, 1))
    assert Segment.coerce(seg) is seg
    assert Segment.coerce(((0, 0), (1, 1))) == seg
    with pytest.raises(ValueError):
        Segment.coerce((0, 1))
    with pytest.raises(ValueError):
        Segment.coerce("segment")


def test_segments_are_hashable_values():
    assert len({Segment((0, 0), (1, 1)), Segment((0.0, 0.0), (1.0, 1.0))}) == 1


def test_interior_crossing_is_detected():
    rect = Rectangle(0, 0, 10, 10)
    assert segment_intersects_rectangle(Segment((-5, 5), (15, 5)), rect)
    assert segment_intersects_rectangle(Segment((-5, -5), (15, 15)), rect)
    assert segment_intersects_rectangle(Segment((5, 5), (5, 5)), rect)
    assert segment_intersects_rectangle(Segment((2, 2), (3, 3)), rect)


def test_boundary_touches_are_not_violations():
    rect = Rectangle(0, 0, 10, 10)
    assert not segment_intersects_rectangle(Segment((0, -5), (0, 15)), rect)
    assert not segment_intersects_rectangle(Segment((-5, 10), (15, 10)), rect)
    assert not segment_intersects_rectangle(Segment((10, 10), (20, 20)), rect)
    assert not segment_intersects_rectangle(Segment((5, 10), (5, 10)), rect)
    assert not segment_intersects_rectangle(Segment((20, 0), (30, 10)), rect)


def test_degenerate_rectangle_has_no_interior():
    assert not segment_intersects_rectangle(Segment((0, 0), (10, 10)), Rectangle(5, 0, 5, 10))


def test_find_violations():
    rect = Rectangle(0, 0, 10, 10)
    inside = Segment((1, 1), (2, 2))
    outside = ((20, 20), (30, 30))
    assert find_violations(rect, [inside, outside]) == [inside]


def test_rectangle_edges():
    edges = rectangle_edges(Rectangle(0, 0, 2, 1))
    assert edges == [Segment((0, 0), (2, 0)), Segment((2, 0), (2, 1)),
                     Segment((2, 1), (0, 1)), Segment((0, 1), (0, 0))]


def test_iter_segments_expands_rectangles():
    segments = list(iter_segments([((0, 0), (1, 1)), Rectangle(5, 5, 6, 6)]))
    assert len(segments) == 5
    assert segments[0] == Segment((0, 0), (1, 1))


def test_rectangle_obstacle_violations():
    obstacle = Rectangle(4, 4, 6, 6)
    assert len(find_violations(Rectangle(0, 0, 10, 10), [obstacle])) == 4
    assert find_violations(Rectangle(0, 0, 4, 10), [obstacle]) == []

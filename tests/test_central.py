import pytest
from hypothesis import given, settings, strategies as st

from mer_gen import Point, Rectangle, Segment, Side, build_staircase, solve_central

from conftest import assert_empty


def test_no_obstacles_returns_the_window(bounds):
    assert solve_central(Point(50, 50), [], bounds) == bounds


def test_walls_on_both_sides(bounds):
    obstacles = [Segment((30, 0), (30, 100)), Segment((80, 0), (80, 100))]
    result = solve_central(Point(50, 50), obstacles, bounds)
    assert result == Rectangle(30, 0, 80, 100)
    assert_empty(result, obstacles, bounds)


def test_point_at_center(bounds):
    obstacles = [Segment((50, 50), (50, 50))]
    result = solve_central((50, 50), obstacles, bounds)
    assert result == Rectangle(0, 0, 100, 50)
    assert_empty(result, obstacles, bounds)


def test_wall_through_center_leaves_nothing(bounds):
    result = solve_central(Point(50, 50), [Segment((50, 0), (50, 100))], bounds)
    assert result.get_area() == 0
    assert result == Rectangle(50, 50, 50, 50)


def test_result_crosses_the_center_column(bounds):
    obstacles = [Segment((70, 60), (70, 90)), Segment((20, 10), (20, 30)), Segment((40, 75), (60, 75))]
    result = solve_central(Point(50, 50), obstacles, bounds)
    assert result.x_min <= 50 <= result.x_max
    assert result.get_area() > 0
    assert_empty(result, obstacles, bounds)


def exhaustive_pairing(center, obstacles, bounds):
    """Best area over every left/right staircase step pair."""
    left = build_staircase(center, obstacles, bounds, Side.LEFT)
    right = build_staircase(center, obstacles, bounds, Side.RIGHT)
    return max(max(0.0, (ls.offset + rs.offset) * (min(ls.y_top, rs.y_top) - max(ls.y_bot, rs.y_bot)))
               for ls in left for rs in right)


def test_bands_binding_on_opposite_sides(bounds):
    # ceilings on the left, floors on the right
    obstacles = [Segment((40, 60), (40, 60)), Segment((10, 90), (10, 90)),
                 Segment((60, 40), (60, 40)), Segment((90, 10), (90, 10))]
    result = solve_central(Point(50, 50), obstacles, bounds)
    assert result.get_area() == pytest.approx(exhaustive_pairing((50, 50), obstacles, bounds))
    assert_empty(result, obstacles, bounds)


coords = st.integers(min_value=0, max_value=100)
points = st.builds(lambda x, y: Segment((x, y), (x, y)), coords, coords)
axis_aligned = st.one_of(
    st.builds(lambda x, y, d: Segment((x, y), (min(x + d, 100), y)), coords, coords, st.integers(0, 30)),
    st.builds(lambda x, y, d: Segment((x, y), (x, min(y + d, 100))), coords, coords, st.integers(0, 30)),
)
any_segment = st.builds(lambda a, b, c, d: Segment((a, b), (c, d)), coords, coords, coords, coords)


@settings(max_examples=300, deadline=None)
@given(obstacles=st.lists(st.one_of(points, axis_aligned, any_segment), max_size=10),
       cx=st.integers(1, 99), cy=st.integers(1, 99))
def test_matches_exhaustive_pairing(obstacles, cx, cy):
    bounds = Rectangle(0, 0, 100, 100)
    result = solve_central(Point(cx, cy), obstacles, bounds)
    assert result.get_area() == pytest.approx(exhaustive_pairing((cx, cy), obstacles, bounds), abs=1e-6)
    assert result.x_min <= cx <= result.x_max
    assert_empty(result, obstacles, bounds)

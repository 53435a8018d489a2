import pytest

from mer_gen.core.util import clamp, get_xy, maximize_quadratic, validate_number, validate_vector


def test_maximize_quadratic_vertex_inside():
    x, val = maximize_quadratic(-1, 100, 0, 0, 100)
    assert x == pytest.approx(50)
    assert val == pytest.approx(2500)


def test_maximize_quadratic_vertex_outside():
    x, val = maximize_quadratic(-1, 100, 0, 60, 90)
    assert x == 60
    assert val == pytest.approx(2400)


def test_maximize_quadratic_convex_picks_an_end():
    x, val = maximize_quadratic(1, 0, 0, -2, 1)
    assert x == -2
    assert val == 4


def test_maximize_quadratic_linear():
    x, val = maximize_quadratic(0, -3, 1, 0, 5)
    assert x == 0
    assert val == 1


def test_clamp():
    assert clamp(5, 0, 10) == 5
    assert clamp(-1, 0, 10) == 0
    assert clamp(11, 0, 10) == 10


def test_get_xy_accepts_tuples_and_objects():
    class P:
        x, y = 1, 2

    assert get_xy((3, 4)) == (3.0, 4.0)
    assert get_xy([3, 4]) == (3.0, 4.0)
    assert get_xy(P()) == (1.0, 2.0)
    with pytest.raises(ValueError):
        get_xy((1, 2, 3))
    with pytest.raises(ValueError):
        get_xy("ab")


def test_validators():
    validate_vector((1, 2.5))
    validate_number(3.5)
    with pytest.raises(ValueError):
        validate_vector((1, "2"))
    with pytest.raises(ValueError):
        validate_number(None)

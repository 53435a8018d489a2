import pytest

from mer_gen import Rectangle, find_violations


@pytest.fixture
def bounds():
    return Rectangle(0, 0, 100, 100)


def assert_empty(rect, obstacles, bounds):
    """Result lies inside the bounds and no obstacle crosses its interior."""
    assert bounds.contains(rect, tol=1e-6), f"{rect} leaves {bounds}"
    violations = find_violations(rect, obstacles)
    assert not violations, f"{rect} is crossed by {violations}"

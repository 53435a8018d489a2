import math
from typing import Tuple

# Configuration guide for the Maximum Empty Rectangle solver.
# All coordinates are plain floats, so every geometric decision is taken with an absolute tolerance.
# The defaults suit inputs in the 1e-3 .. 1e6 range (pixels, millimeters, layout units).

# General tuning strategy:
# - If inputs live on a coarse grid (e.g. integer pixels) the defaults are more than enough
# - If inputs are tiny (whole scene smaller than ~1e-3), lower EPS and COORD_EPS together
# - If results are rejected by the verification check because of float noise, raise VERIFY_TOLERANCE

# Small epsilon value for floating point comparisons in geometry:
# - Decides when a segment is vertical, horizontal or a single point
# - Decides when an endpoint lies exactly on a cut line or on the center column of a staircase
EPS = 1e-9
# Tolerance for cut coordinates:
# - Two candidate cut coordinates closer than this are treated as one
# - An endpoint closer than this to a window edge is not an internal cut candidate
COORD_EPS = 1e-6
# Slack used when verifying that a rectangle is empty:
# - The rectangle is shrunk by this amount on every side before testing obstacles against it
# - Boundary touches within this distance are therefore not reported as violations
VERIFY_TOLERANCE = 1e-5
# Percentile of the sorted unique candidate coordinates used as the partition cut:
# - 0.25 is the lower quartile, 0.5 would be the median
# - The lower quartile avoids re-selecting coordinates shared by large collinear clusters
CUT_QUANTILE = 0.25


def validate_vector(v: tuple | list, name: str = "vector") -> None:
    """
    Validate that the input is a tuple or list of two numeric values (int or float).

    Parameters:
    - v (tuple | list): The input vector to validate.
    - name (str): The name of the vector for error messages.
    """
    if not (isinstance(v, (tuple, list)) and len(v) == 2 and all(isinstance(x, (int, float)) for x in v)):
        raise ValueError(f"{name} must be a tuple or list of two numeric values.")


def validate_number(s: int | float, name: str = "scalar") -> None:
    """
    Validate that the input is an int or a float.

    Parameters:
    - s (int | float): The input scalar to validate.
    - name (str): The name of the scalar for error messages.
    """
    if isinstance(s, bool) or not isinstance(s, (int, float)):
        raise ValueError(f"{name} must be a number, got {type(s).__name__}.")


def get_xy(pt: tuple | list | object) -> Tuple[float, float]:
    """
    Accept either an (x,y) tuple/list of two numbers, or an object with .x and .y.
    Returns a clean (x, y) tuple of floats.

    Parameters:
    - pt (tuple | list | object): The point to convert, either as a tuple/list of two numbers or an object with
    .x and .y attributes.
    Returns:
    - Tuple[float, float]: A tuple of floats representing the x and y coordinates of the point.
    """
    if hasattr(pt, 'x') and hasattr(pt, 'y'):
        return float(pt.x), float(pt.y)
    if isinstance(pt, (tuple, list)) and len(pt) == 2 and all(isinstance(c, (int, float)) for c in pt):
        return float(pt[0]), float(pt[1])
    raise ValueError("Point must be a tuple of two numbers or have .x and .y attributes")


def clamp(v: float, lo: float, hi: float) -> float:
    """
    Clamp `v` into the closed interval [lo, hi].

    Parameters:
    - v (float): The value to clamp.
    - lo (float): Lower limit.
    - hi (float): Upper limit.
    Returns:
    - float: `v` limited to [lo, hi].
    """
    return lo if v < lo else hi if v > hi else v


def maximize_quadratic(a: float, b: float, c: float, lo: float, hi: float) -> Tuple[float, float]:
    """
    Maximize f(x) = a*x^2 + b*x + c over the closed interval [lo, hi].

    The maximum is attained at one of the interval ends or at the vertex -b / (2a) when it falls inside.

    Parameters:
    - a (float): Quadratic coefficient.
    - b (float): Linear coefficient.
    - c (float): Constant term.
    - lo (float): Interval start.
    - hi (float): Interval end.
    Returns:
    - Tuple[float, float]: (x, f(x)) at the maximum. The first candidate wins ties.
    """
    candidates = [lo, hi]
    if abs(a) > EPS:
        vertex = -b / (2 * a)
        if lo <= vertex <= hi:
            candidates.append(vertex)

    best_x, best_val = lo, -math.inf
    for x in candidates:
        val = a * x * x + b * x + c
        if val > best_val:
            best_x, best_val = x, val
    return best_x, best_val

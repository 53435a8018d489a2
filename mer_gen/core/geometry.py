import math
from typing import Iterable, Iterator, List, NamedTuple, Tuple

from shapely.geometry import box, LineString, Point as ShapelyPoint

from .rectangle import Rectangle
from .util import EPS, VERIFY_TOLERANCE, clamp, get_xy


class Point(NamedTuple):
    x: float
    y: float


class Segment:
    """
    Represents an obstacle line segment defined by two endpoints.

    Segments are immutable values: every derived quantity (extents, slope, intercept) is computed on demand, and
    splitting or clipping always produces new Segment objects. A segment whose endpoints coincide is a valid point
    obstacle.
    """

    __slots__ = ("_p1", "_p2")

    def __init__(self, p1: Tuple[float, float] | Point, p2: Tuple[float, float] | Point) -> None:
        """
        Initializes a Segment from two endpoints.

        Parameters:
        - p1: First endpoint as a tuple (x, y) or an object with .x and .y.
        - p2: Second endpoint as a tuple (x, y) or an object with .x and .y.
        """
        self._p1 = Point(*get_xy(p1))
        self._p2 = Point(*get_xy(p2))

    @classmethod
    def coerce(cls, obj: "Segment | tuple | list") -> "Segment":
        """
        Returns `obj` if it is already a Segment, otherwise builds one from a pair of points.

        Parameters:
        - obj: A Segment, or a pair ((x1, y1), (x2, y2)) / an object with .p1 and .p2.
        Returns:
        - Segment: The coerced segment.
        """
        if isinstance(obj, Segment):
            return obj
        if hasattr(obj, 'p1') and hasattr(obj, 'p2'):
            return cls(obj.p1, obj.p2)
        if isinstance(obj, (tuple, list)) and len(obj) == 2:
            return cls(obj[0], obj[1])
        raise ValueError("Obstacle must be a Segment, a pair of points or have .p1 and .p2 attributes")

    @property
    def p1(self) -> Point:
        return self._p1

    @property
    def p2(self) -> Point:
        return self._p2

    @property
    def min_x(self) -> float:
        return min(self._p1.x, self._p2.x)

    @property
    def max_x(self) -> float:
        return max(self._p1.x, self._p2.x)

    @property
    def min_y(self) -> float:
        return min(self._p1.y, self._p2.y)

    @property
    def max_y(self) -> float:
        return max(self._p1.y, self._p2.y)

    def is_vertical(self) -> bool:
        return abs(self._p1.x - self._p2.x) < EPS

    def is_horizontal(self) -> bool:
        return abs(self._p1.y - self._p2.y) < EPS

    def is_point(self) -> bool:
        return self.is_vertical() and self.is_horizontal()

    @property
    def slope(self) -> float:
        """
        The slope (m) of the line containing this segment, math.inf for vertical segments.
        """
        if self.is_vertical():
            return math.inf
        return (self._p2.y - self._p1.y) / (self._p2.x - self._p1.x)

    @property
    def intercept(self) -> float:
        """
        The y-intercept (k) of the line y = m*x + k containing this segment, math.nan for vertical segments.
        """
        if self.is_vertical():
            return math.nan
        return self._p1.y - self.slope * self._p1.x

    def get_y(self, x: float) -> float:
        """
        Returns the y coordinate on the supporting line at `x`. The x range of the segment is not checked.

        Parameters:
        - x (float): The x coordinate.
        Returns:
        - float: The y coordinate, or the top endpoint's y for a vertical segment.
        """
        if self.is_vertical():
            return self.max_y
        return self.slope * x + self.intercept

    def get_x(self, y: float) -> float:
        """
        Returns the x coordinate on the supporting line at `y`. The y range of the segment is not checked.

        Parameters:
        - y (float): The y coordinate.
        Returns:
        - float: The x coordinate, or the right endpoint's x for a horizontal segment.
        """
        if self.is_horizontal():
            return self.max_x
        if self.is_vertical():
            return self._p1.x
        return (y - self.intercept) / self.slope

    def _point_at(self, t: float) -> Point:
        # exact endpoints at t = 0 and t = 1
        if t <= 0.0:
            return self._p1
        if t >= 1.0:
            return self._p2
        return Point(self._p1.x + t * (self._p2.x - self._p1.x), self._p1.y + t * (self._p2.y - self._p1.y))

    def split_at_x(self, x: float) -> Tuple["Segment", "Segment"]:
        """
        Splits the segment at the vertical line through `x`.

        The split point lies exactly on the line, so both halves touch it. The caller guarantees that the segment
        straddles `x` (min_x < x < max_x).

        Parameters:
        - x (float): The x coordinate of the cut.
        Returns:
        - Tuple[Segment, Segment]: (left part, right part).
        """
        t = clamp((x - self._p1.x) / (self._p2.x - self._p1.x), 0.0, 1.0)
        cut = Point(x, self._point_at(t).y)
        left, right = (self._p1, self._p2) if self._p1.x <= self._p2.x else (self._p2, self._p1)
        return Segment(left, cut), Segment(cut, right)

    def split_at_y(self, y: float) -> Tuple["Segment", "Segment"]:
        """
        Splits the segment at the horizontal line through `y`.

        The caller guarantees that the segment straddles `y` (min_y < y < max_y).

        Parameters:
        - y (float): The y coordinate of the cut.
        Returns:
        - Tuple[Segment, Segment]: (lower part, upper part).
        """
        t = clamp((y - self._p1.y) / (self._p2.y - self._p1.y), 0.0, 1.0)
        cut = Point(self._point_at(t).x, y)
        low, high = (self._p1, self._p2) if self._p1.y <= self._p2.y else (self._p2, self._p1)
        return Segment(low, cut), Segment(cut, high)

    def clip(self, x_min: float, y_min: float, x_max: float, y_max: float) -> "Segment | None":
        """
        Clips the segment to an axis-aligned box (Liang-Barsky).

        Parameters:
        - x_min, y_min, x_max, y_max (float): The box extents.
        Returns:
        - Segment | None: The part inside the box (self when nothing is cut away), or None when the segment misses
        the box.
        """
        x1, y1 = self._p1
        dx = self._p2.x - x1
        dy = self._p2.y - y1
        t0, t1 = 0.0, 1.0
        for p, q in ((-dx, x1 - x_min), (dx, x_max - x1), (-dy, y1 - y_min), (dy, y_max - y1)):
            if abs(p) < EPS:
                # parallel to this edge
                if q < -EPS:
                    return None
                continue
            t = q / p
            if p < 0:
                t0 = max(t0, t)
            else:
                t1 = min(t1, t)
            if t0 > t1 + EPS:
                return None

        if t0 <= 0.0 and t1 >= 1.0:
            return self
        t1 = max(t0, t1)
        a, b = self._point_at(t0), self._point_at(t1)
        return Segment((clamp(a.x, x_min, x_max), clamp(a.y, y_min, y_max)),
                       (clamp(b.x, x_min, x_max), clamp(b.y, y_min, y_max)))

    def as_tuple(self) -> Tuple[Tuple[float, float], Tuple[float, float]]:
        return tuple(self._p1), tuple(self._p2)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Segment):
            return NotImplemented
        return self._p1 == other._p1 and self._p2 == other._p2

    def __hash__(self) -> int:
        return hash((self._p1, self._p2))

    def __repr__(self) -> str:
        return f"Segment[({self._p1.x:.3f}, {self._p1.y:.3f}) -> ({self._p2.x:.3f}, {self._p2.y:.3f})]"


def segment_intersects_rectangle(segment: Segment, rect: Rectangle, tolerance: float = VERIFY_TOLERANCE) -> bool:
    """
    Checks if a segment reaches the STRICT interior of a rectangle.

    The rectangle is shrunk by `tolerance` on every side first, so touching the boundary (or grazing it by less than
    the tolerance) is not an intersection. Used to verify that a reported empty rectangle is indeed empty.

    Parameters:
    - segment (Segment): The obstacle.
    - rect (Rectangle): The rectangle to test.
    - tolerance (float): Inset applied to the rectangle before testing.
    Returns:
    - bool: True if the segment crosses the interior, False otherwise.
    """
    x_min, y_min = rect.x_min + tolerance, rect.y_min + tolerance
    x_max, y_max = rect.x_max - tolerance, rect.y_max - tolerance
    # degenerate or tiny rectangle has no interior left
    if x_min >= x_max or y_min >= y_max:
        return False

    inner = box(x_min, y_min, x_max, y_max)
    if segment.is_point():
        shape = ShapelyPoint(segment.p1.x, segment.p1.y)
    else:
        shape = LineString([segment.p1, segment.p2])
    return inner.intersects(shape)


def find_violations(rect: Rectangle, obstacles: Iterable[Segment], tolerance: float = VERIFY_TOLERANCE) -> List[Segment]:
    """
    Returns the obstacles that cross the interior of `rect`.

    Parameters:
    - rect (Rectangle): The rectangle to verify.
    - obstacles (Iterable): Obstacles as Segments, point pairs or Rectangles.
    - tolerance (float): Inset applied to the rectangle before testing.
    Returns:
    - List[Segment]: The offending obstacles, empty when the rectangle is empty.
    """
    return [seg for seg in iter_segments(obstacles) if segment_intersects_rectangle(seg, rect, tolerance)]


def rectangle_edges(rect: Rectangle) -> List[Segment]:
    """
    Returns the four edges of a rectangular obstacle, counter-clockwise from the bottom edge.
    """
    corners = rect.corners()
    return [Segment(corners[i], corners[(i + 1) % 4]) for i in range(4)]


def iter_segments(obstacles: Iterable) -> Iterator[Segment]:
    """
    Yields obstacles as Segments. Rectangle obstacles are expanded into their four edges.

    Parameters:
    - obstacles (Iterable): Segments, point pairs, objects with .p1 and .p2, or Rectangles.
    Yields:
    - Segment: One segment per obstacle, four per Rectangle.
    """
    for obj in obstacles:
        if isinstance(obj, Rectangle):
            yield from rectangle_edges(obj)
        else:
            yield Segment.coerce(obj)

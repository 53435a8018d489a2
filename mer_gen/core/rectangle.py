from typing import List, Tuple, Self

from .util import EPS, validate_number, validate_vector


class Rectangle:
    """
    Represents an axis-aligned rectangle by its min/max corners.

    The canonical area is (x_max - x_min) * (y_max - y_min). Zero-width or zero-height rectangles are valid values.
    """

    __slots__ = ("x_min", "y_min", "x_max", "y_max")

    def __init__(self, x_min: float, y_min: float, x_max: float, y_max: float) -> None:
        """
        Initializes a Rectangle from its extents.

        Parameters:
        - x_min: Left edge.
        - y_min: Bottom edge.
        - x_max: Right edge.
        - y_max: Top edge.
        """
        for value, name in ((x_min, "x_min"), (y_min, "y_min"), (x_max, "x_max"), (y_max, "y_max")):
            validate_number(value, name)

        # float noise from splitting may invert an edge by a hair; anything larger is a caller error
        if x_min > x_max + EPS or y_min > y_max + EPS:
            raise ValueError(f"Rectangle extents are inverted: x=({x_min}, {x_max}), y=({y_min}, {y_max})")

        self.x_min = float(x_min)
        self.y_min = float(y_min)
        self.x_max = float(max(x_min, x_max))
        self.y_max = float(max(y_min, y_max))

    @classmethod
    def from_corners(cls, p1: Tuple[float, float], p2: Tuple[float, float]) -> Self:
        """
        Creates a Rectangle spanning two opposite corners given in any order.

        Parameters:
        - p1: First corner as a tuple (x, y).
        - p2: Opposite corner as a tuple (x, y).
        """
        validate_vector(p1, "p1")
        validate_vector(p2, "p2")
        (x1, y1), (x2, y2) = p1, p2
        return cls(min(x1, x2), min(y1, y2), max(x1, x2), max(y1, y2))

    @property
    def width(self) -> float:
        return self.x_max - self.x_min

    @property
    def height(self) -> float:
        return self.y_max - self.y_min

    @property
    def center(self) -> Tuple[float, float]:
        return (self.x_min + self.x_max) / 2, (self.y_min + self.y_max) / 2

    def get_area(self) -> float:
        """
        Returns the area of the rectangle.

        Returns:
        - float: The area of the rectangle.
        """
        return self.width * self.height

    def is_degenerate(self) -> bool:
        return self.width < EPS or self.height < EPS

    def split_x(self, x: float) -> Tuple[Self, Self]:
        """
        Splits the rectangle at the vertical line through `x`.

        Parameters:
        - x: The cut coordinate, expected within [x_min, x_max].
        Returns:
        - Tuple[Rectangle, Rectangle]: (left half, right half).
        """
        return (Rectangle(self.x_min, self.y_min, x, self.y_max),
                Rectangle(x, self.y_min, self.x_max, self.y_max))

    def split_y(self, y: float) -> Tuple[Self, Self]:
        """
        Splits the rectangle at the horizontal line through `y`.

        Parameters:
        - y: The cut coordinate, expected within [y_min, y_max].
        Returns:
        - Tuple[Rectangle, Rectangle]: (bottom half, top half).
        """
        return (Rectangle(self.x_min, self.y_min, self.x_max, y),
                Rectangle(self.x_min, y, self.x_max, self.y_max))

    def contains(self, other: Self, tol: float = EPS) -> bool:
        """
        Checks if `other` lies inside this rectangle, boundaries included.

        Parameters:
        - other: The rectangle to test.
        - tol: Absolute tolerance applied on every side.
        Returns:
        - bool: True if `other` is contained, False otherwise.
        """
        return (other.x_min >= self.x_min - tol and other.x_max <= self.x_max + tol and
                other.y_min >= self.y_min - tol and other.y_max <= self.y_max + tol)

    def corners(self) -> List[Tuple[float, float]]:
        """
        Returns the corners counter-clockwise, starting at (x_min, y_min).
        """
        return [(self.x_min, self.y_min), (self.x_max, self.y_min), (self.x_max, self.y_max), (self.x_min, self.y_max)]

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return self.x_min, self.y_min, self.x_max, self.y_max

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rectangle):
            return NotImplemented
        return self.as_tuple() == other.as_tuple()

    def __hash__(self) -> int:
        return hash(self.as_tuple())

    def __repr__(self) -> str:
        """
        Returns a string representation of the Rectangle object, including its extents and area.

        Returns:
        - str: A string representation of the Rectangle object.
        """
        return (f"Rectangle(x=({self.x_min:.2f}, {self.x_max:.2f}), "
                f"y=({self.y_min:.2f}, {self.y_max:.2f}), area={self.get_area():.2f})")

from enum import Enum
from typing import Iterable, Iterator, List, NamedTuple, Tuple

from .geometry import Point, Segment
from .rectangle import Rectangle
from .util import EPS


class Side(Enum):
    """
    Direction in which a staircase grows away from the center column.
    """
    RIGHT = 1
    LEFT = -1


class StaircaseStep(NamedTuple):
    """
    Open vertical band [y_bot, y_top] available to a rectangle that reaches `offset` away from the center.
    """
    offset: float
    y_top: float
    y_bot: float


def _near_distance(piece: Segment, cx: float, side: Side) -> float:
    """
    Distance from the center column to the closest point of `piece` on the given side.
    """
    d = piece.min_x - cx if side is Side.RIGHT else cx - piece.max_x
    return max(0.0, d)


def _tightening_events(portion: Segment, cx: float, cy: float, side: Side) -> Iterator[Tuple[float, bool, float]]:
    """
    Yields the band tightenings caused by one obstacle portion lying on one side of the center column.

    Each event is (distance, is_top, y). A top event caps y_top at `y`, a bottom event raises y_bot to `y`. Sloped
    portions tighten by their extreme y from their nearest point on, which never lets a rectangle reach them.

    Parameters:
    - portion (Segment): The obstacle clipped to the side's half window.
    - cx, cy (float): The center.
    - side (Side): The side the portion lies on.
    """
    if portion.min_y >= cy - EPS:
        yield _near_distance(portion, cx, side), True, max(portion.min_y, cy)
    elif portion.max_y <= cy + EPS:
        yield _near_distance(portion, cx, side), False, min(portion.max_y, cy)
    else:
        # crosses the center row: each half closes its side of the band down to cy
        lower, upper = portion.split_at_y(cy)
        yield _near_distance(upper, cx, side), True, cy
        yield _near_distance(lower, cx, side), False, cy


def build_staircase(center: Point | Tuple[float, float], obstacles: Iterable[Segment], bounds: Rectangle,
                    side: Side) -> List[StaircaseStep]:
    """
    Builds the monotone staircase of open vertical bands on one side of a vertical cut.

    The sweep starts at the center column with the full band of `bounds`, refined by every obstacle touching the
    column, then walks away from the center. For each group of obstacles sharing a distance it first records the
    band available just before them, then tightens it. A terminal step at the outer bound closes the sequence.

    Parameters:
    - center: The center point (cx, cy); cy must lie within the band of `bounds`.
    - obstacles (Iterable[Segment]): Obstacles inside `bounds`.
    - bounds (Rectangle): The window the staircase lives in.
    - side (Side): Side.RIGHT grows toward +x, Side.LEFT toward -x.
    Returns:
    - List[StaircaseStep]: Steps ordered by increasing offset. The band never grows along the sequence.
    """
    cx, cy = center
    if side is Side.RIGHT:
        half = (cx, bounds.y_min, bounds.x_max, bounds.y_max)
        far = bounds.x_max - cx
    else:
        half = (bounds.x_min, bounds.y_min, cx, bounds.y_max)
        far = cx - bounds.x_min

    y_top, y_bot = bounds.y_max, bounds.y_min
    events = []
    for seg in obstacles:
        portion = seg.clip(*half)
        if portion is None:
            continue
        for dist, is_top, y in _tightening_events(portion, cx, cy, side):
            if dist <= EPS:
                # on the center column: refines the initial band only
                if is_top:
                    y_top = min(y_top, y)
                else:
                    y_bot = max(y_bot, y)
            else:
                events.append((dist, is_top, y))

    steps = [StaircaseStep(0.0, y_top, y_bot)]
    events.sort(key=lambda e: e[0])

    i, n = 0, len(events)
    while i < n and y_top > y_bot:
        dist = events[i][0]
        steps.append(StaircaseStep(dist, y_top, y_bot))
        while i < n and events[i][0] <= dist + EPS:
            _, is_top, y = events[i]
            if is_top:
                y_top = min(y_top, y)
            else:
                y_bot = max(y_bot, y)
            i += 1

    steps.append(StaircaseStep(max(far, 0.0), y_top, y_bot))
    return steps

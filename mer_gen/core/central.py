from typing import Iterable, Tuple

import numpy as np

from .geometry import Point, Segment
from .matrix_search import region_maximum
from .rectangle import Rectangle
from .staircase import Side, build_staircase


def solve_central(center: Point | Tuple[float, float], obstacles: Iterable[Segment], bounds: Rectangle) -> Rectangle:
    """
    Finds the largest empty rectangle inside `bounds` that crosses the vertical line through the center.

    The left and right staircases of the center are paired: a left step L and a right step R span
    x in [cx - L.offset, cx + R.offset] and leave the band [max(L.y_bot, R.y_bot), min(L.y_top, R.y_top)] open.

    The pair matrix itself is not monotone, so it is split by which step supplies each edge of the band. For a left
    step, the right steps whose top binds form a suffix of the right staircase, and so do the ones whose bottom
    binds; both suffixes start later as the left step moves out. That leaves four staircase-shaped regions (top and
    bottom from L, from R, or one from each), and on each of them the area is an inverse Monge product searched with
    region_maximum.

    Parameters:
    - center: The center point (cx, cy) inside `bounds`.
    - obstacles (Iterable[Segment]): Obstacles inside `bounds`.
    - bounds (Rectangle): The window to search.
    Returns:
    - Rectangle: The best crossing rectangle, or a zero-area rectangle at the center when nothing is open.
    """
    cx, cy = center
    obstacles = list(obstacles)
    left = build_staircase(center, obstacles, bounds, Side.LEFT)
    right = build_staircase(center, obstacles, bounds, Side.RIGHT)
    empty = Rectangle(cx, cy, cx, cy)
    if not left or not right:
        return empty

    l_off, l_top, l_bot = (list(v) for v in zip(*left))
    r_off, r_top, r_bot = (list(v) for v in zip(*right))

    # first right step whose top (bottom) is at least as tight as the left step's
    top_from = np.searchsorted(-np.asarray(r_top), -np.asarray(l_top), side="left")
    bot_from = np.searchsorted(np.asarray(r_bot), np.asarray(l_bot), side="left")
    first_both = np.minimum(top_from, bot_from).tolist()
    last_both = np.maximum(top_from, bot_from).tolist()
    top_from, bot_from = top_from.tolist(), bot_from.tolist()

    regions = (
        ([0] * len(left), first_both, lambda i, j: (l_off[i] + r_off[j]) * (l_top[i] - l_bot[i])),
        (last_both, [len(right)] * len(left), lambda i, j: (l_off[i] + r_off[j]) * (r_top[j] - r_bot[j])),
        (top_from, last_both, lambda i, j: (l_off[i] + r_off[j]) * (r_top[j] - l_bot[i])),
        (bot_from, last_both, lambda i, j: (l_off[i] + r_off[j]) * (l_top[i] - r_bot[j])),
    )
    row, col, best = -1, -1, 0.0
    for lo, hi, value_at in regions:
        i, j, val = region_maximum(lo, hi, value_at)
        if val > best:
            row, col, best = i, j, val
    if best <= 0.0:
        return empty

    return Rectangle(cx - l_off[row], max(l_bot[row], r_bot[col]),
                     cx + r_off[col], min(l_top[row], r_top[col]))

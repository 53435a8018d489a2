"""
Maximum Empty Rectangle solver: the largest axis-aligned rectangle inside a bounding box whose interior avoids a set
of obstacle segments.
"""
from .core import (Axis, MerSolver, PartitionStep, Point, Rectangle, Segment, Side, StaircaseStep, build_staircase,
                   find_violations, interval_blocks, iter_segments, matrix_maximum, rectangle_edges, region_maximum,
                   row_maxima, segment_intersects_rectangle, solve_central)


def solve(bounds: Rectangle, obstacles, debug: bool = False) -> Rectangle:
    """
    Convenience wrapper around MerSolver.solve().
    """
    return MerSolver(debug=debug).solve(bounds, obstacles)

import time
from enum import Enum
from typing import Iterable, Iterator, List, NamedTuple, Optional, Tuple

import numpy as np

from .central import solve_central
from .geometry import Point, Segment, find_violations, iter_segments
from .rectangle import Rectangle
from .util import COORD_EPS, CUT_QUANTILE, EPS, clamp, maximize_quadratic


class Axis(Enum):
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"


class Job(NamedTuple):
    """
    One pending partition subproblem.

    A VERTICAL job looks for the best empty rectangle anywhere in `window`. A HORIZONTAL job only needs the best
    rectangle crossing the vertical line x = `inherited_cut`.
    """
    window: Rectangle
    obstacles: Tuple[Segment, ...]
    axis: Axis
    inherited_cut: Optional[float] = None


class PartitionStep(NamedTuple):
    """
    Snapshot emitted after a job has been processed, for step-by-step inspection.
    """
    index: int
    axis: Axis
    window: Rectangle
    obstacle_count: int
    cut: Optional[float]
    action: str
    best_area: float
    best: Rectangle


class MerSolver:
    """
    Maximum Empty Rectangle solver.

    Finds the axis-aligned rectangle of greatest area inside a bounding rectangle whose open interior touches none of
    the obstacle segments. The search is an iterative divide and conquer over an explicit stack of jobs: vertical
    cuts split the window into halves, the rectangles crossing a vertical cut are handled by horizontal cuts, and the
    rectangles crossing both cuts by the central staircase optimizer.
    """

    def __init__(self, debug: bool | int = False) -> None:
        """
        Initialize a solver.

        Parameters:
          debug (bool | int): print progress, timing and a verification of the result.
        """
        if not isinstance(debug, (bool, int)):
            raise ValueError("debug must be a boolean or integer")
        self.debug = bool(debug)

        self.best = None  # best rectangle found so far
        self.best_area = 0.0
        self.jobs_processed = 0
        self.central_calls = 0
        self.elapsed_ms = 0.0

    def solve(self, bounds: Rectangle, obstacles: Iterable[Segment]) -> Rectangle:
        """
        Computes the maximum empty rectangle.

        Parameters:
        - bounds (Rectangle): The region to search.
        - obstacles (Iterable[Segment]): Obstacle segments, pairs of points or Rectangles. Zero-length segments are
        point obstacles, a Rectangle blocks along its four edges.
        Returns:
        - Rectangle: The largest rectangle inside `bounds` whose interior avoids every obstacle.
        """
        obstacles = list(obstacles)
        for _ in self.steps(bounds, obstacles):
            pass

        if self.debug:
            print("--------------------------------------------------------------")
            print(f"Processing completed in {self.elapsed_ms:.5f} ms:")
            print(f"Jobs processed: {self.jobs_processed}, central searches: {self.central_calls}.")
            print(f"Best rectangle: {self.best}")
            violations = find_violations(self.best, obstacles)
            if violations:
                print(f"WARNING: {len(violations)} obstacle(s) cross the result: {violations}")
        return self.best

    def steps(self, bounds: Rectangle, obstacles: Iterable[Segment]) -> Iterator[PartitionStep]:
        """
        Runs the solver one job at a time.

        Execution is suspended after every processed job and a PartitionStep describing it is yielded. Exhausting the
        iterator leaves the final answer in self.best, exactly as solve() does.

        Parameters:
        - bounds (Rectangle): The region to search.
        - obstacles (Iterable[Segment]): Obstacle segments, pairs of points or Rectangles.
        Yields:
        - PartitionStep: The processed job, the action taken and the best rectangle so far.
        """
        t0 = time.time()
        self.elapsed_ms = 0.0
        self.best = Rectangle(bounds.x_min, bounds.y_min, bounds.x_min, bounds.y_min)
        self.best_area = 0.0
        self.jobs_processed = 0
        self.central_calls = 0

        prepared = self._prepare(bounds, obstacles)
        if self.debug:
            print(f"Solving {bounds} with {len(prepared)} obstacle(s) inside the bounds.")

        stack: List[Job] = [Job(bounds, prepared, Axis.VERTICAL)]
        self.elapsed_ms += (time.time() - t0) * 1000
        while stack:
            t0 = time.time()
            job = stack.pop()
            action, cut = self._process(job, stack)
            self.jobs_processed += 1
            # time spent by the consumer between steps is not counted
            self.elapsed_ms += (time.time() - t0) * 1000
            yield PartitionStep(self.jobs_processed, job.axis, job.window, len(job.obstacles), cut, action,
                                self.best_area, self.best)

    @staticmethod
    def _prepare(bounds: Rectangle, obstacles: Iterable[Segment]) -> Tuple[Segment, ...]:
        """
        Coerces obstacles to Segments and clips them to the bounds, dropping those entirely outside. Rectangle
        obstacles contribute their four edges.
        """
        prepared = []
        for seg in iter_segments(obstacles):
            clipped = seg.clip(bounds.x_min, bounds.y_min, bounds.x_max, bounds.y_max)
            if clipped is not None:
                prepared.append(clipped)
        return tuple(prepared)

    def _offer(self, rect: Rectangle) -> None:
        """
        Replaces the best rectangle if `rect` is strictly larger.
        """
        area = rect.get_area()
        if area > self.best_area:
            self.best, self.best_area = rect, area

    def _process(self, job: Job, stack: List[Job]) -> Tuple[str, Optional[float]]:
        """
        Resolves or splits one job, pushing any subproblems onto `stack`.

        Parameters:
        - job (Job): The job to process.
        - stack (List[Job]): The work stack.
        Returns:
        - Tuple[str, Optional[float]]: The action taken and the cut coordinate, if any.
        """
        window, obstacles = job.window, job.obstacles
        vertical = job.axis is Axis.VERTICAL

        if not obstacles:
            self._offer(window)
            return "empty", None

        if len(obstacles) == 1:
            for rect in self._single_obstacle_candidates(window, obstacles[0]):
                self._offer(rect)
            return "single", None

        if window.is_degenerate():
            return "degenerate", None

        action = "split"
        coords = self._internal_coords(window, obstacles, vertical)
        if coords.size > 0:
            cut = float(np.quantile(coords, CUT_QUANTILE, method="lower"))
        elif self._internal_coords(window, obstacles, not vertical).size > 0:
            # every obstacle spans the window along this axis or lies on its edges
            if vertical:
                stack.append(Job(window, obstacles, Axis.HORIZONTAL, window.center[0]))
                return "flip", None
            self._central(Point(job.inherited_cut, window.center[1]), job)
            return "central", None
        elif all(self._on_edge(window, seg) for seg in obstacles):
            self._offer(window)
            return "empty", None
        else:
            # only corner-to-corner diagonals cross the window; halving them creates inner endpoints
            action = "midline"
            cut = window.center[0] if vertical else window.center[1]

        if vertical:
            low, high, progressed = self._split(obstacles, cut, vertical=True)
            low_window, high_window = window.split_x(cut)
        else:
            low, high, progressed = self._split(obstacles, cut, vertical=False)
            low_window, high_window = window.split_y(cut)

        if self.debug:
            print(f"[{job.axis.value}] window={window} obstacles={len(obstacles)} cut={cut:.6g} "
                  f"-> {len(low)} / {len(high)}")

        if not progressed:
            # all obstacles lie on the cut line, so both halves are open
            self._offer(low_window)
            self._offer(high_window)
            if vertical:
                stack.append(Job(window, obstacles, Axis.HORIZONTAL, cut))
            else:
                self._central(Point(job.inherited_cut, cut), job)
            return "no_progress", cut

        if vertical:
            stack.append(Job(window, obstacles, Axis.HORIZONTAL, cut))
            stack.append(Job(high_window, high, Axis.VERTICAL))
            stack.append(Job(low_window, low, Axis.VERTICAL))
        else:
            stack.append(Job(high_window, high, Axis.HORIZONTAL, job.inherited_cut))
            stack.append(Job(low_window, low, Axis.HORIZONTAL, job.inherited_cut))
            self._central(Point(job.inherited_cut, cut), job)
        return action, cut

    def _central(self, center: Point, job: Job) -> None:
        self.central_calls += 1
        self._offer(solve_central(center, job.obstacles, job.window))

    @staticmethod
    def _internal_coords(window: Rectangle, obstacles: Tuple[Segment, ...], vertical: bool) -> np.ndarray:
        """
        Returns the sorted, de-duplicated obstacle endpoint coordinates strictly inside the window, x coordinates
        when `vertical` and y coordinates otherwise.
        """
        if vertical:
            lo, hi = window.x_min, window.x_max
            values = np.array([c for seg in obstacles for c in (seg.p1.x, seg.p2.x)], dtype=float)
        else:
            lo, hi = window.y_min, window.y_max
            values = np.array([c for seg in obstacles for c in (seg.p1.y, seg.p2.y)], dtype=float)

        values = np.unique(values[(values > lo + COORD_EPS) & (values < hi - COORD_EPS)])
        if values.size < 2:
            return values
        return values[np.concatenate(([True], np.diff(values) > COORD_EPS))]

    @staticmethod
    def _on_edge(window: Rectangle, seg: Segment) -> bool:
        """
        Checks if `seg` lies along one of the window edges, where it cannot cross the interior.
        """
        return (seg.max_x <= window.x_min + COORD_EPS or seg.min_x >= window.x_max - COORD_EPS or
                seg.max_y <= window.y_min + COORD_EPS or seg.min_y >= window.y_max - COORD_EPS)

    @staticmethod
    def _split(obstacles: Tuple[Segment, ...], cut: float,
               vertical: bool) -> Tuple[Tuple[Segment, ...], Tuple[Segment, ...], bool]:
        """
        Distributes obstacles to both sides of a cut line.

        Obstacles on one side go to that side, obstacles lying on the cut go to both, and obstacles straddling the
        cut are split at the exact intersection into two new segments.

        Parameters:
        - obstacles (Tuple[Segment, ...]): The obstacles to distribute.
        - cut (float): The cut coordinate.
        - vertical (bool): True for a cut x = cut, False for y = cut.
        Returns:
        - Tuple: (low side, high side, progressed). `progressed` is False when every obstacle went to both sides.
        """
        low, high = [], []
        on_cut = 0
        for seg in obstacles:
            seg_min, seg_max = (seg.min_x, seg.max_x) if vertical else (seg.min_y, seg.max_y)
            if seg_max <= cut + EPS:
                low.append(seg)
                if seg_min >= cut - EPS:
                    high.append(seg)
                    on_cut += 1
            elif seg_min >= cut - EPS:
                high.append(seg)
            else:
                a, b = seg.split_at_x(cut) if vertical else seg.split_at_y(cut)
                low.append(a)
                high.append(b)
        return tuple(low), tuple(high), on_cut < len(obstacles)

    @staticmethod
    def _single_obstacle_candidates(window: Rectangle, seg: Segment) -> List[Rectangle]:
        """
        Returns the maximal empty rectangles of a window holding exactly one obstacle.

        The four strips beside the obstacle's bounding box are always candidates. A sloped obstacle also leaves two
        window corners from which a rectangle can reach up to the segment itself; their size is a quadratic in the
        x coordinate of the touching point and is maximized exactly.

        Parameters:
        - window (Rectangle): The job window.
        - seg (Segment): The obstacle inside it.
        Returns:
        - List[Rectangle]: Candidate rectangles.
        """
        x0, y0, x1, y1 = window.as_tuple()
        min_x, max_x = clamp(seg.min_x, x0, x1), clamp(seg.max_x, x0, x1)
        min_y, max_y = clamp(seg.min_y, y0, y1), clamp(seg.max_y, y0, y1)
        candidates = [
            Rectangle(x0, y0, min_x, y1),
            Rectangle(max_x, y0, x1, y1),
            Rectangle(x0, y0, x1, min_y),
            Rectangle(x0, max_y, x1, y1),
        ]
        if seg.is_vertical() or seg.is_horizontal():
            return candidates

        m, k = seg.slope, seg.intercept
        # (corner x, corner y, x direction, y direction) of the corners facing the segment
        if m < 0:
            corners = ((x0, y0, 1, 1), (x1, y1, -1, -1))
        else:
            corners = ((x0, y1, 1, -1), (x1, y0, -1, 1))
        for ax, ay, sx, sy in corners:
            # area(x) = sx*sy * (x - ax) * (m*x + k - ay)
            g = sx * sy
            x, area = maximize_quadratic(g * m, g * (k - ay - m * ax), -g * ax * (k - ay), min_x, max_x)
            if area <= 0.0:
                continue
            # interpolate along the segment so the corner sits on it even for steep slopes
            t = (x - seg.p1.x) / (seg.p2.x - seg.p1.x)
            y = clamp(seg.p1.y + t * (seg.p2.y - seg.p1.y), y0, y1)
            candidates.append(Rectangle.from_corners((ax, ay), (x, y)))
        return candidates

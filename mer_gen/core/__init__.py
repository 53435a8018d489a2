from .central import solve_central
from .geometry import Point, Segment, find_violations, iter_segments, rectangle_edges, segment_intersects_rectangle
from .matrix_search import interval_blocks, matrix_maximum, region_maximum, row_maxima
from .rectangle import Rectangle
from .solver import Axis, Job, MerSolver, PartitionStep
from .staircase import Side, StaircaseStep, build_staircase

from typing import Callable, Iterator, List, Sequence, Tuple


def row_maxima(rows: int, cols: int, value_at: Callable[[int, int], float]) -> List[int]:
    """
    Finds the maximizing column of every row of an implicit totally monotone matrix.

    Divide and conquer over row ranges with an explicit stack: the middle row of a range is scanned linearly inside
    its column window, then the rows above it only need the columns up to that best column and the rows below only
    the columns from it onward. This takes O((rows + cols) log rows) evaluations instead of rows * cols.

    Parameters:
    - rows (int): Number of rows.
    - cols (int): Number of columns.
    - value_at (Callable[[int, int], float]): Returns the matrix entry at (row, col).
    Returns:
    - List[int]: For each row, the column index of its maximum (first occurrence on ties), or -1 for every row when
    the matrix has no columns.
    """
    if cols <= 0:
        return [-1] * max(rows, 0)

    best = [0] * rows
    # (first row, end row exclusive, first column, last column)
    stack: List[Tuple[int, int, int, int]] = [(0, rows, 0, cols - 1)]
    while stack:
        lo, hi, c_min, c_max = stack.pop()
        if lo >= hi:
            continue

        mid = lo + (hi - lo) // 2
        best_col, best_val = c_min, value_at(mid, c_min)
        for c in range(c_min + 1, c_max + 1):
            val = value_at(mid, c)
            if val > best_val:
                best_col, best_val = c, val
        best[mid] = best_col

        stack.append((mid + 1, hi, best_col, c_max))
        stack.append((lo, mid, c_min, best_col))

    return best


def matrix_maximum(rows: int, cols: int, value_at: Callable[[int, int], float]) -> Tuple[int, int, float]:
    """
    Returns the largest entry of an implicit totally monotone matrix.

    Parameters:
    - rows (int): Number of rows.
    - cols (int): Number of columns.
    - value_at (Callable[[int, int], float]): Returns the matrix entry at (row, col).
    Returns:
    - Tuple[int, int, float]: (row, col, value) of the maximum, or (-1, -1, -inf) for an empty matrix.
    """
    best = (-1, -1, float('-inf'))
    if rows <= 0 or cols <= 0:
        return best
    for row, col in enumerate(row_maxima(rows, cols, value_at)):
        val = value_at(row, col)
        if val > best[2]:
            best = (row, col, val)
    return best


def interval_blocks(lo: Sequence[int], hi: Sequence[int]) -> Iterator[Tuple[int, int, int, int]]:
    """
    Partitions a staircase-shaped region of a matrix into full rectangular blocks.

    Row i of the region holds the columns lo[i] <= col < hi[i]. Both bounds must be non-decreasing down the rows.
    Each block is split off around the middle row of a row range, so the region is covered by O(rows) blocks whose
    column widths add up to O((rows + cols) log rows).

    Parameters:
    - lo (Sequence[int]): First column of every row.
    - hi (Sequence[int]): End column (exclusive) of every row.
    Yields:
    - Tuple[int, int, int, int]: (first row, end row exclusive, first column, end column exclusive) of each block.
    """
    general, prefix, suffix = 0, 1, 2
    # (kind, first row, end row, first column, end column); every row is clipped to the column window
    stack: List[Tuple[int, int, int, int, int]] = [(general, 0, len(lo), 0, max(hi, default=0))]
    while stack:
        kind, r0, r1, c0, c1 = stack.pop()
        if r0 >= r1 or c0 >= c1:
            continue
        mid = r0 + (r1 - r0) // 2

        if kind == prefix:
            # every row starts at c0
            end = min(hi[mid], c1)
            if end > c0:
                yield mid, r1, c0, end
            stack.append((prefix, r0, mid, c0, end))
            stack.append((prefix, mid + 1, r1, max(end, c0), c1))
        elif kind == suffix:
            # every row runs to c1
            start = max(lo[mid], c0)
            if start < c1:
                yield r0, mid + 1, start, c1
            stack.append((suffix, r0, mid, c0, min(start, c1)))
            stack.append((suffix, mid + 1, r1, start, c1))
        else:
            start, end = max(lo[mid], c0), min(hi[mid], c1)
            if start >= end:
                stack.append((general, r0, mid, c0, end))
                stack.append((general, mid + 1, r1, start, c1))
                continue
            yield mid, mid + 1, start, end
            stack.append((general, r0, mid, c0, start))
            stack.append((prefix, r0, mid, start, end))
            stack.append((suffix, mid + 1, r1, start, end))
            stack.append((general, mid + 1, r1, end, c1))


def region_maximum(lo: Sequence[int], hi: Sequence[int],
                   value_at: Callable[[int, int], float]) -> Tuple[int, int, float]:
    """
    Returns the largest entry of an inverse Monge matrix restricted to a staircase-shaped region.

    Inverse Monge means value_at(i, j) + value_at(i', j') <= value_at(i, j') + value_at(i', j) for i < i', j < j',
    so row maxima move left going down. Every full block of the region is searched with matrix_maximum on its
    columns in reverse order, which turns it into the monotone case row_maxima expects.

    Parameters:
    - lo (Sequence[int]): First column of every row, non-decreasing.
    - hi (Sequence[int]): End column (exclusive) of every row, non-decreasing.
    - value_at (Callable[[int, int], float]): Returns the matrix entry at (row, col).
    Returns:
    - Tuple[int, int, float]: (row, col, value) of the maximum, or (-1, -1, -inf) for an empty region.
    """
    best = (-1, -1, float('-inf'))
    for r0, r1, c0, c1 in interval_blocks(lo, hi):
        row, col, val = matrix_maximum(r1 - r0, c1 - c0, lambda r, c: value_at(r0 + r, c1 - 1 - c))
        if val > best[2]:
            best = (r0 + row, c1 - 1 - col, val)
    return best

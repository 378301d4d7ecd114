"""
Wire Master - Coverage Path Builder

Builds a path that visits every cell of an R x C grid exactly once, moving
only between orthogonal neighbours. Several strategies are available; the
generator picks one per attempt.

Coordinates are (row, col) tuples, 0-indexed.
"""

import logging
from enum import Enum
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from .random_source import SeededRandom

logger = logging.getLogger(__name__)

Coordinate = Tuple[int, int]


class PathStrategy(str, Enum):
    ZIGZAG = "zigzag"
    SPIRAL = "spiral"
    SNAKE = "snake"


# ============================================
# GRID HELPERS
# ============================================

DIRECTION_VECTORS = [
    (-1, 0),  # up
    (1, 0),   # down
    (0, -1),  # left
    (0, 1),   # right
]


def in_bounds(cell: Coordinate, rows: int, cols: int) -> bool:
    """Checks that the cell is inside the grid."""
    return 0 <= cell[0] < rows and 0 <= cell[1] < cols


def is_adjacent(a: Coordinate, b: Coordinate) -> bool:
    """Manhattan distance of exactly 1."""
    return abs(a[0] - b[0]) + abs(a[1] - b[1]) == 1


def neighbors(cell: Coordinate, rows: int, cols: int) -> List[Coordinate]:
    """Orthogonal neighbours inside the grid (up, down, left, right)."""
    result = []
    for dr, dc in DIRECTION_VECTORS:
        nxt = (cell[0] + dr, cell[1] + dc)
        if in_bounds(nxt, rows, cols):
            result.append(nxt)
    return result


def is_covering_path(path: Sequence[Coordinate], rows: int, cols: int) -> bool:
    """Every cell exactly once, consecutive cells adjacent."""
    if len(path) != rows * cols:
        return False
    if len(set(path)) != len(path):
        return False
    if not all(in_bounds(cell, rows, cols) for cell in path):
        return False
    return all(is_adjacent(path[i], path[i + 1]) for i in range(len(path) - 1))


def _mirror(
    path: List[Coordinate],
    rows: int,
    cols: int,
    flip_rows: bool,
    flip_cols: bool,
) -> List[Coordinate]:
    if not flip_rows and not flip_cols:
        return path
    return [
        (rows - 1 - r if flip_rows else r, cols - 1 - c if flip_cols else c)
        for r, c in path
    ]


# ============================================
# ZIGZAG
# ============================================

def zigzag_path(rows: int, cols: int) -> List[Coordinate]:
    """Plain boustrophedon from the top-left corner. Always complete."""
    path = []
    for row in range(rows):
        col_range = range(cols) if row % 2 == 0 else range(cols - 1, -1, -1)
        path.extend((row, col) for col in col_range)
    return path


def build_zigzag(rows: int, cols: int, rng: SeededRandom) -> List[Coordinate]:
    """
    Row-by-row or column-by-column sweep with alternating direction.

    Start corner, sweep axis and alternation phase are drawn independently.
    """
    start_from_top = rng.chance(0.5)
    start_from_left = rng.chance(0.5)
    horizontal = rng.chance(0.5)
    reverse_zigzag = rng.chance(0.5)

    path: List[Coordinate] = []

    if horizontal:
        for i in range(rows):
            row = i if start_from_top else rows - 1 - i
            should_reverse = (i % 2 == 1) if reverse_zigzag else (i % 2 == 0)
            going_right = not should_reverse if start_from_left else should_reverse
            col_range = range(cols) if going_right else range(cols - 1, -1, -1)
            path.extend((row, col) for col in col_range)
    else:
        for i in range(cols):
            col = i if start_from_left else cols - 1 - i
            should_reverse = (i % 2 == 1) if reverse_zigzag else (i % 2 == 0)
            going_down = not should_reverse if start_from_top else should_reverse
            row_range = range(rows) if going_down else range(rows - 1, -1, -1)
            path.extend((row, col) for row in row_range)

    return path


# ============================================
# SPIRAL
# ============================================

def _inward_spiral(rows: int, cols: int) -> List[Coordinate]:
    path = []
    top, bottom, left, right = 0, rows - 1, 0, cols - 1

    while top <= bottom and left <= right:
        for col in range(left, right + 1):
            path.append((top, col))
        top += 1

        for row in range(top, bottom + 1):
            path.append((row, right))
        right -= 1

        if top <= bottom:
            for col in range(right, left - 1, -1):
                path.append((bottom, col))
            bottom -= 1

        if left <= right:
            for row in range(bottom, top - 1, -1):
                path.append((row, left))
            left += 1

    return path


def build_spiral(rows: int, cols: int, rng: SeededRandom) -> List[Coordinate]:
    """Concentric rings, walked inward or outward from a random corner."""
    inward = rng.chance(0.5)
    flip_rows = rng.chance(0.5)
    flip_cols = rng.chance(0.5)

    path = _mirror(_inward_spiral(rows, cols), rows, cols, flip_rows, flip_cols)
    if not inward:
        path.reverse()
    return path


# ============================================
# SNAKE
# ============================================

def build_snake(rows: int, cols: int, rng: SeededRandom) -> List[Coordinate]:
    """
    Bands of k rows (or columns), each fully swept before the next one.

    Inside a band the sweep alternates direction per row. When the band is
    an odd number of cells wide it may instead be swept column by column,
    which still leaves it on its far edge at the bottom row, next to the
    following band.
    """
    horizontal = rng.chance(0.5)
    frame_rows, frame_cols = (rows, cols) if horizontal else (cols, rows)
    band = rng.next_int(2, max(2, frame_rows // 2))
    side_left = rng.chance(0.5)
    from_top = rng.chance(0.5)

    frame: List[Coordinate] = []
    top = 0

    while top < frame_rows:
        bottom = min(top + band, frame_rows)
        columnar = frame_cols % 2 == 1 and rng.chance(0.5)

        if columnar:
            col_order = range(frame_cols) if side_left else range(frame_cols - 1, -1, -1)
            for i, col in enumerate(col_order):
                row_order = range(top, bottom) if i % 2 == 0 else range(bottom - 1, top - 1, -1)
                frame.extend((row, col) for row in row_order)
            side_left = not side_left
        else:
            going_right = side_left
            for row in range(top, bottom):
                col_order = range(frame_cols) if going_right else range(frame_cols - 1, -1, -1)
                frame.extend((row, col) for col in col_order)
                going_right = not going_right
            side_left = going_right

        top = bottom

    frame = _mirror(frame, frame_rows, frame_cols, not from_top, False)
    if horizontal:
        return frame
    return [(c, r) for r, c in frame]


# ============================================
# STRATEGY DISPATCH
# ============================================

PathBuilder = Callable[[int, int, SeededRandom], List[Coordinate]]

PATH_BUILDERS: Dict[PathStrategy, PathBuilder] = {
    PathStrategy.ZIGZAG: build_zigzag,
    PathStrategy.SPIRAL: build_spiral,
    PathStrategy.SNAKE: build_snake,
}


def build_coverage_path(
    rows: int,
    cols: int,
    rng: SeededRandom,
    strategy: Optional[PathStrategy] = None,
) -> Tuple[PathStrategy, List[Coordinate]]:
    """
    Builds a covering path with the given (or a uniformly drawn) strategy.

    Repeats are dropped; if the result still isn't a covering path the plain
    zigzag is returned instead.
    """
    if strategy is None:
        strategies = list(PATH_BUILDERS)
        strategy = strategies[rng.next_int(0, len(strategies) - 1)]

    raw_path = PATH_BUILDERS[strategy](rows, cols, rng)

    unique_path: List[Coordinate] = []
    seen = set()
    for cell in raw_path:
        if cell not in seen:
            seen.add(cell)
            unique_path.append(cell)

    if not is_covering_path(unique_path, rows, cols):
        logger.warning(
            "[Paths] %s path incomplete: %d raw, %d unique, expected %d. Falling back to zigzag.",
            strategy.value, len(raw_path), len(unique_path), rows * cols,
        )
        return PathStrategy.ZIGZAG, zigzag_path(rows, cols)

    return strategy, unique_path

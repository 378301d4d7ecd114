"""
Wire Master - Path Partitioner

Splits one covering path into contiguous segments, one per wire.
"""

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from .errors import PartitionInfeasible
from .paths import Coordinate
from .random_source import SeededRandom

ABSOLUTE_MIN_SEGMENT = 4
MIN_SEGMENT_RATIO = 0.5
MAX_SEGMENT_RATIO = 1.8


@dataclass(frozen=True)
class Segment:
    """A slice of the covering path. `offset` is its global index in the path."""
    wire_index: int
    offset: int
    cells: Tuple[Coordinate, ...]

    def __len__(self) -> int:
        return len(self.cells)


def segment_size_bounds(total_cells: int, segment_count: int) -> Tuple[int, int]:
    """(min, max) segment size for a path of `total_cells` split `segment_count` ways."""
    avg_size = total_cells // segment_count
    min_size = max(ABSOLUTE_MIN_SEGMENT, int(avg_size * MIN_SEGMENT_RATIO))
    max_size = int(avg_size * MAX_SEGMENT_RATIO)
    return min_size, max_size


def is_partition_feasible(total_cells: int, segment_count: int) -> bool:
    if segment_count < 1:
        return False
    min_size, _ = segment_size_bounds(total_cells, segment_count)
    return total_cells >= segment_count * min_size


def partition_path(
    path: Sequence[Coordinate],
    segment_count: int,
    rng: SeededRandom,
) -> List[Segment]:
    """
    Splits `path` into `segment_count` contiguous segments.

    Every segment but the last gets a random size from the range that still
    leaves room for the remaining segments; the last one takes the rest.

    Raises:
        PartitionInfeasible: the path is too short for the segment count.
    """
    total_cells = len(path)
    if segment_count < 1:
        raise PartitionInfeasible(
            f"Segment count must be positive, got {segment_count}",
            observed=segment_count,
            expected=">= 1",
        )

    min_size, max_size = segment_size_bounds(total_cells, segment_count)

    if not is_partition_feasible(total_cells, segment_count):
        raise PartitionInfeasible(
            f"Cannot partition {total_cells} cells into {segment_count} segments with min size {min_size}",
            observed=total_cells,
            expected=segment_count * min_size,
        )

    segments: List[Segment] = []
    start_idx = 0

    for i in range(segment_count - 1):
        remaining_cells = total_cells - start_idx
        remaining_segments = segment_count - i

        max_possible = remaining_cells - (remaining_segments - 1) * min_size
        upper = min(max_possible, max_size)
        if upper < min_size:
            raise PartitionInfeasible(
                f"Invalid segment range for segment {i}: max {upper} < min {min_size}",
                observed=upper,
                expected=min_size,
            )

        size = min_size if upper == min_size else rng.next_int(min_size, upper)
        segments.append(Segment(i, start_idx, tuple(path[start_idx:start_idx + size])))
        start_idx += size

    last = tuple(path[start_idx:])
    if len(last) < min_size:
        raise PartitionInfeasible(
            f"Last segment too small: {len(last)} < {min_size}",
            observed=len(last),
            expected=min_size,
        )
    segments.append(Segment(segment_count - 1, start_idx, last))

    return segments

"""
Wire Master - Wire Extractor

Turns path segments into colored wires with player-visible ports.
"""

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from .errors import DuplicateColor, WireTooShort
from .partition import Segment
from .paths import Coordinate
from .random_source import SeededRandom


# ============================================
# CONSTANTS
# ============================================

WIRE_COLORS = {
    "red": "#ff1744",
    "blue": "#00e5ff",
    "green": "#00ff41",
    "yellow": "#ffea00",
    "orange": "#ff6d00",
    "purple": "#d500f9",
    "pink": "#ff1493",
    "cyan": "#00ffff",
    "lime": "#c6ff00",
    "brown": "#8b4513",
    "magenta": "#ff00ff",
    "teal": "#00cec9",
    "indigo": "#3d5afe",
    "violet": "#9c27b0",
    "coral": "#ff6f61",
    "turquoise": "#1de9b6",
    "gold": "#ffd700",
    "crimson": "#dc143c",
    "navy": "#4169e1",
    "salmon": "#ff9e80",
}

PALETTE: Tuple[str, ...] = tuple(WIRE_COLORS)

DEFAULT_FLIP_CHANCE = 0.25


@dataclass(frozen=True)
class Wire:
    color: str
    start: Coordinate
    end: Coordinate
    solution_path: Tuple[Coordinate, ...]


def select_colors(count: int, rng: SeededRandom) -> List[str]:
    """Picks `count` distinct palette colors."""
    if count > len(PALETTE):
        raise DuplicateColor(
            f"Cannot select {count} unique colors, only {len(PALETTE)} available",
            observed=len(PALETTE),
            expected=count,
        )
    if count <= 0:
        raise ValueError(f"Invalid color count: {count}")
    return rng.shuffle(PALETTE)[:count]


def extract_wires(
    segments: Sequence[Segment],
    rng: SeededRandom,
    flip_chance: float = DEFAULT_FLIP_CHANCE,
) -> List[Wire]:
    """
    Builds one wire per segment.

    Ports are always the two ends of the segment: the player can only move
    between neighbouring cells, so an interior port would leave part of the
    wire unreachable. With `flip_chance` the start and end are swapped (and
    the solution path reversed) for variety; the cells stay the same.
    """
    ordered = sorted(segments, key=lambda s: s.offset)

    # Shuffle once more so color order doesn't follow path order
    colors = rng.shuffle(select_colors(len(ordered), rng))

    wires: List[Wire] = []
    for segment, color in zip(ordered, colors):
        cells = segment.cells
        if len(cells) < 2:
            raise WireTooShort(
                f"Wire {segment.wire_index} ({color}) has only {len(cells)} cells",
                observed=len(cells),
                expected=">= 2",
            )

        start, end = cells[0], cells[-1]
        if rng.chance(flip_chance):
            wires.append(Wire(color, end, start, tuple(reversed(cells))))
        else:
            wires.append(Wire(color, start, end, tuple(cells)))

    return wires

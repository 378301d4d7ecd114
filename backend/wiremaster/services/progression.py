"""
Wire Master - Level Progression

Maps a level number to the generator config the game uses for it.
"""

import math
from typing import Tuple

from ..schemas import Difficulty, GeneratorConfig


# (last level, grid size). Each band is twice as long as the previous one.
GRID_SIZE_BANDS: Tuple[Tuple[int, int], ...] = (
    (2, 2),
    (6, 3),
    (14, 4),
    (30, 5),
    (62, 6),
    (126, 7),
    (254, 8),
)
MAX_GRID_SIZE = 9


def _check_level(level: int) -> None:
    if level < 1:
        raise ValueError(f"Level number must be >= 1, got {level}")


def get_difficulty_for_level(level: int) -> Difficulty:
    """Difficulty tag for a level."""
    _check_level(level)
    if level <= 100:
        if level <= 30:
            return Difficulty.EASY
        if level <= 70:
            return Difficulty.MEDIUM
        return Difficulty.HARD
    if level <= 200:
        if level <= 150:
            return Difficulty.MEDIUM
        return Difficulty.HARD
    if level <= 250:
        return Difficulty.HARD
    return Difficulty.EXPERT


def get_grid_size(level: int) -> int:
    """Side length of the (square) grid for a level."""
    _check_level(level)
    for last_level, size in GRID_SIZE_BANDS:
        if level <= last_level:
            return size
    return MAX_GRID_SIZE


def get_wire_count(grid_size: int) -> int:
    """One wire per two rows, rounded up."""
    return math.ceil(grid_size / 2)


def get_generator_config(level: int) -> GeneratorConfig:
    size = get_grid_size(level)
    return GeneratorConfig(
        grid_rows=size,
        grid_cols=size,
        wire_count=get_wire_count(size),
        difficulty=get_difficulty_for_level(level),
    )

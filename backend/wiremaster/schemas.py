"""
Wire Master - Pydantic Schemas

All validation schemas in one file.
"""

from enum import Enum
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .config import settings
from .services.wires import PALETTE


# ============================================
# GRID
# ============================================

class Coordinate(BaseModel):
    """Grid cell, 0-indexed."""
    model_config = ConfigDict(frozen=True)

    row: int
    col: int

    @classmethod
    def from_tuple(cls, cell: Tuple[int, int]) -> "Coordinate":
        return cls(row=cell[0], col=cell[1])

    def as_tuple(self) -> Tuple[int, int]:
        return (self.row, self.col)


class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
    EXPERT = "expert"


# ============================================
# GENERATOR
# ============================================

class GeneratorConfig(BaseModel):
    """
    Generator input.

    Grid sides are capped by GENERATOR_MAX_GRID_SIZE. `wire_count` is only
    bounded by the palette here. A count too large for the grid is accepted
    and yields the fallback level.
    """
    model_config = ConfigDict(frozen=True)

    grid_rows: int = Field(ge=2, le=settings.GENERATOR_MAX_GRID_SIZE)
    grid_cols: int = Field(ge=2, le=settings.GENERATOR_MAX_GRID_SIZE)
    wire_count: int = Field(ge=1, le=len(PALETTE))
    difficulty: Difficulty = Difficulty.EASY


class WirePorts(BaseModel):
    """Player-visible part of a wire."""
    model_config = ConfigDict(frozen=True)

    color: str
    start: Coordinate
    end: Coordinate


class LevelData(BaseModel):
    """
    Generated level.

    `solution[i]` is the full path of `wires[i]`, start to end. For a
    non-fallback level the paths cover the whole grid.
    """
    model_config = ConfigDict(frozen=True)

    id: int
    seed: int
    config: GeneratorConfig
    wires: Tuple[WirePorts, ...]
    solution: Tuple[Tuple[Coordinate, ...], ...]
    strategy: Optional[str] = None
    attempts: int = 1
    fallback: bool = False


# ============================================
# API
# ============================================

class GenerateRequest(BaseModel):
    """Explicit generation request."""
    config: GeneratorConfig
    level_number: int = Field(ge=1)


class HintResponse(BaseModel):
    """Full solution path of one wire."""
    level: int
    wire_index: int
    color: str
    start: Coordinate
    end: Coordinate
    path: List[Coordinate]


class ValidationReport(BaseModel):
    """Level validation result."""
    valid: bool
    errors: List[str] = []
    coverage: float

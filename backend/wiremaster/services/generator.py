"""
Wire Master - Level Generator

Pipeline per attempt:
    covering path -> partition into segments -> wires -> validation

Guarantees:
- every accepted level covers the whole grid, one covering path split end to end
- the same (config, level number) always yields the same level
- bounded attempts, then a fallback level that can't fail
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

from ..config import settings
from ..schemas import Coordinate, GeneratorConfig, LevelData, WirePorts
from .errors import GenerationFailure, Unsolvable
from .partition import partition_path
from .paths import PathStrategy, build_coverage_path
from .progression import get_generator_config
from .random_source import SeededRandom
from .solver import SolverStatus, solve_ports
from .validator import validate_puzzle
from .wires import Wire, extract_wires, select_colors

logger = logging.getLogger(__name__)


# ============================================
# SEED DERIVATION
# ============================================

MASK_32 = 0xFFFFFFFF
LEVEL_SEED_MULTIPLIER = 48271
LEVEL_SEED_SALT = 0xDEADBEEF
ATTEMPT_SEED_MULTIPLIER = 2654435761


def rotl32(value: int, shift: int) -> int:
    """32-bit rotate left."""
    value &= MASK_32
    return ((value << shift) | (value >> (32 - shift))) & MASK_32


def derive_level_seed(level_number: int) -> int:
    """
    Base seed for a level number.

        seed = (n * 48271) ^ rotl32(n, 13) ^ 0xDEADBEEF   (mod 2^32)

    The multiply spreads consecutive levels apart, the rotation moves the
    low bits up, the salt keeps level 0 away from a zero seed.
    """
    n = level_number & MASK_32
    return ((n * LEVEL_SEED_MULTIPLIER) ^ rotl32(n, 13) ^ LEVEL_SEED_SALT) & MASK_32


def derive_attempt_seed(base_seed: int, attempt: int) -> int:
    """Sub-seed for one attempt. Attempt 0 uses the base seed itself."""
    a = attempt & MASK_32
    return (base_seed ^ (a * ATTEMPT_SEED_MULTIPLIER) ^ rotl32(a, 7)) & MASK_32


# ============================================
# ATTEMPT RESULT
# ============================================

@dataclass(frozen=True)
class AttemptOk:
    seed: int
    strategy: PathStrategy
    wires: Tuple[Wire, ...]


@dataclass(frozen=True)
class AttemptErr:
    seed: int
    failure: GenerationFailure


AttemptResult = Union[AttemptOk, AttemptErr]


def run_attempt(
    config: GeneratorConfig,
    seed: int,
    flip_chance: float = 0.25,
    verify: bool = False,
    solver_max_steps: int = 200_000,
) -> AttemptResult:
    """
    One generation attempt with its own random source.

    Failures raised by the pipeline stop here and come back as AttemptErr.
    """
    rng = SeededRandom(seed)
    rows, cols = config.grid_rows, config.grid_cols

    try:
        strategy, path = build_coverage_path(rows, cols, rng)
        segments = partition_path(path, config.wire_count, rng)
        wires = extract_wires(segments, rng, flip_chance)
        validate_puzzle(wires, rows, cols)

        if verify:
            outcome = solve_ports(rows, cols, [(w.start, w.end) for w in wires], solver_max_steps)
            if outcome.status == SolverStatus.UNSOLVABLE:
                raise Unsolvable(
                    f"No full-fill routing for {len(wires)} wires on {rows}x{cols}",
                    observed=outcome.status.value,
                    expected=SolverStatus.SOLVED.value,
                    steps=outcome.steps,
                )
            if outcome.status == SolverStatus.EXHAUSTED:
                logger.debug("[Generator] Solver budget exhausted after %d steps, trusting construction", outcome.steps)
    except GenerationFailure as failure:
        return AttemptErr(seed, failure)

    return AttemptOk(seed, strategy, tuple(wires))


# ============================================
# LEVEL ASSEMBLY
# ============================================

def _to_coordinates(cells) -> Tuple[Coordinate, ...]:
    return tuple(Coordinate.from_tuple(c) for c in cells)


def build_level_data(
    config: GeneratorConfig,
    level_number: int,
    base_seed: int,
    result: AttemptOk,
    attempts: int,
) -> LevelData:
    return LevelData(
        id=level_number,
        seed=base_seed,
        config=config,
        wires=tuple(
            WirePorts(
                color=w.color,
                start=Coordinate.from_tuple(w.start),
                end=Coordinate.from_tuple(w.end),
            )
            for w in result.wires
        ),
        solution=tuple(_to_coordinates(w.solution_path) for w in result.wires),
        strategy=result.strategy.value,
        attempts=attempts,
        fallback=False,
    )


def build_fallback_level(
    config: GeneratorConfig,
    level_number: int,
    base_seed: int,
    attempts: int = 0,
) -> LevelData:
    """
    Straight horizontal wires, one per row, for min(wire_count, rows) rows.

    Valid by construction: rows are distinct, each wire spans all columns
    (cols >= 2, so start != end) and colors come from the palette without
    replacement. Only those rows are covered.
    """
    count = min(config.wire_count, config.grid_rows)
    colors = select_colors(count, SeededRandom(base_seed))

    wires: List[WirePorts] = []
    solution: List[Tuple[Coordinate, ...]] = []
    for row, color in zip(range(count), colors):
        path = tuple(Coordinate(row=row, col=col) for col in range(config.grid_cols))
        wires.append(WirePorts(color=color, start=path[0], end=path[-1]))
        solution.append(path)

    return LevelData(
        id=level_number,
        seed=base_seed,
        config=config,
        wires=tuple(wires),
        solution=tuple(solution),
        strategy=None,
        attempts=attempts,
        fallback=True,
    )


# ============================================
# MAIN GENERATOR FUNCTION
# ============================================

def generate_level(
    config: GeneratorConfig,
    level_number: int,
    max_attempts: Optional[int] = None,
    flip_chance: Optional[float] = None,
    verify: Optional[bool] = None,
) -> LevelData:
    """
    Generates a level for `config`, seeded from `level_number`.

    Pure: identical inputs give an identical level. Never raises for a valid
    config; after `max_attempts` failed attempts the fallback level is
    returned instead.
    """
    if max_attempts is None:
        max_attempts = settings.GENERATOR_MAX_ATTEMPTS
    if flip_chance is None:
        flip_chance = settings.GENERATOR_FLIP_CHANCE
    if verify is None:
        verify = settings.GENERATOR_VERIFY_SOLVABLE

    base_seed = derive_level_seed(level_number)

    for attempt in range(max_attempts):
        seed = derive_attempt_seed(base_seed, attempt)
        result = run_attempt(
            config,
            seed,
            flip_chance=flip_chance,
            verify=verify,
            solver_max_steps=settings.SOLVER_MAX_STEPS,
        )

        if isinstance(result, AttemptOk):
            logger.info(
                "[Generator] Level %d: %dx%d, %d wires, %s path (attempt %d)",
                level_number, config.grid_rows, config.grid_cols,
                len(result.wires), result.strategy.value, attempt + 1,
            )
            return build_level_data(config, level_number, base_seed, result, attempt + 1)

        # Only the first and last failures are interesting at normal verbosity
        log = logger.warning if attempt in (0, max_attempts - 1) else logger.debug
        log(
            "[Generator] Level %d attempt %d/%d failed: %s (observed=%r, expected=%r)",
            level_number, attempt + 1, max_attempts, result.failure,
            result.failure.observed, result.failure.expected,
        )

    logger.error(
        "[Generator] Level %d: %d attempts exhausted for %dx%d with %d wires, using fallback layout",
        level_number, max_attempts, config.grid_rows, config.grid_cols, config.wire_count,
    )
    return build_fallback_level(config, level_number, base_seed, attempts=max_attempts)


def generate_level_by_number(level_number: int) -> LevelData:
    """Generates a level with the progression config for its number."""
    return generate_level(get_generator_config(level_number), level_number)


# ============================================
# SOLUTION HELPERS
# ============================================

def get_hint(level: LevelData, wire_index: int) -> Optional[Tuple[WirePorts, Tuple[Coordinate, ...]]]:
    """Ports and full solution path of one wire, or None for an unknown index."""
    if not 0 <= wire_index < len(level.wires) or wire_index >= len(level.solution):
        return None
    return level.wires[wire_index], level.solution[wire_index]

"""
Wire Master - Puzzle Validator

Global invariants over the extracted wires. `validate_puzzle` raises the
first failure (used inside a generation attempt); `validate_level` runs every
check over a finished level and returns a report.
"""

from collections import Counter
from typing import Callable, Dict, List, Sequence

from ..schemas import LevelData
from .errors import (
    BrokenPath,
    DuplicateColor,
    DuplicateEndpoint,
    GenerationFailure,
    IncompleteCoverage,
    OutOfBounds,
    WireTooShort,
)
from .paths import in_bounds, is_adjacent
from .wires import Wire


# ============================================
# CHECKS
# ============================================

def check_coverage(wires: Sequence[Wire], rows: int, cols: int, full: bool = True) -> None:
    """No cell in two wires; with `full`, every grid cell is used."""
    seen = set()
    for idx, wire in enumerate(wires):
        for cell in wire.solution_path:
            if cell in seen:
                raise IncompleteCoverage(
                    f"Cell {cell} appears in multiple wire solution paths (wire {idx})",
                    observed=cell,
                    expected="each cell used once",
                )
            seen.add(cell)

    expected = rows * cols
    if full and len(seen) != expected:
        raise IncompleteCoverage(
            f"Solution paths don't cover all cells: {len(seen)}/{expected} cells",
            observed=len(seen),
            expected=expected,
        )


def check_color_uniqueness(wires: Sequence[Wire], rows: int, cols: int) -> None:
    counts = Counter(w.color for w in wires)
    duplicates = {color: n for color, n in counts.items() if n > 1}
    if duplicates:
        listing = ", ".join(f"{color}: {n}x" for color, n in duplicates.items())
        raise DuplicateColor(
            f"Duplicate colors detected: {listing}",
            observed=len(counts),
            expected=len(wires),
        )


def check_endpoint_disjointness(wires: Sequence[Wire], rows: int, cols: int) -> None:
    ports = set()
    for idx, wire in enumerate(wires):
        for port in (wire.start, wire.end):
            if port in ports:
                raise DuplicateEndpoint(
                    f"Duplicate port position {port} (wire {idx}, {wire.color})",
                    observed=port,
                    expected="distinct ports",
                )
            ports.add(port)


def check_min_wire_size(wires: Sequence[Wire], rows: int, cols: int) -> None:
    for idx, wire in enumerate(wires):
        if len(wire.solution_path) < 2:
            raise WireTooShort(
                f"Wire {idx} ({wire.color}) has only {len(wire.solution_path)} cells",
                observed=len(wire.solution_path),
                expected=">= 2",
            )
        if wire.start == wire.end:
            raise WireTooShort(
                f"Wire {idx} ({wire.color}) has same start and end position {wire.start}",
                observed=wire.start,
                expected="start != end",
            )


def check_bounds(wires: Sequence[Wire], rows: int, cols: int) -> None:
    for idx, wire in enumerate(wires):
        for cell in (wire.start, wire.end, *wire.solution_path):
            if not in_bounds(cell, rows, cols):
                raise OutOfBounds(
                    f"Wire {idx} ({wire.color}) uses {cell} outside {rows}x{cols} grid",
                    observed=cell,
                    expected=f"[0, {rows}) x [0, {cols})",
                )


def check_path_continuity(wires: Sequence[Wire], rows: int, cols: int) -> None:
    """Solution paths run port to port through neighbouring cells."""
    for idx, wire in enumerate(wires):
        path = wire.solution_path
        if path[0] != wire.start or path[-1] != wire.end:
            raise BrokenPath(
                f"Wire {idx} ({wire.color}) path runs {path[0]}->{path[-1]}, ports are {wire.start}->{wire.end}",
                observed=(path[0], path[-1]),
                expected=(wire.start, wire.end),
            )
        for i in range(len(path) - 1):
            if not is_adjacent(path[i], path[i + 1]):
                raise BrokenPath(
                    f"Wire {idx} ({wire.color}) not orthogonal at cell {i}",
                    observed=(path[i], path[i + 1]),
                    expected="adjacent cells",
                )


CHECKS: List[Callable[[Sequence[Wire], int, int], None]] = [
    check_coverage,
    check_color_uniqueness,
    check_endpoint_disjointness,
    check_min_wire_size,
    check_bounds,
    check_path_continuity,
]


def validate_puzzle(wires: Sequence[Wire], rows: int, cols: int) -> None:
    """
    Runs every check in order.

    Raises:
        GenerationFailure: the first invariant that doesn't hold.
    """
    for check in CHECKS:
        check(wires, rows, cols)


# ============================================
# LEVEL REPORT
# ============================================

def wires_from_level(level: LevelData) -> List[Wire]:
    """Rebuilds wires (with solution paths) from a level payload."""
    wires = []
    for ports, path in zip(level.wires, level.solution):
        wires.append(Wire(
            color=ports.color,
            start=ports.start.as_tuple(),
            end=ports.end.as_tuple(),
            solution_path=tuple(c.as_tuple() for c in path),
        ))
    return wires


def validate_level(level: LevelData) -> Dict:
    """Validates a finished level. Fallback levels aren't held to full coverage."""
    errors: List[str] = []
    rows = level.config.grid_rows
    cols = level.config.grid_cols
    total_cells = rows * cols

    if len(level.solution) != len(level.wires):
        errors.append(f"Solution count mismatch: {len(level.solution)} paths for {len(level.wires)} wires")

    wires = wires_from_level(level)
    if not wires:
        errors.append("Level has no wires")

    if any(len(w.solution_path) == 0 for w in wires):
        errors.append("Level has an empty solution path")
    else:
        for check in CHECKS:
            try:
                if check is check_coverage:
                    check_coverage(wires, rows, cols, full=not level.fallback)
                else:
                    check(wires, rows, cols)
            except GenerationFailure as e:
                errors.append(str(e))

    occupied = {cell for w in wires for cell in w.solution_path}
    coverage = len(occupied) / total_cells * 100

    return {
        "valid": len(errors) == 0,
        "errors": errors,
        "coverage": round(coverage, 1),
    }

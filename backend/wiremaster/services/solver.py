"""
Wire Master - Exhaustive Solver

Checks that a set of ports can be routed so that every cell is filled.
Depth-first search on an explicit stack (no recursion) with a step budget,
so a caller can bound the cost on larger grids.

Wires are routed one at a time, in order: a wire grows from its start
through empty cells until it reaches its own end, then the next wire starts.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Sequence, Tuple

from .paths import Coordinate, neighbors


class SolverStatus(str, Enum):
    SOLVED = "solved"
    UNSOLVABLE = "unsolvable"
    EXHAUSTED = "exhausted"


@dataclass
class SolverOutcome:
    status: SolverStatus
    steps: int
    paths: Optional[List[List[Coordinate]]] = None


@dataclass
class _Frame:
    wire: int
    options: List[Coordinate]
    next: int = 0
    placed: Optional[Coordinate] = None


@dataclass
class _Board:
    rows: int
    cols: int
    ports: Sequence[Tuple[Coordinate, Coordinate]]
    owner: Dict[Coordinate, int] = field(default_factory=dict)
    paths: List[List[Coordinate]] = field(default_factory=list)

    def moves(self, wire: int) -> List[Coordinate]:
        head = self.paths[wire][-1]
        target = self.ports[wire][1]
        return [
            cell for cell in neighbors(head, self.rows, self.cols)
            if cell == target or cell not in self.owner
        ]

    def place(self, wire: int, cell: Coordinate) -> None:
        self.paths[wire].append(cell)
        if cell != self.ports[wire][1]:
            self.owner[cell] = wire

    def undo(self, wire: int, cell: Coordinate) -> None:
        self.paths[wire].pop()
        if cell != self.ports[wire][1]:
            del self.owner[cell]


def solve_ports(
    rows: int,
    cols: int,
    ports: Sequence[Tuple[Coordinate, Coordinate]],
    max_steps: int = 200_000,
) -> SolverOutcome:
    """
    Searches for a full-fill routing of `ports` ((start, end) per wire).

    Returns SOLVED with one routing, UNSOLVABLE when the search space is
    exhausted without one, or EXHAUSTED when `max_steps` ran out first.
    """
    if not ports:
        return SolverOutcome(SolverStatus.UNSOLVABLE, 0)

    board = _Board(rows, cols, ports)
    for idx, (start, end) in enumerate(ports):
        if start == end or start in board.owner or end in board.owner:
            return SolverOutcome(SolverStatus.UNSOLVABLE, 0)
        board.owner[start] = idx
        board.owner[end] = idx
        board.paths.append([start])

    total_cells = rows * cols
    frames = [_Frame(0, board.moves(0))]
    steps = 0

    while frames:
        frame = frames[-1]
        if frame.placed is not None:
            board.undo(frame.wire, frame.placed)
            frame.placed = None

        if frame.next >= len(frame.options):
            frames.pop()
            continue

        if steps >= max_steps:
            return SolverOutcome(SolverStatus.EXHAUSTED, steps)
        steps += 1

        cell = frame.options[frame.next]
        frame.next += 1
        board.place(frame.wire, cell)
        frame.placed = cell

        wire = frame.wire
        if cell == ports[wire][1]:
            wire += 1
            if wire == len(ports):
                if len(board.owner) == total_cells:
                    return SolverOutcome(SolverStatus.SOLVED, steps, [list(p) for p in board.paths])
                continue

        frames.append(_Frame(wire, board.moves(wire)))

    return SolverOutcome(SolverStatus.UNSOLVABLE, steps)

from wiremaster.services.paths import is_adjacent
from wiremaster.services.solver import SolverStatus, solve_ports


def test_two_by_two_single_wire():
    outcome = solve_ports(2, 2, [((0, 0), (1, 0))])
    assert outcome.status == SolverStatus.SOLVED
    assert outcome.paths == [[(0, 0), (0, 1), (1, 1), (1, 0)]]


def test_parity_makes_diagonal_corners_unsolvable():
    outcome = solve_ports(2, 2, [((0, 0), (1, 1))])
    assert outcome.status == SolverStatus.UNSOLVABLE
    assert outcome.paths is None


def test_two_straight_wires():
    outcome = solve_ports(2, 3, [((0, 0), (0, 2)), ((1, 0), (1, 2))])
    assert outcome.status == SolverStatus.SOLVED
    assert outcome.paths == [[(0, 0), (0, 1), (0, 2)], [(1, 0), (1, 1), (1, 2)]]


def test_solution_fills_grid():
    outcome = solve_ports(3, 3, [((0, 0), (0, 2))])
    assert outcome.status == SolverStatus.SOLVED
    path = outcome.paths[0]
    assert len(set(path)) == 9
    assert path[0] == (0, 0)
    assert path[-1] == (0, 2)
    assert all(is_adjacent(path[i], path[i + 1]) for i in range(len(path) - 1))


def test_step_budget():
    outcome = solve_ports(3, 3, [((0, 0), (0, 2))], max_steps=1)
    assert outcome.status == SolverStatus.EXHAUSTED
    assert outcome.steps == 1


def test_bad_ports_are_unsolvable():
    assert solve_ports(3, 3, []).status == SolverStatus.UNSOLVABLE
    assert solve_ports(3, 3, [((1, 1), (1, 1))]).status == SolverStatus.UNSOLVABLE

    shared = solve_ports(3, 3, [((0, 0), (0, 1)), ((0, 1), (2, 2))])
    assert shared.status == SolverStatus.UNSOLVABLE
    assert shared.steps == 0

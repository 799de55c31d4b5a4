import numpy as np
import pytest

from crossflip.board import BoardState
from crossflip.errors import InfeasibleError
from crossflip.rules import CROSS, INCLUDE_PIVOT_CANCEL
from crossflip.solver import is_solvable, solve

from tests.helpers import scrambled_from_solved


@pytest.mark.parametrize("rows,cols", [(2, 2), (3, 5), (4, 4), (12, 12)])
def test_solved_board_needs_no_presses(rows, cols):
    board = BoardState.create(rows, cols, 1)
    solution = solve(board)
    assert solution.feasible
    assert solution.num_presses == 0
    assert not solution.presses.any()
    assert solution.activations() == []


def test_empty_two_by_two():
    solution = solve(BoardState.create(2, 2, 0))
    assert solution.activations() == [(0, 0), (0, 1)]
    assert solution.rank == 2
    assert solution.free_variables == 2


def test_one_press_left():
    board = BoardState.from_matrix([[0, 1], [1, 0]])
    assert solve(board).activations() == [(0, 1)]


def test_infeasible_board():
    board = BoardState.from_matrix([[0, 1], [1, 1]])
    solution = solve(board)
    assert not solution.feasible
    assert solution.presses is None
    assert solution.num_presses == 0
    with pytest.raises(InfeasibleError):
        solution.activations()
    assert not is_solvable(board)


def test_sample_board_needs_cross_rule(sample_board):
    # row-and-column-only flips can never fix this board
    assert not solve(sample_board).feasible

    solution = solve(sample_board, CROSS)
    assert solution.feasible
    assert solution.rule == CROSS
    for r, c in solution.activations():
        sample_board.apply_activation(r, c, CROSS)
    assert sample_board.is_solved()


def test_solve_does_not_mutate(sample_board):
    before = sample_board.state.copy()
    solve(sample_board, CROSS)
    assert np.array_equal(sample_board.state, before)
    assert sample_board.moves == 0


@pytest.mark.parametrize("rows,cols", [(2, 3), (3, 3), (4, 6), (7, 5), (12, 12)])
def test_solution_turns_everything_on(rows, cols, rng):
    board = scrambled_from_solved(rows, cols, rng, presses=rows * cols)
    solution = solve(board)
    assert solution.feasible
    grid = solution.grid()
    assert grid.shape == (rows, cols)
    for r, c in solution.activations():
        board.apply_activation(r, c)
    assert board.is_solved()


def test_press_order_does_not_matter(rng):
    board = scrambled_from_solved(5, 4, rng, presses=12)
    moves = solve(board).activations()
    reordered = list(reversed(moves))
    rng.shuffle(reordered)
    for r, c in reordered:
        board.apply_activation(r, c)
    assert board.is_solved()


def test_rule_aliases_agree(rng):
    board = scrambled_from_solved(3, 4, rng)
    a = solve(board)
    b = solve(board, INCLUDE_PIVOT_CANCEL)
    assert b.rule == a.rule
    assert np.array_equal(a.presses, b.presses)


def test_unknown_rule():
    with pytest.raises(ValueError):
        solve(BoardState.create(2, 2, 0), "knight")

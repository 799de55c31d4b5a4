from __future__ import annotations

import logging
from typing import Callable, Iterator, Optional

from .board import BoardState
from .solver import Solution

_LOGGER = logging.getLogger(__name__)

Activation = tuple[int, int]


def activate(board: BoardState, r: int, c: int, rule: str | None = None) -> None:
    """Single manual move."""
    board.apply_activation(r, c, rule)


def iter_solution(
    board: BoardState, solution: Solution, rule: str | None = None
) -> Iterator[Activation]:
    """Apply ``solution`` one activation at a time, yielding each after it lands.

    Closing the generator between steps leaves a valid intermediate board.
    Raises InfeasibleError before touching the board if there is no solution.
    """
    if rule is None:
        rule = solution.rule
    if (board.rows, board.cols) != (solution.rows, solution.cols):
        raise ValueError(
            f"Solution is for a {solution.rows}x{solution.cols} board, "
            f"got {board.rows}x{board.cols}"
        )
    moves = solution.activations()
    for step, (r, c) in enumerate(moves, start=1):
        board.apply_activation(r, c, rule)
        _LOGGER.debug("replay step %d/%d: (%d, %d)", step, len(moves), r, c)
        yield r, c


def apply_solution(
    board: BoardState,
    solution: Solution,
    rule: str | None = None,
    on_step: Optional[Callable[[Activation, BoardState], None]] = None,
) -> list[Activation]:
    performed = []
    for move in iter_solution(board, solution, rule):
        performed.append(move)
        if on_step is not None:
            on_step(move, board)
    return performed

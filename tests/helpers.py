from __future__ import annotations

import numpy as np

from crossflip.board import BoardState

SAMPLE_4X4 = [
    [0, 0, 1, 1],
    [0, 1, 1, 1],
    [1, 1, 0, 0],
    [1, 1, 0, 0],
]


def scrambled_from_solved(
    rows: int, cols: int, rng: np.random.Generator, presses: int = 10, rule=None
) -> BoardState:
    """A board known to be solvable: all ones, then random activations."""
    board = BoardState.create(rows, cols, 1)
    for i in rng.integers(0, rows * cols, size=presses):
        board.apply_activation(*divmod(int(i), cols), rule)
    board.restart()
    return board

from __future__ import annotations

import logging

import numpy as np

from .board import BoardState, check_dimensions

_LOGGER = logging.getLogger(__name__)


def default_steps(rows: int, cols: int) -> int:
    return max(8, (rows * cols) // 2)


def shuffle(
    rows: int,
    cols: int,
    rule: str | None = None,
    rng: np.random.Generator | None = None,
    steps: int | None = None,
) -> BoardState:
    """Scramble an all-zero board with ``steps`` random activations.

    The result is the new initial snapshot, with its move counter at zero.
    """
    check_dimensions(rows, cols)
    rng = rng or np.random.default_rng()
    if steps is None:
        steps = default_steps(rows, cols)
    if steps < 0:
        raise ValueError(f"steps must be non-negative, got {steps}")

    board = BoardState.create(rows, cols, 0)
    presses = rng.integers(0, rows * cols, size=steps)
    for i in presses:
        r, c = divmod(int(i), cols)
        board.apply_activation(r, c, rule)
    board.restart()
    _LOGGER.debug(
        "shuffled %dx%d board with %d presses, %d on",
        rows,
        cols,
        steps,
        board.count_on(),
    )
    return board

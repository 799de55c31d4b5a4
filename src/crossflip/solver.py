from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np

from .algebra import build_system, gf2_solve
from .board import BoardState
from .errors import InfeasibleError
from .rules import coords, normalize_rule

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class Solution:
    """Outcome of one solve request.

    ``presses`` holds one 0/1 entry per cell in row-major order, or is None
    when the board cannot be solved under ``rule``.
    """

    rows: int
    cols: int
    rule: str
    presses: Optional[np.ndarray]
    rank: int

    @property
    def feasible(self) -> bool:
        return self.presses is not None

    @property
    def free_variables(self) -> int:
        return self.rows * self.cols - self.rank

    def activations(self) -> list[tuple[int, int]]:
        if self.presses is None:
            raise InfeasibleError(
                f"No activation set solves this {self.rows}x{self.cols} board "
                f"under rule {self.rule!r}."
            )
        return [coords(self.cols, i) for i in np.flatnonzero(self.presses)]

    def grid(self) -> np.ndarray:
        if self.presses is None:
            raise InfeasibleError("Infeasible solution has no press grid.")
        return self.presses.reshape(self.rows, self.cols)

    @property
    def num_presses(self) -> int:
        return 0 if self.presses is None else int(self.presses.sum())


def solve(board: BoardState, rule: str | None = None) -> Solution:
    """Compute an activation set that turns every cell on. Does not mutate ``board``."""
    rule = normalize_rule(rule)
    A, b = build_system(board, rule)
    x, pivcols, ok = gf2_solve(A, b)
    if ok:
        _LOGGER.debug(
            "solved %dx%d board: %d presses, rank %d",
            board.rows,
            board.cols,
            int(x.sum()),
            len(pivcols),
        )
    else:
        _LOGGER.debug(
            "%dx%d board is infeasible under %s (rank %d)",
            board.rows,
            board.cols,
            rule,
            len(pivcols),
        )
    return Solution(board.rows, board.cols, rule, x if ok else None, len(pivcols))


def is_solvable(board: BoardState, rule: str | None = None) -> bool:
    return solve(board, rule).feasible

from __future__ import annotations

import itertools
from typing import Iterator

import numpy as np

from ..algebra import gf2_rank, gf2_solve
from ..board import BoardState
from ..rules import build_effect_matrix, normalize_rule

MAX_CENSUS_CELLS = 20


def enumerate_boards(rows: int, cols: int) -> Iterator[BoardState]:
    """Every rows x cols board, in binary counting order over the flat cells."""
    N = rows * cols
    if N > MAX_CENSUS_CELLS:
        raise ValueError(
            f"{rows}x{cols} has 2^{N} boards; census is limited to "
            f"{MAX_CENSUS_CELLS} cells"
        )
    for bits in itertools.product((0, 1), repeat=N):
        yield BoardState.from_flat(rows, cols, np.array(bits, dtype=np.uint8))


def census(rows: int, cols: int, rule: str | None = None) -> dict:
    """Count feasible and infeasible boards by solving each one.

    Feasible boards form a coset of the effect matrix image, so
    ``feasible == 2 ** rank``.
    """
    rule = normalize_rule(rule)
    A = build_effect_matrix(rows, cols, rule)
    rank = gf2_rank(A)
    feasible = 0
    infeasible = 0
    for board in enumerate_boards(rows, cols):
        _, _, ok = gf2_solve(A, board.to_flat() ^ 1)
        if ok:
            feasible += 1
        else:
            infeasible += 1
    return {
        "rows": rows,
        "cols": cols,
        "rule": rule,
        "rank": rank,
        "feasible": feasible,
        "infeasible": infeasible,
    }

from __future__ import annotations

from typing import List, Optional, Tuple

import numpy as np

from .board import BoardState
from .rules import build_effect_matrix


def build_system(
    board: BoardState, rule: str | None = None
) -> Tuple[np.ndarray, np.ndarray]:
    """Return (A, b) with one GF(2) equation per target cell.

    Row t of A is the coefficient mask of the activations that flip cell t
    (variable j is cell ``j = r * cols + c``); b[t] is 1 when cell t is
    currently off and must be flipped an odd number of times.
    """
    A = build_effect_matrix(board.rows, board.cols, rule)
    b = (board.to_flat() ^ 1).astype(np.uint8)
    return A, b


def gf2_rref_augmented(
    A: np.ndarray, b: np.ndarray
) -> Tuple[np.ndarray, list[int]]:
    """Row-reduce the equations [A|b] over GF(2).

    A and b hold 0/1 entries, one equation per row. Columns are processed
    left to right; the pivot is the first unprocessed row with the column's
    bit set, and that column is cleared from every other row, so each pivot
    variable reads off its row's right-hand side. Returns the reduced
    augmented matrix and the pivot columns in row order.
    """
    M = np.column_stack([A, b]).astype(np.uint8)
    m, n = A.shape

    pivcols: list[int] = []
    for col in range(n):
        done = len(pivcols)
        if done == m:
            break
        candidates = np.flatnonzero(M[done:, col])
        if candidates.size == 0:
            continue  # free variable
        pivot = done + int(candidates[0])
        if pivot != done:
            M[[done, pivot]] = M[[pivot, done]]
        for r in np.flatnonzero(M[:, col]):
            if r != done:
                M[r] ^= M[done]
        pivcols.append(col)
    return M, pivcols


def is_consistent(R: np.ndarray) -> bool:
    """False when a reduced row reads 0...0 | 1."""
    R_A = R[:, :-1]
    R_b = R[:, -1]
    return not bool(np.any((R_A.sum(axis=1) == 0) & (R_b == 1)))


def gf2_solve(
    A: np.ndarray, b: np.ndarray
) -> Tuple[Optional[np.ndarray], list[int], bool]:
    """Solve A x = b over GF(2) with every free variable fixed to 0.

    Returns:
        x: solution (length n, uint8) or None if inconsistent
        pivcols: pivot columns of the reduced system (its rank is their count)
        solvable: bool
    """
    n = A.shape[1]
    R, pivcols = gf2_rref_augmented(A, b)
    if not is_consistent(R):
        return None, pivcols, False

    # reduced form: row ri reads x_pc + (free vars, all 0) = rhs
    x = np.zeros((n,), dtype=np.uint8)
    for ri, pc in enumerate(pivcols):
        x[pc] = R[ri, n]
    return x, pivcols, True


def gf2_rank(A: np.ndarray) -> int:
    _, pivcols = gf2_rref_augmented(A, np.zeros(A.shape[0], dtype=np.uint8))
    return len(pivcols)


def gf2_nullspace(A: np.ndarray) -> List[np.ndarray]:
    """Basis of {v : A v = 0}, one vector per free column (that column set to 1)."""
    n = A.shape[1]
    R, pivcols = gf2_rref_augmented(A, np.zeros(A.shape[0], dtype=np.uint8))
    R_A = R[:, :n]
    frees = [j for j in range(n) if j not in pivcols]
    basis: list[np.ndarray] = []
    for f in frees:
        v = np.zeros((n,), dtype=np.uint8)
        v[f] = 1
        for ri, pc in enumerate(pivcols):
            v[pc] = R_A[ri, f]
        basis.append(v)
    return basis

from __future__ import annotations

import numpy as np

EXCLUDE_PIVOT = "exclude-pivot"
INCLUDE_PIVOT_CANCEL = "include-pivot-cancel"
CROSS = "cross"

# Both names describe the same net effect: row and column flipped, pivot untouched.
_ALIASES = {
    EXCLUDE_PIVOT: EXCLUDE_PIVOT,
    INCLUDE_PIVOT_CANCEL: EXCLUDE_PIVOT,
    CROSS: CROSS,
}

DEFAULT_RULE = EXCLUDE_PIVOT
RULES = tuple(_ALIASES)


def normalize_rule(rule: str | None) -> str:
    if rule is None:
        return DEFAULT_RULE
    try:
        return _ALIASES[rule]
    except KeyError:
        raise ValueError(
            f"Unknown activation rule {rule!r}, expected one of {RULES}"
        ) from None


def flip_mask(rows: int, cols: int, r: int, c: int, rule: str | None = None):
    """Return an (rows, cols) uint8 mask of the cells flipped by pressing (r, c).

    The row pass covers every cell of row r and the column pass every cell
    of column c, so the pivot is touched twice and its flips cancel. The
    ``cross`` rule touches the pivot once more and leaves it flipped.
    """
    rule = normalize_rule(rule)
    mask = np.zeros((rows, cols), dtype=np.uint8)
    mask[r, :] ^= 1
    mask[:, c] ^= 1
    if rule == CROSS:
        mask[r, c] ^= 1
    return mask


def build_effect_matrix(rows: int, cols: int, rule: str | None = None):
    """Return the N×N effect matrix A over GF(2), N = rows * cols.
    Column j encodes the cells toggled when pressing cell j.
    """
    N = rows * cols
    A = np.zeros((N, N), dtype=np.uint8)

    for r in range(rows):
        for c in range(cols):
            mask = flip_mask(rows, cols, r, c, rule)
            A[:, index(cols, r, c)] = mask.reshape(-1)
    return A


def index(cols: int, r: int, c: int) -> int:
    return r * cols + c


def coords(cols: int, i: int) -> tuple[int, int]:
    r, c = divmod(int(i), cols)
    return r, c

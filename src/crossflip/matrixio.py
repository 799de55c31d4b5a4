from __future__ import annotations

import re

from .board import MAX_SIZE, MIN_SIZE, BoardState
from .errors import MatrixFormatError

_PACKED = re.compile(r"^[01]+$")
_SEPARATORS = re.compile(r"[,\s]+")


def parse_matrix(text: str) -> list[list[int]]:
    """Parse a 0/1 matrix, one row per line.

    Rows may be written as ``0 1 0``, ``0,1,0`` or packed as ``010``.
    """
    lines = [line.strip() for line in str(text).strip().splitlines()]
    lines = [line for line in lines if line]
    if not lines:
        raise MatrixFormatError("Empty matrix.")

    rows: list[list[int]] = []
    width = -1
    for line in lines:
        if _PACKED.match(line):
            tokens = list(line)
        else:
            tokens = [t for t in _SEPARATORS.split(line) if t]
        for t in tokens:
            if t not in ("0", "1"):
                raise MatrixFormatError(f'Invalid value "{t}", use only 0/1.')
        row = [1 if t == "1" else 0 for t in tokens]

        if width == -1:
            width = len(row)
        if len(row) != width:
            raise MatrixFormatError("All rows must have the same length.")
        rows.append(row)

    if len(rows) < MIN_SIZE or width < MIN_SIZE:
        raise MatrixFormatError(f"Minimum board size is {MIN_SIZE}x{MIN_SIZE}.")
    if len(rows) > MAX_SIZE or width > MAX_SIZE:
        raise MatrixFormatError(f"Maximum board size is {MAX_SIZE}x{MAX_SIZE}.")
    return rows


def serialize_board(board: BoardState) -> str:
    return "\n".join(" ".join(str(v) for v in row) for row in board.to_matrix())


def read_board(text: str) -> BoardState:
    return BoardState.from_matrix(parse_matrix(text))

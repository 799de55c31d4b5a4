from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .errors import InvalidDimensionError, MatrixFormatError, OutOfRangeError
from .rules import flip_mask

MIN_SIZE = 2
MAX_SIZE = 12


@dataclass(frozen=True)
class Highlight:
    r: int = -1
    c: int = -1
    pivot: bool = False

    @property
    def active(self) -> bool:
        return self.r != -1 and self.c != -1


def check_dimensions(rows: int, cols: int) -> None:
    for name, value in (("rows", rows), ("cols", cols)):
        if not MIN_SIZE <= value <= MAX_SIZE:
            raise InvalidDimensionError(
                f"{name}={value} outside supported range [{MIN_SIZE}, {MAX_SIZE}]"
            )


def _as_grid(matrix) -> np.ndarray:
    if not isinstance(matrix, np.ndarray):
        matrix = list(matrix)
        widths = {len(row) for row in matrix}
        if len(widths) > 1:
            raise MatrixFormatError("All rows must have the same length.")
    grid = np.asarray(matrix)
    if grid.ndim != 2:
        raise MatrixFormatError(f"Expected a 2-D matrix, got shape {grid.shape}")
    check_dimensions(*grid.shape)
    if not np.isin(grid, (0, 1)).all():
        raise MatrixFormatError("Matrix values must be 0 or 1.")
    return grid.astype(np.uint8)


class BoardState:
    """One puzzle session: the live grid, its initial snapshot and move count.

    ``state`` is mutated in place by activations; ``initial`` is only ever
    replaced wholesale (new game, shuffle, import) and restores ``state`` on
    :meth:`reset`.
    """

    def __init__(self, rows: int, cols: int, state: np.ndarray | None = None):
        check_dimensions(rows, cols)
        self.rows = rows
        self.cols = cols
        if state is None:
            self.state = np.zeros((rows, cols), dtype=np.uint8)
        else:
            assert state.shape == (rows, cols)
            if not np.isin(state, (0, 1)).all():
                raise MatrixFormatError("Board cells must be 0 or 1.")
            self.state = state.astype(np.uint8, copy=True)
        self.initial = self.state.copy()
        self.moves = 0
        self.highlight = Highlight()

    @staticmethod
    def create(rows: int, cols: int, fill: int = 0) -> "BoardState":
        if fill not in (0, 1):
            raise ValueError(f"fill must be 0 or 1, got {fill!r}")
        check_dimensions(rows, cols)
        return BoardState(rows, cols, np.full((rows, cols), fill, dtype=np.uint8))

    @staticmethod
    def from_matrix(matrix) -> "BoardState":
        grid = _as_grid(matrix)
        return BoardState(grid.shape[0], grid.shape[1], grid)

    @staticmethod
    def from_flat(rows: int, cols: int, flat: np.ndarray) -> "BoardState":
        return BoardState(rows, cols, np.asarray(flat).reshape(rows, cols))

    @property
    def shape(self) -> tuple[int, int]:
        return self.rows, self.cols

    def copy(self) -> "BoardState":
        other = BoardState(self.rows, self.cols, self.state)
        other.initial = self.initial.copy()
        other.moves = self.moves
        other.highlight = self.highlight
        return other

    def to_flat(self) -> np.ndarray:
        return self.state.reshape(-1)

    def to_matrix(self) -> list[list[int]]:
        return self.state.astype(int).tolist()

    def count_on(self) -> int:
        return int(self.state.sum())

    def count_off(self) -> int:
        return self.rows * self.cols - self.count_on()

    def is_solved(self) -> bool:
        return bool(self.state.all())

    def check_coords(self, r: int, c: int) -> None:
        if not (0 <= r < self.rows and 0 <= c < self.cols):
            raise OutOfRangeError(
                f"({r}, {c}) is outside a {self.rows}x{self.cols} board"
            )

    def apply_activation(self, r: int, c: int, rule: str | None = None) -> None:
        self.check_coords(r, c)
        self.state ^= flip_mask(self.rows, self.cols, r, c, rule)
        self.moves += 1

    # Session lifecycle

    def load(self, matrix) -> None:
        """Start a new game from ``matrix``; it becomes the reset checkpoint."""
        grid = _as_grid(matrix)
        self.rows, self.cols = grid.shape
        self.state = grid
        self.restart()

    def new_empty(self, rows: int, cols: int) -> None:
        check_dimensions(rows, cols)
        self.load(np.zeros((rows, cols), dtype=np.uint8))

    def restart(self) -> None:
        """Take the current grid as the new initial snapshot."""
        self.initial = self.state.copy()
        self.moves = 0
        self.highlight = Highlight()

    def reset(self) -> None:
        self.state = self.initial.copy()
        self.moves = 0
        self.highlight = Highlight()

    # Row/column cursor

    def set_highlight(self, r: int, c: int, pivot: bool = False) -> None:
        self.check_coords(r, c)
        self.highlight = Highlight(r, c, pivot)

    def clear_highlight(self) -> None:
        self.highlight = Highlight()

    def highlighted_cells(self) -> np.ndarray:
        mask = np.zeros((self.rows, self.cols), dtype=bool)
        if self.highlight.active:
            mask[self.highlight.r, :] = True
            mask[:, self.highlight.c] = True
        return mask

    def __eq__(self, other) -> bool:
        if not isinstance(other, BoardState):
            return NotImplemented
        return self.shape == other.shape and bool(
            np.array_equal(self.state, other.state)
        )

    def __repr__(self):
        return (
            f"BoardState(rows={self.rows}, cols={self.cols}, "
            f"on={self.count_on()}, moves={self.moves})"
        )

    def __str__(self) -> str:
        return "\n".join(
            "".join("1" if cell else "0" for cell in row) for row in self.state
        )

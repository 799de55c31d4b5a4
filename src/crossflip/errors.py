from __future__ import annotations


class InvalidDimensionError(ValueError):
    """Raised when a board is built with rows or cols outside the supported range."""

    pass


class OutOfRangeError(IndexError):
    """Raised when an activation coordinate lies outside the board."""

    pass


class InfeasibleError(Exception):
    """Raised when no activation set turns every cell on under the given rule."""

    pass


class MatrixFormatError(ValueError):
    pass

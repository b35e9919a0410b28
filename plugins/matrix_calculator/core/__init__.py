"""Exports for the matrix calculator core."""

from .algebra import (
    DimensionMismatchError,
    MatrixError,
    MatrixOverflowError,
    NotInvertibleError,
    NotSquareError,
    add,
    compute,
    determinant,
    inverse,
    minor,
    multiply,
    subtract,
    transpose,
)

__all__ = [
    "DimensionMismatchError",
    "MatrixError",
    "MatrixOverflowError",
    "NotInvertibleError",
    "NotSquareError",
    "add",
    "compute",
    "determinant",
    "inverse",
    "minor",
    "multiply",
    "subtract",
    "transpose",
]

"""Rectangular matrix value type shared by the algebra and equation plugins."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Sequence


class MatrixShapeError(ValueError):
    """Raised when nested rows do not describe a rectangular numeric matrix."""


def _coerce_entry(value: object, row: int, col: int) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise MatrixShapeError(f"Entry ({row}, {col}) is not a number")
    number = float(value)
    if math.isnan(number) or math.isinf(number):
        raise MatrixShapeError(f"Entry ({row}, {col}) must be finite")
    return number


@dataclass(frozen=True, slots=True)
class Matrix:
    """Immutable dense matrix with explicit row and column counts."""

    rows: int
    cols: int
    data: tuple[tuple[float, ...], ...]

    def __post_init__(self) -> None:
        if self.rows < 1 or self.cols < 1 or len(self.data) != self.rows:
            raise MatrixShapeError("Matrix dimensions do not match its data")
        if any(len(row) != self.cols for row in self.data):
            raise MatrixShapeError("Matrix rows must all have the same length")

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[float]]) -> "Matrix":
        materialized = [list(row) for row in rows]
        if not materialized:
            raise MatrixShapeError("Matrix must have at least one row")
        width = len(materialized[0])
        if width == 0:
            raise MatrixShapeError("Matrix must have at least one column")
        data = []
        for i, row in enumerate(materialized):
            if len(row) != width:
                raise MatrixShapeError(
                    f"Row {i} has {len(row)} entries, expected {width}"
                )
            data.append(tuple(_coerce_entry(value, i, j) for j, value in enumerate(row)))
        return cls(rows=len(data), cols=width, data=tuple(data))

    @property
    def shape(self) -> tuple[int, int]:
        return self.rows, self.cols

    @property
    def is_square(self) -> bool:
        return self.rows == self.cols

    def __getitem__(self, index: tuple[int, int]) -> float:
        row, col = index
        return self.data[row][col]

    def to_rows(self) -> list[list[float]]:
        """Return an independent nested-list copy of the entries."""

        return [list(row) for row in self.data]


def as_matrix(value: Matrix | Iterable[Sequence[float]]) -> Matrix:
    """Accept either a :class:`Matrix` or nested sequences."""

    if isinstance(value, Matrix):
        return value
    return Matrix.from_rows(value)


__all__ = ["Matrix", "MatrixShapeError", "as_matrix"]

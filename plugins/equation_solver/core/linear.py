"""Gaussian elimination with partial pivoting for small dense systems."""

from __future__ import annotations

import math
from typing import Iterable, Sequence

from common.matrix import Matrix, as_matrix

from .errors import EquationOverflowError, InvalidSystemError, SingularSystemError

PIVOT_TOLERANCE = 1e-10


def solve_linear_system(system: Matrix | Iterable[Sequence[float]]) -> list[float]:
    """Solve an augmented ``n x (n+1)`` system and return the ``n`` unknowns.

    Rows are swapped so that the largest-magnitude candidate becomes the
    pivot for each column. A pivot smaller than :data:`PIVOT_TOLERANCE`
    means the system has no unique solution and raises
    :class:`SingularSystemError`.
    """

    augmented = as_matrix(system)
    n = augmented.rows
    if augmented.cols != n + 1:
        raise InvalidSystemError(
            f"Augmented matrix must be n x (n+1), got {augmented.rows}x{augmented.cols}"
        )

    rows = augmented.to_rows()
    for i in range(n):
        pivot_row = i
        for j in range(i + 1, n):
            if abs(rows[j][i]) > abs(rows[pivot_row][i]):
                pivot_row = j
        rows[i], rows[pivot_row] = rows[pivot_row], rows[i]

        if abs(rows[i][i]) < PIVOT_TOLERANCE:
            raise SingularSystemError("The system is singular or has multiple solutions")

        for j in range(i + 1, n):
            factor = rows[j][i] / rows[i][i]
            rows[j][i] = 0.0
            for k in range(i + 1, n + 1):
                rows[j][k] -= factor * rows[i][k]

    solution = [0.0] * n
    for i in range(n - 1, -1, -1):
        total = 0.0
        for j in range(i + 1, n):
            total += rows[i][j] * solution[j]
        solution[i] = (rows[i][n] - total) / rows[i][i]
    if not all(math.isfinite(value) for value in solution):
        raise EquationOverflowError("The solution is too large to represent")
    return solution


def format_solution(values: Sequence[float], *, decimals: int = 4) -> list[str]:
    return [f"{value:.{decimals}f}" for value in values]


__all__ = ["PIVOT_TOLERANCE", "format_solution", "solve_linear_system"]

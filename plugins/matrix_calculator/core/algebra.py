"""Dense matrix algebra over :class:`common.matrix.Matrix` values.

Determinants are computed by recursive cofactor expansion along the first
row and inverses through the adjugate. Both are exponential in the matrix
size and are only meant for the small matrices the calculator accepts; the
API layer caps the dimension before calling in.
"""

from __future__ import annotations

import math
from typing import Iterable, Literal, Sequence

from common.matrix import Matrix, as_matrix

INVERTIBILITY_TOLERANCE = 1e-10

Operation = Literal["add", "subtract", "multiply", "transpose", "determinant", "inverse"]

BINARY_OPERATIONS = frozenset({"add", "subtract", "multiply"})
UNARY_OPERATIONS = frozenset({"transpose", "determinant", "inverse"})


class MatrixError(ValueError):
    """Base exception for matrix calculator failures."""


class DimensionMismatchError(MatrixError):
    """Raised when operand shapes violate an operation's precondition."""


class NotSquareError(DimensionMismatchError):
    """Raised when a square matrix is required."""


class NotInvertibleError(MatrixError):
    """Raised when the determinant is too close to zero to invert."""


class MatrixOverflowError(MatrixError):
    """Raised when a result leaves the range of finite floats."""


MatrixLike = Matrix | Iterable[Sequence[float]]


def _result(rows: Iterable[Sequence[float]]) -> Matrix:
    materialized = [list(row) for row in rows]
    if not all(math.isfinite(value) for row in materialized for value in row):
        raise MatrixOverflowError("Result is too large to represent")
    return Matrix.from_rows(materialized)


def _finite_determinant(data: tuple[tuple[float, ...], ...]) -> float:
    det = _determinant(data)
    if not math.isfinite(det):
        raise MatrixOverflowError("Determinant is too large to represent")
    return det


def _require_same_shape(a: Matrix, b: Matrix, verb: str) -> None:
    if a.shape != b.shape:
        raise DimensionMismatchError(
            f"Matrices must have the same dimensions for {verb} "
            f"({a.rows}x{a.cols} vs {b.rows}x{b.cols})"
        )


def _require_square(a: Matrix) -> None:
    if not a.is_square:
        raise NotSquareError(
            f"Matrix must be square (same number of rows and columns), got {a.rows}x{a.cols}"
        )


def add(a: MatrixLike, b: MatrixLike) -> Matrix:
    left, right = as_matrix(a), as_matrix(b)
    _require_same_shape(left, right, "addition")
    return _result(
        [x + y for x, y in zip(row_a, row_b)]
        for row_a, row_b in zip(left.data, right.data)
    )


def subtract(a: MatrixLike, b: MatrixLike) -> Matrix:
    left, right = as_matrix(a), as_matrix(b)
    _require_same_shape(left, right, "subtraction")
    return _result(
        [x - y for x, y in zip(row_a, row_b)]
        for row_a, row_b in zip(left.data, right.data)
    )


def multiply(a: MatrixLike, b: MatrixLike) -> Matrix:
    left, right = as_matrix(a), as_matrix(b)
    if left.cols != right.rows:
        raise DimensionMismatchError(
            f"First matrix columns ({left.cols}) must equal second matrix rows "
            f"({right.rows}) for multiplication"
        )
    result: list[list[float]] = []
    for i in range(left.rows):
        row: list[float] = []
        for j in range(right.cols):
            total = 0.0
            for k in range(left.cols):
                total += left.data[i][k] * right.data[k][j]
            row.append(total)
        result.append(row)
    return _result(result)


def transpose(a: MatrixLike) -> Matrix:
    matrix = as_matrix(a)
    return Matrix.from_rows(
        [matrix.data[i][j] for i in range(matrix.rows)] for j in range(matrix.cols)
    )


def minor(a: MatrixLike, row: int, col: int) -> Matrix:
    """Return ``a`` with ``row`` and ``col`` removed."""

    matrix = as_matrix(a)
    if matrix.rows < 2 or matrix.cols < 2:
        raise DimensionMismatchError("A minor requires at least a 2x2 matrix")
    return Matrix.from_rows(
        [value for j, value in enumerate(values) if j != col]
        for i, values in enumerate(matrix.data)
        if i != row
    )


def _determinant(data: tuple[tuple[float, ...], ...]) -> float:
    n = len(data)
    if n == 1:
        return data[0][0]
    if n == 2:
        return data[0][0] * data[1][1] - data[0][1] * data[1][0]
    det = 0.0
    for j in range(n):
        sub = tuple(
            tuple(value for c, value in enumerate(row) if c != j) for row in data[1:]
        )
        sign = 1.0 if j % 2 == 0 else -1.0
        det += sign * data[0][j] * _determinant(sub)
    return det


def determinant(a: MatrixLike) -> float:
    """Cofactor expansion along row 0."""

    matrix = as_matrix(a)
    _require_square(matrix)
    return _finite_determinant(matrix.data)


def inverse(a: MatrixLike) -> Matrix:
    """Invert ``a`` via its adjugate divided by the determinant."""

    matrix = as_matrix(a)
    _require_square(matrix)
    det = _finite_determinant(matrix.data)
    if abs(det) < INVERTIBILITY_TOLERANCE:
        raise NotInvertibleError("Matrix is not invertible")
    n = matrix.rows
    if n == 1:
        return _result([[1 / matrix.data[0][0]]])
    adjugate: list[list[float]] = []
    for i in range(n):
        row: list[float] = []
        for j in range(n):
            sign = 1.0 if (i + j) % 2 == 0 else -1.0
            # Indices swapped: the cofactor matrix is transposed into the adjugate.
            row.append(sign * _determinant(minor(matrix, j, i).data))
        adjugate.append(row)
    return _result([value / det for value in row] for row in adjugate)


def compute(operation: str, a: MatrixLike, b: MatrixLike | None = None) -> dict[str, object]:
    """Run ``operation`` and return a JSON friendly payload."""

    if operation in BINARY_OPERATIONS:
        if b is None:
            raise MatrixError(f"Operation '{operation}' requires a second matrix")
        handler = {"add": add, "subtract": subtract, "multiply": multiply}[operation]
        result = handler(a, b)
    elif operation == "transpose":
        result = transpose(a)
    elif operation == "inverse":
        result = inverse(a)
    elif operation == "determinant":
        return {"operation": operation, "determinant": determinant(a)}
    else:
        raise MatrixError(f"Unsupported matrix operation '{operation}'")
    return {
        "operation": operation,
        "rows": result.rows,
        "cols": result.cols,
        "matrix": result.to_rows(),
    }


__all__ = [
    "BINARY_OPERATIONS",
    "DimensionMismatchError",
    "INVERTIBILITY_TOLERANCE",
    "MatrixError",
    "MatrixOverflowError",
    "NotInvertibleError",
    "NotSquareError",
    "Operation",
    "UNARY_OPERATIONS",
    "add",
    "compute",
    "determinant",
    "inverse",
    "minor",
    "multiply",
    "subtract",
    "transpose",
]

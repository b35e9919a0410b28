"""Exports for the equation solver core."""

from .errors import (
    EquationError,
    EquationOverflowError,
    InvalidLeadingCoefficientError,
    InvalidSystemError,
    SingularSystemError,
)
from .linear import PIVOT_TOLERANCE, format_solution, solve_linear_system
from .polynomial import (
    PolynomialAnalysis,
    QuadraticResult,
    analyze_polynomial,
    format_root,
    solve_quadratic,
)

__all__ = [
    "EquationError",
    "EquationOverflowError",
    "InvalidLeadingCoefficientError",
    "InvalidSystemError",
    "PIVOT_TOLERANCE",
    "PolynomialAnalysis",
    "QuadraticResult",
    "SingularSystemError",
    "analyze_polynomial",
    "format_root",
    "format_solution",
    "solve_linear_system",
    "solve_quadratic",
]

"""Closed-form roots for polynomials of degree two or lower."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Literal, Sequence

from .errors import EquationError, EquationOverflowError, InvalidLeadingCoefficientError

RootKind = Literal["all_reals", "no_solution", "linear", "double", "two_real", "complex"]
AnalysisStatus = Literal["solved", "unsupported_degree"]

ROOT_DECIMALS = 4
ALL_REALS_LABEL = "All real numbers"
NO_SOLUTION_LABEL = "No solution (contradiction)"


def format_root(value: float, decimals: int = ROOT_DECIMALS) -> str:
    """Render a root with a fixed number of fractional digits."""

    if value == 0:
        value = 0.0  # avoid "-0.0000"
    return f"{value:.{decimals}f}"


def _complex_labels(real: float, imaginary: float, decimals: int) -> list[str]:
    re_text = format_root(real, decimals)
    im_text = format_root(abs(imaginary), decimals)
    return [f"{re_text} + {im_text}i", f"{re_text} - {im_text}i"]


@dataclass(frozen=True, slots=True)
class QuadraticResult:
    """Outcome of solving ``a*x^2 + b*x + c = 0``.

    ``roots`` holds the real roots (``+`` root first for two real roots).
    Complex pairs carry ``real`` and ``imaginary`` instead, describing
    ``real ± imaginary*i``.
    """

    kind: RootKind
    roots: tuple[float, ...] = ()
    real: float | None = None
    imaginary: float | None = None
    discriminant: float | None = None

    def labels(self, decimals: int = ROOT_DECIMALS) -> list[str]:
        if self.kind == "all_reals":
            return [ALL_REALS_LABEL]
        if self.kind == "no_solution":
            return []
        if self.kind == "complex":
            return _complex_labels(self.real, self.imaginary, decimals)
        if self.kind == "double":
            return [format_root(self.roots[0], decimals)] * 2
        return [format_root(root, decimals) for root in self.roots]

    def to_dict(self) -> dict[str, object]:
        payload: dict[str, object] = {
            "kind": self.kind,
            "roots": list(self.roots),
            "labels": self.labels(),
            "discriminant": self.discriminant,
        }
        if self.kind == "complex":
            payload["real"] = self.real
            payload["imaginary"] = self.imaginary
        if self.kind == "no_solution":
            payload["message"] = NO_SOLUTION_LABEL
        return payload


def solve_quadratic(a: float, b: float, c: float) -> QuadraticResult:
    """Solve ``a*x^2 + b*x + c = 0`` including the degenerate cases."""

    a, b, c = float(a), float(b), float(c)
    if a == 0:
        if b == 0:
            return QuadraticResult(kind="all_reals" if c == 0 else "no_solution")
        return _finite(QuadraticResult(kind="linear", roots=(-c / b,)))

    discriminant = b * b - 4 * a * c
    if not math.isfinite(discriminant):
        raise EquationOverflowError("Coefficients are too large to solve accurately")
    if discriminant < 0:
        return _finite(
            QuadraticResult(
                kind="complex",
                real=-b / (2 * a),
                imaginary=math.sqrt(-discriminant) / (2 * a),
                discriminant=discriminant,
            )
        )
    if discriminant == 0:
        return _finite(
            QuadraticResult(
                kind="double", roots=(-b / (2 * a),), discriminant=discriminant
            )
        )
    root = math.sqrt(discriminant)
    return _finite(
        QuadraticResult(
            kind="two_real",
            roots=((-b + root) / (2 * a), (-b - root) / (2 * a)),
            discriminant=discriminant,
        )
    )


def _finite(result: QuadraticResult) -> QuadraticResult:
    values = [*result.roots, result.real, result.imaginary]
    if not all(math.isfinite(value) for value in values if value is not None):
        raise EquationOverflowError("A root is too large to represent")
    return result


@dataclass(frozen=True, slots=True)
class PolynomialAnalysis:
    """Roots of a polynomial, or an explicit unsupported-degree marker."""

    degree: int
    status: AnalysisStatus
    roots: tuple[str, ...] = ()
    message: str = ""
    coefficients: tuple[float, ...] = ()

    @property
    def supported(self) -> bool:
        return self.status == "solved"

    def to_dict(self) -> dict[str, object]:
        return {
            "degree": self.degree,
            "status": self.status,
            "roots": list(self.roots),
            "message": self.message,
            "coefficients": list(self.coefficients),
        }


def analyze_polynomial(coefficients: Sequence[float]) -> PolynomialAnalysis:
    """Find the roots of a polynomial given highest-degree coefficient first.

    Degrees one and two are solved in closed form. Degree three and above is
    reported as ``unsupported_degree`` instead of being approximated.
    """

    coeffs = tuple(float(value) for value in coefficients)
    if len(coeffs) < 2:
        raise EquationError("A polynomial needs at least two coefficients")
    if coeffs[0] == 0:
        raise InvalidLeadingCoefficientError("Leading coefficient cannot be zero")

    degree = len(coeffs) - 1
    if degree == 1:
        root = -coeffs[1] / coeffs[0]
        if not math.isfinite(root):
            raise EquationOverflowError("The root is too large to represent")
        return PolynomialAnalysis(
            degree=degree,
            status="solved",
            roots=(format_root(root),),
            coefficients=coeffs,
        )
    if degree == 2:
        quadratic = solve_quadratic(*coeffs)
        if quadratic.kind == "double":
            roots = (format_root(quadratic.roots[0]),)
        else:
            roots = tuple(quadratic.labels())
        return PolynomialAnalysis(
            degree=degree, status="solved", roots=roots, coefficients=coeffs
        )
    return PolynomialAnalysis(
        degree=degree,
        status="unsupported_degree",
        message=(
            f"Closed-form roots are only available up to degree 2; "
            f"degree {degree} requires a numerical method"
        ),
        coefficients=coeffs,
    )


__all__ = [
    "ALL_REALS_LABEL",
    "AnalysisStatus",
    "NO_SOLUTION_LABEL",
    "PolynomialAnalysis",
    "QuadraticResult",
    "ROOT_DECIMALS",
    "RootKind",
    "analyze_polynomial",
    "format_root",
    "solve_quadratic",
]

"""API routes for the Equation Solver plugin."""

from __future__ import annotations

from flask import Blueprint, Response, current_app, request
from pydantic import Field

from common.errors import ComputationAppError, LimitAppError
from common.logging import get_logger
from common.matrix import Matrix, MatrixShapeError
from common.responses import fail, ok, reject
from common.validation import SchemaModel, ValidationError, int_setting, parse_model

from ..core import (
    EquationError,
    EquationOverflowError,
    InvalidLeadingCoefficientError,
    InvalidSystemError,
    SingularSystemError,
    analyze_polynomial,
    format_solution,
    solve_linear_system,
    solve_quadratic,
)

logger = get_logger(__name__)


class LinearPayload(SchemaModel):
    system: list[list[float]] = Field(min_length=1)


class QuadraticPayload(SchemaModel):
    a: float = 0.0
    b: float = 0.0
    c: float = 0.0


class PolynomialPayload(SchemaModel):
    coefficients: list[float] = Field(min_length=2)


def _settings() -> dict:
    return current_app.config.get("PLUGIN_SETTINGS", {}).get("equation_solver", {})


api_bp = Blueprint("equation_solver_api", __name__, url_prefix="/api/equation_solver")


@api_bp.post("/linear")
def linear_endpoint() -> Response:
    raw_payload = request.get_json(silent=True) or {}
    try:
        payload = parse_model(LinearPayload, raw_payload)
    except ValidationError as exc:
        return reject(exc, "equation.invalid_request")

    max_unknowns = int_setting(_settings(), "max_unknowns", default=6)
    if len(payload.system) > max_unknowns:
        return fail(
            LimitAppError(
                message=f"At most {max_unknowns} unknowns are supported",
                code="equation.too_large",
                details={"max_unknowns": max_unknowns},
            )
        )
    try:
        solution = solve_linear_system(Matrix.from_rows(payload.system))
    except (MatrixShapeError, InvalidSystemError) as exc:
        return reject(exc, "equation.invalid_system")
    except SingularSystemError as exc:
        logger.info("linear system rejected: %s", exc)
        return reject(exc, "equation.singular_system", error_cls=ComputationAppError)
    except EquationOverflowError as exc:
        return reject(exc, "equation.overflow", error_cls=ComputationAppError)
    return ok({"solution": solution, "formatted": format_solution(solution)})


@api_bp.post("/quadratic")
def quadratic_endpoint() -> Response:
    raw_payload = request.get_json(silent=True) or {}
    try:
        payload = parse_model(QuadraticPayload, raw_payload)
    except ValidationError as exc:
        return reject(exc, "equation.invalid_request")
    try:
        result = solve_quadratic(payload.a, payload.b, payload.c)
    except EquationOverflowError as exc:
        return reject(exc, "equation.overflow", error_cls=ComputationAppError)
    return ok(result.to_dict())


@api_bp.post("/polynomial")
def polynomial_endpoint() -> Response:
    raw_payload = request.get_json(silent=True) or {}
    try:
        payload = parse_model(PolynomialPayload, raw_payload)
    except ValidationError as exc:
        return reject(exc, "equation.invalid_request")

    max_degree = int_setting(_settings(), "max_degree", default=10)
    if len(payload.coefficients) - 1 > max_degree:
        return fail(
            LimitAppError(
                message=f"Polynomials above degree {max_degree} are not accepted",
                code="equation.too_large",
                details={"max_degree": max_degree},
            )
        )
    try:
        analysis = analyze_polynomial(payload.coefficients)
    except InvalidLeadingCoefficientError as exc:
        return reject(exc, "equation.invalid_leading_coefficient")
    except EquationOverflowError as exc:
        return reject(exc, "equation.overflow", error_cls=ComputationAppError)
    except EquationError as exc:
        return reject(exc, "equation.invalid_polynomial")
    if not analysis.supported:
        logger.info("polynomial of degree %d reported as unsupported", analysis.degree)
    return ok(analysis.to_dict())


blueprints = [api_bp]


__all__ = [
    "blueprints",
    "linear_endpoint",
    "polynomial_endpoint",
    "quadratic_endpoint",
]

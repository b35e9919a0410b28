"""API routes for the Matrix Calculator plugin."""

from __future__ import annotations

from typing import Literal

from flask import Blueprint, Response, current_app, request

from common.errors import ComputationAppError, LimitAppError
from common.logging import get_logger
from common.matrix import Matrix, MatrixShapeError
from common.responses import fail, ok, reject
from common.validation import SchemaModel, ValidationError, int_setting, parse_model

from ..core import (
    DimensionMismatchError,
    MatrixError,
    MatrixOverflowError,
    NotInvertibleError,
    compute,
)

logger = get_logger(__name__)


class ComputePayload(SchemaModel):
    operation: Literal["add", "subtract", "multiply", "transpose", "determinant", "inverse"]
    a: list[list[float]]
    b: list[list[float]] | None = None


def _max_dimension() -> int:
    settings = current_app.config.get("PLUGIN_SETTINGS", {}).get("matrix_calculator", {})
    return int_setting(settings, "max_dimension", default=5)


api_bp = Blueprint("matrix_calculator_api", __name__, url_prefix="/api/matrix_calculator")


@api_bp.post("/compute")
def compute_endpoint() -> Response:
    raw_payload = request.get_json(silent=True) or {}
    try:
        payload = parse_model(ComputePayload, raw_payload)
    except ValidationError as exc:
        return reject(exc, "matrix.invalid_request")
    try:
        a = Matrix.from_rows(payload.a)
        b = Matrix.from_rows(payload.b) if payload.b is not None else None
    except MatrixShapeError as exc:
        return reject(exc, "matrix.invalid_shape")

    limit = _max_dimension()
    for label, matrix in (("A", a), ("B", b)):
        if matrix is not None and max(matrix.shape) > limit:
            return fail(
                LimitAppError(
                    message=f"Matrix {label} exceeds the {limit}x{limit} size limit",
                    code="matrix.too_large",
                    details={"max_dimension": limit},
                )
            )

    try:
        result = compute(payload.operation, a, b)
    except DimensionMismatchError as exc:
        logger.info("matrix %s rejected: %s", payload.operation, exc)
        return reject(exc, "matrix.dimension_mismatch", error_cls=ComputationAppError)
    except NotInvertibleError as exc:
        logger.info("matrix inverse rejected: %s", exc)
        return reject(exc, "matrix.not_invertible", error_cls=ComputationAppError)
    except MatrixOverflowError as exc:
        logger.info("matrix %s overflowed: %s", payload.operation, exc)
        return reject(exc, "matrix.overflow", error_cls=ComputationAppError)
    except MatrixError as exc:
        return reject(exc, "matrix.invalid_request")
    return ok(result)


blueprints = [api_bp]


__all__ = ["blueprints", "compute_endpoint"]

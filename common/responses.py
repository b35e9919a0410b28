"""Standardized JSON response helpers."""

from __future__ import annotations

from typing import Any, Mapping

from flask import Response, jsonify

from .errors import AppError, ValidationAppError


def ok(data: Any, *, status: int = 200) -> Response:
    """Return a success envelope."""

    response = jsonify({"success": True, "data": data})
    response.status_code = status
    return response


def fail(error: AppError | Mapping[str, Any], *, status: int | None = None) -> Response:
    """Return a standardized failure envelope."""

    if isinstance(error, AppError):
        response = jsonify({"success": False, "error": error.to_dict()})
        response.status_code = status or error.status_code
        return response

    response = jsonify({"success": False, "error": dict(error)})
    response.status_code = status or 400
    return response


def reject(
    exc: Exception,
    code: str,
    *,
    error_cls: type[AppError] = ValidationAppError,
    details: Mapping[str, Any] | None = None,
) -> Response:
    """Wrap a domain exception into a failure envelope under ``code``."""

    if details is None:
        details = getattr(exc, "details", None)
    return fail(error_cls(message=str(exc), code=code, details=details))


__all__ = ["ok", "fail", "reject"]

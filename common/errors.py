"""Error types carried in failed API responses."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, MutableMapping


@dataclass(slots=True)
class AppError(Exception):
    """Base application error with a JSON friendly payload."""

    message: str
    code: str = "error"
    status_code: int = 400
    details: Mapping[str, Any] | None = None

    def to_dict(self) -> Mapping[str, Any]:
        payload: MutableMapping[str, Any] = {
            "code": self.code,
            "message": self.message,
            "details": dict(self.details or {}),
        }
        return payload


@dataclass(slots=True)
class ValidationAppError(AppError):
    """The request could not be parsed or names something that does not exist."""

    code: str = "validation_error"
    status_code: int = 400


@dataclass(slots=True)
class ComputationAppError(AppError):
    """Well-formed input for which the requested result does not exist.

    Singular systems, non-invertible matrices and incompatible operand
    shapes end up here.
    """

    code: str = "computation_error"
    status_code: int = 422


@dataclass(slots=True)
class LimitAppError(ValidationAppError):
    """Input larger than the configured cap for a calculator."""

    code: str = "limit_exceeded"
    status_code: int = 413


@dataclass(slots=True)
class NotFoundAppError(AppError):
    code: str = "not_found"
    status_code: int = 404


@dataclass(slots=True)
class InternalAppError(AppError):
    """Generic internal error wrapper to avoid leaking implementation details."""

    code: str = "internal_error"
    status_code: int = 500


def ensure_app_error(error: AppError | Exception, *, fallback_code: str) -> AppError:
    """Coerce arbitrary exceptions into :class:`AppError` instances."""

    if isinstance(error, AppError):
        return error
    return InternalAppError(code=fallback_code, message="Unexpected server error")


__all__ = [
    "AppError",
    "ComputationAppError",
    "InternalAppError",
    "LimitAppError",
    "NotFoundAppError",
    "ValidationAppError",
    "ensure_app_error",
]

"""Validation primitives for plugin APIs."""

from __future__ import annotations

from typing import Any, Mapping, TypeVar

import pydantic
from pydantic import BaseModel


class ValidationError(ValueError):
    """Raised when validation fails."""

    def __init__(self, message: str, *, details: Any | None = None):
        super().__init__(message)
        self.details = details


class SchemaModel(BaseModel):
    """Strict base model for request/response validation."""

    model_config = pydantic.ConfigDict(
        extra="forbid", str_strip_whitespace=True, allow_inf_nan=False
    )


TModel = TypeVar("TModel", bound=SchemaModel)


def parse_model(model: type[TModel], payload: Mapping[str, Any] | None) -> TModel:
    payload = payload or {}
    try:
        return model.model_validate(payload)
    except pydantic.ValidationError as exc:
        raise ValidationError(
            "Invalid request payload",
            details={"errors": exc.errors(include_url=False, include_context=False)},
        ) from exc


def int_setting(
    settings: Mapping[str, Any] | None,
    key: str,
    *,
    default: int,
    minimum: int = 1,
) -> int:
    """Read an integer limit from plugin settings.

    ``settings`` is usually a plugin block from ``config.yml``. Missing or
    malformed values fall back to ``default`` so a bad config never breaks a
    request; the result is clamped to ``minimum``.
    """

    value = default
    if settings:
        raw = settings.get(key)
        if raw is not None:
            try:
                value = int(float(raw))
            except (TypeError, ValueError):
                value = default
    return max(value, minimum)


__all__ = [
    "SchemaModel",
    "ValidationError",
    "int_setting",
    "parse_model",
]

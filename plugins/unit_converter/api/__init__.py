"""Unit converter API with standardized responses."""

from __future__ import annotations

from typing import Literal

from flask import Blueprint, Response, request

from common.errors import ComputationAppError
from common.logging import get_logger
from common.responses import ok, reject
from common.validation import SchemaModel, ValidationError, parse_model

from ..core import (
    BadInputError,
    ConversionOverflowError,
    UnitNotFoundError,
    UnknownCategoryError,
    UnknownTemperatureUnitError,
    convert,
    describe_category,
    list_categories,
    list_units,
)

logger = get_logger(__name__)


class PrecisionPayload(SchemaModel):
    sig_figs: int | None = None
    decimals: int | None = None
    notation: Literal["auto", "scientific"] = "auto"


class ConvertPayload(PrecisionPayload):
    value: float | int | str
    from_unit: str
    to_unit: str
    category: str


api_bp = Blueprint("unit_converter_api", __name__, url_prefix="/api/unit_converter")


@api_bp.get("/categories")
def categories() -> Response:
    payload = [describe_category(key) for key in list_categories()]
    return ok({"categories": payload})


@api_bp.get("/units/<category>")
def units_endpoint(category: str) -> Response:
    try:
        units = list_units(category)
    except UnknownCategoryError as exc:
        return reject(exc, "unit.invalid_category")
    return ok({"category": category, "units": units})


def _parse_precision(payload: PrecisionPayload) -> dict:
    return {
        "sig_figs": payload.sig_figs,
        "decimals": payload.decimals,
        "notation": payload.notation,
    }


@api_bp.post("/convert")
def convert_endpoint() -> Response:
    raw_payload = request.get_json(silent=True) or {}
    try:
        payload = parse_model(ConvertPayload, raw_payload)
    except ValidationError as exc:
        return reject(exc, "unit.invalid_request")
    try:
        result = convert(
            payload.value,
            payload.from_unit,
            payload.to_unit,
            payload.category,
            **_parse_precision(payload),
        )
    except UnknownCategoryError as exc:
        return reject(exc, "unit.invalid_category")
    except UnitNotFoundError as exc:
        logger.info("unit lookup failed: %s", exc)
        return reject(exc, "unit.not_found")
    except UnknownTemperatureUnitError as exc:
        return reject(exc, "unit.unknown_temperature_unit")
    except ConversionOverflowError as exc:
        return reject(exc, "unit.overflow", error_cls=ComputationAppError)
    except BadInputError as exc:
        return reject(exc, "unit.invalid_value")
    return ok(result)


blueprints = [api_bp]


__all__ = [
    "blueprints",
    "categories",
    "units_endpoint",
    "convert_endpoint",
]

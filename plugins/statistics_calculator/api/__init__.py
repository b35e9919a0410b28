"""API routes for the Statistics Calculator plugin."""

from __future__ import annotations

from flask import Blueprint, Response, current_app, request
from pydantic import Field

from common.errors import ComputationAppError, LimitAppError
from common.logging import get_logger
from common.responses import fail, ok, reject
from common.validation import SchemaModel, ValidationError, int_setting, parse_model

from ..core import (
    NoValidDataError,
    StatisticsError,
    StatisticsOverflowError,
    describe,
    parse_sample,
)

logger = get_logger(__name__)


class AnalyzePayload(SchemaModel):
    data: str = Field(max_length=1_000_000)


def _max_values() -> int:
    settings = current_app.config.get("PLUGIN_SETTINGS", {}).get("statistics_calculator", {})
    return int_setting(settings, "max_values", default=10_000)


api_bp = Blueprint("statistics_calculator_api", __name__, url_prefix="/api/statistics_calculator")


@api_bp.post("/analyze")
def analyze_endpoint() -> Response:
    raw_payload = request.get_json(silent=True) or {}
    try:
        payload = parse_model(AnalyzePayload, raw_payload)
    except ValidationError as exc:
        return reject(exc, "stats.invalid_request")

    values = parse_sample(payload.data)
    limit = _max_values()
    if len(values) > limit:
        return fail(
            LimitAppError(
                message=f"At most {limit} values can be analysed at once",
                code="stats.too_large",
                details={"max_values": limit},
            )
        )
    try:
        result = describe(values)
    except NoValidDataError as exc:
        logger.info("statistics input rejected: %s", exc)
        return reject(exc, "stats.no_valid_data")
    except StatisticsOverflowError as exc:
        return reject(exc, "stats.overflow", error_cls=ComputationAppError)
    except StatisticsError as exc:
        return reject(exc, "stats.invalid_request")
    return ok({"statistics": result.to_dict(), "formatted": result.formatted()})


blueprints = [api_bp]


__all__ = ["blueprints", "analyze_endpoint"]

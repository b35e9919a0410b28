"""Facade for the unit converter core utilities."""

from __future__ import annotations

from functools import lru_cache
from typing import Dict, List, Optional

from .converter import (
    BadInputError,
    ConversionError,
    ConversionOverflowError,
    Converter,
    UnitNotFoundError,
    UnknownCategoryError,
    UnknownTemperatureUnitError,
    describe_conversion,
    format_value,
    resolve_category,
)
from .registry import UNIT_TABLE, Unit, UnitCategory


@lru_cache(maxsize=1)
def _converter() -> Converter:
    return Converter()


def list_categories() -> List[str]:
    """Return the supported unit categories in display order."""

    return _converter().list_categories()


def list_units(category: UnitCategory | str) -> List[Dict[str, object]]:
    """Return name, symbol and factor for the units of ``category``."""

    return _converter().list_units(category)


def describe_category(category: UnitCategory | str) -> Dict[str, object]:
    """Return title, base unit and unit list of one category."""

    resolved = resolve_category(category)
    definition = UNIT_TABLE[resolved]
    return {
        "key": resolved.value,
        "title": definition.title,
        "base_unit": definition.base_unit,
        "units": list_units(resolved),
    }


def convert_value(
    value: float,
    from_unit: str,
    to_unit: str,
    category: UnitCategory | str,
) -> float:
    """Convert ``value`` and return the bare number."""

    return float(_converter().convert(value, from_unit, to_unit, category)["result"])


def convert(
    value: float | str,
    from_unit: str,
    to_unit: str,
    category: UnitCategory | str,
    *,
    sig_figs: Optional[int] = None,
    decimals: Optional[int] = None,
    notation: str = "auto",
) -> Dict[str, object]:
    """Convert ``value`` between units and format the result."""

    result = _converter().convert(value, from_unit, to_unit, category)
    source: Unit = result["from"]
    target: Unit = result["to"]
    formatted = format_value(
        result["result"], sig_figs=sig_figs, decimals=decimals, notation=notation
    )
    return {
        "value": result["result"],
        "category": result["category"],
        "from_unit": source.name,
        "to_unit": target.name,
        "unit": target.symbol,
        "formatted": formatted,
        "formula": describe_conversion(
            UnitCategory(result["category"]),
            source,
            target,
            result["value"],
            result["result"],
        ),
    }


__all__ = [
    "BadInputError",
    "ConversionError",
    "ConversionOverflowError",
    "UnitCategory",
    "UnitNotFoundError",
    "UnknownCategoryError",
    "UnknownTemperatureUnitError",
    "convert",
    "convert_value",
    "describe_category",
    "list_categories",
    "list_units",
]

"""Conversion utilities backed by the static unit table."""

from __future__ import annotations

import math
from decimal import Decimal, InvalidOperation
from typing import Dict, List, Optional

from .registry import UNIT_TABLE, Unit, UnitCategory, find_unit


class ConversionError(ValueError):
    """Base exception for conversion failures."""


class BadInputError(ConversionError):
    """Raised when user supplied values cannot be normalised."""


class UnknownCategoryError(BadInputError):
    """Raised when a category name is not part of the table."""


class UnitNotFoundError(ConversionError):
    """Raised when a unit name or symbol does not resolve in its category."""


class UnknownTemperatureUnitError(ConversionError):
    """Raised when a temperature unit has no affine formula."""


class ConversionOverflowError(ConversionError):
    """Raised when a converted value leaves the range of finite floats."""


_TEMPERATURE_FORMULAS = {
    ("Celsius", "Fahrenheit"): "{v}°C × (9/5) + 32 = {r}°F",
    ("Fahrenheit", "Celsius"): "({v}°F - 32) × (5/9) = {r}°C",
    ("Celsius", "Kelvin"): "{v}°C + 273.15 = {r}K",
    ("Kelvin", "Celsius"): "{v}K - 273.15 = {r}°C",
    ("Fahrenheit", "Kelvin"): "({v}°F - 32) × (5/9) + 273.15 = {r}K",
    ("Kelvin", "Fahrenheit"): "({v}K - 273.15) × (9/5) + 32 = {r}°F",
}


def resolve_category(category: UnitCategory | str) -> UnitCategory:
    if isinstance(category, UnitCategory):
        return category
    try:
        return UnitCategory(str(category).strip().lower())
    except ValueError as exc:
        raise UnknownCategoryError(f"Unknown unit category '{category}'.") from exc


def _to_celsius(value: float, unit: Unit) -> float:
    if unit.name == "Celsius":
        return value
    if unit.name == "Fahrenheit":
        return (value - 32) * 5 / 9
    if unit.name == "Kelvin":
        return value - 273.15
    raise UnknownTemperatureUnitError(f"Unknown temperature unit '{unit.name}'.")


def _from_celsius(celsius: float, unit: Unit) -> float:
    if unit.name == "Celsius":
        return celsius
    if unit.name == "Fahrenheit":
        return celsius * 9 / 5 + 32
    if unit.name == "Kelvin":
        return celsius + 273.15
    raise UnknownTemperatureUnitError(f"Unknown temperature unit '{unit.name}'.")


class Converter:
    """High level conversion API used by the Flask blueprint."""

    # ---- Listing helpers -------------------------------------------------
    def list_categories(self) -> List[str]:
        return [category.value for category in UnitCategory]

    def list_units(self, category: UnitCategory | str) -> List[Dict[str, object]]:
        resolved = resolve_category(category)
        return [
            {"name": unit.name, "symbol": unit.symbol, "factor": unit.factor}
            for unit in UNIT_TABLE[resolved].units
        ]

    # ---- Conversion helpers ----------------------------------------------
    def convert(
        self,
        value: float | str,
        from_unit: str,
        to_unit: str,
        category: UnitCategory | str,
    ) -> Dict[str, object]:
        numeric_value = self._coerce_value(value)
        resolved = resolve_category(category)
        source = self._lookup(resolved, from_unit)
        target = self._lookup(resolved, to_unit)
        if resolved is UnitCategory.TEMPERATURE:
            result = _from_celsius(_to_celsius(numeric_value, source), target)
        else:
            result = (numeric_value / source.factor) * target.factor
        if not math.isfinite(result):
            raise ConversionOverflowError("Converted value is too large to represent")
        return {
            "result": result,
            "category": resolved.value,
            "from": source,
            "to": target,
            "value": numeric_value,
        }

    # ---- Internal utilities ----------------------------------------------
    def _lookup(self, category: UnitCategory, label: str) -> Unit:
        if not isinstance(label, str) or not label:
            raise UnitNotFoundError("Unit must be a non-empty string.")
        unit = find_unit(category, label)
        if unit is None:
            raise UnitNotFoundError(
                f"Unit '{label}' not found in category {category.value}."
            )
        return unit

    def _coerce_value(self, value: float | str) -> float:
        if isinstance(value, bool):
            raise BadInputError("Value must be a number or numeric string.")
        if isinstance(value, (int, float)):
            if math.isnan(value) or math.isinf(value):
                raise BadInputError("Value must be a finite number.")
            return float(value)
        if not isinstance(value, str):
            raise BadInputError("Value must be a number or numeric string.")
        text = value.strip()
        if len(text) == 0 or len(text) > 64:
            raise BadInputError("Value string must be between 1 and 64 characters.")
        try:
            parsed = Decimal(text)
        except InvalidOperation as exc:
            raise BadInputError("Value is not a valid number.") from exc
        if parsed.is_nan() or parsed.is_infinite():
            raise BadInputError("Value must be a finite number.")
        return float(parsed)


def describe_conversion(
    category: UnitCategory, source: Unit, target: Unit, value: float, result: float
) -> str:
    """Return a one-line explanation of how ``result`` was obtained."""

    shown_value = format_value(value)
    shown_result = format_value(result)
    if category is UnitCategory.TEMPERATURE:
        template = _TEMPERATURE_FORMULAS.get((source.name, target.name))
        if template:
            return template.format(v=shown_value, r=shown_result)
    return f"{shown_value} {source.symbol} = {shown_result} {target.symbol}"


def format_value(
    value: float,
    *,
    sig_figs: Optional[int] = None,
    decimals: Optional[int] = None,
    notation: str = "auto",
) -> str:
    """Format a floating point number according to user preferences.

    The default rendering keeps up to ten fractional digits and drops
    trailing zeros.
    """

    if decimals is not None:
        if decimals < 0:
            raise BadInputError("Decimal precision must be non-negative.")
        return f"{value:.{decimals}f}"
    if notation == "scientific":
        precision = sig_figs - 1 if sig_figs else 6
        return f"{value:.{max(0, precision)}e}"
    if sig_figs is not None:
        if sig_figs <= 0:
            raise BadInputError("Significant figures must be positive.")
        return f"{value:.{sig_figs}g}"
    if value == 0:
        return "0"
    text = f"{value:.10f}".rstrip("0").rstrip(".")
    if text in ("0", "-0"):
        # Magnitude below the fixed-point resolution.
        return f"{value:.6g}"
    return text


__all__ = [
    "BadInputError",
    "ConversionError",
    "ConversionOverflowError",
    "Converter",
    "UnitNotFoundError",
    "UnknownCategoryError",
    "UnknownTemperatureUnitError",
    "describe_conversion",
    "format_value",
    "resolve_category",
]

"""Static unit table for the unit converter core.

Every factor expresses how many of that unit make up one base unit of the
category (the entry with factor ``1``). Temperature units carry a factor of
``1`` as a placeholder only; they are converted with affine formulas.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping


class UnitCategory(str, Enum):
    LENGTH = "length"
    WEIGHT = "weight"
    TEMPERATURE = "temperature"
    AREA = "area"
    VOLUME = "volume"
    TIME = "time"
    SPEED = "speed"
    DATA = "data"


@dataclass(frozen=True, slots=True)
class Unit:
    """A unit exposed to the UI."""

    name: str
    symbol: str
    factor: float

    def matches(self, label: str) -> bool:
        return label == self.name or label == self.symbol


@dataclass(frozen=True, slots=True)
class CategoryDefinition:
    title: str
    base_unit: str
    units: tuple[Unit, ...]


_TABLE: dict[UnitCategory, CategoryDefinition] = {
    UnitCategory.LENGTH: CategoryDefinition(
        "Length",
        "meter",
        (
            Unit("Meter", "m", 1),
            Unit("Kilometer", "km", 0.001),
            Unit("Centimeter", "cm", 100),
            Unit("Millimeter", "mm", 1000),
            Unit("Mile", "mi", 0.000621371),
            Unit("Yard", "yd", 1.09361),
            Unit("Foot", "ft", 3.28084),
            Unit("Inch", "in", 39.3701),
        ),
    ),
    UnitCategory.WEIGHT: CategoryDefinition(
        "Weight",
        "kilogram",
        (
            Unit("Kilogram", "kg", 1),
            Unit("Gram", "g", 1000),
            Unit("Milligram", "mg", 1_000_000),
            Unit("Pound", "lb", 2.20462),
            Unit("Ounce", "oz", 35.274),
            Unit("Ton", "t", 0.001),
        ),
    ),
    UnitCategory.TEMPERATURE: CategoryDefinition(
        "Temperature",
        "celsius",
        (
            Unit("Celsius", "°C", 1),
            Unit("Fahrenheit", "°F", 1),
            Unit("Kelvin", "K", 1),
        ),
    ),
    UnitCategory.AREA: CategoryDefinition(
        "Area",
        "square meter",
        (
            Unit("Square Meter", "m²", 1),
            Unit("Square Kilometer", "km²", 0.000001),
            Unit("Square Centimeter", "cm²", 10000),
            Unit("Square Mile", "mi²", 3.861e-7),
            Unit("Square Yard", "yd²", 1.19599),
            Unit("Square Foot", "ft²", 10.7639),
            Unit("Square Inch", "in²", 1550),
            Unit("Acre", "ac", 0.000247105),
            Unit("Hectare", "ha", 0.0001),
        ),
    ),
    UnitCategory.VOLUME: CategoryDefinition(
        "Volume",
        "cubic meter",
        (
            Unit("Cubic Meter", "m³", 1),
            Unit("Liter", "L", 1000),
            Unit("Milliliter", "mL", 1_000_000),
            Unit("Gallon (US)", "gal", 264.172),
            Unit("Quart (US)", "qt", 1056.69),
            Unit("Pint (US)", "pt", 2113.38),
            Unit("Cup (US)", "cup", 4226.75),
            Unit("Fluid Ounce (US)", "fl oz", 33814),
            Unit("Cubic Inch", "in³", 61023.7),
        ),
    ),
    UnitCategory.TIME: CategoryDefinition(
        "Time",
        "second",
        (
            Unit("Second", "s", 1),
            Unit("Millisecond", "ms", 1000),
            Unit("Minute", "min", 1 / 60),
            Unit("Hour", "h", 1 / 3600),
            Unit("Day", "d", 1 / 86400),
            Unit("Week", "wk", 1 / 604800),
            Unit("Month (avg)", "mo", 1 / 2628000),
            Unit("Year (365 days)", "yr", 1 / 31536000),
        ),
    ),
    UnitCategory.SPEED: CategoryDefinition(
        "Speed",
        "meter per second",
        (
            Unit("Meter per second", "m/s", 1),
            Unit("Kilometer per hour", "km/h", 3.6),
            Unit("Mile per hour", "mph", 2.23694),
            Unit("Foot per second", "ft/s", 3.28084),
            Unit("Knot", "kn", 1.94384),
        ),
    ),
    UnitCategory.DATA: CategoryDefinition(
        "Data",
        "byte",
        (
            Unit("Byte", "B", 1),
            Unit("Kilobyte", "KB", 1 / 1024),
            Unit("Megabyte", "MB", 1 / 1048576),
            Unit("Gigabyte", "GB", 1 / 1073741824),
            Unit("Terabyte", "TB", 1 / 1099511627776),
            Unit("Bit", "bit", 8),
            Unit("Kilobit", "Kbit", 8 / 1024),
            Unit("Megabit", "Mbit", 8 / 1048576),
            Unit("Gigabit", "Gbit", 8 / 1073741824),
        ),
    ),
}

UNIT_TABLE: Mapping[UnitCategory, CategoryDefinition] = MappingProxyType(_TABLE)


def find_unit(category: UnitCategory, label: str) -> Unit | None:
    """Return the first unit whose name or symbol equals ``label``."""

    for unit in UNIT_TABLE[category].units:
        if unit.matches(label):
            return unit
    return None


__all__ = [
    "CategoryDefinition",
    "UNIT_TABLE",
    "Unit",
    "UnitCategory",
    "find_unit",
]

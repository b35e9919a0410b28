"""Unit converter plugin."""

manifest = {
    "title": "Unit Converter",
    "summary": "Length, weight, area, volume, time, speed and data conversions plus affine temperature scales.",
    "blueprint": "unit_converter",
    "category": "General Utilities",
}


__all__ = ["manifest"]

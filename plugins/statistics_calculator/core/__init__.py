"""Exports for the statistics calculator core."""

from .engine import (
    NoValidDataError,
    StatisticsError,
    StatisticsOverflowError,
    StatsResult,
    analyze,
    describe,
    format_number,
    parse_sample,
)

__all__ = [
    "NoValidDataError",
    "StatisticsError",
    "StatisticsOverflowError",
    "StatsResult",
    "analyze",
    "describe",
    "format_number",
    "parse_sample",
]

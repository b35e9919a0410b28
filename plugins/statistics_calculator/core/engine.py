"""Descriptive statistics over a free-form list of numbers."""

from __future__ import annotations

import math
import re
from collections import Counter
from dataclasses import asdict, dataclass
from typing import Sequence


class StatisticsError(ValueError):
    """Base exception for statistics calculator failures."""


class NoValidDataError(StatisticsError):
    """Raised when the input contains no parsable number."""


class StatisticsOverflowError(StatisticsError):
    """Raised when a summary value leaves the range of finite floats."""


_SEPARATORS = re.compile(r"[\s,]+")
_NUMBER = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$")
_DISPLAY_DECIMALS = 4


@dataclass(frozen=True, slots=True)
class StatsResult:
    """Summary of a sample.

    ``variance`` and ``std_dev`` are population figures (divisor ``count``).
    ``mode`` is empty when every distinct value occurs equally often.
    """

    count: int
    sum: float
    min: float
    max: float
    range: float
    mean: float
    median: float
    variance: float
    std_dev: float
    mode: tuple[float, ...]

    def to_dict(self) -> dict[str, object]:
        payload = asdict(self)
        payload["mode"] = list(self.mode)
        return payload

    def formatted(self, decimals: int = _DISPLAY_DECIMALS) -> dict[str, object]:
        """Display strings with trailing zeros trimmed."""

        payload: dict[str, object] = {
            key: format_number(value, decimals)
            for key, value in self.to_dict().items()
            if key != "mode"
        }
        payload["mode"] = [format_number(value, decimals) for value in self.mode]
        return payload


def format_number(value: float, decimals: int = _DISPLAY_DECIMALS) -> str:
    if value == 0:
        value = 0.0
    text = f"{value:.{decimals}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def parse_sample(text: str) -> list[float]:
    """Split on whitespace and commas and keep the finite numeric tokens."""

    if not isinstance(text, str):
        raise StatisticsError("Input must be text")
    values: list[float] = []
    for token in _SEPARATORS.split(text):
        if not token or not _NUMBER.match(token):
            continue
        value = float(token)
        if math.isfinite(value):
            values.append(value)
    return values


def _median(ordered: Sequence[float]) -> float:
    n = len(ordered)
    middle = n // 2
    if n % 2 == 0:
        return (ordered[middle - 1] + ordered[middle]) / 2
    return ordered[middle]


def _modes(values: Sequence[float]) -> tuple[float, ...]:
    frequency = Counter(values)
    highest = max(frequency.values())
    modes = sorted(value for value, count in frequency.items() if count == highest)
    # A tie across every distinct value (all unique included) means no mode.
    if len(modes) == len(frequency):
        return ()
    return tuple(modes)


def describe(values: Sequence[float]) -> StatsResult:
    """Compute the summary for an already parsed sample."""

    data = [float(value) for value in values]
    if not data:
        raise NoValidDataError("No valid numeric data found")
    ordered = sorted(data)
    count = len(data)
    total = sum(data)
    mean = total / count
    # Multiplication overflows to inf where ** would raise OverflowError.
    variance = sum((value - mean) * (value - mean) for value in data) / count
    spread = ordered[-1] - ordered[0]
    if not all(math.isfinite(value) for value in (total, spread, variance)):
        raise StatisticsOverflowError("Values are too large to summarise")
    return StatsResult(
        count=count,
        sum=total,
        min=ordered[0],
        max=ordered[-1],
        range=spread,
        mean=mean,
        median=_median(ordered),
        variance=variance,
        std_dev=math.sqrt(variance),
        mode=_modes(data),
    )


def analyze(raw_input: str) -> StatsResult:
    """Parse ``raw_input`` and summarise the numbers it contains."""

    return describe(parse_sample(raw_input))


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

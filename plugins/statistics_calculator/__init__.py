"""Statistics Calculator plugin manifest."""

manifest = {
    "title": "Statistics Calculator",
    "summary": "Count, mean, median, mode, range, and population variance for pasted numeric data.",
    "category": "Mathematics",
    "blueprint": "statistics_calculator",
}

__all__ = ["manifest"]

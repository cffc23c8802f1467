"""
Output formatters for reflection results.

Provides:
- Human-readable text output
- JSON for coverage tools and other machine consumers
"""

from scriptreflect.formatters.text import TextFormatter
from scriptreflect.formatters.json_formatter import JSONFormatter

__all__ = [
    "TextFormatter",
    "JSONFormatter",
    "get_formatter",
]


def get_formatter(format_name: str, **options):
    """Get a formatter by name."""
    formatters = {
        "text": TextFormatter,
        "json": JSONFormatter,
    }

    formatter_class = formatters.get(format_name.lower())
    if formatter_class:
        return formatter_class(**options)

    raise ValueError(f"Unknown format: {format_name}")

"""Date formatting runtime.

Provides pattern resolution, field rendering, and the DateFormatter API.
Depends on the syntax package for parsing and the data package for
locale data.

Python 3.13+.
"""

from .cache import PatternCache
from .date_value import DateInput, DateValue, days_in_month
from .formatter import DateFormatter, FormatOptions
from .renderer import FieldRenderer
from .resolver import FallbackInfo, PatternResolver, ResolvedPattern

__all__ = [
    "DateFormatter",
    "DateInput",
    "DateValue",
    "FallbackInfo",
    "FieldRenderer",
    "FormatOptions",
    "PatternCache",
    "PatternResolver",
    "ResolvedPattern",
    "days_in_month",
]

"""Enumerations for cldrdates type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, so ``FormatLength.SHORT == "short"``
and mapping lookups keyed by members also accept plain strings.

Python 3.13+.
"""

from enum import StrEnum

__all__ = [
    "FieldKind",
    "FormatLength",
    "SymbolWidth",
]


class FormatLength(StrEnum):
    """Named CLDR date format length.

    StrEnum provides automatic string conversion: str(FormatLength.FULL) == "full"
    """

    FULL = "full"
    """Weekday, wide month, day, year: Monday, July 11, 2016"""

    LONG = "long"
    """Wide month, day, year: July 11, 2016"""

    MEDIUM = "medium"
    """Abbreviated month, day, year: Jul 11, 2016"""

    SHORT = "short"
    """All numeric: 7/11/16"""


class FieldKind(StrEnum):
    """Kind of date field a pattern letter run refers to."""

    ERA = "era"
    """G: AD, Anno Domini, A"""

    YEAR = "year"
    """y: 2016, 16"""

    MONTH = "month"
    """M: 7, 07, Jul, July, J"""

    DAY = "day"
    """d: 1, 01"""

    WEEKDAY = "weekday"
    """E: Mon, Monday, M"""


class SymbolWidth(StrEnum):
    """Display width of a localized symbol name."""

    WIDE = "wide"
    ABBREVIATED = "abbreviated"
    NARROW = "narrow"

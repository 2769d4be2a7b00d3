"""Shared constants for cldrdates.

This module provides centralized configuration constants used across the
syntax, data and runtime packages. Placing constants here avoids circular
imports and provides a single source of truth.

Python 3.13+. Zero external dependencies.
"""

from types import MappingProxyType

from cldrdates.enums import FieldKind, FormatLength

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Locale data defaults
    "DEFAULT_CALENDAR",
    "DEFAULT_FORMAT_LENGTH",
    "LOCALE_SEPARATOR",
    # Pattern syntax
    "FIELD_LETTERS",
    "MAX_FIELD_WIDTH",
    "QUOTE",
    # Cache limits
    "MAX_PATTERN_CACHE_SIZE",
    "MAX_LOCALE_CACHE_SIZE",
]

# ============================================================================
# LOCALE DATA DEFAULTS
# ============================================================================

# Calendar used when neither the caller nor the locale data names one.
# Gregorian is the only calendar guaranteed present for every CLDR locale.
DEFAULT_CALENDAR: str = "gregorian"

# Length used when locale data does not declare a default for a calendar.
DEFAULT_FORMAT_LENGTH: FormatLength = FormatLength.FULL

# Canonical separator between locale subtags after normalization.
LOCALE_SEPARATOR: str = "_"

# ============================================================================
# PATTERN SYNTAX
# ============================================================================

# Supported CLDR pattern letters. Every other ASCII letter is reserved by
# TR35 and rejected when it appears outside quotes.
FIELD_LETTERS: MappingProxyType[str, FieldKind] = MappingProxyType(
    {
        "G": FieldKind.ERA,
        "y": FieldKind.YEAR,
        "M": FieldKind.MONTH,
        "d": FieldKind.DAY,
        "E": FieldKind.WEEKDAY,
    }
)

# Longer letter runs are accepted and clamped to this width.
MAX_FIELD_WIDTH: int = 5

QUOTE: str = "'"

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum parsed patterns held by a PatternCache.
# CLDR defines four lengths per calendar; 256 covers dozens of locales plus
# caller-supplied custom patterns.
MAX_PATTERN_CACHE_SIZE: int = 256

# Maximum cached Babel Locale objects (used while loading CLDR data).
MAX_LOCALE_CACHE_SIZE: int = 128

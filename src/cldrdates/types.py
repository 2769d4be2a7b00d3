"""Type aliases for the date formatting domain.

Provides semantic type aliases used throughout the package and by user code
when annotating DateFormatter call sites.

Python 3.13+. Zero external dependencies.
"""

from typing import TypeAlias

__all__ = [
    "CalendarName",
    "LocaleKey",
    "Pattern",
]

LocaleKey: TypeAlias = str
"""Normalized locale key (e.g., 'en', 'en_gb', 'zh_hant_tw').

Only produced by ``cldrdates.locale_utils.normalize_locale``.
"""

CalendarName: TypeAlias = str
"""CLDR calendar system identifier (e.g., 'gregorian', 'buddhist')."""

Pattern: TypeAlias = str
"""Raw CLDR date pattern text (e.g., 'EEEE, MMMM d, y')."""

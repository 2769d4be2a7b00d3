"""Hypothesis strategies for cldrdates property-based testing.

Usage:
    from tests.strategies import date_values, supported_patterns
    from tests.strategies.dates import locale_spellings

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - date_values, invalid_date_triples
    - supported_patterns
    - locale_spellings
"""

from .dates import (
    date_values,
    format_lengths,
    invalid_date_triples,
    locale_spellings,
    locale_text,
    reasonable_dates,
    supported_patterns,
    unsupported_letters,
)

__all__ = [
    "date_values",
    "format_lengths",
    "invalid_date_triples",
    "locale_spellings",
    "locale_text",
    "reasonable_dates",
    "supported_patterns",
    "unsupported_letters",
]

"""Diagnostic system for date formatting errors.

Provides structured error diagnostics with codes, hints, and help URLs.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    DateFormatError,
    FormatLengthMissingError,
    InvalidDateValueError,
    LocaleDataError,
    LocaleDataMissingError,
    MalformedPatternError,
    PatternError,
    SymbolMissingError,
    UnsupportedPatternFieldError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "DateFormatError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "FormatLengthMissingError",
    "InvalidDateValueError",
    "LocaleDataError",
    "LocaleDataMissingError",
    "MalformedPatternError",
    "OutputFormat",
    "PatternError",
    "SymbolMissingError",
    "UnsupportedPatternFieldError",
]

"""cldrdates - Locale-aware date formatting from CLDR data.

Formats calendar dates using the named date patterns (full, long, medium,
short) and the month, weekday and era names published by the Unicode
Common Locale Data Repository. Locale data comes from Babel or from a
JSON bundle and is held in an immutable store.

Public API:
    DateFormatter - Format dates for a locale
    FormatOptions - Calendar and length selection
    FormatLength - full / long / medium / short
    DateValue - Validated (year, month, day) date
    LocaleDataStore - Immutable locale data
    load_babel_store - Build a store from Babel's CLDR data
    load_json_store - Build a store from a JSON bundle
    parse_pattern - Parse a CLDR date pattern into tokens
    normalize_locale - Canonical locale key ("en-US" -> "en_us")
    fallback_chain - Locale keys tried for a locale

Exceptions:
    DateFormatError - Base exception class
    LocaleDataError - Missing locale, length or symbol data
    PatternError - Unsupported or malformed pattern
    InvalidDateValueError - Bad date input

Submodules:
    cldrdates.diagnostics - Error types, codes and formatting
    cldrdates.data - Store building blocks and loaders
    cldrdates.syntax - Pattern tokens and parser
    cldrdates.runtime - Resolver, renderer and pattern cache
"""

from .data import LocaleDataStore, load_babel_store, load_json_store
from .diagnostics import (
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
from .enums import FormatLength
from .locale_utils import fallback_chain, normalize_locale
from .runtime import DateFormatter, DateValue, FormatOptions
from .syntax import parse_pattern

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("cldrdates")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "DateFormatError",
    "DateFormatter",
    "DateValue",
    "FormatLength",
    "FormatLengthMissingError",
    "FormatOptions",
    "InvalidDateValueError",
    "LocaleDataError",
    "LocaleDataMissingError",
    "LocaleDataStore",
    "MalformedPatternError",
    "PatternError",
    "SymbolMissingError",
    "UnsupportedPatternFieldError",
    "__version__",
    "fallback_chain",
    "load_babel_store",
    "load_json_store",
    "normalize_locale",
    "parse_pattern",
]

"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Locale data errors (missing locale, length, symbol)
        2000-2999: Pattern syntax errors
        3000-3999: Rendering errors
        4000-4999: Input errors (caller-supplied values)
    """

    # Locale data errors (1000-1999)
    LOCALE_DATA_MISSING = 1001
    FORMAT_LENGTH_MISSING = 1002
    SYMBOL_MISSING = 1003

    # Pattern syntax errors (2000-2999)
    UNSUPPORTED_PATTERN_FIELD = 2001
    UNTERMINATED_QUOTE = 2002

    # Rendering errors (3000-3999)
    UNSUPPORTED_FIELD_WIDTH = 3001

    # Input errors (4000-4999)
    INVALID_DATE_VALUE = 4001
    INVALID_DATE_TYPE = 4002


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        help_url: Documentation URL for this error
        locale_code: Locale involved in the failure (if any)
        pattern: Pattern text involved in the failure (if any)
        position: Character offset into ``pattern`` (0-indexed)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    help_url: str | None = None
    locale_code: str | None = None
    pattern: str | None = None
    position: int | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output.

        Example output:
            error[UNSUPPORTED_PATTERN_FIELD]: Unsupported pattern field 'h'
              --> pattern 'h:mm', position 0
              = help: Supported field letters are G, y, M, d, E; quote literal text
              = note: see https://unicode.org/reports/tr35/tr35-dates.html#Date_Field_Symbol_Table

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)

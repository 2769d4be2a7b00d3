"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This provides:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    # Base documentation URL (UTS #35 Part 4: Dates)
    _DOCS_BASE = "https://unicode.org/reports/tr35/tr35-dates.html"

    @staticmethod
    def locale_data_missing(
        locale_code: str, calendar: str | None, chain: tuple[str, ...]
    ) -> Diagnostic:
        """No locale in the fallback chain has data for the calendar.

        Args:
            locale_code: Locale as requested by the caller
            calendar: Requested calendar (None when the locale default was used)
            chain: Locale keys that were tried, in order

        Returns:
            Diagnostic for LOCALE_DATA_MISSING
        """
        tried = ", ".join(chain)
        if calendar is None:
            msg = f"No date data for locale '{locale_code}' (tried: {tried})"
        else:
            msg = (
                f"No '{calendar}' calendar data for locale '{locale_code}' "
                f"(tried: {tried})"
            )
        return Diagnostic(
            code=DiagnosticCode.LOCALE_DATA_MISSING,
            message=msg,
            hint="Load the locale into the LocaleDataStore or configure default_locale",
            help_url=f"{ErrorTemplate._DOCS_BASE}#Calendar_Elements",
            locale_code=locale_code,
        )

    @staticmethod
    def format_length_missing(
        locale_code: str, calendar: str, length: str, available: tuple[str, ...]
    ) -> Diagnostic:
        """Calendar resolved but has no pattern for the requested length.

        Args:
            locale_code: Locale key that supplied the calendar
            calendar: Resolved calendar
            length: Requested format length
            available: Lengths the calendar does define

        Returns:
            Diagnostic for FORMAT_LENGTH_MISSING
        """
        msg = (
            f"No '{length}' date format for calendar '{calendar}' "
            f"in locale '{locale_code}'"
        )
        return Diagnostic(
            code=DiagnosticCode.FORMAT_LENGTH_MISSING,
            message=msg,
            hint=f"Available lengths: {', '.join(available) or 'none'}",
            help_url=f"{ErrorTemplate._DOCS_BASE}#dateFormats",
            locale_code=locale_code,
        )

    @staticmethod
    def symbol_missing(
        locale_code: str, calendar: str, kind: str, width: str, index: int
    ) -> Diagnostic:
        """Symbol table has no entry for a name lookup.

        Args:
            locale_code: Locale key whose symbols were consulted
            calendar: Calendar whose symbols were consulted
            kind: Field kind (month, weekday, era)
            width: Symbol width (wide, abbreviated, narrow)
            index: Calendar position that was looked up

        Returns:
            Diagnostic for SYMBOL_MISSING
        """
        msg = (
            f"No {width} {kind} name at position {index} "
            f"for calendar '{calendar}' in locale '{locale_code}'"
        )
        return Diagnostic(
            code=DiagnosticCode.SYMBOL_MISSING,
            message=msg,
            hint="Check that the locale data bundle includes all symbol widths",
            help_url=f"{ErrorTemplate._DOCS_BASE}#months_days_quarters_eras",
            locale_code=locale_code,
        )

    @staticmethod
    def unsupported_pattern_field(letter: str, pattern: str, position: int) -> Diagnostic:
        """Pattern contains a reserved letter outside the supported set.

        Args:
            letter: The offending pattern letter
            pattern: Full pattern text
            position: Offset of the letter run

        Returns:
            Diagnostic for UNSUPPORTED_PATTERN_FIELD
        """
        msg = f"Unsupported pattern field '{letter}' at position {position}"
        return Diagnostic(
            code=DiagnosticCode.UNSUPPORTED_PATTERN_FIELD,
            message=msg,
            hint="Supported field letters are G, y, M, d, E; quote literal text with '",
            help_url=f"{ErrorTemplate._DOCS_BASE}#Date_Field_Symbol_Table",
            pattern=pattern,
            position=position,
        )

    @staticmethod
    def unterminated_quote(pattern: str, position: int) -> Diagnostic:
        """Quoted literal run has no closing quote.

        Args:
            pattern: Full pattern text
            position: Offset of the opening quote

        Returns:
            Diagnostic for UNTERMINATED_QUOTE
        """
        msg = f"Unterminated quoted literal starting at position {position}"
        return Diagnostic(
            code=DiagnosticCode.UNTERMINATED_QUOTE,
            message=msg,
            hint="Close the literal with ' or write '' for a single quote character",
            help_url=f"{ErrorTemplate._DOCS_BASE}#Date_Format_Patterns",
            pattern=pattern,
            position=position,
        )

    @staticmethod
    def unsupported_field_width(kind: str, width: int) -> Diagnostic:
        """Field kind has no rendering for the given width.

        Args:
            kind: Field kind
            width: Letter run length

        Returns:
            Diagnostic for UNSUPPORTED_FIELD_WIDTH
        """
        msg = f"Field '{kind}' does not support width {width}"
        return Diagnostic(
            code=DiagnosticCode.UNSUPPORTED_FIELD_WIDTH,
            message=msg,
            hint="Day of month accepts d or dd only",
            help_url=f"{ErrorTemplate._DOCS_BASE}#Date_Field_Symbol_Table",
        )

    @staticmethod
    def invalid_date_value(year: int, month: int, day: int, reason: str) -> Diagnostic:
        """Date fields outside calendrical range.

        Args:
            year: Year as supplied
            month: Month as supplied
            day: Day as supplied
            reason: Which bound was violated

        Returns:
            Diagnostic for INVALID_DATE_VALUE
        """
        msg = f"Invalid date ({year}, {month}, {day}): {reason}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_DATE_VALUE,
            message=msg,
            hint="Month must be 1-12 and day must exist in that month",
        )

    @staticmethod
    def invalid_date_type(value: object) -> Diagnostic:
        """Value cannot be interpreted as a date.

        Args:
            value: The rejected value

        Returns:
            Diagnostic for INVALID_DATE_TYPE
        """
        msg = f"Expected date or (year, month, day), got {type(value).__name__}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_DATE_TYPE,
            message=msg,
            hint="Pass a datetime.date, a DateValue or a tuple of three integers",
        )

    @staticmethod
    def invalid_date_field(name: str, value: object) -> Diagnostic:
        """One date field is not an integer."""
        msg = f"Date field '{name}' must be an int, got {type(value).__name__}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_DATE_TYPE,
            message=msg,
            hint="Year, month and day must be integers (bool is not accepted)",
        )

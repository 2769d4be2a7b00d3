"""Date formatting exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.
Every failure is local to the formatting call that raised it; none leave
shared state modified.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "DateFormatError",
    "FormatLengthMissingError",
    "InvalidDateValueError",
    "LocaleDataError",
    "LocaleDataMissingError",
    "MalformedPatternError",
    "PatternError",
    "SymbolMissingError",
    "UnsupportedPatternFieldError",
]


class DateFormatError(Exception):
    """Base exception for all cldrdates errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize DateFormatError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)


class LocaleDataError(DateFormatError):
    """Locale data lookup failed.

    Raised when the LocaleDataStore cannot supply a pattern or symbol.
    """


class LocaleDataMissingError(LocaleDataError):
    """No locale in the fallback chain has data for the requested calendar.

    Attributes:
        locale_code: Locale as requested by the caller
        calendar: Requested calendar, or None when the locale default applied
        chain: Locale keys that were tried
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        locale_code: str = "",
        calendar: str | None = None,
        chain: tuple[str, ...] = (),
    ) -> None:
        super().__init__(message)
        self.locale_code = locale_code
        self.calendar = calendar
        self.chain = chain


class FormatLengthMissingError(LocaleDataError):
    """Calendar resolved but the requested length has no pattern.

    No implicit substitution across lengths is performed: asking for
    ``short`` never silently yields the ``full`` pattern.

    Attributes:
        locale_code: Locale key that supplied the calendar
        calendar: Resolved calendar
        length: Requested length
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        locale_code: str = "",
        calendar: str = "",
        length: str = "",
    ) -> None:
        super().__init__(message)
        self.locale_code = locale_code
        self.calendar = calendar
        self.length = length


class SymbolMissingError(LocaleDataError):
    """Symbol table has no entry for a month, weekday or era name lookup.

    A blank token is worse than a visible failure, so rendering stops here
    instead of emitting an empty string.

    Attributes:
        locale_code: Locale key whose symbols were consulted
        calendar: Calendar whose symbols were consulted
        kind: Field kind ("month", "weekday", "era")
        width: Symbol width ("wide", "abbreviated", "narrow")
        index: Calendar position looked up
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        locale_code: str = "",
        calendar: str = "",
        kind: str = "",
        width: str = "",
        index: int = 0,
    ) -> None:
        super().__init__(message)
        self.locale_code = locale_code
        self.calendar = calendar
        self.kind = kind
        self.width = width
        self.index = index


class PatternError(DateFormatError):
    """Pattern text cannot be interpreted.

    Attributes:
        pattern: The pattern text (empty if not known)
        position: Offset of the problem in ``pattern`` (None if not known)
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        pattern: str = "",
        position: int | None = None,
    ) -> None:
        super().__init__(message)
        self.pattern = pattern
        self.position = position


class UnsupportedPatternFieldError(PatternError):
    """Pattern uses a field letter or width outside the supported set.

    Example:
        "h:mm a" contains hour, minute and day-period fields, none of which
        are date fields.

    Attributes:
        letter: The rejected pattern letter
        width: Letter run length
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        letter: str = "",
        width: int = 1,
        pattern: str = "",
        position: int | None = None,
    ) -> None:
        super().__init__(message, pattern=pattern, position=position)
        self.letter = letter
        self.width = width


class MalformedPatternError(PatternError):
    """Pattern text is unparseable (e.g., a quoted literal is never closed)."""


class InvalidDateValueError(DateFormatError):
    """Caller-supplied date is outside calendrical range or not a date.

    Attributes:
        value: The rejected input
    """

    def __init__(self, message: str | Diagnostic, *, value: object = None) -> None:
        super().__init__(message)
        self.value = value

"""Locale-aware date formatting.

DateFormatter is the public entry point. It composes the other runtime
components:

    normalize locale -> resolve pattern -> parse (cached) -> render fields
    -> join in pattern order

Architecture:
    - LocaleDataStore is passed in explicitly; there is no global instance
    - FormatOptions replaces loosely-typed option maps
    - Per-call objects (tokens, resolved pattern) are discarded after the call

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from cldrdates.enums import FormatLength
from cldrdates.syntax import FieldToken, LiteralToken, Token, parse_pattern

from .cache import PatternCache
from .date_value import DateValue
from .renderer import FieldRenderer
from .resolver import FallbackInfo, PatternResolver

if TYPE_CHECKING:
    from cldrdates.data import LocaleDataStore
    from cldrdates.types import CalendarName, LocaleKey

    from .date_value import DateInput

__all__ = ["DateFormatter", "FormatOptions"]


@dataclass(frozen=True, slots=True)
class FormatOptions:
    """Immutable formatting options.

    Both fields default to None, meaning "use the locale data's default".
    Defaults are resolved by PatternResolver, not at the call site.

    Attributes:
        calendar: Calendar name (e.g., "gregorian", "buddhist")
        length: Format length; plain strings are converted to FormatLength

    Example:
        >>> FormatOptions(length="medium").length
        <FormatLength.MEDIUM: 'medium'>
    """

    calendar: CalendarName | None = None
    length: FormatLength | None = None

    def __post_init__(self) -> None:
        """Normalize the length.

        Raises:
            ValueError: If length is not one of full, long, medium, short
        """
        if self.length is not None and not isinstance(self.length, FormatLength):
            try:
                length = FormatLength(self.length)
            except ValueError:
                valid = ", ".join(member.value for member in FormatLength)
                msg = f"Unknown format length '{self.length}'; expected one of: {valid}"
                raise ValueError(msg) from None
            object.__setattr__(self, "length", length)


class DateFormatter:
    """Formats dates with CLDR patterns and symbols.

    Examples:
        >>> from cldrdates import load_babel_store
        >>> formatter = DateFormatter(load_babel_store(["en", "fr", "de"]))
        >>> formatter.localize((2016, 7, 11), "en")
        'Monday, July 11, 2016'
        >>> formatter.long((2016, 7, 11), "fr")
        '11 juillet 2016'
        >>> formatter.full((2016, 7, 11), "de-AT")  # falls back to "de"
        'Montag, 11. Juli 2016'

    Thread Safety:
        Safe to share between threads. The store is immutable and the
        pattern cache is lock-protected.
    """

    __slots__ = ("_cache", "_renderer", "_resolver", "_store")

    def __init__(
        self,
        store: LocaleDataStore,
        *,
        default_locale: str | None = None,
        cache: bool = True,
        on_fallback: Callable[[FallbackInfo], None] | None = None,
    ) -> None:
        """Initialize formatter.

        Args:
            store: Locale data to format with
            default_locale: Locale used when a locale and its base language
                both lack data (e.g., "en"). None (default) raises
                LocaleDataMissingError instead.
            cache: Cache parsed patterns (default: True). Output is identical
                either way.
            on_fallback: Optional callback invoked when a locale resolves
                through its fallback chain
        """
        self._store = store
        self._resolver = PatternResolver(
            store, default_locale=default_locale, on_fallback=on_fallback
        )
        self._renderer = FieldRenderer(store)
        self._cache: PatternCache | None = PatternCache() if cache else None

    @property
    def store(self) -> LocaleDataStore:
        """The locale data this formatter reads from."""
        return self._store

    @property
    def resolver(self) -> PatternResolver:
        """The pattern resolver used by this formatter."""
        return self._resolver

    @property
    def cache_enabled(self) -> bool:
        """True if parsed patterns are cached."""
        return self._cache is not None

    def localize(
        self,
        date: DateInput,
        locale: object,
        options: FormatOptions | None = None,
    ) -> str:
        """Format a date using the locale's named pattern.

        Args:
            date: DateValue, ``datetime.date`` or (year, month, day) tuple
            locale: Locale identifier in any spelling ("en-US", "en_us", ...)
            options: Calendar and length selection (default: locale defaults)

        Returns:
            Formatted date string

        Raises:
            InvalidDateValueError: Date is not a date or is out of range
            LocaleDataMissingError: No locale in the chain has the calendar
            FormatLengthMissingError: Calendar lacks the requested length
            UnsupportedPatternFieldError: Pattern uses an unsupported field
            MalformedPatternError: Pattern has an unterminated quote
            SymbolMissingError: A name lookup is absent from the locale data

        Examples:
            >>> formatter.localize(date(2016, 7, 11), "fr", FormatOptions(length="medium"))
            '11 juil. 2016'
        """
        value = DateValue.coerce(date)
        opts = options if options is not None else FormatOptions()
        resolved = self._resolver.resolve_pattern(locale, opts.calendar, opts.length)
        tokens = self._parse(resolved.pattern)
        return self._render(tokens, value, resolved.locale, resolved.calendar)

    def short(self, date: DateInput, locale: object, calendar: CalendarName | None = None) -> str:
        """Format with the ``short`` length, e.g. ``7/11/16``."""
        return self.localize(date, locale, FormatOptions(calendar, FormatLength.SHORT))

    def medium(self, date: DateInput, locale: object, calendar: CalendarName | None = None) -> str:
        """Format with the ``medium`` length, e.g. ``Jul 11, 2016``."""
        return self.localize(date, locale, FormatOptions(calendar, FormatLength.MEDIUM))

    def long(self, date: DateInput, locale: object, calendar: CalendarName | None = None) -> str:
        """Format with the ``long`` length, e.g. ``July 11, 2016``."""
        return self.localize(date, locale, FormatOptions(calendar, FormatLength.LONG))

    def full(self, date: DateInput, locale: object, calendar: CalendarName | None = None) -> str:
        """Format with the ``full`` length, e.g. ``Monday, July 11, 2016``."""
        return self.localize(date, locale, FormatOptions(calendar, FormatLength.FULL))

    def format_pattern(
        self,
        date: DateInput,
        pattern: str,
        locale: object,
        calendar: CalendarName | None = None,
    ) -> str:
        """Format a date with a caller-supplied CLDR pattern.

        Symbol names come from the first locale in the fallback chain that
        has the calendar, exactly as for named patterns.

        Args:
            date: DateValue, ``datetime.date`` or (year, month, day) tuple
            pattern: CLDR date pattern (e.g., "EEE d MMM y G")
            locale: Locale identifier in any spelling
            calendar: Calendar name, or None for the locale's default

        Returns:
            Formatted date string

        Raises:
            Same as localize(), except FormatLengthMissingError

        Example:
            >>> formatter.format_pattern((2016, 7, 11), "EEE d MMM y G", "en")
            'Mon 11 Jul 2016 AD'
        """
        value = DateValue.coerce(date)
        tokens = self._parse(pattern)
        key, resolved_calendar = self._resolver.resolve_calendar(locale, calendar)
        return self._render(tokens, value, key, resolved_calendar)

    def cache_info(self) -> dict[str, int] | None:
        """Pattern cache statistics, or None if caching is disabled."""
        return None if self._cache is None else self._cache.info()

    def clear_cache(self) -> None:
        """Drop all cached parsed patterns."""
        if self._cache is not None:
            self._cache.clear()

    def _parse(self, pattern: str) -> tuple[Token, ...]:
        if self._cache is None:
            return parse_pattern(pattern)
        return self._cache.get_or_parse(pattern)

    def _render(
        self,
        tokens: tuple[Token, ...],
        date: DateValue,
        locale: LocaleKey,
        calendar: CalendarName,
    ) -> str:
        parts: list[str] = []
        for token in tokens:
            match token:
                case LiteralToken(text=text):
                    parts.append(text)
                case FieldToken():
                    parts.append(self._renderer.render(token, date, locale, calendar))
        return "".join(parts)

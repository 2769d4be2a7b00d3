"""Field rendering per CLDR width rules.

Turns one FieldToken into text for a date, using the symbol tables of the
locale and calendar the pattern was resolved from.

Width rules:
    kind    | 1          | 2             | 3      | 4      | 5
    --------|------------|---------------|--------|--------|-------
    year    | 2016       | 16            | 2016   | 2016   | 02016
    month   | 7          | 07            | Jul    | July   | J
    day     | 1          | 01            | error  | error  | error
    weekday | Mon        | Mon           | Mon    | Monday | M
    era     | AD         | AD            | AD     | Anno Domini | A

Widths 3-5 of year pad to the width. Year is the year of era, so
1 BC renders as 1 alongside the era field. Year and era are counted in
the calendar's own numbering: the Gregorian year shifted by the
calendar's year_offset (2016 is 2559 in the buddhist calendar).

Thread-safe. Reads only from the immutable LocaleDataStore.

Python 3.13+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, assert_never

from cldrdates.constants import MAX_FIELD_WIDTH
from cldrdates.diagnostics import (
    ErrorTemplate,
    SymbolMissingError,
    UnsupportedPatternFieldError,
)
from cldrdates.enums import FieldKind, SymbolWidth

from .date_value import era_of, era_year

if TYPE_CHECKING:
    from cldrdates.data import LocaleDataStore
    from cldrdates.syntax import FieldToken
    from cldrdates.types import CalendarName, LocaleKey

    from .date_value import DateValue

__all__ = ["FieldRenderer"]


def _name_width(width: int) -> SymbolWidth:
    """Symbol width for text forms: 1-3 abbreviated, 4 wide, 5 narrow."""
    if width >= 5:
        return SymbolWidth.NARROW
    if width == 4:
        return SymbolWidth.WIDE
    return SymbolWidth.ABBREVIATED


def _format_year(year: int, width: int) -> str:
    if width == 2:
        return f"{year % 100:02d}"
    if width == 1:
        return str(year)
    return str(year).zfill(width)


class FieldRenderer:
    """Renders field tokens against a date and a locale's symbol tables.

    The renderer holds a reference to the store and nothing else; render()
    is a pure function of its arguments and the store contents.

    Example:
        >>> renderer = FieldRenderer(store)
        >>> renderer.render(FieldToken(FieldKind.MONTH, 4), DateValue(2016, 7, 11), "en", "gregorian")
        'July'
    """

    __slots__ = ("_store",)

    def __init__(self, store: LocaleDataStore) -> None:
        """Initialize renderer.

        Args:
            store: Locale data consulted for month, weekday and era names
        """
        self._store = store

    def render(
        self,
        token: FieldToken,
        date: DateValue,
        locale: LocaleKey,
        calendar: CalendarName,
    ) -> str:
        """Render one field.

        Args:
            token: Field to render
            date: Validated date
            locale: Locale key whose symbols apply (as resolved, not as requested)
            calendar: Calendar whose symbols apply

        Returns:
            Rendered text, never empty

        Raises:
            SymbolMissingError: Name lookup absent from the symbol table
            UnsupportedPatternFieldError: Width has no defined rendering
                (day of month wider than 2)
        """
        width = min(token.width, MAX_FIELD_WIDTH)
        match token.kind:
            case FieldKind.YEAR:
                year = self._calendar_year(date, locale, calendar)
                return _format_year(era_year(year), width)
            case FieldKind.MONTH:
                if width == 1:
                    return str(date.month)
                if width == 2:
                    return f"{date.month:02d}"
                return self._symbol(token.kind, width, date.month, locale, calendar)
            case FieldKind.DAY:
                if width == 1:
                    return str(date.day)
                if width == 2:
                    return f"{date.day:02d}"
                diagnostic = ErrorTemplate.unsupported_field_width(token.kind, width)
                raise UnsupportedPatternFieldError(
                    diagnostic, letter=token.letter or "d", width=width
                )
            case FieldKind.WEEKDAY:
                return self._symbol(token.kind, width, date.weekday, locale, calendar)
            case FieldKind.ERA:
                era = era_of(self._calendar_year(date, locale, calendar))
                return self._symbol(token.kind, width, era, locale, calendar)
            case _:
                assert_never(token.kind)

    def _calendar_year(self, date: DateValue, locale: LocaleKey, calendar: CalendarName) -> int:
        calendar_data = self._store.calendar(locale, calendar)
        if calendar_data is None:
            return date.year
        return calendar_data.calendar_year(date.year)

    def _symbol(
        self,
        kind: FieldKind,
        width: int,
        index: int,
        locale: LocaleKey,
        calendar: CalendarName,
    ) -> str:
        symbol_width = _name_width(width)
        calendar_data = self._store.calendar(locale, calendar)
        name = (
            None
            if calendar_data is None
            else calendar_data.symbols.lookup(kind, symbol_width, index)
        )
        if not name:
            diagnostic = ErrorTemplate.symbol_missing(locale, calendar, kind, symbol_width, index)
            raise SymbolMissingError(
                diagnostic,
                locale_code=locale,
                calendar=calendar,
                kind=kind,
                width=symbol_width,
                index=index,
            )
        return name

"""Immutable in-memory locale data store.

Holds, per normalized locale key and calendar, the named date format
patterns and the month/weekday/era symbol tables consumed by the
formatting runtime.

Architecture:
    - LocaleDataStore: locale key -> LocaleData
    - LocaleData: calendar name -> CalendarData, plus a default calendar
    - CalendarData: length -> pattern, a default length, a SymbolTable and
      the calendar's year offset from the Gregorian year
    - SymbolTable: width -> position -> display name, per field kind

The store is built once (see cldrdates.data.loading) and then shared by
reference. Every mapping is wrapped in MappingProxyType, so no component
can write to it after construction and concurrent readers need no locking.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, TypeAlias

from cldrdates.constants import DEFAULT_CALENDAR, DEFAULT_FORMAT_LENGTH
from cldrdates.enums import FieldKind, FormatLength, SymbolWidth
from cldrdates.locale_utils import normalize_locale

if TYPE_CHECKING:
    from cldrdates.types import CalendarName, LocaleKey, Pattern

__all__ = [
    "CalendarData",
    "LocaleData",
    "LocaleDataStore",
    "SymbolTable",
]

_Names: TypeAlias = Mapping[SymbolWidth, Mapping[int, str]]

_EMPTY: MappingProxyType[Any, Any] = MappingProxyType({})


def _section(raw: object, where: str) -> Mapping[Any, Any]:
    """Return a bundle section, treating None as empty.

    Raises:
        ValueError: If the section is present but not a mapping
    """
    if raw is None:
        return _EMPTY
    if not isinstance(raw, Mapping):
        msg = f"Section {where} must be a mapping, got {type(raw).__name__}"
        raise ValueError(msg)
    return raw


def _freeze_names(raw: object, section: str) -> _Names:
    """Copy a width -> position -> name mapping into read-only form.

    Positions may be ints or decimal strings (JSON object keys).

    Raises:
        ValueError: If a width or position key is not valid
    """
    widths = _section(raw, section)
    if not widths:
        return _EMPTY
    frozen: dict[SymbolWidth, Mapping[int, str]] = {}
    for width, names in widths.items():
        try:
            symbol_width = SymbolWidth(width)
        except ValueError:
            msg = f"Unknown symbol width '{width}' in {section}"
            raise ValueError(msg) from None
        try:
            entries = {int(index): str(name) for index, name in names.items()}
        except (AttributeError, TypeError, ValueError):
            msg = f"Symbol positions in {section}/{width} must be integers"
            raise ValueError(msg) from None
        frozen[symbol_width] = MappingProxyType(entries)
    return MappingProxyType(frozen)


@dataclass(frozen=True, slots=True)
class SymbolTable:
    """Localized display names for one calendar.

    Positions:
        months: 1-12
        weekdays: 0-6, Monday is 0 (``datetime.date.weekday()`` convention)
        eras: 0 before the calendar epoch, 1 after

    Attributes:
        months: width -> month number -> name
        weekdays: width -> weekday index -> name
        eras: width -> era index -> name
    """

    months: _Names = field(default_factory=lambda: _EMPTY)
    weekdays: _Names = field(default_factory=lambda: _EMPTY)
    eras: _Names = field(default_factory=lambda: _EMPTY)

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> SymbolTable:
        """Build a SymbolTable from ``months``/``weekdays``/``eras`` sections."""
        return cls(
            months=_freeze_names(raw.get("months"), "months"),
            weekdays=_freeze_names(raw.get("weekdays"), "weekdays"),
            eras=_freeze_names(raw.get("eras"), "eras"),
        )

    def lookup(self, kind: FieldKind, width: SymbolWidth, index: int) -> str | None:
        """Look up a display name.

        Args:
            kind: MONTH, WEEKDAY or ERA
            width: Symbol width
            index: Calendar position

        Returns:
            The name, or None if the table has no such entry
        """
        match kind:
            case FieldKind.MONTH:
                names = self.months
            case FieldKind.WEEKDAY:
                names = self.weekdays
            case FieldKind.ERA:
                names = self.eras
            case _:
                return None
        return names.get(width, _EMPTY).get(index)


@dataclass(frozen=True, slots=True)
class CalendarData:
    """Date formats and symbols for one calendar of one locale.

    Attributes:
        patterns: Format length -> CLDR pattern text
        default_length: Length used when the caller requests none
        symbols: Display names for month, weekday and era fields
        year_offset: Calendar year minus proleptic Gregorian year for dates
            in the same Gregorian year (0 for gregorian, 543 for buddhist)
    """

    patterns: Mapping[FormatLength, Pattern]
    default_length: FormatLength = DEFAULT_FORMAT_LENGTH
    symbols: SymbolTable = field(default_factory=SymbolTable)
    year_offset: int = 0

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> CalendarData:
        """Build CalendarData from a bundle section.

        Raises:
            ValueError: If a length name is not a FormatLength, or
                ``year_offset`` is not an integer
        """
        patterns: dict[FormatLength, str] = {}
        for length, pattern in _section(raw.get("patterns"), "patterns").items():
            patterns[_coerce_length(length)] = str(pattern)
        default = raw.get("default_length")
        offset = raw.get("year_offset", 0)
        if type(offset) is not int:
            msg = f"year_offset must be an integer, got {type(offset).__name__}"
            raise ValueError(msg)
        return cls(
            patterns=MappingProxyType(patterns),
            default_length=DEFAULT_FORMAT_LENGTH if default is None else _coerce_length(default),
            symbols=SymbolTable.from_mapping(raw),
            year_offset=offset,
        )

    def pattern_for(self, length: FormatLength) -> Pattern | None:
        """Return the pattern for ``length`` or None if undefined."""
        return self.patterns.get(length)

    def calendar_year(self, gregorian_year: int) -> int:
        """Astronomical year in this calendar's numbering."""
        return gregorian_year + self.year_offset


@dataclass(frozen=True, slots=True)
class LocaleData:
    """All calendars defined for one locale.

    Attributes:
        calendars: Calendar name -> CalendarData
        default_calendar: Calendar used when the caller requests none
    """

    calendars: Mapping[CalendarName, CalendarData]
    default_calendar: CalendarName = DEFAULT_CALENDAR

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> LocaleData:
        """Build LocaleData from a bundle section."""
        calendars = {
            str(name): CalendarData.from_mapping(_section(section, f"calendars/{name}"))
            for name, section in _section(raw.get("calendars"), "calendars").items()
        }
        default = raw.get("default_calendar")
        return cls(
            calendars=MappingProxyType(calendars),
            default_calendar=DEFAULT_CALENDAR if default is None else str(default),
        )


def _coerce_length(value: object) -> FormatLength:
    try:
        return FormatLength(value)
    except ValueError:
        msg = f"Unknown format length '{value}'"
        raise ValueError(msg) from None


class LocaleDataStore:
    """Read-only lookup service over locale date data.

    Keys are normalized on construction, so ``"en-US"`` and ``"en_us"`` in
    the input refer to the same entry. The store never changes after
    construction and is safe to share between threads.

    Example:
        >>> store = LocaleDataStore.from_mapping({
        ...     "en": {"calendars": {"gregorian": {
        ...         "patterns": {"short": "M/d/yy"},
        ...     }}},
        ... })
        >>> store.calendar("en", "gregorian").pattern_for(FormatLength.SHORT)
        'M/d/yy'
        >>> "EN" in store
        True
    """

    __slots__ = ("_locales",)

    def __init__(self, locales: Mapping[str, LocaleData]) -> None:
        """Initialize the store.

        Args:
            locales: Locale identifier -> LocaleData. Identifiers are
                normalized; when two spellings collide the later one wins.
        """
        normalized = {normalize_locale(code): data for code, data in locales.items()}
        self._locales: Mapping[LocaleKey, LocaleData] = MappingProxyType(normalized)

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Mapping[str, Any]]) -> LocaleDataStore:
        """Build a store from a nested mapping (the JSON bundle schema).

        Args:
            raw: Locale identifier -> locale section

        Returns:
            New immutable store

        Raises:
            ValueError: If the mapping violates the bundle schema
        """
        if not isinstance(raw, Mapping):
            msg = f"Locale data bundle must be a mapping, got {type(raw).__name__}"
            raise ValueError(msg)
        locales = {
            str(code): LocaleData.from_mapping(_section(section, str(code)))
            for code, section in raw.items()
        }
        return cls(locales)

    @property
    def locales(self) -> tuple[LocaleKey, ...]:
        """Normalized keys of all loaded locales, sorted."""
        return tuple(sorted(self._locales))

    def get(self, key: LocaleKey) -> LocaleData | None:
        """Return LocaleData for a normalized key, or None."""
        return self._locales.get(key)

    def calendar(self, key: LocaleKey, calendar: CalendarName) -> CalendarData | None:
        """Return CalendarData for (locale key, calendar), or None."""
        locale_data = self._locales.get(key)
        if locale_data is None:
            return None
        return locale_data.calendars.get(calendar)

    def __contains__(self, identifier: object) -> bool:
        return normalize_locale(identifier) in self._locales

    def __iter__(self) -> Iterator[LocaleKey]:
        return iter(self._locales)

    def __len__(self) -> int:
        return len(self._locales)

    def __repr__(self) -> str:
        return f"LocaleDataStore(locales={self.locales!r})"

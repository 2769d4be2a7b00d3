"""Builders that populate a LocaleDataStore.

Two sources are supported:
    - Babel's bundled CLDR data (load_babel_store), for the Gregorian
      calendar of any locale Babel knows
    - A JSON bundle on disk (load_json_store) in the nested mapping schema
      accepted by LocaleDataStore.from_mapping, for other calendars or
      curated data sets

Loading happens once at startup. The resulting store is immutable.

Python 3.13+. Depends on Babel for CLDR data.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING

from babel import UnknownLocaleError

from cldrdates.constants import DEFAULT_CALENDAR, DEFAULT_FORMAT_LENGTH
from cldrdates.data.store import CalendarData, LocaleData, LocaleDataStore, SymbolTable
from cldrdates.enums import FormatLength, SymbolWidth
from cldrdates.locale_utils import get_babel_locale, normalize_locale

if TYPE_CHECKING:
    from babel import Locale

__all__ = ["babel_calendar_data", "load_babel_store", "load_json_store"]

logger = logging.getLogger(__name__)


def _babel_names(context: Mapping[str, Mapping[int, str]]) -> Mapping[SymbolWidth, Mapping[int, str]]:
    # Babel's LocaleDataDict resolves CLDR aliases on item access,
    # so copy through items() rather than dict(context)
    names: dict[SymbolWidth, Mapping[int, str]] = {}
    for width in SymbolWidth:
        if width in context:
            names[width] = MappingProxyType(
                {int(index): str(name) for index, name in context[width].items()}
            )
    return MappingProxyType(names)


def babel_calendar_data(
    locale: Locale, *, default_length: FormatLength = DEFAULT_FORMAT_LENGTH
) -> CalendarData:
    """Extract Gregorian CalendarData from a Babel Locale.

    Uses the ``format`` context of month and weekday names (the context CLDR
    date patterns are written against). Babel numbers weekdays from Monday = 0,
    the same convention as SymbolTable.

    Args:
        locale: Babel Locale object
        default_length: Length recorded as the calendar default

    Returns:
        CalendarData for the Gregorian calendar
    """
    patterns: dict[FormatLength, str] = {}
    for length in FormatLength:
        try:
            patterns[length] = locale.date_formats[length.value].pattern
        except (AttributeError, KeyError):
            logger.debug("Locale %s has no %s date format", locale, length)

    symbols = SymbolTable(
        months=_babel_names(locale.months.get("format", {})),
        weekdays=_babel_names(locale.days.get("format", {})),
        eras=_babel_names(locale.eras),
    )
    return CalendarData(
        patterns=MappingProxyType(patterns),
        default_length=default_length,
        symbols=symbols,
    )


def load_babel_store(
    locales: Iterable[str],
    *,
    default_length: FormatLength = DEFAULT_FORMAT_LENGTH,
) -> LocaleDataStore:
    """Build a store from Babel's CLDR data.

    Unknown or malformed identifiers are skipped with a warning; formatting
    for them later surfaces LocaleDataMissingError (or resolves through the
    fallback chain) rather than failing the whole load.

    Args:
        locales: Locale identifiers (any spelling)
        default_length: Default format length for every loaded calendar

    Returns:
        Immutable store keyed by normalized identifier

    Example:
        >>> store = load_babel_store(["en", "fr", "de-AT"])
        >>> store.locales
        ('de_at', 'en', 'fr')
    """
    loaded: dict[str, LocaleData] = {}
    for identifier in locales:
        key = normalize_locale(identifier)
        try:
            babel_locale = get_babel_locale(key)
        except UnknownLocaleError as e:
            logger.warning("Unknown locale '%s': %s. Skipping", identifier, e)
            continue
        except ValueError as e:
            logger.warning("Invalid locale format '%s': %s. Skipping", identifier, e)
            continue

        calendar = babel_calendar_data(babel_locale, default_length=default_length)
        loaded[key] = LocaleData(
            calendars=MappingProxyType({DEFAULT_CALENDAR: calendar}),
            default_calendar=DEFAULT_CALENDAR,
        )

    logger.debug("Loaded %d locale(s) from Babel CLDR data", len(loaded))
    return LocaleDataStore(loaded)


def load_json_store(path: str | Path) -> LocaleDataStore:
    """Build a store from a UTF-8 JSON bundle.

    Args:
        path: File containing the LocaleDataStore.from_mapping schema

    Returns:
        Immutable store

    Raises:
        OSError: If the file cannot be read
        ValueError: If the content is not valid JSON or violates the schema
    """
    source = Path(path).read_text(encoding="utf-8")
    try:
        raw = json.loads(source)
    except json.JSONDecodeError as e:
        msg = f"Invalid JSON in locale data bundle '{path}': {e}"
        raise ValueError(msg) from e
    store = LocaleDataStore.from_mapping(raw)
    logger.debug("Loaded %d locale(s) from %s", len(store), path)
    return store

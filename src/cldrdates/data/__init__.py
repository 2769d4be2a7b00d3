"""Locale data storage and loading.

Exports:
    LocaleDataStore: Immutable locale -> calendar -> patterns/symbols lookup
    LocaleData, CalendarData, SymbolTable: Store building blocks
    load_babel_store: Build a store from Babel's CLDR data
    load_json_store: Build a store from a JSON bundle

Python 3.13+.
"""

from .loading import babel_calendar_data, load_babel_store, load_json_store
from .store import CalendarData, LocaleData, LocaleDataStore, SymbolTable

__all__ = [
    "CalendarData",
    "LocaleData",
    "LocaleDataStore",
    "SymbolTable",
    "babel_calendar_data",
    "load_babel_store",
    "load_json_store",
]

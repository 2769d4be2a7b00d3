"""Pattern resolution with locale fallback.

Finds the CLDR pattern text for (locale, calendar, length), walking the
locale fallback chain when the exact locale has no data.

Resolution order, per locale key in the chain:
    1. Skip the key if the store has no such locale
    2. Calendar: requested, else the locale's default calendar; skip the
       key if the locale lacks it
    3. Length: requested, else the calendar's default length; if the
       calendar has no pattern for it, fail. Lengths are never substituted
       for one another and the search does not continue to the next locale.

The chain is (locale, base language). A final default locale is appended
only when the resolver is constructed with ``default_locale``; by default
a locale with no data surfaces LocaleDataMissingError instead of silently
rendering in another language.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from cldrdates.diagnostics import (
    ErrorTemplate,
    FormatLengthMissingError,
    LocaleDataMissingError,
)
from cldrdates.enums import FormatLength
from cldrdates.locale_utils import fallback_chain, normalize_locale

if TYPE_CHECKING:
    from cldrdates.data import CalendarData, LocaleDataStore
    from cldrdates.types import CalendarName, LocaleKey, Pattern

__all__ = ["FallbackInfo", "PatternResolver", "ResolvedPattern"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ResolvedPattern:
    """Outcome of a pattern lookup.

    Attributes:
        pattern: CLDR pattern text
        locale: Locale key that supplied the pattern (and whose symbols apply)
        calendar: Calendar the pattern belongs to
        length: Length the pattern was defined for
        requested_locale: Normalized key the caller asked for
    """

    pattern: Pattern
    locale: LocaleKey
    calendar: CalendarName
    length: FormatLength
    requested_locale: LocaleKey

    @property
    def is_fallback(self) -> bool:
        """True if the pattern came from a locale other than the one requested."""
        return self.locale != self.requested_locale


@dataclass(frozen=True, slots=True)
class FallbackInfo:
    """Information passed to ``on_fallback`` callbacks.

    Attributes:
        requested_locale: Normalized key the caller asked for
        resolved_locale: Key that supplied the data
        calendar: Resolved calendar
        length: Resolved length
        used_default: True if the configured default locale supplied the data
    """

    requested_locale: LocaleKey
    resolved_locale: LocaleKey
    calendar: CalendarName
    length: FormatLength
    used_default: bool


class PatternResolver:
    """Resolves CLDR date patterns from a LocaleDataStore.

    Example:
        >>> store = LocaleDataStore.from_mapping(
        ...     {"en": {"calendars": {"gregorian": {"patterns": {"short": "M/d/yy"}}}}}
        ... )
        >>> resolver = PatternResolver(store)
        >>> resolved = resolver.resolve_pattern("en-GB", length=FormatLength.SHORT)
        >>> (resolved.pattern, resolved.locale)
        ('M/d/yy', 'en')

    Thread Safety:
        Holds no mutable state. The optional ``on_fallback`` callback is
        invoked on the calling thread and must be thread-safe itself if the
        resolver is shared.
    """

    __slots__ = ("_default_locale", "_on_fallback", "_store")

    def __init__(
        self,
        store: LocaleDataStore,
        *,
        default_locale: str | None = None,
        on_fallback: Callable[[FallbackInfo], None] | None = None,
    ) -> None:
        """Initialize resolver.

        Args:
            store: Locale data to resolve against
            default_locale: Locale tried after the fallback chain is exhausted
                (e.g., "en"). None (default) disables the final fallback so
                missing locale data raises LocaleDataMissingError.
            on_fallback: Optional callback invoked whenever a pattern is
                resolved from a locale other than the requested one
        """
        self._store = store
        self._default_locale: LocaleKey | None = (
            None if default_locale is None else normalize_locale(default_locale)
        )
        self._on_fallback = on_fallback

    @property
    def default_locale(self) -> LocaleKey | None:
        """Normalized final fallback locale, or None if disabled."""
        return self._default_locale

    def locale_chain(self, locale: object) -> tuple[LocaleKey, ...]:
        """Locale keys tried for ``locale``, most specific first.

        Args:
            locale: Locale identifier in any spelling

        Returns:
            Fallback chain, with the default locale appended if configured
        """
        chain = fallback_chain(normalize_locale(locale))
        if self._default_locale is not None and self._default_locale not in chain:
            chain = (*chain, self._default_locale)
        return chain

    def resolve_calendar(
        self, locale: object, calendar: CalendarName | None = None
    ) -> tuple[LocaleKey, CalendarName]:
        """Find the locale key and calendar whose data applies.

        Walks the same chain as resolve_pattern() and stops at the first
        key that has the calendar. Used for caller-supplied patterns, where
        only the symbol tables matter.

        Args:
            locale: Locale identifier in any spelling
            calendar: Calendar name, or None for the locale's default

        Returns:
            (locale key, calendar name)

        Raises:
            LocaleDataMissingError: No key in the chain has the calendar
        """
        requested = normalize_locale(locale)
        key, resolved_calendar, _ = self._find_calendar(requested, calendar)
        if key != requested:
            logger.debug("Locale '%s' uses symbols from '%s'", requested, key)
        return key, resolved_calendar

    def resolve_pattern(
        self,
        locale: object,
        calendar: CalendarName | None = None,
        length: FormatLength | None = None,
    ) -> ResolvedPattern:
        """Resolve the pattern for a locale, calendar and length.

        Args:
            locale: Locale identifier in any spelling
            calendar: Calendar name, or None for the locale's default
            length: Format length, or None for the calendar's default

        Returns:
            ResolvedPattern with the pattern and where it came from

        Raises:
            LocaleDataMissingError: No key in the chain has the calendar
            FormatLengthMissingError: The calendar lacks the requested length
        """
        requested = normalize_locale(locale)
        key, resolved_calendar, calendar_data = self._find_calendar(requested, calendar)

        resolved_length = calendar_data.default_length if length is None else FormatLength(length)
        pattern = calendar_data.pattern_for(resolved_length)
        if pattern is None:
            diagnostic = ErrorTemplate.format_length_missing(
                key,
                resolved_calendar,
                resolved_length,
                tuple(calendar_data.patterns),
            )
            raise FormatLengthMissingError(
                diagnostic,
                locale_code=key,
                calendar=resolved_calendar,
                length=resolved_length,
            )

        resolved = ResolvedPattern(
            pattern=pattern,
            locale=key,
            calendar=resolved_calendar,
            length=resolved_length,
            requested_locale=requested,
        )
        if resolved.is_fallback:
            self._report_fallback(resolved)
        return resolved

    def _find_calendar(
        self, requested: LocaleKey, calendar: CalendarName | None
    ) -> tuple[LocaleKey, CalendarName, CalendarData]:
        chain = self.locale_chain(requested)
        for key in chain:
            locale_data = self._store.get(key)
            if locale_data is None:
                continue
            resolved_calendar = locale_data.default_calendar if calendar is None else calendar
            calendar_data = locale_data.calendars.get(resolved_calendar)
            if calendar_data is not None:
                return key, resolved_calendar, calendar_data

        diagnostic = ErrorTemplate.locale_data_missing(requested, calendar, chain)
        raise LocaleDataMissingError(
            diagnostic, locale_code=requested, calendar=calendar, chain=chain
        )

    def _report_fallback(self, resolved: ResolvedPattern) -> None:
        used_default = (
            resolved.locale == self._default_locale
            and resolved.locale not in fallback_chain(resolved.requested_locale)
        )
        if used_default:
            logger.warning(
                "No date data for locale '%s'; using default locale '%s'",
                resolved.requested_locale,
                resolved.locale,
            )
        else:
            logger.debug(
                "Locale '%s' resolved to '%s' for %s/%s",
                resolved.requested_locale,
                resolved.locale,
                resolved.calendar,
                resolved.length,
            )
        if self._on_fallback is not None:
            self._on_fallback(
                FallbackInfo(
                    requested_locale=resolved.requested_locale,
                    resolved_locale=resolved.locale,
                    calendar=resolved.calendar,
                    length=resolved.length,
                    used_default=used_default,
                )
            )

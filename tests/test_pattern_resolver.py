"""Tests for PatternResolver locale and calendar fallback."""

from __future__ import annotations

import logging

import pytest

from cldrdates import FormatLength, FormatLengthMissingError, LocaleDataMissingError, LocaleDataStore
from cldrdates.diagnostics import DiagnosticCode
from cldrdates.runtime import FallbackInfo, PatternResolver


class TestExactLocale:
    """Locales present in the store resolve to themselves."""

    def test_requested_length(self, store: LocaleDataStore) -> None:
        """The requested length selects the pattern."""
        resolved = PatternResolver(store).resolve_pattern("en", length=FormatLength.SHORT)
        assert resolved.pattern == "M/d/yy"
        assert resolved.locale == "en"
        assert resolved.calendar == "gregorian"
        assert resolved.length is FormatLength.SHORT
        assert not resolved.is_fallback

    def test_default_length(self, store: LocaleDataStore) -> None:
        """Without a length the calendar default (full) applies."""
        resolved = PatternResolver(store).resolve_pattern("en")
        assert resolved.length is FormatLength.FULL
        assert resolved.pattern == "EEEE, MMMM d, y"

    def test_string_length(self, store: LocaleDataStore) -> None:
        """Plain strings are accepted as lengths."""
        resolved = PatternResolver(store).resolve_pattern("es", length="medium")  # type: ignore[arg-type]
        assert resolved.pattern == "d MMM y"
        assert resolved.length is FormatLength.MEDIUM

    def test_locale_spelling(self, store: LocaleDataStore) -> None:
        """Identifiers are normalized before lookup."""
        assert PatternResolver(store).resolve_pattern("EN").locale == "en"

    def test_default_calendar_and_length_from_data(self, store: LocaleDataStore) -> None:
        """th defaults to the buddhist calendar and long length."""
        resolved = PatternResolver(store).resolve_pattern("th")
        assert resolved.calendar == "buddhist"
        assert resolved.length is FormatLength.LONG
        assert resolved.pattern == "d MMMM G y"


class TestLocaleFallback:
    """Territory variants fall back to their base language."""

    def test_territory_falls_back(self, store: LocaleDataStore) -> None:
        """es-MX uses es data."""
        resolved = PatternResolver(store).resolve_pattern("es-MX", length=FormatLength.SHORT)
        assert resolved.locale == "es"
        assert resolved.requested_locale == "es_mx"
        assert resolved.pattern == "d/M/yy"
        assert resolved.is_fallback

    def test_calendar_missing_falls_back(self) -> None:
        """A territory locale without the calendar falls back to the base."""
        store = LocaleDataStore.from_mapping({
            "en": {"calendars": {"gregorian": {"patterns": {"full": "base"}}}},
            "en_gb": {"calendars": {"buddhist": {"patterns": {"full": "variant"}}}},
        })
        resolved = PatternResolver(store).resolve_pattern("en-GB", calendar="gregorian")
        assert resolved.locale == "en"
        assert resolved.pattern == "base"

    def test_unknown_locale_raises(self, store: LocaleDataStore) -> None:
        """No silent default: an unknown language is an error."""
        with pytest.raises(LocaleDataMissingError) as exc_info:
            PatternResolver(store).resolve_pattern("de-AT")
        error = exc_info.value
        assert error.locale_code == "de_at"
        assert error.chain == ("de_at", "de")
        assert error.calendar is None
        assert error.diagnostic is not None
        assert error.diagnostic.code == DiagnosticCode.LOCALE_DATA_MISSING

    def test_unknown_calendar_raises(self, store: LocaleDataStore) -> None:
        """A calendar missing from every locale in the chain is an error."""
        with pytest.raises(LocaleDataMissingError) as exc_info:
            PatternResolver(store).resolve_pattern("en", calendar="hebrew")
        assert exc_info.value.calendar == "hebrew"
        assert "hebrew" in str(exc_info.value)


class TestDefaultLocale:
    """The final default locale is opt-in."""

    def test_default_used_when_configured(self, store: LocaleDataStore) -> None:
        """An unknown locale resolves to the configured default."""
        resolver = PatternResolver(store, default_locale="EN")
        assert resolver.default_locale == "en"
        resolved = resolver.resolve_pattern("de-AT", length=FormatLength.LONG)
        assert resolved.locale == "en"
        assert resolved.pattern == "MMMM d, y"

    def test_locale_chain(self, store: LocaleDataStore) -> None:
        """The default is appended once, after the base language."""
        resolver = PatternResolver(store, default_locale="en")
        assert resolver.locale_chain("de-AT") == ("de_at", "de", "en")
        assert resolver.locale_chain("en-GB") == ("en_gb", "en")
        assert PatternResolver(store).locale_chain("de-AT") == ("de_at", "de")

    def test_default_fallback_logs_warning(
        self, store: LocaleDataStore, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Falling back to the default locale is logged at WARNING."""
        resolver = PatternResolver(store, default_locale="en")
        with caplog.at_level(logging.WARNING, logger="cldrdates.runtime.resolver"):
            resolver.resolve_pattern("de")
        assert any("de" in record.getMessage() for record in caplog.records)
        assert all(record.levelno == logging.WARNING for record in caplog.records)

    def test_base_fallback_not_warning(
        self, store: LocaleDataStore, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Base-language fallback is routine and logged below WARNING."""
        with caplog.at_level(logging.WARNING, logger="cldrdates.runtime.resolver"):
            PatternResolver(store).resolve_pattern("es-MX")
        assert caplog.records == []


class TestFallbackCallback:
    """on_fallback receives FallbackInfo for every fallback."""

    def test_callback_invoked(self, store: LocaleDataStore) -> None:
        """Base-language fallback is reported."""
        seen: list[FallbackInfo] = []
        resolver = PatternResolver(store, on_fallback=seen.append)
        resolver.resolve_pattern("fr-CA", length=FormatLength.LONG)
        assert seen == [
            FallbackInfo(
                requested_locale="fr_ca",
                resolved_locale="fr",
                calendar="gregorian",
                length=FormatLength.LONG,
                used_default=False,
            )
        ]

    def test_callback_marks_default(self, store: LocaleDataStore) -> None:
        """Default-locale fallback sets used_default."""
        seen: list[FallbackInfo] = []
        resolver = PatternResolver(store, default_locale="en", on_fallback=seen.append)
        resolver.resolve_pattern("pt-BR")
        assert len(seen) == 1
        assert seen[0].used_default

    def test_callback_not_invoked_for_exact_match(self, store: LocaleDataStore) -> None:
        """Exact matches are not fallbacks."""
        seen: list[FallbackInfo] = []
        PatternResolver(store, on_fallback=seen.append).resolve_pattern("en")
        assert seen == []


class TestLengthMissing:
    """Missing lengths fail without substitution."""

    def test_missing_length_raises(self, store: LocaleDataStore) -> None:
        """fr has no short pattern; full is never substituted."""
        with pytest.raises(FormatLengthMissingError) as exc_info:
            PatternResolver(store).resolve_pattern("fr", length=FormatLength.SHORT)
        error = exc_info.value
        assert error.locale_code == "fr"
        assert error.calendar == "gregorian"
        assert error.length == FormatLength.SHORT
        assert error.diagnostic is not None
        assert error.diagnostic.code == DiagnosticCode.FORMAT_LENGTH_MISSING
        assert "full" in (error.diagnostic.hint or "")

    def test_no_continue_to_default(self, store: LocaleDataStore) -> None:
        """A missing length does not try the next locale in the chain."""
        resolver = PatternResolver(store, default_locale="en")
        with pytest.raises(FormatLengthMissingError):
            resolver.resolve_pattern("fr-CA", length=FormatLength.SHORT)

    def test_invalid_length_value(self, store: LocaleDataStore) -> None:
        """Unknown length names are a ValueError."""
        with pytest.raises(ValueError, match="tiny"):
            PatternResolver(store).resolve_pattern("en", length="tiny")  # type: ignore[arg-type]


class TestResolveCalendar:
    """resolve_calendar walks the chain without a length."""

    def test_exact(self, store: LocaleDataStore) -> None:
        """A locale with the calendar resolves to itself."""
        assert PatternResolver(store).resolve_calendar("EN") == ("en", "gregorian")

    def test_default_calendar(self, store: LocaleDataStore) -> None:
        """Without a calendar the locale default applies."""
        assert PatternResolver(store).resolve_calendar("th") == ("th", "buddhist")

    def test_territory_fallback(self, store: LocaleDataStore) -> None:
        """Territory variants use the base language."""
        assert PatternResolver(store).resolve_calendar("es-AR") == ("es", "gregorian")

    def test_ignores_missing_lengths(self, store: LocaleDataStore) -> None:
        """Lengths play no part: fr resolves despite lacking short."""
        assert PatternResolver(store).resolve_calendar("fr-CA") == ("fr", "gregorian")

    def test_agrees_with_resolve_pattern(self, store: LocaleDataStore) -> None:
        """Both methods pick the same locale and calendar."""
        resolver = PatternResolver(store, default_locale="en")
        for locale in ("en", "es-MX", "th", "de-AT"):
            resolved = resolver.resolve_pattern(locale)
            assert resolver.resolve_calendar(locale) == (resolved.locale, resolved.calendar)

    def test_missing(self, store: LocaleDataStore) -> None:
        """No key with the calendar raises LocaleDataMissingError."""
        with pytest.raises(LocaleDataMissingError) as exc_info:
            PatternResolver(store).resolve_calendar("ja")
        assert exc_info.value.chain == ("ja",)


class TestEmptyCalendar:
    """An empty calendar name is a lookup, not a request for the default."""

    def test_resolve_pattern(self, store: LocaleDataStore) -> None:
        """No locale defines calendar ''."""
        with pytest.raises(LocaleDataMissingError) as exc_info:
            PatternResolver(store).resolve_pattern("en", calendar="")
        assert exc_info.value.calendar == ""

    def test_resolve_calendar(self, store: LocaleDataStore) -> None:
        """The same applies to custom-pattern symbol lookup."""
        with pytest.raises(LocaleDataMissingError):
            PatternResolver(store).resolve_calendar("en", calendar="")

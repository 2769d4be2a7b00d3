"""Locale identifier normalization and fallback chains.

Centralizes locale format normalization used throughout the codebase.
Provides canonical locale keys to ensure consistent store and cache lookups.

Python 3.13+.
"""

from __future__ import annotations

import functools
import re
from typing import TYPE_CHECKING

from cldrdates.constants import LOCALE_SEPARATOR, MAX_LOCALE_CACHE_SIZE

if TYPE_CHECKING:
    from babel import Locale

    from cldrdates.types import LocaleKey

__all__ = [
    "base_language",
    "clear_locale_cache",
    "fallback_chain",
    "get_babel_locale",
    "normalize_locale",
]

# Runs of hyphens, underscores or whitespace between subtags.
_SEPARATOR_RUN = re.compile(r"[-_\s]+")


def normalize_locale(identifier: object) -> LocaleKey:
    """Convert any locale spelling to the canonical lowercase key.

    BCP-47 uses hyphens (en-US), POSIX uses underscores (en_US), and callers
    mix case freely. All of them map to one key so that store lookups and
    cache entries agree.

    This is the canonical normalization function. All locale handling should
    normalize at the system boundary (entry point) using this function, then
    use the normalized form for lookups.

    Total: never raises. Unrecognized identifiers still normalize; they
    simply may not resolve to data later.

    Args:
        identifier: Locale code string, Babel Locale, or any object whose
            ``str()`` is a locale code

    Returns:
        Lowercase, underscore-separated locale key

    Example:
        >>> normalize_locale("en-US")
        'en_us'
        >>> normalize_locale("zh-Hant-TW")
        'zh_hant_tw'
        >>> normalize_locale("de_DE.UTF-8")
        'de_de'
        >>> normalize_locale("fr")
        'fr'
    """
    text = str(identifier).strip()
    # POSIX locale names may carry ".codeset" and "@modifier" suffixes
    for marker in (".", "@"):
        text = text.split(marker, 1)[0]
    text = _SEPARATOR_RUN.sub(LOCALE_SEPARATOR, text).strip(LOCALE_SEPARATOR)
    return text.lower()


def base_language(key: LocaleKey) -> LocaleKey:
    """Return the language subtag of a normalized key.

    Example:
        >>> base_language("pt_br")
        'pt'
    """
    return key.split(LOCALE_SEPARATOR, 1)[0]


def fallback_chain(key: LocaleKey) -> tuple[LocaleKey, ...]:
    """Compute the locale fallback chain for a normalized key.

    The chain is the key itself followed by its base language. No ultimate
    default is appended here; PatternResolver adds one only when explicitly
    configured to.

    Args:
        key: Locale key produced by normalize_locale()

    Returns:
        Tuple of one or two keys, most specific first

    Example:
        >>> fallback_chain("en_gb")
        ('en_gb', 'en')
        >>> fallback_chain("en")
        ('en',)
    """
    base = base_language(key)
    if base == key:
        return (key,)
    return (key, base)


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def get_babel_locale(identifier: str) -> Locale:
    """Get a Babel Locale object with caching.

    Parses the locale code once and caches the result. Babel accepts the
    lowercase keys produced by normalize_locale() and restores the
    territory's case itself.

    Thread-safe via lru_cache internal locking.

    Args:
        identifier: Locale code (BCP-47, POSIX or normalized key)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid

    Example:
        >>> locale = get_babel_locale("en-US")
        >>> locale.language
        'en'
        >>> locale.territory
        'US'
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(identifier))


def clear_locale_cache() -> None:
    """Clear the Babel Locale cache used by get_babel_locale()."""
    get_babel_locale.cache_clear()

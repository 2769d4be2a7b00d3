"""Read-through cache of parsed patterns.

Parsing is deterministic given the pattern text, and patterns are immutable
for the life of the store, so cached token sequences never go stale. The
cache is keyed by raw pattern text, which also lets locales that share a
pattern share its tokens.

Python 3.13+.
"""

import logging
from collections import OrderedDict
from threading import RLock

from cldrdates.constants import MAX_PATTERN_CACHE_SIZE
from cldrdates.syntax import PatternParser, Token

__all__ = ["PatternCache"]

logger = logging.getLogger(__name__)


class PatternCache:
    """Thread-safe LRU cache mapping pattern text to parsed tokens.

    Each key is populated once: concurrent misses on the same pattern may
    both parse it, but only the first result is stored and returned to
    every later caller. Patterns that fail to parse are never stored, so
    the error is raised again on every attempt.

    Example:
        >>> cache = PatternCache()
        >>> tokens = cache.get_or_parse("d MMM y")
        >>> cache.get_or_parse("d MMM y") is tokens
        True
        >>> cache.info()
        {'hits': 1, 'misses': 1, 'size': 1, 'max_size': 256}
    """

    __slots__ = ("_entries", "_hits", "_lock", "_max_size", "_misses", "_parser")

    def __init__(self, max_size: int = MAX_PATTERN_CACHE_SIZE) -> None:
        """Initialize cache.

        Args:
            max_size: Maximum cached patterns before least-recently-used eviction

        Raises:
            ValueError: If max_size is not positive
        """
        if max_size <= 0:
            msg = "max_size must be positive"
            raise ValueError(msg)
        self._entries: OrderedDict[str, tuple[Token, ...]] = OrderedDict()
        self._lock = RLock()
        self._max_size = max_size
        self._hits = 0
        self._misses = 0
        self._parser = PatternParser()

    def get_or_parse(self, pattern: str) -> tuple[Token, ...]:
        """Return cached tokens for ``pattern``, parsing on first use.

        Raises:
            UnsupportedPatternFieldError: See PatternParser.parse()
            MalformedPatternError: See PatternParser.parse()
        """
        with self._lock:
            cached = self._entries.get(pattern)
            if cached is not None:
                self._entries.move_to_end(pattern)
                self._hits += 1
                return cached
            self._misses += 1

        # Parse outside the lock; parsing is pure
        tokens = self._parser.parse(pattern)
        logger.debug("Parsed pattern %r into %d tokens", pattern, len(tokens))

        # Double-check: another thread may have stored it meanwhile
        with self._lock:
            existing = self._entries.get(pattern)
            if existing is not None:
                return existing
            if len(self._entries) >= self._max_size:
                self._entries.popitem(last=False)
            self._entries[pattern] = tokens
            return tokens

    def clear(self) -> None:
        """Remove all entries and reset statistics."""
        with self._lock:
            self._entries.clear()
            self._hits = 0
            self._misses = 0

    @property
    def size(self) -> int:
        """Current number of cached patterns."""
        with self._lock:
            return len(self._entries)

    def info(self) -> dict[str, int]:
        """Cache statistics: hits, misses, size, max_size."""
        with self._lock:
            return {
                "hits": self._hits,
                "misses": self._misses,
                "size": len(self._entries),
                "max_size": self._max_size,
            }

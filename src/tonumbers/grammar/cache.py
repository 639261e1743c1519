"""Thread-safe LRU memo of compiled grammars.

Compiled grammars are immutable, so the cache is write-once per key: the
first caller compiles, every later caller (on any thread) receives the
identical object.

Architecture:
    - OrderedDict for LRU ordering with O(1) operations
    - threading.RLock guarding every read and write
    - Compute-once: the factory runs under the lock, so concurrent first
      use of a key compiles exactly once
    - Keys are normalized locale identifiers ("en-US", "en_us" and "EN-US"
      share one entry)

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections import OrderedDict
from collections.abc import Callable
from threading import RLock

from tonumbers.constants import MAX_GRAMMAR_CACHE_SIZE
from tonumbers.locale_utils import normalize_locale

from .compiled import CompiledGrammar

__all__ = ["GrammarCache", "default_cache"]

logger = logging.getLogger(__name__)


class GrammarCache:
    """Owned, lock-guarded cache of CompiledGrammar instances.

    Attributes:
        maxsize: Maximum number of cached grammars (LRU eviction beyond it)

    Example:
        >>> cache = GrammarCache()
        >>> grammar = cache.get_or_compile("en-US", lambda: compile_en_us())  # doctest: +SKIP
        >>> cache.get("EN_US") is grammar  # doctest: +SKIP
        True
    """

    __slots__ = ("_cache", "_hits", "_lock", "_maxsize", "_misses")

    def __init__(self, maxsize: int = MAX_GRAMMAR_CACHE_SIZE) -> None:
        """Initialize grammar cache.

        Args:
            maxsize: Maximum number of entries (default: MAX_GRAMMAR_CACHE_SIZE)
        """
        if maxsize <= 0:
            msg = "maxsize must be positive"
            raise ValueError(msg)

        self._cache: OrderedDict[str, CompiledGrammar] = OrderedDict()
        self._maxsize = maxsize
        self._lock = RLock()
        self._hits = 0
        self._misses = 0

    @property
    def maxsize(self) -> int:
        """Maximum number of cached grammars."""
        return self._maxsize

    def get(self, key: str) -> CompiledGrammar | None:
        """Return the cached grammar for a locale identifier, or None."""
        cache_key = normalize_locale(key)
        with self._lock:
            grammar = self._cache.get(cache_key)
            if grammar is not None:
                self._cache.move_to_end(cache_key)
            return grammar

    def get_or_compile(
        self,
        key: str,
        factory: Callable[[], CompiledGrammar],
    ) -> CompiledGrammar:
        """Return the cached grammar for key, compiling it on first use.

        Thread Safety:
            The factory runs while the lock is held. Concurrent first calls
            for the same key block until the first compilation finishes and
            then receive the same instance.

        Args:
            key: Locale identifier (normalized before lookup)
            factory: Zero-argument callable producing the compiled grammar

        Returns:
            Cached or newly compiled grammar

        Raises:
            Whatever the factory raises; nothing is cached in that case
        """
        cache_key = normalize_locale(key)

        with self._lock:
            grammar = self._cache.get(cache_key)
            if grammar is not None:
                self._cache.move_to_end(cache_key)
                self._hits += 1
                logger.debug("Grammar cache hit: %s", cache_key)
                return grammar

            self._misses += 1
            logger.debug("Grammar cache miss: %s", cache_key)
            grammar = factory()

            # Double-check: the factory may have populated this key re-entrantly
            existing = self._cache.get(cache_key)
            if existing is not None:
                return existing

            if len(self._cache) >= self._maxsize:
                evicted, _ = self._cache.popitem(last=False)
                logger.debug("Grammar cache evicted: %s", evicted)

            self._cache[cache_key] = grammar
            return grammar

    def discard(self, key: str) -> bool:
        """Drop one cached grammar. Returns True if an entry was removed."""
        cache_key = normalize_locale(key)
        with self._lock:
            return self._cache.pop(cache_key, None) is not None

    def clear(self) -> None:
        """Drop every cached grammar and reset statistics."""
        with self._lock:
            self._cache.clear()
            self._hits = 0
            self._misses = 0

    def size(self) -> int:
        """Return the number of cached grammars."""
        with self._lock:
            return len(self._cache)

    def info(self) -> dict[str, int | tuple[str, ...]]:
        """Get cache statistics.

        Returns:
            Dictionary with keys:
            - size: Current number of cached grammars
            - max_size: Maximum cache size
            - keys: Cached locale keys (LRU order, oldest first)
            - hits: Lookups served from the cache
            - misses: Lookups that compiled

        Example:
            >>> GrammarCache().info()
            {'size': 0, 'max_size': 128, 'keys': (), 'hits': 0, 'misses': 0}
        """
        with self._lock:
            return {
                "size": len(self._cache),
                "max_size": self._maxsize,
                "keys": tuple(self._cache.keys()),
                "hits": self._hits,
                "misses": self._misses,
            }


# Shared by ToNumbers instances that do not inject their own cache
default_cache = GrammarCache()

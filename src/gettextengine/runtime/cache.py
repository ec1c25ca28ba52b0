"""Thread-safe LRU cache for resolved plural selectors.

Resolving a selector walks the header table and up to three tiers of the
locale table. The result depends only on the locale and the catalog that
was loaded for it, so it is cached per (locale, domain) and dropped when
translations change.

Architecture:
    - Thread-safe using threading.RLock (reentrant lock)
    - LRU eviction via OrderedDict
    - Explicit invalidation per locale/domain or whole-cache clear

Cache Key Structure:
    (locale, domain)

Cached values are (selector, diagnostics) tuples exactly as returned by
resolve_plural_selector(), so callers can re-emit the resolution
diagnostics on every hit.

Python 3.13+.
"""

from collections import OrderedDict
from threading import RLock

from gettextengine.constants import DEFAULT_PLURAL_CACHE_SIZE
from gettextengine.diagnostics import Diagnostic
from gettextengine.runtime.plural_data import PluralSelector
from gettextengine.types import Domain, LocaleCode

__all__ = ["PluralSelectorCache"]

type _CacheKey = tuple[LocaleCode, Domain]

type _CacheValue = tuple[PluralSelector, tuple[Diagnostic, ...]]


class PluralSelectorCache:
    """Thread-safe LRU cache for plural selector resolution.

    Transparent to caller - returns None on cache miss.

    Attributes:
        maxsize: Maximum number of cache entries
        hits: Number of cache hits (for metrics)
        misses: Number of cache misses (for metrics)
    """

    __slots__ = ("_cache", "_hits", "_lock", "_maxsize", "_misses")

    def __init__(self, maxsize: int = DEFAULT_PLURAL_CACHE_SIZE) -> None:
        """Initialize selector cache.

        Args:
            maxsize: Maximum number of entries

        Raises:
            ValueError: If maxsize is not positive
        """
        if maxsize <= 0:
            msg = "maxsize must be positive"
            raise ValueError(msg)

        self._cache: OrderedDict[_CacheKey, _CacheValue] = OrderedDict()
        self._maxsize = maxsize
        self._lock = RLock()
        self._hits = 0
        self._misses = 0

    def get(self, locale: LocaleCode, domain: Domain) -> _CacheValue | None:
        """Get cached resolution if it exists.

        Args:
            locale: Locale code
            domain: Domain name

        Returns:
            Cached (selector, diagnostics) tuple or None
        """
        key = (locale, domain)
        with self._lock:
            if key in self._cache:
                self._cache.move_to_end(key)
                self._hits += 1
                return self._cache[key]

            self._misses += 1
            return None

    def put(self, locale: LocaleCode, domain: Domain, value: _CacheValue) -> None:
        """Store a resolution, evicting the LRU entry if the cache is full."""
        key = (locale, domain)
        with self._lock:
            if key in self._cache:
                self._cache.move_to_end(key)
            elif len(self._cache) >= self._maxsize:
                self._cache.popitem(last=False)

            self._cache[key] = value

    def invalidate(self, locale: LocaleCode, domain: Domain | None = None) -> int:
        """Drop cached entries for a locale.

        Args:
            locale: Locale whose entries are dropped
            domain: Restrict to one domain; None drops every domain of the locale

        Returns:
            Number of entries removed
        """
        with self._lock:
            stale = [
                key
                for key in self._cache
                if key[0] == locale and (domain is None or key[1] == domain)
            ]
            for key in stale:
                del self._cache[key]
            return len(stale)

    def clear(self) -> None:
        """Clear all cached entries and reset metrics."""
        with self._lock:
            self._cache.clear()
            self._hits = 0
            self._misses = 0

    def get_stats(self) -> dict[str, int | float]:
        """Get cache statistics.

        Returns:
            Dict with keys:
            - size (int): Current number of cached entries
            - maxsize (int): Maximum cache capacity
            - hits (int): Number of cache hits
            - misses (int): Number of cache misses
            - hit_rate (float): Hit rate as percentage (0.0-100.0)
        """
        with self._lock:
            total = self._hits + self._misses
            hit_rate = (self._hits / total * 100) if total > 0 else 0.0

            return {
                "size": len(self._cache),
                "maxsize": self._maxsize,
                "hits": self._hits,
                "misses": self._misses,
                "hit_rate": round(hit_rate, 2),
            }

    def __len__(self) -> int:
        """Get current cache size."""
        with self._lock:
            return len(self._cache)

    @property
    def maxsize(self) -> int:
        """Maximum cache size."""
        return self._maxsize

    @property
    def hits(self) -> int:
        """Number of cache hits."""
        with self._lock:
            return self._hits

    @property
    def misses(self) -> int:
        """Number of cache misses."""
        with self._lock:
            return self._misses

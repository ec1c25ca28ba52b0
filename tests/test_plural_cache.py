"""Tests for the (locale, domain) keyed plural selector cache."""

from __future__ import annotations

import pytest

from gettextengine.runtime.cache import PluralSelectorCache
from gettextengine.runtime.plural_data import LOCALE_PLURAL_TABLE

_UK = (LOCALE_PLURAL_TABLE["uk"], ())
_EN = (LOCALE_PLURAL_TABLE["en"], ())


class TestPluralSelectorCache:
    """LRU behavior, invalidation and statistics."""

    def test_miss_then_hit(self) -> None:
        """get returns None until put, then the stored value."""
        cache = PluralSelectorCache()
        assert cache.get("uk", "messages") is None
        cache.put("uk", "messages", _UK)
        assert cache.get("uk", "messages") == _UK
        stats = cache.get_stats()
        assert stats["hits"] == 1
        assert stats["misses"] == 1
        assert stats["hit_rate"] == 50.0

    def test_keyed_by_locale_and_domain(self) -> None:
        """Different locales or domains never share an entry."""
        cache = PluralSelectorCache()
        cache.put("uk", "messages", _UK)
        assert cache.get("en", "messages") is None
        assert cache.get("uk", "errors") is None

    def test_lru_eviction(self) -> None:
        """The least recently used entry is evicted when full."""
        cache = PluralSelectorCache(maxsize=2)
        cache.put("uk", "messages", _UK)
        cache.put("en", "messages", _EN)
        cache.get("uk", "messages")
        cache.put("de", "messages", _EN)
        assert cache.get("en", "messages") is None
        assert cache.get("uk", "messages") == _UK
        assert len(cache) == 2

    def test_invalidate_one_domain(self) -> None:
        """invalidate with a domain only drops that pair."""
        cache = PluralSelectorCache()
        cache.put("uk", "messages", _UK)
        cache.put("uk", "errors", _UK)
        assert cache.invalidate("uk", "messages") == 1
        assert cache.get("uk", "messages") is None
        assert cache.get("uk", "errors") == _UK

    def test_invalidate_whole_locale(self) -> None:
        """invalidate without a domain drops every domain of the locale."""
        cache = PluralSelectorCache()
        cache.put("uk", "messages", _UK)
        cache.put("uk", "errors", _UK)
        cache.put("en", "messages", _EN)
        assert cache.invalidate("uk") == 2
        assert len(cache) == 1

    def test_clear_resets_metrics(self) -> None:
        """clear empties the cache and zeroes the counters."""
        cache = PluralSelectorCache()
        cache.put("uk", "messages", _UK)
        cache.get("uk", "messages")
        cache.clear()
        assert cache.get_stats() == {
            "size": 0,
            "maxsize": cache.maxsize,
            "hits": 0,
            "misses": 0,
            "hit_rate": 0.0,
        }

    def test_maxsize_must_be_positive(self) -> None:
        """A non-positive maxsize is rejected."""
        with pytest.raises(ValueError, match="maxsize"):
            PluralSelectorCache(maxsize=0)

"""Tests for the LRU compiled-template cache."""

from __future__ import annotations

import threading

import pytest

from fastapi_view.cache import DEFAULT_CAPACITY, LRUTemplateCache
from fastapi_view.ports import ITemplateCache


def _render(context):
    return "x"


class TestLRUTemplateCache:
    def test_default_capacity(self) -> None:
        assert LRUTemplateCache().capacity == DEFAULT_CAPACITY == 100

    def test_rejects_non_positive_capacity(self) -> None:
        with pytest.raises(ValueError):
            LRUTemplateCache(0)

    def test_satisfies_protocol(self) -> None:
        assert isinstance(LRUTemplateCache(), ITemplateCache)

    def test_get_missing_returns_none(self) -> None:
        cache = LRUTemplateCache(2)
        assert cache.get("index.tpl") is None
        assert cache.stats.misses == 1

    def test_set_then_get(self) -> None:
        cache = LRUTemplateCache(2)
        cache.set("index.tpl", _render)
        assert cache.get("index.tpl") is _render
        assert cache.stats.hits == 1

    def test_set_overwrites_entry(self) -> None:
        cache = LRUTemplateCache(2)

        def other(context):
            return "y"

        cache.set("index.tpl", _render)
        cache.set("index.tpl", other)
        assert cache.get("index.tpl") is other
        assert len(cache) == 1

    def test_capacity_never_exceeded(self) -> None:
        cache = LRUTemplateCache(3)
        for i in range(10):
            cache.set(f"page{i}", _render)
            assert len(cache) <= 3
        assert cache.stats.evictions == 7

    def test_evicts_least_recently_used(self) -> None:
        """Inserting capacity+1 keys evicts exactly the oldest one."""
        cache = LRUTemplateCache(3)
        cache.set("a", _render)
        cache.set("b", _render)
        cache.set("c", _render)

        cache.set("d", _render)

        assert "a" not in cache
        assert cache.keys() == ["b", "c", "d"]

    def test_get_protects_key_from_eviction(self) -> None:
        cache = LRUTemplateCache(3)
        cache.set("a", _render)
        cache.set("b", _render)
        cache.set("c", _render)

        cache.get("a")
        cache.set("d", _render)

        assert "a" in cache
        assert "b" not in cache
        assert cache.keys() == ["c", "a", "d"]

    def test_set_refreshes_recency(self) -> None:
        cache = LRUTemplateCache(2)
        cache.set("a", _render)
        cache.set("b", _render)
        cache.set("a", _render)
        cache.set("c", _render)
        assert cache.keys() == ["a", "c"]

    def test_membership_does_not_refresh_recency(self) -> None:
        cache = LRUTemplateCache(2)
        cache.set("a", _render)
        cache.set("b", _render)
        assert "a" in cache
        cache.set("c", _render)
        assert "a" not in cache

    def test_paths_are_not_normalised(self) -> None:
        cache = LRUTemplateCache(5)
        cache.set("/index.tpl", _render)
        assert cache.get("index.tpl") is None
        assert cache.get("./index.tpl") is None

    def test_concurrent_writers_keep_structure_consistent(self) -> None:
        cache = LRUTemplateCache(16)

        def writer(offset: int) -> None:
            for i in range(200):
                cache.set(f"page{(i + offset) % 32}", _render)
                cache.get(f"page{i % 32}")

        threads = [threading.Thread(target=writer, args=(n,)) for n in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(cache) == 16
        assert len(set(cache.keys())) == 16

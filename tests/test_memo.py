"""Tests for the async memo cache."""

from __future__ import annotations

import asyncio

from sketch_catalog.core.memo import MemoCache


class TestMemoCache:
    def test_computes_once_per_key(self):
        cache: MemoCache[list] = MemoCache("t")
        calls: list[object] = []

        async def compute():
            calls.append(1)
            return [len(calls)]

        async def go():
            a = await cache.get_or_compute("k", compute)
            b = await cache.get_or_compute("k", compute)
            c = await cache.get_or_compute(None, compute)
            return a, b, c

        a, b, c = asyncio.run(go())
        assert a is b
        assert c == [2]
        assert len(calls) == 2
        assert "k" in cache and None in cache
        assert len(cache) == 2

    def test_failed_compute_is_not_cached(self):
        cache: MemoCache[int] = MemoCache("t")

        async def boom():
            raise RuntimeError("no")

        async def ok():
            return 3

        async def go():
            try:
                await cache.get_or_compute("k", boom)
            except RuntimeError:
                pass
            return await cache.get_or_compute("k", ok)

        assert asyncio.run(go()) == 3

    def test_clear(self):
        cache: MemoCache[int] = MemoCache("t")
        cache.set("a", 1)
        assert cache.get("a") == 1
        cache.clear()
        assert cache.get("a") is None
        assert len(cache) == 0

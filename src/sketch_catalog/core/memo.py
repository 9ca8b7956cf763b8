"""Argument-keyed memoization for async catalog operations.

Each :class:`CatalogAggregator` owns one ``MemoCache`` per operation, so
tests and services can build isolated caches instead of sharing ambient
module state. Entries live until the cache object is dropped.
"""

from __future__ import annotations

import logging
from typing import Awaitable, Callable, Generic, Hashable, TypeVar

logger = logging.getLogger(__name__)

V = TypeVar("V")


class MemoCache(Generic[V]):
    """Unbounded in-memory key/value store with an async compute-on-miss helper.

    Concurrent first calls with the same key may each compute; the last
    one to finish wins. All cached computations are idempotent, so that only
    costs a redundant fetch.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._entries: dict[Hashable, V] = {}

    def __contains__(self, key: Hashable) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, key: Hashable) -> V | None:
        return self._entries.get(key)

    def set(self, key: Hashable, value: V) -> None:
        self._entries[key] = value

    def clear(self) -> None:
        self._entries.clear()

    async def get_or_compute(self, key: Hashable, compute: Callable[[], Awaitable[V]]) -> V:
        if key in self._entries:
            logger.debug(f"{self.name}: cache hit for {key!r}")
            return self._entries[key]
        value = await compute()
        self._entries[key] = value
        return value

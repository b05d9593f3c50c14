"""LRUTemplateCache - bounded, recency-ordered store for compiled templates."""

from __future__ import annotations

import logging
import threading
from collections import OrderedDict
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .ports import CompiledTemplate

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 100


@dataclass
class CacheStats:
    """Running counters for a template cache."""

    hits: int = 0
    misses: int = 0
    evictions: int = 0


class LRUTemplateCache:
    """
    Least-recently-used cache of compiled templates.

    Both ``get`` hits and ``set`` count as a use. Inserting a new key
    into a full cache evicts the least recently used key. Membership
    checks and ``len`` do not touch recency.

    The lock only guards the internal ordering; callers racing on the
    same key still both compile and the last ``set`` wins.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity <= 0:
            raise ValueError(f"Cache capacity must be positive, got {capacity}")
        self._capacity = capacity
        self._entries: OrderedDict[str, CompiledTemplate] = OrderedDict()
        self._lock = threading.Lock()
        self.stats = CacheStats()

    @property
    def capacity(self) -> int:
        return self._capacity

    def get(self, key: str) -> CompiledTemplate | None:
        with self._lock:
            value = self._entries.get(key)
            if value is None:
                self.stats.misses += 1
                return None
            self._entries.move_to_end(key)
            self.stats.hits += 1
            return value

    def set(self, key: str, value: CompiledTemplate) -> None:
        with self._lock:
            self._entries[key] = value
            self._entries.move_to_end(key)
            if len(self._entries) > self._capacity:
                evicted, _ = self._entries.popitem(last=False)
                self.stats.evictions += 1
                logger.debug("Evicted compiled template %s", evicted)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def keys(self) -> list[str]:
        """Keys from least to most recently used."""
        with self._lock:
            return list(self._entries)

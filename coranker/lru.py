"""Least-recently-used cache of query results with hit and miss accounting."""

from __future__ import annotations

from collections import OrderedDict
from dataclasses import dataclass
from typing import Iterable, Optional

_SHOWN_ENTRIES = 5


@dataclass
class _Entry:
    docs: list[int]
    hits: int = 0


class LRUCache:
    """Maps cache keys to document lists, evicting the least recently used entry."""

    def __init__(self, capacity: int = 20) -> None:
        if capacity < 1:
            raise ValueError("cache capacity must be at least 1")
        self._capacity = capacity
        # The last entry is the most recently used one.
        self._entries: OrderedDict[str, _Entry] = OrderedDict()
        self.hits = 0
        self.misses = 0
        self.replacements = 0
        self.insertions = 0
        self.inserted_keys: list[str] = []

    @property
    def capacity(self) -> int:
        """Maximum number of entries held at once."""
        return self._capacity

    @capacity.setter
    def capacity(self, value: int) -> None:
        if value < 1:
            raise ValueError("cache capacity must be at least 1")
        self._capacity = value
        while len(self._entries) > self._capacity:
            self._evict()

    @property
    def total_queries(self) -> int:
        """Number of lookups made so far."""
        return self.hits + self.misses

    @property
    def hit_rate(self) -> float:
        """Fraction of lookups that found their key, 0.0 before any lookup."""
        total = self.total_queries
        return self.hits / total if total else 0.0

    @property
    def miss_rate(self) -> float:
        """Fraction of lookups that missed, 0.0 before any lookup."""
        total = self.total_queries
        return self.misses / total if total else 0.0

    def _evict(self) -> None:
        self._entries.popitem(last=False)
        self.replacements += 1

    def get(self, key: str) -> Optional[list[int]]:
        """Return a copy of the documents stored under ``key``, or None on a miss."""
        entry = self._entries.get(key)
        if entry is None:
            self.misses += 1
            return None
        self.hits += 1
        entry.hits += 1
        self._entries.move_to_end(key)
        return list(entry.docs)

    def put(self, key: str, value: Iterable[int]) -> None:
        """Store ``value`` under ``key``, making it the most recently used entry."""
        docs = list(value)
        entry = self._entries.get(key)
        if entry is not None:
            entry.docs = docs
            self._entries.move_to_end(key)
            return
        if len(self._entries) >= self._capacity:
            self._evict()
        self._entries[key] = _Entry(docs)
        self.insertions += 1
        self.inserted_keys.append(key)

    def clear(self) -> None:
        """Drop every entry; the counters are kept."""
        self._entries.clear()
        self.inserted_keys.clear()

    def is_empty(self) -> bool:
        """Whether the cache holds no entry."""
        return not self._entries

    def is_full(self) -> bool:
        """Whether the next new key would evict an entry."""
        return len(self._entries) >= self._capacity

    def keys(self) -> list[str]:
        """Keys from most to least recently used."""
        return list(reversed(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def format_state(self) -> str:
        """Describe the cache and its most recently used entries."""
        lines = [
            "=== Estado de la Cache ===",
            f"Elementos actuales: {len(self._entries)}/{self._capacity}",
            f"Hits: {self.hits}, Misses: {self.misses}",
        ]
        recent = list(reversed(self._entries.items()))[:_SHOWN_ENTRIES]
        for position, (key, entry) in enumerate(recent, start=1):
            lines.append(f"  {position}. {key} (docs: {len(entry.docs)}, hits: {entry.hits})")
        if len(self._entries) > _SHOWN_ENTRIES:
            lines.append(f"  ... y {len(self._entries) - _SHOWN_ENTRIES} mas")
        lines.append("=========================")
        return "\n".join(lines)
"""Open-addressing hash table with string keys, linear probing and tombstones."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

V = TypeVar("V")

_MASK64 = (1 << 64) - 1
_LOAD_FACTOR = 0.7


def _djb2(key: str) -> int:
    """djb2 over the UTF-8 bytes of ``key``, bytes taken as signed, kept to 64 bits."""
    value = 5381
    for byte in key.encode("utf-8"):
        signed = byte - 256 if byte > 127 else byte
        value = (value * 33 + signed) & _MASK64
    return value


@dataclass
class _Entry(Generic[V]):
    key: str
    value: V
    deleted: bool = False


class HashTable(Generic[V]):
    """A hash table that doubles its slot count once it is 70% full."""

    def __init__(self, size: int = 53) -> None:
        if size < 1:
            raise ValueError("hash table size must be at least 1")
        self._slots: list[Optional[_Entry[V]]] = [None] * size
        self._size = 0

    @property
    def capacity(self) -> int:
        """Number of slots currently allocated."""
        return len(self._slots)

    def _home(self, key: str) -> int:
        return _djb2(key) % len(self._slots)

    def _insert_slot(self, key: str) -> int:
        count = len(self._slots)
        start = index = self._home(key)
        while (slot := self._slots[index]) is not None and not slot.deleted and slot.key != key:
            index = (index + 1) % count
            if index == start:
                break
        return index

    def _locate(self, key: str) -> Optional[int]:
        count = len(self._slots)
        start = index = self._home(key)
        while (slot := self._slots[index]) is not None:
            if not slot.deleted and slot.key == key:
                return index
            index = (index + 1) % count
            if index == start:
                break
        return None

    def _rehash(self) -> None:
        old = self._slots
        self._slots = [None] * (len(old) * 2)
        self._size = 0
        for entry in old:
            if entry is not None and not entry.deleted:
                self.insert(entry.key, entry.value)

    def insert(self, key: str, value: V) -> None:
        """Insert ``key`` or replace its value."""
        if self._size >= len(self._slots) * _LOAD_FACTOR:
            self._rehash()
        index = self._insert_slot(key)
        slot = self._slots[index]
        if slot is None or slot.deleted:
            self._size += 1
        self._slots[index] = _Entry(key, value)

    def get(self, key: str, default: Any = None) -> Any:
        """Return the value stored under ``key``, or ``default``."""
        index = self._locate(key)
        if index is None:
            return default
        entry = self._slots[index]
        assert entry is not None
        return entry.value

    def remove(self, key: str) -> bool:
        """Mark ``key`` as deleted; return whether it was present."""
        index = self._locate(key)
        if index is None:
            return False
        entry = self._slots[index]
        assert entry is not None
        entry.deleted = True
        self._size -= 1
        return True

    def __getitem__(self, key: str) -> V:
        index = self._locate(key)
        if index is None:
            raise KeyError(key)
        entry = self._slots[index]
        assert entry is not None
        return entry.value

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self._locate(key) is not None

    def __len__(self) -> int:
        return self._size
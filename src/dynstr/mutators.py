"""Mutators: in-place edits that may grow (and so relocate) the block."""

from __future__ import annotations

from .base import as_bytes
from .capacity import ensure_capacity


def _as_char(c) -> int | None:
    if isinstance(c, int):
        return c if 0 <= c <= 0xFF else None
    payload = as_bytes(c)
    if payload is None or len(payload) != 1:
        return None
    return payload[0]


class MutatorsMixin:

    def ensure_capacity(self, capacity: int) -> bool:
        return ensure_capacity(self, capacity)

    def append(self, s) -> bool:
        payload = as_bytes(s)
        if self._block is None or payload is None:
            return False
        length = self._block.length
        if not ensure_capacity(self, length + len(payload) + 1):
            return False
        self._write(length, payload)
        self._set_length(length + len(payload))
        return True

    def append_char(self, c) -> bool:
        byte = _as_char(c)
        if self._block is None or byte is None:
            return False
        length = self._block.length
        if not ensure_capacity(self, length + 2):
            return False
        self._block.data[length] = byte
        self._set_length(length + 1)
        return True

    def prepend(self, s) -> bool:
        payload = as_bytes(s)
        if self._block is None or payload is None:
            return False
        return self._insert_at(0, payload)

    def insert(self, index: int, s) -> bool:
        payload = as_bytes(s)
        if self._block is None or payload is None:
            return False
        if index < 0 or index > self._block.length:
            return False
        return self._insert_at(index, payload)

    def _insert_at(self, index: int, payload: bytes) -> bool:
        length = self._block.length
        n = len(payload)
        if not ensure_capacity(self, length + n + 1):
            return False
        # Tail moves together with its terminator
        self._move(index + n, index, length - index + 1)
        self._write(index, payload)
        self._block.length = length + n
        return True

    def remove(self, index: int, count: int) -> bool:
        if self._block is None or count < 0:
            return False
        length = self._block.length
        if index < 0 or index >= length:
            return False
        count = min(count, length - index)
        self._move(index, index + count, length - index - count + 1)
        self._block.length = length - count
        return True

    def remove_all(self, s) -> int:
        """Remove every occurrence of ``s``; returns how many were removed.

        Scanning resumes where the removed occurrence began, so occurrences
        formed by a removal are removed as well.
        """
        needle = as_bytes(s)
        if self._block is None or not needle:
            return 0
        n = len(needle)
        removed = 0
        pos = 0
        while True:
            data = self._block.data
            length = self._block.length
            pos = data.find(needle, pos, length)
            if pos < 0:
                break
            self._move(pos, pos + n, length - pos - n + 1)
            self._block.length = length - n
            removed += 1
        return removed

    def resize(self, new_length: int) -> bool:
        if self._block is None or new_length < 0:
            return False
        if not ensure_capacity(self, new_length + 1):
            return False
        length = self._block.length
        if new_length > length:
            self._block.data[length:new_length] = bytes(new_length - length)
        self._set_length(new_length)
        return True

    def clear(self) -> None:
        if self._block is not None:
            self._set_length(0)

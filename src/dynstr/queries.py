"""Queries: read-only inspection, comparison, and search."""

from __future__ import annotations

from .base import as_bytes
from .core import NPOS


def compare_bytes(a: bytes | None, b: bytes | None) -> int:
    """Three-way byte comparison where ``None`` sorts before everything."""
    if a is None or b is None:
        if a is None and b is None:
            return 0
        return -1 if a is None else 1
    return (a > b) - (a < b)


class QueriesMixin:

    def __len__(self) -> int:
        return self._block.length if self._block is not None else 0

    @property
    def length(self) -> int:
        return len(self)

    @property
    def capacity(self) -> int:
        return self._block.capacity if self._block is not None else 0

    def empty(self) -> bool:
        return self._block is None or self._block.length == 0

    def at(self, index: int) -> int:
        """Byte at ``index``, or 0 when out of range (the terminator reads 0 too)."""
        if self._block is None or index < 0 or index >= self._block.length:
            return 0
        return self._block.data[index]

    # --- Views ---

    def to_bytes(self) -> bytes:
        if self._block is None:
            return b""
        return bytes(self._block.data[:self._block.length])

    def __bytes__(self) -> bytes:
        return self.to_bytes()

    def cstr(self) -> bytes:
        """Payload as a C string would see it: up to the first NUL."""
        return self.to_bytes().split(b"\0", 1)[0]

    def view(self) -> memoryview:
        """Read-only view of the payload. Stale after the next mutation."""
        if self._block is None:
            return memoryview(b"")
        return memoryview(self._block.data).toreadonly()[:self._block.length]

    def __str__(self) -> str:
        return self.to_bytes().decode("latin-1")

    def __repr__(self) -> str:
        if self._block is None:
            return f"{type(self).__name__}(<released>)"
        return (f"{type(self).__name__}({self.to_bytes()!r}, "
                f"length={self._block.length}, capacity={self._block.capacity})")

    # --- Comparison ---

    def compare(self, other) -> int:
        mine = self.to_bytes() if self._block is not None else None
        return compare_bytes(mine, as_bytes(other))

    def equals(self, other) -> bool:
        return self.compare(other) == 0

    def __eq__(self, other):
        if not isinstance(other, (QueriesMixin, bytes, bytearray, str)):
            return NotImplemented
        return self.equals(other)

    __hash__ = None

    def starts_with(self, prefix) -> bool:
        needle = as_bytes(prefix)
        if self._block is None or needle is None or len(needle) > self._block.length:
            return False
        return self._block.data.startswith(needle, 0, self._block.length)

    def ends_with(self, suffix) -> bool:
        needle = as_bytes(suffix)
        if self._block is None or needle is None or len(needle) > self._block.length:
            return False
        return self._block.data.endswith(needle, 0, self._block.length)

    # --- Search ---

    def find(self, substr) -> int:
        """Index of the first occurrence of ``substr``; an empty needle is found at 0."""
        needle = as_bytes(substr)
        if self._block is None or needle is None:
            return NPOS
        return self._block.data.find(needle, 0, self._block.length)

    def rfind(self, substr) -> int:
        """Index of the last occurrence of ``substr``; an empty needle is NPOS."""
        needle = as_bytes(substr)
        if self._block is None or not needle:
            return NPOS
        return self._block.data.rfind(needle, 0, self._block.length)

"""String base: block ownership, construction, and release."""

from __future__ import annotations

import logging

from .capacity import round_capacity
from .core import AllocationError
from .layout import Allocator, Block, default_allocator

logger = logging.getLogger(__name__)


def as_bytes(value) -> bytes | None:
    """Coerce a string argument to bytes. ``None`` and released strings give ``None``."""
    if value is None:
        return None
    if isinstance(value, bytes):
        return value
    if isinstance(value, (bytearray, memoryview)):
        return bytes(value)
    if isinstance(value, str):
        return value.encode("utf-8")
    if isinstance(value, StrBase):
        if value._block is None:
            return None
        return value.to_bytes()
    raise TypeError(f"expected bytes-like, str or Str, got {type(value).__name__}")


class StrBase:
    """Owns a block and the allocator that produced it.

    A released string has no block and behaves like a null handle: queries
    return their defaults, mutators return False, derivers return None.
    """

    def __init__(self, block: Block, allocator: Allocator):
        self._block = block
        self._allocator = allocator

    # --- Construction ---

    @classmethod
    def new(cls, capacity: int = 0, allocator: Allocator | None = None):
        """Create an empty string able to hold ``capacity`` bytes."""
        allocator = allocator or default_allocator()
        size = round_capacity(max(capacity, 1), allocator.min_capacity)
        try:
            block = allocator.allocate(size)
        except AllocationError as e:
            logger.warning("new(%d) failed: %s", capacity, e)
            return None
        return cls(block, allocator)

    @classmethod
    def from_bytes(cls, data, allocator: Allocator | None = None):
        """Create a string holding a copy of ``data``."""
        payload = as_bytes(data)
        if payload is None:
            return None
        s = cls.new(len(payload) + 1, allocator)
        if s is None:
            return None
        s._write(0, payload)
        s._set_length(len(payload))
        return s

    def _spawn(self, capacity: int):
        return type(self).new(capacity, self._allocator)

    # --- Destruction ---

    def release(self) -> None:
        """Return the block to its allocator. Releasing twice is a no-op."""
        if self._block is not None:
            self._allocator.release(self._block)
            self._block = None

    @property
    def released(self) -> bool:
        return self._block is None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.release()

    # --- Raw payload access ---

    def _write(self, offset: int, payload: bytes) -> None:
        self._block.data[offset:offset + len(payload)] = payload

    def _move(self, dst: int, src: int, count: int) -> None:
        """Move ``count`` payload bytes from ``src`` to ``dst``; ranges may overlap."""
        data = self._block.data
        data[dst:dst + count] = data[src:src + count]

    def _set_length(self, length: int) -> None:
        block = self._block
        block.length = length
        block.data[length] = 0

    @property
    def address(self) -> int | None:
        """Identity of the current block; changes whenever the block moves."""
        return self._block.address if self._block is not None else None

    @property
    def allocator(self) -> Allocator:
        return self._allocator

"""Block layout and the allocator that hands blocks out.

A block is one allocation: a header (length, capacity) followed by
``capacity + 1`` payload bytes, the extra byte holding the terminator.
Reallocation always produces a new block with a new address, which is how
relocation on growth becomes observable.

The allocator keeps count of live blocks and bytes and can be given a byte
``limit``; a request that would push ``live_bytes`` past it raises
:class:`AllocationError` and leaves every existing block untouched.
"""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field

from .capacity import is_pow2
from .core import HEADER_SIZE, MIN_CAPACITY, AllocationError


@dataclass(eq=False)
class Block:
    """Header plus payload of a single string allocation."""

    address: int
    capacity: int
    length: int = 0
    data: bytearray | None = field(default=None, repr=False)

    def __post_init__(self):
        if self.data is None:
            self.data = bytearray(self.capacity + 1)

    @property
    def size(self) -> int:
        """Total bytes taken by the block, header included."""
        return block_size(self.capacity)


def block_size(capacity: int) -> int:
    return HEADER_SIZE + capacity + 1


class Allocator:
    def __init__(self, min_capacity: int = MIN_CAPACITY, limit: int | None = None):
        if not is_pow2(min_capacity):
            raise ValueError(f"min_capacity must be a power of two, got {min_capacity}")
        self.min_capacity = min_capacity
        self.limit = limit
        self.live_blocks = 0
        self.live_bytes = 0
        self._addresses = itertools.count(0x1000, 0x10)
        self._live: set[int] = set()

    def _reserve(self, size: int, freed: int = 0):
        if self.limit is not None and self.live_bytes - freed + size > self.limit:
            raise AllocationError(size, self.limit)

    def allocate(self, capacity: int) -> Block:
        size = block_size(capacity)
        self._reserve(size)
        block = Block(address=next(self._addresses), capacity=capacity)
        self._live.add(block.address)
        self.live_blocks += 1
        self.live_bytes += size
        return block

    def reallocate(self, block: Block, capacity: int) -> Block:
        """Move ``block`` into a new block of ``capacity`` bytes.

        The old block is released only once the new one exists.
        """
        self._check_live(block)
        size = block_size(capacity)
        self._reserve(size, freed=block.size)
        new_block = Block(address=next(self._addresses), capacity=capacity)
        keep = min(block.capacity, capacity) + 1
        new_block.data[:keep] = block.data[:keep]
        new_block.length = min(block.length, capacity)
        new_block.data[new_block.length] = 0
        self._live.add(new_block.address)
        self.live_blocks += 1
        self.live_bytes += size
        self.release(block)
        return new_block

    def release(self, block: Block) -> None:
        self._check_live(block)
        self._live.discard(block.address)
        self.live_blocks -= 1
        self.live_bytes -= block.size

    def _check_live(self, block: Block):
        if block.address not in self._live:
            raise ValueError(f"block {block.address:#x} is not live on this allocator")


_default: Allocator | None = None


def default_allocator() -> Allocator:
    """The process-wide allocator used when none is given."""
    global _default
    if _default is None:
        _default = Allocator()
    return _default

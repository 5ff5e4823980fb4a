"""Capacity policy -- power-of-two rounding and on-demand growth."""

from __future__ import annotations

import logging

from .core import MIN_CAPACITY, AllocationError

logger = logging.getLogger(__name__)


def is_pow2(n: int) -> bool:
    return n > 0 and (n & (n - 1)) == 0


def next_pow2(n: int) -> int:
    """Smallest power of two >= n (1 for n <= 1)."""
    if n <= 1:
        return 1
    return 1 << (n - 1).bit_length()


def round_capacity(capacity: int, minimum: int = MIN_CAPACITY) -> int:
    return max(minimum, next_pow2(capacity))


def ensure_capacity(s, capacity: int) -> bool:
    """Grow ``s`` so that it can hold ``capacity`` bytes.

    Returns True without touching the block when it is already large enough.
    On growth the string gets a new block (and a new address). On allocation
    failure the string keeps its old block and False is returned.
    """
    block = s._block
    if block is None:
        return False
    if block.capacity >= capacity:
        return True

    allocator = s._allocator
    new_capacity = round_capacity(capacity, allocator.min_capacity)
    try:
        new_block = allocator.reallocate(block, new_capacity)
    except AllocationError as e:
        logger.warning("growth to %d failed: %s", new_capacity, e)
        return False

    logger.debug("grew block %d -> %d (capacity %d -> %d)",
                 block.address, new_block.address, block.capacity, new_capacity)
    s._block = new_block
    return True

"""dynstr -- owned, growable, NUL-terminated byte strings.

A :class:`Str` keeps its length, capacity and payload in one block obtained
from an :class:`Allocator`. Capacity is always a power of two no smaller than
``MIN_CAPACITY``; growth swaps in a new block, so ``Str.address`` changes
while the ``Str`` object itself stays valid.

Mutators return a success flag, derivers return a new string or ``None``,
queries return plain values. :mod:`dynstr.nullsafe` offers the same
operations as free functions that accept ``None``.
"""

from . import nullsafe
from .capacity import next_pow2, round_capacity
from .core import HEADER_SIZE, MIN_CAPACITY, NPOS, AllocationError
from .layout import Allocator, Block, default_allocator
from .log import configure_logging
from .string import Str

__all__ = [
    "HEADER_SIZE",
    "MIN_CAPACITY",
    "NPOS",
    "AllocationError",
    "Allocator",
    "Block",
    "Str",
    "configure_logging",
    "default_allocator",
    "next_pow2",
    "nullsafe",
    "round_capacity",
]

"""Shared fixtures for the dynstr tests."""

import pytest

from dynstr import MIN_CAPACITY, Allocator


def assert_invariants(s):
    """Check the block invariants every public operation must preserve."""
    block = s._block
    assert block.length <= block.capacity
    assert block.capacity >= MIN_CAPACITY
    assert block.capacity & (block.capacity - 1) == 0
    assert block.data[block.length] == 0
    assert len(block.data) == block.capacity + 1


@pytest.fixture
def allocator():
    """A private allocator, so leak checks don't see other tests' blocks."""
    return Allocator()


@pytest.fixture
def invariants():
    return assert_invariants

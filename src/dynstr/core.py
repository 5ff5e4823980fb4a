"""Core constants and errors for dynstr."""

# Smallest capacity any block is rounded up to (must be a power of two)
MIN_CAPACITY = 16

# Sentinel returned by searches that find nothing
NPOS = -1

# Bytes taken by the length/capacity header in front of the payload
HEADER_SIZE = 16


class AllocationError(Exception):
    def __init__(self, requested: int, limit: int | None = None):
        self.requested = requested
        self.limit = limit
        super().__init__(f"cannot allocate {requested} bytes (limit {limit})")

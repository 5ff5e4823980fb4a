"""Formatting: printf-style construction and appending with pre-sizing.

Formats use Python's ``%`` operator: a ``bytes`` format is applied with
``bytes % args``, a ``str`` format with ``str % args`` and then encoded as
UTF-8. A single mapping argument feeds ``%(name)s`` conversions.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from .capacity import ensure_capacity

logger = logging.getLogger(__name__)


def render(fmt, args: tuple) -> bytes | None:
    """First pass: produce the formatted bytes, or None if the format is bad."""
    if fmt is None:
        return None
    values = args[0] if len(args) == 1 and isinstance(args[0], Mapping) else args
    try:
        if isinstance(fmt, str):
            return (fmt % values).encode("utf-8")
        return bytes(fmt) % values
    except (TypeError, ValueError, KeyError) as e:
        logger.warning("bad format %r: %s", fmt, e)
        return None


def _clip(rendered: bytes, limit: int | None) -> bytes:
    """Cut ``rendered`` to fit a ``limit``-byte buffer, terminator included."""
    if limit is not None and len(rendered) >= limit:
        return rendered[:max(limit - 1, 0)]
    return rendered


class FormattingMixin:

    @classmethod
    def format(cls, fmt, *args, limit: int | None = None, allocator=None):
        rendered = render(fmt, args)
        if rendered is None:
            return None
        s = cls.new(len(rendered) + 1, allocator)
        if s is None:
            return None
        written = _clip(rendered, limit)
        s._write(0, written)
        s._set_length(len(written))
        return s

    def append_fmt(self, fmt, *args, limit: int | None = None) -> bool:
        if self._block is None:
            return False
        rendered = render(fmt, args)
        if rendered is None:
            return False
        length = self._block.length
        if not ensure_capacity(self, length + len(rendered) + 1):
            return False
        written = _clip(rendered, limit)
        self._write(length, written)
        self._set_length(length + len(written))
        return True

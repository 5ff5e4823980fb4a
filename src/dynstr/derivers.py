"""Derivers: operations that build new strings from existing ones.

The source is never modified. Results live on the source's allocator and
must be released by the caller; on failure nothing is left allocated.
"""

from __future__ import annotations

from .base import StrBase, as_bytes
from .layout import default_allocator


class DeriversMixin:

    def _derive(self, payload: bytes):
        """New string on this allocator holding exactly ``payload``."""
        return type(self).from_bytes(payload, self._allocator)

    def substring(self, start: int, length: int):
        if self._block is None or start < 0 or start >= self._block.length or length < 0:
            return None
        length = min(length, self._block.length - start)
        return self._derive(bytes(self._block.data[start:start + length]))

    def replace(self, old, new):
        """Replace every non-overlapping occurrence of ``old`` with ``new``."""
        return self._replace(old, new, first_only=False)

    def replace_all(self, old, new):
        return self._replace(old, new, first_only=False)

    def replace_first(self, old, new):
        return self._replace(old, new, first_only=True)

    def _replace(self, old, new, first_only: bool):
        old_b = as_bytes(old)
        new_b = as_bytes(new)
        if self._block is None or old_b is None or new_b is None:
            return None
        src = self.to_bytes()
        if not old_b:
            return self._derive(src)

        count = src.count(old_b)
        if first_only:
            count = min(count, 1)
        result = self._spawn(len(src) + count * (len(new_b) - len(old_b)) + 1)
        if result is None:
            return None

        # Walk the source, emitting `new` at each match and plain runs between
        dest = 0
        pos = 0
        for _ in range(count):
            hit = src.find(old_b, pos)
            result._write(dest, src[pos:hit])
            dest += hit - pos
            result._write(dest, new_b)
            dest += len(new_b)
            pos = hit + len(old_b)
        result._write(dest, src[pos:])
        dest += len(src) - pos
        result._set_length(dest)
        return result

    def split(self, delim):
        """Split on ``delim``, keeping empty leading, interior, and trailing parts.

        Returns a list of new strings, or None when ``delim`` is missing or
        empty or an allocation fails (in which case no part stays allocated).
        """
        sep = as_bytes(delim)
        if self._block is None or not sep:
            return None
        parts = []
        for piece in self.to_bytes().split(sep):
            part = self._derive(piece)
            if part is None:
                for built in parts:
                    built.release()
                return None
            parts.append(part)
        return parts

    @classmethod
    def join(cls, strings, delim):
        """Concatenate borrowed ``strings`` with ``delim`` between them."""
        strings = list(strings)
        sep = as_bytes(delim)
        if not strings or sep is None:
            return None
        pieces = []
        for s in strings:
            piece = as_bytes(s)
            if piece is None:
                return None
            pieces.append(piece)
        owner = next((s for s in strings if isinstance(s, StrBase)), None)
        allocator = owner.allocator if owner is not None else default_allocator()
        return cls.from_bytes(sep.join(pieces), allocator)

    def reverse(self):
        if self._block is None:
            return None
        return self._derive(self.to_bytes()[::-1])

    def reverse_in_place(self) -> None:
        if self._block is None or self._block.length < 2:
            return
        data = self._block.data
        i, j = 0, self._block.length - 1
        while i < j:
            data[i], data[j] = data[j], data[i]
            i += 1
            j -= 1

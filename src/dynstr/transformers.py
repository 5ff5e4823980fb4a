"""Transformers: in-place case conversion and whitespace trimming.

All predicates are byte-wise ASCII; bytes outside A-Z / a-z pass through the
case folds untouched. Only snake_case can grow the block.
"""

from __future__ import annotations

from .capacity import ensure_capacity

_SPACE = frozenset(b" \t\n\r\x0b\x0c")
_SEPARATORS = frozenset(b" _")


def _is_upper(b: int) -> bool:
    return 0x41 <= b <= 0x5A


def _is_lower(b: int) -> bool:
    return 0x61 <= b <= 0x7A


def _lower(b: int) -> int:
    return b + 0x20 if _is_upper(b) else b


def _upper(b: int) -> int:
    return b - 0x20 if _is_lower(b) else b


class TransformersMixin:

    def to_lower(self) -> None:
        if self._block is None:
            return
        n = self._block.length
        data = self._block.data
        data[:n] = data[:n].lower()

    def to_upper(self) -> None:
        if self._block is None:
            return
        n = self._block.length
        data = self._block.data
        data[:n] = data[:n].upper()

    # --- Word case ---

    def snake_case(self) -> bool:
        """Lowercase every uppercase byte, putting ``_`` before interior ones.

        Runs are not special-cased: ``HTTPServer`` becomes ``h_t_t_p_server``.
        """
        if self._block is None:
            return False
        length = self._block.length
        data = self._block.data
        inserts = sum(1 for b in data[1:length] if _is_upper(b))
        # Grow once up front so a failure leaves the string untouched
        if not ensure_capacity(self, length + inserts + 1):
            return False

        i = 0
        while i < self._block.length:
            data = self._block.data
            if _is_upper(data[i]):
                data[i] = _lower(data[i])
                if i > 0:
                    self._insert_at(i, b"_")
                    i += 1
            i += 1
        return True

    def camel_case(self) -> None:
        if self._block is None or self._block.length == 0:
            return
        data = self._block.data
        length = self._block.length

        data[0] = _lower(data[0])
        read = write = 1
        capitalize_next = False
        while read < length:
            c = data[read]
            read += 1
            if c in _SEPARATORS:
                capitalize_next = True
            elif capitalize_next:
                data[write] = _upper(c)
                write += 1
                capitalize_next = False
            else:
                data[write] = _lower(c)
                write += 1
        self._set_length(write)

    def pascal_case(self) -> None:
        if self._block is None or self._block.length == 0:
            return
        data = self._block.data
        length = self._block.length

        read = write = 0
        new_word = True
        while read < length:
            c = data[read]
            read += 1
            if c in _SEPARATORS:
                new_word = True
            elif new_word:
                data[write] = _upper(c)
                write += 1
                new_word = False
            elif _is_upper(c) and read < length and _is_lower(data[read]):
                # Uppercase followed by lowercase starts a camelCase word
                data[write] = c
                write += 1
            else:
                data[write] = _lower(c)
                write += 1
        self._set_length(write)

    # --- Whitespace ---

    def _first_non_space(self) -> int:
        data = self._block.data
        length = self._block.length
        start = 0
        while start < length and data[start] in _SPACE:
            start += 1
        return start

    def _end_non_space(self, start: int = 0) -> int:
        """One past the last non-whitespace byte at or after ``start``."""
        data = self._block.data
        end = self._block.length
        while end > start and data[end - 1] in _SPACE:
            end -= 1
        return end

    def trim(self) -> None:
        if self._block is None or self._block.length == 0:
            return
        start = self._first_non_space()
        end = self._end_non_space(start)
        self._move(0, start, end - start)
        self._set_length(end - start)

    def ltrim(self) -> None:
        if self._block is None or self._block.length == 0:
            return
        start = self._first_non_space()
        length = self._block.length
        self._move(0, start, length - start)
        self._set_length(length - start)

    def rtrim(self) -> None:
        if self._block is None or self._block.length == 0:
            return
        self._set_length(self._end_non_space())

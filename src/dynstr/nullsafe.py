"""Free-function API that tolerates ``None`` in place of a string.

Each function forwards to the matching :class:`Str` method. A ``None`` (or
released) string maps to the documented default: 0, False, NPOS, b"" for
queries, False for mutators, None for derivers.
"""

from __future__ import annotations

from .core import NPOS
from .queries import compare_bytes
from .string import Str


def _live(s: Str | None) -> bool:
    return s is not None and not s.released


# --- Creation and destruction ---

def new(capacity: int = 0, allocator=None) -> Str | None:
    return Str.new(capacity, allocator)


def from_bytes(data, allocator=None) -> Str | None:
    return Str.from_bytes(data, allocator)


def format(fmt, *args, **kwargs) -> Str | None:
    return Str.format(fmt, *args, **kwargs)


def release(s: Str | None) -> None:
    if s is not None:
        s.release()


# --- Queries ---

def length(s: Str | None) -> int:
    return len(s) if _live(s) else 0


def capacity(s: Str | None) -> int:
    return s.capacity if _live(s) else 0


def empty(s: Str | None) -> bool:
    return not _live(s) or s.empty()


def at(s: Str | None, index: int) -> int:
    return s.at(index) if _live(s) else 0


def cstr(s: Str | None) -> bytes:
    return s.cstr() if _live(s) else b""


def compare(a: Str | None, b: Str | None) -> int:
    """Three-way compare; two nulls are equal and a null sorts first."""
    return compare_bytes(a.to_bytes() if _live(a) else None,
                         b.to_bytes() if _live(b) else None)


def equals(a: Str | None, b: Str | None) -> bool:
    return compare(a, b) == 0


def starts_with(s: Str | None, prefix) -> bool:
    return _live(s) and s.starts_with(prefix)


def ends_with(s: Str | None, suffix) -> bool:
    return _live(s) and s.ends_with(suffix)


def find(s: Str | None, substr) -> int:
    return s.find(substr) if _live(s) else NPOS


def rfind(s: Str | None, substr) -> int:
    return s.rfind(substr) if _live(s) else NPOS


# --- Mutators ---

def ensure_capacity(s: Str | None, capacity: int) -> bool:
    return _live(s) and s.ensure_capacity(capacity)


def append(s: Str | None, text) -> bool:
    return _live(s) and s.append(text)


def append_char(s: Str | None, c) -> bool:
    return _live(s) and s.append_char(c)


def append_fmt(s: Str | None, fmt, *args, **kwargs) -> bool:
    return _live(s) and s.append_fmt(fmt, *args, **kwargs)


def prepend(s: Str | None, text) -> bool:
    return _live(s) and s.prepend(text)


def insert(s: Str | None, index: int, text) -> bool:
    return _live(s) and s.insert(index, text)


def remove(s: Str | None, index: int, count: int) -> bool:
    return _live(s) and s.remove(index, count)


def remove_all(s: Str | None, substr) -> int:
    return s.remove_all(substr) if _live(s) else 0


def resize(s: Str | None, new_length: int) -> bool:
    return _live(s) and s.resize(new_length)


def clear(s: Str | None) -> None:
    if _live(s):
        s.clear()


# --- Transformers ---

def to_lower(s: Str | None) -> None:
    if _live(s):
        s.to_lower()


def to_upper(s: Str | None) -> None:
    if _live(s):
        s.to_upper()


def snake_case(s: Str | None) -> bool:
    return _live(s) and s.snake_case()


def camel_case(s: Str | None) -> None:
    if _live(s):
        s.camel_case()


def pascal_case(s: Str | None) -> None:
    if _live(s):
        s.pascal_case()


def trim(s: Str | None) -> None:
    if _live(s):
        s.trim()


def ltrim(s: Str | None) -> None:
    if _live(s):
        s.ltrim()


def rtrim(s: Str | None) -> None:
    if _live(s):
        s.rtrim()


# --- Derivers ---

def substring(s: Str | None, start: int, count: int) -> Str | None:
    return s.substring(start, count) if _live(s) else None


def replace(s: Str | None, old, new) -> Str | None:
    return s.replace(old, new) if _live(s) else None


def replace_all(s: Str | None, old, new) -> Str | None:
    return s.replace_all(old, new) if _live(s) else None


def replace_first(s: Str | None, old, new) -> Str | None:
    return s.replace_first(old, new) if _live(s) else None


def split(s: Str | None, delim) -> list[Str] | None:
    return s.split(delim) if _live(s) else None


def join(strings, delim) -> Str | None:
    return Str.join(strings, delim)


def reverse(s: Str | None) -> Str | None:
    return s.reverse() if _live(s) else None


def reverse_in_place(s: Str | None) -> None:
    if _live(s):
        s.reverse_in_place()

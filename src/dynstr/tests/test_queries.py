"""Tests for inspection, comparison, and search."""

import pytest

from dynstr import NPOS, Str


def make(text, allocator):
    return Str.from_bytes(text, allocator)


class TestInspection:
    def test_at(self, allocator):
        s = make("Hello", allocator)
        assert s.at(0) == ord("H")
        assert s.at(4) == ord("o")

    @pytest.mark.parametrize("index", [5, 100, -1])
    def test_at_out_of_range_is_zero(self, allocator, index):
        assert make("Hello", allocator).at(index) == 0

    def test_terminator_after_payload(self, allocator):
        s = make("Hello", allocator)
        assert s._block.data[len(s)] == 0
        assert s.at(len(s)) == 0

    def test_length_property(self, allocator):
        s = make("Hello", allocator)
        assert s.length == len(s) == 5

    def test_embedded_nul(self, allocator):
        s = make(b"ab\0cd", allocator)
        assert len(s) == 5
        assert s.cstr() == b"ab"
        assert bytes(s) == b"ab\0cd"
        assert s.find(b"cd") == 3

    def test_view_is_read_only(self, allocator):
        s = make("Hello", allocator)
        view = s.view()
        assert view.tobytes() == b"Hello"
        with pytest.raises(TypeError):
            view[0] = 0

    def test_str_and_repr(self, allocator):
        s = make("Hi", allocator)
        assert str(s) == "Hi"
        assert repr(s) == "Str(b'Hi', length=2, capacity=16)"


class TestComparison:
    def test_compare(self, allocator):
        s1 = make("Hello", allocator)
        s2 = make("Hello", allocator)
        s3 = make("World", allocator)
        assert s1.compare(s2) == 0
        assert s1.compare(s3) < 0
        assert s3.compare(s1) > 0
        assert s1.equals(s2)
        assert not s1.equals(s3)

    def test_prefix_sorts_first(self, allocator):
        assert make("abc", allocator).compare("abcd") == -1
        assert make("abcd", allocator).compare("abc") == 1

    def test_bytes_compare_unsigned(self, allocator):
        assert make(b"\xff", allocator).compare(b"\x01") == 1

    def test_null_ordering(self, allocator):
        live = make("", allocator)
        dead = make("x", allocator)
        dead.release()
        assert live.compare(None) == 1
        assert dead.compare(live) == -1
        assert dead.compare(None) == 0

    def test_eq(self, allocator):
        s = make("abc", allocator)
        assert s == b"abc"
        assert s == bytearray(b"abc")
        assert s == make("abc", allocator)
        assert s != b"abd"
        assert s == "abc"
        assert s != "abd"

    def test_unhashable(self, allocator):
        with pytest.raises(TypeError):
            hash(make("abc", allocator))

    def test_starts_and_ends_with(self, allocator):
        s = make("Hello", allocator)
        assert s.starts_with("He")
        assert not s.starts_with("Wo")
        assert s.ends_with("lo")
        assert not s.ends_with("ld")
        assert s.starts_with("")
        assert s.ends_with("")

    def test_needle_longer_than_string(self, allocator):
        s = make("Hi", allocator)
        assert not s.starts_with("Hi!")
        assert not s.ends_with("!Hi")

    def test_none_needle(self, allocator):
        s = make("Hi", allocator)
        assert not s.starts_with(None)
        assert not s.ends_with(None)


class TestSearch:
    def test_find_and_rfind(self, allocator):
        s = make("Hello World! Hello Universe!", allocator)
        assert s.find("World") == 6
        assert s.find("Goodbye") == NPOS
        assert s.rfind("Hello") == 13
        assert s.rfind("Goodbye") == NPOS

    def test_empty_needle(self, allocator):
        s = make("Hello", allocator)
        assert s.find("") == 0
        assert s.rfind("") == NPOS

    def test_needle_longer_than_string(self, allocator):
        s = make("ab", allocator)
        assert s.find("abc") == NPOS
        assert s.rfind("abc") == NPOS

    def test_search_ignores_stale_bytes_past_length(self, allocator):
        s = make("Hello World", allocator)
        s.resize(5)
        assert s.find("World") == NPOS
        assert s.rfind("o") == 4

    @pytest.mark.parametrize("needle", ["l", "lo", "xyz", "Hello", "o W"])
    def test_find_rfind_consistency(self, allocator, needle):
        s = make("Hello World", allocator)
        if s.find(needle) == NPOS:
            assert s.rfind(needle) == NPOS
        else:
            assert s.find(needle) <= s.rfind(needle)

    def test_none_needle(self, allocator):
        s = make("Hello", allocator)
        assert s.find(None) == NPOS
        assert s.rfind(None) == NPOS

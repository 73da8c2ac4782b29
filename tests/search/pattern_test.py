import pytest

from strmatch.search.base import InvalidPattern, StringMatchError
from strmatch.search.compare import compare_backward, compare_ends_first, compare_forward, compare_raita
from strmatch.search.pattern import Pattern, as_pattern
from strmatch.search.text import TextView


def test_pattern_tables_are_derived_once():
    pattern = Pattern(b"ABAB")
    assert pattern.length == 4
    assert pattern.lps == (0, 0, 1, 2)
    assert pattern.bad_char[ord("A")] == 1
    assert pattern.bad_char[ord("B")] == 2
    assert pattern.all_distinct is False
    assert pattern.lps is pattern.lps


def test_pattern_from_str_and_buffers():
    assert Pattern("abc").data == b"abc"
    assert Pattern("é", encoding="latin-1").data == b"\xe9"
    assert Pattern(bytearray(b"abc")).data == b"abc"
    assert Pattern(memoryview(b"abc")).data == b"abc"
    assert Pattern(Pattern(b"abc")) == Pattern(b"abc")


def test_pattern_copies_mutable_input():
    buffer = bytearray(b"abc")
    pattern = Pattern(buffer)
    buffer[0] = ord("z")
    assert pattern.data == b"abc"


def test_pattern_is_read_only():
    pattern = Pattern(b"abc")
    with pytest.raises(AttributeError):
        pattern.length = 5
    with pytest.raises(AttributeError):
        pattern.lps = ()


def test_empty_pattern_is_rejected():
    with pytest.raises(InvalidPattern):
        Pattern(b"")
    with pytest.raises(StringMatchError):
        Pattern("")
    with pytest.raises(ValueError):
        Pattern(bytearray())


def test_as_pattern_reuses_instance():
    pattern = Pattern(b"abc")
    assert as_pattern(pattern) is pattern
    assert as_pattern(b"abc") == pattern


def test_text_view_borrows_buffer():
    buffer = bytearray(b"hello")
    text = TextView(buffer)
    assert text.length == 5
    assert len(text) == 5
    assert text[1] == ord("e")
    assert text.data.readonly
    buffer[0] = ord("j")
    # a view, not a copy
    assert text.tobytes() == b"jello"


def test_text_view_rejects_writes():
    text = TextView(bytearray(b"hello"))
    with pytest.raises(TypeError):
        text.data[0] = 1


def test_text_view_casts_other_formats():
    import array
    text = TextView(array.array("H", [1, 2]))
    assert text.length == 4


def test_text_view_empty_and_wrapped():
    assert TextView(b"").length == 0
    inner = TextView(b"abc")
    assert TextView(inner).tobytes() == b"abc"


@pytest.mark.parametrize("compare", [compare_forward, compare_backward, compare_ends_first, compare_raita])
def test_compare_primitives(compare):
    text = b"xxabcdexx"
    assert compare(text, 2, b"abcde")[0] is True
    assert compare(text, 2, b"abcdf")[0] is False
    assert compare(text, 2, b"zbcde")[0] is False
    assert compare(text, 2, b"abzde")[0] is False
    assert compare(text, 2, b"a")[0] is True
    assert compare(text, 2, b"ab")[0] is True
    assert compare(text, 2, b"ac")[0] is False


def test_compare_counts():
    assert compare_forward(b"abc", 0, b"abd") == (False, 3)
    assert compare_backward(b"abc", 0, b"abd") == (False, 1)
    assert compare_ends_first(b"abcde", 0, b"abzde") == (False, 4)
    assert compare_ends_first(b"abcde", 0, b"zbcde") == (False, 1)
    # middle byte first
    assert compare_raita(b"abcde", 0, b"abzde") == (False, 1)
    assert compare_raita(b"abcde", 0, b"abcde") == (True, 6)

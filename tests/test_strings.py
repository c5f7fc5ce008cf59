import copy

import pytest
from hypothesis import given
from hypothesis import strategies as st

from hdftypes.strings import (
    FixedAscii,
    FixedUnicode,
    StringError,
    StringErrorKind,
    VarLenAscii,
    VarLenUnicode,
)

CAP = 1024

ascii_bytes = st.lists(st.integers(min_value=1, max_value=0x7E), max_size=CAP).map(bytes)
unicode_text = (
    st.text(max_size=256)
    .map(lambda s: s.replace("\0", ""))
    .filter(lambda s: len(s.encode("utf-8")) <= CAP)
)


def _check_invariants(s, expected, data):
    assert len(s) == len(expected.encode("utf-8"))
    assert bool(s) == bool(expected)
    assert bool(s) == bool(data)
    assert s.as_str() == expected
    assert s.as_bytes() == data
    assert copy.copy(s).as_bytes() == s.as_bytes()
    assert hash(s) == hash(expected)
    assert str(s) == expected
    assert repr(s) == repr(expected)
    assert s == s
    assert s == expected
    assert expected == s
    assert bytes(s) == data


def test_internal_null():
    with pytest.raises(StringError) as exc:
        VarLenAscii.from_ascii("foo\0bar")
    assert exc.value.kind is StringErrorKind.INTERNAL_NULL
    with pytest.raises(StringError) as exc:
        VarLenUnicode.from_str("foo\0bar")
    assert exc.value.kind is StringErrorKind.INTERNAL_NULL


def test_capacity():
    assert FixedAscii.from_ascii("ab", 2).as_str() == "ab"
    with pytest.raises(StringError) as exc:
        FixedAscii.from_ascii("abc", 2)
    assert exc.value.kind is StringErrorKind.INSUFFICIENT_CAPACITY
    assert FixedUnicode.from_str("ab", 2).as_str() == "ab"
    with pytest.raises(StringError):
        FixedUnicode.from_str("abc", 2)
    assert FixedUnicode.from_str("®", 2).as_str() == "®"
    with pytest.raises(StringError) as exc:
        FixedUnicode.from_str("€", 2)
    assert exc.value.kind is StringErrorKind.INSUFFICIENT_CAPACITY


@pytest.mark.parametrize("text", ["®", "€"])
def test_non_ascii(text):
    with pytest.raises(StringError) as exc:
        VarLenAscii.from_ascii(text)
    assert exc.value.kind is StringErrorKind.ASCII_ERROR
    with pytest.raises(StringError) as exc:
        FixedAscii.from_ascii(text, CAP)
    assert exc.value.kind is StringErrorKind.ASCII_ERROR


def test_null_padding():
    assert FixedAscii.from_ascii("a\0b", 3).as_str() == "a\0b"
    assert FixedAscii.from_ascii("a\0\0", 3).as_str() == "a"
    assert not FixedAscii.from_ascii("\0\0\0", 3)
    assert FixedUnicode.from_str("a\0b", 3).as_str() == "a\0b"
    assert FixedUnicode.from_str("a\0\0", 3).as_str() == "a"
    assert not FixedUnicode.from_str("\0\0\0", 3)


@pytest.mark.parametrize(
    "factory",
    [VarLenAscii, VarLenUnicode, lambda: FixedAscii(CAP), lambda: FixedUnicode(CAP)],
)
def test_default(factory):
    s = factory()
    assert len(s) == 0
    assert not s
    assert s.as_bytes() == b""
    assert s.as_str() == ""


def test_error_message():
    assert str(StringError(StringErrorKind.INTERNAL_NULL)) == (
        "string error: variable length string with internal null"
    )
    assert str(StringError(StringErrorKind.INSUFFICIENT_CAPACITY)) == (
        "string error: insufficient capacity for fixed sized string"
    )


def test_unchecked_truncation():
    assert FixedAscii.from_ascii_unchecked(b"abcdef", 3).as_bytes() == b"abc"
    assert VarLenAscii.from_ascii_unchecked(b"ab\0cd").as_bytes() == b"ab"
    assert VarLenUnicode.from_str_unchecked("xy\0z").as_str() == "xy"
    assert FixedUnicode.from_str_unchecked("hello", 4).as_str() == "hell"


def test_fixed_capacity_property_and_validation():
    assert FixedAscii(7).capacity == 7
    assert FixedUnicode.from_str("x", 5).capacity == 5
    with pytest.raises(ValueError):
        FixedAscii(-1)
    with pytest.raises(TypeError):
        FixedUnicode("3")


def test_type_errors():
    with pytest.raises(TypeError):
        VarLenUnicode.from_str(b"abc")
    with pytest.raises(TypeError):
        VarLenAscii.from_ascii(123)


def test_equality_between_types():
    assert VarLenAscii.from_ascii("abc") == VarLenAscii.from_ascii(b"abc")
    assert FixedAscii.from_ascii("abc", 4) == FixedAscii.from_ascii("abc", 8)
    assert VarLenAscii.from_ascii("abc") != VarLenAscii.from_ascii("abd")
    assert VarLenUnicode.from_str("abc") != "abd"


@given(ascii_bytes)
def test_quickcheck_va(data):
    expected = data.decode("ascii")
    s = VarLenAscii.from_ascii(data)
    _check_invariants(s, expected, data)
    assert len(s) == len(data)
    assert VarLenAscii.from_ascii_unchecked(data).as_bytes() == data


@given(ascii_bytes)
def test_quickcheck_fa(data):
    expected = data.decode("ascii")
    s = FixedAscii.from_ascii(data, CAP)
    _check_invariants(s, expected, data)
    assert len(s) == len(data)
    assert FixedAscii.from_ascii_unchecked(data, CAP).as_bytes() == data


@given(unicode_text)
def test_quickcheck_vu(text):
    data = text.encode("utf-8")
    s = VarLenUnicode.from_str(text)
    _check_invariants(s, text, data)
    assert VarLenUnicode.from_str_unchecked(text).as_bytes() == data


@given(unicode_text)
def test_quickcheck_fu(text):
    data = text.encode("utf-8")
    s = FixedUnicode.from_str(text, CAP)
    _check_invariants(s, text, data)
    assert FixedUnicode.from_str_unchecked(text, CAP).as_bytes() == data
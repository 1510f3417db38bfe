import pytest

from galgo.functional import from_chars, pipe, to_bytes, to_chars


@pytest.mark.parametrize("text", ["FOLLOW UP", "T", "", "héllo"])
def test_chars_round_trip(text):
    assert pipe(to_chars, from_chars)(text) == text


def test_to_chars_length_matches():
    text = "héllo"
    chars = to_chars(text)
    assert len(chars) == len(text)
    assert all(len(c) == 1 for c in chars)


def test_to_bytes():
    assert to_bytes("hello") == b"hello"
    assert to_bytes("héllo").decode() == "héllo"


def test_pipe_single_function():
    assert pipe(to_chars)("abc") == to_chars("abc")


def test_pipe_applies_left_to_right():
    assert pipe(str, len)(12345) == 5


def test_pipe_many_functions():
    text = "abcdef"
    assert pipe(to_chars, reversed, from_chars, to_bytes)(text) == text[::-1].encode()


def test_pipe_requires_a_function():
    with pytest.raises(ValueError):
        pipe()
import io

import pytest

from pushswap.linereader import LineReader

TEXT = "first line\nsecond\n\nlast without newline"


@pytest.mark.parametrize("size", [1, 2, 3, 7, 50, 1000])
def test_lines_rejoin_to_input(size):
    lines = list(LineReader(io.StringIO(TEXT), size))
    assert "".join(lines) == TEXT
    assert lines == TEXT.splitlines(keepends=True)


@pytest.mark.parametrize("size", [1, 4, 50])
def test_every_line_but_last_ends_with_newline(size):
    lines = list(LineReader(io.StringIO("a\nbb\nccc\n"), size))
    assert all(line.endswith("\n") for line in lines)
    assert len(lines) == 3


def test_read_line_sequence_and_end():
    reader = LineReader(io.StringIO("one\ntwo"), 2)
    assert reader.read_line() == "one\n"
    assert reader.read_line() == "two"
    assert reader.read_line() is None
    assert reader.read_line() is None


def test_empty_stream():
    reader = LineReader(io.StringIO(""))
    assert reader.read_line() is None
    assert list(reader) == []


def test_binary_stream():
    data = b"alpha\nbeta\n"
    lines = list(LineReader(io.BytesIO(data), 3))
    assert lines == data.splitlines(keepends=True)


def test_blank_line_is_kept():
    reader = LineReader(io.StringIO("\n\nx"), 5)
    assert reader.read_line() == "\n"
    assert reader.read_line() == "\n"
    assert reader.read_line() == "x"


@pytest.mark.parametrize("size", [0, -5])
def test_bad_buffer_size(size):
    with pytest.raises(ValueError):
        LineReader(io.StringIO("x"), size)
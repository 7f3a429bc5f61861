import io

import pytest

from pipex.linereader import LineReader


class _GrowingStream:
    """A stream that can be fed more text after reporting end of data."""

    def __init__(self):
        self._buffer = ""

    def feed(self, text):
        self._buffer += text

    def read(self, size):
        chunk, self._buffer = self._buffer[:size], self._buffer[size:]
        return chunk


class _FailingStream:
    def read(self, size):
        raise OSError("read failed")


@pytest.mark.parametrize("buffer_size", [1, 2, 3, 7, 1024])
def test_lines_rejoin_to_input(buffer_size):
    data = "first line\nsecond\n\nlast without newline"
    lines = list(LineReader(io.StringIO(data), buffer_size))
    assert "".join(lines) == data
    assert all(line.endswith("\n") for line in lines[:-1])
    assert lines[-1] == "last without newline"


@pytest.mark.parametrize("buffer_size", [1, 4, 100])
def test_line_count_matches_splitlines(buffer_size):
    data = "a\nbb\nccc\n"
    lines = list(LineReader(io.StringIO(data), buffer_size))
    assert lines == data.splitlines(keepends=True)


def test_empty_line_is_returned():
    reader = LineReader(io.StringIO("x\n\ny\n"), 3)
    assert reader.read_line() == "x\n"
    assert reader.read_line() == "\n"
    assert reader.read_line() == "y\n"
    assert reader.read_line() is None


def test_bytes_stream():
    data = b"EOF\nmore\n"
    lines = list(LineReader(io.BytesIO(data), 2))
    assert lines == data.splitlines(keepends=True)
    assert all(isinstance(line, bytes) for line in lines)


def test_empty_stream():
    assert LineReader(io.StringIO(""), 5).read_line() is None


def test_default_buffer_size_reads_one_at_a_time():
    reader = LineReader(io.StringIO("ab\ncd"))
    assert reader.read_line() == "ab\n"
    assert reader.read_line() == "cd"


def test_reading_resumes_after_end_of_data():
    stream = _GrowingStream()
    reader = LineReader(stream, 4)
    stream.feed("one\n")
    assert reader.read_line() == "one\n"
    assert reader.read_line() is None
    stream.feed("two\n")
    assert reader.read_line() == "two\n"


def test_leftover_is_kept_between_calls():
    stream = _GrowingStream()
    stream.feed("a\nb")
    reader = LineReader(stream, 100)
    assert reader.read_line() == "a\n"
    stream.feed("c\n")
    assert reader.read_line() == "bc\n"


@pytest.mark.parametrize("buffer_size", [0, -1])
def test_buffer_size_must_be_positive(buffer_size):
    with pytest.raises(ValueError):
        LineReader(io.StringIO("x"), buffer_size)


def test_read_error_propagates():
    reader = LineReader(_FailingStream(), 4)
    with pytest.raises(OSError):
        reader.read_line()
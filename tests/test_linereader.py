import io

import pytest

from minish.linereader import LineReader


class _RecordingStream:
    def __init__(self, data):
        self._inner = io.StringIO(data)
        self.sizes = []

    def read(self, size):
        self.sizes.append(size)
        return self._inner.read(size)


@pytest.mark.parametrize("buffer_size", [1, 2, 3, 7, 32, 1000])
def test_lines_with_trailing_newline(buffer_size):
    lines = ["first line", "second", "a much longer third line than the buffer"]
    data = "\n".join(lines) + "\n"
    reader = LineReader(io.StringIO(data), buffer_size)
    assert list(reader) == lines


@pytest.mark.parametrize("buffer_size", [1, 4, 32])
def test_last_line_without_newline_is_returned(buffer_size):
    lines = ["echo hello", "exit"]
    reader = LineReader(io.StringIO("\n".join(lines)), buffer_size)
    assert list(reader) == lines


def test_empty_lines_are_kept():
    lines = ["a", "", "b"]
    reader = LineReader(io.StringIO("\n".join(lines) + "\n"))
    assert list(reader) == lines


def test_empty_stream_gives_none():
    reader = LineReader(io.StringIO(""))
    assert reader.read_line() is None


def test_reads_after_end_keep_giving_none():
    reader = LineReader(io.StringIO("only\n"))
    assert reader.read_line() == "only"
    assert reader.read_line() is None
    assert reader.read_line() is None


def test_read_line_one_at_a_time():
    reader = LineReader(io.StringIO("cd /tmp\npwd\n"), 3)
    assert reader.read_line() == "cd /tmp"
    assert reader.read_line() == "pwd"
    assert reader.read_line() is None


def test_default_buffer_size_is_used_for_reads():
    stream = _RecordingStream("x" * 100 + "\n")
    reader = LineReader(stream)
    assert reader.read_line() == "x" * 100
    assert stream.sizes
    assert set(stream.sizes) == {32}


def test_does_not_read_past_a_complete_line():
    stream = _RecordingStream("ab\ncd\nef\n" + "z" * 50)
    reader = LineReader(stream, 10)
    assert reader.read_line() == "ab"
    assert len(stream.sizes) == 1


@pytest.mark.parametrize("buffer_size", [0, -4])
def test_non_positive_buffer_size_raises(buffer_size):
    with pytest.raises(ValueError):
        LineReader(io.StringIO("a\n"), buffer_size)


def test_read_errors_propagate():
    class _Broken:
        def read(self, size):
            raise OSError("read failed")

    reader = LineReader(_Broken())
    with pytest.raises(OSError):
        reader.read_line()
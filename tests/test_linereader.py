import io

import pytest

from philo.linereader import LineReader, LineReaderPool


class _ChunkStream:
    """Stream that hands out queued chunks and reports end of data between them."""

    def __init__(self):
        self.queue = []

    def read(self, size):
        if not self.queue:
            return ""
        chunk = self.queue.pop(0)
        if len(chunk) > size:
            self.queue.insert(0, chunk[size:])
            chunk = chunk[:size]
        return chunk


class _FailingStream:
    def read(self, size):
        raise OSError("read failed")


def test_reads_lines_with_newlines():
    reader = LineReader(io.StringIO("one\ntwo\nthree"), 3)
    assert reader.read_line() == "one\n"
    assert reader.read_line() == "two\n"
    assert reader.read_line() == "three"
    assert reader.read_line() is None


@pytest.mark.parametrize("size", [1, 2, 3, 5, 42, 1000])
def test_lines_join_back_to_input(size):
    text = "alpha\n\nbeta\ngamma delta\n"
    lines = list(LineReader(io.StringIO(text), size))
    assert "".join(lines) == text
    assert all(line.endswith("\n") for line in lines)


def test_empty_line_is_returned():
    reader = LineReader(io.StringIO("\n\nx"))
    assert list(reader) == ["\n", "\n", "x"]


def test_binary_stream():
    reader = LineReader(io.BytesIO(b"ab\ncd"), 4)
    assert list(reader) == [b"ab\n", b"cd"]


def test_empty_stream():
    assert LineReader(io.StringIO("")).read_line() is None


def test_invalid_buffer_size():
    with pytest.raises(ValueError):
        LineReader(io.StringIO("x"), 0)
    with pytest.raises(ValueError):
        LineReaderPool(-1)


def test_reads_again_after_end_of_data():
    stream = _ChunkStream()
    stream.queue.append("first\n")
    reader = LineReader(stream, 4)
    assert reader.read_line() == "first\n"
    assert reader.read_line() is None
    stream.queue.append("second\n")
    assert reader.read_line() == "second\n"


def test_partial_line_joined_across_chunks():
    stream = _ChunkStream()
    stream.queue.extend(["par", "tial\nrest"])
    reader = LineReader(stream, 10)
    assert reader.read_line() == "partial\n"
    assert reader.read_line() == "rest"


def test_read_error_propagates():
    with pytest.raises(OSError):
        LineReader(_FailingStream()).read_line()


def test_pool_keeps_streams_apart():
    pool = LineReaderPool(2)
    first = io.StringIO("a1\na2\n")
    second = io.StringIO("b1\nb2\n")
    assert pool.next_line(first) == "a1\n"
    assert pool.next_line(second) == "b1\n"
    assert pool.next_line(first) == "a2\n"
    assert pool.next_line(second) == "b2\n"
    assert pool.next_line(first) is None
    assert pool.next_line(second) is None


def test_pool_matches_single_reader():
    text = "x\nyy\nzzz"
    pool = LineReaderPool(3)
    stream = io.StringIO(text)
    pooled = []
    while (line := pool.next_line(stream)) is not None:
        pooled.append(line)
    assert pooled == list(LineReader(io.StringIO(text), 3))
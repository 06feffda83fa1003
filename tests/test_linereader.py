import os
from contextlib import contextmanager

import pytest

from pipex.linereader import LineReader


@contextmanager
def _open_with(tmp_path, data: bytes):
    path = tmp_path / "input.txt"
    path.write_bytes(data)
    fd = os.open(path, os.O_RDONLY)
    try:
        yield fd
    finally:
        os.close(fd)


def test_reads_lines_keeping_newlines(tmp_path):
    with _open_with(tmp_path, b"a\nbb\nccc") as fd:
        reader = LineReader(fd)
        assert reader.read_line() == b"a\n"
        assert reader.read_line() == b"bb\n"
        assert reader.read_line() == b"ccc"
        assert reader.read_line() is None


@pytest.mark.parametrize("size", [1, 2, 3, 10, 100])
def test_buffer_size_does_not_change_result(tmp_path, size):
    data = b"first line\nsecond\n\nlast without newline"
    with _open_with(tmp_path, data) as fd:
        lines = list(LineReader(fd, size))
    assert b"".join(lines) == data
    assert lines == data.splitlines(keepends=True)


def test_empty_input_gives_none(tmp_path):
    with _open_with(tmp_path, b"") as fd:
        reader = LineReader(fd)
        assert reader.read_line() is None
        assert list(reader) == []


def test_trailing_newline_ends_cleanly(tmp_path):
    with _open_with(tmp_path, b"x\ny\n") as fd:
        assert list(LineReader(fd, 4)) == [b"x\n", b"y\n"]


def test_reads_from_pipe():
    read_end, write_end = os.pipe()
    try:
        os.write(write_end, b"one\ntwo\n")
        os.close(write_end)
        assert list(LineReader(read_end, 3)) == [b"one\n", b"two\n"]
    finally:
        os.close(read_end)


def test_negative_fd_rejected():
    with pytest.raises(ValueError):
        LineReader(-1)


@pytest.mark.parametrize("size", [0, -5])
def test_non_positive_buffer_rejected(size):
    with pytest.raises(ValueError):
        LineReader(0, size)


def test_default_buffer_size():
    assert LineReader(0).buffer_size == 10


def test_read_error_propagates(tmp_path):
    path = tmp_path / "f"
    path.write_bytes(b"data")
    fd = os.open(path, os.O_RDONLY)
    os.close(fd)
    reader = LineReader(fd)
    with pytest.raises(OSError):
        reader.read_line()
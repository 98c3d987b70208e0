import os

import pytest

from fractol.linereader import LineReader, iter_lines


@pytest.fixture
def open_file(tmp_path):
    fds = []

    def _open(content: bytes, name: str = "data.txt") -> int:
        path = tmp_path / name
        path.write_bytes(content)
        fd = os.open(path, os.O_RDONLY)
        fds.append(fd)
        return fd

    yield _open
    for fd in fds:
        os.close(fd)


def test_reads_lines_and_last_line_without_newline(open_file):
    fd = open_file(b"first\nsecond\nthird")
    reader = LineReader()
    assert reader.next_line(fd) == b"first"
    assert reader.next_line(fd) == b"second"
    assert reader.next_line(fd) == b"third"
    assert reader.next_line(fd) is None
    assert reader.next_line(fd) is None


def test_blank_lines_and_trailing_newline(open_file):
    fd = open_file(b"a\n\nb\n")
    assert list(iter_lines(fd)) == [b"a", b"", b"b"]


def test_empty_file(open_file):
    fd = open_file(b"")
    assert LineReader().next_line(fd) is None


@pytest.mark.parametrize("size", [1, 2, 3, 7, 1024])
def test_buffer_size_does_not_change_lines(open_file, size):
    content = b"alpha\nbe\n\ngamma delta\nz"
    fd = open_file(content, f"data{size}.txt")
    assert b"\n".join(iter_lines(fd, size)) == content


def test_interleaved_descriptors(open_file):
    first = open_file(b"1a\n1b\n", "one.txt")
    second = open_file(b"2a\n2b\n", "two.txt")
    reader = LineReader(buffer_size=2)
    assert reader.next_line(first) == b"1a"
    assert reader.next_line(second) == b"2a"
    assert reader.next_line(first) == b"1b"
    assert reader.next_line(second) == b"2b"
    assert reader.next_line(first) is None


def test_long_line_larger_than_buffer(open_file):
    line = b"x" * 5000
    fd = open_file(line + b"\nend")
    assert list(iter_lines(fd, 16)) == [line, b"end"]


def test_bad_descriptor_raises(tmp_path):
    path = tmp_path / "closed.txt"
    path.write_bytes(b"data\n")
    fd = os.open(path, os.O_RDONLY)
    os.close(fd)
    with pytest.raises(OSError):
        LineReader().next_line(fd)


def test_invalid_buffer_size():
    with pytest.raises(ValueError):
        LineReader(0)
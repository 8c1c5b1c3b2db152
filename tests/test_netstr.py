import io

import pytest

from vsftpcore.netstr import (
    LineTooLongError,
    NetStrError,
    read_exact,
    read_terminated,
    write_all,
)


class FakeSocket:
    def __init__(self, data, peek_limit=None):
        self.data = bytearray(data)
        self.peek_limit = peek_limit

    def peek(self, n):
        if self.peek_limit is not None:
            n = min(n, self.peek_limit)
        return bytes(self.data[:n])

    def read(self, n):
        out = bytes(self.data[:n])
        del self.data[:n]
        return out


class TrickleWriter:
    def __init__(self, step):
        self.step = step
        self.buf = bytearray()

    def write(self, data):
        piece = bytes(data[: self.step])
        self.buf += piece
        return len(piece)


class TrickleReader:
    def __init__(self, data, step):
        self.stream = io.BytesIO(data)
        self.step = step

    def read(self, n):
        return self.stream.read(min(n, self.step))


def test_read_line_excludes_terminator_and_leaves_rest():
    sock = FakeSocket(b"USER anonymous\r\nPASS x\r\n")
    line = read_terminated(sock.peek, sock.read, b"\n", 100)
    assert line == b"USER anonymous\r"
    assert bytes(sock.data) == b"PASS x\r\n"


@pytest.mark.parametrize("limit", [1, 2, 3, 7])
def test_read_line_across_small_peeks(limit):
    sock = FakeSocket(b"hello world\nnext", peek_limit=limit)
    assert read_terminated(sock.peek, sock.read, b"\n", 64) == b"hello world"
    assert bytes(sock.data) == b"next"


def test_read_line_exactly_at_limit():
    sock = FakeSocket(b"abcd\n")
    assert read_terminated(sock.peek, sock.read, b"\n", 5) == b"abcd"


def test_read_line_too_long():
    sock = FakeSocket(b"abcde\n")
    with pytest.raises(LineTooLongError):
        read_terminated(sock.peek, sock.read, b"\n", 5)


def test_read_line_no_data():
    sock = FakeSocket(b"")
    with pytest.raises(NetStrError):
        read_terminated(sock.peek, sock.read, b"\n", 10)


def test_read_line_connection_drops_midway():
    sock = FakeSocket(b"partial")
    with pytest.raises(NetStrError):
        read_terminated(sock.peek, sock.read, b"\n", 50)


def test_read_line_bad_terminator():
    sock = FakeSocket(b"x\n")
    with pytest.raises(ValueError):
        read_terminated(sock.peek, sock.read, b"\r\n", 10)


def test_write_all_loops_until_done():
    writer = TrickleWriter(3)
    payload = b"226 Transfer complete.\r\n"
    assert write_all(writer, payload) == len(payload)
    assert bytes(writer.buf) == payload


def test_write_all_rejects_empty():
    with pytest.raises(ValueError):
        write_all(io.BytesIO(), b"")


def test_write_all_stalled_stream():
    with pytest.raises(NetStrError):
        write_all(TrickleWriter(0), b"data")


def test_read_exact_collects_pieces():
    reader = TrickleReader(b"0123456789", 4)
    assert read_exact(reader, 7) == b"0123456"


def test_read_exact_short_stream():
    with pytest.raises(NetStrError):
        read_exact(io.BytesIO(b"abc"), 5)


def test_write_then_read_round_trip():
    buf = io.BytesIO()
    write_all(buf, b"round trip")
    buf.seek(0)
    assert read_exact(buf, len(b"round trip")) == b"round trip"
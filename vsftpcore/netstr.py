"""Reading and writing whole strings over network streams."""

from __future__ import annotations

from typing import BinaryIO, Callable

__all__ = [
    "NetStrError",
    "LineTooLongError",
    "read_terminated",
    "write_all",
    "read_exact",
]

ReadFunc = Callable[[int], bytes]


class NetStrError(Exception):
    """Raised when the network stream fails or delivers too little data."""


class LineTooLongError(NetStrError):
    """Raised when no terminator appears within the length limit."""


def read_terminated(peek: ReadFunc, read: ReadFunc, term: bytes, maxlen: int) -> bytes:
    """Read up to and including ``term``; return the data before it.

    ``peek(n)`` returns up to ``n`` pending bytes without consuming them and
    ``read(n)`` consumes exactly ``n``. Only bytes up to the terminator are
    consumed, so nothing after the line is lost. Raises
    :class:`LineTooLongError` if ``maxlen`` bytes pass without a terminator.
    """
    if len(term) != 1:
        raise ValueError("terminator must be a single byte")
    line = bytearray()
    left = maxlen
    while True:
        if left <= 0:
            raise LineTooLongError(f"no terminator within {maxlen} bytes")
        chunk = peek(left)
        if not chunk:
            raise NetStrError("peek: no data")
        if len(chunk) > left:
            raise NetStrError("peek returned more than requested")
        position = chunk.find(term)
        if position >= 0:
            wanted = position + 1
            consumed = read(wanted)
            if len(consumed) != wanted or consumed[-1:] != term:
                raise NetStrError("short read while consuming line")
            line += consumed[:-1]
            return bytes(line)
        consumed = read(len(chunk))
        if len(consumed) != len(chunk):
            raise NetStrError("short read while consuming line")
        line += consumed
        left -= len(consumed)


def write_all(stream: BinaryIO, data: bytes) -> int:
    """Write all of ``data`` to ``stream`` and return its length."""
    if not data:
        raise ValueError("refusing to write an empty string")
    view = memoryview(bytes(data))
    while view:
        written = stream.write(view)
        if not written:
            raise NetStrError("write made no progress")
        view = view[written:]
    return len(data)


def read_exact(stream: BinaryIO, length: int) -> bytes:
    """Read exactly ``length`` bytes from ``stream``."""
    buf = bytearray()
    while len(buf) < length:
        chunk = stream.read(length - len(buf))
        if not chunk:
            raise NetStrError(f"expected {length} bytes, got {len(buf)}")
        buf += chunk
    return bytes(buf)
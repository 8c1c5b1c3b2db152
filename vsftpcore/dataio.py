"""Moving file contents and directory listings over an FTP data connection."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import BinaryIO, Callable, Iterable, Optional

from .ascii import ascii_to_bin, bin_to_ascii

__all__ = [
    "TransferResult",
    "BandwidthLimiter",
    "get_chunk_size",
    "send_file",
    "recv_file",
    "write_dir_list",
    "DATA_BUFSIZE",
    "DIR_BUFSIZE",
    "MIN_CHUNK_SIZE",
    "LOCAL_ERROR",
    "REMOTE_ERROR",
]

DATA_BUFSIZE = 65536
DIR_BUFSIZE = 16384
MIN_CHUNK_SIZE = 4096

LOCAL_ERROR = -1
REMOTE_ERROR = -2

WriteFunc = Callable[[bytes], Optional[int]]
ReadFunc = Callable[[int], bytes]


@dataclass
class TransferResult:
    """Outcome of a file transfer.

    ``retval`` is 0 on success, :data:`LOCAL_ERROR` for a problem with the
    local file and :data:`REMOTE_ERROR` for a problem with the network side.
    ``transferred`` counts bytes moved, including on failure.
    """

    retval: int = 0
    transferred: int = 0

    @property
    def ok(self) -> bool:
        return self.retval == 0

    @property
    def local_error(self) -> bool:
        return self.retval == LOCAL_ERROR

    @property
    def remote_error(self) -> bool:
        return self.retval == REMOTE_ERROR


def get_chunk_size(trans_chunk_size: int) -> int:
    """Return the transfer chunk size for the ``trans_chunk_size`` setting.

    Zero or anything not below :data:`DATA_BUFSIZE` means the full buffer;
    smaller positive values are raised to at least :data:`MIN_CHUNK_SIZE`.
    """
    if 0 < trans_chunk_size < DATA_BUFSIZE:
        return max(trans_chunk_size, MIN_CHUNK_SIZE)
    return DATA_BUFSIZE


def _write_count(write: WriteFunc, data: bytes) -> int:
    written = write(data)
    return len(data) if written is None else int(written)


def send_file(
    source: BinaryIO,
    write: WriteFunc,
    is_ascii: bool = False,
    chunk_size: int = DATA_BUFSIZE,
) -> TransferResult:
    """Send ``source`` from its current position through ``write``.

    ``write(data)`` returns the number of bytes it sent (None means all)
    or raises ``OSError``. In ASCII mode bare LF is sent as CR LF.
    """
    result = TransferResult()
    prev_cr = False
    while True:
        try:
            chunk = source.read(chunk_size)
        except OSError:
            result.retval = LOCAL_ERROR
            return result
        if not chunk:
            return result
        if is_ascii:
            converted = bin_to_ascii(chunk, prev_cr)
            chunk = converted.data
            prev_cr = converted.last_was_cr
        try:
            written = _write_count(write, chunk)
        except OSError:
            result.retval = REMOTE_ERROR
            return result
        result.transferred += max(written, 0)
        if written != len(chunk):
            result.retval = REMOTE_ERROR
            return result


def recv_file(
    read: ReadFunc,
    sink: BinaryIO,
    is_ascii: bool = False,
    chunk_size: int = DATA_BUFSIZE,
) -> TransferResult:
    """Receive data from ``read`` into ``sink`` until ``read`` returns ``b""``.

    ``read(n)`` returns up to ``n`` bytes or raises ``OSError``. In ASCII
    mode CR LF is stored as LF. ``transferred`` counts bytes received.
    """
    result = TransferResult()
    prev_cr = False
    while True:
        try:
            chunk = read(chunk_size)
        except OSError:
            result.retval = REMOTE_ERROR
            return result
        if not chunk and not prev_cr:
            return result
        result.transferred += len(chunk)
        if is_ascii:
            converted = ascii_to_bin(chunk, prev_cr)
            chunk = converted.data
            prev_cr = converted.last_was_cr
        if not chunk:
            continue
        try:
            view = memoryview(chunk)
            while view:
                written = sink.write(view)
                if not written:
                    raise OSError("write made no progress")
                view = view[written:]
        except OSError:
            result.retval = LOCAL_ERROR
            return result


def write_dir_list(
    lines: Iterable[bytes], write: WriteFunc, bufsize: int = DIR_BUFSIZE
) -> None:
    """Write listing lines through ``write``, coalesced into few calls.

    Lines are gathered until adding the next one would pass ``bufsize``.
    Any ``OSError`` from ``write`` stops the listing and is raised.
    """
    items = [bytes(line) for line in lines]
    buf = bytearray()
    for index, line in enumerate(items):
        buf += line
        is_last = index == len(items) - 1
        if is_last or len(buf) + len(items[index + 1]) > bufsize:
            data = bytes(buf)
            if _write_count(write, data) != len(data):
                raise OSError("short write of directory listing")
            buf.clear()


class BandwidthLimiter:
    """Throttles a transfer to ``max_rate`` bytes per second.

    Call :meth:`on_io` after each successful read or write. ``progress``
    becomes True whenever data moves, so a stall watchdog can clear it and
    check it later. A ``max_rate`` of 0 means unlimited.
    """

    def __init__(
        self,
        max_rate: int,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.max_rate = max_rate
        self._clock = clock
        self._sleep = sleep
        self.progress = False
        self._start = clock()

    def on_io(self, nbytes: int) -> None:
        """Account for ``nbytes`` moved, pausing if the rate is exceeded."""
        if nbytes <= 0:
            return
        self.progress = True
        if not self.max_rate:
            return
        now = self._clock()
        elapsed = now - self._start
        if elapsed <= 0:
            elapsed = 0.01
        rate = int(nbytes / elapsed)
        if rate <= self.max_rate:
            self._start = now
            return
        pause = (rate / self.max_rate - 1.0) * elapsed
        self._sleep(pause)
        self._start = self._clock()
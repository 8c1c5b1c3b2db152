"""Loading a file into memory with a size cap."""

from __future__ import annotations

import os
import stat

__all__ = ["read_file"]


def read_file(path: str | os.PathLike, maxsize: int) -> bytes:
    """Return at most ``maxsize`` bytes from the start of ``path``.

    Anything that is not a regular file (a directory, say) yields ``b""``.
    An ``OSError`` is raised if the file cannot be opened or read. It is
    also raised if the file yields fewer bytes than its size promised.
    """
    fd = os.open(path, os.O_RDONLY)
    try:
        info = os.fstat(fd)
        if not stat.S_ISREG(info.st_mode):
            return b""
        size = min(info.st_size, maxsize)
        chunks = []
        remaining = size
        while remaining > 0:
            chunk = os.read(fd, remaining)
            if not chunk:
                break
            chunks.append(chunk)
            remaining -= len(chunk)
        data = b"".join(chunks)
        if len(data) != size:
            raise OSError(f"read size mismatch for {os.fspath(path)!r}")
        return data
    finally:
        os.close(fd)
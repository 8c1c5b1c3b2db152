"""Line-ending translation for ASCII mode transfers.

Data arrives in fragments, so each call reports whether the fragment ended
on a carriage return. Pass that flag as ``prev_cr`` with the next fragment.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

__all__ = [
    "AsciiToBinResult",
    "BinToAsciiResult",
    "ascii_to_bin",
    "bin_to_ascii",
]

_CR = b"\r"
_LF = b"\n"
_BARE_LF = re.compile(rb"(?<!\r)\n")


@dataclass(frozen=True)
class AsciiToBinResult:
    """Output of :func:`ascii_to_bin`."""

    data: bytes
    last_was_cr: bool


@dataclass(frozen=True)
class BinToAsciiResult:
    """Output of :func:`bin_to_ascii`."""

    data: bytes
    last_was_cr: bool


def ascii_to_bin(data: bytes, prev_cr: bool) -> AsciiToBinResult:
    """Turn every CR LF into LF; a CR not followed by LF is kept.

    A CR at the very end of ``data`` is held back and reported through
    ``last_was_cr``; it is emitted at the start of the next fragment unless
    that fragment begins with LF.
    """
    data = bytes(data)
    prefix = _CR if prev_cr and not data.startswith(_LF) else b""
    last_was_cr = data.endswith(_CR)
    body = data[:-1] if last_was_cr else data
    return AsciiToBinResult(prefix + body.replace(b"\r\n", _LF), last_was_cr)


def bin_to_ascii(data: bytes, prev_cr: bool) -> BinToAsciiResult:
    """Turn every LF not preceded by CR into CR LF; CR LF is left alone."""
    data = bytes(data)
    if not data:
        return BinToAsciiResult(b"", bool(prev_cr))
    if prev_cr and data.startswith(_LF):
        converted = _LF + _BARE_LF.sub(b"\r\n", data[1:])
    else:
        converted = _BARE_LF.sub(b"\r\n", data)
    return BinToAsciiResult(converted, data.endswith(_CR))
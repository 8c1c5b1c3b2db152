"""Strict parsers for textual IPv4 and IPv6 addresses.

Results are raw network-order bytes; any malformed input raises
:class:`AddressParseError`.
"""

from __future__ import annotations

__all__ = [
    "AddressParseError",
    "parse_ipv6",
    "parse_ipv4",
    "parse_uchar_string_sep",
]

_HEX_DIGITS = "0123456789ABCDEF"
_DEC_DIGITS = "0123456789"


class AddressParseError(ValueError):
    """Raised when an address string is malformed."""


def _atoi(text: str) -> int:
    """Leading-integer conversion: whitespace, optional sign, digits."""
    stripped = text.lstrip(" \t\n\v\f\r")
    sign = 1
    if stripped[:1] in ("+", "-"):
        if stripped[0] == "-":
            sign = -1
        stripped = stripped[1:]
    digits = ""
    for ch in stripped:
        if ch not in _DEC_DIGITS:
            break
        digits += ch
    return sign * int(digits) if digits else 0


def _parse_hex_group(group: str) -> bytes:
    value = 0
    for ch in group.upper():
        digit = _HEX_DIGITS.find(ch) if len(ch) == 1 else -1
        if digit < 0:
            raise AddressParseError(f"bad hex digit in {group!r}")
        value = (value << 4) | digit
        if value > 0xFFFF:
            raise AddressParseError(f"hex group {group!r} too large")
    return value.to_bytes(2, "big")


def _parse_dotquad(text: str) -> bytes:
    octets = text.split(".")
    if len(octets) != 4:
        raise AddressParseError(f"bad dotted quad {text!r}")
    result = bytearray()
    for octet in octets:
        if not octet:
            raise AddressParseError(f"empty octet in {text!r}")
        value = 0
        for ch in octet:
            if ch not in _DEC_DIGITS:
                raise AddressParseError(f"bad digit in {text!r}")
            value = value * 10 + int(ch)
            if value > 255:
                raise AddressParseError(f"octet too large in {text!r}")
        result.append(value)
    return bytes(result)


def _parse_groups(text: str) -> bytes:
    out = bytearray()
    rest = text
    while rest:
        group, _, rest = rest.partition(":")
        if not group:
            raise AddressParseError(f"empty group in {text!r}")
        if "." in group:
            out += _parse_dotquad(group)
        else:
            out += _parse_hex_group(group)
    return bytes(out)


def parse_ipv6(text: str) -> bytes:
    """Parse an IPv6 address into its bytes.

    A ``::`` with groups after it is expanded with zero bytes to make 16.
    Without ``::`` (or with nothing after it) no padding is added, so the
    result may be shorter than 16 bytes.
    """
    lhs, _, rhs = text.partition("::")
    head = _parse_groups(lhs)
    tail = _parse_groups(rhs)
    if len(head) + len(tail) > 16:
        raise AddressParseError(f"address {text!r} too long")
    if tail:
        return head + bytes(16 - len(head) - len(tail)) + tail
    return head


def parse_ipv4(text: str) -> bytes:
    """Parse a dotted IPv4 address into its four bytes."""
    return parse_uchar_string_sep(text, ".", 4)


def parse_uchar_string_sep(text: str, sep: str, items: int) -> bytes:
    """Parse exactly ``items`` fields separated by ``sep``, each 0..255."""
    result = bytearray()
    rest = text
    for index in range(items):
        field, _, rest = rest.partition(sep)
        is_last = index == items - 1
        if (not is_last and not rest) or (is_last and rest):
            raise AddressParseError(f"wrong number of fields in {text!r}")
        number = _atoi(field)
        if not 0 <= number <= 255:
            raise AddressParseError(f"field {field!r} out of range")
        result.append(number)
    return bytes(result)
import socket

import pytest

from vsftpcore.ipaddr import (
    AddressParseError,
    parse_ipv4,
    parse_ipv6,
    parse_uchar_string_sep,
)


@pytest.mark.parametrize(
    "text",
    [
        "1:2:3:4:5:6:7:8",
        "::1",
        "fe80::1",
        "2001:db8::ff00:42:8329",
        "::ffff:192.0.2.128",
        "FFFF:abcd::",
        "0:0:0:0:0:0:0:0",
    ],
)
def test_ipv6_full_forms_match_inet_pton(text):
    if text.endswith("::"):
        padded = text + "0"
    else:
        padded = text
    assert parse_ipv6(padded) == socket.inet_pton(socket.AF_INET6, padded)


def test_ipv6_trailing_double_colon_adds_no_padding():
    assert parse_ipv6("1::") == parse_ipv6("1")


def test_ipv6_bare_double_colon_is_empty():
    assert parse_ipv6("::") == b""


@pytest.mark.parametrize(
    "text",
    [
        "1:::2",
        "12345::",
        "g::1",
        "1.2.3::",
        "1.2.3.256::",
        "1:2:3:4:5:6:7:8::1",
        "::1::2",
        ":1",
        "1..2.3::",
    ],
)
def test_ipv6_rejects_malformed(text):
    with pytest.raises(AddressParseError):
        parse_ipv6(text)


@pytest.mark.parametrize("text", ["192.168.1.2", "0.0.0.0", "255.255.255.255"])
def test_ipv4_matches_inet_aton(text):
    assert parse_ipv4(text) == socket.inet_aton(text)


@pytest.mark.parametrize(
    "text", ["1.2.3", "1.2.3.4.5", "1.2.3.256", "1.2.3.-1", "1.2.3.", ""]
)
def test_ipv4_rejects_malformed(text):
    with pytest.raises(AddressParseError):
        parse_ipv4(text)


def test_port_style_fields():
    assert parse_uchar_string_sep("10,0,0,1,4,1", ",", 6) == bytes(
        [10, 0, 0, 1, 4, 1]
    )


@pytest.mark.parametrize("text", ["10,0,0,1,4", "10,0,0,1,4,1,9", "10,0,0,1,4,300"])
def test_port_style_fields_rejected(text):
    with pytest.raises(AddressParseError):
        parse_uchar_string_sep(text, ",", 6)


def test_field_count_matches_items():
    result = parse_uchar_string_sep("7|8", "|", 2)
    assert list(result) == [7, 8]
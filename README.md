# vsftpcore

Low-level building blocks for an FTP server. It covers ASCII-mode line
ending conversion, moving file data and directory listings over a data
connection, bandwidth throttling, strict parsing of IPv4 and IPv6 address
text, bounded reads from a network stream, and loading files with a size
cap. It uses only the standard library.

## Modules

- `vsftpcore.ascii`: `bin_to_ascii(data, prev_cr)` turns each bare LF into
  CR LF. `ascii_to_bin(data, prev_cr)` turns each CR LF into LF. Both return
  a frozen result with `data` and `last_was_cr`. Pass `last_was_cr` as
  `prev_cr` with the next chunk so that a CR LF split across two chunks is
  handled correctly. `ascii_to_bin` holds back a CR at the end of a chunk.
  It emits that CR at the start of the next chunk unless the next chunk
  begins with LF.
- `vsftpcore.dataio`:
  - `send_file(source, write, is_ascii, chunk_size)` reads a binary file
    object from its current position and passes the data to `write`.
  - `recv_file(read, sink, is_ascii, chunk_size)` reads from `read(n)` until
    it returns `b""` and writes the data to `sink`.
  - Both return a `TransferResult` with `retval`, `transferred`, `ok`,
    `local_error` and `remote_error`. A `retval` of `LOCAL_ERROR` (-1) means
    the local file failed. A `retval` of `REMOTE_ERROR` (-2) means the
    network side failed or wrote short.
  - `write_dir_list(lines, write, bufsize)` joins listing lines into as few
    `write` calls as `bufsize` allows.
  - `get_chunk_size(trans_chunk_size)` turns a chunk-size setting into the
    size actually used. It returns `DATA_BUFSIZE` (65536) for 0 or for values
    that are too large. Smaller positive values are raised to at least
    `MIN_CHUNK_SIZE` (4096).
  - `BandwidthLimiter(max_rate, clock, sleep)` pauses in `on_io(nbytes)`
    when the rate is above `max_rate` bytes per second. It sets `progress`
    to True whenever data moves.
- `vsftpcore.ipaddr`:
  - `parse_ipv4` returns four bytes.
  - `parse_ipv6` returns the address bytes and accepts embedded dotted
    quads. A `::` followed by groups is padded to 16 bytes. Without `::`,
    no padding is added, so the result can be shorter than 16 bytes.
  - `parse_uchar_string_sep(text, sep, items)` parses exactly `items`
    fields in 0..255, as in a `PORT` argument.
  - Bad input raises `AddressParseError`, which is a subclass of
    `ValueError`.
- `vsftpcore.netstr`:
  - `read_terminated(peek, read, term, maxlen)` reads a line using a peek
    function and a read function. It consumes bytes only up to the
    terminator and returns the line without it. It raises
    `LineTooLongError` once `maxlen` bytes pass with no terminator.
  - `read_exact(stream, length)` reads exactly `length` bytes.
  - `write_all(stream, data)` writes all of `data`.
  - Stream failures raise `NetStrError`.
- `vsftpcore.filestr`: `read_file(path, maxsize)` returns at most `maxsize`
  bytes from the start of a regular file. It returns `b""` for anything
  that is not a regular file. A file that cannot be opened raises
  `OSError`.
- `vsftpcore.hashtable`: `HashTable(buckets, hash_func)` is a chained table.
  It calls `hash_func(buckets, key)` to choose a bucket. It has `lookup`
  (returns None when the key is missing), `add`, `remove`, `in` and `len`.
  A duplicate key, a missing key on `remove` or an out-of-range bucket
  index raises `HashError`.

## Examples

```python
import io

from vsftpcore.ascii import ascii_to_bin, bin_to_ascii
from vsftpcore.dataio import get_chunk_size, send_file
from vsftpcore.hashtable import HashTable
from vsftpcore.ipaddr import parse_ipv4, parse_uchar_string_sep

print(bin_to_ascii(b"one\ntwo\n", False).data)   # b'one\r\ntwo\r\n'

first = ascii_to_bin(b"a\r\nb\r", False)
print(first.data, first.last_was_cr)             # b'a\nb' True
print(ascii_to_bin(b"c", first.last_was_cr).data)  # b'\rc'

print(parse_ipv4("192.168.0.1"))                 # b'\xc0\xa8\x00\x01'
print(parse_uchar_string_sep("10,0,0,1,4,1", ",", 6))  # b'\n\x00\x00\x01\x04\x01'

out = bytearray()
result = send_file(io.BytesIO(b"a\nb"), out.extend, is_ascii=True)
print(bytes(out), result.ok, result.transferred)  # b'a\r\nb' True 4

print(get_chunk_size(0), get_chunk_size(1000))   # 65536 4096

table = HashTable(8, lambda buckets, key: hash(key) % buckets)
table.add("anon", 1)
print(table.lookup("anon"), len(table))          # 1 1
```

## What this package does not do

It is a library of parts, not a working FTP server. It has no command
that starts a server. It does not parse configuration files. It has no
control-connection command reader, no reply writer and no FTP command
handlers. It does not write transfer or activity logs. The data-transfer
functions work on file objects and callables that you provide. Opening
sockets and accepting connections is up to the caller.

## Running the tests

```
pip install -e .[test]
pytest
```
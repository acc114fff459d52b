# trantorkit

A small set of building blocks for networked services and their tooling.
It has no dependencies beyond the standard library.

## Modules

- `trantorkit.date`: `Date`, an immutable time point stored as
  microseconds since the Unix epoch. It is built with `Date(micros)`,
  `Date.from_parts(...)` (local time) or `Date.now()`. Dates can be
  compared and shifted with `after`. `round_second` and `round_day` round
  them down. They format as UTC or local text with `to_formatted_string`,
  `to_custom_formatted_string`, `to_formatted_string_local`,
  `to_custom_formatted_string_local`, `to_db_string_local` and
  `to_db_string`.
- `trantorkit.dateparse`: `from_db_string_local`, `from_db_string` and
  `from_iso_string` turn text back into a `Date`. Malformed input raises
  `ValueError`.
- `trantorkit.logstream`: `LogStream`, a text accumulator. `<<` appends a
  value and returns the stream. `data()` returns the collected text,
  `len()` gives its length and `reset()` clears it. `fmt(spec, value)`
  formats one value with a printf-style spec.
- `trantorkit.objectpool`: `ObjectPool(factory)`. `get_object()` is a
  context manager that lends an object and takes it back into the pool
  afterwards. `len()` counts the idle objects.
- `trantorkit.msgbuffer`: `MsgBuffer`, a growable byte buffer. It reads and
  writes integers in network byte order, can prepend data cheaply and can
  find a CRLF. `read_fd` reads from a file descriptor into the buffer.
- `trantorkit.encoding`: UTF-8 and path conversion helpers: `to_utf8`,
  `from_utf8`, `to_wide_path`, `from_wide_path`, `to_native_path` and
  `from_native_path`.
- `trantorkit.security`:
  - `verify_ssl_name` matches a certificate host name.
  - `md5`, `sha1`, `sha256`, `sha3` and `blake2b` return digests.
  - `to_hex_string` gives upper-case hexadecimal.
  - `secure_random_bytes` returns secure random bytes.
  - `tls_backend` reports the TLS provider in use, which is always `"None"`.

## What it does not do

The package has no logger. It does not write log lines, filter them by
level or send them to output channels. `LogStream` only assembles the text
of a message. Writing that text anywhere is left to the caller.

There is no networking here either: no event loop, no sockets and no TLS.
The only I/O is `MsgBuffer.read_fd`, which reads from a file descriptor
you supply.

## Installation

```
pip install trantorkit
```

## Examples

```python
from trantorkit.date import Date
from trantorkit.dateparse import from_db_string_local

d = Date.from_parts(2018, 1, 1, 10, 10, 25, 0)
print(d.to_db_string_local())                          # 2018-01-01 10:10:25
print(from_db_string_local(d.to_db_string_local()) == d)  # True
```

```python
from trantorkit.logstream import LogStream, fmt

s = LogStream()
s << "x=" << 3 << " ok=" << True
print(s.data())                        # x=3 ok=1
print(fmt("%06llu", 5))                # 000005
```

```python
from trantorkit.msgbuffer import MsgBuffer

buf = MsgBuffer()
buf.append(b"hello\r\n")
buf.add_in_front_int16(7)
print(buf.read_int16())                # 7
print(buf.find_crlf())                 # 5
```

```python
from trantorkit.objectpool import ObjectPool

pool = ObjectPool(list)
with pool.get_object() as items:
    items.append(1)
print(len(pool))                       # 1
```

```python
from trantorkit.security import sha256, to_hex_string, verify_ssl_name

print(to_hex_string(sha256(b"abc")))
print(verify_ssl_name("*.example.com", "www.example.com"))  # True
```

## Running the tests

```
pip install trantorkit[test]
pytest
```
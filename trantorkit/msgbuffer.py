"""A growable byte buffer for assembling and consuming network messages."""

from __future__ import annotations

import os
from typing import Union

BytesLike = Union[bytes, bytearray, memoryview, str, "MsgBuffer"]

DEFAULT_LENGTH = 2048
_BUFFER_OFFSET = 8
_EXTRA_READ = 8192
_CRLF = b"\r\n"


def _as_bytes(data: BytesLike) -> bytes:
    if isinstance(data, MsgBuffer):
        return data.peek()
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(memoryview(data))


class MsgBuffer:
    """A byte buffer with cheap appends at the end and prepends at the front.

    Readable data lives between a head and a tail index. A few bytes are kept
    free before the head so that small headers can be prepended in place.
    Integers are stored in network byte order.
    """

    def __init__(self, initial_size: int = DEFAULT_LENGTH) -> None:
        if initial_size < 0:
            raise ValueError("initial size must not be negative")
        self._head = _BUFFER_OFFSET
        self._init_cap = initial_size
        self._buffer = bytearray(initial_size + _BUFFER_OFFSET)
        self._tail = self._head

    def peek(self) -> bytes:
        """A copy of the readable data."""
        return bytes(self._buffer[self._head:self._tail])

    def readable_bytes(self) -> int:
        """Number of bytes that can be read."""
        return self._tail - self._head

    def writable_bytes(self) -> int:
        """Number of bytes that fit after the data without growing."""
        return len(self._buffer) - self._tail

    def __len__(self) -> int:
        return self.readable_bytes()

    def __getitem__(self, offset: int) -> int:
        readable = self.readable_bytes()
        if offset < 0:
            offset += readable
        if not 0 <= offset < readable:
            raise IndexError("buffer offset out of range")
        return self._buffer[self._head + offset]

    def _replace(self, capacity: int, content: bytes) -> None:
        """Move to a fresh storage area of the given capacity."""
        self._buffer = bytearray(capacity + _BUFFER_OFFSET)
        self._buffer[_BUFFER_OFFSET:_BUFFER_OFFSET + len(content)] = content
        self._head = _BUFFER_OFFSET
        self._tail = _BUFFER_OFFSET + len(content)
        self._init_cap = capacity

    def ensure_writable_bytes(self, length: int) -> None:
        """Make room for at least the given number of bytes after the data."""
        writable = self.writable_bytes()
        if writable >= length:
            return
        readable = self.readable_bytes()
        if self._head + writable >= length + _BUFFER_OFFSET:
            self._buffer[_BUFFER_OFFSET:_BUFFER_OFFSET + readable] = self._buffer[
                self._head:self._tail
            ]
            self._head = _BUFFER_OFFSET
            self._tail = _BUFFER_OFFSET + readable
            return
        size = len(self._buffer)
        if size * 2 > _BUFFER_OFFSET + readable + length:
            new_len = size * 2
        else:
            new_len = readable + length
        self._replace(new_len, self.peek())

    def append(self, data: BytesLike) -> None:
        """Append bytes, text (as UTF-8) or the readable data of another buffer."""
        payload = _as_bytes(data)
        size = len(payload)
        self.ensure_writable_bytes(size)
        self._buffer[self._tail:self._tail + size] = payload
        self._tail += size

    def append_int8(self, value: int) -> None:
        """Append one unsigned byte."""
        self.append((value & 0xFF).to_bytes(1, "big"))

    def append_int16(self, value: int) -> None:
        """Append an unsigned 16-bit integer in network byte order."""
        self.append((value & 0xFFFF).to_bytes(2, "big"))

    def append_int32(self, value: int) -> None:
        """Append an unsigned 32-bit integer in network byte order."""
        self.append((value & 0xFFFFFFFF).to_bytes(4, "big"))

    def append_int64(self, value: int) -> None:
        """Append an unsigned 64-bit integer in network byte order."""
        self.append((value & 0xFFFFFFFFFFFFFFFF).to_bytes(8, "big"))

    def add_in_front(self, data: BytesLike) -> None:
        """Put data before the readable data."""
        payload = _as_bytes(data)
        size = len(payload)
        if self._head >= size:
            self._buffer[self._head - size:self._head] = payload
            self._head -= size
            return
        if size <= self.writable_bytes():
            head, tail = self._head, self._tail
            self._buffer[head + size:tail + size] = self._buffer[head:tail]
            self._buffer[head:head + size] = payload
            self._tail += size
            return
        readable = self.readable_bytes()
        new_len = self._init_cap if size + readable < self._init_cap else size + readable
        self._replace(new_len, payload + self.peek())

    def add_in_front_int8(self, value: int) -> None:
        """Put one unsigned byte before the data."""
        self.add_in_front((value & 0xFF).to_bytes(1, "big"))

    def add_in_front_int16(self, value: int) -> None:
        """Put an unsigned 16-bit integer in network byte order before the data."""
        self.add_in_front((value & 0xFFFF).to_bytes(2, "big"))

    def add_in_front_int32(self, value: int) -> None:
        """Put an unsigned 32-bit integer in network byte order before the data."""
        self.add_in_front((value & 0xFFFFFFFF).to_bytes(4, "big"))

    def add_in_front_int64(self, value: int) -> None:
        """Put an unsigned 64-bit integer in network byte order before the data."""
        self.add_in_front((value & 0xFFFFFFFFFFFFFFFF).to_bytes(8, "big"))

    def _peek_uint(self, size: int) -> int:
        if self.readable_bytes() < size:
            raise ValueError(f"need {size} readable bytes, have {self.readable_bytes()}")
        return int.from_bytes(self._buffer[self._head:self._head + size], "big")

    def peek_int8(self) -> int:
        """The first byte, left in the buffer."""
        return self._peek_uint(1)

    def peek_int16(self) -> int:
        """The leading unsigned 16-bit integer, left in the buffer."""
        return self._peek_uint(2)

    def peek_int32(self) -> int:
        """The leading unsigned 32-bit integer, left in the buffer."""
        return self._peek_uint(4)

    def peek_int64(self) -> int:
        """The leading unsigned 64-bit integer, left in the buffer."""
        return self._peek_uint(8)

    def read(self, length: int) -> bytes:
        """Remove and return up to the given number of bytes."""
        length = min(length, self.readable_bytes())
        data = bytes(self._buffer[self._head:self._head + length])
        self.retrieve(length)
        return data

    def _read_uint(self, size: int) -> int:
        value = self._peek_uint(size)
        self.retrieve(size)
        return value

    def read_int8(self) -> int:
        """Remove and return one byte."""
        return self._read_uint(1)

    def read_int16(self) -> int:
        """Remove and return an unsigned 16-bit integer."""
        return self._read_uint(2)

    def read_int32(self) -> int:
        """Remove and return an unsigned 32-bit integer."""
        return self._read_uint(4)

    def read_int64(self) -> int:
        """Remove and return an unsigned 64-bit integer."""
        return self._read_uint(8)

    def retrieve(self, length: int) -> None:
        """Drop bytes from the front; dropping everything resets the buffer."""
        if length < 0:
            raise ValueError("length must not be negative")
        if length >= self.readable_bytes():
            self.retrieve_all()
            return
        self._head += length

    def retrieve_all(self) -> None:
        """Drop all data, shrinking storage that grew well past its start size."""
        if len(self._buffer) > self._init_cap * 2:
            del self._buffer[self._init_cap + _BUFFER_OFFSET:]
        self._head = self._tail = _BUFFER_OFFSET

    def retrieve_until(self, offset: int) -> None:
        """Drop the bytes before an offset into the readable data."""
        if not 0 <= offset <= self.readable_bytes():
            raise ValueError("offset outside the readable data")
        self.retrieve(offset)

    def find_crlf(self) -> int | None:
        """Offset of the first CRLF in the readable data, or None."""
        position = self._buffer.find(_CRLF, self._head, self._tail)
        return None if position == -1 else position - self._head

    def has_written(self, length: int) -> None:
        """Count bytes already placed after the data as readable."""
        if not 0 <= length <= self.writable_bytes():
            raise ValueError("length exceeds the writable space")
        self._tail += length

    def unwrite(self, length: int) -> None:
        """Drop bytes from the end of the data."""
        if not 0 <= length <= self.readable_bytes():
            raise ValueError("length exceeds the readable data")
        self._tail -= length

    def swap(self, other: MsgBuffer) -> None:
        """Exchange contents with another buffer."""
        self._buffer, other._buffer = other._buffer, self._buffer
        self._head, other._head = other._head, self._head
        self._tail, other._tail = other._tail, self._tail
        self._init_cap, other._init_cap = other._init_cap, self._init_cap

    def read_fd(self, fd: int) -> int:
        """Read once from a file descriptor into the buffer.

        Returns the number of bytes read; 0 means end of file. Errors are
        raised as OSError.
        """
        writable = self.writable_bytes()
        extra = bytearray(_EXTRA_READ)
        use_extra = writable < len(extra)
        if hasattr(os, "readv"):
            with memoryview(self._buffer) as whole, whole[self._tail:] as target:
                count = os.readv(fd, [target, extra] if use_extra else [target])
            overflow = bytes(extra[:max(count - writable, 0)])
        else:
            chunk = os.read(fd, writable + (len(extra) if use_extra else 0))
            count = len(chunk)
            leading = chunk[:writable]
            self._buffer[self._tail:self._tail + len(leading)] = leading
            overflow = chunk[writable:]
        if count <= writable:
            self._tail += count
        else:
            self._tail = len(self._buffer)
            self.append(overflow)
        return count
"""Certificate name matching, hashing, hex encoding and secure random bytes."""

from __future__ import annotations

import hashlib
import os
import struct
import threading
import time
from typing import Union

BytesLike = Union[bytes, bytearray, memoryview, str]

_HEX_DIGITS = "0123456789ABCDEF"
_HASH_SIZE = 32
_SECRET_REFRESH_INTERVAL = 1024
_UINT64_MASK = (1 << 64) - 1
_STATE_LAYOUT = struct.Struct("<32s32sQQ")


def _as_bytes(data: BytesLike) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(memoryview(data))


def _prefix_matches(cert_name: str, hostname: str, cert_dot: int, host_dot: int) -> bool:
    """Compare the first label up to the wildcard, character by character."""
    for cert_char, host_char in zip(cert_name[:cert_dot], hostname[:host_dot]):
        if cert_char == "*":
            break
        if cert_char != host_char:
            return False
    return True


def _suffix_before_dot_matches(
    cert_name: str, hostname: str, cert_dot: int, host_dot: int
) -> bool:
    """Compare the first label backwards from its end to the wildcard."""
    host_idx = host_dot - 1
    cert_idx = cert_dot - 1
    while host_idx >= 0 and cert_idx >= 0 and cert_name[cert_idx] != "*":
        if hostname[host_idx] != cert_name[cert_idx]:
            return False
        host_idx -= 1
        cert_idx -= 1
    return True


def verify_ssl_name(cert_name: str, hostname: str) -> bool:
    """Check whether a name from a certificate matches a host name.

    A '*' in the certificate name stands for part of the host's first label.
    """
    if "*" not in cert_name:
        return cert_name == hostname

    first_dot = cert_name.find(".")
    if first_dot == -1:
        first_dot = len(cert_name)
        pos = first_dot
    else:
        pos = first_dot + 1

    host_first_dot = hostname.find(".")
    if host_first_dot == -1:
        host_first_dot = len(hostname)
        host_pos = host_first_dot
    else:
        host_pos = host_first_dot + 1

    cert_rest = cert_name[pos:]
    host_rest = hostname[host_pos:]

    if cert_name[:first_dot] == "*":
        return cert_rest == host_rest

    if cert_name[0] == "*":
        # The host must end with everything after the leading wildcard.
        return hostname.endswith(cert_name[1:])

    if first_dot != 0 and cert_name[first_dot - 1] == "*":
        if cert_rest != host_rest:
            return False
        return _prefix_matches(cert_name, hostname, first_dot, host_first_dot)

    if cert_rest != host_rest:
        return False
    if not _prefix_matches(cert_name, hostname, first_dot, host_first_dot):
        return False
    return _suffix_before_dot_matches(cert_name, hostname, first_dot, host_first_dot)


def tls_backend() -> str:
    """Name of the TLS provider in use: 'None', 'OpenSSL' or 'Botan'."""
    return "None"


def md5(data: BytesLike) -> bytes:
    """MD5 digest (16 bytes). Only for compatibility with old formats."""
    return hashlib.md5(_as_bytes(data)).digest()


def sha1(data: BytesLike) -> bytes:
    """SHA-1 digest (20 bytes)."""
    return hashlib.sha1(_as_bytes(data)).digest()


def sha256(data: BytesLike) -> bytes:
    """SHA-256 digest (32 bytes)."""
    return hashlib.sha256(_as_bytes(data)).digest()


def sha3(data: BytesLike) -> bytes:
    """SHA3-256 digest (32 bytes)."""
    return hashlib.sha3_256(_as_bytes(data)).digest()


def blake2b(data: BytesLike) -> bytes:
    """BLAKE2b digest truncated to a 32-byte output."""
    return hashlib.blake2b(_as_bytes(data), digest_size=_HASH_SIZE).digest()


def to_hex_string(data: BytesLike) -> str:
    """Upper-case hexadecimal encoding of the data."""
    return "".join(
        _HEX_DIGITS[byte >> 4] + _HEX_DIGITS[byte & 0xF] for byte in _as_bytes(data)
    )


class _RngState(threading.local):
    """Per-thread generator state: secret, previous block, time and counter."""

    def __init__(self) -> None:
        self.use_count = 0
        self.secret = bytes(_HASH_SIZE)
        self.prev = bytes(_HASH_SIZE)
        self.time = 0
        self.counter = 0

    def packed(self) -> bytes:
        return _STATE_LAYOUT.pack(
            self.secret, self.prev, self.time & _UINT64_MASK, self.counter & _UINT64_MASK
        )

    def next_block(self) -> bytes:
        block = blake2b(self.packed())
        self.counter += 1
        self.prev = block
        return block


_rng_state = _RngState()
_shift_amount = int.from_bytes(os.urandom(8), "little")


def secure_random_bytes(size: int) -> bytes:
    """Cryptographically secure random bytes.

    A hash-based generator keyed with system entropy, rekeyed every 1024
    calls, and mixed with a high-resolution timestamp and a counter.
    Raises OSError when the system entropy source fails.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    state = _rng_state
    if state.use_count == 0:
        state.secret = os.urandom(_HASH_SIZE)
    state.use_count = (state.use_count + 1) % _SECRET_REFRESH_INTERVAL
    state.time = (time.perf_counter_ns() + _shift_amount) & _UINT64_MASK

    full_blocks, remainder = divmod(size, _HASH_SIZE)
    pieces = [state.next_block() for _ in range(full_blocks)]
    if remainder:
        pieces.append(state.next_block()[:remainder])
    return b"".join(pieces)
"""Conversions between UTF-8 bytes, text and platform path forms."""

from __future__ import annotations

import os
from typing import Union

_WINDOWS = os.name == "nt"

BytesLike = Union[bytes, bytearray, memoryview]


def to_utf8(text: str) -> bytes:
    """Encode text as UTF-8."""
    if not text:
        return b""
    return text.encode("utf-8")


def from_utf8(data: BytesLike) -> str:
    """Decode UTF-8 bytes; invalid input gives an empty string."""
    raw = bytes(data)
    if not raw:
        return ""
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError:
        return ""


def to_wide_path(path: BytesLike) -> str:
    """Turn a UTF-8 path into text; on Windows '/' becomes '\\'."""
    text = from_utf8(path)
    if _WINDOWS:
        text = text.replace("/", "\\")
    return text


def from_wide_path(path: str) -> bytes:
    """Turn a text path into UTF-8; on Windows '\\' becomes '/'."""
    if _WINDOWS:
        path = path.replace("\\", "/")
    return to_utf8(path)


def to_native_path(path: Union[str, BytesLike]) -> Union[str, bytes]:
    """The platform's preferred path form.

    On Windows this is text with backslashes; elsewhere it is UTF-8 bytes.
    """
    if _WINDOWS:
        return path if isinstance(path, str) else to_wide_path(path)
    return from_wide_path(path) if isinstance(path, str) else bytes(path)


def from_native_path(path: Union[str, BytesLike]) -> bytes:
    """A portable UTF-8 path from a native or UTF-8 path."""
    if isinstance(path, str):
        return from_wide_path(path)
    return bytes(path)
"""An append-only text stream used to assemble log lines."""

from __future__ import annotations

import re

_FMT_LIMIT = 48
_LENGTH_MODIFIERS = re.compile(r"(%[-+ #0]*(?:\*|\d+)?(?:\.(?:\*|\d+))?)[hlLqjzt]+")


def fmt(spec: str, value: object) -> str:
    """Format one value with a printf-style spec.

    Length modifiers such as 'll' are accepted and ignored. The result must
    be shorter than 48 characters.
    """
    text = _LENGTH_MODIFIERS.sub(r"\1", spec) % (value,)
    if len(text) >= _FMT_LIMIT:
        raise ValueError(f"formatted value too long: {len(text)} characters")
    return text


class LogStream:
    """Collects pieces of a log message; '<<' appends and returns the stream."""

    def __init__(self) -> None:
        self._parts: list[str] = []
        self._length = 0

    def append(self, text: str) -> None:
        """Append raw text."""
        self._parts.append(text)
        self._length += len(text)

    def __lshift__(self, value: object) -> LogStream:
        if value is None:
            self.append("(null)")
        elif isinstance(value, bool):
            self.append("1" if value else "0")
        elif isinstance(value, int):
            self.append(str(value))
        elif isinstance(value, float):
            self.append("%.12g" % value)
        elif isinstance(value, str):
            self.append(value)
        elif isinstance(value, (bytes, bytearray)):
            self.append(bytes(value).decode("utf-8", errors="replace"))
        else:
            self.append(str(value))
        return self

    def data(self) -> str:
        """Everything appended so far."""
        if len(self._parts) > 1:
            self._parts = ["".join(self._parts)]
        return self._parts[0] if self._parts else ""

    def __len__(self) -> int:
        return self._length

    def reset(self) -> None:
        """Discard the collected text."""
        self._parts.clear()
        self._length = 0
"""Parsing of database and ISO-8601 date strings into Date values."""

from __future__ import annotations

import re

from .date import Date

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_ISO_SEPARATORS = re.compile(r"[T ]")
_MICRO_DIGITS = 6


def _to_int(text: str) -> int:
    """Parse the leading integer of a string, ignoring what follows it."""
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"no integer in {text!r}")
    return int(match.group(1))


def _split(text: str, delimiter: str) -> list[str]:
    """Split on a delimiter and drop empty pieces."""
    return [piece for piece in text.split(delimiter) if piece]


def _parse_seconds(text: str) -> tuple[int, int]:
    """Parse 'SS[.ffffff]' into whole seconds and microseconds."""
    pieces = _split(text, ".")
    second = _to_int(pieces[0])
    micro = 0
    if len(pieces) > 1:
        fraction = pieces[1][:_MICRO_DIGITS].ljust(_MICRO_DIGITS, "0")
        micro = _to_int(fraction)
    return second, micro


def _invalid(text: str) -> ValueError:
    return ValueError(f"Invalid date string: {text}")


def from_db_string_local(text: str) -> Date:
    """Parse 'YYYY-MM-DD[ HH:MM:SS[.ffffff]]' as local time.

    Inverse of Date.to_db_string_local().
    """
    parts = _split(text, " ")
    if not parts:
        raise _invalid(text)
    date_fields = _split(parts[0], "-")
    if len(date_fields) != 3 or len(parts) > 2:
        raise _invalid(text)
    hour = minute = second = micro = 0
    try:
        year, month, day = (_to_int(field) for field in date_fields)
        if len(parts) == 2:
            clock = _split(parts[1], ":")
            if len(clock) > 2:
                hour = _to_int(clock[0])
                minute = _to_int(clock[1])
                second, micro = _parse_seconds(clock[2])
    except (ValueError, IndexError) as exc:
        raise _invalid(text) from exc
    return Date.from_parts(year, month, day, hour, minute, second, micro)


def from_db_string(text: str) -> Date:
    """Parse a database string as UTC time.

    Inverse of Date.to_db_string().
    """
    return from_db_string_local(text).after(float(Date.timezone_offset()))


def _parse_tz_offset(tz: str, sign: int) -> int:
    """Return the zone offset east of UTC in seconds."""
    if not tz:
        return 0
    if sign == 0:
        if tz[0] in "+-":
            sign = -1 if tz[0] == "-" else 1
            tz = tz[1:]
        else:
            sign = 1
    if tz == "Z":
        return 0
    pieces = _split(tz, ":")
    if len(pieces) == 1 and len(tz) >= 4:
        pieces = [tz[:2], tz[2:]]
    tz_hour = _to_int(pieces[0]) if pieces else 0
    tz_minute = _to_int(pieces[1]) if len(pieces) > 1 else 0
    return sign * (tz_hour * 3600 + tz_minute * 60)


def from_iso_string(text: str) -> Date:
    """Parse an ISO-8601 date string with some leniency.

    Accepted forms are 'yyyy-mm-dd' and 'yyyy-mm-dd[ T]HH:MM[:SS[.ffffff]]',
    optionally followed by a zone: 'Z', '[+-]HH:MM', '[+-]HHMM' or '[+-]HH'
    (unsigned meaning positive). Without a zone the time is local.
    """
    parts = [piece for piece in _ISO_SEPARATORS.split(text) if piece]
    if not parts:
        raise _invalid(text)
    date_fields = _split(parts[0], "-")
    if len(date_fields) != 3:
        raise _invalid(text)
    try:
        year, month, day = (_to_int(field) for field in date_fields)
    except ValueError as exc:
        raise _invalid(text) from exc

    if len(parts) == 1:
        return Date.from_parts(year, month, day)

    tz_sign = 0
    if len(parts) == 2:
        clock_text = parts[1]
        plus = clock_text.find("+")
        minus = clock_text.find("-")
        if plus != -1:
            tz_sign = 1
            parts.append(clock_text[plus + 1:])
            parts[1] = clock_text[:plus]
        elif minus != -1:
            tz_sign = -1
            parts.append(clock_text[minus + 1:])
            parts[1] = clock_text[:minus]
        elif clock_text.endswith("Z"):
            tz_sign = 1
            parts[1] = clock_text[:-1]
            parts.append("Z")

    clock = _split(parts[1], ":")
    if not 2 <= len(clock) <= 3:
        raise ValueError(f"Invalid time string: {text}")
    second = micro = 0
    try:
        hour = _to_int(clock[0])
        minute = _to_int(clock[1])
        if len(clock) == 3:
            second, micro = _parse_seconds(clock[2])
        local = Date.from_parts(year, month, day, hour, minute, second, micro)
        if len(parts) >= 3:
            offset = _parse_tz_offset(parts[2], tz_sign)
            return local.after(Date.timezone_offset() - offset)
    except (ValueError, IndexError) as exc:
        raise _invalid(text) from exc
    return local
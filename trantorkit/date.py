"""A point in time stored as microseconds since the Unix epoch."""

from __future__ import annotations

import functools
import time
from dataclasses import dataclass
from typing import ClassVar

_STRFTIME_LIMIT = 255


def _trunc_div(value: int, divisor: int) -> int:
    """Integer division that rounds toward zero."""
    quotient = abs(value) // abs(divisor)
    return quotient if (value >= 0) == (divisor > 0) else -quotient


def _trunc_mod(value: int, divisor: int) -> int:
    """Remainder whose sign follows the dividend."""
    return value - _trunc_div(value, divisor) * divisor


def _strftime(fmt: str, tm: time.struct_time) -> str:
    text = time.strftime(fmt, tm)
    # Output that does not fit the fixed-size result buffer yields nothing.
    return text if len(text) <= _STRFTIME_LIMIT else ""


def _format_compact(tm: time.struct_time) -> str:
    return (
        f"{tm.tm_year:4d}{tm.tm_mon:02d}{tm.tm_mday:02d} "
        f"{tm.tm_hour:02d}:{tm.tm_min:02d}:{tm.tm_sec:02d}"
    )


@dataclass(frozen=True, order=True)
class Date:
    """An immutable time point with microsecond resolution."""

    micro_seconds_since_epoch: int = 0

    MICRO_SECONDS_PER_SEC: ClassVar[int] = 1_000_000

    @classmethod
    def from_parts(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        microsecond: int = 0,
    ) -> Date:
        """Build a date from calendar fields interpreted in local time.

        Out-of-range fields are normalised the way mktime does it.
        """
        epoch = int(time.mktime((year, month, day, hour, minute, second, 0, 0, -1)))
        return cls(epoch * cls.MICRO_SECONDS_PER_SEC + microsecond)

    @classmethod
    def now(cls) -> Date:
        """Return the current time."""
        return cls(time.time_ns() // 1000)

    @staticmethod
    @functools.cache
    def timezone_offset() -> int:
        """Seconds the local time zone is ahead of UTC at the epoch."""
        return -Date.from_parts(1970, 1, 1).seconds_since_epoch()

    def after(self, seconds: float) -> Date:
        """Return the date that lies the given number of seconds later."""
        shifted = self.micro_seconds_since_epoch + float(seconds) * self.MICRO_SECONDS_PER_SEC
        return Date(int(shifted))

    def round_second(self) -> Date:
        """Return this date with the microseconds dropped."""
        micros = self.micro_seconds_since_epoch
        return Date(micros - _trunc_mod(micros, self.MICRO_SECONDS_PER_SEC))

    def round_day(self) -> Date:
        """Return local midnight of the day this date falls on."""
        tm = time.localtime(self.seconds_since_epoch())
        midnight = time.mktime(
            (tm.tm_year, tm.tm_mon, tm.tm_mday, 0, 0, 0, tm.tm_wday, tm.tm_yday, tm.tm_isdst)
        )
        return Date(int(midnight) * self.MICRO_SECONDS_PER_SEC)

    def seconds_since_epoch(self) -> int:
        """Whole seconds since the epoch, truncated toward zero."""
        return _trunc_div(self.micro_seconds_since_epoch, self.MICRO_SECONDS_PER_SEC)

    def _microsecond_part(self) -> int:
        return _trunc_mod(self.micro_seconds_since_epoch, self.MICRO_SECONDS_PER_SEC)

    def tm_struct(self) -> time.struct_time:
        """Broken-down UTC time of this date."""
        return time.gmtime(self.seconds_since_epoch())

    def is_same_second(self, other: Date) -> bool:
        """True when both dates fall within the same whole second."""
        return self.seconds_since_epoch() == other.seconds_since_epoch()

    def to_formatted_string(self, show_microseconds: bool) -> str:
        """UTC time as 'YYYYMMDD HH:MM:SS[.ffffff]'."""
        text = _format_compact(self.tm_struct())
        if show_microseconds:
            text += f".{self._microsecond_part():06d}"
        return text

    def to_custom_formatted_string(self, fmt: str, show_microseconds: bool = False) -> str:
        """UTC time formatted with a strftime pattern."""
        text = _strftime(fmt, self.tm_struct())
        if show_microseconds:
            text += f".{self._microsecond_part():06d}"
        return text

    def to_formatted_string_local(self, show_microseconds: bool) -> str:
        """Local time as 'YYYYMMDD HH:MM:SS[.ffffff]'."""
        text = _format_compact(time.localtime(self.seconds_since_epoch()))
        if show_microseconds:
            text += f".{self._microsecond_part():06d}"
        return text

    def to_custom_formatted_string_local(self, fmt: str, show_microseconds: bool = False) -> str:
        """Local time formatted with a strftime pattern."""
        text = _strftime(fmt, time.localtime(self.seconds_since_epoch()))
        if show_microseconds:
            text += f".{self._microsecond_part():06d}"
        return text

    def to_db_string_local(self) -> str:
        """Local time in database form, as short as the value allows.

        'YYYY-MM-DD' at midnight, 'YYYY-MM-DD HH:MM:SS' on a whole second,
        otherwise with six fractional digits.
        """
        tm = time.localtime(self.seconds_since_epoch())
        day = f"{tm.tm_year:4d}-{tm.tm_mon:02d}-{tm.tm_mday:02d}"
        clock = f"{tm.tm_hour:02d}:{tm.tm_min:02d}:{tm.tm_sec:02d}"
        micros = self._microsecond_part()
        if micros != 0:
            return f"{day} {clock}.{micros:06d}"
        if self == self.round_day():
            return day
        return f"{day} {clock}"

    def to_db_string(self) -> str:
        """UTC time in database form."""
        return self.after(float(-self.timezone_offset())).to_db_string_local()
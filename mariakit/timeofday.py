"""A time of day with millisecond precision."""

from __future__ import annotations

import functools
import time as _time
from typing import Any

from mariakit.errors import TimeError
from mariakit.time_span import TimeSpan

_MS_PER_SEC = 1000
_MS_PER_MIN = _MS_PER_SEC * 60
_MS_PER_HOUR = _MS_PER_MIN * 60

_LIMITS = (23, 59, 61, 999)
_WHITESPACE = " \t\n\v\f\r"


class _Scanner:
    """Reads numbers and single characters the way a formatted text stream does."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def _skip_space(self) -> None:
        while self.pos < len(self.text) and self.text[self.pos] in _WHITESPACE:
            self.pos += 1

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def number(self) -> int | None:
        self._skip_space()
        start = self.pos
        if self.pos < len(self.text) and self.text[self.pos] == "+":
            self.pos += 1
        digits_start = self.pos
        while self.pos < len(self.text) and self.text[self.pos].isdigit():
            self.pos += 1
        digits = self.text[digits_start:self.pos]
        if not digits or not digits.isascii():
            self.pos = start
            return None
        value = int(digits)
        return value if value <= 0xFFFF else None

    def char(self) -> str | None:
        self._skip_space()
        if self.at_end():
            return None
        ch = self.text[self.pos]
        self.pos += 1
        return ch


@functools.total_ordering
class Time:
    """Hour, minute, second and millisecond of a day; arithmetic wraps at midnight."""

    __slots__ = ("_hour", "_minute", "_second", "_millisecond")

    def __init__(self, hour: int = 0, minute: int = 0, second: int = 0, millisecond: int = 0) -> None:
        self._hour = 0
        self._minute = 0
        self._second = 0
        self._millisecond = 0
        self.set(hour, minute, second, millisecond)

    @classmethod
    def from_string(cls, text: str) -> Time:
        """Parse "H", "H:M", "H:M:S" or "H:M:S.ms"; any single character separates."""
        result = cls()
        scanner = _Scanner(text)
        hour = scanner.number()
        if hour is not None and hour < 24:
            if scanner.at_end():
                result.set(hour, 0, 0, 0)
                return result
            minute = scanner.number() if scanner.char() is not None else None
            if minute is not None and minute < 60:
                if scanner.at_end():
                    result.set(hour, minute, 0, 0)
                    return result
                second = scanner.number() if scanner.char() is not None else None
                if second is not None and second < 62:
                    if scanner.at_end():
                        result.set(hour, minute, second, 0)
                        return result
                    millis = scanner.number() if scanner.char() is not None else None
                    if millis is not None:
                        result.set(hour, minute, second, millis)
                        return result
        raise ValueError("invalid time format")

    @classmethod
    def from_struct_time(cls, value: Any) -> Time:
        """Take hour, minute and second from a struct_time-like object."""
        return cls(value.tm_hour, value.tm_min, value.tm_sec, 0)

    @classmethod
    def from_timestamp(cls, value: float) -> Time:
        """Local time of day of a POSIX timestamp, without milliseconds."""
        return cls.from_struct_time(_time.localtime(value))

    @classmethod
    def _current(cls, convert: Any) -> Time:
        now_ns = _time.time_ns()
        seconds = now_ns // 1_000_000_000
        millis = (now_ns // 1_000_000) % 1000
        return cls.from_struct_time(convert(seconds)).add_milliseconds(millis)

    @classmethod
    def now(cls) -> Time:
        """Current local time of day."""
        return cls._current(_time.localtime)

    @classmethod
    def now_utc(cls) -> Time:
        """Current UTC time of day."""
        return cls._current(_time.gmtime)

    def set(self, hour: int, minute: int = 0, second: int = 0, millisecond: int = 0) -> None:
        """Replace every component; raises TimeError if any is out of range."""
        parts = (hour, minute, second, millisecond)
        if any(not 0 <= part <= limit for part, limit in zip(parts, _LIMITS)):
            raise TimeError(*parts)
        self._hour, self._minute, self._second, self._millisecond = parts

    @property
    def hour(self) -> int:
        """Hour, 0 to 23."""
        return self._hour

    @hour.setter
    def hour(self, value: int) -> None:
        self.set(value, self._minute, self._second, self._millisecond)

    @property
    def minute(self) -> int:
        """Minute, 0 to 59."""
        return self._minute

    @minute.setter
    def minute(self, value: int) -> None:
        self.set(self._hour, value, self._second, self._millisecond)

    @property
    def second(self) -> int:
        """Second, 0 to 61."""
        return self._second

    @second.setter
    def second(self, value: int) -> None:
        self.set(self._hour, self._minute, value, self._millisecond)

    @property
    def millisecond(self) -> int:
        """Millisecond, 0 to 999."""
        return self._millisecond

    @millisecond.setter
    def millisecond(self, value: int) -> None:
        self.set(self._hour, self._minute, self._second, value)

    def _parts(self) -> tuple[int, int, int, int]:
        return (self._hour, self._minute, self._second, self._millisecond)

    def _copy(self) -> Time:
        return Time(*self._parts())

    def compare(self, other: Time) -> int:
        """Return -1, 0 or 1 as this time is earlier, equal or later."""
        mine, theirs = self._parts(), other._parts()
        if mine < theirs:
            return -1
        return 0 if mine == theirs else 1

    def add_hours(self, hours: int) -> Time:
        """A new time moved by the given hours, wrapping at midnight."""
        result = self._copy()
        if hours:
            result.hour = (self._hour + hours) % 24
        return result

    def add_minutes(self, minutes: int) -> Time:
        """A new time moved by the given minutes, wrapping at midnight."""
        result = self._copy()
        if not minutes:
            return result
        hours, rest = divmod(minutes, 60)
        total = rest + self._minute
        if total >= 60:
            hours += 1
        if hours:
            result = result.add_hours(hours)
        result.minute = total % 60
        return result

    def add_seconds(self, seconds: int) -> Time:
        """A new time moved by the given seconds, wrapping at midnight."""
        result = self._copy()
        if not seconds:
            return result
        minutes, rest = divmod(seconds, 60)
        total = rest + self._second
        if total >= 60:
            minutes += 1
        if minutes:
            result = result.add_minutes(minutes)
        result.second = total % 60
        return result

    def add_milliseconds(self, milliseconds: int) -> Time:
        """A new time moved by the given milliseconds, wrapping at midnight."""
        result = self._copy()
        if not milliseconds:
            return result
        seconds, rest = divmod(milliseconds, 1000)
        total = rest + self._millisecond
        if total > 999:
            seconds += 1
        if seconds:
            result = result.add_seconds(seconds)
        result.millisecond = total % 1000
        return result

    def add(self, span: TimeSpan) -> Time:
        """A new time moved by the span; whole days leave the time of day unchanged."""
        sign = -1 if span.negative else 1
        return (
            self.add_hours(sign * span.hours)
            .add_minutes(sign * span.minutes)
            .add_seconds(sign * span.seconds)
            .add_milliseconds(sign * span.milliseconds)
        )

    def subtract(self, span: TimeSpan) -> Time:
        """A new time moved back by the span."""
        negated = span.copy()
        negated.negative = not span.negative
        return self.add(negated)

    def _total_ms(self) -> int:
        return (
            self._hour * _MS_PER_HOUR
            + self._minute * _MS_PER_MIN
            + self._second * _MS_PER_SEC
            + self._millisecond
        )

    def time_between(self, other: Time) -> TimeSpan:
        """Span from other to this time; negative if other is later."""
        if other == self:
            return TimeSpan()
        if other > self:
            span = other.time_between(self)
            span.negative = True
            return span
        total = self._total_ms() - other._total_ms()
        hours, total = divmod(total, _MS_PER_HOUR)
        minutes, total = divmod(total, _MS_PER_MIN)
        seconds, millis = divmod(total, _MS_PER_SEC)
        return TimeSpan(0, hours, minutes, seconds, millis, False)

    def diff_time(self, other: Time) -> float:
        """Difference in whole seconds, milliseconds ignored."""
        mine = self._hour * 3600 + self._minute * 60 + self._second
        theirs = other._hour * 3600 + other._minute * 60 + other._second
        return float(mine - theirs)

    def str_time(self, with_millisecond: bool = False) -> str:
        """Format as HH:MM:SS, optionally followed by .mmm."""
        text = f"{self._hour:02d}:{self._minute:02d}:{self._second:02d}"
        if with_millisecond:
            text += f".{self._millisecond:03d}"
        return text

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self.compare(other) == 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self.compare(other) < 0

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return self.str_time(True)

    def __repr__(self) -> str:
        return f"Time({self._hour}, {self._minute}, {self._second}, {self._millisecond})"
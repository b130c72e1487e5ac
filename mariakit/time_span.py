"""A signed span of days, hours, minutes, seconds and milliseconds."""

from __future__ import annotations

import functools


def _bounded(name: str, value: int, limit: int) -> int:
    if not 0 <= value <= limit:
        raise ValueError(f"{name} must be between 0 and {limit}, got {value}")
    return value


@functools.total_ordering
class TimeSpan:
    """A duration whose hour, minute, second and millisecond parts stay in range."""

    __slots__ = ("_days", "_hours", "_minutes", "_seconds", "_milliseconds", "negative")

    def __init__(
        self,
        days: int = 0,
        hours: int = 0,
        minutes: int = 0,
        seconds: int = 0,
        milliseconds: int = 0,
        negative: bool = False,
    ) -> None:
        self._days = 0
        self._hours = 0
        self._minutes = 0
        self._seconds = 0
        self._milliseconds = 0
        self.negative = False
        self.set(days, hours, minutes, seconds, milliseconds, negative)

    def set(
        self,
        days: int = 0,
        hours: int = 0,
        minutes: int = 0,
        seconds: int = 0,
        milliseconds: int = 0,
        negative: bool = False,
    ) -> None:
        """Replace every component, validating each one."""
        self.negative = bool(negative)
        self.days = days
        self.hours = hours
        self.minutes = minutes
        self.seconds = seconds
        self.milliseconds = milliseconds

    @property
    def days(self) -> int:
        """Number of whole days."""
        return self._days

    @days.setter
    def days(self, value: int) -> None:
        if value < 0:
            raise ValueError(f"days must not be negative, got {value}")
        self._days = value

    @property
    def hours(self) -> int:
        """Hours, 0 to 23."""
        return self._hours

    @hours.setter
    def hours(self, value: int) -> None:
        self._hours = _bounded("hours", value, 23)

    @property
    def minutes(self) -> int:
        """Minutes, 0 to 59."""
        return self._minutes

    @minutes.setter
    def minutes(self, value: int) -> None:
        self._minutes = _bounded("minutes", value, 59)

    @property
    def seconds(self) -> int:
        """Seconds, 0 to 60."""
        return self._seconds

    @seconds.setter
    def seconds(self, value: int) -> None:
        self._seconds = _bounded("seconds", value, 60)

    @property
    def milliseconds(self) -> int:
        """Milliseconds, 0 to 999."""
        return self._milliseconds

    @milliseconds.setter
    def milliseconds(self, value: int) -> None:
        self._milliseconds = _bounded("milliseconds", value, 999)

    def zero(self) -> bool:
        """True if every component is zero, whatever the sign."""
        return not (
            self._days or self._hours or self._minutes or self._seconds or self._milliseconds
        )

    def _parts(self) -> tuple[int, int, int, int, int]:
        return (self._days, self._hours, self._minutes, self._seconds, self._milliseconds)

    def compare(self, other: TimeSpan) -> int:
        """Return -1, 0 or 1 as this span is smaller, equal or greater."""
        if self.negative and not other.negative:
            return -1
        if not self.negative and other.negative:
            return 1
        if self.zero() and other.zero():
            return 0
        mine, theirs = self._parts(), other._parts()
        if mine < theirs:
            return -1
        return 0 if mine == theirs else 1

    def total_hours(self) -> int:
        """Whole hours in the span, ignoring the sign."""
        return self._days * 24 + self._hours

    def total_minutes(self) -> int:
        """Whole minutes in the span, ignoring the sign."""
        return self.total_hours() * 60 + self._minutes

    def total_seconds(self) -> int:
        """Whole seconds in the span, ignoring the sign."""
        return self.total_minutes() * 60 + self._seconds

    def total_milliseconds(self) -> int:
        """Milliseconds in the span, ignoring the sign."""
        return self.total_seconds() * 1000 + self._milliseconds

    def copy(self) -> TimeSpan:
        """An independent span with the same components."""
        return TimeSpan(*self._parts(), self.negative)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TimeSpan):
            return NotImplemented
        return self.compare(other) == 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, TimeSpan):
            return NotImplemented
        return self.compare(other) < 0

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        prefix = "negative " if self.negative else ""
        return (
            f"{prefix}{self._days} days, {self._hours} hours, {self._minutes} minutes, "
            f"{self._seconds} seconds, {self._milliseconds} milliseconds"
        )

    def __repr__(self) -> str:
        return (
            f"TimeSpan({self._days}, {self._hours}, {self._minutes}, "
            f"{self._seconds}, {self._milliseconds}, negative={self.negative})"
        )
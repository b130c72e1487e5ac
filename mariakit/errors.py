"""Exceptions raised by the package."""

from __future__ import annotations


class MariaError(Exception):
    """Base error carrying a message and a numeric error id."""

    def __init__(self, message: str = "Exception not defined", error_id: int = 0) -> None:
        super().__init__(message)
        self.message = message
        self.error_id = error_id

    def __str__(self) -> str:
        return self.message


class TimeError(MariaError, ValueError):
    """Raised when a time of day has a component out of range."""

    def __init__(self, hour: int, minute: int, second: int, millisecond: int) -> None:
        super().__init__(
            f"Invalid time: hour - {hour}, minute - {minute}, "
            f"second - {second}, millisecond - {millisecond}"
        )
        self.hour = hour
        self.minute = minute
        self.second = second
        self.millisecond = millisecond


class ConnectionError(MariaError):  # noqa: A001 - deliberate package-level name
    """Raised for errors reported by or about a database connection."""
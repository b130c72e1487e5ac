"""Prepared statements with positional "?" parameters bound by index."""

from __future__ import annotations

import datetime as _dt
from typing import IO, Any, Optional

from mariakit.conversion import Decimal, checked_cast
from mariakit.data import Data
from mariakit.errors import ConnectionError
from mariakit.result_set import ResultSet
from mariakit.timeofday import Time
from mariakit.types import ValueType


def count_placeholders(query: str) -> int:
    """Number of "?" parameter markers outside quotes and comments."""
    count = 0
    pos = 0
    length = len(query)
    while pos < length:
        ch = query[pos]
        if ch in "'\"`":
            pos += 1
            while pos < length:
                if query[pos] == "\\" and ch != "`":
                    pos += 2
                    continue
                if query[pos] == ch:
                    if pos + 1 < length and query[pos + 1] == ch:
                        pos += 2
                        continue
                    break
                pos += 1
        elif ch == "#" or (ch == "-" and query.startswith("-- ", pos)):
            end = query.find("\n", pos)
            pos = length if end < 0 else end
        elif ch == "/" and query.startswith("/*", pos):
            end = query.find("*/", pos + 2)
            pos = length if end < 0 else end + 1
        elif ch == "?":
            count += 1
        pos += 1
    return count


def _wrap(value: int, bits: int, signed: bool) -> int:
    value = int(value) % (1 << bits)
    if signed and value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


class Statement:
    """A query with bound parameters, run over a DB-API connection."""

    def __init__(self, connection: Any, query: str) -> None:
        if connection is None:
            raise ConnectionError("No connection")
        if not query or not query.strip():
            raise ConnectionError("Query was empty")
        self.connection = connection
        self.query_text = query
        self._binds: list[Any] = [None] * count_placeholders(query)

    def bind_count(self) -> int:
        """Number of parameters the query takes."""
        return len(self._binds)

    def set_connection(self, connection: Any) -> None:
        """Use another connection for this statement."""
        self.connection = connection

    def _run(self) -> Any:
        try:
            cursor = self.connection.cursor()
            cursor.execute(self.query_text, tuple(self._binds))
        except Exception as exc:
            raise ConnectionError(str(exc)) from exc
        return cursor

    def execute(self) -> int:
        """Run the statement and return the number of affected rows."""
        return max(self._run().rowcount, 0)

    def insert(self) -> int:
        """Run the statement and return the last insert id."""
        return self._run().lastrowid or 0

    def query(self) -> ResultSet:
        """Run the statement and return its rows."""
        return ResultSet.from_cursor(self._run())

    def _set(self, index: int, value: Any) -> None:
        if not 0 <= index < len(self._binds):
            raise IndexError("Field index out of range")
        self._binds[index] = value

    def set_blob(self, index: int, value: Optional[IO[bytes]]) -> None:
        """Bind the whole content of a binary stream; None leaves the bind as is."""
        if value is None:
            return
        value.seek(0)
        self._set(index, bytes(value.read()))

    def set_data(self, index: int, value: Optional[Data]) -> None:
        """Bind a Data buffer; None leaves the bind as is."""
        if value is None:
            return
        self._set(index, bytes(value))

    def set_date_time(self, index: int, value: _dt.datetime) -> None:
        """Bind a date and time."""
        self._set(index, value.isoformat(sep=" ", timespec="milliseconds"))

    def set_date(self, index: int, value: _dt.date) -> None:
        """Bind the date part of a date or datetime."""
        if isinstance(value, _dt.datetime):
            value = value.date()
        self._set(index, value.isoformat())

    def set_time(self, index: int, value: Time) -> None:
        """Bind a time of day."""
        self._set(index, value.str_time(True))

    def set_decimal(self, index: int, value: Decimal) -> None:
        """Bind a decimal as its text."""
        self._set(index, str(value))

    def set_string(self, index: int, value: str) -> None:
        """Bind text."""
        self._set(index, str(value))

    def set_boolean(self, index: int, value: bool) -> None:
        """Bind a boolean as 0 or 1."""
        self._set(index, 1 if value else 0)

    def set_unsigned8(self, index: int, value: int) -> None:
        self._set(index, _wrap(value, 8, False))

    def set_signed8(self, index: int, value: int) -> None:
        self._set(index, _wrap(value, 8, True))

    def set_unsigned16(self, index: int, value: int) -> None:
        self._set(index, _wrap(value, 16, False))

    def set_signed16(self, index: int, value: int) -> None:
        self._set(index, _wrap(value, 16, True))

    def set_unsigned32(self, index: int, value: int) -> None:
        self._set(index, _wrap(value, 32, False))

    def set_signed32(self, index: int, value: int) -> None:
        self._set(index, _wrap(value, 32, True))

    def set_unsigned64(self, index: int, value: int) -> None:
        self._set(index, _wrap(value, 64, False))

    def set_signed64(self, index: int, value: int) -> None:
        self._set(index, _wrap(value, 64, True))

    def set_float(self, index: int, value: float) -> None:
        """Bind a single precision float."""
        self._set(index, checked_cast(float(value), ValueType.FLOAT32))

    def set_double(self, index: int, value: float) -> None:
        """Bind a double precision float."""
        self._set(index, float(value))

    def set_null(self, index: int) -> None:
        """Bind SQL NULL."""
        self._set(index, None)
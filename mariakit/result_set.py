"""Rows and columns returned by a query, with typed access to their values."""

from __future__ import annotations

import datetime as _dt
import decimal as _decimal
import io
import re
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional, Sequence, Union

from mariakit.conversion import Decimal, checked_cast, string_cast
from mariakit.data import Data
from mariakit.errors import ConnectionError
from mariakit.timeofday import Time
from mariakit.types import FieldType, ValueType

Key = Union[int, str]

TYPE_ERROR_ID = 12

_FIXED_TYPES = {
    FieldType.NULL: ValueType.NULL,
    FieldType.BIT: ValueType.BOOLEAN,
    FieldType.FLOAT: ValueType.FLOAT32,
    FieldType.DECIMAL: ValueType.DECIMAL,
    FieldType.NEWDECIMAL: ValueType.DECIMAL,
    FieldType.DOUBLE: ValueType.DOUBLE64,
    FieldType.NEWDATE: ValueType.DATE,
    FieldType.DATE: ValueType.DATE,
    FieldType.TIME: ValueType.TIME,
    FieldType.TIMESTAMP: ValueType.DATE_TIME,
    FieldType.DATETIME: ValueType.DATE_TIME,
    FieldType.TINY_BLOB: ValueType.BLOB,
    FieldType.MEDIUM_BLOB: ValueType.BLOB,
    FieldType.LONG_BLOB: ValueType.BLOB,
    FieldType.BLOB: ValueType.BLOB,
    FieldType.ENUM: ValueType.ENUMERATION,
}

# field type -> (unsigned kind, signed kind)
_INTEGER_TYPES = {
    FieldType.TINY: (ValueType.UNSIGNED8, ValueType.SIGNED8),
    FieldType.YEAR: (ValueType.UNSIGNED16, ValueType.SIGNED16),
    FieldType.SHORT: (ValueType.UNSIGNED16, ValueType.SIGNED16),
    FieldType.INT24: (ValueType.UNSIGNED32, ValueType.SIGNED32),
    FieldType.LONG: (ValueType.UNSIGNED32, ValueType.SIGNED32),
    FieldType.LONGLONG: (ValueType.UNSIGNED64, ValueType.SIGNED64),
}

_EXACT_MATCH = {
    ValueType.FLOAT32,
    ValueType.DOUBLE64,
    ValueType.DECIMAL,
    ValueType.TIME,
    ValueType.DATE_TIME,
    ValueType.DATE,
    ValueType.ENUMERATION,
}

_SIZE_GROUPS = (
    frozenset({ValueType.UNSIGNED8, ValueType.SIGNED8}),
    frozenset({ValueType.UNSIGNED16, ValueType.SIGNED16}),
    frozenset({ValueType.UNSIGNED32, ValueType.SIGNED32}),
    frozenset({ValueType.UNSIGNED64, ValueType.SIGNED64}),
)

_TEXTUAL = frozenset({ValueType.STRING, ValueType.BLOB, ValueType.DATA, ValueType.NULL})

_TEXT_TYPES = (str, bytes, bytearray, memoryview)

_DATE_TIME_RE = re.compile(
    r"\s*(\d{1,4})-(\d{1,2})-(\d{1,2})"
    r"(?:[ T]+(\d{1,2}):(\d{1,2}):(\d{1,2})(?:\.(\d{1,6}))?)?\s*"
)


@dataclass(frozen=True)
class Field:
    """Description of one result column."""

    name: str
    type: int = FieldType.STRING
    unsigned: bool = False


def column_value_type(field: Field) -> ValueType:
    """The logical value type of a column."""
    try:
        field_type = FieldType(field.type)
    except ValueError:
        return ValueType.STRING
    if field_type in _INTEGER_TYPES:
        unsigned_kind, signed_kind = _INTEGER_TYPES[field_type]
        return unsigned_kind if field.unsigned else signed_kind
    return _FIXED_TYPES.get(field_type, ValueType.STRING)


def _compatible(requested: ValueType, actual: ValueType) -> bool:
    if requested in _EXACT_MATCH:
        return actual == requested
    for group in _SIZE_GROUPS:
        if requested in group:
            return actual in group
    if requested is ValueType.BOOLEAN:
        return actual in (ValueType.BOOLEAN, ValueType.SIGNED8)
    if requested in (ValueType.STRING, ValueType.BLOB, ValueType.DATA):
        return actual in _TEXTUAL
    return True


def _is_native(value: Any) -> bool:
    return value is not None and not isinstance(value, _TEXT_TYPES)


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, _TEXT_TYPES):
        return bytes(value).decode("utf-8", errors="replace")
    return str(value)


def _as_bytes(value: Any) -> bytes:
    if value is None:
        return b""
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    return _as_text(value).encode("utf-8")


def _parse_date_time(text: str) -> _dt.datetime:
    match = _DATE_TIME_RE.fullmatch(text)
    if match is None:
        raise ValueError(f"invalid date time format: {text!r}")
    year, month, day, hour, minute, second = (int(part or 0) for part in match.groups()[:6])
    microsecond = int((match.group(7) or "").ljust(6, "0"))
    return _dt.datetime(year, month, day, hour, minute, second, microsecond)


def _field_from_description(entry: Sequence[Any]) -> Field:
    name, code = entry[0], entry[1]
    try:
        field_type = FieldType(code)
    except (ValueError, TypeError):
        field_type = FieldType.STRING
    return Field(str(name), field_type)


class ResultSet:
    """Rows of a query result read one at a time through a cursor.

    Values may be in text form (str or bytes, as the text protocol sends them)
    or already converted by a driver (int, float, datetime and the like).
    A value of None is SQL NULL.
    """

    def __init__(
        self,
        fields: Iterable[Field] = (),
        rows: Iterable[Sequence[Any]] = (),
    ) -> None:
        self._fields = tuple(fields)
        self._rows = [tuple(row) for row in rows]
        width = len(self._fields)
        for row in self._rows:
            if len(row) != width:
                raise ValueError(f"row has {len(row)} values, expected {width}")
        self._indexes = {field.name: index for index, field in enumerate(self._fields)}
        self._next = 0
        self._current = 0
        self._row: Optional[tuple] = None

    @classmethod
    def from_cursor(cls, cursor: Any) -> ResultSet:
        """Read all rows of a DB-API cursor; an empty result if it has none."""
        description = cursor.description
        if not description:
            return cls()
        fields = [_field_from_description(entry) for entry in description]
        return cls(fields, cursor.fetchall())

    def column_count(self) -> int:
        """Number of columns."""
        return len(self._fields)

    def column_index(self, name: str) -> Optional[int]:
        """Index of the column with the given (case-sensitive) name, or None."""
        return self._indexes.get(name)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._fields):
            raise IndexError("Column index out of range")

    def _check_row_fetched(self) -> None:
        if self._row is None:
            raise IndexError("No row was fetched")

    def column_type(self, index: int) -> ValueType:
        """Logical value type of the column at index."""
        self._check_index(index)
        return column_value_type(self._fields[index])

    def column_name(self, index: int) -> str:
        """Name of the column at index."""
        self._check_index(index)
        return self._fields[index].name

    def column_size(self, index: int) -> int:
        """Length in bytes of the current row's value at index; 0 for NULL."""
        self._check_index(index)
        self._check_row_fetched()
        return len(_as_bytes(self._row[index]))

    def row_index(self) -> int:
        """Index of the current row."""
        self._check_row_fetched()
        return self._current

    def row_count(self) -> int:
        """Number of rows in the result."""
        return len(self._rows)

    def next(self) -> bool:
        """Move to the next row; False when there is none."""
        if self._fields and 0 <= self._next < len(self._rows):
            self._current = self._next
            self._row = self._rows[self._next]
            self._next += 1
            return True
        self._row = None
        return False

    def set_row_index(self, index: int) -> bool:
        """Seek to the row at index and fetch it; False if there is none."""
        self._next = index
        return self.next()

    def __iter__(self) -> Iterator[ResultSet]:
        """Advance through the remaining rows, yielding this result at each."""
        while self.next():
            yield self

    def _resolve(self, key: Key) -> int:
        if isinstance(key, str):
            index = self._indexes.get(key)
            if index is None:
                raise KeyError(f"no column named {key!r}")
            return index
        return key

    def _value(self, key: Key, requested: ValueType) -> tuple[int, Any]:
        self._check_row_fetched()
        index = self._resolve(key)
        actual = self.column_type(index)
        if not _compatible(requested, actual):
            raise ConnectionError(
                f"type error: requested {requested.name} does not match actual {actual.name}",
                TYPE_ERROR_ID,
            )
        return index, self._row[index]

    def get_blob(self, key: Key) -> Optional[io.BytesIO]:
        """The value as a binary stream, or None if it is empty."""
        _, value = self._value(key, ValueType.BLOB)
        raw = _as_bytes(value)
        return io.BytesIO(raw) if raw else None

    def get_data(self, key: Key) -> Optional[Data]:
        """The value as a Data buffer, or None if it is empty."""
        _, value = self._value(key, ValueType.DATA)
        raw = _as_bytes(value)
        return Data(raw) if raw else None

    def get_date(self, key: Key) -> _dt.date:
        """The value as a calendar date."""
        _, value = self._value(key, ValueType.DATE)
        if isinstance(value, _dt.datetime):
            return value.date()
        if isinstance(value, _dt.date):
            return value
        return _parse_date_time(_as_text(value)).date()

    def get_date_time(self, key: Key) -> _dt.datetime:
        """The value as a date and time."""
        _, value = self._value(key, ValueType.DATE_TIME)
        if isinstance(value, _dt.datetime):
            return value
        if isinstance(value, _dt.date):
            return _dt.datetime.combine(value, _dt.time())
        return _parse_date_time(_as_text(value))

    def get_time(self, key: Key) -> Time:
        """The value as a time of day."""
        _, value = self._value(key, ValueType.TIME)
        if isinstance(value, _dt.time):
            return Time(value.hour, value.minute, value.second, value.microsecond // 1000)
        if isinstance(value, _dt.timedelta):
            total_ms = value // _dt.timedelta(milliseconds=1)
            hours, rest = divmod(total_ms, 3_600_000)
            minutes, rest = divmod(rest, 60_000)
            seconds, millis = divmod(rest, 1000)
            return Time(hours, minutes, seconds, millis)
        return Time.from_string(_as_text(value))

    def get_decimal(self, key: Key) -> Decimal:
        """The value as an exact decimal."""
        _, value = self._value(key, ValueType.DECIMAL)
        if isinstance(value, _decimal.Decimal):
            return Decimal(str(value))
        return Decimal(_as_text(value))

    def get_string(self, key: Key) -> str:
        """The value as text; NULL gives an empty string."""
        _, value = self._value(key, ValueType.STRING)
        return _as_text(value)

    def get_boolean(self, key: Key) -> bool:
        """The value as a boolean."""
        index, value = self._value(key, ValueType.BOOLEAN)
        if isinstance(value, (bytes, bytearray)) and self._fields[index].type == FieldType.BIT:
            return int.from_bytes(value, "big") != 0
        if _is_native(value):
            return bool(value)
        return string_cast(_as_text(value), ValueType.BOOLEAN)

    def _integer(self, key: Key, kind: ValueType) -> int:
        _, value = self._value(key, kind)
        if _is_native(value):
            return checked_cast(value, kind)
        return string_cast(_as_text(value), kind)

    def _floating(self, key: Key, kind: ValueType) -> float:
        _, value = self._value(key, kind)
        if _is_native(value):
            return checked_cast(float(value), kind)
        return string_cast(_as_text(value), kind)

    def get_unsigned8(self, key: Key) -> int:
        """The value as an unsigned 8-bit integer; 0 if it does not fit."""
        return self._integer(key, ValueType.UNSIGNED8)

    def get_signed8(self, key: Key) -> int:
        """The value as a signed 8-bit integer; 0 if it does not fit."""
        return self._integer(key, ValueType.SIGNED8)

    def get_unsigned16(self, key: Key) -> int:
        """The value as an unsigned 16-bit integer; 0 if it does not fit."""
        return self._integer(key, ValueType.UNSIGNED16)

    def get_signed16(self, key: Key) -> int:
        """The value as a signed 16-bit integer; 0 if it does not fit."""
        return self._integer(key, ValueType.SIGNED16)

    def get_unsigned32(self, key: Key) -> int:
        """The value as an unsigned 32-bit integer; 0 if it does not fit."""
        return self._integer(key, ValueType.UNSIGNED32)

    def get_signed32(self, key: Key) -> int:
        """The value as a signed 32-bit integer; 0 if it does not fit."""
        return self._integer(key, ValueType.SIGNED32)

    def get_unsigned64(self, key: Key) -> int:
        """The value as an unsigned 64-bit integer."""
        return self._integer(key, ValueType.UNSIGNED64)

    def get_signed64(self, key: Key) -> int:
        """The value as a signed 64-bit integer."""
        return self._integer(key, ValueType.SIGNED64)

    def get_float(self, key: Key) -> float:
        """The value as a single precision float; NaN if out of range."""
        return self._floating(key, ValueType.FLOAT32)

    def get_double(self, key: Key) -> float:
        """The value as a double precision float; NaN if out of range."""
        return self._floating(key, ValueType.DOUBLE64)

    def get_is_null(self, key: Key) -> bool:
        """True if the value is SQL NULL."""
        _, value = self._value(key, ValueType.NULL)
        return value is None
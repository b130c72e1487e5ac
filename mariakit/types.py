"""Value, field and isolation-level enumerations shared by the package."""

from __future__ import annotations

from enum import IntEnum


class ValueType(IntEnum):
    """Logical type of a column value as seen by the client."""

    NULL = 0
    BLOB = 1
    DATA = 2
    DATE = 3
    DATE_TIME = 4
    TIME = 5
    STRING = 6
    BOOLEAN = 7
    DECIMAL = 8
    UNSIGNED8 = 9
    SIGNED8 = 10
    UNSIGNED16 = 11
    SIGNED16 = 12
    UNSIGNED32 = 13
    SIGNED32 = 14
    UNSIGNED64 = 15
    SIGNED64 = 16
    FLOAT32 = 17
    DOUBLE64 = 18
    ENUMERATION = 19


class FieldType(IntEnum):
    """Column type codes used by the MariaDB/MySQL client protocol."""

    DECIMAL = 0
    TINY = 1
    SHORT = 2
    LONG = 3
    FLOAT = 4
    DOUBLE = 5
    NULL = 6
    TIMESTAMP = 7
    LONGLONG = 8
    INT24 = 9
    DATE = 10
    TIME = 11
    DATETIME = 12
    YEAR = 13
    NEWDATE = 14
    VARCHAR = 15
    BIT = 16
    TIMESTAMP2 = 17
    DATETIME2 = 18
    TIME2 = 19
    JSON = 245
    NEWDECIMAL = 246
    ENUM = 247
    SET = 248
    TINY_BLOB = 249
    MEDIUM_BLOB = 250
    LONG_BLOB = 251
    BLOB = 252
    VAR_STRING = 253
    STRING = 254
    GEOMETRY = 255


class IsolationLevel(IntEnum):
    """Transaction isolation levels."""

    REPEATABLE_READ = 0
    READ_COMMITTED = 1
    READ_UNCOMMITTED = 2
    SERIALIZABLE = 3


_ISOLATION_STATEMENTS = {
    IsolationLevel.REPEATABLE_READ: "SET TRANSACTION ISOLATION LEVEL REPEATABLE READ;",
    IsolationLevel.READ_COMMITTED: "SET TRANSACTION ISOLATION LEVEL READ COMMITTED;",
    IsolationLevel.READ_UNCOMMITTED: "SET TRANSACTION ISOLATION LEVEL READ UNCOMMITTED;",
    IsolationLevel.SERIALIZABLE: "SET TRANSACTION ISOLATION LEVEL SERIALIZABLE;",
}


def isolation_statement(level: IsolationLevel | int) -> str:
    """Return the SQL that selects the given isolation level.

    Raises ValueError for an unknown level.
    """
    return _ISOLATION_STATEMENTS[IsolationLevel(level)]
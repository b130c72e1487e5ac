import pytest

from mariakit.types import FieldType, IsolationLevel, ValueType, isolation_statement


@pytest.mark.parametrize(
    ("level", "expected"),
    [
        (IsolationLevel.REPEATABLE_READ, "SET TRANSACTION ISOLATION LEVEL REPEATABLE READ;"),
        (IsolationLevel.READ_COMMITTED, "SET TRANSACTION ISOLATION LEVEL READ COMMITTED;"),
        (IsolationLevel.READ_UNCOMMITTED, "SET TRANSACTION ISOLATION LEVEL READ UNCOMMITTED;"),
        (IsolationLevel.SERIALIZABLE, "SET TRANSACTION ISOLATION LEVEL SERIALIZABLE;"),
    ],
)
def test_isolation_statement(level, expected):
    assert isolation_statement(level) == expected


def test_isolation_statement_accepts_plain_int():
    assert isolation_statement(0) == "SET TRANSACTION ISOLATION LEVEL REPEATABLE READ;"


def test_isolation_statement_rejects_unknown_level():
    with pytest.raises(ValueError):
        isolation_statement(len(IsolationLevel) + 3)


def test_value_types_are_consecutive_from_null():
    assert ValueType(0) is ValueType.NULL
    assert [ValueType(code) for code in range(len(ValueType))] == list(ValueType)


def test_isolation_levels_start_at_repeatable_read():
    assert IsolationLevel(0) is IsolationLevel.REPEATABLE_READ
    statements = [isolation_statement(code) for code in range(len(IsolationLevel))]
    assert statements == [isolation_statement(level) for level in IsolationLevel]


def test_field_type_protocol_codes():
    assert FieldType(246) is FieldType.NEWDECIMAL
    assert FieldType(254) is FieldType.STRING


def test_field_type_round_trip():
    for member in FieldType:
        assert FieldType(int(member)) is member
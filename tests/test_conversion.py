import pytest

from mariakit.conversion import Decimal, checked_cast, string_cast
from mariakit.types import ValueType


def test_decimal_structure():
    d = Decimal("24.1234")
    assert d.double64() == 24.1234
    assert str(d) == "24.1234"


def test_decimal_float32_is_close():
    assert Decimal("0.02").float32() == pytest.approx(0.02, rel=1e-6)


def test_decimal_default_is_empty_and_unparseable():
    d = Decimal()
    assert str(d) == ""
    with pytest.raises(ValueError):
        d.double64()


def test_decimal_equality_by_text():
    assert Decimal("1.1234") == Decimal("1.1234")
    assert Decimal("1.1234") != Decimal("1.12340")


@pytest.mark.parametrize(
    ("value", "kind", "expected"),
    [
        (255, ValueType.UNSIGNED8, 255),
        (256, ValueType.UNSIGNED8, 0),
        (-128, ValueType.SIGNED8, -128),
        (-129, ValueType.SIGNED8, 0),
        (4294967295, ValueType.UNSIGNED32, 4294967295),
        (-1, ValueType.UNSIGNED64, 0),
    ],
)
def test_checked_cast_integers(value, kind, expected):
    assert checked_cast(value, kind) == expected


def test_checked_cast_boolean_range():
    assert checked_cast(1, ValueType.BOOLEAN) is True
    assert checked_cast(0, ValueType.BOOLEAN) is False
    assert checked_cast(5, ValueType.BOOLEAN) is False


def test_checked_cast_float_overflow_gives_zero():
    assert checked_cast(1e39, ValueType.FLOAT32) == 0.0
    assert checked_cast(-1.7976931348623157e308, ValueType.DOUBLE64) == -1.7976931348623157e308


def test_checked_cast_rejects_non_numeric_kind():
    with pytest.raises(ValueError):
        checked_cast(1, ValueType.STRING)


@pytest.mark.parametrize(
    ("text", "kind", "expected"),
    [
        ("-128", ValueType.SIGNED8, -128),
        ("127", ValueType.SIGNED8, 127),
        ("128", ValueType.SIGNED8, 0),
        ("-32768", ValueType.SIGNED16, -32768),
        ("65535", ValueType.UNSIGNED16, 65535),
        ("-2147483648", ValueType.SIGNED32, -2147483648),
        ("4294967295", ValueType.UNSIGNED32, 4294967295),
        ("-9223372036854775808", ValueType.SIGNED64, -9223372036854775807 - 1),
        ("9223372036854775807", ValueType.SIGNED64, 9223372036854775807),
        ("18446744073709551615", ValueType.UNSIGNED64, 18446744073709551615),
        ("0", ValueType.UNSIGNED64, 0),
    ],
)
def test_string_cast_integer_limits(text, kind, expected):
    assert string_cast(text, kind) == expected


def test_string_cast_trailing_characters_give_zero():
    assert string_cast("12a", ValueType.SIGNED32) == 0
    assert string_cast("42 ", ValueType.UNSIGNED64) == 0


def test_string_cast_leading_whitespace_is_skipped():
    assert string_cast(" 42", ValueType.SIGNED32) == 42


def test_string_cast_negative_unsigned_wraps():
    assert string_cast("-1", ValueType.UNSIGNED64) == 18446744073709551615
    assert string_cast("-1", ValueType.UNSIGNED32) == 0


def test_string_cast_boolean():
    assert string_cast("1", ValueType.BOOLEAN) is True
    assert string_cast("0", ValueType.BOOLEAN) is False
    assert string_cast("2", ValueType.BOOLEAN) is False


def test_string_cast_invalid_raises():
    with pytest.raises(ValueError):
        string_cast("abc", ValueType.SIGNED32)
    with pytest.raises(ValueError):
        string_cast("", ValueType.DOUBLE64)


def test_string_cast_int32_overflow_raises():
    with pytest.raises(OverflowError):
        string_cast("2147483648", ValueType.SIGNED32)


def test_string_cast_doubles():
    assert string_cast("-1.7976931348623157e+308", ValueType.DOUBLE64) == -1.7976931348623157e308
    assert string_cast("2.2250738585072014e-308", ValueType.DOUBLE64) == 2.2250738585072014e-308
    assert string_cast("0", ValueType.DOUBLE64) == 0.0
    assert string_cast("0.03", ValueType.DOUBLE64) == 0.03


def test_string_cast_float_rounded_limit():
    assert string_cast("-3.40282e+38", ValueType.FLOAT32) == pytest.approx(-3.40282e38, rel=1e-6)


@pytest.mark.parametrize(
    ("text", "kind"),
    [
        ("1e400", ValueType.DOUBLE64),
        ("1e-400", ValueType.DOUBLE64),
        ("3.5e38", ValueType.FLOAT32),
        ("1e-50", ValueType.FLOAT32),
    ],
)
def test_string_cast_out_of_range_float_is_nan(text, kind):
    result = string_cast(text, kind)
    assert str(result) == "nan"


def test_string_cast_float_trailing_characters_give_zero():
    assert string_cast("1.5x", ValueType.DOUBLE64) == 0.0
import pytest

from mariakit.time_span import TimeSpan


def test_default_is_zero_and_positive():
    a = TimeSpan()
    assert a.zero()
    assert a.negative is False


@pytest.mark.parametrize(
    "args",
    [
        (0, 33, 37, 42, 7, True),
        (0, 3, 66, 42, 7),
        (0, 3, 37, 100, 7),
        (0, 3, 37, 42, 1001),
    ],
)
def test_invalid_components_raise(args):
    with pytest.raises(ValueError):
        TimeSpan(*args)


def test_span_comparisons_from_source():
    a = TimeSpan()
    b = TimeSpan(1, 3, 37, 42, 7)
    c = TimeSpan(0, 3, 37, 42, 7, True)
    e = b.copy()

    assert b == e
    assert a != b
    assert b != c

    c.days = 1
    assert b != c

    c.negative = False
    assert b == c

    c.days = 0
    assert b.total_hours() == c.total_hours() + 24
    assert b.total_minutes() == c.total_minutes() + 24 * 60
    assert b.total_seconds() == c.total_seconds() + 24 * 60 * 60
    assert b.total_milliseconds() == c.total_milliseconds() + 24 * 60 * 60 * 1000


def test_copy_is_independent():
    b = TimeSpan(1, 2, 3, 4, 5)
    e = b.copy()
    e.hours = 10
    assert b.hours == 2


def test_totals():
    span = TimeSpan(1, 2, 3, 4, 5)
    assert span.total_hours() == 26
    assert span.total_minutes() == 26 * 60 + 3
    assert span.total_seconds() == (26 * 60 + 3) * 60 + 4
    assert span.total_milliseconds() == ((26 * 60 + 3) * 60 + 4) * 1000 + 5


def test_negative_sorts_before_positive():
    assert TimeSpan(0, 0, 0, 0, 1, True) < TimeSpan(0, 0, 0, 0, 1)
    assert TimeSpan(0, 1) > TimeSpan(5, 0, 0, 0, 0, True)
    assert TimeSpan(0, 1).compare(TimeSpan(0, 2)) == -1
    assert TimeSpan(0, 2).compare(TimeSpan(0, 1)) == 1
    assert TimeSpan(0, 2).compare(TimeSpan(0, 2)) == 0


def test_setter_validation():
    span = TimeSpan()
    with pytest.raises(ValueError):
        span.hours = 24
    with pytest.raises(ValueError):
        span.minutes = 60
    with pytest.raises(ValueError):
        span.seconds = 61
    with pytest.raises(ValueError):
        span.milliseconds = 1000
    span.seconds = 60
    assert span.seconds == 60


def test_set_replaces_everything():
    span = TimeSpan(3, 3, 3, 3, 3, True)
    span.set(1, 2)
    assert span == TimeSpan(1, 2)
    assert span.negative is False


def test_str():
    assert str(TimeSpan(1, 2, 3, 4, 5)) == "1 days, 2 hours, 3 minutes, 4 seconds, 5 milliseconds"
    assert str(TimeSpan(0, 1, 0, 0, 0, True)).startswith("negative 0 days, 1 hours")
import datetime as dt
import io
import sqlite3

import pytest

from mariakit.conversion import Decimal
from mariakit.data import Data
from mariakit.errors import ConnectionError
from mariakit.statement import Statement, count_placeholders
from mariakit.timeofday import Time


@pytest.fixture
def con():
    connection = sqlite3.connect(":memory:")
    connection.execute(
        "CREATE TABLE t (id INTEGER PRIMARY KEY AUTOINCREMENT, preis INT, str TEXT, data BLOB)"
    )
    connection.execute("INSERT INTO t (id, preis) VALUES (1, 150)")
    yield connection
    connection.close()


def test_count_placeholders_ignores_literals():
    assert count_placeholders("SELECT '?', \"?\" FROM t WHERE a=? -- ?\n AND b=?") == 2
    assert count_placeholders("SELECT 1;") == 0


def test_bind_normal(con):
    st = Statement(con, "SELECT * FROM t WHERE 1=?;")
    st.set_unsigned32(0, 1)
    rs = st.query()
    assert rs.next()


def test_empty_bind(con):
    rs = Statement(con, "SELECT * FROM t WHERE 1=?;").query()
    assert not rs.next()


def test_empty_query_raises(con):
    with pytest.raises(ConnectionError):
        Statement(con, "")


def test_bind_without_parameters(con):
    st = Statement(con, "SELECT 1;")
    with pytest.raises(IndexError):
        st.set_unsigned32(1, 100)


def test_bind_data_blob(con):
    st = Statement(con, "SELECT * FROM t WHERE id = ?;")
    st.set_data(0, Data(b"0123456789" * 40))
    assert not st.query().next()


def test_bind_data_none_keeps_bind(con):
    st = Statement(con, "SELECT * FROM t WHERE id = ?;")
    st.set_data(0, None)
    assert st.query().row_count() == 0


def test_bind_reuse_simple(con):
    ins = Statement(con, "INSERT INTO t(preis) VALUES(?);")
    ins.set_unsigned32(0, 177)
    row1 = ins.insert()
    ins.set_unsigned32(0, 1337)
    row2 = ins.insert()
    row3 = ins.insert()
    sel = Statement(con, "SELECT preis FROM t WHERE id = ?")
    for row, expected in ((row1, "177"), (row2, "1337"), (row3, "1337")):
        sel.set_unsigned64(0, row)
        rs = sel.query()
        assert rs.next()
        assert rs.get_string(0) == expected


def test_bind_reuse_string(con):
    ins = Statement(con, "INSERT INTO t(str) VALUES(?);")
    rows = []
    for text in ("asdf", "qwertz", ""):
        ins.set_string(0, text)
        rows.append(ins.insert())
    sel = Statement(con, "SELECT str FROM t WHERE id = ?;")
    for row, text in zip(rows, ("asdf", "qwertz", "")):
        sel.set_unsigned64(0, row)
        rs = sel.query()
        assert rs.next()
        assert rs.get_string(0) == text


def test_execute_counts_rows_and_null(con):
    st = Statement(con, "UPDATE t SET str = ?;")
    st.set_null(0)
    assert st.execute() == 1
    rs = Statement(con, "SELECT str FROM t WHERE id = 1;").query()
    assert rs.next()
    assert rs.get_is_null(0) is True


def test_value_conversions(con):
    st = Statement(con, "SELECT ?, ?, ?, ?, ?, ?;")
    st.set_time(0, Time(11, 22, 33))
    st.set_decimal(1, Decimal("1.1234"))
    st.set_date_time(2, dt.datetime(2000, 1, 2, 3, 4, 5))
    st.set_date(3, dt.datetime(2000, 1, 2, 3, 4, 5))
    st.set_boolean(4, True)
    st.set_blob(5, io.BytesIO(b"abc"))
    rs = st.query()
    assert rs.next()
    assert Time.from_string(rs.get_string(0)) == Time(11, 22, 33)
    assert rs.get_string(1) == "1.1234"
    assert rs.get_string(2).startswith("2000-01-02 03:04:05")
    assert rs.get_string(3) == "2000-01-02"
    assert rs.get_string(4) == "1"
    assert rs.get_string(5) == "abc"


def test_signed_wraps_like_narrowing(con):
    st = Statement(con, "SELECT ?;")
    st.set_signed8(0, 255)
    rs = st.query()
    assert rs.next()
    assert rs.get_string(0) == "-1"


def test_bad_sql_raises(con):
    with pytest.raises(ConnectionError):
        Statement(con, "SELECT * FROM doesntexist WHERE a=?").query()
# mariakit

Typed building blocks that work on top of a MariaDB/MySQL DB-API connection.
You supply the connection from a driver of your choice. The package has no
dependencies of its own.

## What is in it

- `mariakit.result_set`: `ResultSet` holds the rows of a query. You move
  through them with `next()`, `set_row_index()` or by iterating. You read
  columns by index or by name with typed getters such as `get_signed32`,
  `get_unsigned64`, `get_string`, `get_decimal`, `get_time`, `get_date_time`,
  `get_data`, `get_blob` and `get_is_null`.
  - Each getter checks the column's type. If the requested type does not fit,
    it raises `ConnectionError`.
  - It raises `IndexError` if no row has been fetched yet.
  - Integer getters return 0 when the value does not fit the requested size.

  `ResultSet.from_cursor(cursor)` builds a result from a DB-API cursor.
  `Field` and `column_value_type()` describe the columns.
- `mariakit.statement`: `Statement(connection, query)` counts the `?`
  placeholders that lie outside quotes and comments. It has typed setters
  (`set_unsigned32`, `set_string`, `set_decimal`, `set_time`, `set_null`, ...)
  and runs through one of three methods:
  - `execute()` returns the number of affected rows.
  - `insert()` returns the last insert id.
  - `query()` returns a `ResultSet`.

  The query text goes to `cursor.execute()` unchanged, so the driver must
  accept `?` markers (the qmark paramstyle). A setter whose index is out of
  range raises `IndexError`.
- `mariakit.transaction`: `Transaction(connection, level, consistent_snapshot)`
  sets the isolation level and starts a transaction. `create_save_point()`
  returns a `SavePoint` with names `SP1`, `SP2`, ... Both are context managers
  that roll back on exit unless they were committed.
- `mariakit.worker`: `Worker` runs one `Command` (`EXECUTE`, `INSERT` or
  `QUERY`). It uses either a prepared `Statement` or a query on a connection
  from the `connect` callable it was given. It records `status`
  (`Status.SUCCEED` or `Status.FAILED`), `result`, `result_set` and `error`.
- `mariakit.timeofday`: `Time` is a time of day with millisecond precision.
  Its arithmetic wraps at midnight. It can be parsed with `Time.from_string()`
  and formatted with `str_time()`.
- `mariakit.time_span`: `TimeSpan` is a signed duration of days, hours,
  minutes, seconds and milliseconds.
- `mariakit.conversion`:
  - `checked_cast()` and `string_cast()` are range-checked numeric
    conversions.
  - `Decimal` keeps a decimal value as its exact text.
- `mariakit.data`: `Data` is a fixed-size byte buffer with `read`, `write`
  and `seek`.
- `mariakit.types`: the `ValueType`, `FieldType` and `IsolationLevel` enums,
  plus `isolation_statement()`.
- `mariakit.errors`: `MariaError`, with the subclasses `TimeError` and
  `ConnectionError`.

## Installation

```
pip install mariakit
```

## Time values

```python
from mariakit.timeofday import Time

t = Time.from_string("03:04:05.666")
print(t.add_hours(5).str_time(True))                  # 08:04:05.666
print(Time(23, 59, 59, 999).add_milliseconds(1))      # 00:00:00.000

span = Time(13, 37).time_between(Time(12, 37))
print(span.hours, span.negative)                      # 1 False
```

## Statements and results

```python
from mariakit.statement import Statement

stmt = Statement(connection, "SELECT id, str FROM items WHERE id = ?")
stmt.set_unsigned32(0, 1)
rows = stmt.query()
for row in rows:
    print(row.get_signed32(0), row.get_string("str"))
```

## Transactions

```python
from mariakit.transaction import Transaction
from mariakit.types import IsolationLevel

with Transaction(connection, IsolationLevel.REPEATABLE_READ, False) as trx:
    with trx.create_save_point() as sp:
        ...
        sp.commit()
    trx.commit()
```

## What it does not do

- It does not open connections or manage accounts and connection options.
  Pass it a connection object from a DB-API driver.
- There is no pool or queue for running work in the background. A `Worker`
  runs only when you call its `execute()` method.

## Running the tests

```
pip install -e .[test]
pytest
```
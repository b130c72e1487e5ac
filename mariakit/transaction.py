"""Transactions and save points over a DB-API connection."""

from __future__ import annotations

import itertools
from typing import Any, Optional

from mariakit.types import IsolationLevel, isolation_statement

_save_point_ids = itertools.count(1)

_START = ("START TRANSACTION;", "START TRANSACTION WITH CONSISTENT SNAPSHOT;")


def _run(connection: Any, sql: str) -> None:
    connection.cursor().execute(sql)


class Transaction:
    """A transaction that rolls back unless committed."""

    def __init__(
        self,
        connection: Any,
        level: IsolationLevel | int = IsolationLevel.REPEATABLE_READ,
        consistent_snapshot: bool = True,
    ) -> None:
        self._connection: Optional[Any] = connection
        self._save_points: list[SavePoint] = []
        _run(connection, isolation_statement(level))
        _run(connection, _START[bool(consistent_snapshot)])

    @property
    def active(self) -> bool:
        """True until committed or rolled back."""
        return self._connection is not None

    def _cleanup(self) -> None:
        for save_point in self._save_points:
            save_point._transaction = None
        self._save_points.clear()

    def commit(self) -> None:
        """Commit; does nothing if already finished."""
        if self._connection is None:
            return
        self._connection.commit()
        self._cleanup()
        self._connection = None

    def rollback(self) -> None:
        """Roll back; does nothing if already finished."""
        if self._connection is None:
            return
        self._connection.rollback()
        self._cleanup()
        self._connection = None

    def create_save_point(self) -> Optional[SavePoint]:
        """A new save point, or None if the transaction is finished."""
        if self._connection is None:
            return None
        save_point = SavePoint(self)
        self._save_points.append(save_point)
        return save_point

    def _remove_save_point(self, save_point: SavePoint) -> None:
        if save_point in self._save_points:
            self._save_points.remove(save_point)

    def __enter__(self) -> Transaction:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.rollback()


class SavePoint:
    """A named save point that rolls back unless committed."""

    def __init__(self, transaction: Transaction) -> None:
        self._transaction: Optional[Transaction] = transaction
        self.name = f"SP{next(_save_point_ids)}"
        _run(transaction._connection, "SAVEPOINT " + self.name)

    @property
    def active(self) -> bool:
        """True until committed, rolled back or its transaction finished."""
        return self._transaction is not None

    def _finish(self, sql: str) -> None:
        transaction = self._transaction
        if transaction is None:
            return
        transaction._remove_save_point(self)
        _run(transaction._connection, sql + self.name)
        self._transaction = None

    def commit(self) -> None:
        """Release the save point, keeping its changes."""
        self._finish("RELEASE SAVEPOINT ")

    def rollback(self) -> None:
        """Undo changes made since the save point."""
        self._finish("ROLLBACK TO SAVEPOINT ")

    def __enter__(self) -> SavePoint:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.rollback()
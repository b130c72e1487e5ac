"""A unit of work that runs one query or statement and keeps its outcome."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Callable, Optional

from mariakit.result_set import ResultSet
from mariakit.statement import Statement

_log = logging.getLogger(__name__)


class Status(Enum):
    """Lifecycle of a worker."""

    WAITING = 0
    EXECUTING = 1
    SUCCEED = 2
    FAILED = 3
    REMOVED = 4


class Command(Enum):
    """What a worker does with its query."""

    EXECUTE = 0
    INSERT = 1
    QUERY = 2


class Worker:
    """Runs a query on a fresh connection, or a prepared statement on its own."""

    def __init__(
        self,
        connect: Optional[Callable[[], Any]] = None,
        handle: int = 0,
        keep_handle: bool = False,
        command: Command = Command.QUERY,
        query: str = "",
        statement: Optional[Statement] = None,
    ) -> None:
        self._connect = connect
        self.handle = handle
        self.keep_handle = keep_handle
        self.command = command
        self.query = query
        self.statement = statement
        self.status = Status.WAITING if handle > 0 else Status.REMOVED
        self.result = 0
        self.result_set: Optional[ResultSet] = None
        self.error: Optional[BaseException] = None

    def execute(self) -> None:
        """Do the work, recording the result and the final status."""
        self.status = Status.EXECUTING
        try:
            statement = self.statement
            connection = None
            if statement is None:
                if self._connect is None:
                    raise ValueError("no way to connect")
                connection = self._connect()
                statement = Statement(connection, self.query)
            if self.command is Command.EXECUTE:
                self.result = statement.execute()
            elif self.command is Command.INSERT:
                self.result = statement.insert()
            else:
                self.result_set = statement.query()
            target = connection if connection is not None else statement.connection
            commit = getattr(target, "commit", None)
            if commit is not None:
                commit()
            self.status = Status.SUCCEED
        except Exception as exc:
            _log.error("%s", exc)
            self.error = exc
            self.status = Status.FAILED
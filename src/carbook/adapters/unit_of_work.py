"""Unit of Work adapters for CARBOOK.

- `InMemoryUnitOfWork`: process-local store; one operation at a time.
- `SqlAlchemyUnitOfWork`: one database connection/transaction per context.
"""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING

from carbook.adapters.car_store.memory import InMemoryCarData, InMemoryCarStore
from carbook.adapters.car_store.sqlalchemy_store import SqlAlchemyCarStore
from carbook.adapters.clock import SystemClock
from carbook.interfaces.unit_of_work import AbstractUnitOfWork

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection, Engine

    from carbook.domain.model import Car
    from carbook.interfaces.clock import Clock


class InMemoryUnitOfWork(AbstractUnitOfWork):
    """Unit of Work over an `InMemoryCarData`.

    Entering the context takes a re-entrant lock that is held until exit,
    so operations from different threads are serialized. The car mapping
    is snapshotted just before the first write of the context (reads copy
    nothing); `rollback` restores that snapshot and `commit` discards it.
    Issued ids are not returned on rollback.
    """

    def __init__(
        self, data: InMemoryCarData | None = None, clock: Clock | None = None
    ) -> None:
        self.data = data if data is not None else InMemoryCarData()
        self.cars = InMemoryCarStore(
            self.data, clock or SystemClock(), before_write=self._snapshot_once
        )
        self._lock = threading.RLock()
        self._snapshot: dict[int, Car] | None = None
        self._depth = 0

    def __enter__(self):
        self._lock.acquire()
        self._depth += 1
        return super().__enter__()

    def __exit__(self, *args):
        try:
            if self._depth == 1:
                super().__exit__(*args)
                self._snapshot = None
        finally:
            self._depth -= 1
            self._lock.release()

    def commit(self):
        self._snapshot = None

    def rollback(self):
        if self._snapshot is not None:
            self.data.cars.clear()
            self.data.cars.update(self._snapshot)
            self._snapshot = None

    def _snapshot_once(self) -> None:
        if self._depth and self._snapshot is None:
            self._snapshot = dict(self.data.cars)


class SqlAlchemyUnitOfWork(AbstractUnitOfWork):
    """SQLAlchemy-backed Unit of Work."""

    def __init__(self, engine: Engine, clock: Clock | None = None):
        self.engine = engine
        self.clock = clock or SystemClock()
        self.connection: Connection

    def __enter__(self):
        self.connection = self.engine.connect()
        self.cars = SqlAlchemyCarStore(self.connection, self.clock)
        return super().__enter__()

    def __exit__(self, *args):
        super().__exit__(*args)
        self.connection.close()

    def commit(self):
        self.connection.commit()

    def rollback(self):
        self.connection.rollback()

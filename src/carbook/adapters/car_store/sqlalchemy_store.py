"""Implementation of CarStore using SQLAlchemy Core."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy import delete, insert, select, update

from carbook.adapters.clock import SystemClock
from carbook.domain.errors import CarNotFoundError
from carbook.domain.model import Car
from carbook.interfaces.car_store import CarStore

from .schema import cars

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection, Row

    from carbook.domain.model import CarUpdatePayload
    from carbook.interfaces.clock import Clock

logger = logging.getLogger(__name__)

# BIGINT columns are signed; larger u64 ids can never have been issued
MAX_ROW_ID = 2**63 - 1


class SqlAlchemyCarStore(CarStore):
    """CarStore backed by the ``cars`` table; works on Postgres and SQLite.

    The store runs its statements on the connection it is given and never
    commits; transaction control belongs to the unit of work. Ids come from
    the database (identity/autoincrement), which never reuses them.
    """

    def __init__(self, connection: Connection, clock: Clock | None = None) -> None:
        self.connection = connection
        self._clock = clock or SystemClock()

    # --- writes ---

    def add(self, payload: CarUpdatePayload) -> Car:
        created_at = self._clock.now_ns()
        result = self.connection.execute(
            insert(cars).values(**payload.to_dict(), created_at=created_at)
        )
        car_id = int(result.inserted_primary_key[0])
        logger.debug("Inserted car %s", car_id)
        return Car.create(car_id, payload, created_at)

    def update(self, car_id: int, payload: CarUpdatePayload) -> Car:
        current = self._require(car_id)
        # wall clocks can step backwards; keep created_at <= updated_at
        updated_at = max(self._clock.now_ns(), current.created_at)
        car = current.apply(payload, updated_at)
        result = self.connection.execute(
            update(cars)
            .where(cars.c.id == car_id)
            .values(**payload.to_dict(), updated_at=updated_at)
        )
        # the row can vanish between the read and the write
        if result.rowcount == 0:
            raise CarNotFoundError(car_id)
        return car

    def delete(self, car_id: int) -> Car:
        car = self._require(car_id)
        result = self.connection.execute(delete(cars).where(cars.c.id == car_id))
        if result.rowcount == 0:
            raise CarNotFoundError(car_id)
        return car

    # --- reads ---

    def get(self, car_id: int) -> Car | None:
        if not 0 <= car_id <= MAX_ROW_ID:
            return None
        row = self.connection.execute(
            select(cars).where(cars.c.id == car_id)
        ).fetchone()
        return None if row is None else self._row_to_car(row)

    def is_booked(self, car_id: int) -> bool:
        if not 0 <= car_id <= MAX_ROW_ID:
            raise CarNotFoundError(car_id)
        flag = self.connection.execute(
            select(cars.c.is_booked).where(cars.c.id == car_id)
        ).scalar_one_or_none()
        if flag is None:
            raise CarNotFoundError(car_id)
        return bool(flag)

    # --- helpers ---

    def _require(self, car_id: int) -> Car:
        if (car := self.get(car_id)) is None:
            raise CarNotFoundError(car_id)
        return car

    @staticmethod
    def _row_to_car(row: Row) -> Car:
        return Car(
            id=int(row.id),
            make=row.make,
            model=row.model,
            color=row.color,
            owner=row.owner,
            year=int(row.year),
            is_booked=bool(row.is_booked),
            created_at=int(row.created_at),
            updated_at=None if row.updated_at is None else int(row.updated_at),
        )

"""Integration tests for the Unit of Work adapters.

Covers commit/rollback for `SqlAlchemyUnitOfWork` against SQLite and the
snapshot and locking behaviour of `InMemoryUnitOfWork`.
"""

import threading
import time

import pytest

from carbook.adapters.unit_of_work import InMemoryUnitOfWork, SqlAlchemyUnitOfWork

# pylint: disable=magic-value-comparison


class Boom(Exception):
    """Raised inside a unit of work to force a rollback."""


@pytest.fixture(params=["sqlite_engine_memory", "sqlite_engine_file", "memory"])
def uow(request):
    if request.param == "memory":
        return InMemoryUnitOfWork()
    return SqlAlchemyUnitOfWork(request.getfixturevalue(request.param))


def test_commit_persists(uow, make_payload):
    """Committed cars are visible to later units of work."""
    with uow:
        car = uow.cars.add(make_payload())
        uow.commit()
    with uow:
        assert uow.cars.get(car.id) == car


def test_exit_without_commit_discards(uow, make_payload):
    """Leaving without commit() rolls back."""
    with uow:
        car = uow.cars.add(make_payload())
    with uow:
        assert uow.cars.get(car.id) is None


def test_rolls_back_on_error(uow, make_payload):
    """An exception inside the context rolls back and propagates."""
    with uow:
        kept = uow.cars.add(make_payload())
        uow.commit()
    with pytest.raises(Boom):
        with uow:
            uow.cars.update(kept.id, make_payload(is_booked=True))
            raise Boom()
    with uow:
        assert uow.cars.is_booked(kept.id) is False


def test_sqlalchemy_uow_closes_connection(sqlite_engine_file, make_payload):
    """Each context gets its own connection, closed on exit."""
    uow = SqlAlchemyUnitOfWork(sqlite_engine_file)
    with uow:
        first = uow.connection
        uow.cars.add(make_payload())
        uow.commit()
    assert first.closed
    with uow:
        assert uow.connection is not first


class TestInMemoryUnitOfWork:
    """Behaviour specific to the in-memory unit of work."""

    @staticmethod
    def test_rollback_keeps_earlier_commits(make_payload):
        """Only writes after the last commit are undone."""
        uow = InMemoryUnitOfWork()
        with uow:
            first = uow.cars.add(make_payload())
            uow.commit()
            second = uow.cars.add(make_payload())
        assert uow.data.cars == {first.id: first}
        assert second.id not in uow.data.cars

    @staticmethod
    def test_rolled_back_ids_are_not_reissued(make_payload):
        """The id of a rolled-back car is skipped, not reused."""
        uow = InMemoryUnitOfWork()
        with uow:
            ghost = uow.cars.add(make_payload())
        with uow:
            car = uow.cars.add(make_payload())
            uow.commit()
        assert car.id > ghost.id

    @staticmethod
    def test_reentrant(make_payload):
        """Nested contexts share the outer transaction."""
        uow = InMemoryUnitOfWork()
        with uow:
            with uow:
                car = uow.cars.add(make_payload())
            # the inner exit must not roll back
            assert uow.cars.get(car.id) == car
            uow.commit()
        with uow:
            assert uow.cars.get(car.id) == car

    @staticmethod
    def test_serializes_threads(make_payload):
        """A second thread waits until the first leaves the context."""
        uow = InMemoryUnitOfWork()
        order: list[str] = []
        entered = threading.Event()

        def slow_writer():
            with uow:
                entered.set()
                time.sleep(0.05)
                uow.cars.add(make_payload())
                uow.commit()
                order.append("writer")

        def reader():
            entered.wait()
            with uow:
                order.append(f"reader saw {len(uow.data.cars)}")

        threads = [threading.Thread(target=slow_writer), threading.Thread(target=reader)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert order == ["writer", "reader saw 1"]

    @staticmethod
    def test_reads_take_no_snapshot(make_payload):
        """Read-only units of work never copy the car mapping."""
        uow = InMemoryUnitOfWork()
        with uow:
            car = uow.cars.add(make_payload())
            uow.commit()
        with uow:
            assert uow.cars.get(car.id) == car
            assert uow.cars.is_booked(car.id) is False
            assert uow._snapshot is None  # pylint: disable=protected-access
            uow.cars.update(car.id, make_payload(owner="Bob"))
            assert uow._snapshot == {car.id: car}  # pylint: disable=protected-access

    @staticmethod
    def test_rollback_restores_updated_and_deleted_cars(make_payload):
        """The snapshot taken at the first write covers later writes too."""
        uow = InMemoryUnitOfWork()
        with uow:
            kept = uow.cars.add(make_payload())
            other = uow.cars.add(make_payload(owner="Bob"))
            uow.commit()
        with uow:
            uow.cars.update(kept.id, make_payload(is_booked=True))
            uow.cars.delete(other.id)
        assert uow.data.cars == {kept.id: kept, other.id: other}

"""Fixtures for CarStore contract tests.

Every backend runs the same tests through a unit of work, so the contract
covers transaction handling as well as the store itself.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

import pytest

from carbook.adapters.unit_of_work import InMemoryUnitOfWork, SqlAlchemyUnitOfWork

from tests.helpers.clocks import SteppingClock

if TYPE_CHECKING:
    from carbook.interfaces.unit_of_work import AbstractUnitOfWork


@pytest.fixture
def clock() -> SteppingClock:
    """Clock advancing 1µs per read, starting at 1_000_000ns."""
    return SteppingClock(start=1_000_000, step=1_000)


@pytest.fixture(params=["memory", "sqlite_engine_memory", "sqlite_engine_file"])
def uow(request: pytest.FixtureRequest, clock: SteppingClock) -> Iterator[AbstractUnitOfWork]:
    """Yield a fresh unit of work for each CarStore backend."""
    match request.param:
        case "memory":
            yield InMemoryUnitOfWork(clock=clock)
        case engine_fixture:
            yield SqlAlchemyUnitOfWork(request.getfixturevalue(engine_fixture), clock)


@pytest.fixture
def other_uow(uow: AbstractUnitOfWork) -> AbstractUnitOfWork:
    """A second, independent unit of work over the same backing store as `uow`."""
    if isinstance(uow, InMemoryUnitOfWork):
        return InMemoryUnitOfWork(uow.data)
    assert isinstance(uow, SqlAlchemyUnitOfWork)
    if uow.engine.url.database in (None, "", ":memory:"):
        pytest.skip("an in-memory SQLite database has a single shared connection")
    return SqlAlchemyUnitOfWork(uow.engine)

"""Fixtures for id_generator contract tests."""

from collections.abc import Iterable

import pytest

from carbook.adapters.id_generators import SequentialIdGenerator
from carbook.interfaces.id_generator import IdGenerator


@pytest.fixture(params=["sequential"])
def id_generator(request: pytest.FixtureRequest) -> Iterable[IdGenerator]:
    """Yield a fresh IdGenerator for the requested backend.

    Extend by adding identifiers to `params` and branching below.
    """
    match request.param:
        case "sequential":
            yield SequentialIdGenerator()
        case _:
            raise ValueError(f"unknown id generator type: {request.param}")

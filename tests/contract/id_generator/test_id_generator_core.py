"""Contract tests for IdGenerator implementations.

Car ids are unsigned integers that strictly increase and are never reused.
"""

from __future__ import annotations

import concurrent.futures as cf
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from carbook.interfaces.id_generator import IdGenerator


def test_returns_non_negative_int(id_generator: IdGenerator) -> None:
    """new_id() returns an unsigned integer."""
    new_id = id_generator.new_id()
    assert isinstance(new_id, int)
    assert not isinstance(new_id, bool)
    assert new_id >= 0


@pytest.mark.parametrize("count", [2_000, 10_000])
def test_strictly_increasing_single_thread(id_generator: IdGenerator, count: int) -> None:
    """Each id is larger than the one before it."""
    ids = [id_generator.new_id() for _ in range(count)]
    assert all(a < b for a, b in zip(ids, ids[1:]))


def test_threaded_uniqueness_single_instance(id_generator: IdGenerator) -> None:
    """Ids stay unique when requested from many threads at once."""

    def _next(_: int) -> int:
        return id_generator.new_id()

    n = 8000
    with cf.ThreadPoolExecutor(max_workers=16) as ex:
        ids = list(ex.map(_next, range(n)))

    assert len(set(ids)) == n


def test_ids_issued_after_threads_are_larger(id_generator: IdGenerator) -> None:
    """Once concurrent callers are done, later ids exceed all earlier ones."""
    with cf.ThreadPoolExecutor(max_workers=8) as ex:
        earlier = list(ex.map(lambda _: id_generator.new_id(), range(1000)))
    assert id_generator.new_id() > max(earlier)

"""ID generators for CARBOOK."""

import threading

from carbook.interfaces.id_generator import IdGenerator

# pylint: disable=too-few-public-methods


class SequentialIdGenerator(IdGenerator):
    """Thread-safe monotonic counter.

    Ids start at `start` and increase by one per call. Issued ids are never
    returned again, so a deleted car's id cannot alias a later car.
    """

    def __init__(self, start: int = 1) -> None:
        if start < 1:
            raise ValueError(f"start must be >= 1, got {start}")
        self._lock = threading.Lock()
        self._next = start

    def new_id(self) -> int:
        """Generate a new ID (serialized across threads)."""
        with self._lock:
            new_id = self._next
            self._next += 1
            return new_id

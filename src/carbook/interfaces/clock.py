"""Interface for time sources."""

import abc

# pylint: disable=too-few-public-methods


class Clock(abc.ABC):
    """Contract for a wall clock with nanosecond resolution."""

    @abc.abstractmethod
    def now_ns(self) -> int:
        """Return the current time in nanoseconds since the Unix epoch."""

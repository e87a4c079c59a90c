"""Clock adapters."""

import time

from carbook.interfaces.clock import Clock

# pylint: disable=too-few-public-methods


class SystemClock(Clock):
    """Wall clock backed by `time.time_ns`."""

    def now_ns(self) -> int:
        return time.time_ns()

"""Unit tests for the system clock."""

import time

from carbook.adapters.clock import SystemClock


def test_now_ns_tracks_wall_clock():
    """now_ns() returns nanoseconds since the epoch."""
    before = time.time_ns()
    now = SystemClock().now_ns()
    after = time.time_ns()
    assert before <= now <= after

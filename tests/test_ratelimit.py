"""Tests for sumocli.ratelimit."""

import threading
import time

import pytest

from sumocli.ratelimit import RateLimiter


class FakeClock:
    """Monotonic clock that only moves when told to (or when slept on)."""

    def __init__(self) -> None:
        self.now = 0.0
        self.sleeps: list[float] = []

    def __call__(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


class TestRateLimiter:
    def test_first_call_does_not_wait(self) -> None:
        clock = FakeClock()
        limiter = RateLimiter(2.0, clock=clock, sleep=clock.sleep)

        assert limiter.acquire() == 0.0
        assert clock.sleeps == []

    def test_back_to_back_calls_are_spaced(self) -> None:
        clock = FakeClock()
        limiter = RateLimiter(2.0, clock=clock, sleep=clock.sleep)

        starts = [limiter.acquire() for _ in range(4)]

        assert starts == [0.0, 2.0, 4.0, 6.0]
        assert clock.sleeps == [2.0, 2.0, 2.0]

    def test_no_wait_after_interval_elapsed(self) -> None:
        clock = FakeClock()
        limiter = RateLimiter(2.0, clock=clock, sleep=clock.sleep)

        limiter.acquire()
        clock.now = 5.0  # a slow download finished
        assert limiter.acquire() == 5.0
        assert clock.sleeps == []

    def test_partial_wait(self) -> None:
        clock = FakeClock()
        limiter = RateLimiter(2.0, clock=clock, sleep=clock.sleep)

        limiter.acquire()
        clock.now = 0.5
        assert limiter.acquire() == 2.0
        assert clock.sleeps == [1.5]

    def test_slot_reserved_before_waiting(self) -> None:
        """Callers arriving together get distinct slots even before anyone sleeps."""
        clock = FakeClock()
        waits: list[float] = []
        limiter = RateLimiter(2.0, clock=clock, sleep=waits.append)

        starts = [limiter.acquire() for _ in range(3)]

        assert starts == [0.0, 2.0, 4.0]
        assert waits == [2.0, 4.0]

    def test_negative_interval_rejected(self) -> None:
        with pytest.raises(ValueError):
            RateLimiter(-1.0)

    def test_concurrent_callers_pairwise_spaced(self) -> None:
        interval = 0.05
        limiter = RateLimiter(interval)
        starts: list[float] = []
        released: list[tuple[float, float]] = []
        lock = threading.Lock()
        barrier = threading.Barrier(6)

        def worker() -> None:
            barrier.wait()
            start = limiter.acquire()
            now = time.monotonic()
            with lock:
                starts.append(start)
                released.append((start, now))

        threads = [threading.Thread(target=worker) for _ in range(6)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        ordered = sorted(starts)
        gaps = [b - a for a, b in zip(ordered, ordered[1:])]
        assert all(gap >= interval - 1e-9 for gap in gaps)
        # nobody is released before their reserved slot
        assert all(now >= start - 1e-3 for start, now in released)

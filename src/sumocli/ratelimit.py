"""Minimum-interval limiter shared by every download in a run."""

import logging
import threading
import time
from typing import Callable

from sumocli.config import DOWNLOAD_DELAY

logger = logging.getLogger(__name__)


class RateLimiter:
    """Spaces the start of gated calls by at least ``min_interval`` seconds.

    Each ``acquire()`` reserves the next free start slot under a lock and only
    then sleeps until that slot, so concurrent callers receive distinct slots
    and a slow download does not shorten the gap before the next one.
    """

    def __init__(
        self,
        min_interval: float = DOWNLOAD_DELAY,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if min_interval < 0:
            raise ValueError("min_interval must not be negative")
        self.min_interval = min_interval
        self._clock = clock
        self._sleep = sleep
        self._lock = threading.Lock()
        self._last_start: float | None = None

    def acquire(self) -> float:
        """Block until the caller may start; return the reserved start time."""
        with self._lock:
            now = self._clock()
            start = now
            if self._last_start is not None:
                start = max(now, self._last_start + self.min_interval)
            self._last_start = start

        delay = start - now
        if delay > 0:
            logger.debug("Rate limit: waiting %.2fs", delay)
            self._sleep(delay)
        return start

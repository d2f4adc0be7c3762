"""
Rate limiters for outbound PubChem requests.

The client calls ``wait()`` right after every request, whether it succeeded
or not, so the limiter alone decides how soon the next request may go out.
"""

import threading
import time
import logging
from logging import Logger

from .config import DEFAULT_REQUEST_DELAY

logger: Logger = logging.getLogger(__name__)


class RateLimiter:
    """Interface for post-request rate limiting."""

    def wait(self) -> None:
        raise NotImplementedError


class FixedDelayRateLimiter(RateLimiter):
    """
    Block the caller for a fixed delay after each request.

    With the default 0.2s this caps one client at 5 requests/second. There is
    no burst allowance, jitter or backoff.
    """

    def __init__(self, delay: float = DEFAULT_REQUEST_DELAY):
        if delay < 0:
            raise ValueError(f"Delay must be non-negative, got {delay}")
        self.delay = delay

    def wait(self) -> None:
        logger.debug(f"Rate limiting: sleeping {self.delay:.3f}s")
        time.sleep(self.delay)


class NoDelayRateLimiter(RateLimiter):
    """Never waits. Meant for tests and replayed responses."""

    def wait(self) -> None:
        return None


class MinIntervalRateLimiter(RateLimiter):
    """
    Enforce a minimum interval between consecutive requests.

    Unlike FixedDelayRateLimiter, the time already spent since the previous
    request counts towards the interval, and the bookkeeping is guarded by a
    lock so several clients can share one instance.
    """

    def __init__(self, interval: float = DEFAULT_REQUEST_DELAY):
        if interval < 0:
            raise ValueError(f"Interval must be non-negative, got {interval}")
        self.interval = interval
        self._last_request_time = 0.0
        self._lock = threading.Lock()

    def wait(self) -> None:
        with self._lock:
            elapsed = time.monotonic() - self._last_request_time
            if elapsed < self.interval:
                sleep_time = self.interval - elapsed
                logger.debug(f"Rate limiting: sleeping {sleep_time:.3f}s")
                time.sleep(sleep_time)
            self._last_request_time = time.monotonic()

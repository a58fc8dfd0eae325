"""
Fixed-window rate limiter.

Process-local and unsynchronized: counters live in a plain dict with no
eviction, so limits are per worker and reset on restart. Not suitable for a
multi-process deployment.
"""

import logging
import math
import time
from collections.abc import Callable

from resumelm.config import settings
from resumelm.errors import RateLimitError

logger = logging.getLogger(__name__)


def _now_ms() -> int:
    return int(time.time() * 1000)


class FixedWindowRateLimiter:
    """Count calls per key inside a fixed window that starts at the first call."""

    def __init__(self, limit: int, window_ms: int, clock: Callable[[], int] = _now_ms):
        self.limit = limit
        self.window_ms = window_ms
        self._clock = clock
        # key -> (count, window_start_ms)
        self._store: dict[str, tuple[int, int]] = {}

    def check(self, key: str) -> None:
        """Record a call for `key`, raising RateLimitError when over the limit."""
        now = self._clock()
        entry = self._store.get(key)

        if entry is None or now - entry[1] > self.window_ms:
            self._store[key] = (1, now)
            return

        count, started = entry
        if count >= self.limit:
            retry_after = math.ceil((self.window_ms - (now - started)) / 1000)
            logger.warning(f"[rate_limit] {key} exceeded {self.limit} calls, retry in {retry_after}s")
            raise RateLimitError(retry_after)

        self._store[key] = (count + 1, started)

    def count(self, key: str) -> int:
        entry = self._store.get(key)
        return entry[0] if entry else 0

    def reset(self) -> None:
        self._store.clear()


_limiter: FixedWindowRateLimiter | None = None


def get_rate_limiter() -> FixedWindowRateLimiter:
    """Get or create the process-wide limiter."""
    global _limiter
    if _limiter is None:
        _limiter = FixedWindowRateLimiter(settings.rate_limit_max, settings.rate_limit_window_ms)
    return _limiter


def check_rate_limit(key: str) -> None:
    get_rate_limiter().check(key)

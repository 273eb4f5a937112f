"""
In-process fixed-window rate limiter.

Counters live in this process only; running several workers multiplies the
effective limit by the worker count.
"""

import logging
import threading
import time
from dataclasses import dataclass
from typing import Callable, Dict, Optional

from src.app.services.rate_limiter import IRateLimiter, RateLimitResult

logger = logging.getLogger(__name__)


def _now_ms() -> int:
    return int(time.time() * 1000)


@dataclass
class _Window:
    count: int
    reset_at: int


class InMemoryRateLimiter(IRateLimiter):
    """
    Fixed-window counter per key.

    A call inside a live window increments it and is rejected once the count
    has reached the limit. A call after the window expired opens a new one
    with count=1.
    """

    def __init__(self, clock: Optional[Callable[[], int]] = None, max_keys: int = 10000):
        self._clock = clock or _now_ms
        self._max_keys = max_keys
        self._windows: Dict[str, _Window] = {}
        self._lock = threading.Lock()

    def check(self, key: str, limit: int, window_ms: int) -> RateLimitResult:
        now = self._clock()
        with self._lock:
            window = self._windows.get(key)

            if window is not None and window.reset_at > now:
                if window.count >= limit:
                    logger.warning(f"Rate limit exceeded for {key}")
                    return RateLimitResult(
                        ok=False,
                        remaining=0,
                        reset_at_ms=window.reset_at,
                        retry_after_ms=max(0, window.reset_at - now),
                    )
                window.count += 1
                return RateLimitResult(
                    ok=True,
                    remaining=max(0, limit - window.count),
                    reset_at_ms=window.reset_at,
                )

            if len(self._windows) >= self._max_keys:
                self._evict_expired(now)

            reset_at = now + window_ms
            self._windows[key] = _Window(count=1, reset_at=reset_at)
            return RateLimitResult(ok=True, remaining=max(0, limit - 1), reset_at_ms=reset_at)

    def reset(self) -> None:
        with self._lock:
            self._windows.clear()

    def _evict_expired(self, now: int) -> None:
        expired = [key for key, window in self._windows.items() if window.reset_at <= now]
        for key in expired:
            del self._windows[key]

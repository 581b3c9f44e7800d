"""A token-bucket rate limiter for API calls."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass


@dataclass
class RateLimitOptions:
    """Sustained request rate and burst size."""

    requests_per_second: float = 10.0
    burst: float = 20.0


class RateLimiter:
    """A thread-safe token bucket that starts full."""

    def __init__(self, options: RateLimitOptions | None = None) -> None:
        options = options or RateLimitOptions()
        self._lock = threading.Lock()
        self._tokens = float(options.burst)
        self._max = float(options.burst)
        self._rate = float(options.requests_per_second)
        self._last = time.monotonic()

    def _refill(self) -> None:
        now = time.monotonic()
        elapsed = now - self._last
        self._last = now
        self._tokens = min(self._max, self._tokens + elapsed * self._rate)

    def wait(self) -> None:
        """Block until a token is available, then consume it."""
        while True:
            with self._lock:
                self._refill()
                if self._tokens >= 1:
                    self._tokens -= 1
                    return
                if self._rate <= 0:
                    raise ValueError("rate limiter has no tokens and cannot refill")
                delay = (1 - self._tokens) / self._rate
            time.sleep(delay)

    def try_acquire(self) -> bool:
        """Consume a token without blocking; return whether one was available."""
        with self._lock:
            self._refill()
            if self._tokens >= 1:
                self._tokens -= 1
                return True
            return False
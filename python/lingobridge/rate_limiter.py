import threading
import time
from typing import Callable, Optional

from lingobridge.errors import RateLimitError


class RateWindow:
    """
    Fixed-length request window shared by every translation call in the process.

    The window restarts once `window_seconds` have elapsed since it opened;
    within a window at most `max_requests` calls are admitted.
    """
    def __init__(self, max_requests: int = 10, window_seconds: float = 60.0,
                 clock: Optional[Callable[[], float]] = None, request_count: int = 0):
        if max_requests < 1:
            raise ValueError("max_requests must be at least 1")
        if window_seconds <= 0:
            raise ValueError("window_seconds must be positive")

        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self._clock = clock or time.monotonic
        self._lock = threading.Lock()

        self.request_count = request_count
        self.window_start = self._clock()

    def _roll(self, now: float):
        if now - self.window_start >= self.window_seconds:
            self.request_count = 0
            self.window_start = now

    def check(self):
        """Raise RateLimitError if the current window is already full."""
        with self._lock:
            now = self._clock()
            self._roll(now)
            if self.request_count >= self.max_requests:
                raise RateLimitError(retry_after=self.window_seconds - (now - self.window_start))

    def acquire(self):
        """Atomic check-then-increment for one attempted call."""
        with self._lock:
            now = self._clock()
            self._roll(now)
            if self.request_count >= self.max_requests:
                raise RateLimitError(retry_after=self.window_seconds - (now - self.window_start))
            self.request_count += 1

"""
Fixed-Window Rate Limiter

Per-key request budgets: each key gets `points` requests per `duration`
seconds, counted from the first request of the window. Counters live in
an injectable store so the limiter can be built once at startup and
handed to the request path.
"""

from __future__ import annotations

import logging
import math
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass

logger = logging.getLogger(__name__)


class RateLimitExceeded(Exception):
    """Raised when a key has used up its budget for the current window."""

    def __init__(self, key: str, retry_after: float):
        super().__init__(f"Rate limit exceeded for {key}")
        self.key = key
        self.retry_after = retry_after


@dataclass
class RateLimitWindow:
    consumed: int
    resets_at: float


@dataclass(frozen=True)
class RateLimitResult:
    """Budget state after a successful consume."""

    consumed: int
    remaining: int
    seconds_before_reset: float


class InMemoryRateLimitStore:
    """
    In-memory counter store keyed by client identifier.

    All reads and writes go through a single lock, so consume() is an
    atomic check-and-increment across threads.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic, purge_every: int = 1000):
        """
        Initialize the store.

        Args:
            clock: Monotonic time source in seconds
            purge_every: Drop expired windows after this many consume calls
        """
        self._clock = clock
        self._purge_every = purge_every
        self._windows: dict[str, RateLimitWindow] = {}
        self._lock = threading.Lock()
        self._calls = 0

    def consume(self, key: str, points: int, duration: float) -> RateLimitWindow:
        """
        Add `points` to the key's current window, opening a new one if expired.

        Returns:
            A snapshot of the window after the increment
        """
        with self._lock:
            now = self._clock()
            self._calls += 1
            if self._calls % self._purge_every == 0:
                self._purge(now)

            window = self._windows.get(key)
            if window is None or window.resets_at <= now:
                window = RateLimitWindow(consumed=0, resets_at=now + duration)
                self._windows[key] = window
            window.consumed += points
            return RateLimitWindow(consumed=window.consumed, resets_at=window.resets_at)

    def now(self) -> float:
        return self._clock()

    def reset(self, key: str | None = None) -> None:
        """Forget one key, or every key when none is given."""
        with self._lock:
            if key is None:
                self._windows.clear()
            else:
                self._windows.pop(key, None)

    def _purge(self, now: float) -> None:
        expired = [key for key, window in self._windows.items() if window.resets_at <= now]
        for key in expired:
            del self._windows[key]

    def __len__(self) -> int:
        with self._lock:
            return len(self._windows)


class RateLimiter:
    """Allow at most `points` requests per key in each `duration`-second window."""

    def __init__(self, store: InMemoryRateLimitStore, points: int = 10, duration: float = 60):
        """
        Initialize the rate limiter.

        Args:
            store: Counter store shared by every request
            points: Requests allowed per window
            duration: Window length in seconds
        """
        if points <= 0:
            raise ValueError(f"points must be a positive integer, got: {points}")
        if duration <= 0:
            raise ValueError(f"duration must be positive, got: {duration}")
        self.store = store
        self.points = points
        self.duration = duration

    def consume(self, key: str, cost: int = 1) -> RateLimitResult:
        """
        Spend `cost` points from the key's budget.

        Raises:
            RateLimitExceeded: If the window's budget is already spent
        """
        window = self.store.consume(key, cost, self.duration)
        seconds_before_reset = max(window.resets_at - self.store.now(), 0.0)

        if window.consumed > self.points:
            logger.warning(f"Rate limit exceeded for {key} ({window.consumed}/{self.points})")
            raise RateLimitExceeded(key, retry_after=seconds_before_reset)

        return RateLimitResult(
            consumed=window.consumed,
            remaining=self.points - window.consumed,
            seconds_before_reset=seconds_before_reset,
        )

    @staticmethod
    def retry_after_header(error: RateLimitExceeded) -> str:
        """Retry-After value in whole seconds, at least 1."""
        return str(max(math.ceil(error.retry_after), 1))

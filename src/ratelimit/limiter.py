"""Fixed-window rate limiter with in-memory storage."""

import math
import time
import threading
from typing import NamedTuple
from pydantic import BaseModel, Field


class RateLimitConfig(BaseModel):
    """Configuration for rate limiting.

    Attributes:
        limit: Maximum requests allowed per window.
        window_seconds: Length of the fixed window.
        cleanup_interval_seconds: How often expired entries are swept.
    """

    limit: int = Field(default=120, description="Requests allowed per window")
    window_seconds: float = Field(default=60.0, description="Window length in seconds")
    cleanup_interval_seconds: float = Field(default=300.0, description="Sweep interval")


class RateLimitResult(NamedTuple):
    """Result of a rate limit check.

    Attributes:
        allowed: Whether the request is allowed.
        limit: The rate limit.
        remaining: Remaining requests in window.
        reset_at: Unix timestamp when the window resets.
        retry_after: Seconds to wait if denied (0 if allowed).
    """

    allowed: bool
    limit: int
    remaining: int
    reset_at: int
    retry_after: float = 0.0


class WindowEntry:
    """Request counter for one client within the current window."""

    __slots__ = ("count", "window_start")

    def __init__(self, window_start: float):
        self.count = 0
        self.window_start = window_start


class FixedWindowRateLimiter:
    """Per-key fixed-window request counter.

    A key's window opens on its first request. Once more than
    ``window_seconds`` have elapsed the counter restarts at one. Rejected
    requests still count, so a client that keeps hammering stays blocked
    until its window rolls over.
    """

    def __init__(self, config: RateLimitConfig | None = None):
        """Initialize rate limiter.

        Args:
            config: Rate limit config. Uses 120 requests/minute if not provided.
        """
        self.config = config or RateLimitConfig()
        self._entries: dict[str, WindowEntry] = {}
        self._lock = threading.Lock()
        self._last_cleanup = time.time()

    def __len__(self) -> int:
        return len(self._entries)

    def _cleanup_expired_entries(self, now: float) -> None:
        """Drop entries whose window ended more than one window ago."""
        if now - self._last_cleanup < self.config.cleanup_interval_seconds:
            return

        stale_before = now - 2 * self.config.window_seconds
        stale_keys = [
            key for key, entry in self._entries.items()
            if entry.window_start < stale_before
        ]
        for key in stale_keys:
            del self._entries[key]

        self._last_cleanup = now

    def check(self, key: str) -> RateLimitResult:
        """Count a request for ``key`` and report whether it may proceed.

        Args:
            key: Client identity.

        Returns:
            RateLimitResult with allow/deny status and metadata.
        """
        with self._lock:
            now = time.time()
            self._cleanup_expired_entries(now)

            entry = self._entries.get(key)
            if entry is None:
                entry = WindowEntry(window_start=now)
                self._entries[key] = entry

            if now - entry.window_start > self.config.window_seconds:
                entry.count = 1
                entry.window_start = now
            else:
                entry.count += 1

            reset_at = entry.window_start + self.config.window_seconds
            limit = self.config.limit

            if entry.count > limit:
                return RateLimitResult(
                    allowed=False,
                    limit=limit,
                    remaining=0,
                    reset_at=math.ceil(reset_at),
                    retry_after=max(reset_at - now, 0.0),
                )
            return RateLimitResult(
                allowed=True,
                limit=limit,
                remaining=limit - entry.count,
                reset_at=math.ceil(reset_at),
            )


# Global rate limiter instance
_rate_limiter: FixedWindowRateLimiter | None = None
_rate_limiter_lock = threading.Lock()


def get_rate_limiter() -> FixedWindowRateLimiter:
    """Get the global rate limiter instance, configured from settings."""
    global _rate_limiter
    if _rate_limiter is None:
        with _rate_limiter_lock:
            if _rate_limiter is None:
                from src.config import get_settings

                settings = get_settings()
                _rate_limiter = FixedWindowRateLimiter(
                    RateLimitConfig(
                        limit=settings.RATE_LIMIT_REQUESTS,
                        window_seconds=settings.RATE_LIMIT_WINDOW_SECONDS,
                    )
                )
    return _rate_limiter


def reset_rate_limiter() -> None:
    """Discard the global limiter so the next request starts from a clean table."""
    global _rate_limiter
    with _rate_limiter_lock:
        _rate_limiter = None

"""Rate limiting module - Fixed-window implementation."""

from .limiter import (
    RateLimitConfig,
    RateLimitResult,
    WindowEntry,
    FixedWindowRateLimiter,
    get_rate_limiter,
    reset_rate_limiter,
)
from .exceptions import RateLimitExceededError
from .middleware import RateLimitMiddleware, client_identity


__all__ = [
    "RateLimitConfig",
    "RateLimitResult",
    "WindowEntry",
    "FixedWindowRateLimiter",
    "get_rate_limiter",
    "reset_rate_limiter",
    "RateLimitExceededError",
    "RateLimitMiddleware",
    "client_identity",
]

"""Rate limiting middleware."""

from typing import Callable

import structlog
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from src.bfhl.schemas import create_error_response
from src.config import get_settings

from .limiter import get_rate_limiter, RateLimitResult
from .exceptions import RateLimitExceededError

logger = structlog.get_logger("ratelimit")

UNKNOWN_CLIENT = "unknown"


def add_rate_limit_headers(response: Response, result: RateLimitResult) -> None:
    """Add rate limit headers to response.

    Args:
        response: Response to add headers to.
        result: Rate limit check result.
    """
    response.headers["X-RateLimit-Limit"] = str(result.limit)
    response.headers["X-RateLimit-Remaining"] = str(result.remaining)
    response.headers["X-RateLimit-Reset"] = str(result.reset_at)


def client_identity(request: Request, trust_forwarded: bool = False) -> str:
    """Best-effort client identifier used as the rate limit key.

    Args:
        request: Incoming request.
        trust_forwarded: Prefer the first ``X-Forwarded-For`` hop when set
            (deployments behind a reverse proxy).

    Returns:
        The client address, or ``"unknown"`` when none can be resolved.
    """
    if trust_forwarded:
        forwarded = request.headers.get("x-forwarded-for", "")
        first_hop = forwarded.split(",")[0].strip()
        if first_hop:
            return first_hop
    if request.client and request.client.host:
        return request.client.host
    return UNKNOWN_CLIENT


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Middleware that applies the fixed-window limit to every request.

    Limiter failures never block a request: the error is logged and the
    request continues unmetered.
    """

    async def dispatch(self, request: Request, call_next: Callable):
        try:
            settings = get_settings()
            key = client_identity(request, trust_forwarded=settings.RATE_LIMIT_TRUST_FORWARDED)
            result = get_rate_limiter().check(key)
        except Exception:
            logger.exception("rate_limiter_failed", path=request.url.path)
            return await call_next(request)

        if not result.allowed:
            exc = RateLimitExceededError(limit=result.limit, retry_after=result.retry_after)
            logger.warning(
                "rate_limit_exceeded",
                client=key,
                limit=exc.limit,
                retry_after=round(exc.retry_after, 1),
            )
            response = create_error_response(status_code=429, message=exc.message)
            response.headers["Retry-After"] = str(int(exc.retry_after) + 1)
            add_rate_limit_headers(response, result)
            return response

        response = await call_next(request)
        add_rate_limit_headers(response, result)
        return response

"""Rate limit exceptions."""

from src.exceptions import BfhlError


class RateLimitExceededError(BfhlError):
    """Raised when a client exceeds its request window.

    Attributes:
        limit: The rate limit that was exceeded.
        retry_after: Seconds until request can be retried.
    """

    def __init__(self, limit: int, retry_after: float):
        super().__init__(
            message="Too many requests",
            code="RATE_LIMIT_EXCEEDED"
        )
        self.limit = limit
        self.retry_after = retry_after

"""Per-client request rate limiting."""

from .rate_limiter import (
    InMemoryRateLimitStore,
    RateLimiter,
    RateLimitExceeded,
    RateLimitResult,
    RateLimitWindow,
)

__all__ = [
    "InMemoryRateLimitStore",
    "RateLimitExceeded",
    "RateLimitResult",
    "RateLimitWindow",
    "RateLimiter",
]

"""Rate limiting module - Sliding window implementation."""

from .limiter import (
    RateLimitConfig,
    RateLimitResult,
    RateLimiter,
    get_rate_limiter,
    check_rate_limit,
)
from .exceptions import RateLimitExceededError
from .dependencies import get_client_ip, rate_limit_dependency


__all__ = [
    "RateLimitConfig",
    "RateLimitResult",
    "RateLimiter",
    "get_rate_limiter",
    "check_rate_limit",
    "RateLimitExceededError",
    "get_client_ip",
    "rate_limit_dependency",
]

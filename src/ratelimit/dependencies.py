"""Rate limiting FastAPI dependencies."""

import structlog
from fastapi import Request, Response

from src.config import get_settings
from src.log import truncate

from .limiter import check_rate_limit, RateLimitResult
from .exceptions import RateLimitExceededError

logger = structlog.get_logger("ratelimit")


def get_client_ip(request: Request) -> str:
    """Resolve the client address for rate limiting.
    
    Uses the first entry of ``X-Forwarded-For`` when ``TRUST_FORWARDED_FOR``
    is set, then the socket peer, then ``"unknown"``. Without a proxy that
    overwrites the header, clients can rotate it to dodge the limiter, so
    direct deployments should turn the setting off.
    
    Args:
        request: FastAPI request.
        
    Returns:
        Client address string.
    """
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded and get_settings().TRUST_FORWARDED_FOR:
        first = forwarded.split(",")[0].strip()
        if first:
            return first
    if request.client and request.client.host:
        return request.client.host
    return "unknown"


def add_rate_limit_headers(response: Response, result: RateLimitResult) -> None:
    """Add rate limit headers to response.
    
    Args:
        response: Response to add headers to.
        result: Rate limit check result.
    """
    response.headers["X-RateLimit-Limit"] = str(result.limit)
    response.headers["X-RateLimit-Remaining"] = str(result.remaining)
    response.headers["X-RateLimit-Reset"] = str(result.reset_at)


async def rate_limit_dependency(request: Request, response: Response) -> RateLimitResult:
    """FastAPI dependency that enforces per-address rate limiting.
    
    Add this to your route dependencies to enable rate limiting.
    Automatically adds rate limit headers to the response.
    
    Args:
        request: FastAPI request.
        response: Response whose headers receive the limit state.
        
    Returns:
        RateLimitResult for informational purposes.
        
    Raises:
        RateLimitExceededError: If rate limit is exceeded.
    """
    client_ip = get_client_ip(request)
    result = check_rate_limit(client_ip)
    
    if not result.allowed:
        logger.warning("rate_limited", ip=truncate(client_ip, 10), path=request.url.path)
        raise RateLimitExceededError(
            limit=result.limit,
            retry_after=result.retry_after
        )
    
    add_rate_limit_headers(response, result)
    return result

"""Sliding-window rate limiter with in-memory storage."""

import time
import threading
from typing import NamedTuple
from pydantic import BaseModel, Field

from src.config import get_settings


class RateLimitConfig(BaseModel):
    """Configuration for rate limiting.
    
    Attributes:
        max_requests: Maximum requests allowed inside one window.
        window_seconds: Length of the sliding window.
        max_keys: Hard cap on tracked keys; least recently used keys go first.
    """
    
    max_requests: int = Field(default=30, description="Requests per window")
    window_seconds: float = Field(default=60.0, description="Window length in seconds")
    max_keys: int = Field(default=10000, description="Maximum tracked keys")


class RateLimitResult(NamedTuple):
    """Result of a rate limit check.
    
    Attributes:
        allowed: Whether the request is allowed.
        limit: The rate limit.
        remaining: Remaining requests in window.
        reset_at: Unix timestamp when the oldest request leaves the window.
        retry_after: Seconds to wait if denied (0 if allowed).
    """
    
    allowed: bool
    limit: int
    remaining: int
    reset_at: int
    retry_after: float = 0.0


class RateLimiter:
    """Thread-safe multi-key sliding-window rate limiter.
    
    Keeps the timestamps of recent requests per key (e.g. per client address).
    A request is allowed while fewer than ``max_requests`` timestamps fall
    inside the last ``window_seconds``. All reads and writes of the timestamp
    map happen under a single lock.
    """
    
    def __init__(self, config: RateLimitConfig | None = None):
        """Initialize rate limiter.
        
        Args:
            config: Rate limit config. Uses defaults if not provided.
        """
        self.config = config or RateLimitConfig()
        self._requests: dict[str, list[float]] = {}
        self._lock = threading.Lock()
    
    def _evict_keys(self, now: float) -> None:
        """Hold the map at ``max_keys`` by dropping least recently used keys.
        
        Keys stay ordered by their latest recorded request, so fully expired
        keys form a prefix of the map. Once the cap is exceeded that prefix is
        dropped, then the oldest live keys until the cap holds again.
        """
        if len(self._requests) <= self.config.max_keys:
            return
        
        while self._requests:
            oldest_key, times = next(iter(self._requests.items()))
            expired = not times or now - times[-1] >= self.config.window_seconds
            if not expired and len(self._requests) <= self.config.max_keys:
                break
            del self._requests[oldest_key]
    
    def check(self, key: str) -> RateLimitResult:
        """Record a request for a key and report whether it is allowed.
        
        Args:
            key: Rate limit key (e.g., client IP address).
            
        Returns:
            RateLimitResult with status and headers.
        """
        limit = self.config.max_requests
        window = self.config.window_seconds
        
        with self._lock:
            now = time.time()
            recent = [t for t in self._requests.get(key, []) if now - t < window]
            
            if len(recent) >= limit:
                self._requests[key] = recent
                retry_after = max(0.0, recent[0] + window - now)
                return RateLimitResult(
                    allowed=False,
                    limit=limit,
                    remaining=0,
                    reset_at=int(recent[0] + window),
                    retry_after=retry_after,
                )
            
            recent.append(now)
            # Re-insert so the key moves to the most recently used end
            self._requests.pop(key, None)
            self._requests[key] = recent
            self._evict_keys(now)
            
            return RateLimitResult(
                allowed=True,
                limit=limit,
                remaining=limit - len(recent),
                reset_at=int(recent[0] + window),
            )
    
    def tracked_keys(self) -> int:
        """Number of keys currently tracked."""
        with self._lock:
            return len(self._requests)


# Global rate limiter instance
_rate_limiter: RateLimiter | None = None


def get_rate_limiter() -> RateLimiter:
    """Get the global rate limiter instance configured from settings."""
    global _rate_limiter
    if _rate_limiter is None:
        settings = get_settings()
        _rate_limiter = RateLimiter(RateLimitConfig(
            max_requests=settings.RATE_LIMIT_MAX_REQUESTS,
            window_seconds=settings.RATE_LIMIT_WINDOW_SECONDS,
            max_keys=settings.RATE_LIMIT_MAX_KEYS,
        ))
    return _rate_limiter


def check_rate_limit(client_ip: str) -> RateLimitResult:
    """Check rate limit for a client address.
    
    Args:
        client_ip: Client address as seen by the service.
        
    Returns:
        RateLimitResult with status and headers.
    """
    return get_rate_limiter().check(f"ip:{client_ip}")

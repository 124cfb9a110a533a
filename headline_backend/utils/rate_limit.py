"""
Fixed-window rate limiting per client address.

Each address gets ``max_requests`` per window of ``window_seconds``. The
window starts at the address's first request and resets once it elapses.
State lives in process memory, so limits are per worker process.
"""

import threading
import time
from dataclasses import dataclass
from typing import Callable, Dict, Optional

from fastapi import Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

from headline_backend.utils.logging import get_logger

logger = get_logger(__name__)

RATE_LIMIT_MESSAGE = "Too many requests, please try again later."


@dataclass
class _Window:
    started_at: float
    count: int


@dataclass(frozen=True)
class RateLimitDecision:
    """Outcome of counting one request against an address's window."""
    allowed: bool
    limit: int
    remaining: int
    reset_after: float


class FixedWindowRateLimiter:
    """Thread-safe fixed-window counter keyed by client address."""

    def __init__(
        self,
        max_requests: int,
        window_seconds: float,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self._clock = clock
        self._windows: Dict[str, _Window] = {}
        self._lock = threading.Lock()

    def hit(self, key: str) -> RateLimitDecision:
        """Count one request for ``key`` and report whether it is allowed."""
        now = self._clock()
        with self._lock:
            window = self._windows.get(key)
            if window is None or now - window.started_at >= self.window_seconds:
                window = _Window(started_at=now, count=0)
                self._windows[key] = window
                self._evict_expired(now)

            window.count += 1
            remaining = max(self.max_requests - window.count, 0)
            reset_after = max(self.window_seconds - (now - window.started_at), 0.0)

            return RateLimitDecision(
                allowed=window.count <= self.max_requests,
                limit=self.max_requests,
                remaining=remaining,
                reset_after=reset_after,
            )

    def reset(self) -> None:
        """Forget every window."""
        with self._lock:
            self._windows.clear()

    def _evict_expired(self, now: float) -> None:
        expired = [
            key for key, window in self._windows.items()
            if now - window.started_at >= self.window_seconds
        ]
        for key in expired:
            del self._windows[key]


def client_address(request: Request) -> str:
    """Address used as the rate-limit key."""
    if request.client is None:
        return "unknown"
    return request.client.host


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Reject requests over the limit with 429 and a JSON error body."""

    def __init__(self, app, limiter: Optional[FixedWindowRateLimiter] = None, **limiter_kwargs):
        super().__init__(app)
        self.limiter = limiter or FixedWindowRateLimiter(**limiter_kwargs)

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        address = client_address(request)
        decision = self.limiter.hit(address)

        headers = {
            "X-RateLimit-Limit": str(decision.limit),
            "X-RateLimit-Remaining": str(decision.remaining),
        }

        if not decision.allowed:
            logger.warning(f"Rate limit exceeded for {address} on {request.method} {request.url.path}")
            headers["Retry-After"] = str(int(decision.reset_after) + 1)
            return JSONResponse(
                status_code=status.HTTP_429_TOO_MANY_REQUESTS,
                content={"error": RATE_LIMIT_MESSAGE},
                headers=headers,
            )

        response = await call_next(request)
        response.headers.update(headers)
        return response

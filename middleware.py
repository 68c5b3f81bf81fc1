"""Fixed-window rate limiting for the validation endpoint."""

import logging
import math
import time
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.types import ASGIApp

from errors import RateLimited

logger = logging.getLogger(__name__)


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Allow at most *max_requests* per client per *window* seconds.

    Counters live in process memory and are keyed by client host; only
    paths starting with one of *paths* are counted.
    """

    def __init__(
        self,
        app: ASGIApp,
        max_requests: int,
        window: int,
        paths: tuple[str, ...] = ("/validate",),
        clock: Callable[[], float] = time.monotonic,
    ):
        super().__init__(app)
        self.max_requests = max_requests
        self.window = window
        self.paths = paths
        self.clock = clock
        self._windows: dict[str, tuple[float, int]] = {}

    def _client_key(self, request: Request) -> str:
        return request.client.host if request.client else "unknown"

    def _hit(self, key: str) -> float | None:
        """Count one request; return seconds to wait if over the limit."""
        now = self.clock()
        started, count = self._windows.get(key, (now, 0))
        if now - started >= self.window:
            started, count = now, 0
        count += 1
        self._windows[key] = (started, count)
        if count > self.max_requests:
            return self.window - (now - started)
        return None

    def _prune(self) -> None:
        now = self.clock()
        stale = [k for k, (started, _) in self._windows.items() if now - started >= self.window]
        for k in stale:
            del self._windows[k]

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if self.max_requests <= 0 or request.method == "OPTIONS":
            return await call_next(request)
        if not any(request.url.path.startswith(p) for p in self.paths):
            return await call_next(request)

        key = self._client_key(request)
        if len(self._windows) > 10_000:
            self._prune()
        retry_after = self._hit(key)
        if retry_after is not None:
            logger.warning(f"Rate limit exceeded for {key} on {request.url.path}")
            return RateLimited(
                headers={"Retry-After": str(max(1, math.ceil(retry_after)))}
            ).to_response()
        return await call_next(request)

from collections import deque
from collections.abc import Awaitable
from collections.abc import Callable
from collections.abc import Iterable
from threading import RLock
from time import monotonic

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response


DEFAULT_LIMITED_ROUTES: tuple[tuple[str, str], ...] = (("POST", "/isometric"),)


class SlidingWindowLimiter:
    """Per-key request log over a fixed time window.

    Keys whose requests have all expired are dropped on a periodic sweep,
    so the table only holds clients seen within the last window.
    """

    def __init__(
        self,
        max_requests: int,
        window_seconds: float,
        clock: Callable[[], float] = monotonic,
    ) -> None:
        self.max_requests = max(1, max_requests)
        self.window_seconds = max(1, window_seconds)
        self._clock = clock
        self._requests: dict[str, deque[float]] = {}
        self._last_sweep = clock()
        self._lock = RLock()

    def __len__(self) -> int:
        return len(self._requests)

    def acquire(self, key: str) -> int | None:
        """Record a request for `key`.

        Returns None when allowed, otherwise the seconds to wait before retrying.
        """

        now = self._clock()
        cutoff = now - self.window_seconds

        with self._lock:
            if now - self._last_sweep >= self.window_seconds:
                self._sweep(cutoff)
                self._last_sweep = now

            timestamps = self._requests.setdefault(key, deque())
            while timestamps and timestamps[0] <= cutoff:
                timestamps.popleft()

            if len(timestamps) >= self.max_requests:
                return max(1, int(timestamps[0] - cutoff))

            timestamps.append(now)
            return None

    def _sweep(self, cutoff: float) -> None:
        stale = [
            key
            for key, timestamps in self._requests.items()
            if not timestamps or timestamps[-1] <= cutoff
        ]
        for key in stale:
            del self._requests[key]


class IsometricRateLimitMiddleware(BaseHTTPMiddleware):
    """Rate limits the layout endpoints per client address."""

    def __init__(
        self,
        app,
        requests_per_window: int = 30,
        window_seconds: int = 60,
        limited_routes: Iterable[tuple[str, str]] = DEFAULT_LIMITED_ROUTES,
        limiter: SlidingWindowLimiter | None = None,
    ) -> None:
        super().__init__(app)
        self.limited_routes = tuple(
            (method.upper(), prefix.rstrip("/")) for method, prefix in limited_routes
        )
        self.limiter = limiter or SlidingWindowLimiter(
            requests_per_window, window_seconds
        )

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        if self.is_limited(request.method, request.url.path):
            retry_after = self.limiter.acquire(client_key(request))
            if retry_after is not None:
                return JSONResponse(
                    status_code=429,
                    content={"detail": "Too Many Requests"},
                    headers={"Retry-After": str(retry_after)},
                )

        return await call_next(request)

    def is_limited(self, method: str, path: str) -> bool:
        path = path.rstrip("/") or "/"
        return any(
            method.upper() == limited_method
            and (path == prefix or path.startswith(f"{prefix}/"))
            for limited_method, prefix in self.limited_routes
        )


def client_key(request: Request) -> str:
    """First X-Forwarded-For hop, else the socket peer, else "unknown"."""

    first_hop = request.headers.get("x-forwarded-for", "").split(",")[0].strip()
    if first_hop:
        return first_hop
    return getattr(request.client, "host", None) or "unknown"

"""Fixed-window rate limiting exposed as a FastAPI dependency."""

from __future__ import annotations

import threading
import time
from collections.abc import Callable
from dataclasses import dataclass

from fastapi import Request

from autoroute_backend.api.errors import RateLimitExceededError


@dataclass(frozen=True, slots=True)
class RateLimitOptions:
    """Quota for one limited scope.

    Attributes:
        window_seconds: Length of each fixed window.
        max_calls: Calls allowed per client within one window.
        on_limit: Called instead of raising once the quota is exhausted.
    """

    window_seconds: int
    max_calls: int
    on_limit: Callable[[Request], None] | None = None


class FixedWindowRateLimiter:
    """In-memory counters grouped by window length, keyed by scope and client.

    Each window length keeps only the counters of its current window; moving
    into a new window replaces them wholesale.
    """

    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        self._clock = clock
        self._windows: dict[int, tuple[int, dict[tuple[str, str], int]]] = {}
        self._lock = threading.Lock()

    def hit(self, scope: str, client: str, options: RateLimitOptions) -> int | None:
        """Count one call and return the seconds to wait when over quota."""

        now = int(self._clock())
        bucket = now // options.window_seconds
        key = (scope, client)
        with self._lock:
            current = self._windows.get(options.window_seconds)
            if current is None or current[0] != bucket:
                current = (bucket, {})
                self._windows[options.window_seconds] = current
            counts = current[1]
            count = counts.get(key, 0) + 1
            counts[key] = count

        if count > options.max_calls:
            return max(1, options.window_seconds - (now % options.window_seconds))
        return None

    def tracked(self) -> int:
        """Return how many counters are currently held."""

        with self._lock:
            return sum(len(counts) for _, counts in self._windows.values())

    def reset(self) -> None:
        with self._lock:
            self._windows.clear()


_limiter = FixedWindowRateLimiter()


def get_rate_limiter() -> FixedWindowRateLimiter:
    """Return the process-wide limiter."""

    return _limiter


def rate_limit(scope: str, options: RateLimitOptions) -> Callable[[Request], None]:
    """Build a dependency that enforces *options* for every caller of *scope*."""

    def _dep(request: Request) -> None:
        client = request.client.host if request.client else "anonymous"
        retry_after = get_rate_limiter().hit(scope, client, options)
        if retry_after is None:
            return
        if options.on_limit is not None:
            options.on_limit(request)
            return
        raise RateLimitExceededError(retry_after)

    return _dep


__all__ = [
    "FixedWindowRateLimiter",
    "RateLimitOptions",
    "get_rate_limiter",
    "rate_limit",
]

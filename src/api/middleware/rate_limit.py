"""Rate limiting middleware.

In-process fixed-window counters keyed by client address. Limits are
process-local; running several workers multiplies the effective budget.
"""

import logging
import math
import time
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from src.api.schemas import error_body
from src.api.utils.client_address import client_address

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RateLimitRule:
    """A named budget of ``limit`` requests per ``window`` seconds.

    ``methods`` and ``paths`` narrow which requests the rule applies to
    (paths are relative to the API prefix, matched exactly; empty means
    any). When ``failures_only`` is set only responses with status >= 400
    consume the budget.
    """

    name: str
    limit: int
    window: int
    message: str
    methods: Tuple[str, ...] = ()
    paths: Tuple[str, ...] = ()
    failures_only: bool = False

    def matches(self, method: str, path: str) -> bool:
        if self.methods and method not in self.methods:
            return False
        if self.paths and path not in self.paths:
            return False
        return True


DEFAULT_RULES: List[RateLimitRule] = [
    RateLimitRule(
        name="global",
        limit=100,
        window=15 * 60,
        message="Too many requests from this address, please try again later",
    ),
    RateLimitRule(
        name="auth",
        limit=5,
        window=15 * 60,
        message="Too many login attempts, please try again in 15 minutes",
        methods=("POST",),
        paths=("/auth/login", "/auth/register"),
        failures_only=True,
    ),
    RateLimitRule(
        name="create",
        limit=20,
        window=60 * 60,
        message="Too many creations, please try again later",
        methods=("POST",),
        paths=("/games",),
    ),
    RateLimitRule(
        name="search",
        limit=50,
        window=10 * 60,
        message="Too many searches, please try again later",
        methods=("GET",),
        paths=("/games/search",),
    ),
]


class FixedWindowCounter:
    """
    Request counts per key, reset when the key's window elapses.

    Expired entries are swept at most once per ``sweep_interval`` seconds,
    so the map only holds keys seen within their current window.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic, sweep_interval: float = 60):
        self._clock = clock
        self._sweep_interval = sweep_interval
        self._next_sweep = clock() + sweep_interval
        # key -> (window start, count, window length)
        self._windows: Dict[str, Tuple[float, int, int]] = {}

    def __len__(self) -> int:
        return len(self._windows)

    def _current(self, key: str, window: int) -> Tuple[float, int]:
        now = self._clock()
        started, count, _ = self._windows.get(key, (now, 0, window))
        if now - started >= window:
            started, count = now, 0
        return started, count

    def _sweep(self):
        now = self._clock()
        if now < self._next_sweep:
            return
        self._next_sweep = now + self._sweep_interval
        expired = [
            key
            for key, (started, _, window) in self._windows.items()
            if now - started >= window
        ]
        for key in expired:
            del self._windows[key]

    def hits(self, key: str, window: int) -> int:
        return self._current(key, window)[1]

    def increment(self, key: str, window: int) -> int:
        self._sweep()
        started, count = self._current(key, window)
        self._windows[key] = (started, count + 1, window)
        return count + 1

    def refund(self, key: str, window: int):
        """Give back one slot taken by ``increment`` in the current window"""
        started, count = self._current(key, window)
        if count <= 1:
            self._windows.pop(key, None)
        else:
            self._windows[key] = (started, count - 1, window)

    def retry_after(self, key: str, window: int) -> int:
        started, _ = self._current(key, window)
        return max(1, math.ceil(started + window - self._clock()))


class RateLimitMiddleware(BaseHTTPMiddleware):
    """
    Apply every matching rule; the first exhausted one rejects with 429.

    Slots are taken before the request runs. ``failures_only`` rules give
    the slot back once the response turns out successful, so concurrent
    attempts cannot all slip past the budget.
    """

    def __init__(
        self,
        app: Callable,
        prefix: str = "/api",
        rules: Optional[List[RateLimitRule]] = None,
        clock: Callable[[], float] = time.monotonic,
        trust_forwarded: bool = False,
    ):
        super().__init__(app)
        self.prefix = prefix.rstrip("/")
        self.rules = DEFAULT_RULES if rules is None else rules
        self.counter = FixedWindowCounter(clock)
        self.trust_forwarded = trust_forwarded

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        path = request.url.path
        if not path.startswith(self.prefix):
            return await call_next(request)

        relative = path[len(self.prefix):].rstrip("/") or "/"
        client = client_address(request, self.trust_forwarded) or "unknown"
        rules = [rule for rule in self.rules if rule.matches(request.method, relative)]

        for rule in rules:
            key = f"{rule.name}:{client}"
            if self.counter.increment(key, rule.window) > rule.limit:
                retry_after = self.counter.retry_after(key, rule.window)
                logger.warning(
                    f"Rate limit exceeded: {client} on {request.method} {path} "
                    f"(rule {rule.name}, {rule.limit}/{rule.window}s)"
                )
                return JSONResponse(
                    status_code=429,
                    content=error_body(rule.message, code="RATE_LIMIT_EXCEEDED"),
                    headers={"Retry-After": str(retry_after)},
                )

        response = await call_next(request)

        if response.status_code < 400:
            for rule in rules:
                if rule.failures_only:
                    self.counter.refund(f"{rule.name}:{client}", rule.window)
        return response

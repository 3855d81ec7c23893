"""Request quotas for the HTTP layer.

Routes depend on ``rate_limit(requests, window_ms)``. The limiter behind it is
produced by a pluggable factory (an in-memory sliding window by default) and
cached per quota so every route sharing a quota shares one counter table.
"""

from __future__ import annotations

import asyncio
import time
from collections import deque
from collections.abc import Awaitable, Callable
from typing import Any

from fastapi import HTTPException, Request, Response
from loguru import logger

from src.commerce.runtime.context import get_config

RateLimiterType = Callable[[Request, Response], Awaitable[Any]]
RateLimiterFactory = Callable[[int, int, bool, bool], RateLimiterType]

_SWEEP_EVERY_SECONDS = 60.0


def _caller_identity(request: Request) -> str:
    uid = getattr(request.state, "uid", None)
    if uid is not None:
        return f"user:{uid}"
    return f"ip:{request.client.host if request.client else 'anonymous'}"


class DefaultLocalRateLimiter:
    """Sliding-window limiter kept in process memory.

    Hits are bucketed by caller (user id once authenticated, else client
    address), optionally narrowed by HTTP method and route template.
    """

    def __init__(self, times: int, milliseconds: int, per_endpoint: bool, per_method: bool) -> None:
        self.times = times
        self.window = milliseconds / 1000
        self.per_endpoint = per_endpoint
        self.per_method = per_method
        self._buckets: dict[str, deque[float]] = {}
        self._lock = asyncio.Lock()
        self._next_sweep = time.monotonic() + _SWEEP_EVERY_SECONDS

    def bucket_key(self, request: Request) -> str:
        parts = [_caller_identity(request)]
        if self.per_method:
            parts.append(request.method)
        if self.per_endpoint:
            route_path = getattr(request.scope.get("route"), "path", None)
            parts.append((route_path or request.url.path).rstrip("/"))
        return ":".join(part for part in parts if part)

    async def __call__(self, request: Request, response: Response) -> None:
        key = self.bucket_key(request)
        now = time.monotonic()
        async with self._lock:
            if now >= self._next_sweep:
                self._sweep(now)
            hits = self._buckets.setdefault(key, deque())
            self._expire(hits, now)
            if len(hits) >= self.times:
                wait = max(1, int(self.window - (now - hits[0])))
                logger.warning("Rate limit exceeded for {}", key)
                raise HTTPException(
                    status_code=429,
                    detail="Too Many Requests",
                    headers={"Retry-After": str(wait)},
                )
            hits.append(now)

    def _expire(self, hits: deque[float], now: float) -> None:
        while hits and hits[0] <= now - self.window:
            hits.popleft()

    def _sweep(self, now: float) -> None:
        for key in list(self._buckets):
            self._expire(self._buckets[key], now)
            if not self._buckets[key]:
                del self._buckets[key]
        self._next_sweep = now + _SWEEP_EVERY_SECONDS

    async def cleanup(self) -> None:
        async with self._lock:
            tracked = len(self._buckets)
            self._buckets.clear()
        logger.debug("Released local rate limiter holding {} keys", tracked)


class _LimiterRegistry:
    def __init__(self) -> None:
        self.factory: RateLimiterFactory | None = None
        self.limiters: dict[tuple[int, int, bool, bool], RateLimiterType] = {}
        self.local: list[DefaultLocalRateLimiter] = []

    def local_factory(
        self, times: int, milliseconds: int, per_endpoint: bool, per_method: bool
    ) -> RateLimiterType:
        limiter = DefaultLocalRateLimiter(times, milliseconds, per_endpoint, per_method)
        self.local.append(limiter)
        return limiter

    def lookup(self, quota: tuple[int, int, bool, bool]) -> RateLimiterType:
        if self.factory is None:
            configure_rate_limiter()
        if quota not in self.limiters:
            self.limiters[quota] = self.factory(*quota)
        return self.limiters[quota]


_registry = _LimiterRegistry()


def configure_rate_limiter(limiter_factory: RateLimiterFactory | None = None) -> None:
    """Select the limiter implementation; previously built limiters are discarded."""
    _registry.limiters.clear()
    _registry.factory = limiter_factory or _registry.local_factory
    logger.info(
        "Rate limiter configured: {}", getattr(_registry.factory, "__name__", _registry.factory)
    )


def get_rate_limiter(requests: int | None = None, window_ms: int | None = None) -> RateLimiterType:
    """Return the shared limiter for a quota, falling back to the configured defaults."""
    settings = get_config().rate_limiter
    quota = (
        settings.requests if requests is None else requests,
        settings.window_ms if window_ms is None else window_ms,
        settings.per_endpoint,
        settings.per_method,
    )
    return _registry.lookup(quota)


def rate_limit(requests: int | None = None, window_ms: int | None = None) -> RateLimiterType:
    """FastAPI dependency enforcing a quota; does nothing while limiting is disabled."""

    async def dependency(request: Request, response: Response) -> Any:
        if not get_config().rate_limiter.enabled:
            return None
        return await get_rate_limiter(requests, window_ms)(request, response)

    return dependency


async def close_rate_limiter() -> None:
    """Drop every limiter and forget the configured factory."""
    _registry.limiters.clear()
    for limiter in _registry.local:
        await limiter.cleanup()
    if _registry.local:
        logger.info("Closed {} local rate limiters", len(_registry.local))
    _registry.local.clear()
    _registry.factory = None

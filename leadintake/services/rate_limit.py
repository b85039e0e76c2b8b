# leadintake/services/rate_limit.py
from __future__ import annotations

import asyncio
import time
import uuid
from typing import Callable, Dict, List, Optional

import redis.asyncio as redis

from leadintake.core.config import Settings, settings as default_settings
from leadintake.core.logging import get_structlog_logger

logger = get_structlog_logger(__name__)

Clock = Callable[[], float]


class RateLimiter:
    """
    Sliding-window limiter: ``allow(key)`` is true when fewer than ``limit``
    attempts were recorded for ``key`` in the trailing ``window_seconds``.
    Allowed attempts are recorded; rejected ones are not.
    """

    def __init__(self, limit: int = 5, window_seconds: int = 3600, clock: Clock = time.time) -> None:
        self.limit = limit
        self.window_seconds = window_seconds
        self.clock = clock

    async def allow(self, key: str) -> bool:
        raise NotImplementedError


class InMemoryRateLimiter(RateLimiter):
    """
    Single-process limiter. State is lost on restart.

    Keys whose attempts have all aged out are dropped, and the whole map is swept
    at most once per window, so memory follows the number of recently active IPs.
    """

    def __init__(self, limit: int = 5, window_seconds: int = 3600, clock: Clock = time.time) -> None:
        super().__init__(limit, window_seconds, clock)
        self._attempts: Dict[str, List[float]] = {}
        self._lock = asyncio.Lock()
        self._last_sweep = clock()

    async def allow(self, key: str) -> bool:
        async with self._lock:
            now = self.clock()
            cutoff = now - self.window_seconds
            if now - self._last_sweep >= self.window_seconds:
                self._sweep(cutoff)
                self._last_sweep = now

            recent = [ts for ts in self._attempts.get(key, []) if ts > cutoff]

            if len(recent) >= self.limit:
                self._attempts[key] = recent
                return False

            recent.append(now)
            self._attempts[key] = recent
            return True

    def _sweep(self, cutoff: float) -> None:
        for key in list(self._attempts):
            recent = [ts for ts in self._attempts[key] if ts > cutoff]
            if recent:
                self._attempts[key] = recent
            else:
                del self._attempts[key]

    def attempts(self, key: str) -> int:
        cutoff = self.clock() - self.window_seconds
        return sum(1 for ts in self._attempts.get(key, []) if ts > cutoff)

    def tracked_keys(self) -> List[str]:
        return list(self._attempts)

    def reset(self) -> None:
        self._attempts.clear()


class RedisRateLimiter(RateLimiter):
    """Shared limiter backed by one sorted set per key. Fails open when Redis is unavailable."""

    def __init__(
        self,
        client: redis.Redis,
        limit: int = 5,
        window_seconds: int = 3600,
        clock: Clock = time.time,
        prefix: str = "ratelimit:lead",
    ) -> None:
        super().__init__(limit, window_seconds, clock)
        self.redis = client
        self.prefix = prefix

    def _make_key(self, key: str) -> str:
        return f"{self.prefix}:{key}"

    async def allow(self, key: str) -> bool:
        redis_key = self._make_key(key)
        now = self.clock()
        cutoff = now - self.window_seconds

        try:
            async with self.redis.pipeline(transaction=True) as pipe:
                pipe.zremrangebyscore(redis_key, "-inf", cutoff)
                pipe.zcard(redis_key)
                results = await pipe.execute()
            current_count = int(results[1])

            if current_count >= self.limit:
                return False

            async with self.redis.pipeline(transaction=True) as pipe:
                pipe.zadd(redis_key, {f"{now}:{uuid.uuid4().hex[:8]}": now})
                pipe.expire(redis_key, self.window_seconds)
                await pipe.execute()
            return True

        except Exception as e:
            logger.error("rate_limit.error", error=str(e), key=key[:50])
            return True


_limiter: Optional[RateLimiter] = None


async def get_rate_limiter() -> RateLimiter:
    """FastAPI dependency returning the process-wide limiter."""
    global _limiter
    if _limiter is None:
        _limiter = await build_rate_limiter()
    return _limiter


async def build_rate_limiter(settings: Optional[Settings] = None) -> RateLimiter:
    settings = settings or default_settings
    if settings.rate_limit_backend == "redis":
        from leadintake.services.redis import get_redis_client

        client = await get_redis_client()
        return RedisRateLimiter(
            client,
            limit=settings.lead_rate_limit_max,
            window_seconds=settings.lead_rate_limit_window_seconds,
        )
    return InMemoryRateLimiter(
        limit=settings.lead_rate_limit_max,
        window_seconds=settings.lead_rate_limit_window_seconds,
    )

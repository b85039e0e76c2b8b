# leadintake/services/redis.py
"""
Connection lifecycle for the Redis store behind the shared lead rate limiter.
Only used when ``RATE_LIMIT_BACKEND=redis``.
"""
from __future__ import annotations

import time
from typing import Any, Dict, Optional

import redis.asyncio as redis
from redis.asyncio.retry import Retry
from redis.backoff import ExponentialBackoff

from leadintake.core.config import Settings, settings as default_settings
from leadintake.core.exceptions import ServiceUnavailableError
from leadintake.core.logging import get_structlog_logger

logger = get_structlog_logger(__name__)

_client: Optional[redis.Redis] = None


def create_client(settings: Settings) -> redis.Redis:
    pool = redis.ConnectionPool.from_url(
        settings.redis_url,
        max_connections=settings.redis_max_connections,
        socket_timeout=settings.redis_socket_timeout,
        socket_connect_timeout=settings.redis_socket_connect_timeout,
        retry=Retry(backoff=ExponentialBackoff(base=1), retries=3),
        retry_on_error=[redis.ConnectionError, redis.TimeoutError],
        health_check_interval=30,
        decode_responses=True,
    )
    return redis.Redis.from_pool(pool)


async def init_redis_pool(settings: Optional[Settings] = None) -> redis.Redis:
    """Connect once and verify with PING; raise ServiceUnavailableError if the store is unreachable."""
    global _client
    settings = settings or default_settings

    if _client is not None:
        return _client

    client = create_client(settings)
    try:
        await client.ping()
    except (redis.ConnectionError, redis.TimeoutError, OSError) as e:
        logger.error("rate_limit.store_unreachable", error=str(e))
        await client.aclose()
        raise ServiceUnavailableError(
            message="Rate limit store unavailable",
            code="rate_limit_store_unavailable",
            details={"error": str(e)},
        )

    _client = client
    logger.info("rate_limit.store_connected", max_connections=settings.redis_max_connections)
    return _client


async def get_redis_client() -> redis.Redis:
    if _client is None:
        return await init_redis_pool()
    return _client


async def close_redis_pool() -> None:
    global _client
    if _client is None:
        return
    await _client.aclose()
    _client = None
    logger.info("rate_limit.store_closed")


async def health_check() -> Dict[str, Any]:
    start = time.perf_counter()
    try:
        client = await get_redis_client()
        await client.ping()
    except Exception as e:
        return {"status": "unhealthy", "error": str(e)}
    return {"status": "healthy", "latency_ms": f"{(time.perf_counter() - start) * 1000:.1f}"}

# leadintake/routes/health.py
from __future__ import annotations

import time
from datetime import datetime, timezone
from typing import Dict

from fastapi import APIRouter
from pydantic import BaseModel

from leadintake.core.config import settings

router = APIRouter(tags=["health"])

_started_at = time.time()


class HealthCheckResponse(BaseModel):
    status: str
    service: str
    environment: str
    version: str
    timestamp: str
    uptime: float
    checks: Dict[str, Dict[str, str]]


async def check_rate_limit_backend() -> Dict[str, str]:
    if settings.rate_limit_backend != "redis":
        return {"status": "healthy", "backend": "memory"}

    from leadintake.services.redis import health_check as redis_health_check

    result = await redis_health_check()
    check = {"status": result.get("status", "unknown"), "backend": "redis"}
    if result.get("error"):
        check["error"] = result["error"]
    return check


def check_email_provider() -> Dict[str, str]:
    if settings.email_provider == "resend" and not settings.resend_api_key:
        return {"status": "unhealthy", "provider": "resend", "error": "RESEND_API_KEY not set"}
    return {"status": "healthy", "provider": settings.email_provider}


@router.get("/health", response_model=HealthCheckResponse)
async def health() -> HealthCheckResponse:
    """Liveness plus the state of the email provider and rate limit store."""
    from leadintake import __version__

    checks = {
        "email": check_email_provider(),
        "rate_limit": await check_rate_limit_backend(),
    }
    overall = "healthy" if all(c["status"] == "healthy" for c in checks.values()) else "degraded"

    return HealthCheckResponse(
        status=overall,
        service="leadintake",
        environment=settings.environment,
        version=__version__,
        timestamp=datetime.now(timezone.utc).isoformat(),
        uptime=round(time.time() - _started_at, 3),
        checks=checks,
    )

# leadintake/middleware/request_id.py
from __future__ import annotations

import re
import uuid
from typing import Optional

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from leadintake.core.logging import set_request_id

REQUEST_ID_HEADER = "X-Request-ID"

# Incoming ids are echoed into logs and headers, so only short opaque tokens are accepted
_SAFE_REQUEST_ID = re.compile(r"^[A-Za-z0-9._-]{1,64}$")


def incoming_request_id(request: Request) -> Optional[str]:
    for header in (REQUEST_ID_HEADER, "X-Correlation-ID"):
        value = request.headers.get(header)
        if value and _SAFE_REQUEST_ID.match(value):
            return value

    # W3C trace context: 00-<32 hex trace id>-...
    traceparent = request.headers.get("traceparent", "")
    trace_id = traceparent[3:35]
    if traceparent.startswith("00-") and re.fullmatch(r"[0-9a-f]{32}", trace_id):
        return trace_id

    return None


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Tag every request, its log lines and its response with one id."""

    async def dispatch(self, request: Request, call_next):
        request_id = incoming_request_id(request) or uuid.uuid4().hex
        request.state.request_id = request_id
        set_request_id(request_id, path=request.url.path)

        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = request_id
        return response

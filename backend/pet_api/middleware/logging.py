"""
QA Pet API — Request Logging Middleware
========================================

What:  Two access log lines per HTTP request: one on arrival, one on completion.
Why:   QA runs fire hundreds of requests; pairing the arrival line with the
       status and duration makes it easy to spot the call that misbehaved,
       including one that never finished.
How:   Logs on the `pet_api.access` logger. The target includes the query
       string, so list filters such as ?kind=dog show up. The completion
       level is chosen from the status class.

Log lines:
    2026-01-15T12:00:00 [INFO] pet_api.access: [a1b2c3d4] --> GET /pets?kind=dog
    2026-01-15T12:00:00 [INFO] pet_api.access: [a1b2c3d4] <-- GET /pets?kind=dog 200 0.8ms from 127.0.0.1

Unexpected errors:
    An exception escaping a route handler is converted here into the
    generic 500 ERRO_INTERNO response, so it is logged like any other
    request and still passes back through RequestIDMiddleware.

What we log vs what we DON'T log:
    ✅ method, path with query, status, duration, client IP, request ID
    ❌ request bodies
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from pet_api.exceptions import internal_error_response
from pet_api.middleware.request_id import request_id_var

logger = logging.getLogger("pet_api.access")


def request_target(request: Request) -> str:
    """Path plus query string, as the client sent it."""
    query = request.url.query
    return f"{request.url.path}?{query}" if query else request.url.path


def level_for_status(status: int) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs every request on arrival and on completion, /health included."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request_id_var.get("")
        target = request_target(request)
        logger.info("[%s] --> %s %s", rid, request.method, target)

        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception as exc:
            response = internal_error_response(request, exc)
        elapsed_ms = (time.perf_counter() - started) * 1000

        client_ip = request.client.host if request.client else "unknown"
        logger.log(
            level_for_status(response.status_code),
            "[%s] <-- %s %s %d %.1fms from %s",
            rid,
            request.method,
            target,
            response.status_code,
            elapsed_ms,
            client_ip,
            extra={
                "request_id": rid,
                "status": response.status_code,
                "duration_ms": round(elapsed_ms, 2),
            },
        )
        return response

"""
ParamBinder Backend — Request Logging Middleware
=================================================

What:  One access log line per HTTP request.
How:   Measures the time spent downstream and logs method, path, status,
       duration, parameter count and request ID. The level follows the status
       class, so binding failures stand out: 400 → WARNING, 500 → ERROR.

What we log vs what we DON'T log:
    ✅ Log: method, path, status, duration, number of query parameters, request ID
    ❌ Don't log: parameter values (the demo handlers log those themselves,
       behind settings.log_bound_values)
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from app.middleware.request_id import request_id_var

logger = logging.getLogger("parambinder.access")

# Probes run every few seconds and would drown the useful lines
SKIPPED_PATHS = {"/health"}


def level_for_status(status: int) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs each request's outcome; must run inside RequestIDMiddleware."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = request.url.path
        if path in SKIPPED_PATHS:
            return await call_next(request)

        start_time = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start_time) * 1000

        rid = request_id_var.get("")
        status = response.status_code
        param_count = len(request.query_params.multi_items())

        logger.log(
            level_for_status(status),
            "%s %s %d %.1fms params=%d [%s]",
            request.method,
            path,
            status,
            duration_ms,
            param_count,
            rid,
            extra={
                "request_id": rid,
                "method": request.method,
                "path": path,
                "status": status,
                "duration_ms": round(duration_ms, 2),
            },
        )
        return response

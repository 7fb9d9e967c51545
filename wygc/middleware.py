# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
HTTP middleware: request ids and per-route Prometheus metrics.
"""

import time
import uuid

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from wygc.core.logging import request_id_var
from wygc.metrics.prometheus import REQUEST_COUNT, REQUEST_LATENCY, HTTP_ERRORS

REQUEST_ID_HEADER = "X-Request-ID"

SKIP_PATHS: tuple[str, ...] = (
    "/status", "/metrics", "/openapi.json", "/docs", "/redoc",
)


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Adopt the caller's X-Request-ID or mint one. While the request runs it is
    on request.state and on every log line; the response echoes it.
    """

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        request.state.request_id = request_id
        token = request_id_var.set(request_id)
        try:
            response = await call_next(request)
        finally:
            request_id_var.reset(token)
        response.headers[REQUEST_ID_HEADER] = request_id
        return response


def endpoint_label(request: Request) -> str:
    """Route template the request matched, ``unmatched`` for 404s."""
    route = request.scope.get("route")
    return getattr(route, "path", None) or "unmatched"


class MetricsMiddleware(BaseHTTPMiddleware):
    """Count and time every routed request; errors get their own counter."""

    async def dispatch(self, request: Request, call_next):
        if request.url.path in SKIP_PATHS:
            return await call_next(request)

        start = time.monotonic()
        response = await call_next(request)
        duration = time.monotonic() - start

        labels = {"method": request.method, "endpoint": endpoint_label(request)}
        status = str(response.status_code)
        REQUEST_COUNT.labels(status=status, **labels).inc()
        REQUEST_LATENCY.labels(**labels).observe(duration)
        if response.status_code >= 400:
            HTTP_ERRORS.labels(status=status, **labels).inc()
        return response

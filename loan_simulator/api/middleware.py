"""FastAPI middleware for request tracing, metrics and telemetry"""

import uuid
import time
from typing import Optional
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from loan_simulator.infrastructure.observability.metrics import request_duration_histogram
from loan_simulator.infrastructure.observability.telemetry import telemetry_registry

# Operational endpoints are not reported as API telemetry
UNTRACKED_PATHS = {"/health", "/metrics", "/docs", "/redoc", "/openapi.json"}


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Add unique request ID to each request for distributed tracing"""

    async def dispatch(self, request: Request, call_next):
        request_id = str(uuid.uuid4())
        request.state.request_id = request_id

        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id
        return response


class MetricsMiddleware(BaseHTTPMiddleware):
    """Record HTTP request metrics and per-route telemetry"""

    async def dispatch(self, request: Request, call_next):
        start_time = time.time()

        try:
            response = await call_next(request)
        except Exception:
            # Unhandled errors still reach the client as a 500
            self._record(request, time.time() - start_time, status_code=500)
            raise

        self._record(request, time.time() - start_time, status_code=response.status_code)
        return response

    def _record(self, request: Request, duration: float, status_code: int) -> None:
        request_duration_histogram.labels(
            method=request.method,
            endpoint=request.url.path,
            status=status_code,
        ).observe(duration)

        endpoint = route_template(request)
        if endpoint is None or endpoint in UNTRACKED_PATHS:
            return

        telemetry_registry.record(
            endpoint=endpoint,
            duration_ms=duration * 1000,
            success=status_code < 500,
        )


def route_template(request: Request) -> Optional[str]:
    """Full route template (mount prefix included); None when no route matched"""
    route = request.scope.get("route")
    path = getattr(route, "path", None)
    if path is None:
        return None

    prefix = request.scope.get("root_path", "")
    if prefix and path.startswith(prefix):
        return path
    return prefix + path

"""Monitoring and observability middleware"""
import time
import uuid
from typing import Callable

from fastapi import Request, Response
from prometheus_client import Counter, Histogram
from starlette.middleware.base import BaseHTTPMiddleware

from jambo_admin.utils.logger import logger


# ===== Prometheus Metrics =====

http_requests_total = Counter(
    "jambo_admin_http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status"]
)

http_request_duration_seconds = Histogram(
    "jambo_admin_http_request_duration_seconds",
    "HTTP request latency in seconds",
    ["method", "endpoint"]
)

http_errors_total = Counter(
    "jambo_admin_http_errors_total",
    "Total HTTP errors",
    ["method", "endpoint", "status"]
)

# Auth metrics
login_attempts_total = Counter(
    "jambo_admin_login_attempts_total",
    "Admin login attempts by outcome",
    ["outcome"]  # success, invalid_credentials, denied
)

token_refresh_total = Counter(
    "jambo_admin_token_refresh_total",
    "Refresh token exchanges by outcome",
    ["outcome"]  # success, rejected
)


SLOW_REQUEST_SECONDS = 1.0
UNMATCHED_ROUTE = "unmatched"


def route_label(request: Request) -> str:
    """Route template the request matched (``/api/users/{user_id}``).

    Requests the router did not match all share the ``unmatched`` label.
    """
    route = request.scope.get("route")
    return getattr(route, "path", None) or UNMATCHED_ROUTE


def _observe(method: str, endpoint: str, status: int, duration: float) -> None:
    http_requests_total.labels(method=method, endpoint=endpoint, status=status).inc()
    http_request_duration_seconds.labels(method=method, endpoint=endpoint).observe(duration)
    if status >= 400:
        http_errors_total.labels(method=method, endpoint=endpoint, status=status).inc()


class MonitoringMiddleware(BaseHTTPMiddleware):
    """Per-request metrics, a request id header and slow-request warnings"""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get("x-request-id") or uuid.uuid4().hex
        request.state.request_id = request_id
        started = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception:
            endpoint = route_label(request)
            _observe(request.method, endpoint, 500, time.perf_counter() - started)
            logger.error(
                f"Request failed: {request.method} {endpoint}",
                extra={"request_id": request_id, "method": request.method, "path": request.url.path},
                exc_info=True,
            )
            raise

        duration = time.perf_counter() - started
        endpoint = route_label(request)
        _observe(request.method, endpoint, response.status_code, duration)

        if duration > SLOW_REQUEST_SECONDS:
            logger.warning(
                f"Slow request: {request.method} {endpoint} took {duration:.3f}s",
                extra={
                    "request_id": request_id,
                    "method": request.method,
                    "path": request.url.path,
                    "status_code": response.status_code,
                },
            )

        response.headers["X-Request-ID"] = request_id
        response.headers["X-Response-Time"] = f"{duration:.3f}s"
        return response


def record_login_outcome(outcome: str):
    """Record the outcome of a login attempt"""
    login_attempts_total.labels(outcome=outcome).inc()


def record_token_refresh(outcome: str):
    """Record the outcome of a refresh token exchange"""
    token_refresh_total.labels(outcome=outcome).inc()

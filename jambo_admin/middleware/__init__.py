"""Middleware modules for production-ready features"""
from jambo_admin.middleware.monitoring import (
    MonitoringMiddleware,
    record_login_outcome,
    record_token_refresh,
)
from jambo_admin.middleware.rate_limit import get_rate_limit, limiter

__all__ = [
    "MonitoringMiddleware",
    "record_login_outcome",
    "record_token_refresh",
    "limiter",
    "get_rate_limit"
]

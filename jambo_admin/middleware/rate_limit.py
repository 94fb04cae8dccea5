"""Rate limiting for API protection.

Login is limited per IP address; everything else is keyed by admin id when
the caller is authenticated.
"""
from fastapi import Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from jambo_admin.config import settings


def get_identifier(request: Request) -> str:
    """
    Get identifier for rate limiting

    Priority:
    1. Authenticated admin id (set by the auth dependency)
    2. IP address
    """
    admin = getattr(request.state, "admin", None)
    if admin is not None:
        return f"admin:{admin.id}"
    return get_remote_address(request)


# Create limiter instance
limiter = Limiter(
    key_func=get_identifier,
    default_limits=settings.RATE_LIMIT_DEFAULT,
    storage_uri=settings.RATE_LIMIT_STORAGE_URI,
    strategy="fixed-window",
    enabled=settings.RATE_LIMIT_ENABLED,
)


# Rate limit configurations for different route groups
RATE_LIMITS = {
    # Login / token endpoints - keyed by IP, strict
    "auth": settings.RATE_LIMIT_AUTH,
    # Client user management
    "critical": settings.RATE_LIMIT_CRITICAL,
}


def get_rate_limit(group: str) -> str:
    """Get rate limit for a route group"""
    return RATE_LIMITS.get(group, settings.RATE_LIMIT_DEFAULT[0])

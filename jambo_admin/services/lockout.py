"""Failed-login counting and timed account lockout.

Pure decision logic over an ``Admin`` row; the caller supplies ``now`` and
persists the result. The lock is evaluated lazily on the next login attempt
(``locked_until > now``), there is no background sweep that clears it.
"""
from datetime import datetime, timedelta, timezone
from typing import Optional

from jambo_admin.models.admin import Admin

MAX_LOGIN_ATTEMPTS = 5
LOCK_DURATION = timedelta(minutes=15)


def utcnow() -> datetime:
    """Naive UTC timestamp, matching how DateTime columns are stored"""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def is_locked(admin: Admin, now: datetime) -> bool:
    return admin.locked_until is not None and admin.locked_until > now


def on_failure(admin: Admin, now: datetime) -> Admin:
    """Record a failed password check, locking the account at the threshold"""
    admin.login_attempts = (admin.login_attempts or 0) + 1
    if admin.login_attempts >= MAX_LOGIN_ATTEMPTS:
        admin.locked_until = now + LOCK_DURATION
    return admin


def on_success(admin: Admin, now: datetime, ip_address: Optional[str] = None) -> Admin:
    """Reset lockout state and stamp the login"""
    admin.login_attempts = 0
    admin.locked_until = None
    admin.last_login_at = now
    admin.last_login_ip = ip_address
    return admin

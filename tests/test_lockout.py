"""Tests for the failed-login lockout policy"""
from datetime import datetime, timedelta

from jambo_admin.models.admin import Admin
from jambo_admin.services.lockout import (
    LOCK_DURATION,
    MAX_LOGIN_ATTEMPTS,
    is_locked,
    on_failure,
    on_success,
)

NOW = datetime(2024, 1, 15, 9, 0, 0)


def _admin(**kwargs) -> Admin:
    return Admin(email="e@creditjambo.com", login_attempts=0, **kwargs)


def test_unlocked_by_default():
    assert is_locked(_admin(), NOW) is False


def test_four_failures_do_not_lock():
    admin = _admin()
    for _ in range(MAX_LOGIN_ATTEMPTS - 1):
        on_failure(admin, NOW)

    assert admin.login_attempts == 4
    assert admin.locked_until is None
    assert is_locked(admin, NOW) is False


def test_fifth_failure_locks_for_fifteen_minutes():
    admin = _admin()
    for _ in range(MAX_LOGIN_ATTEMPTS):
        on_failure(admin, NOW)

    assert admin.login_attempts == 5
    assert admin.locked_until == NOW + timedelta(minutes=15)
    assert is_locked(admin, NOW) is True


def test_lock_expires_lazily():
    admin = _admin()
    for _ in range(MAX_LOGIN_ATTEMPTS):
        on_failure(admin, NOW)

    assert is_locked(admin, NOW + LOCK_DURATION - timedelta(seconds=1)) is True
    # Not locked at exactly the expiry instant: the check is strictly "expiry > now"
    assert is_locked(admin, NOW + LOCK_DURATION) is False
    assert is_locked(admin, NOW + LOCK_DURATION + timedelta(seconds=1)) is False
    # Nothing clears the field; it simply stops being in the future
    assert admin.locked_until is not None


def test_success_resets_state():
    admin = _admin()
    for _ in range(MAX_LOGIN_ATTEMPTS):
        on_failure(admin, NOW)

    later = NOW + timedelta(minutes=20)
    on_success(admin, later, "10.0.0.1")

    assert admin.login_attempts == 0
    assert admin.locked_until is None
    assert admin.last_login_at == later
    assert admin.last_login_ip == "10.0.0.1"


def test_failure_handles_missing_counter():
    admin = Admin(email="e@creditjambo.com")
    on_failure(admin, NOW)
    assert admin.login_attempts == 1

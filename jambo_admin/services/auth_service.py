"""Admin authentication flows: register, login, refresh, logout, password change"""
from datetime import datetime
from typing import Any, Callable, Dict, NamedTuple, Optional

from sqlalchemy.exc import SQLAlchemyError

from jambo_admin.exceptions import (
    AppError,
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    ValidationError,
)
from jambo_admin.models.admin import Admin, AdminStatus
from jambo_admin.services import lockout
from jambo_admin.services.admin_store import AdminStore
from jambo_admin.utils.jwt_utils import TokenIssuer
from jambo_admin.utils.logger import logger
from jambo_admin.utils.passwords import hash_password, verify_password

_INVALID_CREDENTIALS = "Invalid credentials"
_INVALID_REFRESH = "Invalid or expired refresh token"


class TokenPair(NamedTuple):
    access_token: str
    refresh_token: str


class LoginResult(NamedTuple):
    admin: Admin
    access_token: str
    refresh_token: str


class AuthService:
    """Composes the admin store, lockout policy and token issuer.

    Each method is one bounded request: load, decide, persist. Nothing here
    coordinates concurrent requests against the same admin row.
    """

    def __init__(
        self,
        store: AdminStore,
        issuer: TokenIssuer,
        clock: Callable[[], datetime] = lockout.utcnow,
    ):
        self.store = store
        self.issuer = issuer
        self.clock = clock

    # -----------------------------------------------------------------------
    # Registration
    # -----------------------------------------------------------------------

    def register(self, fields: Dict[str, Any]) -> Admin:
        """Create a new admin. Raises ConflictError on a duplicate email."""
        admin = self.store.create(fields)
        logger.info(
            f"Registered admin {admin.email}",
            extra={"admin_id": admin.id, "role": admin.role.value, "action": "register"},
        )
        return admin

    # -----------------------------------------------------------------------
    # Login
    # -----------------------------------------------------------------------

    def login(self, email: str, password: str, ip_address: Optional[str] = None) -> LoginResult:
        """Authenticate an admin and mint a fresh token pair.

        Checks run in a fixed order: existence, lock, suspension, password.
        A locked or suspended account is rejected before the password is
        compared, so those attempts never touch the failure counter.
        """
        admin = self.store.find_by_email(email, include_password=True)
        if admin is None:
            logger.info("Login failed: unknown email", extra={"action": "login_failed", "client_ip": ip_address})
            raise AuthenticationError(_INVALID_CREDENTIALS)

        now = self.clock()

        if lockout.is_locked(admin, now):
            logger.warning(
                "Login rejected: account locked",
                extra={"admin_id": admin.id, "action": "login_locked", "client_ip": ip_address},
            )
            raise AuthorizationError("Account is temporarily locked. Please try again later.")

        if admin.status == AdminStatus.SUSPENDED:
            logger.warning(
                "Login rejected: account suspended",
                extra={"admin_id": admin.id, "action": "login_suspended", "client_ip": ip_address},
            )
            raise AuthorizationError("Your account has been suspended. Please contact support.")

        if not verify_password(password, admin.password):
            lockout.on_failure(admin, now)
            self.store.save(admin)
            if lockout.is_locked(admin, now):
                logger.warning(
                    f"Account locked after {admin.login_attempts} failed attempts",
                    extra={"admin_id": admin.id, "action": "account_locked", "client_ip": ip_address},
                )
            else:
                logger.info(
                    "Login failed: wrong password",
                    extra={"admin_id": admin.id, "action": "login_failed", "client_ip": ip_address},
                )
            raise AuthenticationError(_INVALID_CREDENTIALS)

        lockout.on_success(admin, now, ip_address)
        access_token = self.issuer.issue_access_token(admin)
        refresh_token = self.issuer.issue_refresh_token(admin)
        admin.refresh_token = refresh_token
        self.store.save(admin)

        logger.info(
            f"Admin logged in: {admin.email}",
            extra={"admin_id": admin.id, "role": admin.role.value, "action": "login", "client_ip": ip_address},
        )
        return LoginResult(admin=admin, access_token=access_token, refresh_token=refresh_token)

    # -----------------------------------------------------------------------
    # Refresh / logout
    # -----------------------------------------------------------------------

    def refresh_token(self, token: str) -> TokenPair:
        """Rotate a refresh token.

        Every failure stage, a database error included, reports the same
        generic error.
        """
        try:
            admin_id = self.issuer.verify_refresh(token)
            admin = self.store.find_by_id(admin_id)
            if admin is None or admin.refresh_token != token:
                raise AuthenticationError("Invalid refresh token")
            if admin.status != AdminStatus.ACTIVE:
                raise AuthorizationError("Account is not active")

            pair = TokenPair(
                access_token=self.issuer.issue_access_token(admin),
                refresh_token=self.issuer.issue_refresh_token(admin),
            )
            self.store.update_refresh_token(admin.id, pair.refresh_token)
        except AppError as exc:
            logger.info(f"Refresh rejected: {exc.message}", extra={"action": "refresh_failed"})
            raise AuthenticationError(_INVALID_REFRESH)
        except SQLAlchemyError:
            logger.error("Refresh failed on database error", extra={"action": "refresh_failed"}, exc_info=True)
            raise AuthenticationError(_INVALID_REFRESH)

        logger.info("Refreshed token pair", extra={"admin_id": admin_id, "action": "refresh"})
        return pair

    def logout(self, admin_id: str) -> None:
        self.store.update_refresh_token(admin_id, None)
        logger.info("Admin logged out", extra={"admin_id": admin_id, "action": "logout"})

    # -----------------------------------------------------------------------
    # Profile / password
    # -----------------------------------------------------------------------

    def get_profile(self, admin_id: str) -> Admin:
        admin = self.store.find_by_id(admin_id)
        if admin is None:
            raise NotFoundError("Admin not found")
        return admin

    def change_password(self, admin_id: str, current_password: str, new_password: str) -> None:
        """Replace the admin's password after confirming the current one.

        Raises:
            NotFoundError: unknown admin id.
            ValidationError: ``current_password`` does not match; nothing is written.
        """
        admin = self.store.find_by_id(admin_id, include_password=True)
        if admin is None:
            raise NotFoundError("Admin not found")

        if not verify_password(current_password, admin.password):
            raise ValidationError("Current password is incorrect")

        admin.password = hash_password(new_password)
        self.store.save(admin)
        logger.info("Password changed", extra={"admin_id": admin_id, "action": "change_password"})

    # -----------------------------------------------------------------------
    # Administrative status
    # -----------------------------------------------------------------------

    def update_status(self, admin_id: str, status: AdminStatus) -> Admin:
        """Set an admin's status; leaving ACTIVE also revokes the refresh token"""
        admin = self.get_profile(admin_id)
        admin.status = status
        if status != AdminStatus.ACTIVE:
            admin.refresh_token = None
        self.store.save(admin)
        logger.info(
            f"Admin status set to {status.value}",
            extra={"admin_id": admin_id, "action": "update_status"},
        )
        return admin

"""JWT utilities for access/refresh token signing and verification"""
import uuid
from datetime import datetime, timezone
from functools import lru_cache
from typing import Any, Dict, NamedTuple

from jose import JWTError, jwt

from jambo_admin.config import TokenConfig, settings
from jambo_admin.exceptions import AuthenticationError
from jambo_admin.models.admin import Admin
from jambo_admin.utils.logger import logger

ACCESS_TOKEN_TYPE = "access"
REFRESH_TOKEN_TYPE = "refresh"


class TokenPayload(NamedTuple):
    """Claims carried by a verified access token."""
    id: str
    email: str
    role: str


def _role_value(role: Any) -> str:
    return role.value if hasattr(role, "value") else str(role)


class TokenIssuer:
    """Mints and verifies the two token kinds.

    Access tokens are stateless and signed with the access secret. Refresh
    tokens carry only the admin id, are signed with a distinct secret and are
    persisted by the caller so they can be revoked by comparison.
    """

    def __init__(self, config: TokenConfig):
        self.config = config

    # -----------------------------------------------------------------------
    # Token creation
    # -----------------------------------------------------------------------

    def _sign(self, claims: Dict[str, Any], secret: str, expire_seconds: int) -> str:
        now = int(datetime.now(timezone.utc).timestamp())
        payload: Dict[str, Any] = {
            **claims,
            "jti": str(uuid.uuid4()),
            "iat": now,
            "exp": now + expire_seconds,
        }
        return jwt.encode(payload, secret, algorithm=self.config.algorithm)

    def issue_access_token(self, admin: Admin) -> str:
        return self._sign(
            {
                "sub": admin.id,
                "id": admin.id,
                "email": admin.email,
                "role": _role_value(admin.role),
                "type": ACCESS_TOKEN_TYPE,
            },
            self.config.access_secret,
            self.config.access_expire_seconds,
        )

    def issue_refresh_token(self, admin: Admin) -> str:
        return self._sign(
            {"sub": admin.id, "id": admin.id, "type": REFRESH_TOKEN_TYPE},
            self.config.refresh_secret,
            self.config.refresh_expire_seconds,
        )

    # -----------------------------------------------------------------------
    # Token verification
    # -----------------------------------------------------------------------

    def _decode(self, token: str, secret: str, expected_type: str, message: str) -> Dict[str, Any]:
        try:
            payload = jwt.decode(token, secret, algorithms=[self.config.algorithm])
        except JWTError as exc:
            logger.debug(f"JWT decode failed: {exc}")
            raise AuthenticationError(message)

        if payload.get("type") != expected_type or not payload.get("id"):
            raise AuthenticationError(message)
        return payload

    def verify_access(self, token: str) -> TokenPayload:
        """Verify an access token and return its identity claims.

        Raises:
            AuthenticationError: bad signature, expired, or wrong token type.
        """
        payload = self._decode(
            token, self.config.access_secret, ACCESS_TOKEN_TYPE, "Invalid or expired token"
        )
        return TokenPayload(
            id=payload["id"],
            email=payload.get("email", ""),
            role=payload.get("role", ""),
        )

    def verify_refresh(self, token: str) -> str:
        """Verify a refresh token and return the admin id it was issued to."""
        payload = self._decode(
            token,
            self.config.refresh_secret,
            REFRESH_TOKEN_TYPE,
            "Invalid or expired refresh token",
        )
        return payload["id"]


@lru_cache(maxsize=1)
def get_token_issuer() -> TokenIssuer:
    """Process-wide issuer built from the settings loaded at startup"""
    return TokenIssuer(settings.token_config)

"""Auth and admin schemas (camelCase on the wire)"""
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, EmailStr, Field, field_validator
from pydantic.alias_generators import to_camel

from jambo_admin.models.admin import AdminRole, AdminStatus
from jambo_admin.utils.passwords import MAX_PASSWORD_BYTES


class CamelModel(BaseModel):
    """Accepts and emits camelCase keys; snake_case is accepted on input too."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


def _check_password_bytes(value: str) -> str:
    if len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise ValueError(f"must be at most {MAX_PASSWORD_BYTES} bytes")
    return value


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------

class LoginRequest(CamelModel):
    email: EmailStr
    password: str = Field(..., min_length=6)


class RegisterRequest(CamelModel):
    email: EmailStr
    password: str = Field(..., min_length=6)
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    phone: Optional[str] = Field(None, max_length=20)
    role: AdminRole = AdminRole.ADMIN
    permissions: Optional[List[str]] = None

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value: str) -> str:
        return _check_password_bytes(value)


class RefreshTokenRequest(CamelModel):
    refresh_token: str = Field(..., min_length=1)


class ChangePasswordRequest(CamelModel):
    current_password: str
    new_password: str = Field(..., min_length=6)

    @field_validator("new_password")
    @classmethod
    def password_fits_bcrypt(cls, value: str) -> str:
        return _check_password_bytes(value)


class AdminStatusUpdate(CamelModel):
    status: AdminStatus


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------

class AdminResponse(CamelModel):
    """Public view of an admin. Never carries the password hash or refresh token."""
    id: str
    email: str
    first_name: str
    last_name: str
    phone: Optional[str] = None
    role: AdminRole
    status: AdminStatus
    permissions: Optional[List[str]] = None
    login_attempts: int = 0
    locked_until: Optional[datetime] = None
    last_login_at: Optional[datetime] = None
    last_login_ip: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class TokenPairData(CamelModel):
    access_token: str
    refresh_token: str


class LoginData(TokenPairData):
    admin: AdminResponse

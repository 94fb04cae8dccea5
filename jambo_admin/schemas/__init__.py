"""Pydantic schemas for request/response validation"""
from jambo_admin.schemas.auth import (
    AdminResponse,
    AdminStatusUpdate,
    ChangePasswordRequest,
    LoginData,
    LoginRequest,
    RefreshTokenRequest,
    RegisterRequest,
    TokenPairData,
)
from jambo_admin.schemas.common import ApiResponse, ErrorDetail, ErrorResponse

__all__ = [
    "AdminResponse",
    "AdminStatusUpdate",
    "ApiResponse",
    "ChangePasswordRequest",
    "ErrorDetail",
    "ErrorResponse",
    "LoginData",
    "LoginRequest",
    "RefreshTokenRequest",
    "RegisterRequest",
    "TokenPairData",
]

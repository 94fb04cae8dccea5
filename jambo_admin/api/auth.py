"""Admin authentication endpoints"""
from fastapi import APIRouter, Depends, Request, status
from slowapi.util import get_remote_address

from jambo_admin.api.deps import AdminContext, get_auth_service, get_current_admin, require_role
from jambo_admin.config import settings
from jambo_admin.exceptions import AuthenticationError, AuthorizationError
from jambo_admin.middleware.monitoring import record_login_outcome, record_token_refresh
from jambo_admin.middleware.rate_limit import limiter
from jambo_admin.schemas.auth import (
    AdminResponse,
    ChangePasswordRequest,
    LoginData,
    LoginRequest,
    RefreshTokenRequest,
    RegisterRequest,
    TokenPairData,
)
from jambo_admin.schemas.common import ApiResponse
from jambo_admin.services.auth_service import AuthService
from jambo_admin.services.permissions import SUPER_ADMIN_ONLY

router = APIRouter(prefix="/api/auth", tags=["auth"])


def _client_ip(request: Request) -> str:
    return request.client.host if request.client else "unknown"


@router.post("/register", response_model=ApiResponse[AdminResponse], status_code=status.HTTP_201_CREATED)
def register(
    data: RegisterRequest,
    service: AuthService = Depends(get_auth_service),
    _: AdminContext = Depends(require_role(SUPER_ADMIN_ONLY)),
):
    """Register a new admin (SUPER_ADMIN only)."""
    admin = service.register(data.model_dump())
    return ApiResponse(
        message="Admin registered successfully",
        data=AdminResponse.model_validate(admin),
    )


@router.post("/login", response_model=ApiResponse[LoginData])
@limiter.limit(settings.RATE_LIMIT_AUTH, key_func=get_remote_address)
def login(
    request: Request,
    data: LoginRequest,
    service: AuthService = Depends(get_auth_service),
):
    """
    Exchange email + password for an access/refresh token pair.

    Five consecutive wrong passwords lock the account for 15 minutes.
    Locked and suspended accounts get 403; bad credentials get 401.
    """
    try:
        result = service.login(data.email, data.password, _client_ip(request))
    except AuthenticationError:
        record_login_outcome("invalid_credentials")
        raise
    except AuthorizationError:
        record_login_outcome("denied")
        raise
    record_login_outcome("success")

    return ApiResponse(
        message="Login successful",
        data=LoginData(
            admin=AdminResponse.model_validate(result.admin),
            access_token=result.access_token,
            refresh_token=result.refresh_token,
        ),
    )


@router.post("/refresh-token", response_model=ApiResponse[TokenPairData])
def refresh_token(
    data: RefreshTokenRequest,
    service: AuthService = Depends(get_auth_service),
):
    """Rotate a refresh token. The presented token must be the one last issued."""
    try:
        pair = service.refresh_token(data.refresh_token)
    except AuthenticationError:
        record_token_refresh("rejected")
        raise
    record_token_refresh("success")

    return ApiResponse(
        message="Token refreshed successfully",
        data=TokenPairData(access_token=pair.access_token, refresh_token=pair.refresh_token),
    )


@router.post("/logout", response_model=ApiResponse[None])
def logout(
    ctx: AdminContext = Depends(get_current_admin),
    service: AuthService = Depends(get_auth_service),
):
    """Invalidate the caller's refresh token."""
    service.logout(ctx.id)
    return ApiResponse(message="Logged out successfully")


@router.get("/me", response_model=ApiResponse[AdminResponse])
def get_profile(
    ctx: AdminContext = Depends(get_current_admin),
    service: AuthService = Depends(get_auth_service),
):
    """Return the caller's own profile."""
    admin = service.get_profile(ctx.id)
    return ApiResponse(data=AdminResponse.model_validate(admin))


@router.put("/change-password", response_model=ApiResponse[None])
def change_password(
    data: ChangePasswordRequest,
    ctx: AdminContext = Depends(get_current_admin),
    service: AuthService = Depends(get_auth_service),
):
    """Change the caller's own password."""
    service.change_password(ctx.id, data.current_password, data.new_password)
    return ApiResponse(message="Password changed successfully")

"""Admin account management (SUPER_ADMIN only)"""
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from jambo_admin.api.deps import AdminContext, get_auth_service, require_role
from jambo_admin.database import get_db
from jambo_admin.exceptions import ValidationError
from jambo_admin.schemas.auth import AdminResponse, AdminStatusUpdate
from jambo_admin.schemas.common import ApiResponse
from jambo_admin.services.admin_store import AdminStore
from jambo_admin.services.auth_service import AuthService
from jambo_admin.services.permissions import SUPER_ADMIN_ONLY

router = APIRouter(prefix="/api/admins", tags=["admins"])


@router.get("", response_model=ApiResponse[List[AdminResponse]])
def list_admins(
    db: Session = Depends(get_db),
    _: AdminContext = Depends(require_role(SUPER_ADMIN_ONLY)),
):
    """List all admin accounts, newest first."""
    admins = AdminStore(db).list_admins()
    return ApiResponse(data=[AdminResponse.model_validate(a) for a in admins])


@router.patch("/{admin_id}/status", response_model=ApiResponse[AdminResponse])
def update_admin_status(
    admin_id: str,
    data: AdminStatusUpdate,
    service: AuthService = Depends(get_auth_service),
    ctx: AdminContext = Depends(require_role(SUPER_ADMIN_ONLY)),
):
    """
    Activate, suspend or deactivate an admin.

    Accounts are never deleted; moving one out of ACTIVE also revokes its
    refresh token. Admins cannot change their own status.
    """
    if admin_id == ctx.id:
        raise ValidationError("You cannot change your own status")

    admin = service.update_status(admin_id, data.status)
    return ApiResponse(
        message=f"Admin status updated to {data.status.value}",
        data=AdminResponse.model_validate(admin),
    )

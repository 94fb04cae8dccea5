"""Client user endpoints.

Client users live in the customer-facing system; until that integration
exists these routes serve static mock payloads.
"""
from datetime import datetime
from uuid import UUID

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel, Field

from jambo_admin.api.deps import AdminContext, get_current_admin, require_role
from jambo_admin.middleware.rate_limit import get_rate_limit, limiter
from jambo_admin.schemas.common import ApiResponse
from jambo_admin.services.permissions import ADMIN_ROLES
from jambo_admin.utils.logger import logger

router = APIRouter(prefix="/api/users", tags=["users"])


class UserActivation(BaseModel):
    is_active: bool = Field(..., alias="isActive")


class DeviceApproval(BaseModel):
    is_approved: bool = Field(..., alias="isApproved")


def _mock_user(user_id: str) -> dict:
    return {
        "id": user_id,
        "firstName": "John",
        "lastName": "Doe",
        "email": "john@example.com",
        "phoneNumber": "+250788123456",
        "role": "customer",
        "isActive": True,
        "createdAt": datetime.utcnow().isoformat(),
    }


@router.get("", response_model=ApiResponse[dict])
@limiter.limit(get_rate_limit("critical"))
def list_users(request: Request, _: AdminContext = Depends(get_current_admin)):
    """List client users (mock)."""
    users = [_mock_user("1")]
    return ApiResponse(
        message="Users retrieved successfully",
        data={"users": users, "total": len(users), "mock": True},
    )


@router.get("/{user_id}", response_model=ApiResponse[dict])
@limiter.limit(get_rate_limit("critical"))
def get_user(request: Request, user_id: UUID, _: AdminContext = Depends(get_current_admin)):
    """Get a client user by id (mock)."""
    user = {**_mock_user(str(user_id)), "devices": []}
    return ApiResponse(data={"user": user, "mock": True})


@router.put("/{user_id}/activate", response_model=ApiResponse[dict])
@limiter.limit(get_rate_limit("critical"))
def set_user_active(
    request: Request,
    user_id: UUID,
    data: UserActivation,
    ctx: AdminContext = Depends(require_role(ADMIN_ROLES)),
):
    """Activate or deactivate a client user (mock, nothing is persisted)."""
    logger.info(
        f"User {user_id} {'activated' if data.is_active else 'deactivated'}",
        extra={"admin_id": ctx.id, "action": "set_user_active"},
    )
    return ApiResponse(
        message=f"User {'activated' if data.is_active else 'deactivated'} successfully",
        data={"user": {"id": str(user_id), "isActive": data.is_active}, "mock": True},
    )


@router.put("/{user_id}/devices/{device_id}/approve", response_model=ApiResponse[dict])
@limiter.limit(get_rate_limit("critical"))
def approve_device(
    request: Request,
    user_id: UUID,
    device_id: str,
    data: DeviceApproval,
    ctx: AdminContext = Depends(require_role(ADMIN_ROLES)),
):
    """Approve or reject a client device (mock, nothing is persisted)."""
    logger.info(
        f"Device {device_id} of user {user_id} {'approved' if data.is_approved else 'rejected'}",
        extra={"admin_id": ctx.id, "action": "approve_device"},
    )
    return ApiResponse(
        message=f"Device {'approved' if data.is_approved else 'rejected'} successfully",
        data={
            "userId": str(user_id),
            "deviceId": device_id,
            "isApproved": data.is_approved,
            "mock": True,
        },
    )

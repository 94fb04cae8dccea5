"""Transaction endpoints (mock payloads pending client integration)"""
from datetime import datetime
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query

from jambo_admin.api.deps import AdminContext, require_role
from jambo_admin.schemas.common import ApiResponse
from jambo_admin.services.permissions import ALL_ROLES

router = APIRouter(prefix="/api/transactions", tags=["transactions"])

_any_admin = require_role(ALL_ROLES)


def _mock_transactions() -> list:
    now = datetime.utcnow().isoformat()
    return [
        {
            "id": "1",
            "userId": "user-1",
            "type": "DEPOSIT",
            "amount": 50000,
            "currency": "RWF",
            "status": "COMPLETED",
            "createdAt": now,
            "user": {"firstName": "John", "lastName": "Doe", "email": "john@example.com"},
        },
        {
            "id": "2",
            "userId": "user-2",
            "type": "WITHDRAWAL",
            "amount": 20000,
            "currency": "RWF",
            "status": "COMPLETED",
            "createdAt": now,
            "user": {"firstName": "Jane", "lastName": "Smith", "email": "jane@example.com"},
        },
    ]


@router.get("", response_model=ApiResponse[dict])
def list_transactions(
    type: Optional[str] = Query(None),
    start_date: Optional[datetime] = Query(None, alias="startDate"),
    end_date: Optional[datetime] = Query(None, alias="endDate"),
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=100),
    _: AdminContext = Depends(_any_admin),
):
    """List transactions with optional filters (mock)."""
    transactions = _mock_transactions()
    return ApiResponse(data={
        "transactions": transactions,
        "total": len(transactions),
        "page": page,
        "limit": limit,
        "filters": {
            "type": type,
            "startDate": start_date.isoformat() if start_date else None,
            "endDate": end_date.isoformat() if end_date else None,
        },
        "mock": True,
    })


@router.get("/user/{user_id}", response_model=ApiResponse[dict])
def list_user_transactions(
    user_id: UUID,
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=100),
    _: AdminContext = Depends(_any_admin),
):
    """List one client user's transactions (mock)."""
    transactions = [
        {
            "id": "1",
            "userId": str(user_id),
            "type": "DEPOSIT",
            "amount": 50000,
            "currency": "RWF",
            "status": "COMPLETED",
            "createdAt": datetime.utcnow().isoformat(),
        }
    ]
    return ApiResponse(data={
        "transactions": transactions,
        "total": len(transactions),
        "page": page,
        "limit": limit,
        "userId": str(user_id),
        "mock": True,
    })


@router.get("/{transaction_id}", response_model=ApiResponse[dict])
def get_transaction(transaction_id: UUID, _: AdminContext = Depends(_any_admin)):
    """Get transaction details (mock)."""
    transaction = {
        "id": str(transaction_id),
        "userId": "user-1",
        "type": "DEPOSIT",
        "amount": 50000,
        "currency": "RWF",
        "status": "COMPLETED",
        "metadata": {"source": "Mobile Money", "reference": "MM123456"},
        "createdAt": datetime.utcnow().isoformat(),
        "user": {
            "id": "user-1",
            "firstName": "John",
            "lastName": "Doe",
            "email": "john@example.com",
            "phoneNumber": "+250788123456",
        },
    }
    return ApiResponse(data={"transaction": transaction, "mock": True})

"""Dashboard endpoints (mock payloads pending client integration)"""
from datetime import datetime, timedelta
from typing import Optional

from fastapi import APIRouter, Depends, Query

from jambo_admin.api.deps import AdminContext, require_role
from jambo_admin.schemas.common import ApiResponse
from jambo_admin.services.permissions import ADMIN_ROLES, ALL_ROLES

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])

# Amounts are in RWF
_STATS = {
    "users": {"total": 1250, "active": 987, "inactive": 263, "newThisMonth": 45},
    "savings": {
        "totalAccounts": 1100,
        "totalBalance": 125000000,
        "totalDeposits": 95000000,
        "totalWithdrawals": 25000000,
    },
    "credit": {
        "totalRequests": 450,
        "approved": 320,
        "rejected": 80,
        "pending": 50,
        "totalDisbursed": 85000000,
        "totalRepaid": 45000000,
        "outstandingBalance": 40000000,
    },
    "transactions": {"total": 5420, "thisMonth": 234, "volume": 210000000},
    "growth": {"usersGrowth": 12.5, "savingsGrowth": 18.3, "creditGrowth": 22.7},
}


@router.get("/stats", response_model=ApiResponse[dict])
def get_stats(_: AdminContext = Depends(require_role(ADMIN_ROLES))):
    """Platform statistics (mock)."""
    return ApiResponse(data={"stats": _STATS, "mock": True})


@router.get("/credit-requests", response_model=ApiResponse[dict])
def list_credit_requests(
    status: str = Query("PENDING"),
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=100),
    _: AdminContext = Depends(require_role(ADMIN_ROLES)),
):
    """Credit requests awaiting review (mock)."""
    now = datetime.utcnow().isoformat()
    credit_requests = [
        {
            "id": "1",
            "userId": "user-1",
            "amount": 100000,
            "currency": "RWF",
            "status": "PENDING",
            "creditScore": 720,
            "repaymentPeriod": 30,
            "purpose": "Business expansion",
            "createdAt": now,
            "user": {
                "firstName": "John",
                "lastName": "Doe",
                "email": "john@example.com",
                "phoneNumber": "+250788123456",
            },
        },
        {
            "id": "2",
            "userId": "user-2",
            "amount": 50000,
            "currency": "RWF",
            "status": "PENDING",
            "creditScore": 680,
            "repaymentPeriod": 15,
            "purpose": "Emergency",
            "createdAt": now,
            "user": {
                "firstName": "Jane",
                "lastName": "Smith",
                "email": "jane@example.com",
                "phoneNumber": "+250788654321",
            },
        },
    ]
    return ApiResponse(data={
        "creditRequests": credit_requests,
        "total": len(credit_requests),
        "page": page,
        "limit": limit,
        "status": status,
        "mock": True,
    })


@router.get("/recent-activity", response_model=ApiResponse[dict])
def recent_activity(
    limit: int = Query(10, ge=1, le=50),
    _: AdminContext = Depends(require_role(ALL_ROLES)),
):
    """Latest platform events (mock)."""
    now = datetime.utcnow().isoformat()
    activities = [
        {"id": "1", "type": "USER_REGISTRATION", "description": "New user registered",
         "userId": "user-1", "userName": "John Doe", "timestamp": now},
        {"id": "2", "type": "CREDIT_REQUEST", "description": "New credit request submitted",
         "userId": "user-2", "userName": "Jane Smith", "amount": 50000, "timestamp": now},
        {"id": "3", "type": "DEPOSIT", "description": "Deposit transaction completed",
         "userId": "user-3", "userName": "Bob Johnson", "amount": 25000, "timestamp": now},
    ]
    return ApiResponse(data={
        "activities": activities[:limit],
        "total": len(activities),
        "mock": True,
    })


@router.get("/analytics", response_model=ApiResponse[dict])
def analytics(
    start_date: Optional[datetime] = Query(None, alias="startDate"),
    end_date: Optional[datetime] = Query(None, alias="endDate"),
    _: AdminContext = Depends(require_role(ADMIN_ROLES)),
):
    """Time-series analytics (mock)."""
    end = end_date or datetime.utcnow()
    start = start_date or end - timedelta(days=30)
    days = ["2024-01-01", "2024-01-02", "2024-01-03"]

    def series(key, values):
        return [{"date": d, key: v} for d, v in zip(days, values)]

    return ApiResponse(data={
        "analytics": {
            "dateRange": {"start": start.isoformat(), "end": end.isoformat()},
            "userMetrics": {
                "registrations": series("count", [15, 20, 18]),
                "activeUsers": series("count", [850, 870, 887]),
            },
            "transactionMetrics": {
                "volume": series("amount", [5000000, 6500000, 7200000]),
                "count": series("count", [120, 145, 167]),
            },
            "creditMetrics": {
                "requests": series("count", [12, 15, 18]),
                "approvalRate": 71.5,
                "averageLoanSize": 95000,
                "defaultRate": 2.3,
            },
        },
        "mock": True,
    })

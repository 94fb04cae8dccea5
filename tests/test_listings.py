"""Tests for the role gates on admin management and the mock listing endpoints"""
import uuid

from fastapi.testclient import TestClient

from jambo_admin.models.admin import AdminStatus

USER_ID = str(uuid.uuid4())


# ---------------------------------------------------------------------------
# /api/admins (SUPER_ADMIN only)
# ---------------------------------------------------------------------------

def test_list_admins(client: TestClient, super_admin, make_admin, auth_headers):
    make_admin()
    response = client.get("/api/admins", headers=auth_headers(super_admin))
    assert response.status_code == 200

    emails = {a["email"] for a in response.json()["data"]}
    assert emails == {"admin@creditjambo.com", "testadmin@creditjambo.com"}


def test_list_admins_forbidden_for_admin(client: TestClient, make_admin, auth_headers):
    admin = make_admin()
    assert client.get("/api/admins", headers=auth_headers(admin)).status_code == 403


def test_suspend_admin_blocks_login(client: TestClient, super_admin, make_admin, auth_headers):
    admin = make_admin()

    response = client.patch(
        f"/api/admins/{admin.id}/status",
        json={"status": "SUSPENDED"},
        headers=auth_headers(super_admin),
    )
    assert response.status_code == 200
    assert response.json()["data"]["status"] == "SUSPENDED"

    login = client.post("/api/auth/login", json={"email": admin.email, "password": "Test@123"})
    assert login.status_code == 403


def test_cannot_change_own_status(client: TestClient, super_admin, auth_headers):
    response = client.patch(
        f"/api/admins/{super_admin.id}/status",
        json={"status": "INACTIVE"},
        headers=auth_headers(super_admin),
    )
    assert response.status_code == 400


def test_status_of_unknown_admin(client: TestClient, super_admin, auth_headers):
    response = client.patch(
        "/api/admins/does-not-exist/status",
        json={"status": AdminStatus.INACTIVE.value},
        headers=auth_headers(super_admin),
    )
    assert response.status_code == 404


# ---------------------------------------------------------------------------
# Dashboard (ADMIN_ROLES, recent activity open to SUPPORT)
# ---------------------------------------------------------------------------

def test_dashboard_stats(client: TestClient, make_admin, auth_headers):
    admin = make_admin()
    response = client.get("/api/dashboard/stats", headers=auth_headers(admin))
    assert response.status_code == 200

    data = response.json()["data"]
    assert data["mock"] is True
    assert data["stats"]["users"]["total"] == 1250


def test_dashboard_stats_forbidden_for_support(client: TestClient, support_admin, auth_headers):
    response = client.get("/api/dashboard/stats", headers=auth_headers(support_admin))
    assert response.status_code == 403


def test_dashboard_requires_token(client: TestClient):
    assert client.get("/api/dashboard/stats").status_code == 401


def test_recent_activity_for_support(client: TestClient, support_admin, auth_headers):
    response = client.get("/api/dashboard/recent-activity?limit=2", headers=auth_headers(support_admin))
    assert response.status_code == 200

    data = response.json()["data"]
    assert len(data["activities"]) == 2
    assert data["total"] == 3


def test_credit_requests_limit_is_validated(client: TestClient, make_admin, auth_headers):
    admin = make_admin()
    response = client.get("/api/dashboard/credit-requests?limit=500", headers=auth_headers(admin))
    assert response.status_code == 400


def test_analytics(client: TestClient, super_admin, auth_headers):
    response = client.get("/api/dashboard/analytics", headers=auth_headers(super_admin))
    assert response.status_code == 200
    assert response.json()["data"]["analytics"]["creditMetrics"]["approvalRate"] == 71.5


# ---------------------------------------------------------------------------
# Transactions (ALL_ROLES)
# ---------------------------------------------------------------------------

def test_transactions_for_support(client: TestClient, support_admin, auth_headers):
    response = client.get("/api/transactions?page=2&limit=5", headers=auth_headers(support_admin))
    assert response.status_code == 200

    data = response.json()["data"]
    assert data["page"] == 2
    assert data["limit"] == 5
    assert len(data["transactions"]) == 2


def test_transaction_detail(client: TestClient, make_admin, auth_headers):
    admin = make_admin()
    tx_id = str(uuid.uuid4())
    response = client.get(f"/api/transactions/{tx_id}", headers=auth_headers(admin))
    assert response.status_code == 200
    assert response.json()["data"]["transaction"]["id"] == tx_id


def test_transaction_detail_rejects_bad_id(client: TestClient, make_admin, auth_headers):
    admin = make_admin()
    response = client.get("/api/transactions/not-a-uuid", headers=auth_headers(admin))
    assert response.status_code == 400


def test_user_transactions(client: TestClient, make_admin, auth_headers):
    admin = make_admin()
    response = client.get(f"/api/transactions/user/{USER_ID}", headers=auth_headers(admin))
    assert response.status_code == 200
    assert response.json()["data"]["userId"] == USER_ID


# ---------------------------------------------------------------------------
# Client users
# ---------------------------------------------------------------------------

def test_list_users_any_admin(client: TestClient, support_admin, auth_headers):
    response = client.get("/api/users", headers=auth_headers(support_admin))
    assert response.status_code == 200
    assert response.json()["data"]["total"] == 1


def test_activate_user_requires_admin_role(client: TestClient, support_admin, auth_headers):
    response = client.put(
        f"/api/users/{USER_ID}/activate",
        json={"isActive": False},
        headers=auth_headers(support_admin),
    )
    assert response.status_code == 403


def test_activate_user(client: TestClient, make_admin, auth_headers):
    admin = make_admin()
    response = client.put(
        f"/api/users/{USER_ID}/activate",
        json={"isActive": False},
        headers=auth_headers(admin),
    )
    assert response.status_code == 200

    body = response.json()
    assert body["message"] == "User deactivated successfully"
    assert body["data"]["user"] == {"id": USER_ID, "isActive": False}


def test_approve_device(client: TestClient, super_admin, auth_headers):
    response = client.put(
        f"/api/users/{USER_ID}/devices/dev-1/approve",
        json={"isApproved": True},
        headers=auth_headers(super_admin),
    )
    assert response.status_code == 200
    assert response.json()["data"]["deviceId"] == "dev-1"
